# application/handlers/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from application.outcome import StepOutcome
from domain.steps.base import Step

if TYPE_CHECKING:
    from domain.context import WorkflowContext
    from application.services.execution_deps import ExecutionDeps


class StepHandler(ABC):
    """
    Runs one kind of step.

    `handle` returns a success outcome or raises a `BootstrapError`; the
    executor turns the error into a failed outcome. Facts later steps need
    are written to `ctx.state`.
    """

    @abstractmethod
    def supports(self, step: Step) -> bool: ...

    @abstractmethod
    def handle(self, step: Step, ctx: "WorkflowContext", deps: "ExecutionDeps") -> StepOutcome: ...
