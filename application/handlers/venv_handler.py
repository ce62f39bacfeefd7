# application/handlers/venv_handler.py
from __future__ import annotations

import shutil
from pathlib import Path
from typing import Callable, Optional

from application.handlers.base import StepHandler
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from domain.command import ExternalCommand
from domain.context import WorkflowContext
from domain.exceptions import PreconditionError
from domain.steps.venv import ActivationHintStep, CreateVenvStep


class CreateVenvStepHandler(StepHandler):
    def __init__(self, which: Callable[[str], Optional[str]] = shutil.which):
        self._which = which

    def supports(self, step) -> bool:
        return isinstance(step, CreateVenvStep)

    def handle(self, step: CreateVenvStep, ctx: WorkflowContext, deps: ExecutionDeps) -> StepOutcome:
        if not Path(step.python).is_file() and self._which(step.python) is None:
            raise PreconditionError(f"Python interpreter not found: {step.python}")

        venv_dir = ctx.working_dir / step.path
        if (venv_dir / "pyvenv.cfg").is_file():
            return StepOutcome.success(f"{step.path} already exists")

        deps.runner.run_checked(
            ExternalCommand(program=step.python, args=["-m", "venv", str(venv_dir)], cwd=ctx.working_dir)
        )
        deps.logger.info("venv.created", path=str(venv_dir), message=f"Created virtual environment in {venv_dir}")
        return StepOutcome.success(f"created {step.path}")


class ActivationHintStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, ActivationHintStep)

    def handle(self, step: ActivationHintStep, ctx: WorkflowContext, deps: ExecutionDeps) -> StepOutcome:
        command = step.activation_command()
        deps.logger.info("venv.activate_hint", command=command, message=f"Activate it with: {command}")
        return StepOutcome.success(command)
