# application/executor/step_executor.py
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional
import time
import uuid

from application.executor.handler_registry import HandlerRegistry
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from domain.context import WorkflowContext
from domain.exceptions import BootstrapError, UserAborted
from domain.steps.base import Step


class WorkflowStatus(str, Enum):
    ALL_SUCCEEDED = "all_succeeded"
    HALTED = "halted"
    COMPLETED_WITH_WARNINGS = "completed_with_warnings"


@dataclass(frozen=True)
class ExecutionResult:
    status: WorkflowStatus
    outcomes: Mapping[str, StepOutcome] = field(default_factory=lambda: MappingProxyType({}))
    halted_step: Optional[str] = None
    halt_error: Optional[BootstrapError] = None

    @property
    def ok(self) -> bool:
        return self.status != WorkflowStatus.HALTED

    @property
    def failed_steps(self) -> List[str]:
        return [name for name, outcome in self.outcomes.items() if not outcome.ok]

    @property
    def exit_code(self) -> int:
        if self.status != WorkflowStatus.HALTED:
            return 0
        # a declined confirmation is the user's choice, not a failure
        return 0 if isinstance(self.halt_error, UserAborted) else 1


class StepExecutor:
    def __init__(self, registry: HandlerRegistry):
        self._registry = registry

    def execute(self, steps: List[Step], ctx: WorkflowContext, deps: ExecutionDeps) -> ExecutionResult:
        self._check_unique_names(steps)
        self._registry.check_covers(steps)

        if not ctx.run_id:
            ctx.run_id = uuid.uuid4().hex
        deps = deps.with_logger(deps.logger.bind(run_id=ctx.run_id))

        outcomes: Dict[str, StepOutcome] = {}

        for step in steps:
            if step.enabled is False:
                deps.logger.debug("step.skipped", step=step.name)
                continue

            outcome = self._execute_step(step, ctx, deps)
            outcomes[step.name] = outcome

            if outcome.ok:
                deps.logger.info(
                    "step.end",
                    step=step.name,
                    status="Success",
                    message=f"{step.name}: Success" + (f" ({outcome.message})" if outcome.message else ""),
                )
                continue

            deps.logger.error(
                "step.end",
                step=step.name,
                status="Failed",
                error_kind=outcome.error_kind,
                message=f"{step.name}: Failed ({outcome.error_message})",
            )

            if self._should_halt(step, outcome):
                deps.logger.error(
                    "workflow.halted",
                    step=step.name,
                    error_kind=outcome.error_kind,
                    message=f"Stopped at '{step.name}': {outcome.error_message}",
                )
                return ExecutionResult(
                    status=WorkflowStatus.HALTED,
                    outcomes=MappingProxyType(outcomes),
                    halted_step=step.name,
                    halt_error=outcome.error,
                )

        failed = [name for name, outcome in outcomes.items() if not outcome.ok]
        if failed:
            deps.logger.warning(
                "workflow.completed_with_warnings",
                failed_steps=failed,
                message=f"Completed with warnings; failed steps: {', '.join(failed)}",
            )
            return ExecutionResult(
                status=WorkflowStatus.COMPLETED_WITH_WARNINGS,
                outcomes=MappingProxyType(outcomes),
            )

        deps.logger.info("workflow.completed", message="All steps succeeded")
        return ExecutionResult(status=WorkflowStatus.ALL_SUCCEEDED, outcomes=MappingProxyType(outcomes))

    def _execute_step(self, step: Step, ctx: WorkflowContext, deps: ExecutionDeps) -> StepOutcome:
        handler = self._registry.get_handler(step)

        deps.logger.debug("step.start", step=step.name, step_type=type(step).__name__)
        t0 = time.perf_counter()

        try:
            outcome = handler.handle(step, ctx, deps)
        except BootstrapError as exc:
            outcome = StepOutcome.failure(exc)

        deps.logger.debug(
            "step.elapsed",
            step=step.name,
            elapsed_ms=int((time.perf_counter() - t0) * 1000),
        )

        if outcome is None:
            raise RuntimeError(
                f"Handler returned None: handler={type(handler).__name__}, step={step.name} ({type(step).__name__})"
            )
        return outcome

    def _should_halt(self, step: Step, outcome: StepOutcome) -> bool:
        if isinstance(outcome.error, UserAborted):
            abort_on_decline = getattr(step, "abort_on_decline", None)
            if abort_on_decline is not None:
                return bool(abort_on_decline)
        return not step.continue_on_failure

    def _check_unique_names(self, steps: List[Step]) -> None:
        duplicates = sorted(name for name, count in Counter(s.name for s in steps).items() if count > 1)
        if duplicates:
            raise ValueError(f"Duplicate step names: {', '.join(duplicates)}")
