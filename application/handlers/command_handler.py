# application/handlers/command_handler.py
from __future__ import annotations

import shutil
from typing import Callable, Optional

from application.handlers.base import StepHandler
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from domain.command import ExternalCommand
from domain.context import WorkflowContext
from domain.exceptions import PreconditionError
from domain.steps.command import CommandStep, RequireToolStep


class CommandStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, CommandStep)

    def handle(self, step: CommandStep, ctx: WorkflowContext, deps: ExecutionDeps) -> StepOutcome:
        if step.skip_unless_exists and not (ctx.working_dir / step.skip_unless_exists).exists():
            return StepOutcome.success(f"skipped; {step.skip_unless_exists} not found")

        command = ExternalCommand(program=step.program, args=list(step.args), cwd=ctx.working_dir)
        deps.logger.debug("command.run", step=step.name, argv=command.argv)
        result = deps.runner.run_checked(command)
        if result.stdout.strip():
            deps.logger.debug("command.output", step=step.name, stdout=result.stdout)
        return StepOutcome.success(step.success_message)


class RequireToolStepHandler(StepHandler):
    def __init__(self, which: Callable[[str], Optional[str]] = shutil.which):
        self._which = which

    def supports(self, step) -> bool:
        return isinstance(step, RequireToolStep)

    def handle(self, step: RequireToolStep, ctx: WorkflowContext, deps: ExecutionDeps) -> StepOutcome:
        location = self._which(step.program)
        if location is None:
            hint = f" ({step.hint})" if step.hint else ""
            raise PreconditionError(f"Required tool not found: {step.program}{hint}")
        return StepOutcome.success(location)
