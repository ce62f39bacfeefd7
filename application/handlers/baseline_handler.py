# application/handlers/baseline_handler.py
from __future__ import annotations

import json

from application.handlers.base import StepHandler
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from application.services.git_commands import git
from domain.command import ExternalCommand
from domain.context import WorkflowContext
from domain.exceptions import PostconditionError
from domain.steps.baseline import (
    GenerateBaselineStep,
    HookSelfTestStep,
    RemoveFileStep,
    ValidateBaselineStep,
)


class RemoveFileStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, RemoveFileStep)

    def handle(self, step: RemoveFileStep, ctx: WorkflowContext, deps: ExecutionDeps) -> StepOutcome:
        target = ctx.working_dir / step.path
        if not target.exists():
            return StepOutcome.success("not present")
        target.unlink()
        deps.logger.debug("file.removed", path=str(target))
        return StepOutcome.success(f"removed {step.path}")


class GenerateBaselineStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, GenerateBaselineStep)

    def handle(self, step: GenerateBaselineStep, ctx: WorkflowContext, deps: ExecutionDeps) -> StepOutcome:
        args = ["scan"]
        for pattern in step.exclude_files:
            args += ["--exclude-files", pattern]

        result = deps.runner.run_checked(
            ExternalCommand(program=step.scanner, args=args, cwd=ctx.working_dir)
        )
        target = ctx.working_dir / step.path
        target.write_text(result.stdout, encoding="utf-8")
        deps.logger.debug("baseline.written", path=str(target), size=len(result.stdout))
        return StepOutcome.success(f"wrote {step.path}")


class ValidateBaselineStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, ValidateBaselineStep)

    def handle(self, step: ValidateBaselineStep, ctx: WorkflowContext, deps: ExecutionDeps) -> StepOutcome:
        target = ctx.working_dir / step.path
        if not target.is_file():
            raise PostconditionError(f"Baseline file missing: {step.path}")

        try:
            data = json.loads(target.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise PostconditionError(f"Baseline file is not valid JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise PostconditionError("Baseline file must contain a JSON object")

        missing = [key for key in step.required_keys if key not in data]
        if missing:
            raise PostconditionError(f"Baseline file lacks keys: {', '.join(missing)}")

        results = data.get("results") or {}
        findings = sum(len(v) for v in results.values()) if isinstance(results, dict) else 0
        return StepOutcome.success(f"{findings} finding(s) recorded")


class HookSelfTestStepHandler(StepHandler):
    """Runs the pre-commit hook against every tracked file with the new baseline."""

    def supports(self, step) -> bool:
        return isinstance(step, HookSelfTestStep)

    def handle(self, step: HookSelfTestStep, ctx: WorkflowContext, deps: ExecutionDeps) -> StepOutcome:
        tracked = deps.runner.run_checked(git(ctx, "ls-files")).stdout.splitlines()
        files = [f for f in tracked if f.strip()]
        if not files:
            return StepOutcome.success("no tracked files")

        size = max(step.batch_size, 1)
        for start in range(0, len(files), size):
            deps.runner.run_checked(
                ExternalCommand(
                    program=step.hook,
                    args=["--baseline", step.path, *files[start:start + size]],
                    cwd=ctx.working_dir,
                )
            )
        return StepOutcome.success(f"{len(files)} file(s) clean")
