# application/handlers/repo_handler.py
from __future__ import annotations

from application.handlers.base import StepHandler
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from application.services.git_commands import git
from domain.command import COMMAND_NOT_FOUND
from domain.context import WorkflowContext
from domain.exceptions import PreconditionError
from domain.steps.git import EnsureRepoStep


class EnsureRepoStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, EnsureRepoStep)

    def handle(self, step: EnsureRepoStep, ctx: WorkflowContext, deps: ExecutionDeps) -> StepOutcome:
        if not ctx.working_dir.is_dir():
            raise PreconditionError(f"Directory not found: {ctx.working_dir}")

        result = deps.runner.run(git(ctx, "rev-parse", "--is-inside-work-tree"))
        if result.exit_code == COMMAND_NOT_FOUND:
            raise PreconditionError("git is not installed or not on PATH")
        if result.ok and result.stdout.strip() == "true":
            return StepOutcome.success("already a git repository")
        if result.ok:
            # inside .git or a bare repository
            raise PreconditionError(f"{ctx.working_dir} is inside a git directory, not a work tree")

        if not step.init_if_missing:
            raise PreconditionError(f"{ctx.working_dir} is not a git repository")

        deps.runner.run_checked(git(ctx, "init"))
        if step.initial_branch:
            deps.runner.run_checked(git(ctx, "checkout", "-b", step.initial_branch))
        deps.logger.info("repo.initialized", path=str(ctx.working_dir), message=f"Initialized git repository in {ctx.working_dir}")
        return StepOutcome.success("initialized git repository")
