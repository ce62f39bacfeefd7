# application/handlers/remote_handler.py
from __future__ import annotations

from application.handlers.base import StepHandler
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from application.services.git_commands import git
from domain.command import COMMAND_NOT_FOUND
from domain.context import WorkflowContext
from domain.exceptions import ExternalToolError, PostconditionError, PreconditionError
from domain.steps.git import (
    AddRemoteStep,
    CheckRemoteStep,
    PushStep,
    RemoveRemoteStep,
    VerifyRemoteStep,
)


class CheckRemoteStepHandler(StepHandler):
    """Publishes remote_exists / existing_remote_url for the steps that follow."""

    def supports(self, step) -> bool:
        return isinstance(step, CheckRemoteStep)

    def handle(self, step: CheckRemoteStep, ctx: WorkflowContext, deps: ExecutionDeps) -> StepOutcome:
        command = git(ctx, "remote", "get-url", step.remote)
        result = deps.runner.run(command)
        if result.exit_code == COMMAND_NOT_FOUND:
            raise ExternalToolError(command.argv, result.exit_code, result.stderr)

        exists = result.ok
        ctx.state["remote_exists"] = exists
        ctx.state["existing_remote_url"] = result.stdout.strip() if exists else None

        if exists:
            deps.logger.warning(
                "remote.exists",
                remote=step.remote,
                url=ctx.state["existing_remote_url"],
                message=f"Remote '{step.remote}' already points to {ctx.state['existing_remote_url']}",
            )
            return StepOutcome.success(f"'{step.remote}' exists")
        return StepOutcome.success(f"'{step.remote}' not configured")


class RemoveRemoteStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, RemoveRemoteStep)

    def handle(self, step: RemoveRemoteStep, ctx: WorkflowContext, deps: ExecutionDeps) -> StepOutcome:
        if not ctx.state.get(step.confirmed_by):
            return StepOutcome.success("skipped; removal not confirmed")

        deps.runner.run_checked(git(ctx, "remote", "remove", step.remote))
        deps.logger.info("remote.removed", remote=step.remote, message=f"Removed remote '{step.remote}'")
        return StepOutcome.success(f"removed '{step.remote}'")


class AddRemoteStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, AddRemoteStep)

    def handle(self, step: AddRemoteStep, ctx: WorkflowContext, deps: ExecutionDeps) -> StepOutcome:
        url = ctx.state.get(step.url_from)
        if not url:
            raise PreconditionError(f"No repository URL available (state key '{step.url_from}')")

        deps.runner.run_checked(git(ctx, "remote", "add", step.remote, url))
        deps.logger.info("remote.added", remote=step.remote, url=url, message=f"Added remote '{step.remote}' -> {url}")
        return StepOutcome.success(url)


class VerifyRemoteStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, VerifyRemoteStep)

    def handle(self, step: VerifyRemoteStep, ctx: WorkflowContext, deps: ExecutionDeps) -> StepOutcome:
        expected = ctx.state.get(step.url_from)
        # the stored value; get-url would apply url.<base>.insteadOf rewriting
        command = git(ctx, "config", "--get", f"remote.{step.remote}.url")
        result = deps.runner.run(command)
        # exit 1: key not set
        if result.exit_code not in (0, 1):
            raise ExternalToolError(command.argv, result.exit_code, result.stderr)
        actual = result.stdout.strip()
        if actual != expected:
            raise PostconditionError(
                f"Remote '{step.remote}' points to {actual or '<nothing>'}, expected {expected}"
            )
        return StepOutcome.success(actual)


class PushStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, PushStep)

    def handle(self, step: PushStep, ctx: WorkflowContext, deps: ExecutionDeps) -> StepOutcome:
        deps.logger.info(
            "push.start",
            remote=step.remote,
            branch=step.branch,
            message=f"Pushing '{step.branch}' to '{step.remote}' (authentication may open a browser)",
        )
        deps.runner.run_checked(git(ctx, "push", "-u", step.remote, step.branch))
        return StepOutcome.success(f"pushed '{step.branch}'")
