# application/handlers/prompt_handler.py
from __future__ import annotations

from typing import Optional

from application.handlers.base import StepHandler
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from domain.context import WorkflowContext
from domain.exceptions import UserAborted, ValidationError
from domain.remote_url import RemoteUrl
from domain.steps.prompt import ConfirmStep, GuideStep, PromptUrlStep


class GuideStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, GuideStep)

    def handle(self, step: GuideStep, ctx: WorkflowContext, deps: ExecutionDeps) -> StepOutcome:
        for line in step.lines:
            deps.logger.info("guide", message=line)
        deps.prompter.ask(step.acknowledge)
        return StepOutcome.success()


class ConfirmStepHandler(StepHandler):
    """
    Gate in front of a destructive step.

    Only the exact accepted token confirms. The result is published under
    step.state_key so the destructive step can check it.
    """

    def supports(self, step) -> bool:
        return isinstance(step, ConfirmStep)

    def handle(self, step: ConfirmStep, ctx: WorkflowContext, deps: ExecutionDeps) -> StepOutcome:
        if step.when_state and not ctx.state.get(step.when_state):
            return StepOutcome.success("nothing to confirm")

        confirmed = deps.prompter.confirm(step.question, step.accepted_token)
        ctx.state[step.state_key] = confirmed
        if not confirmed:
            raise UserAborted(f"Declined: {step.question}")
        return StepOutcome.success("confirmed")


class PromptUrlStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, PromptUrlStep)

    def handle(self, step: PromptUrlStep, ctx: WorkflowContext, deps: ExecutionDeps) -> StepOutcome:
        last_error: Optional[ValidationError] = None
        for attempt in range(1, max(step.max_attempts, 1) + 1):
            answer = deps.prompter.ask(step.question).strip()
            try:
                url = RemoteUrl(answer)
            except ValidationError as exc:
                last_error = exc
                deps.logger.warning(
                    "remote_url.rejected",
                    attempt=attempt,
                    max_attempts=step.max_attempts,
                    message=str(exc),
                )
                continue
            ctx.state[step.state_key] = url.value
            deps.logger.info(
                "remote_url.accepted",
                owner=url.owner,
                repo=url.repo,
                message=f"Using repository {url.owner}/{url.repo}",
            )
            return StepOutcome.success(url.value)

        raise last_error or ValidationError("No repository URL given")
