# tests/application/handlers/test_remote_handler.py
import pytest

from application.handlers.remote_handler import (
    AddRemoteStepHandler,
    CheckRemoteStepHandler,
    PushStepHandler,
    RemoveRemoteStepHandler,
    VerifyRemoteStepHandler,
)
from domain.exceptions import ExternalToolError, PostconditionError, PreconditionError
from domain.steps.git import (
    AddRemoteStep,
    CheckRemoteStep,
    PushStep,
    RemoveRemoteStep,
    VerifyRemoteStep,
)

URL = "https://github.com/alice/proj.git"


class TestCheckRemote:
    def test_existing_remote_is_published(self, ctx, deps, runner, logger):
        runner.on("git remote get-url origin", stdout=URL + "\n")

        outcome = CheckRemoteStepHandler().handle(CheckRemoteStep("check-remote"), ctx, deps)

        assert outcome.ok is True
        assert ctx.state["remote_exists"] is True
        assert ctx.state["existing_remote_url"] == URL
        assert "remote.exists" in logger.events()

    def test_absent_remote_is_not_a_failure(self, ctx, deps, runner):
        runner.on("git remote get-url origin", exit_code=2, stderr="error: No such remote 'origin'")

        outcome = CheckRemoteStepHandler().handle(CheckRemoteStep("check-remote"), ctx, deps)

        assert outcome.ok is True
        assert ctx.state["remote_exists"] is False
        assert ctx.state["existing_remote_url"] is None

    def test_missing_git_is_an_error(self, ctx, deps, runner):
        runner.on("git remote get-url origin", exit_code=127)

        with pytest.raises(ExternalToolError):
            CheckRemoteStepHandler().handle(CheckRemoteStep("check-remote"), ctx, deps)


class TestRemoveRemote:
    def test_skips_without_confirmation(self, ctx, deps, runner):
        outcome = RemoveRemoteStepHandler().handle(RemoveRemoteStep("remove-remote"), ctx, deps)

        assert outcome.ok is True
        assert "skipped" in outcome.message
        assert runner.commands == []

    def test_removes_after_confirmation(self, ctx, deps, runner):
        ctx.state["remove_confirmed"] = True

        outcome = RemoveRemoteStepHandler().handle(RemoveRemoteStep("remove-remote"), ctx, deps)

        assert outcome.ok is True
        assert runner.commands == ["git remote remove origin"]


class TestAddAndVerifyRemote:
    def test_add_uses_url_from_state(self, ctx, deps, runner):
        ctx.state["remote_url"] = URL

        outcome = AddRemoteStepHandler().handle(AddRemoteStep("add-remote"), ctx, deps)

        assert outcome.ok is True
        assert runner.commands == [f"git remote add origin {URL}"]

    def test_add_without_url_is_a_precondition_error(self, ctx, deps, runner):
        with pytest.raises(PreconditionError):
            AddRemoteStepHandler().handle(AddRemoteStep("add-remote"), ctx, deps)
        assert runner.commands == []

    def test_add_failure_raises_external_tool_error(self, ctx, deps, runner):
        ctx.state["remote_url"] = URL
        runner.on(f"git remote add origin {URL}", exit_code=3, stderr="error: remote origin already exists.")

        with pytest.raises(ExternalToolError, match="already exists"):
            AddRemoteStepHandler().handle(AddRemoteStep("add-remote"), ctx, deps)

    def test_verify_matches(self, ctx, deps, runner):
        ctx.state["remote_url"] = URL
        runner.on("git config --get remote.origin.url", stdout=URL + "\n")

        outcome = VerifyRemoteStepHandler().handle(VerifyRemoteStep("verify-remote"), ctx, deps)

        assert outcome.ok is True
        assert runner.commands == ["git config --get remote.origin.url"]

    def test_verify_ignores_insteadof_rewriting(self, ctx, deps, runner):
        ctx.state["remote_url"] = URL
        runner.on("git remote get-url origin", stdout="git@github.com:alice/proj.git\n")
        runner.on("git config --get remote.origin.url", stdout=URL + "\n")

        outcome = VerifyRemoteStepHandler().handle(VerifyRemoteStep("verify-remote"), ctx, deps)

        assert outcome.message == URL

    def test_verify_mismatch_raises_postcondition_error(self, ctx, deps, runner):
        ctx.state["remote_url"] = URL
        runner.on("git config --get remote.origin.url", stdout="https://github.com/bob/other.git\n")

        with pytest.raises(PostconditionError, match="expected"):
            VerifyRemoteStepHandler().handle(VerifyRemoteStep("verify-remote"), ctx, deps)

    def test_verify_missing_remote_raises_postcondition_error(self, ctx, deps, runner):
        ctx.state["remote_url"] = URL
        runner.on("git config --get remote.origin.url", exit_code=1)

        with pytest.raises(PostconditionError, match="<nothing>"):
            VerifyRemoteStepHandler().handle(VerifyRemoteStep("verify-remote"), ctx, deps)

    def test_verify_git_failure_raises_external_tool_error(self, ctx, deps, runner):
        ctx.state["remote_url"] = URL
        runner.on("git config --get remote.origin.url", exit_code=128, stderr="fatal: not in a git directory")

        with pytest.raises(ExternalToolError, match="not in a git directory"):
            VerifyRemoteStepHandler().handle(VerifyRemoteStep("verify-remote"), ctx, deps)


def test_push_sets_upstream(ctx, deps, runner):
    outcome = PushStepHandler().handle(PushStep("push", branch="trunk"), ctx, deps)

    assert outcome.ok is True
    assert runner.commands == ["git push -u origin trunk"]
