# tests/application/test_outcome.py
import pytest

from application.outcome import StepOutcome
from domain.exceptions import PreconditionError


class TestStepOutcome:
    def test_success_without_message(self):
        outcome = StepOutcome.success()
        assert outcome.ok is True
        assert outcome.message is None
        assert outcome.error is None
        assert outcome.error_message is None

    def test_success_with_message(self):
        outcome = StepOutcome.success("created .venv")
        assert outcome.ok is True
        assert outcome.message == "created .venv"

    def test_failure_carries_error(self):
        error = PreconditionError("not a git repository")
        outcome = StepOutcome.failure(error)
        assert outcome.ok is False
        assert outcome.error is error
        assert outcome.error_message == "not a git repository"
        assert outcome.error_kind == "PreconditionError"

    def test_outcome_frozen(self):
        outcome = StepOutcome.success()
        with pytest.raises(Exception):  # FrozenInstanceError
            outcome.ok = False
