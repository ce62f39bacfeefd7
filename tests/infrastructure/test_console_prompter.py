# tests/infrastructure/test_console_prompter.py
import pytest

from domain.exceptions import UserAborted
from infrastructure.prompt.console_prompter import ConsolePrompter


def test_ask_appends_colon():
    seen = []
    prompter = ConsolePrompter(read=lambda q: seen.append(q) or "answer")

    assert prompter.ask("Repository URL") == "answer"
    assert seen == ["Repository URL: "]


def test_confirm_requires_exact_token():
    assert ConsolePrompter(read=lambda q: "yes").confirm("Remove?") is True
    assert ConsolePrompter(read=lambda q: "Yes").confirm("Remove?") is False
    assert ConsolePrompter(read=lambda q: "y").confirm("Remove?") is False


def test_closed_input_aborts():
    def closed(question):
        raise EOFError

    with pytest.raises(UserAborted):
        ConsolePrompter(read=closed).ask("Remove?")
