# infrastructure/prompt/console_prompter.py
from __future__ import annotations

from typing import Callable

from application.ports.prompter import PrompterPort
from domain.exceptions import UserAborted


class ConsolePrompter(PrompterPort):
    def __init__(self, read: Callable[[str], str] = input):
        self._read = read

    def ask(self, question: str) -> str:
        try:
            return self._read(f"{question}: ")
        except EOFError as exc:
            raise UserAborted("Input closed before an answer was given") from exc
