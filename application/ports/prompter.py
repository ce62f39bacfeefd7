# application/ports/prompter.py
from __future__ import annotations

from abc import ABC, abstractmethod


class PrompterPort(ABC):
    @abstractmethod
    def ask(self, question: str) -> str:
        ...

    def confirm(self, question: str, accepted_token: str = "yes") -> bool:
        # exact, case-sensitive match; "Yes", "y" and "" all decline
        return self.ask(f"{question} [{accepted_token}/N]") == accepted_token
