# domain/steps/venv.py
from __future__ import annotations

from dataclasses import dataclass

from domain.steps.base import Step


@dataclass(frozen=True)
class CreateVenvStep(Step):
    path: str = ".venv"
    python: str = "python3"


@dataclass(frozen=True)
class ActivationHintStep(Step):
    path: str = ".venv"
    windows: bool = False

    def activation_command(self) -> str:
        if self.windows:
            return f"{self.path}\\Scripts\\activate"
        return f"source {self.path}/bin/activate"
