# application/outcome.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from domain.exceptions import BootstrapError


@dataclass(frozen=True)
class StepOutcome:
    ok: bool
    message: Optional[str] = None
    error: Optional[BootstrapError] = None

    @classmethod
    def success(cls, message: Optional[str] = None) -> "StepOutcome":
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, error: BootstrapError) -> "StepOutcome":
        return cls(ok=False, error=error)

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None

    @property
    def error_kind(self) -> Optional[str]:
        return type(self.error).__name__ if self.error is not None else None
