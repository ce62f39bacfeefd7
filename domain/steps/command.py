# domain/steps/command.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from domain.steps.base import Step


@dataclass(frozen=True)
class CommandStep(Step):
    """
    Runs one external command and maps its exit code to the outcome.

    skip_unless_exists: path relative to the working directory; the step is
    skipped (and succeeds) when it is absent, e.g. a missing requirements.txt.
    """
    program: str
    args: List[str] = field(default_factory=list)
    success_message: Optional[str] = None
    skip_unless_exists: Optional[str] = None


@dataclass(frozen=True)
class RequireToolStep(Step):
    program: str
    hint: str = ""
