# domain/steps/prompt.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from domain.steps.base import Step


@dataclass(frozen=True)
class GuideStep(Step):
    """Prints instructions and waits until the user acknowledges them."""
    lines: List[str] = field(default_factory=list)
    acknowledge: str = "Press Enter to continue"


@dataclass(frozen=True)
class ConfirmStep(Step):
    question: str = ""
    accepted_token: str = "yes"
    abort_on_decline: bool = True
    when_state: Optional[str] = None  # only ask when ctx.state[when_state] is truthy
    state_key: str = "confirmed"


@dataclass(frozen=True)
class PromptUrlStep(Step):
    question: str = "Repository URL"
    max_attempts: int = 3
    state_key: str = "remote_url"
