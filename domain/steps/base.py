# domain/steps/base.py
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Step:
    name: str
    enabled: bool = field(default=True, kw_only=True)
    continue_on_failure: bool = field(default=False, kw_only=True)
