# domain/steps/baseline.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from domain.steps.base import Step


@dataclass(frozen=True)
class RemoveFileStep(Step):
    path: str


@dataclass(frozen=True)
class GenerateBaselineStep(Step):
    path: str = ".secrets.baseline"
    scanner: str = "detect-secrets"
    exclude_files: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ValidateBaselineStep(Step):
    path: str = ".secrets.baseline"
    required_keys: List[str] = field(default_factory=lambda: ["version", "results"])


@dataclass(frozen=True)
class HookSelfTestStep(Step):
    """batch_size: tracked files per hook invocation, keeping command lines short."""
    path: str = ".secrets.baseline"
    hook: str = "detect-secrets-hook"
    batch_size: int = 200
