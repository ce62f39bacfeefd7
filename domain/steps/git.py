# domain/steps/git.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from domain.steps.base import Step


@dataclass(frozen=True)
class EnsureRepoStep(Step):
    init_if_missing: bool = False
    initial_branch: Optional[str] = None


@dataclass(frozen=True)
class CheckRemoteStep(Step):
    remote: str = "origin"


@dataclass(frozen=True)
class RemoveRemoteStep(Step):
    remote: str = "origin"
    confirmed_by: str = "remove_confirmed"  # state key set by a ConfirmStep


@dataclass(frozen=True)
class AddRemoteStep(Step):
    remote: str = "origin"
    url_from: str = "remote_url"


@dataclass(frozen=True)
class VerifyRemoteStep(Step):
    remote: str = "origin"
    url_from: str = "remote_url"


@dataclass(frozen=True)
class PushStep(Step):
    remote: str = "origin"
    branch: str = "main"
