# application/workflows/remote_setup.py
"""
Guided GitHub remote setup.

Every step depends on the previous one, so any failure halts the run.
"""
from __future__ import annotations

from typing import List

from domain.config import BootstrapConfig
from domain.remote_url import GITHUB_PREFIX, GIT_SUFFIX
from domain.steps.base import Step
from domain.steps.git import (
    AddRemoteStep,
    CheckRemoteStep,
    EnsureRepoStep,
    PushStep,
    RemoveRemoteStep,
    VerifyRemoteStep,
)
from domain.steps.prompt import ConfirmStep, GuideStep, PromptUrlStep

GUIDE_LINES = [
    "Create the repository on GitHub before continuing:",
    "  1. Open https://github.com/new",
    "  2. Choose the owner and repository name",
    "  3. Leave 'Add a README', '.gitignore' and 'license' unchecked",
    "  4. Click 'Create repository' and copy the HTTPS clone URL",
]


def build_remote_setup_steps(config: BootstrapConfig) -> List[Step]:
    remote = config.remote_name
    return [
        EnsureRepoStep("ensure-repo"),
        GuideStep("guide-create-repo", lines=GUIDE_LINES, acknowledge="Press Enter once the repository exists"),
        CheckRemoteStep("check-remote", remote=remote),
        ConfirmStep(
            "confirm-removal",
            question=f"Remote '{remote}' already exists. Remove it?",
            accepted_token=config.accepted_token,
            abort_on_decline=True,
            when_state="remote_exists",
            state_key="remove_confirmed",
        ),
        RemoveRemoteStep("remove-remote", remote=remote, confirmed_by="remove_confirmed"),
        PromptUrlStep(
            "prompt-url",
            question=f"Repository URL ({GITHUB_PREFIX}<owner>/<repo>{GIT_SUFFIX})",
            max_attempts=config.url_attempts,
            state_key="remote_url",
        ),
        AddRemoteStep("add-remote", remote=remote, url_from="remote_url"),
        VerifyRemoteStep("verify-remote", remote=remote, url_from="remote_url"),
        PushStep("push", remote=remote, branch=config.branch),
    ]
