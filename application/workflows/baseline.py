# application/workflows/baseline.py
from __future__ import annotations

from typing import List

from domain.config import BootstrapConfig
from domain.steps.base import Step
from domain.steps.baseline import (
    GenerateBaselineStep,
    HookSelfTestStep,
    RemoveFileStep,
    ValidateBaselineStep,
)
from domain.steps.command import RequireToolStep
from domain.steps.git import EnsureRepoStep


def build_baseline_steps(config: BootstrapConfig) -> List[Step]:
    path = config.baseline_path
    return [
        EnsureRepoStep("ensure-repo"),
        RequireToolStep("require-scanner", program=config.scanner, hint="pip install detect-secrets"),
        # the old baseline is removed, never merged into the new one
        RemoveFileStep("remove-baseline", path=path),
        GenerateBaselineStep(
            "generate-baseline",
            path=path,
            scanner=config.scanner,
            exclude_files=list(config.exclude_files),
        ),
        ValidateBaselineStep("validate-baseline", path=path),
        HookSelfTestStep("hook-self-test", path=path, continue_on_failure=True),
    ]
