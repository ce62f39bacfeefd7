# application/workflows/catalog.py
from __future__ import annotations

import shutil
from typing import Callable, Optional

from application.executor.handler_registry import HandlerRegistry
from application.executor.step_executor import StepExecutor
from application.handlers.baseline_handler import (
    GenerateBaselineStepHandler,
    HookSelfTestStepHandler,
    RemoveFileStepHandler,
    ValidateBaselineStepHandler,
)
from application.handlers.command_handler import CommandStepHandler, RequireToolStepHandler
from application.handlers.prompt_handler import (
    ConfirmStepHandler,
    GuideStepHandler,
    PromptUrlStepHandler,
)
from application.handlers.remote_handler import (
    AddRemoteStepHandler,
    CheckRemoteStepHandler,
    PushStepHandler,
    RemoveRemoteStepHandler,
    VerifyRemoteStepHandler,
)
from application.handlers.repo_handler import EnsureRepoStepHandler
from application.handlers.venv_handler import ActivationHintStepHandler, CreateVenvStepHandler


def build_registry(which: Callable[[str], Optional[str]] = shutil.which) -> HandlerRegistry:
    return HandlerRegistry([
        EnsureRepoStepHandler(),
        CheckRemoteStepHandler(),
        RemoveRemoteStepHandler(),
        AddRemoteStepHandler(),
        VerifyRemoteStepHandler(),
        PushStepHandler(),
        GuideStepHandler(),
        ConfirmStepHandler(),
        PromptUrlStepHandler(),
        CommandStepHandler(),
        RequireToolStepHandler(which),
        RemoveFileStepHandler(),
        GenerateBaselineStepHandler(),
        ValidateBaselineStepHandler(),
        HookSelfTestStepHandler(),
        CreateVenvStepHandler(which),
        ActivationHintStepHandler(),
    ])


def build_executor(which: Callable[[str], Optional[str]] = shutil.which) -> StepExecutor:
    return StepExecutor(build_registry(which))
