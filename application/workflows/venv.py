# application/workflows/venv.py
from __future__ import annotations

import os
from pathlib import PurePosixPath, PureWindowsPath
from typing import List, Optional

from domain.config import BootstrapConfig
from domain.steps.base import Step
from domain.steps.command import CommandStep
from domain.steps.venv import ActivationHintStep, CreateVenvStep


def venv_python(path: str, windows: bool) -> str:
    if windows:
        return str(PureWindowsPath(path) / "Scripts" / "python.exe")
    return str(PurePosixPath(path) / "bin" / "python")


def build_venv_steps(
    config: BootstrapConfig,
    venv_path: Optional[str] = None,
    python: str = "python3",
    windows: bool = os.name == "nt",
) -> List[Step]:
    path = venv_path or config.venv_path
    inner_python = venv_python(path, windows)
    return [
        CreateVenvStep("create-venv", path=path, python=python),
        CommandStep(
            "upgrade-pip",
            program=inner_python,
            args=["-m", "pip", "install", "--upgrade", "pip"],
            continue_on_failure=True,
        ),
        CommandStep(
            "install-requirements",
            program=inner_python,
            args=["-m", "pip", "install", "-r", config.requirements_file],
            success_message=f"installed {config.requirements_file}",
            skip_unless_exists=config.requirements_file,
            continue_on_failure=True,
        ),
        ActivationHintStep("activation-hint", path=path, windows=windows),
    ]
