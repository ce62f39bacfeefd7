# application/workflows/project_init.py
"""
Project bootstrap: git repository, dependencies, pre-commit hooks, Go tools.

Only the repository step is fatal; the installers are independent and a
failure in one is reported as a warning while the rest still run.
"""
from __future__ import annotations

import sys
from typing import List

from domain.config import BootstrapConfig
from domain.steps.base import Step
from domain.steps.command import CommandStep
from domain.steps.git import EnsureRepoStep


def build_project_init_steps(config: BootstrapConfig, python: str = sys.executable) -> List[Step]:
    steps: List[Step] = [
        EnsureRepoStep("ensure-repo", init_if_missing=True, initial_branch=config.branch),
        CommandStep(
            "install-dependencies",
            program=python,
            args=["-m", "pip", "install", "-r", config.requirements_file],
            success_message=f"installed {config.requirements_file}",
            skip_unless_exists=config.requirements_file,
            continue_on_failure=True,
        ),
        CommandStep(
            "install-pre-commit",
            program="pre-commit",
            args=["install"],
            success_message="hooks installed",
            continue_on_failure=True,
        ),
    ]
    for tool in config.go_tools:
        steps.append(
            CommandStep(
                f"go-install:{tool}",
                program="go",
                args=["install", tool],
                success_message=tool,
                continue_on_failure=True,
            )
        )
    return steps
