# domain/config.py
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import List


@dataclass(frozen=True)
class BootstrapConfig:
    remote_name: str = "origin"
    branch: str = "main"
    accepted_token: str = "yes"
    url_attempts: int = 3

    baseline_path: str = ".secrets.baseline"
    scanner: str = "detect-secrets"
    exclude_files: List[str] = field(default_factory=list)

    requirements_file: str = "requirements.txt"
    go_tools: List[str] = field(default_factory=list)

    venv_path: str = ".venv"

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]
