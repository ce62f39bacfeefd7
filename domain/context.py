# domain/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict


@dataclass
class WorkflowContext:
    working_dir: Path = field(default_factory=Path.cwd)
    run_id: str = ""

    # facts published by earlier steps for later ones (e.g. remote_exists)
    state: Dict[str, Any] = field(default_factory=dict)
