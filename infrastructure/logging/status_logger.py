# infrastructure/logging/status_logger.py
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Dict

from application.ports.logger import LoggerPort

LEVEL_PREFIX = {
    "info": "Info",
    "warning": "Warning",
    "error": "Error",
}


@dataclass(frozen=True)
class StatusLogger(LoggerPort):
    """
    Human-readable console sink.

    Prints "<Severity>: <message>" using the event's `message` field, or the
    event name when there is none. Debug events are dropped; errors go to
    stderr when `errors_to_stderr` is set.
    """

    bound: Dict[str, Any] = field(default_factory=dict)
    errors_to_stderr: bool = False

    def bind(self, **fields: Any) -> "StatusLogger":
        merged = dict(self.bound)
        merged.update(fields)
        return StatusLogger(bound=merged, errors_to_stderr=self.errors_to_stderr)

    def debug(self, event: str, **fields: Any) -> None:
        return None

    def info(self, event: str, **fields: Any) -> None:
        self._emit("info", event, fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._emit("warning", event, fields)

    def error(self, event: str, **fields: Any) -> None:
        self._emit("error", event, fields)

    def _emit(self, level: str, event: str, fields: Dict[str, Any]) -> None:
        text = fields.get("message") or event
        stream = sys.stderr if (level == "error" and self.errors_to_stderr) else sys.stdout
        print(f"{LEVEL_PREFIX[level]}: {text}", file=stream, flush=True)
