from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Tuple

from application.ports.logger import LoggerPort

LEVEL_ORDER = ("debug", "info", "warning", "error")


@dataclass(frozen=True)
class CompositeLogger(LoggerPort):
    """
    Fans each event out to several sinks.

    `thresholds[i]` is the lowest level sink `i` receives; sinks without an
    entry receive everything.
    """

    loggers: List[LoggerPort]
    thresholds: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        unknown = [level for level in self.thresholds if level not in LEVEL_ORDER]
        if unknown:
            raise ValueError(f"Unknown log level(s): {', '.join(unknown)}")

    def bind(self, **fields: Any) -> "CompositeLogger":
        return CompositeLogger([logger.bind(**fields) for logger in self.loggers], self.thresholds)

    def debug(self, event: str, **fields: Any) -> None:
        self._emit("debug", event, fields)

    def info(self, event: str, **fields: Any) -> None:
        self._emit("info", event, fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._emit("warning", event, fields)

    def error(self, event: str, **fields: Any) -> None:
        self._emit("error", event, fields)

    def _accepts(self, index: int, level: str) -> bool:
        if index >= len(self.thresholds):
            return True
        return LEVEL_ORDER.index(level) >= LEVEL_ORDER.index(self.thresholds[index])

    def _emit(self, level: str, event: str, fields: dict[str, Any]) -> None:
        for index, logger in enumerate(self.loggers):
            if self._accepts(index, level):
                getattr(logger, level)(event, **fields)
