# application/executor/handler_registry.py
from __future__ import annotations

from typing import List, Optional, Sequence

from application.handlers.base import StepHandler
from domain.steps.base import Step


class HandlerRegistry:
    def __init__(self, handlers: List[StepHandler]):
        self._handlers = handlers

    def find_handler(self, step: Step) -> Optional[StepHandler]:
        for h in self._handlers:
            if h.supports(step):
                return h
        return None

    def get_handler(self, step: Step) -> StepHandler:
        handler = self.find_handler(step)
        if handler is None:
            raise RuntimeError(f"No handler found for step: {type(step).__name__} ({step.name})")
        return handler

    def check_covers(self, steps: Sequence[Step]) -> None:
        """Fail before anything runs if a step type has no handler."""
        missing = [f"{type(s).__name__} ({s.name})" for s in steps if self.find_handler(s) is None]
        if missing:
            raise RuntimeError(f"No handler found for step: {', '.join(missing)}")
