# application/services/execution_deps.py
from __future__ import annotations

from dataclasses import dataclass, replace

from application.ports.command_runner import CommandRunnerPort
from application.ports.logger import LoggerPort
from application.ports.prompter import PrompterPort


@dataclass(frozen=True)
class ExecutionDeps:
    runner: CommandRunnerPort
    prompter: PrompterPort
    logger: LoggerPort

    def with_logger(self, logger: LoggerPort) -> "ExecutionDeps":
        return replace(self, logger=logger)
