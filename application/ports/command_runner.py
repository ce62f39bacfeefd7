# application/ports/command_runner.py
from __future__ import annotations

from abc import ABC, abstractmethod

from domain.command import CommandResult, ExternalCommand
from domain.exceptions import ExternalToolError


class CommandRunnerPort(ABC):
    @abstractmethod
    def run(self, command: ExternalCommand) -> CommandResult:
        """
        Run the command to completion and return its exit code and output.
        A non-zero exit is returned, not raised.
        """
        ...

    def run_checked(self, command: ExternalCommand) -> CommandResult:
        result = self.run(command)
        if not result.ok:
            raise ExternalToolError(command.argv, result.exit_code, result.stderr)
        return result
