# infrastructure/process/subprocess_runner.py
from __future__ import annotations

import subprocess
from pathlib import Path

from application.ports.command_runner import CommandRunnerPort
from domain.command import COMMAND_NOT_FOUND, COMMAND_NOT_EXECUTABLE, CommandResult, ExternalCommand


class SubprocessCommandRunner(CommandRunnerPort):
    """
    Blocking subprocess runner.

    stdin is inherited so tools can still ask for credentials; no timeout is
    applied since a push may wait on browser-based authentication. A process
    that cannot be started is reported as a result, never raised.
    """

    def run(self, command: ExternalCommand) -> CommandResult:
        if command.cwd is not None and not Path(command.cwd).is_dir():
            return CommandResult(
                exit_code=COMMAND_NOT_EXECUTABLE,
                stderr=f"{command.program}: working directory not found: {command.cwd}",
            )

        try:
            completed = subprocess.run(
                command.argv,
                cwd=str(command.cwd) if command.cwd is not None else None,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            return CommandResult(
                exit_code=COMMAND_NOT_FOUND,
                stderr=f"{command.program}: command not found",
            )
        except OSError as exc:
            # E2BIG, ENOEXEC, EACCES and friends
            return CommandResult(
                exit_code=COMMAND_NOT_EXECUTABLE,
                stderr=f"{command.program}: {exc.strerror or exc}",
            )

        return CommandResult(
            exit_code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
