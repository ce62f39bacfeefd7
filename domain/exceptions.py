# domain/exceptions.py
from __future__ import annotations

from typing import Sequence


class BootstrapError(Exception):
    """Base class for every failure a workflow step can report."""


class PreconditionError(BootstrapError):
    pass


class UserAborted(BootstrapError):
    pass


class ValidationError(BootstrapError):
    pass


class PostconditionError(BootstrapError):
    pass


class ExternalToolError(BootstrapError):
    def __init__(self, argv: Sequence[str], exit_code: int, stderr: str = ""):
        self.argv = list(argv)
        self.exit_code = exit_code
        self.stderr = stderr
        detail = stderr.strip().splitlines()[-1] if stderr.strip() else "no output"
        super().__init__(f"`{' '.join(self.argv)}` exited with {exit_code}: {detail}")
