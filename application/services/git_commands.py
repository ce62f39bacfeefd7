# application/services/git_commands.py
from __future__ import annotations

from domain.command import ExternalCommand
from domain.context import WorkflowContext


def git(ctx: WorkflowContext, *args: str) -> ExternalCommand:
    return ExternalCommand(program="git", args=list(args), cwd=ctx.working_dir)
