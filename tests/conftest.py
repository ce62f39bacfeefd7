# tests/conftest.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest

from application.ports.command_runner import CommandRunnerPort
from application.ports.logger import LoggerPort
from application.ports.prompter import PrompterPort
from application.services.execution_deps import ExecutionDeps
from domain.command import CommandResult, ExternalCommand
from domain.context import WorkflowContext


class FakeRunner(CommandRunnerPort):
    """
    Scripted command runner keyed by the full command line.

    Unscripted commands succeed with empty output; the working directory
    starts out as a git work tree.
    """

    def __init__(self) -> None:
        self.commands: List[str] = []
        self._responses: Dict[str, Callable[[ExternalCommand], CommandResult]] = {}
        self.on("git rev-parse --is-inside-work-tree", stdout="true\n")

    def on(
        self,
        command_line: str,
        exit_code: int = 0,
        stdout: str = "",
        stderr: str = "",
        effect: Optional[Callable[[ExternalCommand], None]] = None,
    ) -> "FakeRunner":
        def respond(command: ExternalCommand) -> CommandResult:
            if effect is not None:
                effect(command)
            return CommandResult(exit_code=exit_code, stdout=stdout, stderr=stderr)

        self._responses[command_line] = respond
        return self

    def run(self, command: ExternalCommand) -> CommandResult:
        line = command.display()
        self.commands.append(line)
        respond = self._responses.get(line)
        if respond is None:
            return CommandResult(exit_code=0)
        return respond(command)


class ScriptedPrompter(PrompterPort):
    def __init__(self, answers: Optional[List[str]] = None) -> None:
        self.answers: List[str] = list(answers or [])
        self.questions: List[str] = []

    def ask(self, question: str) -> str:
        self.questions.append(question)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {question}")
        return self.answers.pop(0)


class RecordingLogger(LoggerPort):
    def __init__(self, calls: Optional[List[Dict[str, Any]]] = None, bound: Optional[Dict[str, Any]] = None) -> None:
        self.calls: List[Dict[str, Any]] = calls if calls is not None else []
        self.bound: Dict[str, Any] = bound or {}

    def debug(self, event: str, **fields: Any) -> None:
        self.calls.append({"event": event, "level": "debug", **self.bound, **fields})

    def info(self, event: str, **fields: Any) -> None:
        self.calls.append({"event": event, "level": "info", **self.bound, **fields})

    def warning(self, event: str, **fields: Any) -> None:
        self.calls.append({"event": event, "level": "warning", **self.bound, **fields})

    def error(self, event: str, **fields: Any) -> None:
        self.calls.append({"event": event, "level": "error", **self.bound, **fields})

    def bind(self, **fields: Any) -> "RecordingLogger":
        return RecordingLogger(calls=self.calls, bound={**self.bound, **fields})

    def events(self) -> List[str]:
        return [call["event"] for call in self.calls]


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def deps(runner: FakeRunner, prompter: ScriptedPrompter, logger: RecordingLogger) -> ExecutionDeps:
    return ExecutionDeps(runner=runner, prompter=prompter, logger=logger)


@pytest.fixture
def ctx(tmp_path: Path) -> WorkflowContext:
    return WorkflowContext(working_dir=tmp_path)


@pytest.fixture
def no_tools() -> Callable[[str], Optional[str]]:
    return lambda program: None


@pytest.fixture
def all_tools() -> Callable[[str], Optional[str]]:
    return lambda program: f"/usr/bin/{program}"
