# scripts/cli_support.py
"""
Wiring shared by the command-line entry points.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from application.executor.step_executor import ExecutionResult
from application.ports.logger import LoggerPort
from application.services.execution_deps import ExecutionDeps
from application.services.execution_error_builder import ExecutionErrorBuilder
from application.workflows.catalog import build_executor
from domain.config import BootstrapConfig
from domain.context import WorkflowContext
from domain.exceptions import PreconditionError
from domain.steps.base import Step
from infrastructure.config import ConfigLoadError, load_config
from infrastructure.logging.composite_logger import CompositeLogger
from infrastructure.logging.console_logger import ConsoleLogger
from infrastructure.logging.log_setup import setup_logging
from infrastructure.logging.loguru_logger import LoguruLogger
from infrastructure.logging.status_logger import StatusLogger
from infrastructure.process.subprocess_runner import SubprocessCommandRunner
from infrastructure.prompt.console_prompter import ConsolePrompter

EXIT_INTERRUPTED = 130


def add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", type=Path, help="YAML or JSON config file")
    parser.add_argument("--log-file", type=Path, help="write a debug log to this file")
    parser.add_argument("--json-logs", action="store_true", help="print structured event lines")
    parser.add_argument("--verbose", "-v", action="store_true", help="print debug records to stderr")


def resolve_directory(raw: Optional[str]) -> Path:
    directory = Path(raw).expanduser().resolve() if raw else Path.cwd()
    if not directory.is_dir():
        raise PreconditionError(f"Directory not found: {directory}")
    return directory


def load_workflow_config(directory: Path, args: argparse.Namespace) -> BootstrapConfig:
    return load_config(directory, args.config)


def build_logger(args: argparse.Namespace) -> LoggerPort:
    console: LoggerPort = ConsoleLogger() if args.json_logs else StatusLogger(errors_to_stderr=True)
    # stdout stays at info; debug records only reach loguru
    if not (args.verbose or args.log_file):
        return CompositeLogger([console], thresholds=("info",))
    setup_logging(console_level="DEBUG" if args.verbose else None, log_file=args.log_file)
    return CompositeLogger([console, LoguruLogger()], thresholds=("info", "debug"))


def build_deps(args: argparse.Namespace) -> ExecutionDeps:
    return ExecutionDeps(
        runner=SubprocessCommandRunner(),
        prompter=ConsolePrompter(),
        logger=build_logger(args),
    )


def run_workflow(workflow: str, steps: List[Step], working_dir: Path, deps: ExecutionDeps) -> int:
    deps = deps.with_logger(deps.logger.bind(workflow=workflow))
    deps.logger.info(
        "workflow.start",
        path=str(working_dir),
        message=f"{workflow}: {len(steps)} step(s) in {working_dir}",
    )

    ctx = WorkflowContext(working_dir=working_dir)
    try:
        result = build_executor().execute(steps, ctx, deps)
    except KeyboardInterrupt as exc:
        detail = ExecutionErrorBuilder().build_from_exception(exc)
        deps.logger.error("workflow.interrupted", code=detail.code, message=f"Interrupted ({detail.code})")
        return EXIT_INTERRUPTED

    print_report(workflow, result)
    return result.exit_code


def print_report(workflow: str, result: ExecutionResult) -> None:
    builder = ExecutionErrorBuilder()
    print(f"\n=== {workflow} ===")
    for line in builder.report_lines(result):
        print(line.render())

    detail = builder.build_from_result(result)
    if detail is not None:
        print(f"Halted at '{detail.step}' ({detail.code}): {detail.message}")
    elif result.failed_steps:
        print(f"Completed with warnings: {', '.join(result.failed_steps)}")
    else:
        print("All steps succeeded")


def fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


WIRING_ERRORS = (ConfigLoadError, PreconditionError)
