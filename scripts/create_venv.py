#!/usr/bin/env python3
"""
Create a Python virtual environment and print how to activate it.

Usage:
  create-venv [venv_path] [python] [--config PATH] [--log-file PATH] [--json-logs] [--verbose]

A child process cannot activate an environment in the calling shell, so the
last step prints the activation command instead.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from application.workflows.venv import build_venv_steps
from scripts import cli_support

WORKFLOW = "create-venv"
DEFAULT_PYTHON = "python3" if sys.platform != "win32" else "python"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=WORKFLOW, description="Create a Python virtual environment")
    parser.add_argument("venv_path", nargs="?", help="environment directory (default from config: .venv)")
    parser.add_argument("python", nargs="?", default=DEFAULT_PYTHON, help="interpreter used to create it")
    cli_support.add_common_options(parser)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)

    try:
        working_dir = Path.cwd()
        config = cli_support.load_workflow_config(working_dir, args)
    except cli_support.WIRING_ERRORS as exc:
        cli_support.fail(str(exc))

    deps = cli_support.build_deps(args)
    steps = build_venv_steps(config, venv_path=args.venv_path, python=args.python)
    sys.exit(cli_support.run_workflow(WORKFLOW, steps, working_dir, deps))


if __name__ == "__main__":
    main()
