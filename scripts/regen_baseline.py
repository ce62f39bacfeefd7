#!/usr/bin/env python3
"""
Regenerate the detect-secrets baseline file.

Usage:
  regen-baseline [directory] [--config PATH] [--log-file PATH] [--json-logs] [--verbose]
"""
from __future__ import annotations

import argparse
import sys

from application.workflows.baseline import build_baseline_steps
from scripts import cli_support

WORKFLOW = "regen-baseline"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=WORKFLOW, description="Regenerate the detect-secrets baseline file")
    parser.add_argument("directory", nargs="?", help="project directory (default: current directory)")
    cli_support.add_common_options(parser)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)

    try:
        working_dir = cli_support.resolve_directory(args.directory)
        config = cli_support.load_workflow_config(working_dir, args)
    except cli_support.WIRING_ERRORS as exc:
        cli_support.fail(str(exc))

    deps = cli_support.build_deps(args)
    steps = build_baseline_steps(config)
    sys.exit(cli_support.run_workflow(WORKFLOW, steps, working_dir, deps))


if __name__ == "__main__":
    main()
