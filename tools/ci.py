#!/usr/bin/env python3
# Copyright 2026 Deflex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the deflex CI checks locally: format, lint, type check, tests, and build.

Use ``--only KEY`` (repeatable) to run a subset, e.g. ``tools/ci.py --only lint --only tests``.
"""

import argparse
import subprocess
import sys
import time
from dataclasses import dataclass
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Step:
    """A single CI command."""

    key: str
    title: str
    command: list[str]


STEPS: list[Step] = [
    Step("format", "Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    Step("lint", "Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    Step("types", "Type check", ["uv", "run", "ty", "check", "src/"]),
    Step("tests", "Tests", ["uv", "run", "pytest", "--cov=deflex", "--cov-report=term-missing"]),
    Step("build", "Build", ["uv", "build"]),
]


def main(argv: list[str] | None = None) -> int:
    """Run the selected CI steps and print a summary. Returns the process exit code."""
    parser = argparse.ArgumentParser(prog="ci", description="Run deflex CI checks.")
    parser.add_argument(
        "--only",
        action="append",
        choices=[step.key for step in STEPS],
        help="Steps to run (default: all)",
    )
    args = parser.parse_args(argv)

    selected = [step for step in STEPS if not args.only or step.key in args.only]
    results = [_run(step) for step in selected]

    print(f"\n{_banner('Summary')}")
    for title, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        print(colour(f"  {'PASS' if passed else 'FAIL'}  {title} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _banner(title: str) -> str:
    rule = chalk.blue("=" * 60)
    return f"{rule}\n{chalk.blue(title)}\n{rule}"


def _run(step: Step) -> tuple[str, bool, float]:
    print(f"\n{_banner(step.title)}")
    start = time.monotonic()
    proc = subprocess.run(step.command, cwd=Path(__file__).parent.parent)
    return step.title, proc.returncode == 0, time.monotonic() - start


if __name__ == "__main__":
    sys.exit(main())
