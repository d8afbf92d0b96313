#!/usr/bin/env python3
# Copyright 2026 jsoncheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: lint, type check, tests, sample documents, and build."""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=jsoncheck", "--cov-report=term-missing"]),
    ("Build", ["uv", "build"]),
]

SAMPLES_DIR = pathlib.Path("tests") / "validation" / "testdata"


def main() -> int:
    """Run all CI steps and report results."""
    results: list[tuple[str, bool, float]] = []

    for name, cmd in STEPS:
        _banner(name)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_repo_root())
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    _banner("Sample documents")
    start = time.monotonic()
    results.append(("Sample documents", _check_samples(), time.monotonic() - start))

    _banner("Summary")
    all_passed = True
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        status = "PASS" if passed else "FAIL"
        print(colour(f"  {status}  {name} ({elapsed:.1f}s)"))
        all_passed = all_passed and passed

    print()
    return 0 if all_passed else 1


# ################
# Implementation
# ################


def _repo_root() -> pathlib.Path:
    return pathlib.Path(__file__).parent.parent


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(f"  {title}"))
    print(sep)


def _check_samples() -> bool:
    """Run the installed CLI on every sample and compare against the expected verdict.

    Files under ``valid/`` must exit with 0, files under ``invalid/`` with 1.
    """
    ok = True
    for expected_code, subdir in ((0, "valid"), (1, "invalid")):
        for sample in sorted((_repo_root() / SAMPLES_DIR / subdir).glob("*.json")):
            proc = subprocess.run(
                ["uv", "run", "jsoncheck", "--quiet", "--file", str(sample)],
                cwd=_repo_root(),
                capture_output=True,
                text=True,
            )
            if proc.returncode == expected_code:
                print(chalk.green(f"  ok    {subdir}/{sample.name}"))
            else:
                print(chalk.red(f"  FAIL  {subdir}/{sample.name}: exit {proc.returncode} {proc.stderr.strip()}"))
                ok = False
    return ok


if __name__ == "__main__":
    sys.exit(main())
