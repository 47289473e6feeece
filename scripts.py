#!/usr/bin/env python3
"""
Development scripts for chibi-ioc.

Each command runs through uv so the project environment is used.
"""

import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

PACKAGE_DIR = "src/chibi_ioc/"


def run_command(cmd: list[str], description: str) -> bool:
    """Run a command and return True if successful."""
    print(f"\n-> {description}")
    print(f"   {' '.join(cmd)}")

    try:
        subprocess.run(cmd, check=True, capture_output=False)
    except subprocess.CalledProcessError as e:
        print(f"FAILED: {description} (exit code {e.returncode})")
        return False
    except FileNotFoundError:
        print(f"FAILED: command not found: {cmd[0]}")
        return False

    print(f"OK: {description}")
    return True


def run_all(checks: list[tuple[list[str], str]]) -> int:
    """Run every command, returning a non-zero exit code if any failed."""
    results = [run_command(cmd, description) for cmd, description in checks]
    return 0 if all(results) else 1


def run_tests() -> int:
    """Run the test suite."""
    return run_all([(["uv", "run", "pytest", "-v"], "Tests")])


def run_lint() -> int:
    """Run linting and formatting checks."""
    status = run_all(
        [
            (["uv", "run", "ruff", "check", "."], "Ruff linting"),
            (["uv", "run", "ruff", "format", "--check", "."], "Ruff formatting"),
        ]
    )
    if status:
        print("\nTo fix formatting run: uv run ruff format .")
    return status


def run_typecheck() -> int:
    """Run type checking with both mypy and pyright."""
    return run_all(
        [
            (["uv", "run", "mypy", PACKAGE_DIR], "MyPy type checking"),
            (["uv", "run", "pyright", PACKAGE_DIR], "Pyright type checking"),
        ]
    )


def run_demos() -> int:
    """Run every demo script to make sure it still works."""
    demo_files = sorted(Path("demo").glob("*.py"))
    if not demo_files:
        print("No demo files found")
        return 0

    return run_all(
        [
            (["uv", "run", "python", str(demo_file)], f"Demo: {demo_file.name}")
            for demo_file in demo_files
            if not demo_file.name.startswith("_")
        ]
    )


COMMANDS: dict[str, Callable[[], int]] = {
    "test": run_tests,
    "lint": run_lint,
    "typecheck": run_typecheck,
    "demos": run_demos,
}


def check_all() -> int:
    """Run tests, linting, type checking and demos."""
    results = {name: func() == 0 for name, func in COMMANDS.items()}

    print("\n=== SUMMARY ===")
    for name, passed in results.items():
        print(f"{name:<12} {'PASS' if passed else 'FAIL'}")

    return 0 if all(results.values()) else 1


if __name__ == "__main__":
    commands = {**COMMANDS, "check": check_all}
    if len(sys.argv) != 2 or sys.argv[1] not in commands:
        print(f"Usage: python scripts.py <{'|'.join(commands)}>")
        sys.exit(1)
    sys.exit(commands[sys.argv[1]]())
