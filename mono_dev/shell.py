"""Shell utilities.

Provides simple wrappers around subprocess calls for running the package
manager and linters, plus output formatting helpers.
"""

from __future__ import annotations

import subprocess
import sys


def run(*args: str, check: bool = True) -> subprocess.CompletedProcess[bytes]:
    """Run an arbitrary shell command.

    Output is not captured - it streams directly to the terminal so users
    can see lint and type-check results.

    Args:
        *args: Command and arguments (e.g., "uv", "run", "ruff").
        check: If True (default), raise on non-zero exit.

    Returns:
        CompletedProcess with returncode for checking success.
    """
    log_bin(" ".join(args))
    return subprocess.run(args, check=check)


def exec_pm(*args: str, check: bool = True) -> subprocess.CompletedProcess[bytes]:
    """Run a command through the workspace package manager (uv)."""
    return run("uv", *args, check=check)


def log_bin(name: str, *args: str) -> None:
    """Echo a command line the way a shell prompt would show it."""
    print(" ".join(["$", name, *args]).strip())


def step(msg: str) -> None:
    """Print a visually distinct step header."""
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")


def fatal(msg: str) -> None:
    """Print an error message and exit with code 1.

    Use for unrecoverable errors that should halt the command.
    """
    print(f"ERROR: {msg}", file=sys.stderr)
    sys.exit(1)
