"""Console output helpers.

Status lines go to stdout, errors to stderr.
"""

from __future__ import annotations

import sys


def info(msg: str) -> None:
    print(msg)


def error(msg: str) -> None:
    """Print an error message to stderr."""
    print(f"Error: {msg}", file=sys.stderr)


def fatal(msg: str) -> None:
    """Print an error message and exit with code 1.

    Use for unrecoverable errors that should halt the command.
    """
    error(msg)
    sys.exit(1)
