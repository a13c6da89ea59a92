"""CLI entry point for lockstep."""

from __future__ import annotations

import argparse
from pathlib import Path

from lockstep.console import fatal, info
from lockstep.syncer import SyncError, sync_versions
from lockstep.versions import VersionGenerator, calendar_version


def cmd_sync(generator: VersionGenerator = calendar_version) -> None:
    """Bump the version in ./package.json and ./package-lock.json."""
    try:
        bump = sync_versions(Path.cwd(), generator)
    except SyncError as e:
        fatal(str(e))
    else:
        info(f"Updated version to {bump.new}")


def cli(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="lockstep",
        description=(
            "Bump the version in package.json and package-lock.json "
            "in the current directory."
        ),
    )
    parser.parse_args(argv)
    cmd_sync()
