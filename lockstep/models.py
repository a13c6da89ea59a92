"""Data models for lockstep.

These Pydantic models describe the inputs and the outcome of a version sync,
plus the error kinds a sync can fail with.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel


class ErrorKind(str, Enum):
    """Every way a version sync can fail."""

    MISSING_MANIFEST = "missing-manifest"
    MISSING_LOCK = "missing-lock"
    MANIFEST_PARSE_ERROR = "manifest-parse-error"
    LOCK_PARSE_ERROR = "lock-parse-error"
    MANIFEST_WRITE_ERROR = "manifest-write-error"
    LOCK_WRITE_ERROR = "lock-write-error"


class PackageFiles(BaseModel):
    """Absolute paths of the manifest and its lockfile.

    Attributes:
        manifest: Path to package.json.
        lock: Path to package-lock.json.
    """

    manifest: Path
    lock: Path


class VersionBump(BaseModel):
    """Records the version change applied to both files.

    Attributes:
        old: The manifest version before syncing, or None if it had none.
        new: The version written to both files.
    """

    old: str | None
    new: str
