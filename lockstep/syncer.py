"""Version sync: locate → read → generate → write.

Bumps the version of package.json and mirrors it into package-lock.json:
1. Locate both files in the project directory
2. Read and parse both before anything is written
3. Ask the version generator for the next version
4. Serialize both documents in memory
5. Replace the manifest, then the lockfile

Each file is replaced atomically. If the lockfile cannot be written after the
manifest was replaced, the manifest's original text is put back so the two
files do not disagree. A crash between the two renames can still leave only
the manifest updated.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .jsonfile import (
    dump_package_json,
    get_version,
    has_trailing_newline,
    parse_package_json,
    read_text,
    set_version,
    write_text_atomic,
)
from .models import ErrorKind, PackageFiles, VersionBump
from .versions import VersionGenerator, calendar_version

MANIFEST_NAME = "package.json"
LOCK_NAME = "package-lock.json"


class SyncError(RuntimeError):
    """A version sync failed.

    Attributes:
        kind: Which step failed, and on which file.
        path: The file involved.
    """

    def __init__(self, kind: ErrorKind, path: Path, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.path = path


def locate_package_files(root: Path) -> PackageFiles:
    """Resolve both package files in root and check that they exist.

    Raises:
        SyncError: MISSING_MANIFEST or MISSING_LOCK, naming the missing file.
    """
    root = root.resolve()
    files = PackageFiles(manifest=root / MANIFEST_NAME, lock=root / LOCK_NAME)

    if not files.manifest.is_file():
        raise SyncError(
            ErrorKind.MISSING_MANIFEST,
            files.manifest,
            f"{MANIFEST_NAME} not found in {root}",
        )
    if not files.lock.is_file():
        raise SyncError(
            ErrorKind.MISSING_LOCK,
            files.lock,
            f"{LOCK_NAME} not found in {root}",
        )
    return files


def _read_record(path: Path, kind: ErrorKind) -> tuple[str, dict[str, Any]]:
    """Read a package file, returning its raw text and parsed document."""
    try:
        text = read_text(path)
        return text, parse_package_json(text)
    except (OSError, ValueError) as e:
        raise SyncError(kind, path, f"Failed to read or parse {path.name}: {e}") from e


def _write_record(path: Path, text: str, kind: ErrorKind) -> None:
    try:
        write_text_atomic(path, text)
    except OSError as e:
        raise SyncError(kind, path, f"Failed to write {path.name}: {e}") from e


def sync_versions(
    root: Path, generator: VersionGenerator = calendar_version
) -> VersionBump:
    """Bump the manifest version and write it to both package files.

    Args:
        root: Project directory holding package.json and package-lock.json.
        generator: Computes the new version from the manifest's current one.

    Returns:
        The old and new versions.

    Raises:
        SyncError: If a file is missing, unreadable, invalid, or cannot be
            written. Nothing is written unless both files parsed.
    """
    files = locate_package_files(root)

    manifest_text, manifest = _read_record(files.manifest, ErrorKind.MANIFEST_PARSE_ERROR)
    lock_text, lock = _read_record(files.lock, ErrorKind.LOCK_PARSE_ERROR)

    current = get_version(manifest)
    new = generator(current)

    set_version(manifest, new)
    set_version(lock, new)

    # Serialize both up front so a bad document fails before any write
    manifest_out = dump_package_json(manifest, has_trailing_newline(manifest_text))
    lock_out = dump_package_json(lock, has_trailing_newline(lock_text))

    _write_record(files.manifest, manifest_out, ErrorKind.MANIFEST_WRITE_ERROR)
    try:
        _write_record(files.lock, lock_out, ErrorKind.LOCK_WRITE_ERROR)
    except SyncError as e:
        try:
            write_text_atomic(files.manifest, manifest_text)
        except OSError as restore_error:
            raise SyncError(
                e.kind,
                e.path,
                f"{e}; {MANIFEST_NAME} was updated but could not be restored: "
                f"{restore_error}",
            ) from e
        raise

    return VersionBump(old=current, new=new)
