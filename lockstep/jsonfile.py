"""package.json reading and writing utilities.

Key order survives a load/save round trip because json preserves insertion
order. Output uses the 2-space indentation npm writes, keeps non-ASCII text
literal, and keeps the trailing newline only if the original file had one.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

INDENT = 2


def read_text(path: Path) -> str:
    """Read a package JSON file as UTF-8 text."""
    return path.read_text(encoding="utf-8")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name!r}")


def parse_package_json(text: str) -> dict[str, Any]:
    """Parse package JSON text into a dict.

    NaN, Infinity and -Infinity are rejected; they are not JSON and npm
    cannot read them.

    Raises:
        ValueError: If the text is not valid JSON or is not a JSON object.
            json.JSONDecodeError is a ValueError subclass.
    """
    data = json.loads(text, parse_constant=_reject_constant)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def load_package_json(path: Path) -> dict[str, Any]:
    """Load and parse a package.json or package-lock.json file."""
    return parse_package_json(read_text(path))


def has_trailing_newline(text: str) -> bool:
    return text.endswith("\n")


def dump_package_json(data: dict[str, Any], newline: bool = True) -> str:
    """Serialize a package document the way npm formats it."""
    text = json.dumps(data, indent=INDENT, ensure_ascii=False)
    return text + "\n" if newline else text


def write_text_atomic(path: Path, text: str) -> None:
    """Replace a file's contents in one step.

    Writes to a temporary file next to the target, then renames it over the
    target so readers see either the old or the new contents. The target's
    permission bits are carried over when it already exists.
    """
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        if path.exists():
            os.chmod(tmp, path.stat().st_mode & 0o7777)
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def get_version(doc: dict[str, Any]) -> str | None:
    """Extract the top-level version, or None if it is absent."""
    return doc.get("version")


def set_version(doc: dict[str, Any], version: str) -> None:
    """Set the top-level version in place, keeping its key position."""
    doc["version"] = version
