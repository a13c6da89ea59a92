"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from lockstep.versions import VersionGenerator, bump_patch

MANIFEST = """\
{
  "name": "x",
  "version": "1.2.3",
  "description": "Café menu",
  "scripts": {
    "build": "tsc"
  },
  "dependencies": {
    "left-pad": "^1.3.0"
  }
}
"""

LOCK = """\
{
  "name": "x",
  "version": "1.2.3",
  "lockfileVersion": 3,
  "requires": true,
  "packages": {
    "": {
      "name": "x",
      "version": "1.2.3"
    },
    "node_modules/left-pad": {
      "version": "1.3.0"
    }
  }
}
"""


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """Create a project directory with package.json and package-lock.json."""
    (tmp_path / "package.json").write_text(MANIFEST, encoding="utf-8")
    (tmp_path / "package-lock.json").write_text(LOCK, encoding="utf-8")
    return tmp_path


@pytest.fixture
def next_patch() -> VersionGenerator:
    """Deterministic generator: 1.2.3 becomes 1.2.4."""
    return bump_patch
