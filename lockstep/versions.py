"""Version generators.

A generator takes the manifest's current version (or None when the manifest
has no version field) and returns the version to write. The syncer treats
versions as opaque strings; only the functions here interpret them.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

import semver


class VersionGenerator(Protocol):
    """Computes the next version from the current one."""

    def __call__(self, current: str | None) -> str: ...


def parse_version(version_str: str | None) -> semver.Version:
    """Read a package version leniently.

    Short versions are zero-padded ("1.2" reads as 1.2.0) and a missing
    version reads as 0.0.0. Anything past major.minor.patch is dropped.
    """
    parts = (version_str or "0.0.0").split(".")
    parts += ["0"] * (3 - len(parts))
    return semver.Version.parse(".".join(parts[:3]))


def bump_patch(current: str | None) -> str:
    """Next patch release: "1.2.3" → "1.2.4", "1.0" → "1.0.1", None → "0.0.1"."""
    return str(parse_version(current).bump_patch())


def calendar_version(current: str | None, today: date | None = None) -> str:
    """Return a year.month.build version.

    The build number counts releases within a month and starts again at 1
    when the month changes. Every result sorts above ``current`` under
    semver, so npm ranges and tag ordering see the newest release last:

        "2026.9.7"      → "2026.10.1"
        "2026.10.1"     → "2026.10.2"
        "2026.10.2-rc1" → "2026.10.2"
        "1.2.3" / None  → "2026.10.1"

    A current version already at or past today's month (for example one cut
    on a machine with a skewed clock) gets its build number bumped rather than
    being reset.

    Args:
        current: The manifest's current version, if any.
        today: Date to version against. Defaults to the local date.
    """
    today = today or date.today()
    month_start = semver.Version(today.year, today.month, 1)

    if not current or not semver.Version.is_valid(current):
        return str(month_start)

    parsed = semver.Version.parse(current)
    if (parsed.major, parsed.minor) < (today.year, today.month):
        return str(month_start)
    if parsed.prerelease:
        return str(parsed.finalize_version())
    return str(parsed.bump_patch())
