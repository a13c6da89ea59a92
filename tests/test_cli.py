"""Tests for lockstep.cli."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from lockstep.cli import cli, cmd_sync


class TestCmdSync:
    """Tests for the sync command."""

    def test_prints_new_version(
        self,
        tmp_project: Path,
        next_patch,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.chdir(tmp_project)

        cmd_sync(next_patch)

        assert capsys.readouterr().out == "Updated version to 1.2.4\n"
        manifest = json.loads((tmp_project / "package.json").read_text())
        assert manifest["version"] == "1.2.4"

    @pytest.mark.parametrize("name", ["package.json", "package-lock.json"])
    def test_missing_file_exits_1(
        self,
        tmp_project: Path,
        next_patch,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        name: str,
    ) -> None:
        (tmp_project / name).unlink()
        monkeypatch.chdir(tmp_project)

        with pytest.raises(SystemExit) as exc:
            cmd_sync(next_patch)

        assert exc.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith(f"Error: {name} not found in ")

    def test_parse_error_exits_1(
        self,
        tmp_project: Path,
        next_patch,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        (tmp_project / "package.json").write_text("{,}")
        monkeypatch.chdir(tmp_project)

        with pytest.raises(SystemExit) as exc:
            cmd_sync(next_patch)

        assert exc.value.code == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: Failed to read or parse package.json:")

    @pytest.mark.parametrize("name", ["package.json", "package-lock.json"])
    def test_write_error_exits_1(
        self,
        tmp_project: Path,
        next_patch,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        name: str,
    ) -> None:
        original = (tmp_project / "package.json").read_text()
        monkeypatch.chdir(tmp_project)

        def fail_on(path: Path, text: str) -> None:
            if path.name == name:
                raise PermissionError("permission denied")
            path.write_text(text, encoding="utf-8")

        with patch("lockstep.syncer.write_text_atomic", side_effect=fail_on):
            with pytest.raises(SystemExit) as exc:
                cmd_sync(next_patch)

        assert exc.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith(f"Error: Failed to write {name}:")
        assert "permission denied" in captured.err
        assert (tmp_project / "package.json").read_text() == original


@patch("lockstep.cli.cmd_sync")
def test_cli_runs_sync(mock_cmd_sync: MagicMock) -> None:
    cli([])
    mock_cmd_sync.assert_called_once_with()


def test_cli_rejects_arguments() -> None:
    with pytest.raises(SystemExit) as exc:
        cli(["--dry-run"])
    assert exc.value.code == 2
