"""Unit tests for the sessions command."""

import json
import os
from collections.abc import Callable
from pathlib import Path

import pytest
from sessionlink.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()

CWD = "/work/project"
CURRENT = "--work-project--"


def _flat(text: str) -> str:
    return " ".join(text.split())


@pytest.fixture
def root(tmp_path: Path, write_session: Callable[..., Path]) -> Path:
    """Sessions root whose current folder holds two sessions of known age."""
    sessions_root = tmp_path / "sessions"
    older = write_session(sessions_root / CURRENT, "older.jsonl", first_message="older work")
    newer = write_session(
        sessions_root / CURRENT, "newer.jsonl", first_message="newer work", messages=3
    )
    os.utime(older, (1_700_000_000, 1_700_000_000))
    os.utime(newer, (1_700_000_600, 1_700_000_600))
    write_session(sessions_root / "--work-other--", "x.jsonl", name="Named session")
    return sessions_root


def _invoke(root: Path, *args: str):
    return runner.invoke(app, ["sessions", "--root", str(root), "--cwd", CWD, *args])


class TestSessionsCommand:
    """Tests for the sessions command."""

    def test_lists_current_folder_newest_first(self, root: Path) -> None:
        """Without a folder argument the current folder is listed."""
        result = _invoke(root, "--format", "json")

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [d["first_message"] for d in data] == ["newer work", "older work"]
        assert data[0]["message_count"] == 3
        assert data[0]["id"] == "newer"
        assert data[0]["cwd"] == "/work/project"

    def test_table_output(self, root: Path) -> None:
        """The table shows titles and the folder name."""
        result = _invoke(root)

        assert result.exit_code == 0
        output = _flat(result.output)
        assert f"Sessions in {CURRENT}" in output
        assert "newer work" in output
        assert "older work" in output

    def test_named_folder(self, root: Path) -> None:
        """A folder argument lists that folder instead."""
        result = _invoke(root, "--", "--work-other--")

        assert result.exit_code == 0
        assert "Named session" in _flat(result.output)

    def test_limit(self, root: Path) -> None:
        """--limit shows only the newest sessions."""
        result = _invoke(root, "--limit", "1")

        assert result.exit_code == 0
        output = _flat(result.output)
        assert "newer work" in output
        assert "older work" not in output
        assert "showing 1 of 2" in output

    def test_limit_json(self, root: Path) -> None:
        """--limit applies to JSON output."""
        result = _invoke(root, "--limit", "1", "--format", "json")

        assert [d["first_message"] for d in json.loads(result.stdout)] == ["newer work"]

    def test_missing_folder(self, root: Path) -> None:
        """An unknown folder is an error."""
        result = _invoke(root, "--", "--nowhere--")

        assert result.exit_code == 1
        assert "Session folder not found" in _flat(result.output)

    def test_empty_folder(self, root: Path) -> None:
        """A folder without sessions says so."""
        (root / "--work-empty--").mkdir()

        result = _invoke(root, "--", "--work-empty--")

        assert result.exit_code == 0
        assert "No sessions in --work-empty--." in _flat(result.output)

    def test_through_link(self, root: Path) -> None:
        """A linked current folder lists the target's sessions."""
        (root / "--work-linked--").symlink_to(root / "--work-other--", target_is_directory=True)

        result = runner.invoke(
            app, ["sessions", "--root", str(root), "--cwd", "/work/linked", "-f", "json"]
        )

        assert result.exit_code == 0
        assert [d["name"] for d in json.loads(result.stdout)] == ["Named session"]
