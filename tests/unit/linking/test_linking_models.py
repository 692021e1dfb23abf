"""Tests for linking domain models."""

from datetime import UTC, datetime
from pathlib import Path

import pytest
from sessionlink.linking.models import FolderChoice, PathKind, StaleBackup


class TestPathKind:
    """Tests for PathKind enum."""

    def test_path_kind_values(self) -> None:
        """Verify all 4 PathKind values exist with correct string values."""
        assert PathKind.MISSING == "missing"
        assert PathKind.SYMLINK == "symlink"
        assert PathKind.DIRECTORY == "directory"
        assert PathKind.OTHER == "other"
        assert len(PathKind) == 4


class TestFolderChoice:
    """Tests for FolderChoice frozen dataclass."""

    def test_creation(self) -> None:
        """Create a valid FolderChoice."""
        choice = FolderChoice(name="aaa", path=Path("/s/aaa"), session_count=2, is_current=False)
        assert choice.name == "aaa"
        assert choice.session_count == 2
        assert choice.is_current is False

    def test_is_immutable(self) -> None:
        """FolderChoice cannot be modified after creation."""
        choice = FolderChoice(name="aaa", path=Path("/s/aaa"), session_count=0, is_current=True)
        with pytest.raises(AttributeError):
            choice.name = "bbb"  # type: ignore[misc]

    def test_empty_name_rejected(self) -> None:
        """An empty folder name raises ValueError."""
        with pytest.raises(ValueError, match="cannot be empty"):
            FolderChoice(name="", path=Path("/s"), session_count=0, is_current=False)

    def test_negative_count_rejected(self) -> None:
        """A negative session count raises ValueError."""
        with pytest.raises(ValueError, match="non-negative"):
            FolderChoice(name="a", path=Path("/s/a"), session_count=-1, is_current=False)


class TestStaleBackup:
    """Tests for StaleBackup dataclass."""

    def test_equality(self) -> None:
        """StaleBackups with equal fields compare equal."""
        created = datetime(2024, 1, 1, tzinfo=UTC)
        a = StaleBackup(path=Path("/s/a.bak-1"), original=Path("/s/a"), created=created)
        b = StaleBackup(path=Path("/s/a.bak-1"), original=Path("/s/a"), created=created)
        assert a == b
