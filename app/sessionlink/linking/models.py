"""Domain models for session folder linking.

This module defines the data structures shared by the classifier,
the folder enumerator and the link transaction.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class PathKind(str, Enum):
    """Kind of a filesystem entry, judged from its own (lstat) metadata.

    Attributes:
        MISSING: Nothing exists at the path.
        SYMLINK: Symbolic link, whatever it points at (broken links included).
        DIRECTORY: Real directory (not a link to one).
        OTHER: Regular file, device, socket or an entry that could not be stat'ed.
    """

    MISSING = "missing"
    SYMLINK = "symlink"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class FolderChoice:
    """A session folder that can be selected as a link target.

    Attributes:
        name: Entry name relative to the sessions root.
        path: Absolute path of the entry (not dereferenced).
        session_count: Number of session files directly inside the folder.
        is_current: Whether this is the folder of the current working directory.
    """

    name: str
    path: Path
    session_count: int
    is_current: bool

    def __post_init__(self) -> None:
        """Validate folder choice data after initialization."""
        if not self.name:
            msg = "Folder name cannot be empty"
            raise ValueError(msg)
        if self.session_count < 0:
            msg = f"Session count must be non-negative, got {self.session_count}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class StaleBackup:
    """A backup directory left behind by an unfinished link transaction.

    Attributes:
        path: Path of the backup entry.
        original: Path the backup was displaced from.
        created: Creation time decoded from the backup name suffix.
    """

    path: Path
    original: Path
    created: datetime
