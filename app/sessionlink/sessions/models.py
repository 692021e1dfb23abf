"""Session metadata model."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True, slots=True)
class SessionInfo:
    """Summary of a single session file.

    Attributes:
        path: Path of the ``.jsonl`` file.
        id: Session identifier from the header record (None if absent).
        cwd: Working directory recorded in the header (None if absent).
        name: User-assigned session name (None if never named).
        first_message: Text of the first user message (None if there is none).
        message_count: Number of message records.
        modified: Last modification time of the file (UTC).
    """

    path: Path
    id: str | None
    cwd: str | None
    name: str | None
    first_message: str | None
    message_count: int
    modified: datetime

    @property
    def title(self) -> str:
        """Display title: the name, else the first message, else a placeholder."""
        return self.name or self.first_message or "(untitled)"
