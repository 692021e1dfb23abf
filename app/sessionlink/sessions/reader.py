"""Session file reader.

Each line of a session file is a JSON object with a ``type`` field:

- ``session``: header carrying ``id`` and ``cwd``
- ``message``: a conversation message, ``message.role`` and ``message.content``
- ``session_info``: metadata such as a user-assigned ``name``

Other record types are ignored.
"""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from sessionlink.linking.folders import SESSION_FILE_SUFFIX
from sessionlink.sessions.models import SessionInfo

logger = logging.getLogger(__name__)


def read_session(path: Path) -> SessionInfo | None:
    """Read the summary of one session file.

    Malformed lines are skipped.

    Args:
        path: Path to a ``.jsonl`` session file.

    Returns:
        SessionInfo, or None if the file cannot be read.
    """
    session_id: str | None = None
    cwd: str | None = None
    name: str | None = None
    first_message: str | None = None
    message_count = 0

    try:
        modified = datetime.fromtimestamp(path.stat().st_mtime, tz=UTC)
        with path.open(encoding="utf-8") as f:
            for line_num, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue

                try:
                    record = json.loads(line)
                except json.JSONDecodeError as e:
                    logger.debug("Skipping malformed line %d in %s: %s", line_num, path, e)
                    continue
                if not isinstance(record, dict):
                    continue

                record_type = record.get("type")
                if record_type == "session" and session_id is None:
                    session_id = _as_str(record.get("id"))
                    cwd = _as_str(record.get("cwd"))
                elif record_type == "session_info":
                    name = _as_str(record.get("name")) or name
                elif record_type == "message":
                    message_count += 1
                    if first_message is None:
                        first_message = _user_text(record.get("message"))
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read session file %s: %s", path, e)
        return None

    return SessionInfo(
        path=path,
        id=session_id,
        cwd=cwd,
        name=name,
        first_message=first_message,
        message_count=message_count,
        modified=modified,
    )


def list_sessions(folder: Path) -> list[SessionInfo]:
    """List the sessions stored directly in a folder, newest first.

    Args:
        folder: Session folder (links are followed).

    Returns:
        SessionInfo for every readable ``.jsonl`` file, sorted by
        modification time descending. Empty if the folder cannot be read.
    """
    try:
        files = [
            p for p in folder.iterdir() if p.name.endswith(SESSION_FILE_SUFFIX) and p.is_file()
        ]
    except OSError as e:
        logger.warning("Cannot list session folder %s: %s", folder, e)
        return []

    sessions = [info for info in (read_session(p) for p in files) if info is not None]
    sessions.sort(key=lambda s: s.modified, reverse=True)
    return sessions


def _as_str(value: object) -> str | None:
    """Return value if it is a non-empty string, None otherwise."""
    return value if isinstance(value, str) and value else None


def _user_text(message: Any) -> str | None:
    """Extract the text of a user message record.

    Content is either a plain string or a list of parts, of which the
    ``text`` parts are joined with spaces.
    """
    if not isinstance(message, dict) or message.get("role") != "user":
        return None

    content = message.get("content")
    if isinstance(content, str):
        return content or None
    if isinstance(content, list):
        texts = [
            part["text"]
            for part in content
            if isinstance(part, dict)
            and part.get("type") == "text"
            and isinstance(part.get("text"), str)
        ]
        return " ".join(texts) or None
    return None
