"""Reading agent session files.

Session files are JSON Lines written by the agent host; this package
only extracts what the CLI needs to preview a folder.
"""

from sessionlink.sessions.models import SessionInfo
from sessionlink.sessions.reader import list_sessions, read_session

__all__ = ["SessionInfo", "list_sessions", "read_session"]
