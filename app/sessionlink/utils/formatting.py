"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich, plus the
plain-text helpers used to label folders and sessions.
"""

from __future__ import annotations

import os
import re
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from sessionlink.core.theme import get_theme

if TYPE_CHECKING:
    from sessionlink.sessions.models import SessionInfo

_LINE_BREAKS_RE = re.compile(r"[\r\n\t]+")
_WHITESPACE_RE = re.compile(r"\s+")


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")


# =============================================================================
# Text helpers
# =============================================================================


def truncate(text: str, max_length: int = 72) -> str:
    """Shorten text to max_length characters, ending with an ellipsis if cut."""
    if len(text) <= max_length:
        return text
    return f"{text[: max_length - 1]}…"


def normalize_snippet(text: str) -> str:
    """Collapse line breaks, tabs and runs of whitespace into single spaces."""
    return _WHITESPACE_RE.sub(" ", _LINE_BREAKS_RE.sub(" ", text)).strip()


def format_age(moment: datetime, now: datetime | None = None) -> str:
    """Format the time elapsed since moment as a compact age.

    Args:
        moment: Timezone-aware point in the past.
        now: Reference time. Defaults to the current UTC time.

    Returns:
        "now" under a minute, then "Nm", "Nh", "Nd", "Nw", "Nmo" or "Ny".
    """
    now = now or datetime.now(UTC)
    seconds = (now - moment).total_seconds()
    mins = int(seconds // 60)
    hours = int(seconds // 3600)
    days = int(seconds // 86400)

    if mins < 1:
        return "now"
    if mins < 60:
        return f"{mins}m"
    if hours < 24:
        return f"{hours}h"
    if days < 7:
        return f"{days}d"
    if days < 30:
        return f"{days // 7}w"
    if days < 365:
        return f"{days // 30}mo"
    return f"{days // 365}y"


def format_datetime(moment: datetime) -> str:
    """Format a timestamp as local "YYYY-MM-DD HH:MM"."""
    return moment.astimezone().strftime("%Y-%m-%d %H:%M")


def shorten_path(path: Path | str, home: Path | str | None = None) -> str:
    """Replace the home directory prefix of a path with "~".

    Args:
        path: Path to shorten.
        home: Home directory. Defaults to the current user's.

    Returns:
        The shortened path, or the path unchanged if it is not under home.
    """
    text = str(path)
    home_text = str(home if home is not None else Path.home()).rstrip(os.sep)
    if text == home_text or text.startswith(home_text + os.sep):
        return f"~{text[len(home_text) :]}"
    return text


def format_session_option(session: SessionInfo, index: int, now: datetime | None = None) -> str:
    """Format a numbered one-line label for a session.

    Example:
        "1. Fix the login form — 12 msgs — 3d"

    Args:
        session: Session to describe.
        index: Zero-based position in the list.
        now: Reference time for the age. Defaults to the current UTC time.

    Returns:
        The label text.
    """
    title = normalize_snippet(session.title)
    count = session.message_count
    message_text = f"{count} msg{'' if count == 1 else 's'}"
    age = format_age(session.modified, now)
    return f"{index + 1}. {truncate(title)} — {message_text} — {age}"


# =============================================================================
# Tables
# =============================================================================


def create_folder_table(title: str = "Session Folders") -> Table:
    """Create a pre-configured table for displaying session folders.

    Args:
        title: Table title.

    Returns:
        Rich Table with a marker, name, session count and target column.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    # Marker column: icon only, no header text
    table.add_column("", width=2, justify="center")
    table.add_column("Folder", no_wrap=True)
    table.add_column("Sessions", style="info", justify="right")
    table.add_column("Links to", style="muted", overflow="ellipsis")
    return table


def create_session_table(title: str = "Sessions") -> Table:
    """Create a pre-configured table for displaying sessions.

    Args:
        title: Table title.

    Returns:
        Rich Table with index, modified time, message count and title columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", style="muted", justify="right")
    table.add_column("Modified", style="muted", no_wrap=True)
    table.add_column("Messages", style="info", justify="right")
    table.add_column("Title", style="text", overflow="ellipsis")
    return table
