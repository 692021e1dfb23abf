"""List the sessions stored in a session folder."""

import json
from typing import Annotated

import typer
from rich.markup import escape

from sessionlink.cli.types import (
    CwdOption,
    FormatOption,
    OutputFormat,
    RootOption,
    resolve_location,
)
from sessionlink.linking import is_directory_like
from sessionlink.sessions import SessionInfo, list_sessions
from sessionlink.utils.formatting import (
    console,
    create_session_table,
    format_datetime,
    normalize_snippet,
    print_error,
    print_info,
    shorten_path,
    truncate,
)


def sessions(
    folder: Annotated[
        str | None,
        typer.Argument(help="Folder name under the sessions root (default: current)."),
    ] = None,
    root: RootOption = None,
    cwd: CwdOption = None,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-l",
            help="Limit number of results.",
        ),
    ] = None,
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """List the sessions of a folder, newest first."""
    location = resolve_location(root, cwd)
    name = folder or location.current_name
    path = location.root / name

    if not is_directory_like(path):
        print_error(f"Session folder not found: {shorten_path(path)}")
        raise typer.Exit(code=1)

    found = list_sessions(path)
    shown = found[:limit] if limit else found

    if output_format == OutputFormat.JSON:
        _print_json(shown)
        return

    if not found:
        print_info(f"No sessions in {name}.")
        return

    print_session_table(shown, title=f"Sessions in {name}")
    if limit and len(shown) < len(found):
        console.print(f"[dim](showing {len(shown)} of {len(found)}, limited to {limit})[/dim]")


def print_session_table(items: list[SessionInfo], title: str = "Sessions") -> None:
    """Display sessions as a Rich table."""
    table = create_session_table(title=escape(title))
    for index, session in enumerate(items, start=1):
        table.add_row(
            str(index),
            format_datetime(session.modified),
            str(session.message_count),
            escape(truncate(normalize_snippet(session.title), 100)),
        )
    console.print(table)


def _print_json(items: list[SessionInfo]) -> None:
    """Display sessions as JSON."""
    data = [
        {
            "path": str(s.path),
            "id": s.id,
            "cwd": s.cwd,
            "name": s.name,
            "first_message": s.first_message,
            "message_count": s.message_count,
            "modified": s.modified.isoformat(),
        }
        for s in items
    ]
    console.print_json(json.dumps(data))
