"""List the session folders that can be linked to."""

import json
import os

from rich.markup import escape

from sessionlink.cli.types import (
    CwdOption,
    FormatOption,
    OutputFormat,
    RootOption,
    resolve_location,
)
from sessionlink.linking import (
    FolderChoice,
    PathKind,
    classify_path,
    is_backup_name,
    list_folder_choices,
)
from sessionlink.utils.formatting import (
    console,
    create_folder_table,
    print_info,
    print_warning,
    shorten_path,
)


def folders(
    root: RootOption = None,
    cwd: CwdOption = None,
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """List session folders with their session counts.

    The folder of the current working directory is listed first.

    Examples:
        sessionlink folders
        sessionlink folders --format json
    """
    location = resolve_location(root, cwd)
    choices = list_folder_choices(location.root, location.current_name)

    if output_format == OutputFormat.JSON:
        _print_json(choices)
        return

    if not choices:
        print_warning(f"No session folders found in {shorten_path(location.root)}")
        return

    table = create_folder_table(title=f"Session Folders in {shorten_path(location.root)}")
    for choice in choices:
        table.add_row(*format_folder_row(choice))
    console.print(table)

    if not any(c.is_current for c in choices):
        print_info(f"Current folder {location.current_name} does not exist yet.")


def format_folder_row(choice: FolderChoice) -> tuple[str, str, str, str]:
    """Format a folder choice as a table row with markup.

    The current folder gets a filled marker; leftover transaction
    backups are flagged so they are not mistaken for real folders.

    Args:
        choice: Folder to format.

    Returns:
        Tuple of (marker, name, session count, link target).
    """
    if choice.is_current:
        marker = "[folder_current]●[/]"
        name = f"[folder_current]{escape(choice.name)}[/] [muted](current)[/]"
    elif is_backup_name(choice.name):
        marker = "[folder_backup]![/]"
        name = f"[folder_backup]{escape(choice.name)}[/] [muted](backup)[/]"
    else:
        marker = "○"
        name = escape(choice.name)

    target = _link_target(choice)
    links_to = shorten_path(target) if target else "-"
    return (marker, name, str(choice.session_count), links_to)


def _link_target(choice: FolderChoice) -> str | None:
    """Return the link target of a folder, None for real directories."""
    if classify_path(choice.path) != PathKind.SYMLINK:
        return None
    try:
        return os.readlink(choice.path)
    except OSError:
        return None


def _print_json(choices: list[FolderChoice]) -> None:
    """Display folder choices as JSON."""
    data = [
        {
            "name": c.name,
            "path": str(c.path),
            "session_count": c.session_count,
            "is_current": c.is_current,
            "links_to": _link_target(c),
        }
        for c in choices
    ]
    console.print_json(json.dumps(data))
