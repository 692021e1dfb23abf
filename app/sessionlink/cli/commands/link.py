"""Link the current session folder to another session folder.

The current folder is replaced by a symbolic link inside a link
transaction. The sessions of the linked folder are shown and the link
is kept only once the user confirms; otherwise everything is put back.
"""

import os
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from sessionlink.cli.commands.folders import format_folder_row
from sessionlink.cli.types import CwdOption, RootOption, SessionLocation, resolve_location
from sessionlink.linking import (
    FolderChoice,
    LinkError,
    LinkTransaction,
    PathKind,
    classify_path,
    count_session_files,
    create_link_transaction,
    list_folder_choices,
)
from sessionlink.sessions import list_sessions
from sessionlink.utils.formatting import (
    console,
    create_folder_table,
    format_session_option,
    print_error,
    print_info,
    print_success,
    print_warning,
)


def link(
    ctx: typer.Context,
    target: Annotated[
        str | None,
        typer.Argument(help="Folder name to link to (prompted if omitted)."),
    ] = None,
    root: RootOption = None,
    cwd: CwdOption = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompts."),
    ] = False,
    keep: Annotated[
        bool | None,
        typer.Option(
            "--keep/--no-keep",
            help="Keep or revert the link without asking (default: ask).",
        ),
    ] = None,
) -> None:
    """Replace the current session folder with a link to another folder.

    Nothing is deleted until the link is kept. Declining, interrupting or
    failing at any step restores the previous folder.

    Examples:
        sessionlink link                       # Choose interactively
        sessionlink link -- --home-user-other--  # Link to a named folder
        sessionlink link other -y              # No prompts, keep the link
        sessionlink link other --no-keep       # Preview, then revert
    """
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    location = resolve_location(root, cwd)

    try:
        location.root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print_error(f"Cannot create sessions root {location.root}: {e}")
        raise typer.Exit(code=1) from e

    choices = list_folder_choices(location.root, location.current_name)
    if not choices:
        print_warning("No session folders found.")
        return

    selected = _select_folder(choices, target)
    if selected is None:
        print_info("Link cancelled.")
        return

    # A link back to the current folder would dangle once it is moved aside
    if selected.is_current or _same_folder(selected.path, location.current_dir):
        print_info(f"{selected.name} is already the current folder.")
        if not quiet:
            _show_preview(location, selected.name)
        return

    current_kind = classify_path(location.current_dir)
    if current_kind == PathKind.OTHER:
        print_error("Refusing to link: current session path is not a directory or symlink.")
        raise typer.Exit(code=1)

    if not yes and not typer.confirm(
        f"Replace {location.current_name} with a symlink to {selected.name}?",
        default=False,
    ):
        print_info("Link cancelled.")
        return

    if not _confirm_destructive(location, current_kind, yes):
        print_info("Link cancelled. No files were changed.")
        return

    try:
        transaction = create_link_transaction(location.current_dir, selected.path)
    except (LinkError, OSError) as e:
        print_error(f"Failed to link sessions: {e}")
        raise typer.Exit(code=1) from e

    with transaction:
        if not quiet:
            _show_preview(location, selected.name)

        if keep is None:
            keep = yes or typer.confirm("Keep this link?", default=True)

        if not keep:
            transaction.rollback()
            print_info("Link reverted. No files were changed.")
            return

        _commit(transaction)

    print_success(f"Linked {location.current_name} to {selected.name}.")


def _select_folder(choices: list[FolderChoice], target: str | None) -> FolderChoice | None:
    """Pick the folder to link to, by name or from a numbered prompt.

    Args:
        choices: Folder choices, current first.
        target: Folder name given on the command line, if any.

    Returns:
        The chosen folder, or None if the prompt was answered with 0.

    Raises:
        typer.Exit: If target names no listed folder.
    """
    if target is not None:
        for choice in choices:
            if choice.name == target:
                return choice
        print_error(f"No session folder named {target}.")
        raise typer.Exit(code=1)

    table = create_folder_table(title="Choose session folder")
    table.add_column("#", style="muted", justify="right")
    for index, choice in enumerate(choices, start=1):
        table.add_row(*format_folder_row(choice), str(index))
    console.print(table)

    while True:
        number = typer.prompt("Folder number (0 to cancel)", type=int, default=0)
        if 0 <= number <= len(choices):
            break
        print_warning(f"Enter a number between 0 and {len(choices)}.")

    if number == 0:
        return None
    return choices[number - 1]


def _same_folder(path: Path, current_dir: Path) -> bool:
    """Check whether path resolves to the same directory as the current folder."""
    return os.path.realpath(path) == os.path.realpath(current_dir)


def _confirm_destructive(location: SessionLocation, current_kind: PathKind, yes: bool) -> bool:
    """Ask again before a real folder full of sessions gets deleted on commit.

    Only a real directory is affected: a symlink is replaced without
    touching what it points at.

    Returns:
        True to go on, False if the user backed out.
    """
    if current_kind != PathKind.DIRECTORY:
        return True

    count = count_session_files(location.current_dir)
    if count <= location.config.confirm_destructive_threshold:
        return True

    message = (
        f"The current session folder ({location.current_name}) is not a symlink "
        f"and contains {count} sessions. Keeping the link will permanently delete "
        "these existing sessions."
    )
    print_warning(message)
    return yes or typer.confirm("Continue?", default=False)


def _show_preview(location: SessionLocation, folder_name: str) -> None:
    """Print the newest sessions now visible through the current folder."""
    found = list_sessions(location.current_dir)
    if not found:
        print_info(f"No sessions in {folder_name} yet.")
        return

    limit = location.config.preview_limit
    shown = found[:limit]
    console.print(f"[bold_header]Last {len(shown)} sessions in {escape(folder_name)}[/]")
    for index, session in enumerate(shown):
        console.print(f"  {escape(format_session_option(session, index))}", highlight=False)
    if len(found) > limit:
        console.print(f"[dim]({len(found) - limit} more)[/dim]")


def _commit(transaction: LinkTransaction) -> None:
    """Commit the transaction and report a backup that could not be removed."""
    backup = transaction.backup_path
    transaction.commit()
    if backup is not None and classify_path(backup) != PathKind.MISSING:
        print_warning(f"Could not remove the old folder, left at {backup}")
