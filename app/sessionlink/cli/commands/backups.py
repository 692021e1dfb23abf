"""Report backups left behind by interrupted link transactions."""

from rich.markup import escape
from rich.table import Table

from sessionlink.cli.types import RootOption, resolve_location
from sessionlink.linking import classify_path, find_stale_backups
from sessionlink.utils.formatting import (
    console,
    format_datetime,
    print_success,
    print_warning,
    shorten_path,
)


def backups(root: RootOption = None) -> None:
    """List leftover backups of session folders.

    A backup only exists while a link is waiting to be kept or reverted.
    One that is still present means sessionlink was interrupted. Nothing
    is restored or deleted automatically: move the backup back over the
    original name to restore it, or delete it to keep the link.
    """
    location = resolve_location(root)
    found = find_stale_backups(location.root)

    if not found:
        print_success("No leftover backups found.")
        return

    table = Table(title="Leftover Backups", show_lines=False)
    table.add_column("Backup", style="bold")
    table.add_column("Original", style="dim")
    table.add_column("Original now", width=12)
    table.add_column("Created", style="dim", no_wrap=True)

    for backup in found:
        table.add_row(
            escape(backup.path.name),
            escape(shorten_path(backup.original)),
            classify_path(backup.original).value,
            format_datetime(backup.created),
        )

    console.print(table)
    print_warning(f"{len(found)} backup(s) left by an interrupted link. Review them manually.")
