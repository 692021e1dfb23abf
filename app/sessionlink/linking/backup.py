"""Backup naming for displaced session folders.

A transaction parks the folder it replaces next to it under
``<name>.bak-<unix millis>[-<n>]``. The same naming lets leftovers of
an interrupted transaction be recognized later.
"""

import logging
import re
from datetime import UTC, datetime
from pathlib import Path

from sessionlink.linking.fs import LOCAL_FS, FileSystem
from sessionlink.linking.models import StaleBackup

logger = logging.getLogger(__name__)

BACKUP_MARKER = ".bak-"

_BACKUP_NAME_RE = re.compile(r"^(?P<original>.+)\.bak-(?P<millis>\d+)(?:-(?P<index>\d+))?$")


def make_unique_backup_path(path: Path | str, fs: FileSystem | None = None) -> Path:
    """Generate a sibling path that does not exist yet.

    Tries ``<path>.bak-<millis>`` first, then appends ``-1``, ``-2`` and
    so on. The check is not a reservation: the rename that follows is
    what actually claims the name.

    Args:
        path: Path that is about to be displaced.
        fs: Filesystem to query. Defaults to the local filesystem.

    Returns:
        A path in the same directory with no entry at it.
    """
    fs = fs or LOCAL_FS
    stamp = fs.now_millis()

    candidate = Path(f"{path}{BACKUP_MARKER}{stamp}")
    index = 0
    while fs.lexists(candidate):
        index += 1
        candidate = Path(f"{path}{BACKUP_MARKER}{stamp}-{index}")
    return candidate


def is_backup_name(name: str) -> bool:
    """Check whether an entry name looks like a transaction backup."""
    return _BACKUP_NAME_RE.match(name) is not None


def find_stale_backups(root: Path | str, fs: FileSystem | None = None) -> list[StaleBackup]:
    """Find backups left behind under a sessions root.

    A backup only exists while a transaction is open, so any entry found
    here belongs to a transaction that never finished. Nothing is
    recovered automatically.

    Args:
        root: Directory whose direct children are inspected.
        fs: Filesystem to query. Defaults to the local filesystem.

    Returns:
        StaleBackup entries sorted by name, empty if root cannot be read.
    """
    fs = fs or LOCAL_FS
    root = Path(root)

    try:
        names = fs.listdir(root)
    except OSError as e:
        logger.debug("Cannot list %s: %s", root, e)
        return []

    backups: list[StaleBackup] = []
    for name in sorted(names):
        match = _BACKUP_NAME_RE.match(name)
        if match is None:
            continue
        created = datetime.fromtimestamp(int(match["millis"]) / 1000, tz=UTC)
        backups.append(
            StaleBackup(
                path=root / name,
                original=root / match["original"],
                created=created,
            )
        )
    return backups
