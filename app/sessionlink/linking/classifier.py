"""Path classification helpers.

Both functions are total: they answer for nonexistent or unreadable
paths instead of raising, because callers only use the answer as
advice before acting (or while cleaning up).
"""

import stat
from pathlib import Path

from sessionlink.linking.fs import LOCAL_FS, FileSystem
from sessionlink.linking.models import PathKind


def classify_path(path: Path | str, fs: FileSystem | None = None) -> PathKind:
    """Classify a path by its own metadata.

    Order matters: absence wins, then a link is a link even when it
    points at a directory (or at nothing), then directories, then
    everything else.

    Args:
        path: Path to classify.
        fs: Filesystem to query. Defaults to the local filesystem.

    Returns:
        PathKind.MISSING if nothing is there, PathKind.OTHER if the entry
        exists but cannot be inspected.
    """
    fs = fs or LOCAL_FS
    path = Path(path)

    if not fs.lexists(path):
        return PathKind.MISSING

    try:
        mode = fs.lstat(path).st_mode
    except FileNotFoundError:
        # Vanished between the two calls
        return PathKind.MISSING
    except (OSError, ValueError):
        return PathKind.OTHER

    if stat.S_ISLNK(mode):
        return PathKind.SYMLINK
    if stat.S_ISDIR(mode):
        return PathKind.DIRECTORY
    return PathKind.OTHER


def is_directory_like(path: Path | str, fs: FileSystem | None = None) -> bool:
    """Check whether a path dereferences to a directory.

    Args:
        path: Path to check. Symbolic links are followed.
        fs: Filesystem to query. Defaults to the local filesystem.

    Returns:
        True if the path exists and lands on a directory, False otherwise
        (including broken links and permission errors).
    """
    fs = fs or LOCAL_FS
    try:
        return stat.S_ISDIR(fs.stat(Path(path)).st_mode)
    except (OSError, ValueError):
        return False
