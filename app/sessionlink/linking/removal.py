"""Removal that never follows a symbolic link."""

import logging
import stat
from pathlib import Path

from sessionlink.linking.fs import LOCAL_FS, FileSystem

logger = logging.getLogger(__name__)


def safe_remove_path(path: Path | str, fs: FileSystem | None = None) -> bool:
    """Remove a path without touching what a link points at.

    A symbolic link (broken or not) is unlinked as a single entry. A real
    directory is removed recursively; nested links are removed as links.
    Any other entry is unlinked. Failures are logged and swallowed: this
    runs as cleanup after an outcome has already been decided.

    Args:
        path: Path to remove.
        fs: Filesystem to act on. Defaults to the local filesystem.

    Returns:
        True if something was removed, False if nothing was there or the
        removal failed.
    """
    fs = fs or LOCAL_FS
    path = Path(path)

    if not fs.lexists(path):
        return False

    try:
        mode = fs.lstat(path).st_mode
        if stat.S_ISDIR(mode):
            fs.rmtree(path)
        else:
            fs.unlink(path)
    except OSError as e:
        logger.warning("Could not remove %s: %s", path, e)
        return False

    logger.debug("Removed %s", path)
    return True
