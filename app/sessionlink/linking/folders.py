"""Session folder enumeration.

Lists the folders directly under a sessions root that could serve as a
link target, together with the number of session files each holds.
"""

import locale
import logging
import os
from pathlib import Path

from sessionlink.linking.classifier import classify_path, is_directory_like
from sessionlink.linking.fs import LOCAL_FS, FileSystem
from sessionlink.linking.models import FolderChoice, PathKind

logger = logging.getLogger(__name__)

# Session files written by the agent host
SESSION_FILE_SUFFIX = ".jsonl"


def count_session_files(path: Path | str, fs: FileSystem | None = None) -> int:
    """Count the session files directly inside a folder.

    Only direct children whose name ends with ``.jsonl`` are counted;
    directories carrying that suffix are ignored and nothing is
    traversed recursively.

    Args:
        path: Folder to inspect (links are followed).
        fs: Filesystem to query. Defaults to the local filesystem.

    Returns:
        Number of session files, or 0 if the folder cannot be read.
    """
    fs = fs or LOCAL_FS
    folder = Path(path)

    try:
        names = fs.listdir(folder)
    except (OSError, ValueError) as e:
        logger.debug("Cannot list %s: %s", folder, e)
        return 0

    return sum(
        1
        for name in names
        if name.endswith(SESSION_FILE_SUFFIX) and not is_directory_like(folder / name, fs)
    )


def list_folder_choices(
    root: Path | str,
    current_name: str,
    fs: FileSystem | None = None,
) -> list[FolderChoice]:
    """List the candidate session folders under a root.

    Directories and symbolic links resolving to directories are included;
    files and broken links are not. The folder named ``current_name``
    comes first, the rest follow in locale-aware name order.

    Args:
        root: Sessions root directory. Only its direct children are scanned.
        current_name: Entry name of the current session folder (exact match).
        fs: Filesystem to query. Defaults to the local filesystem.

    Returns:
        Ordered list of FolderChoice, empty if the root does not exist.
    """
    fs = fs or LOCAL_FS
    root = Path(os.path.abspath(root))

    if not is_directory_like(root, fs):
        return []

    try:
        names = fs.listdir(root)
    except PermissionError:
        logger.warning("Permission denied scanning directory: %s", root)
        return []

    choices: list[FolderChoice] = []
    for name in names:
        folder = root / name
        if classify_path(folder, fs) not in (PathKind.DIRECTORY, PathKind.SYMLINK):
            continue
        if not is_directory_like(folder, fs):
            continue

        choices.append(
            FolderChoice(
                name=name,
                path=folder,
                session_count=count_session_files(folder, fs),
                is_current=name == current_name,
            )
        )

    choices.sort(key=_choice_sort_key)
    return choices


def _choice_sort_key(choice: FolderChoice) -> tuple[bool, str, str]:
    """Sort key placing the current folder first, then by collated name.

    Names are case-folded before collation so that the order ignores case
    even under the C locale.
    """
    return (not choice.is_current, locale.strxfrm(choice.name.casefold()), choice.name)
