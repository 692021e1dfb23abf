"""Reversible replacement of a session folder by a symbolic link.

Creating a transaction moves the current folder aside and links the
target in its place. The caller then either commits (the moved-aside
folder is deleted) or rolls back (the link is removed and the folder is
moved back). Only one of the two ever takes effect.
"""

import logging
import os
from pathlib import Path
from types import TracebackType
from typing import Self

from sessionlink.linking.backup import make_unique_backup_path
from sessionlink.linking.classifier import classify_path, is_directory_like
from sessionlink.linking.errors import (
    LinkCreationError,
    RefusedOverwriteError,
    TargetNotDirectoryError,
)
from sessionlink.linking.fs import LOCAL_FS, FileSystem
from sessionlink.linking.models import PathKind
from sessionlink.linking.removal import safe_remove_path

logger = logging.getLogger(__name__)


class LinkTransaction:
    """A symlink swap waiting to be committed or rolled back.

    Instances are built with :meth:`create` (or
    :func:`create_link_transaction`); by the time one exists the
    filesystem has already changed. The transaction owns the backup it
    created and nothing else under the same parent.

    Used as a context manager, leaving the block without an explicit
    :meth:`commit` rolls the change back.

    Example:
        >>> with create_link_transaction(current, target) as tx:
        ...     if user_confirms():
        ...         tx.commit()
    """

    def __init__(
        self,
        current_path: Path,
        target_path: Path,
        backup_path: Path | None,
        fs: FileSystem,
    ) -> None:
        self._current_path = current_path
        self._target_path = target_path
        self._backup_path = backup_path
        self._fs = fs
        self._closed = False

    @classmethod
    def create(
        cls,
        current_path: Path | str,
        target_path: Path | str,
        *,
        fs: FileSystem | None = None,
    ) -> Self:
        """Displace the current folder and link the target in its place.

        Either both steps happen or the filesystem is left as it was and
        an error is raised.

        Args:
            current_path: Session folder to replace. May be missing, a
                directory or a symbolic link.
            target_path: Existing directory the link should point at.
            fs: Filesystem to act on. Defaults to the local filesystem.

        Returns:
            An open transaction.

        Raises:
            TargetNotDirectoryError: If target does not resolve to a directory.
            RefusedOverwriteError: If current is a file or another unsupported entry.
            LinkCreationError: If the symbolic link could not be created.
            OSError: If the parent folder cannot be created or the current
                folder cannot be moved aside (nothing has changed then).
        """
        fs = fs or LOCAL_FS
        current = Path(os.path.abspath(current_path))
        target = Path(os.path.abspath(target_path))

        if not is_directory_like(target, fs):
            raise TargetNotDirectoryError(target)

        current_kind = classify_path(current, fs)
        if current_kind == PathKind.OTHER:
            raise RefusedOverwriteError(current)

        fs.makedirs(current.parent)

        backup: Path | None = None
        if current_kind != PathKind.MISSING:
            backup = make_unique_backup_path(current, fs)
            fs.rename(current, backup)
            logger.debug("Displaced %s -> %s", current, backup)

        try:
            fs.symlink_dir(target, current)
        except OSError as e:
            if backup is not None and fs.lexists(backup):
                try:
                    fs.rename(backup, current)
                except OSError as restore_error:
                    logger.warning(
                        "Could not restore %s from %s: %s", current, backup, restore_error
                    )
            raise LinkCreationError(current, target, e) from e

        logger.debug("Linked %s -> %s", current, target)
        return cls(current, target, backup, fs)

    @property
    def current_path(self) -> Path:
        """Absolute path that now holds the symbolic link."""
        return self._current_path

    @property
    def target_path(self) -> Path:
        """Absolute path of the linked directory."""
        return self._target_path

    @property
    def backup_path(self) -> Path | None:
        """Where the displaced entry is parked, None if nothing was displaced."""
        return self._backup_path

    @property
    def closed(self) -> bool:
        """Whether commit or rollback has already run."""
        return self._closed

    def commit(self) -> None:
        """Keep the link and discard the displaced entry.

        Does nothing if the transaction is already closed.
        """
        if self._closed:
            return
        self._closed = True

        if self._backup_path is not None and self._fs.lexists(self._backup_path):
            safe_remove_path(self._backup_path, self._fs)
        logger.debug("Committed link %s -> %s", self._current_path, self._target_path)

    def rollback(self) -> None:
        """Remove the link and put the displaced entry back.

        Only the link entry is removed; the directory it points at is
        never touched. When nothing was displaced the current path simply
        ends up missing again. Does nothing if the transaction is already
        closed.
        """
        if self._closed:
            return
        self._closed = True

        safe_remove_path(self._current_path, self._fs)
        if self._backup_path is not None and self._fs.lexists(self._backup_path):
            try:
                self._fs.rename(self._backup_path, self._current_path)
            except OSError as e:
                logger.warning(
                    "Could not restore %s from %s: %s", self._current_path, self._backup_path, e
                )
                return
        logger.debug("Rolled back link %s -> %s", self._current_path, self._target_path)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self._closed:
            self.rollback()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<LinkTransaction {self._current_path} -> {self._target_path} ({state})>"


def create_link_transaction(
    current_path: Path | str,
    target_path: Path | str,
    *,
    fs: FileSystem | None = None,
) -> LinkTransaction:
    """Create a link transaction. See :meth:`LinkTransaction.create`."""
    return LinkTransaction.create(current_path, target_path, fs=fs)
