"""Filesystem capability used by the linking components.

Every component that touches the disk takes an optional ``fs`` argument.
Passing a different ``FileSystem`` lets tests inject failures or run
against a fake tree; omitting it uses the real local filesystem.
"""

import os
import shutil
import time
from abc import ABC, abstractmethod
from pathlib import Path


class FileSystem(ABC):
    """Abstract set of filesystem primitives.

    Methods raise ``OSError`` exactly like their ``os`` counterparts;
    callers decide which failures are degraded and which propagate.
    """

    @abstractmethod
    def lexists(self, path: Path) -> bool:
        """Return True if an entry exists at path, without following links."""

    @abstractmethod
    def lstat(self, path: Path) -> os.stat_result:
        """Return the entry's own metadata (links are not followed)."""

    @abstractmethod
    def stat(self, path: Path) -> os.stat_result:
        """Return the metadata of whatever path dereferences to."""

    @abstractmethod
    def listdir(self, path: Path) -> list[str]:
        """Return the names of the direct children of a directory."""

    @abstractmethod
    def rename(self, src: Path, dst: Path) -> None:
        """Atomically rename src to dst on the same volume."""

    @abstractmethod
    def rmtree(self, path: Path) -> None:
        """Remove a real directory and everything below it."""

    @abstractmethod
    def unlink(self, path: Path) -> None:
        """Remove a single non-directory entry (file or link)."""

    @abstractmethod
    def symlink_dir(self, target: Path, link: Path) -> None:
        """Create a directory-flavored symbolic link at link pointing to target."""

    @abstractmethod
    def makedirs(self, path: Path) -> None:
        """Create a directory and any missing ancestors."""

    @abstractmethod
    def now_millis(self) -> int:
        """Return the current Unix time in milliseconds."""


class LocalFileSystem(FileSystem):
    """FileSystem backed by ``os`` and ``shutil``."""

    def lexists(self, path: Path) -> bool:
        return os.path.lexists(path)

    def lstat(self, path: Path) -> os.stat_result:
        return os.lstat(path)

    def stat(self, path: Path) -> os.stat_result:
        return os.stat(path)

    def listdir(self, path: Path) -> list[str]:
        return os.listdir(path)

    def rename(self, src: Path, dst: Path) -> None:
        os.rename(src, dst)

    def rmtree(self, path: Path) -> None:
        shutil.rmtree(path)

    def unlink(self, path: Path) -> None:
        os.unlink(path)

    def symlink_dir(self, target: Path, link: Path) -> None:
        os.symlink(target, link, target_is_directory=True)

    def makedirs(self, path: Path) -> None:
        os.makedirs(path, exist_ok=True)

    def now_millis(self) -> int:
        return time.time_ns() // 1_000_000


# Shared instance used when no filesystem is passed explicitly
LOCAL_FS: FileSystem = LocalFileSystem()
