"""Session folder linking.

This module provides path classification, folder enumeration, backup
naming, safe removal and the reversible link transaction.
"""

from sessionlink.linking.backup import find_stale_backups, is_backup_name, make_unique_backup_path
from sessionlink.linking.classifier import classify_path, is_directory_like
from sessionlink.linking.errors import (
    LinkCreationError,
    LinkError,
    RefusedOverwriteError,
    TargetNotDirectoryError,
)
from sessionlink.linking.folders import (
    SESSION_FILE_SUFFIX,
    count_session_files,
    list_folder_choices,
)
from sessionlink.linking.fs import LOCAL_FS, FileSystem, LocalFileSystem
from sessionlink.linking.models import FolderChoice, PathKind, StaleBackup
from sessionlink.linking.removal import safe_remove_path
from sessionlink.linking.transaction import LinkTransaction, create_link_transaction

__all__ = [
    "LOCAL_FS",
    "SESSION_FILE_SUFFIX",
    "FileSystem",
    "FolderChoice",
    "LinkCreationError",
    "LinkError",
    "LinkTransaction",
    "LocalFileSystem",
    "PathKind",
    "RefusedOverwriteError",
    "StaleBackup",
    "TargetNotDirectoryError",
    "classify_path",
    "count_session_files",
    "create_link_transaction",
    "find_stale_backups",
    "is_backup_name",
    "is_directory_like",
    "list_folder_choices",
    "make_unique_backup_path",
    "safe_remove_path",
]
