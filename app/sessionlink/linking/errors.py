"""Exceptions raised while creating a link transaction."""

from pathlib import Path


class LinkError(Exception):
    """Base exception for session link errors.

    Attributes:
        path: The path the failing operation was applied to.
    """

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class TargetNotDirectoryError(LinkError):
    """Raised when the link target does not resolve to a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Target is not a directory: {path}", path)


class RefusedOverwriteError(LinkError):
    """Raised when the current path is neither a directory nor a symlink."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Refusing to overwrite non-directory/non-symlink path: {path}", path)


class LinkCreationError(LinkError):
    """Raised when the OS refuses to create the symbolic link.

    Attributes:
        target: The directory the link was meant to point at.
    """

    def __init__(self, path: Path, target: Path, reason: OSError) -> None:
        super().__init__(f"Failed to create symlink {path} -> {target}: {reason}", path)
        self.target = target
