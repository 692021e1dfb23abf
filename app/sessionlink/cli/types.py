"""Shared types and helpers for CLI commands.

This module provides the option types and location helpers used across
multiple CLI command modules to avoid code duplication.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from sessionlink.core.config import ConfigError, SessionLinkConfig, load_config
from sessionlink.core.paths import session_dir_name
from sessionlink.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options for listing commands."""

    TABLE = "table"
    JSON = "json"


RootOption = Annotated[
    Path | None,
    typer.Option(
        "--root",
        "-r",
        help="Sessions root directory (default: from config).",
    ),
]

CwdOption = Annotated[
    Path | None,
    typer.Option(
        "--cwd",
        help="Working directory whose session folder is current (default: $PWD).",
    ),
]

FormatOption = Annotated[
    OutputFormat,
    typer.Option(
        "--format",
        "-f",
        help="Output format.",
        case_sensitive=False,
    ),
]


@dataclass(frozen=True, slots=True)
class SessionLocation:
    """Where the current session folder lives.

    Attributes:
        config: Effective configuration.
        root: Sessions root directory.
        current_dir: Session folder of the working directory.
    """

    config: SessionLinkConfig
    root: Path
    current_dir: Path

    @property
    def current_name(self) -> str:
        """Entry name of the current session folder under the root."""
        return self.current_dir.name


def require_config() -> SessionLinkConfig:
    """Load the configuration or exit with an error.

    Returns:
        The effective configuration.

    Raises:
        typer.Exit: If the configuration file is invalid.
    """
    try:
        return load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def resolve_location(root: Path | None = None, cwd: Path | None = None) -> SessionLocation:
    """Work out the sessions root and the current session folder.

    Args:
        root: Explicit sessions root, overriding the configuration.
        cwd: Working directory, defaults to the process working directory.

    Returns:
        SessionLocation for the given options.

    Raises:
        typer.Exit: If the configuration file is invalid.
    """
    config = require_config()
    sessions_root = (root or config.sessions_root).expanduser().absolute()
    working_dir = (cwd or Path.cwd()).expanduser().absolute()
    return SessionLocation(
        config=config,
        root=sessions_root,
        current_dir=sessions_root / session_dir_name(working_dir),
    )
