"""XDG-compliant path management for sessionlink.

This module provides standardized paths following the XDG Base Directory
Specification for configuration, plus the location of the agent's
session folders.

XDG defaults:
- Config: ~/.config/sessionlink/
"""

import os
import re
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "sessionlink"

# Where the agent host keeps one folder per working directory
DEFAULT_SESSIONS_ROOT = Path("~/.pi/agent/sessions")

_SEPARATOR_RE = re.compile(r"[/\\:]")


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/sessionlink/ (or XDG_CONFIG_HOME/sessionlink/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/sessionlink/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme configuration path.

    Returns:
        Path to ~/.config/sessionlink/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def ensure_config_dir() -> Path:
    """Create the configuration directory if it doesn't exist.

    Returns:
        Path to the configuration directory.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    path = get_config_dir()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create config directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create config directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path


def session_dir_name(cwd: Path | str) -> str:
    """Get the session folder name the agent host uses for a working directory.

    The leading separator is dropped and every remaining path separator
    or drive colon becomes a dash, wrapped in ``--``.

    Example:
        >>> session_dir_name("/home/user/project")
        '--home-user-project--'

    Args:
        cwd: Working directory.

    Returns:
        Folder name under the sessions root.
    """
    text = str(cwd)
    if text[:1] in ("/", "\\"):
        text = text[1:]
    return f"--{_SEPARATOR_RE.sub('-', text)}--"
