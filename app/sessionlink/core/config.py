"""sessionlink configuration.

Configuration is stored in ~/.config/sessionlink/config.toml. A missing
file is not an error: every setting has a default.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sessionlink.core.paths import DEFAULT_SESSIONS_ROOT, get_config_path

logger = logging.getLogger(__name__)

# Environment override for the sessions root
SESSIONS_ROOT_ENV = "SESSIONLINK_SESSIONS_ROOT"


class SessionLinkConfig(BaseModel):
    """Settings for sessionlink.

    Attributes:
        sessions_root: Directory holding one session folder per working directory.
        preview_limit: Number of sessions shown when previewing a folder.
        confirm_destructive_threshold: A real current folder holding more
            session files than this asks for a second confirmation, since
            committing the link deletes them.
    """

    model_config = ConfigDict(extra="forbid")

    sessions_root: Annotated[
        Path,
        Field(
            description="Root directory of the agent's session folders",
            validate_default=True,
        ),
    ] = DEFAULT_SESSIONS_ROOT
    preview_limit: Annotated[
        int,
        Field(ge=1, le=50, description="Sessions shown per folder preview (1-50)"),
    ] = 5
    confirm_destructive_threshold: Annotated[
        int,
        Field(ge=0, description="Session count above which deletion is confirmed twice"),
    ] = 1

    @field_validator("sessions_root", mode="after")
    @classmethod
    def expand_sessions_root(cls, v: Path) -> Path:
        """Expand a leading ~ in the sessions root."""
        return v.expanduser()


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file is not valid TOML."""


def load_config(path: Path | None = None) -> SessionLinkConfig:
    """Load configuration from a TOML file.

    The ``SESSIONLINK_SESSIONS_ROOT`` environment variable, when set,
    overrides ``sessions_root`` from the file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated SessionLinkConfig (defaults if the file does not exist).

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    data: dict[str, object] = {}
    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read config {config_path}: {e}") from e
    else:
        logger.debug("No config file at %s, using defaults", config_path)

    override = os.environ.get(SESSIONS_ROOT_ENV)
    if override:
        data["sessions_root"] = override

    try:
        return SessionLinkConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def save_config(config: SessionLinkConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The configuration to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = config_to_dict(config)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_to_dict(config: SessionLinkConfig) -> dict[str, object]:
    """Convert a configuration to a TOML-serializable dictionary.

    Args:
        config: The configuration to convert.

    Returns:
        Dictionary with plain str/int values.
    """
    return {
        "sessions_root": str(config.sessions_root),
        "preview_limit": config.preview_limit,
        "confirm_destructive_threshold": config.confirm_destructive_threshold,
    }
