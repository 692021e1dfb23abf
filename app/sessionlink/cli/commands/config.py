"""Configuration commands.

Show the effective configuration or write a default config file.
"""

from typing import Annotated

import tomli_w
import typer

from sessionlink.cli.types import require_config
from sessionlink.core.config import (
    ConfigError,
    SessionLinkConfig,
    config_to_dict,
    save_config,
)
from sessionlink.core.paths import ensure_config_dir, get_config_path
from sessionlink.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize the configuration.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Print the effective configuration as TOML."""
    config = require_config()
    path = get_config_path()

    source = str(path) if path.exists() else "defaults"
    console.print(f"[dim]# source: {source}[/dim]")
    console.print(tomli_w.dumps(config_to_dict(config)), markup=False, highlight=False)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    path = get_config_path()
    if path.exists() and not force:
        print_error(f"Config already exists: {path}")
        print_info("Use --force to overwrite.")
        raise typer.Exit(code=1)

    try:
        ensure_config_dir()
        saved = save_config(SessionLinkConfig(), path)
    except (RuntimeError, ConfigError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
