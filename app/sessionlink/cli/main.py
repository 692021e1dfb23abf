"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import locale
import logging
from typing import Annotated

import typer

from sessionlink import __version__
from sessionlink.cli.commands import backups, config, folders, link, sessions

# Create main Typer app
app = typer.Typer(
    name="sessionlink",
    help="Point a session folder at another one, reversibly.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"sessionlink version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr, DEBUG and up when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """sessionlink - share agent sessions between working directories.

    Replace the session folder of the current directory with a symbolic
    link to another folder. Nothing is lost until the link is kept.
    """
    _configure_logging(verbose)

    # Folder names are ordered with the user's collation rules
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logging.getLogger(__name__).debug("Locale not available, using C collation")

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.command(name="folders")(folders.folders)
app.command(name="sessions")(sessions.sessions)
app.command(name="link")(link.link)
app.command(name="backups")(backups.backups)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
