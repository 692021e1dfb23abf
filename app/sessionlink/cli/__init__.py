"""CLI package for sessionlink.

This package contains the Typer application and all subcommands.
"""

from sessionlink.cli.main import app

__all__ = ["app"]
