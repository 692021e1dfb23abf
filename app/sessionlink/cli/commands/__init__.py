"""CLI commands for sessionlink.

This package contains all subcommand implementations.
"""

from sessionlink.cli.commands import backups, config, folders, link, sessions

__all__ = ["backups", "config", "folders", "link", "sessions"]
