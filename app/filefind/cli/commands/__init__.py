"""CLI commands for filefind.

This package contains all subcommand implementations.
"""

from filefind.cli.commands import config, interactive, search

__all__ = ["config", "interactive", "search"]
