"""CLI package for filefind.

This package contains the Typer application and all subcommands.
"""

from filefind.cli.main import app

__all__ = ["app"]
