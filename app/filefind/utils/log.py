"""Logging setup for the CLI.

Library modules only create loggers; handlers are attached here when the
user asks for verbose output.
"""

import logging

from rich.logging import RichHandler

from filefind.utils.formatting import err_console


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: If True, log at DEBUG level; otherwise only warnings.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )
    logging.getLogger("filefind").setLevel(level)
