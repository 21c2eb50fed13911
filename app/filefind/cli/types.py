"""Shared types and utilities for CLI commands.

This module provides helpers used by both the search commands and the
interactive session.
"""

from datetime import datetime

import typer

from filefind.core.config import SearchConfig


class InvalidDateTimeError(ValueError):
    """Raised when a date and time string does not match the expected format."""


def get_config(ctx: typer.Context) -> SearchConfig:
    """Get the configuration loaded by the main callback.

    Falls back to defaults when a command is invoked without the callback
    having stored one (e.g. when called directly in tests).

    Args:
        ctx: Typer context of the running command.

    Returns:
        Effective SearchConfig.
    """
    obj = ctx.find_root().obj
    if isinstance(obj, dict) and isinstance(obj.get("config"), SearchConfig):
        return obj["config"]
    return SearchConfig()


def is_quiet(ctx: typer.Context) -> bool:
    """Check whether --quiet was passed to the main application."""
    obj = ctx.find_root().obj
    return bool(isinstance(obj, dict) and obj.get("quiet"))


def parse_timestamp(value: str, date_format: str) -> datetime:
    """Parse a local date and time string.

    Args:
        value: User input, e.g. "04/20/2021 14:45".
        date_format: strptime format the input has to follow.

    Returns:
        Naive datetime interpreted as local time.

    Raises:
        InvalidDateTimeError: If the input doesn't match the format.
    """
    try:
        return datetime.strptime(value.strip(), date_format)
    except ValueError as e:
        raise InvalidDateTimeError(f"Invalid date and time: {value!r}") from e


def describe_date_format(date_format: str) -> str:
    """Render a strptime format in the familiar MM/dd/yyyy HH:mm notation."""
    replacements = {
        "%m": "MM",
        "%d": "dd",
        "%Y": "yyyy",
        "%y": "yy",
        "%H": "HH",
        "%M": "mm",
        "%S": "ss",
    }
    result = date_format
    for directive, label in replacements.items():
        result = result.replace(directive, label)
    return result
