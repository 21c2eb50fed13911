"""User configuration for filefind.

Configuration is stored in ~/.config/filefind/config.toml. A missing file
is not an error: every setting has a default.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from filefind.core.paths import get_config_path

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "%m/%d/%Y %H:%M"


class SearchConfig(BaseModel):
    """Settings shared by the interactive session and the search commands.

    Attributes:
        default_root: Directory searched when no root is given.
        date_format: strptime format for modification-time input.
        follow_symlinks: Expand symlinked directories during traversal.
        sort_results: Sort result paths before printing.
    """

    model_config = ConfigDict(extra="forbid")

    default_root: Annotated[
        str | None,
        Field(description="Directory searched when none is given"),
    ] = None
    date_format: Annotated[
        str,
        Field(description="strptime format for date and time input"),
    ] = DEFAULT_DATE_FORMAT
    follow_symlinks: Annotated[
        bool,
        Field(description="Expand symlinked directories"),
    ] = False
    sort_results: Annotated[
        bool,
        Field(description="Sort result paths before printing"),
    ] = False

    @field_validator("date_format")
    @classmethod
    def validate_date_format(cls, v: str) -> str:
        """Require at least one strftime directive."""
        if "%" not in v:
            msg = f"date_format must contain a '%' directive, got {v!r}"
            raise ValueError(msg)
        return v


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> SearchConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated SearchConfig. Defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return SearchConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return SearchConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: SearchConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written to a temporary file in the same directory first
    and then moved into place with os.replace().

    Args:
        config: Configuration to save.
        path: Destination. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = config.model_dump(exclude_none=True)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(tmp_path, config_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
