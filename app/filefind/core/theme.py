"""Colors for filefind output.

The bundled ``data/theme.toml`` holds the defaults; a ``theme.toml`` in the
config directory may override any of them. The merged colors become the
Rich theme shared by both consoles.
"""

import logging
import re
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator
from rich.theme import Theme

from filefind.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) for every style filefind prints with."""

    model_config = ConfigDict(extra="forbid")

    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"
    success: str = "#03b971"
    error: str = "#f53263"
    info: str = "#0ec1c8"
    index: str = "#0e8ac8"
    path_file: str = "#ffffff"
    path_dir: str = "#69B9A1"

    @field_validator("*")
    @classmethod
    def check_hex(cls, v: str) -> str:
        color = v.strip()
        if not _HEX_COLOR.fullmatch(color):
            msg = f"not a hex color: {v!r}"
            raise ValueError(msg)
        return color


def get_bundled_theme_path() -> Path:
    """Return the path of the theme shipped inside the package."""
    return Path(str(resources.files("filefind.data").joinpath("theme.toml")))


def _read_colors(path: Path) -> dict[str, str]:
    """Read the ``[colors]`` table of a theme file.

    A missing or unreadable file yields an empty table; problems other than
    absence are logged.
    """
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return {}
    return {str(key): value for key, value in colors.items() if isinstance(value, str)}


def load_theme() -> ThemeColors:
    """Merge bundled and user colors.

    Returns:
        Validated colors. If the merged set is invalid the built-in
        defaults are used instead.
    """
    merged = {**_read_colors(get_bundled_theme_path()), **_read_colors(get_user_theme_path())}
    try:
        return ThemeColors(**merged)
    except ValueError as e:
        logger.warning("Invalid theme, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme from ``colors`` (loaded when omitted)."""
    colors = colors or load_theme()
    return Theme(
        {
            "muted": colors.muted,
            "dim": colors.muted,
            "border": colors.border,
            "bold_header": f"bold {colors.header}",
            "success": colors.success,
            "error": f"bold {colors.error}",
            "info": colors.info,
            "index": colors.index,
            "path.file": colors.path_file,
            "path.dir": f"bold {colors.path_dir}",
        }
    )


@cache
def get_theme() -> Theme:
    """Return the Rich theme, built once per process."""
    return get_rich_theme()
