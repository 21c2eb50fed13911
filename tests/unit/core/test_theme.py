"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path
from unittest.mock import patch

import pytest
from rich.theme import Theme

from filefind.core.theme import (
    ThemeColors,
    _read_colors,
    get_bundled_theme_path,
    get_rich_theme,
    get_theme,
    load_theme,
)


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.header == "#69B9A1"
        assert colors.index == "#0e8ac8"

    @pytest.mark.parametrize("color", ["#AABBCC", "#abc", " #123456 "])
    def test_valid_hex_colors(self, color: str) -> None:
        """Short and long hex codes are accepted, surrounding blanks dropped."""
        assert ThemeColors(muted=color).muted == color.strip()

    @pytest.mark.parametrize("color", ["ffffff", "#ff", "#gggggg", "#abcd", "red"])
    def test_invalid_colors(self, color: str) -> None:
        """Anything but #RGB or #RRGGBB is rejected."""
        with pytest.raises(ValueError, match="not a hex color"):
            ThemeColors(muted=color)

    def test_extra_fields_forbidden(self) -> None:
        """ThemeColors rejects unknown fields."""
        with pytest.raises(ValueError):
            ThemeColors(unknown_field="#ffffff")  # type: ignore[call-arg]


class TestReadColors:
    """Tests for _read_colors."""

    def test_reads_colors_table(self, tmp_path: Path) -> None:
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\nmuted = "#000000"\nheader = "#aabbcc"\nskip = 3\n')

        assert _read_colors(theme_file) == {"muted": "#000000", "header": "#aabbcc"}

    def test_missing_file(self, tmp_path: Path) -> None:
        assert _read_colors(tmp_path / "nonexistent.toml") == {}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("not valid [ toml syntax")

        assert _read_colors(theme_file) == {}

    def test_colors_not_a_table(self, tmp_path: Path) -> None:
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('colors = "#fff"\n')

        assert _read_colors(theme_file) == {}


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_bundled_theme_matches_defaults(self) -> None:
        """The shipped theme file holds exactly the built-in defaults."""
        assert get_bundled_theme_path().is_file()
        assert ThemeColors(**_read_colors(get_bundled_theme_path())) == ThemeColors()

    def test_user_theme_overrides_bundled(self, tmp_path: Path) -> None:
        """A partial user theme overrides only the colors it names."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nheader = "#ff0000"\n')

        with patch("filefind.core.theme.get_user_theme_path", return_value=user_theme):
            colors = load_theme()

        assert colors.header == "#ff0000"
        assert colors.index == ThemeColors().index

    def test_falls_back_to_defaults_on_invalid_colors(self, tmp_path: Path) -> None:
        """An invalid user color falls back to the default theme."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nheader = "red"\n')

        with patch("filefind.core.theme.get_user_theme_path", return_value=user_theme):
            colors = load_theme()

        assert colors == ThemeColors()


class TestGetRichTheme:
    """Tests for get_rich_theme and get_theme."""

    def test_returns_rich_theme(self) -> None:
        assert isinstance(get_rich_theme(), Theme)

    def test_includes_styles_used_by_cli(self) -> None:
        """Theme defines every style name the CLI prints with."""
        theme = get_rich_theme(ThemeColors())

        for name in ("info", "error", "success", "muted", "dim", "index"):
            assert name in theme.styles
        for name in ("bold_header", "border", "path.file", "path.dir"):
            assert name in theme.styles

    def test_get_theme_is_cached(self) -> None:
        """get_theme builds the theme once."""
        assert get_theme() is get_theme()
