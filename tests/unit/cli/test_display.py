"""Unit tests for cli/display.py.

Tests for shared Rich display functions used by the search commands and the
interactive session.
"""

import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from filefind.cli.display import (
    OutputFormat,
    create_results_table,
    export_results,
    print_numbered,
    print_results,
    print_summary,
)
from filefind.core.theme import get_theme


def _capture_console_output(func: object, *args: object, **kwargs: object) -> str:
    """Capture Rich console output by temporarily replacing the console.

    Patches the module-level console used by display functions and captures
    output to a StringIO buffer.
    """
    import filefind.cli.display as display_mod
    import filefind.utils.formatting as fmt_mod

    buf = io.StringIO()
    test_console = Console(theme=get_theme(), file=buf, color_system=None, width=200)

    original_display_console = display_mod.console
    original_fmt_console = fmt_mod.console
    display_mod.console = test_console
    fmt_mod.console = test_console
    try:
        func(*args, **kwargs)  # type: ignore[operator]
    finally:
        display_mod.console = original_display_console
        fmt_mod.console = original_fmt_console

    return buf.getvalue()


# ===========================================================================
# print_numbered
# ===========================================================================


class TestPrintNumbered:
    """Tests for print_numbered."""

    def test_numbers_start_at_one(self) -> None:
        """Each path is prefixed with its 1-based position."""
        output = _capture_console_output(print_numbered, ["/a/one", "/a/two"])

        assert output.splitlines() == ["1. /a/one", "2. /a/two"]

    def test_empty_list_prints_nothing(self) -> None:
        """No paths, no output."""
        assert _capture_console_output(print_numbered, []) == ""

    def test_markup_in_paths_is_literal(self) -> None:
        """Square brackets in names are printed, not interpreted."""
        output = _capture_console_output(print_numbered, ["/tmp/[bold]x[/bold]"])

        assert "[bold]x[/bold]" in output


# ===========================================================================
# create_results_table
# ===========================================================================


class TestCreateResultsTable:
    """Tests for create_results_table."""

    def test_has_columns(self) -> None:
        """Table has #, Type and Path columns."""
        table = create_results_table([])
        column_names = [col.header for col in table.columns]
        assert column_names == ["#", "Type", "Path"]

    def test_default_title(self) -> None:
        """Table uses 'Search Results' as default title."""
        assert create_results_table([]).title == "Search Results"

    def test_entry_types(self, tmp_path: Path) -> None:
        """Directories, files and vanished entries are told apart."""
        directory = tmp_path / "sub"
        directory.mkdir()
        regular = tmp_path / "note.txt"
        regular.write_text("x")
        gone = tmp_path / "gone"

        table = create_results_table([str(directory), str(regular), str(gone)])
        assert table.row_count == 3

        buf = io.StringIO()
        test_console = Console(theme=get_theme(), file=buf, color_system=None, width=300)
        test_console.print(table)
        output = buf.getvalue()

        assert "directory" in output
        assert "file" in output
        assert "note.txt" in output
        assert " - " in output


# ===========================================================================
# print_results
# ===========================================================================


class TestPrintResults:
    """Tests for print_results."""

    def test_list_format(self) -> None:
        """LIST renders the numbered listing."""
        output = _capture_console_output(print_results, ["/x"], OutputFormat.LIST)
        assert output.strip() == "1. /x"

    def test_json_format(self) -> None:
        """JSON renders a parseable array."""
        paths = ["/x/a", "/x/b"]
        output = _capture_console_output(print_results, paths, OutputFormat.JSON)
        assert json.loads(output) == paths

    def test_table_format(self) -> None:
        """TABLE renders the results table."""
        output = _capture_console_output(print_results, ["/x/a"], OutputFormat.TABLE)
        assert "Search Results" in output
        assert "/x/a" in output


# ===========================================================================
# print_summary
# ===========================================================================


class TestPrintSummary:
    """Tests for print_summary."""

    def test_no_results(self) -> None:
        """Zero results prints the no-match message."""
        output = _capture_console_output(print_summary, 0, 0)
        assert "No matching entries found." in output

    def test_singular(self) -> None:
        """One result uses the singular noun."""
        output = _capture_console_output(print_summary, 1, 1)
        assert "Found 1 matching entry" in output
        assert "entries" not in output

    def test_plural(self) -> None:
        """Several results use the plural noun."""
        output = _capture_console_output(print_summary, 3, 3)
        assert "Found 3 matching entries" in output

    def test_limited(self) -> None:
        """A truncated listing says how much was shown."""
        output = _capture_console_output(print_summary, 2, 5, 2)
        assert "(showing 2 of 5, limited to 2)" in output

    def test_limit_not_reached(self) -> None:
        """A limit above the result count adds no extra line."""
        output = _capture_console_output(print_summary, 3, 3, 10)
        assert "showing" not in output


# ===========================================================================
# export_results
# ===========================================================================


class TestExportResults:
    """Tests for export_results."""

    def test_writes_json(self, tmp_path: Path) -> None:
        """Paths are written as a JSON array and the resolved path returned."""
        target = tmp_path / "nested" / "out.json"

        written = export_results(["/a", "/b"], target)

        assert written == target.resolve()
        assert json.loads(target.read_text()) == ["/a", "/b"]

    def test_directory_target(self, tmp_path: Path) -> None:
        """An existing directory is rejected."""
        with pytest.raises(IsADirectoryError):
            export_results(["/a"], tmp_path)
