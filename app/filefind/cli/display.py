"""Shared Rich display functions for search results.

Provides the numbered listing, table and JSON renderings used by the
search commands and the interactive session, plus JSON export.
"""

import json
import os
from enum import Enum
from pathlib import Path

from rich.markup import escape
from rich.table import Table

from filefind.utils.formatting import console, print_info


class OutputFormat(str, Enum):
    """Output format options for search results."""

    LIST = "list"
    TABLE = "table"
    JSON = "json"


def print_numbered(paths: list[str]) -> None:
    """Print paths as a 1-indexed list, one per line.

    Args:
        paths: Absolute paths to print.
    """
    for number, path in enumerate(paths, start=1):
        console.print(f"[index]{number}.[/] {escape(path)}", soft_wrap=True, highlight=False)


def create_results_table(paths: list[str], title: str = "Search Results") -> Table:
    """Create a Rich table displaying result paths.

    Directories are styled differently from other entries. Entries that
    vanished since the search are shown with a "-" type.

    Args:
        paths: Absolute paths to display.
        title: Table title.

    Returns:
        Rich Table configured for result display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", justify="right", style="index")
    table.add_column("Type", width=9)
    table.add_column("Path", overflow="fold")

    for number, path in enumerate(paths, start=1):
        if os.path.isdir(path):
            kind, style = "directory", "path.dir"
        elif os.path.lexists(path):
            kind, style = "file", "path.file"
        else:
            kind, style = "-", "muted"
        table.add_row(str(number), f"[muted]{kind}[/]", f"[{style}]{escape(path)}[/]")

    return table


def print_json(paths: list[str]) -> None:
    """Print paths as a JSON array."""
    console.print_json(json.dumps(paths))


def print_results(paths: list[str], output_format: OutputFormat = OutputFormat.LIST) -> None:
    """Print result paths in the requested format.

    Args:
        paths: Absolute paths to print.
        output_format: Rendering to use.
    """
    if output_format == OutputFormat.JSON:
        print_json(paths)
    elif output_format == OutputFormat.TABLE:
        console.print(create_results_table(paths))
    else:
        print_numbered(paths)


def print_summary(shown: int, total: int, limit: int | None = None) -> None:
    """Print a dim summary line after a result listing.

    Args:
        shown: Number of paths that were printed.
        total: Number of paths the query returned.
        limit: Limit that was applied, if any.
    """
    if total == 0:
        print_info("No matching entries found.")
        return
    noun = "entry" if total == 1 else "entries"
    console.print(f"\n[dim]Found {total} matching {noun}[/dim]")
    if limit and shown < total:
        console.print(f"[dim](showing {shown} of {total}, limited to {limit})[/dim]")


def export_results(paths: list[str], export_path: Path) -> Path:
    """Export result paths to a JSON file.

    Args:
        paths: Absolute paths to export.
        export_path: Destination file.

    Returns:
        Resolved path of the written file.

    Raises:
        IsADirectoryError: If ``export_path`` is an existing directory.
        OSError: If the file cannot be written.
    """
    export_path = export_path.resolve()
    if export_path.is_dir():
        msg = f"Export path is a directory: {export_path}"
        raise IsADirectoryError(msg)

    export_path.parent.mkdir(parents=True, exist_ok=True)
    export_path.write_text(json.dumps(paths, indent=2))
    return export_path
