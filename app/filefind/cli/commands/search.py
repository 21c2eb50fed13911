"""Non-interactive search commands.

Provides one command per query: files, dirs, match and since. They share
their output options and fall back to the configured default root.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from filefind.cli.display import (
    OutputFormat,
    export_results,
    print_results,
    print_summary,
)
from filefind.cli.types import (
    InvalidDateTimeError,
    describe_date_format,
    get_config,
    is_quiet,
    parse_timestamp,
)
from filefind.search import DirectoryNotFoundError, SearchError, SearchMode, run_query
from filefind.utils.formatting import print_error, print_info

logger = logging.getLogger(__name__)

RootArgument = Annotated[
    str | None,
    typer.Argument(
        help="Directory to search. Defaults to default_root from the config.",
        show_default=False,
    ),
]
FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
]
SortOption = Annotated[
    bool,
    typer.Option("--sort", "-s", help="Sort results by path."),
]
LimitOption = Annotated[
    int | None,
    typer.Option("--limit", "-l", min=1, help="Limit number of results."),
]
ExportOption = Annotated[
    Path | None,
    typer.Option("--export", "-e", help="Export all results to a JSON file."),
]
FollowOption = Annotated[
    bool,
    typer.Option("--follow-symlinks", "-L", help="Descend into symlinked directories."),
]


def find_files(
    ctx: typer.Context,
    root: RootArgument = None,
    output_format: FormatOption = OutputFormat.LIST,
    sort: SortOption = False,
    limit: LimitOption = None,
    export_path: ExportOption = None,
    follow_symlinks: FollowOption = False,
) -> None:
    """List every file below ROOT."""
    _run_search(
        ctx,
        SearchMode.FILES,
        root,
        output_format=output_format,
        sort=sort,
        limit=limit,
        export_path=export_path,
        follow_symlinks=follow_symlinks,
    )


def find_directories(
    ctx: typer.Context,
    root: RootArgument = None,
    output_format: FormatOption = OutputFormat.LIST,
    sort: SortOption = False,
    limit: LimitOption = None,
    export_path: ExportOption = None,
    follow_symlinks: FollowOption = False,
) -> None:
    """List every directory below ROOT (ROOT itself excluded)."""
    _run_search(
        ctx,
        SearchMode.DIRECTORIES,
        root,
        output_format=output_format,
        sort=sort,
        limit=limit,
        export_path=export_path,
        follow_symlinks=follow_symlinks,
    )


def find_matching(
    ctx: typer.Context,
    pattern: Annotated[
        str,
        typer.Argument(help="Name pattern: ? matches one character, * any sequence."),
    ],
    root: RootArgument = None,
    output_format: FormatOption = OutputFormat.LIST,
    sort: SortOption = False,
    limit: LimitOption = None,
    export_path: ExportOption = None,
    follow_symlinks: FollowOption = False,
) -> None:
    """List files and directories below ROOT whose name matches PATTERN."""
    _run_search(
        ctx,
        SearchMode.PATTERN,
        root,
        pattern=pattern,
        output_format=output_format,
        sort=sort,
        limit=limit,
        export_path=export_path,
        follow_symlinks=follow_symlinks,
    )


def find_modified_since(
    ctx: typer.Context,
    when: Annotated[
        str,
        typer.Argument(
            metavar="DATETIME",
            help="Local date and time, e.g. '04/20/2021 14:45'.",
        ),
    ],
    root: RootArgument = None,
    output_format: FormatOption = OutputFormat.LIST,
    sort: SortOption = False,
    limit: LimitOption = None,
    export_path: ExportOption = None,
    follow_symlinks: FollowOption = False,
) -> None:
    """List files and directories below ROOT modified after DATETIME."""
    config = get_config(ctx)
    try:
        since = parse_timestamp(when, config.date_format)
    except InvalidDateTimeError as e:
        print_error(f"{e}. Expected format: {describe_date_format(config.date_format)}")
        raise typer.Exit(code=2) from e

    _run_search(
        ctx,
        SearchMode.MODIFIED,
        root,
        since=since,
        output_format=output_format,
        sort=sort,
        limit=limit,
        export_path=export_path,
        follow_symlinks=follow_symlinks,
    )


# === Private helper functions ===


def _run_search(
    ctx: typer.Context,
    mode: SearchMode,
    root: str | None,
    *,
    pattern: str | None = None,
    since: datetime | None = None,
    output_format: OutputFormat,
    sort: bool,
    limit: int | None,
    export_path: Path | None,
    follow_symlinks: bool,
) -> None:
    """Run one query and render its results."""
    config = get_config(ctx)

    root = root if root is not None else config.default_root
    if root is None:
        print_error("No root directory given and no default_root configured.")
        raise typer.Exit(code=2)

    follow = follow_symlinks or config.follow_symlinks
    logger.debug("Running %s search in %s", mode.value, root)

    try:
        paths = run_query(mode, root, pattern=pattern, since=since, follow_symlinks=follow)
    except DirectoryNotFoundError as e:
        print_error(escape(f"{e} ({e.path})"))
        raise typer.Exit(code=1) from e
    except SearchError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    if sort or config.sort_results:
        paths.sort()

    display_paths = paths[:limit] if limit else paths

    if export_path is not None:
        try:
            written = export_results(paths, export_path)  # Export ALL, not limited
        except OSError as e:
            print_error(escape(f"Failed to export: {e}"))
            raise typer.Exit(code=1) from e
        if output_format != OutputFormat.JSON:
            print_info(escape(f"Results exported to {written}"))

    print_results(display_paths, output_format)

    if output_format != OutputFormat.JSON and not is_quiet(ctx):
        print_summary(len(display_paths), len(paths), limit)
