"""Config command implementation.

Shows the effective configuration and writes a default config file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from filefind.core.config import ConfigError, SearchConfig, load_config, save_config
from filefind.core.paths import ensure_config_dir, get_config_path
from filefind.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize the filefind configuration.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective configuration."""
    path = get_config_path()
    try:
        config = load_config(path)
    except ConfigError as e:
        print_error(escape(str(e)))
        print_info("Run 'filefind config init --force' to replace it.")
        raise typer.Exit(code=1) from e
    source = str(path) if path.exists() else f"{path} (not found, using defaults)"

    console.print("[bold]Configuration[/bold]")
    console.print(f"  File: [muted]{escape(source)}[/muted]")
    console.print()
    console.print(f"  default_root: [info]{escape(config.default_root or '-')}[/info]")
    console.print(f"  date_format: [info]{escape(config.date_format)}[/info]")
    console.print(f"  follow_symlinks: [info]{config.follow_symlinks}[/info]")
    console.print(f"  sort_results: [info]{config.sort_results}[/info]")


@app.command()
def init(
    default_root: Annotated[
        Path | None,
        typer.Option("--root", "-r", help="Default root directory to store."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    path = get_config_path()
    if path.exists() and not force:
        print_error(escape(f"Config already exists: {path}"))
        print_info("Use --force to overwrite.")
        raise typer.Exit(code=1)

    root = str(default_root.expanduser().resolve()) if default_root else None
    try:
        ensure_config_dir()
        saved_path = save_config(SearchConfig(default_root=root), path)
    except (ConfigError, RuntimeError) as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e
    print_success(escape(f"Config created: {saved_path}"))
