"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer
from rich.markup import escape

from filefind import __version__
from filefind.cli.commands import config, interactive, search
from filefind.cli.commands.interactive import InteractiveSession
from filefind.core.config import ConfigError, SearchConfig, load_config
from filefind.utils.formatting import print_error
from filefind.utils.log import configure_logging

# Create main Typer app
app = typer.Typer(
    name="filefind",
    help="Search a directory tree for files and directories.",
    invoke_without_command=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"filefind version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """filefind - Search a directory tree for files and directories.

    Without a command, starts the interactive menu.
    """
    configure_logging(verbose)

    # The config commands read the file themselves so init --force can repair it
    settings = SearchConfig()
    if ctx.invoked_subcommand != "config":
        try:
            settings = load_config()
        except ConfigError as e:
            print_error(escape(str(e)))
            raise typer.Exit(code=1) from e

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config"] = settings

    if ctx.invoked_subcommand is None:
        InteractiveSession(settings, quiet=quiet).run()


# Register commands
app.command(name="files")(search.find_files)
app.command(name="dirs")(search.find_directories)
app.command(name="match")(search.find_matching)
app.command(name="since")(search.find_modified_since)
app.command(name="interactive")(interactive.interactive)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
