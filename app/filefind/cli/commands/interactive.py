"""Interactive menu session.

Asks for a root directory, then repeatedly shows the menu and runs the
selected query until the input stream is closed or the user interrupts.
Input errors print one line and the loop continues.
"""

import logging
from datetime import datetime
from typing import Annotated

import typer
from rich.markup import escape
from rich.prompt import Prompt

from filefind.cli.display import print_numbered, print_summary
from filefind.cli.types import (
    InvalidDateTimeError,
    describe_date_format,
    get_config,
    is_quiet,
    parse_timestamp,
)
from filefind.core.config import SearchConfig
from filefind.search import (
    DirectoryNotFoundError,
    SearchMode,
    UnreadableEntryError,
    run_query,
)
from filefind.utils.formatting import console

logger = logging.getLogger(__name__)

BANNER = "-----------File search app-----------"

MENU_LINES = (
    "-(1) Print all files in root directory",
    "-(2) Print all directories in root directory",
    "-(3) Print files in root directory that match a pattern",
    "-(4) Print files in root directory that were last modified after specified date and time",
    "-(5) Change root directory",
)

# Menu number -> query; 5 (change root) is handled separately
MENU_MODES: dict[int, SearchMode] = {
    1: SearchMode.FILES,
    2: SearchMode.DIRECTORIES,
    3: SearchMode.PATTERN,
    4: SearchMode.MODIFIED,
}
CHANGE_ROOT = 5


class InvalidSelectionError(ValueError):
    """Raised when a menu selection is not one of the offered numbers."""


def parse_selection(value: str) -> int:
    """Parse a menu selection.

    Args:
        value: Raw user input.

    Returns:
        Selected menu number (1-5).

    Raises:
        InvalidSelectionError: If the input is not an offered number.
    """
    try:
        choice = int(value.strip())
    except ValueError as e:
        raise InvalidSelectionError(f"Not a number: {value!r}") from e
    if choice not in MENU_MODES and choice != CHANGE_ROOT:
        raise InvalidSelectionError(f"Unknown option: {choice}")
    return choice


class InteractiveSession:
    """Text menu front end over the search queries.

    Args:
        config: Effective configuration.
        root: Initial root directory. If None, the user is asked for one.
        quiet: Suppress the summary line after each listing.
    """

    def __init__(
        self, config: SearchConfig, root: str | None = None, *, quiet: bool = False
    ) -> None:
        self._config = config
        self._quiet = quiet
        self.root = root

    def run(self) -> None:
        """Run the menu loop until input ends or the user interrupts."""
        try:
            while True:
                self.step()
        except (EOFError, KeyboardInterrupt):
            console.print()
            logger.debug("Interactive session ended")

    def step(self) -> None:
        """Run one menu iteration."""
        if not self.root:
            self.root = self._ask_root()
            if not self.root:
                return

        self._print_menu()
        try:
            choice = parse_selection(Prompt.ask("Your choice(1/2/3/4/5)", console=console))
            if choice == CHANGE_ROOT:
                self.root = None
                return
            self._handle(MENU_MODES[choice], self.root)
        except InvalidSelectionError:
            console.print("[error]Incorrect option, try again![/]")
        except DirectoryNotFoundError:
            console.print("[error]Invalid directory pathname[/]")
            self.root = None
        except UnreadableEntryError as e:
            console.print(f"[error]{escape(str(e))}[/]")

    def _handle(self, mode: SearchMode, root: str) -> None:
        """Collect the extra input a mode needs, run it and print the result."""
        pattern: str | None = None
        since: datetime | None = None

        if mode == SearchMode.PATTERN:
            console.print("? - any single character")
            console.print("* - any character sequence")
            pattern = Prompt.ask("Specify pattern", console=console)
        elif mode == SearchMode.MODIFIED:
            since = self._ask_timestamp()

        paths = run_query(
            mode,
            root,
            pattern=pattern,
            since=since,
            follow_symlinks=self._config.follow_symlinks,
        )
        if self._config.sort_results:
            paths.sort()
        print_numbered(paths)
        if not self._quiet:
            print_summary(len(paths), len(paths))

    def _ask_root(self) -> str:
        """Ask for the root directory, offering the configured default."""
        console.print("Please specify a root directory you want to examine (absolute path):")
        console.print('[muted]Example: "/home/user/documents"[/]')
        if self._config.default_root:
            return Prompt.ask(
                "Root", console=console, default=self._config.default_root
            ).strip()
        return Prompt.ask("Root", console=console).strip()

    def _ask_timestamp(self) -> datetime:
        """Ask for a date and time until the input parses."""
        date_format = self._config.date_format
        console.print(f"Format: {describe_date_format(date_format)}")
        while True:
            value = Prompt.ask("Specify date and time", console=console)
            try:
                return parse_timestamp(value, date_format)
            except InvalidDateTimeError:
                console.print("[error]Invalid date and time![/]")

    @staticmethod
    def _print_menu() -> None:
        console.print(f"[bold_header]{BANNER}[/]")
        for line in MENU_LINES:
            console.print(line, highlight=False)


def interactive(
    ctx: typer.Context,
    root: Annotated[
        str | None,
        typer.Argument(help="Directory to start with. Asked for when omitted.", show_default=False),
    ] = None,
) -> None:
    """Search interactively through a numbered menu."""
    InteractiveSession(get_config(ctx), root=root, quiet=is_quiet(ctx)).run()
