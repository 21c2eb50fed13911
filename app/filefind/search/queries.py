"""Query functions built on the traversal engine.

Each query supplies its own predicate to :func:`traverse`. All of them
raise :class:`DirectoryNotFoundError` when the root is not a directory.
"""

import os
from datetime import datetime
from enum import Enum
from pathlib import Path

from filefind.search.engine import EntryPredicate, traverse
from filefind.search.pattern import compile_wildcard

PathLike = str | os.PathLike[str]


class SearchMode(str, Enum):
    """Available query modes."""

    FILES = "files"
    DIRECTORIES = "dirs"
    PATTERN = "pattern"
    MODIFIED = "modified"


def find_all_files(root: PathLike, *, follow_symlinks: bool = False) -> list[str]:
    """Find every entry under ``root`` that is not a directory."""
    return traverse(root, lambda entry: not entry.is_dir(), follow_symlinks=follow_symlinks)


def find_all_directories(root: PathLike, *, follow_symlinks: bool = False) -> list[str]:
    """Find every directory under ``root``, excluding ``root`` itself."""
    return traverse(root, lambda entry: entry.is_dir(), follow_symlinks=follow_symlinks)


def find_files_by_pattern(
    pattern: str,
    root: PathLike,
    *,
    follow_symlinks: bool = False,
) -> list[str]:
    """Find entries whose base name matches a wildcard pattern.

    Files and directories are both candidates. The pattern has to match
    the whole name.

    Args:
        pattern: Wildcard pattern using ``?`` and ``*``.
        root: Directory to search.
        follow_symlinks: Expand symlinked directories.

    Returns:
        Absolute paths of matching entries.
    """
    regex = compile_wildcard(pattern)
    return traverse(
        root,
        lambda entry: regex.fullmatch(entry.name) is not None,
        follow_symlinks=follow_symlinks,
    )


def find_files_by_last_change(
    timestamp: datetime,
    root: PathLike,
    *,
    follow_symlinks: bool = False,
) -> list[str]:
    """Find entries modified strictly after ``timestamp``.

    A naive ``timestamp`` is interpreted in the local timezone. Files and
    directories are both candidates; an entry modified exactly at
    ``timestamp`` is not included.

    Args:
        timestamp: Point in time entries must be newer than.
        root: Directory to search.
        follow_symlinks: Expand symlinked directories.

    Returns:
        Absolute paths of entries modified after ``timestamp``.
    """
    threshold = timestamp.timestamp()
    return traverse(
        root,
        _modified_after(threshold),
        follow_symlinks=follow_symlinks,
    )


def run_query(
    mode: SearchMode,
    root: PathLike,
    *,
    pattern: str | None = None,
    since: datetime | None = None,
    follow_symlinks: bool = False,
) -> list[str]:
    """Run the query that corresponds to ``mode``.

    Args:
        mode: Which query to run.
        root: Directory to search.
        pattern: Wildcard pattern, required for ``SearchMode.PATTERN``.
        since: Threshold, required for ``SearchMode.MODIFIED``.
        follow_symlinks: Expand symlinked directories.

    Returns:
        Absolute paths of matching entries.

    Raises:
        ValueError: If the argument the mode needs is missing.
    """
    if mode == SearchMode.FILES:
        return find_all_files(root, follow_symlinks=follow_symlinks)
    if mode == SearchMode.DIRECTORIES:
        return find_all_directories(root, follow_symlinks=follow_symlinks)
    if mode == SearchMode.PATTERN:
        if pattern is None:
            msg = "A pattern is required for pattern search"
            raise ValueError(msg)
        return find_files_by_pattern(pattern, root, follow_symlinks=follow_symlinks)
    if since is None:
        msg = "A timestamp is required for modification-time search"
        raise ValueError(msg)
    return find_files_by_last_change(since, root, follow_symlinks=follow_symlinks)


def _modified_after(threshold: float) -> EntryPredicate:
    """Build a predicate accepting entries with an mtime after ``threshold``."""

    def accept(entry: Path) -> bool:
        try:
            mtime = entry.stat().st_mtime
        except OSError:
            # Dangling or looping symlink: use the link's own mtime
            if not entry.is_symlink():
                raise
            mtime = entry.lstat().st_mtime
        return mtime > threshold

    return accept
