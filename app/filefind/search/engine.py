"""Depth-first directory traversal.

A single walker shared by every query. It expands directories from a
LIFO stack and hands each entry it meets to a caller-supplied predicate,
collecting the absolute paths of the accepted entries.
"""

import logging
import os
from collections.abc import Callable
from pathlib import Path

from filefind.search.errors import DirectoryNotFoundError, UnreadableEntryError

logger = logging.getLogger(__name__)

EntryPredicate = Callable[[Path], bool]


def traverse(
    root: str | os.PathLike[str],
    accept: EntryPredicate,
    *,
    follow_symlinks: bool = False,
) -> list[str]:
    """Walk the tree under ``root`` and collect entries accepted by ``accept``.

    Every entry below the root, files and directories alike, is tested
    exactly once. The root itself is never tested. Results come in
    stack-pop order: the most recently discovered directory is expanded
    next, so the order is depth-first but otherwise unspecified.

    Args:
        root: Directory to start from. Relative paths are made absolute
            against the current working directory.
        accept: Predicate deciding whether an entry is part of the result.
        follow_symlinks: If True, symlinks to directories are expanded as
            well. Cycles are not detected.

    Returns:
        Absolute paths of all accepted entries.

    Raises:
        DirectoryNotFoundError: If ``root`` does not exist or is not a directory.
        UnreadableEntryError: If a directory or entry cannot be read during
            the walk. The query is aborted as a whole.
    """
    root_str = os.fspath(root)
    # Path("") means the current directory, which is not what an empty input means
    if not root_str or not Path(root_str).is_dir():
        raise DirectoryNotFoundError(root_str)

    root_dir = Path(root_str).absolute()
    logger.debug("Traversing %s", root_dir)

    found: list[str] = []
    pending: list[Path] = [root_dir]
    visited = 0

    while pending:
        current = pending.pop()
        visited += 1
        try:
            children = list(current.iterdir())
        except OSError as e:
            logger.debug("Cannot list %s: %s", current, e)
            raise UnreadableEntryError(str(current)) from e

        for child in children:
            try:
                if _is_expandable(child, follow_symlinks):
                    pending.append(child)
                if accept(child):
                    found.append(str(child))
            except OSError as e:
                raise UnreadableEntryError(str(child)) from e

    logger.debug("Visited %d directories, accepted %d entries", visited, len(found))
    return found


def _is_expandable(entry: Path, follow_symlinks: bool) -> bool:
    """Check whether an entry should be pushed for later expansion."""
    if not entry.is_dir():
        return False
    return follow_symlinks or not entry.is_symlink()
