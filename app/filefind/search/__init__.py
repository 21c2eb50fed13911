"""Directory tree search.

This module provides the traversal engine, the wildcard compiler and the
four query functions built on top of them.
"""

from filefind.search.engine import EntryPredicate, traverse
from filefind.search.errors import (
    DIRECTORY_NOT_FOUND_MESSAGE,
    DirectoryNotFoundError,
    SearchError,
    UnreadableEntryError,
)
from filefind.search.pattern import compile_wildcard, matches_wildcard
from filefind.search.queries import (
    SearchMode,
    find_all_directories,
    find_all_files,
    find_files_by_last_change,
    find_files_by_pattern,
    run_query,
)

__all__ = [
    "DIRECTORY_NOT_FOUND_MESSAGE",
    "DirectoryNotFoundError",
    "EntryPredicate",
    "SearchError",
    "SearchMode",
    "UnreadableEntryError",
    "compile_wildcard",
    "find_all_directories",
    "find_all_files",
    "find_files_by_last_change",
    "find_files_by_pattern",
    "matches_wildcard",
    "run_query",
    "traverse",
]
