"""Shared constants and helpers for the sample directory tree."""

import os
from datetime import datetime
from pathlib import Path

# Local times the sample tree's entries are stamped with
BASE_TIME = datetime(2021, 4, 20, 12, 0)
RECENT_TIME = datetime(2021, 4, 20, 15, 0)

SAMPLE_FILES = (
    "dir_a/file_001",
    "dir_a/file_002",
    "dir_a/dir_aa/file_003",
    "dir_b/file_004",
    "dir_b/file_005",
    "dir_b/file_006",
)
SAMPLE_DIRS = ("dir_a", "dir_a/dir_aa", "dir_b")
# Entries touched after BASE_TIME
RECENT_ENTRIES = ("dir_a", "dir_a/file_001", "dir_a/dir_aa", "dir_a/dir_aa/file_003")


def stamp(path: Path, when: datetime) -> None:
    """Set both atime and mtime of ``path`` to the local time ``when``."""
    ts = when.timestamp()
    os.utime(path, (ts, ts), follow_symlinks=False)


def relative_set(paths: list[str], root: Path) -> set[str]:
    """Convert absolute result paths to a set of root-relative POSIX paths."""
    return {Path(p).relative_to(root).as_posix() for p in paths}
