"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest

from tests.helpers import (
    BASE_TIME,
    RECENT_ENTRIES,
    RECENT_TIME,
    SAMPLE_DIRS,
    SAMPLE_FILES,
    stamp,
)


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory for every test."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Build the reference directory tree and return its root.

    Layout::

        TestDirectory/
            dir_a/file_001, dir_a/file_002
            dir_a/dir_aa/file_003
            dir_b/file_004, dir_b/file_005, dir_b/file_006

    Every entry is stamped with BASE_TIME except RECENT_ENTRIES, which
    carry RECENT_TIME.
    """
    root = tmp_path / "TestDirectory"
    for rel in SAMPLE_DIRS:
        (root / rel).mkdir(parents=True)
    for rel in SAMPLE_FILES:
        (root / rel).write_text(rel)

    # Files first: creating entries bumps the parent directory's mtime
    for rel in (*SAMPLE_FILES, *reversed(SAMPLE_DIRS)):
        stamp(root / rel, RECENT_TIME if rel in RECENT_ENTRIES else BASE_TIME)

    return root
