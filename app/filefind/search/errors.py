"""Exceptions raised by the search engine."""

DIRECTORY_NOT_FOUND_MESSAGE = "Given pathname doesn't match any directory!"


class SearchError(Exception):
    """Base exception for search failures."""


class DirectoryNotFoundError(SearchError):
    """Raised when the search root is missing or is not a directory.

    Attributes:
        path: The root path as supplied by the caller.
    """

    def __init__(self, path: str) -> None:
        super().__init__(DIRECTORY_NOT_FOUND_MESSAGE)
        self.path = path


class UnreadableEntryError(SearchError):
    """Raised when an entry met during traversal cannot be read.

    The whole query is aborted; no partial result is returned.

    Attributes:
        path: Absolute path of the entry that could not be read.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"Cannot read {path}")
        self.path = path
