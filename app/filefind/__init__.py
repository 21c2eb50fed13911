"""filefind - Search a directory tree for files and directories.

Walks a directory tree once per query and reports the absolute paths of
entries that are files, directories, match a wildcard pattern, or were
modified after a given point in time.
"""

__version__ = "0.1.0"
