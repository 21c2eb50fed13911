"""Bundled data files for filefind."""
