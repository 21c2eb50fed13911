"""Core configuration, paths and theming for filefind."""
