"""Pathlink - turn paths in terminal output into clickable hyperlinks."""

__version__ = "0.1.0"
