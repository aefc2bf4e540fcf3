#!/usr/bin/env python3
"""
Auxiliary utility functions for Eidos

Small helpers shared by the categorizer and the interactive session:
extension keys, category labels and human-readable sizes and paths.
"""

import os
import pathlib
from typing import Optional

NO_EXTENSION = "no_extension"


def extension_key(filename: str) -> str:
    """Return the category key for a filename

    Args:
        filename: Base name of the file

    Returns:
        Lower-cased suffix including the dot (".txt"), or NO_EXTENSION
        when the name has no suffix. Leading-dot names like ".bashrc"
        have no suffix.
    """
    ext = os.path.splitext(filename)[1].lower()
    return ext or NO_EXTENSION


def category_label(key: str) -> str:
    """Human-readable label for a category key"""
    if key == NO_EXTENSION:
        return "Files with No Extension"
    return key.upper()


def format_bytes(size_bytes: int) -> str:
    """Format byte size into human-readable string

    Args:
        size_bytes: Size in bytes to format

    Returns:
        Formatted string like "1.2 GiB", "345 MiB", "12 KiB", or "789 B"
    """
    if size_bytes >= 1024**3:
        return f"{size_bytes / (1024**3):.1f} GiB"
    if size_bytes >= 1024**2:
        return f"{size_bytes / (1024**2):.1f} MiB"
    if size_bytes >= 1024:
        return f"{size_bytes / 1024:.1f} KiB"
    return f"{size_bytes} B"


def format_path_for_display(path, home_path: Optional[str] = None) -> str:
    """Replace the home directory prefix of a path with ~"""
    if home_path is None:
        home_path = str(pathlib.Path.home())

    path = str(path)
    home_path = home_path.rstrip(os.sep)
    if home_path and (path == home_path or path.startswith(home_path + os.sep)):
        return "~" + path[len(home_path) :]
    return path


def truncate_path(path: str, max_length: int = 60) -> str:
    """Truncate long paths for menu display, keeping both ends"""
    if len(path) <= max_length:
        return path

    available = max_length - 3  # Account for "..."
    start_len = available // 2
    end_len = available - start_len

    return f"{path[:start_len]}...{path[-end_len:]}"


def display_safe(text) -> str:
    """Make a string printable on a UTF-8 console

    Undecodable filename bytes arrive as lone surrogates; they are shown
    as U+FFFD instead.
    """
    text = str(text)
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = text.encode("utf-8", "surrogatepass")
    return raw.decode("utf-8", "replace")
