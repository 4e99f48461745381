"""Formatting utilities for backup inventory reports."""

from datetime import datetime


def format_file_size(size_bytes: int) -> str:
    """Format file size in human readable format.

    Args:
        size_bytes: Size in bytes.

    Returns:
        Human readable size string.
    """
    if size_bytes < 1024:
        return f"{size_bytes}B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f}KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / (1024 * 1024):.1f}MB"
    elif size_bytes < 1024 * 1024 * 1024 * 1024:
        return f"{size_bytes / (1024 * 1024 * 1024):.1f}GB"
    else:
        return f"{size_bytes / (1024 * 1024 * 1024 * 1024):.1f}TB"


def format_timestamp(dt: datetime) -> str:
    """Format a modification timestamp for display.

    Uses ISO 8601 with a space separator so the zero timestamp keeps its
    four-digit year: '0001-01-01 00:00:00+00:00'.
    """
    return dt.isoformat(sep=' ')
