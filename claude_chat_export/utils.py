#!/usr/bin/env python3
"""Utility functions for timestamp formatting and output naming."""

from datetime import datetime, timezone
from typing import Optional

from .models import ExportFormat
from .parser import parse_timestamp


def format_timestamp(timestamp_str: Optional[str]) -> str:
    """Format ISO timestamp as a long-form UTC date.

    Returns e.g. "Tuesday, March 5, 2024". Unparsable values are returned
    unchanged, missing ones as an empty string.
    """
    if timestamp_str is None:
        return ""
    dt = parse_timestamp(timestamp_str)
    if dt is None:
        return timestamp_str
    return f"{dt:%A}, {dt:%B} {dt.day}, {dt.year}"


def get_file_extension(format: ExportFormat | str) -> str:
    """Get the file extension for an export format."""
    return "json" if format == ExportFormat.JSON else "md"


def export_filename(format: ExportFormat | str, now: Optional[datetime] = None) -> str:
    """Build a timestamp-derived output filename.

    Example: "claude-chat-2024-03-05T14-30-00-123Z.md"
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    stamp = now.strftime("%Y-%m-%dT%H:%M:%S") + f".{now.microsecond // 1000:03d}Z"
    stamp = stamp.replace(":", "-").replace(".", "-")
    return f"claude-chat-{stamp}.{get_file_extension(format)}"
