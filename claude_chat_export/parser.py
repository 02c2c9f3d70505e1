#!/usr/bin/env python3
"""Parse timestamps found in claude.ai conversation documents.

For conversation and content item creation, see factories/.
"""

import re
from datetime import datetime, timezone
from typing import Optional

# fromisoformat before 3.11 only accepts 3 or 6 fractional digits
_FRACTION_RE = re.compile(r"\.(\d+)")


def _normalize_fraction(match: re.Match[str]) -> str:
    return "." + match.group(1)[:6].ljust(6, "0")


def parse_timestamp(timestamp_str: Optional[str]) -> Optional[datetime]:
    """Parse ISO timestamp to a timezone-aware UTC datetime.

    Naive timestamps are assumed to already be in UTC. Fractional seconds of
    any precision are accepted and truncated to microseconds.
    """
    try:
        text = timestamp_str.replace("Z", "+00:00")  # type: ignore[union-attr]
        dt = datetime.fromisoformat(_FRACTION_RE.sub(_normalize_fraction, text, count=1))
    except (ValueError, AttributeError, TypeError):
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
