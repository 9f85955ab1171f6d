"""
Time windows for drill-down queries and histogram bucket sizing.

A 10-minute histogram bar starts on a multiple of ten minutes and parses back
into exactly that bar. A 1-minute bar parses back into itself unless its minute
is a multiple of ten, in which case it widens to the 10-minute window starting
there (the 01:40 bar gives [01:40, 01:50)).
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional


WINDOW_FORMATS = ("%Y-%m-%d %H:%M", "%Y-%m-%d %H:%M:%S")

WIDE_SLICE_MINUTES = 10
NARROW_SLICE_MINUTES = 1

# Ranges at least this long get the wide buckets
WIDE_SLICE_THRESHOLD = timedelta(hours=1)


def _parse(text: str) -> Optional[datetime]:
    for fmt in WINDOW_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def parse_window(text: Optional[str]) -> Optional[tuple[datetime, datetime]]:
    """
    Returns the half-open window [start, end) for a timestamp string, or None.

    "2015-02-02 03:00" -> [03:00, 03:10)
    "2015-02-02 01:41" -> [01:41, 01:42)
    """
    if not isinstance(text, str):
        return None
    ts = _parse(text.strip())
    if ts is None:
        return None
    start = ts.replace(second=0, microsecond=0)
    width = WIDE_SLICE_MINUTES if start.minute % WIDE_SLICE_MINUTES == 0 else NARROW_SLICE_MINUTES
    return start, start + timedelta(minutes=width)


def histogram_slice_minutes(begin: datetime, end: datetime) -> int:
    if end - begin >= WIDE_SLICE_THRESHOLD:
        return WIDE_SLICE_MINUTES
    return NARROW_SLICE_MINUTES
