from __future__ import annotations

import re
import time
from datetime import datetime

NOTE_EXT = ".md"
STAMP_FORMAT = "%Y-%m-%d-%H-%M-%S"

# 2026-01-14-16-56-30.md, 2026-01-14-16-56-30-2.md
NOTE_FILENAME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}-\d{2}-\d{2}-\d{2}(-\d+)?\.md$")
_STAMP_PREFIX_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})-(\d{2})-(\d{2})-(\d{2})")


def format_timestamp(timestamp: float | None = None) -> str:
    """YYYY-MM-DD-HH-MM-SS in local time; defaults to now."""
    ts = time.time() if timestamp is None else timestamp
    return datetime.fromtimestamp(ts).strftime(STAMP_FORMAT)


def numbered_filename(stem: str, counter: int = 0) -> str:
    if counter <= 0:
        return f"{stem}{NOTE_EXT}"
    return f"{stem}-{counter}{NOTE_EXT}"


def is_note_filename(name: str | None) -> bool:
    return bool(name) and NOTE_FILENAME_RE.match(name) is not None


def parse_created_at(filename: str | None) -> int | None:
    """
    Read the creation time back out of a note filename.

    Only the leading six date-time fields are looked at, so
    "2026-01-14-10-00-00-3.md" and "2026-01-14-10-00-00 draft.md" both
    parse. Returns None when there is no such prefix or the date is
    impossible.
    """
    if not filename:
        return None
    m = _STAMP_PREFIX_RE.match(filename)
    if not m:
        return None
    try:
        dt = datetime(*(int(part) for part in m.groups()))
    except ValueError:
        return None
    return int(dt.timestamp())
