from __future__ import annotations

from datetime import datetime


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 date or date-time string into a naive datetime.

    Accepts a trailing ``Z``; aware values are converted to local time and
    stripped of their offset, matching what the DATETIME columns store.
    """
    v = value.strip()
    if v.endswith(("Z", "z")):
        v = v[:-1] + "+00:00"
    parsed = datetime.fromisoformat(v)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
