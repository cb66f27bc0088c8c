from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Return current time as tz-aware UTC datetime."""
    return datetime.now(timezone.utc)


def elapsed_seconds(start: datetime, end: datetime) -> float:
    """Seconds between two tz-aware datetimes. Raises if either is naive."""
    for dt in (start, end):
        if not isinstance(dt, datetime):
            raise TypeError("dt must be a datetime")
        if dt.tzinfo is None:
            raise ValueError("naive datetime is not allowed; timezone-aware required")
    return (end - start).total_seconds()
