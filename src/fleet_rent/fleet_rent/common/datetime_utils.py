from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, Iterator, Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def to_local_naive(value: datetime) -> datetime:
    """Aware datetimes are converted to local time first, then made naive."""
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def coerce_date(value: Any) -> Optional[date]:
    """Best-effort conversion of a DB/JSON value into a date.

    Accepts date, datetime and ISO strings ("2024-06-10" or
    "2024-06-10T08:00:00+05:30"). Anything else becomes None.
    """

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return parse_iso_date(text[:10])
        except ValueError:
            return None
    return None


def coerce_datetime(value: Any) -> Optional[datetime]:
    """Same as coerce_date but for timestamps, normalised to naive local time."""

    if value is None:
        return None
    if isinstance(value, datetime):
        return to_local_naive(value)
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return to_local_naive(datetime.fromisoformat(text))
        except ValueError:
            return None
    return None


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every day in [start, end] ascending. Empty when start > end."""
    cursor = start
    while cursor <= end:
        yield cursor
        cursor += timedelta(days=1)
