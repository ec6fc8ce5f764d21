"""Elapsed-time arithmetic and date labels for release and post records.

All functions take ``now`` explicitly so they stay pure; when omitted, the
current time is used. Labels use integer floors of the elapsed days, so a
record published 23 hours ago is "Today". The recency window compares the
exact elapsed time, so a record one second past the window is excluded.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional, TypeVar

DEFAULT_WINDOW_DAYS = 7

_ONE_DAY = timedelta(days=1)

T = TypeVar("T")


def _aware(value: datetime) -> datetime:
    # Naive timestamps (e.g. from feed struct_time) are UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _now(now: Optional[datetime]) -> datetime:
    return _aware(now) if now is not None else datetime.now(timezone.utc)


def elapsed_days(published_at: datetime, now: Optional[datetime] = None) -> int:
    return (_now(now) - _aware(published_at)) // _ONE_DAY


def is_recent(
    published_at: datetime,
    now: Optional[datetime] = None,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> bool:
    """True when ``published_at`` lies within ``window_days`` days before ``now``.

    Inclusive at exactly ``window_days * 86400`` seconds, exclusive past it.
    """
    return _now(now) - _aware(published_at) <= timedelta(days=window_days)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''} ago"


def relative_label(published_at: datetime, now: Optional[datetime] = None) -> str:
    """Human-readable age such as ``Yesterday`` or ``3 weeks ago``.

    Timestamps in the future (clock skew) are reported as ``Today``.
    """
    days = elapsed_days(published_at, now)
    if days <= 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    if days < 7:
        return f"{days} days ago"
    if days < 30:
        return _plural(days // 7, "week")
    if days < 365:
        return _plural(days // 30, "month")
    return _plural(days // 365, "year")


def absolute_date(published_at: datetime) -> str:
    """Long US-style date, e.g. ``January 1, 2024``."""
    return f"{published_at:%B} {published_at.day}, {published_at.year}"


def filter_recent(
    records: Iterable[T],
    now: Optional[datetime] = None,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> List[T]:
    """Keep records whose ``published_at`` falls inside the window, in order."""
    current = _now(now)
    return [r for r in records if is_recent(r.published_at, current, window_days)]
