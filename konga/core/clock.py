"""Time sources for code that stamps records at construction time."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Anything that can be called to get the current, timezone-aware instant."""

    def __call__(self) -> datetime: ...


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


def fixed_clock(instant: datetime) -> Clock:
    """Return a clock that always reports ``instant``."""

    def _clock() -> datetime:
        return instant

    return _clock


def to_iso8601(instant: datetime) -> str:
    """
    Render ``instant`` as an ISO-8601 UTC string with millisecond precision.

    The output matches the shape Konga stores, e.g. ``2024-05-01T12:00:00.000Z``.
    Naive datetimes are taken to already be in UTC.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    utc = instant.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
