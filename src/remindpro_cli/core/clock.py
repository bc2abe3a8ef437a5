"""Clock and timezone helpers.

Engine functions never read the wall clock; callers obtain ``now`` from a
``Clock`` once per operation and pass it down.
"""

from __future__ import annotations

from datetime import datetime, timedelta, tzinfo
from typing import Protocol
from zoneinfo import ZoneInfo

import tzlocal


class Clock(Protocol):
    """Anything that can supply the current time."""

    def now(self) -> datetime: ...


class SystemClock:
    """Clock backed by the system time in a given zone."""

    def __init__(self, tz: tzinfo | None = None):
        self.tz = tz or get_local_zone()

    def now(self) -> datetime:
        return datetime.now(self.tz)


class FixedClock:
    """Clock frozen at a given instant, for tests and replays."""

    def __init__(self, instant: datetime):
        self.instant = instant

    def now(self) -> datetime:
        return self.instant

    def advance(self, **delta) -> None:
        """Move the frozen instant, e.g. ``clock.advance(minutes=5)``."""
        self.instant = self.instant + timedelta(**delta)


def get_local_zone() -> tzinfo:
    """Return the system timezone as detected by tzlocal."""
    return tzlocal.get_localzone()


def resolve_zone(name: str | None) -> tzinfo:
    """Resolve a configured zone name, falling back to the system zone."""
    if not name:
        return get_local_zone()
    return ZoneInfo(name)


def to_zone(value: datetime, tz: tzinfo | None) -> datetime:
    """Express ``value`` in ``tz``.

    Naive datetimes are taken as wall time in ``tz``; aware ones are
    converted. With ``tz=None`` the value is returned untouched.
    """
    if tz is None:
        return value
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)
