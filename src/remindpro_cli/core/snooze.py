"""Snooze timestamp computation."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from remindpro_cli.models.exceptions import InvalidSnoozeDurationError


def validate_snooze_minutes(minutes: object) -> int:
    """Return ``minutes`` if it is a positive integer.

    Raises:
        InvalidSnoozeDurationError: For bools, non-integers, zero and negatives
    """
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        raise InvalidSnoozeDurationError(
            f"snooze duration must be a whole number of minutes, got {minutes!r}"
        )
    if minutes <= 0:
        raise InvalidSnoozeDurationError(
            f"snooze duration must be positive, got {minutes}"
        )
    return minutes


def compute_snooze_until(now: datetime, minutes: int) -> datetime:
    """Timestamp ``minutes`` after ``now``.

    For aware datetimes the addition happens on absolute time, so a snooze
    across a DST change still lasts exactly ``minutes``. The result is in
    the same zone as ``now``. Persisting it is the caller's job.
    """
    minutes = validate_snooze_minutes(minutes)
    delta = timedelta(minutes=minutes)
    if now.tzinfo is None:
        return now + delta
    return (now.astimezone(UTC) + delta).astimezone(now.tzinfo)


def describe_snooze(minutes: int) -> str:
    """Short label for a snooze duration, e.g. ``15m``, ``1h``, ``1d``."""
    if minutes % 1440 == 0:
        return f"{minutes // 1440}d"
    if minutes % 60 == 0:
        return f"{minutes // 60}h"
    return f"{minutes}m"
