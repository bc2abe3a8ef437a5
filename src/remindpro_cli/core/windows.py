"""Named time windows over dates.

Calendar windows compare local calendar days in the configured zone. The
``overdue`` window uses the same strict ``date < now`` test as the lifecycle
classifier so both always agree.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, tzinfo

from remindpro_cli.core.clock import to_zone
from remindpro_cli.models.config_models import WeekStart
from remindpro_cli.models.core import TIME_WINDOWS, DateRange

# Python weekday() index of the first day of the week
_WEEK_START_INDEX = {"monday": 0, "sunday": 6}


def start_of_week(day: date, week_start: WeekStart = "sunday") -> date:
    """First calendar day of the week containing ``day``."""
    offset = (day.weekday() - _WEEK_START_INDEX[week_start]) % 7
    return day - timedelta(days=offset)


def end_of_week(day: date, week_start: WeekStart = "sunday") -> date:
    """Last calendar day of the week containing ``day``."""
    return start_of_week(day, week_start) + timedelta(days=6)


def day_bounds(day: date, tz: tzinfo | None = None) -> tuple[datetime, datetime]:
    """Start (00:00:00.000000) and end (23:59:59.999999) of a calendar day."""
    return (
        datetime.combine(day, time.min, tzinfo=tz),
        datetime.combine(day, time.max, tzinfo=tz),
    )


def _in_range(moment: datetime, custom_range: DateRange, tz: tzinfo | None) -> bool:
    start, _ = day_bounds(custom_range.start, tz)
    _, end = day_bounds(custom_range.end or custom_range.start, tz)
    if moment.tzinfo is None:
        start, end = start.replace(tzinfo=None), end.replace(tzinfo=None)
    elif start.tzinfo is None:
        start, end = start.replace(tzinfo=moment.tzinfo), end.replace(tzinfo=moment.tzinfo)
    return start <= moment <= end


def in_window(
    moment: datetime,
    window: str,
    now: datetime,
    custom_range: DateRange | None = None,
    *,
    week_start: WeekStart = "sunday",
    tz: tzinfo | None = None,
) -> bool:
    """Check whether ``moment`` falls inside a named time window.

    Args:
        moment: Timestamp to test (typically a resolved occurrence time)
        window: One of ``TIME_WINDOWS``
        now: Evaluation instant
        custom_range: Day range for the ``custom`` window; without one the
            window is not narrowed and everything matches
        week_start: First day of the week for ``this-week``
        tz: Zone whose calendar days are compared

    Raises:
        ValueError: If ``window`` is unknown
    """
    if window not in TIME_WINDOWS:
        raise ValueError(
            f"unknown time window {window!r}; expected one of {', '.join(TIME_WINDOWS)}"
        )
    if window == "all":
        return True

    moment = to_zone(moment, tz)
    current = to_zone(now, tz)

    if window == "overdue":
        return moment < current
    if window == "custom":
        if custom_range is None:
            return True
        return _in_range(moment, custom_range, tz)

    day = moment.date()
    today = current.date()
    if window == "today":
        return day == today
    if window == "tomorrow":
        return day == today + timedelta(days=1)
    if window == "this-week":
        return start_of_week(today, week_start) <= day <= end_of_week(today, week_start)
    # this-month
    return (day.year, day.month) == (today.year, today.month)
