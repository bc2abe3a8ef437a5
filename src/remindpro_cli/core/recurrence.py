"""Recurrence resolution for reminders.

``resolve_next_occurrence`` turns a reminder's anchor timestamp and
recurrence kind into the timestamp of its current due instance. Custom rules
go through a pluggable parser; the default one understands iCalendar RRULE
strings and a few named patterns.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta, tzinfo

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta
from dateutil.rrule import rrulestr

from remindpro_cli.core.clock import to_zone
from remindpro_cli.models.core import RECURRENCES
from remindpro_cli.models.exceptions import (
    InvalidRecurrenceError,
    MalformedCustomRuleError,
)

logger = logging.getLogger(__name__)

# (anchor, now) -> next occurrence at or after now, or None if the rule yields nothing
OccurrenceFn = Callable[[datetime, datetime], datetime | None]
CustomRuleParser = Callable[[str], OccurrenceFn]

# Maps human-friendly names to iCalendar RRULE strings.
RECURRENCE_PATTERNS: dict[str, str] = {
    "daily": "FREQ=DAILY",
    "weekdays": "FREQ=WEEKLY;BYDAY=MO,TU,WE,TH,FR",
    "weekly": "FREQ=WEEKLY",
    "bi-weekly": "FREQ=WEEKLY;INTERVAL=2",
    "monthly": "FREQ=MONTHLY",
}

VALID_PATTERNS = list(RECURRENCE_PATTERNS.keys())

RECURRENCE_LABELS: dict[str, str] = {
    "one-time": "One-time",
    "daily": "Daily",
    "weekly": "Weekly",
    "monthly": "Monthly",
    "custom": "Custom",
}


def resolve_rrule(pattern: str) -> str | None:
    """Convert a human-friendly recurrence pattern name to an RRULE string.

    Args:
        pattern: Pattern name (e.g., "daily", "weekly")

    Returns:
        RRULE string, or None if pattern is not recognized
    """
    return RECURRENCE_PATTERNS.get(pattern.strip().lower())


def describe_rrule(rrule: str) -> str:
    """Convert an RRULE string back to a human-readable description.

    Unknown rules are returned as-is.
    """
    reverse = {v: k for k, v in RECURRENCE_PATTERNS.items()}
    return reverse.get(rrule, rrule)


def describe_recurrence(recurrence: str, rule: str | None = None) -> str:
    """Display label for a reminder's recurrence."""
    if recurrence == "custom" and rule:
        text = resolve_rrule(rule) or rule
        return f"Custom ({describe_rrule(text)})"
    return RECURRENCE_LABELS.get(recurrence, recurrence)


def parse_rrule(rule: str) -> OccurrenceFn:
    """Default custom rule parser.

    Accepts a named pattern (see ``RECURRENCE_PATTERNS``) or an RRULE body,
    with or without the ``RRULE:`` prefix. The returned function yields the
    first occurrence at or after ``now``; once a bounded series (COUNT or
    UNTIL) is exhausted it yields the last occurrence instead.

    Raises:
        MalformedCustomRuleError: If the rule is empty or not a valid RRULE
    """
    text = (rule or "").strip()
    if not text:
        raise MalformedCustomRuleError("custom recurrence rule is empty")
    text = resolve_rrule(text) or text
    if text.upper().startswith("RRULE:"):
        text = text[len("RRULE:") :]

    try:
        sample = datetime(2000, 1, 1)
        rrulestr(_match_until(text, sample), dtstart=sample)
    except (ValueError, TypeError, KeyError, AttributeError) as e:
        raise MalformedCustomRuleError(
            f"invalid recurrence rule {rule!r}: {e}; "
            f"expected an RRULE or one of {', '.join(VALID_PATTERNS)}"
        ) from e

    def occurrence(anchor: datetime, now: datetime) -> datetime | None:
        try:
            series = rrulestr(_match_until(text, anchor), dtstart=anchor)
            upcoming = series.after(now, inc=True)
            if upcoming is None:
                return series.before(now, inc=True)
            return upcoming
        except (ValueError, TypeError) as e:
            raise MalformedCustomRuleError(
                f"recurrence rule {rule!r} cannot be evaluated: {e}"
            ) from e

    return occurrence


def _match_until(text: str, anchor: datetime) -> str:
    """Rewrite an UNTIL part so its timezone-awareness matches ``anchor``.

    dateutil refuses to mix a naive UNTIL with an aware DTSTART and the other
    way round. For an aware anchor UNTIL becomes UTC (a naive value is read
    as wall time in the anchor's zone); for a naive anchor the zone is dropped.
    """
    parts = text.split(";")
    for i, part in enumerate(parts):
        name, _, value = part.partition("=")
        if name.strip().upper() != "UNTIL":
            continue
        until = isoparse(value.strip())
        if anchor.tzinfo is None:
            parts[i] = f"UNTIL={until.replace(tzinfo=None):%Y%m%dT%H%M%S}"
        else:
            if until.tzinfo is None:
                until = until.replace(tzinfo=anchor.tzinfo)
            parts[i] = f"UNTIL={until.astimezone(UTC):%Y%m%dT%H%M%SZ}"
    return ";".join(parts)


def _step(recurrence: str, anchor: datetime, n: int) -> datetime:
    if recurrence == "daily":
        return anchor + timedelta(days=n)
    if recurrence == "weekly":
        return anchor + timedelta(weeks=n)
    # relativedelta clamps day 29-31 to the last day of shorter months
    return anchor + relativedelta(months=n)


def _initial_steps(recurrence: str, anchor: datetime, now: datetime) -> int:
    if recurrence == "monthly":
        return (now.year - anchor.year) * 12 + (now.month - anchor.month)
    days = (now.date() - anchor.date()).days
    if recurrence == "weekly":
        return days // 7
    return days


def _resolve_custom(
    base: datetime,
    anchor: datetime,
    now: datetime,
    rule: str | None,
    parser: CustomRuleParser | None,
    strict: bool,
) -> datetime:
    parser = parser or parse_rrule
    try:
        occurrence = parser(rule or "")
        if anchor >= now:
            return base
        result = occurrence(anchor, now)
    except MalformedCustomRuleError:
        if strict:
            raise
        logger.debug("custom rule %r not understood, treating as one-time", rule)
        return base
    return base if result is None else result


def resolve_next_occurrence(
    base: datetime,
    recurrence: str,
    rule: str | None,
    now: datetime,
    *,
    tz: tzinfo | None = None,
    custom_rule_parser: CustomRuleParser | None = None,
    strict: bool = False,
) -> datetime:
    """Compute the occurrence time of a reminder relative to ``now``.

    Args:
        base: The reminder's anchor timestamp
        recurrence: One of ``RECURRENCES``
        rule: Custom rule text (only used for ``custom``)
        now: Evaluation instant
        tz: Zone used for calendar arithmetic; naive inputs are read as wall
            time in it. None leaves inputs as given.
        custom_rule_parser: Strategy for ``custom`` rules (default: RRULE)
        strict: Raise instead of falling back when a custom rule is malformed

    Returns:
        ``base`` itself for one-time reminders and for anchors that are not
        yet in the past, otherwise the smallest stepped timestamp >= ``now``.

    Raises:
        InvalidRecurrenceError: If ``recurrence`` is not a known value
        MalformedCustomRuleError: Only when ``strict`` is set
    """
    if recurrence not in RECURRENCES:
        raise InvalidRecurrenceError(
            f"unknown recurrence {recurrence!r}; expected one of {', '.join(RECURRENCES)}"
        )
    if recurrence == "one-time":
        return base

    anchor = to_zone(base, tz)
    current = to_zone(now, tz)
    if anchor.tzinfo is not None and current.tzinfo is not None:
        # count calendar steps on the anchor's own calendar
        current = current.astimezone(anchor.tzinfo)

    if recurrence == "custom":
        return _resolve_custom(base, anchor, current, rule, custom_rule_parser, strict)

    if anchor >= current:
        return base

    n = _initial_steps(recurrence, anchor, current)
    candidate = _step(recurrence, anchor, n)
    while candidate < current:
        n += 1
        candidate = _step(recurrence, anchor, n)
    return candidate
