"""Composite filtering of reminder collections."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime, tzinfo

from remindpro_cli.core.recurrence import CustomRuleParser, resolve_next_occurrence
from remindpro_cli.core.windows import in_window
from remindpro_cli.models.config_models import WeekStart
from remindpro_cli.models.core import Reminder, ReminderFilters

OccurrenceOf = Callable[[Reminder], datetime]


def occurrence_resolver(
    now: datetime,
    *,
    tz: tzinfo | None = None,
    custom_rule_parser: CustomRuleParser | None = None,
) -> OccurrenceOf:
    """Build a function mapping a reminder to its occurrence time at ``now``."""

    def occurrence_of(reminder: Reminder) -> datetime:
        return resolve_next_occurrence(
            reminder.date_time,
            reminder.recurrence,
            reminder.recurrence_rule,
            now,
            tz=tz,
            custom_rule_parser=custom_rule_parser,
        )

    return occurrence_of


def matches_search(reminder: Reminder, search_text: str) -> bool:
    """Case-insensitive substring match over title, description, notes and tags."""
    needle = search_text.strip().lower()
    if not needle:
        return True
    fields = [reminder.title, reminder.description, reminder.notes, *reminder.tags]
    return any(needle in value.lower() for value in fields if value)


def matches_completion(reminder: Reminder, completion: str) -> bool:
    if completion == "completed":
        return reminder.completed
    if completion == "incomplete":
        return not reminder.completed
    return True


def matches(
    reminder: Reminder,
    filters: ReminderFilters,
    now: datetime,
    occurrence_of: OccurrenceOf,
    *,
    week_start: WeekStart = "sunday",
    tz: tzinfo | None = None,
) -> bool:
    """Whether a single reminder passes every criterion of ``filters``."""
    if not matches_search(reminder, filters.search_text):
        return False
    if filters.categories and reminder.category not in filters.categories:
        return False
    if not matches_completion(reminder, filters.completion):
        return False
    if reminder.priority not in filters.priorities:
        return False

    if filters.time_window == "all":
        return True
    if filters.time_window == "overdue" and reminder.completed:
        return False
    return in_window(
        occurrence_of(reminder),
        filters.time_window,
        now,
        filters.custom_range,
        week_start=week_start,
        tz=tz,
    )


def apply_filters(
    reminders: Iterable[Reminder],
    filters: ReminderFilters,
    now: datetime,
    *,
    occurrence_of: OccurrenceOf | None = None,
    week_start: WeekStart = "sunday",
    tz: tzinfo | None = None,
) -> list[Reminder]:
    """Return the reminders matching ``filters``, preserving input order.

    Args:
        reminders: Reminder collection (not modified)
        filters: Composite filter; all criteria must hold
        now: Evaluation instant
        occurrence_of: Occurrence resolver (default: built from ``now``/``tz``)
        week_start: First day of the week for ``this-week``
        tz: Zone whose calendar days are compared

    Returns:
        Matching reminders; empty when nothing matches
    """
    if occurrence_of is None:
        occurrence_of = occurrence_resolver(now, tz=tz)
    return [
        reminder
        for reminder in reminders
        if matches(
            reminder, filters, now, occurrence_of, week_start=week_start, tz=tz
        )
    ]
