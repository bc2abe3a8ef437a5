"""Display ordering of reminders."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, tzinfo

from remindpro_cli.core.clock import to_zone
from remindpro_cli.core.filtering import OccurrenceOf, occurrence_resolver
from remindpro_cli.models.core import Reminder


def sort_reminders(
    reminders: Iterable[Reminder],
    now: datetime,
    *,
    occurrence_of: OccurrenceOf | None = None,
    tz: tzinfo | None = None,
) -> list[Reminder]:
    """Order reminders for display.

    Incomplete reminders come before completed ones; each group is ordered
    by ascending occurrence time. ``sorted`` is stable, so ties keep their
    input order.
    """
    if occurrence_of is None:
        occurrence_of = occurrence_resolver(now, tz=tz)

    def key(reminder: Reminder) -> tuple[bool, datetime]:
        return reminder.completed, to_zone(occurrence_of(reminder), tz)

    return sorted(reminders, key=key)
