"""Lifecycle classification of reminders.

State is never stored: it is derived from the reminder, its occurrence time
and ``now`` on every call. Rules are checked in order, first match wins:

1. completed - the completed flag is set
2. snoozed   - ``snooze_until`` is set and later than ``now``
3. overdue   - the occurrence time is strictly before ``now``
4. due-soon  - the occurrence is at most ``remind_before`` minutes away
5. upcoming  - anything else
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Literal, get_args

from remindpro_cli.core.clock import to_zone
from remindpro_cli.models.core import Reminder

logger = logging.getLogger(__name__)

LifecycleState = Literal["completed", "snoozed", "overdue", "due-soon", "upcoming"]
LIFECYCLE_STATES: tuple[str, ...] = get_args(LifecycleState)

DEFAULT_REMIND_BEFORE = 15


@dataclass(frozen=True)
class Classification:
    """Result of classifying one reminder at one instant."""

    state: LifecycleState
    due_in_minutes: int | None

    @property
    def is_actionable(self) -> bool:
        """Whether the reminder should offer snooze actions."""
        return self.state in ("overdue", "due-soon")


def minutes_until(target: datetime, now: datetime) -> int:
    """Whole minutes from ``now`` to ``target``, floored (negative when past)."""
    return int((target - now).total_seconds() // 60)


def classify_state(
    reminder: Reminder,
    occurrence_time: datetime | None,
    now: datetime,
    *,
    remind_before: int | None = None,
    tz: tzinfo | None = None,
) -> Classification:
    """Classify a reminder whose occurrence time is already resolved.

    Args:
        reminder: The reminder to classify
        occurrence_time: Resolved occurrence time of its current instance
        now: Evaluation instant
        remind_before: Advance warning used when the reminder has none
        tz: Zone used to align naive and aware timestamps

    Returns:
        Classification with the state and minutes until the occurrence
    """
    current = to_zone(now, tz)
    occurrence = None
    if isinstance(occurrence_time, datetime):
        occurrence = to_zone(occurrence_time, tz)
    due_in = None if occurrence is None else minutes_until(occurrence, current)

    if reminder.completed:
        return Classification("completed", due_in)

    if reminder.snooze_until is not None and to_zone(reminder.snooze_until, tz) > current:
        return Classification("snoozed", due_in)

    if occurrence is None:
        logger.warning(
            "reminder %s has no usable occurrence time (%r); classified as upcoming",
            reminder.id,
            occurrence_time,
        )
        return Classification("upcoming", None)

    if occurrence < current:
        return Classification("overdue", due_in)

    threshold = reminder.remind_before
    if threshold is None:
        threshold = DEFAULT_REMIND_BEFORE if remind_before is None else remind_before

    if (occurrence - current).total_seconds() <= threshold * 60:
        return Classification("due-soon", due_in)

    return Classification("upcoming", due_in)
