"""Progress statistics over reminder collections."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, tzinfo

from remindpro_cli.core.categories import CategoryInfo, resolve_category
from remindpro_cli.core.filtering import OccurrenceOf
from remindpro_cli.core.lifecycle import LIFECYCLE_STATES, Classification
from remindpro_cli.core.windows import in_window
from remindpro_cli.models.config_models import WeekStart
from remindpro_cli.models.core import Reminder

PROGRESS_WINDOWS: dict[str, str] = {
    "today": "Today",
    "this-week": "This Week",
    "this-month": "This Month",
}


@dataclass(frozen=True)
class ProgressItem:
    label: str
    completed: int
    total: int

    @property
    def percentage(self) -> int:
        return percentage(self.completed, self.total)


@dataclass(frozen=True)
class CategoryCount:
    category: CategoryInfo
    count: int
    completed: int


def percentage(part: int, total: int) -> int:
    """Whole percentage rounded half up; 0 for an empty total."""
    if total <= 0:
        return 0
    return math.floor(part * 100 / total + 0.5)


def completion_rate(reminders: Sequence[Reminder]) -> float:
    """Share of completed reminders in percent, one decimal place."""
    if not reminders:
        return 0.0
    done = sum(1 for r in reminders if r.completed)
    return round(done * 100 / len(reminders), 1)


def progress_summary(
    reminders: Sequence[Reminder],
    now: datetime,
    occurrence_of: OccurrenceOf,
    *,
    week_start: WeekStart = "sunday",
    tz: tzinfo | None = None,
) -> dict[str, ProgressItem]:
    """Completed/total counts for the today, this-week and this-month windows."""
    summary = {}
    for window, label in PROGRESS_WINDOWS.items():
        in_scope = [
            r
            for r in reminders
            if in_window(occurrence_of(r), window, now, week_start=week_start, tz=tz)
        ]
        summary[window] = ProgressItem(
            label=label,
            completed=sum(1 for r in in_scope if r.completed),
            total=len(in_scope),
        )
    return summary


def category_breakdown(
    reminders: Iterable[Reminder], lookup: dict[str, CategoryInfo]
) -> list[CategoryCount]:
    """Per-category totals, largest first; categories without reminders are left out."""
    totals: Counter[str] = Counter()
    done: Counter[str] = Counter()
    infos: dict[str, CategoryInfo] = {}
    for reminder in reminders:
        info = resolve_category(lookup, reminder.category)
        infos[info.id] = info
        totals[info.id] += 1
        if reminder.completed:
            done[info.id] += 1
    breakdown = [
        CategoryCount(category=infos[cid], count=count, completed=done[cid])
        for cid, count in totals.items()
    ]
    breakdown.sort(key=lambda item: item.count, reverse=True)
    return breakdown


def state_counts(classifications: Iterable[Classification]) -> dict[str, int]:
    """Number of reminders in each lifecycle state (every state present)."""
    counts = dict.fromkeys(LIFECYCLE_STATES, 0)
    for classification in classifications:
        counts[classification.state] += 1
    return counts
