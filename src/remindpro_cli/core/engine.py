"""Reminder engine facade.

``ReminderEngine`` bundles the pure core functions behind the operations
views need, with the user's settings bound once. It holds no mutable state,
so one instance can serve concurrent callers.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta, tzinfo

from remindpro_cli.core.categories import CategoryInfo, build_category_lookup
from remindpro_cli.core.clock import resolve_zone, to_zone
from remindpro_cli.core.filtering import apply_filters, occurrence_resolver
from remindpro_cli.core.lifecycle import (
    DEFAULT_REMIND_BEFORE,
    Classification,
    classify_state,
)
from remindpro_cli.core.recurrence import CustomRuleParser, resolve_next_occurrence
from remindpro_cli.core.snooze import compute_snooze_until
from remindpro_cli.core.sorting import sort_reminders
from remindpro_cli.core.stats import (
    CategoryCount,
    ProgressItem,
    category_breakdown,
    completion_rate,
    progress_summary,
    state_counts,
)
from remindpro_cli.models.config_models import AppConfig, WeekStart
from remindpro_cli.models.core import Category, Reminder, ReminderFilters


@dataclass(frozen=True)
class EngineSettings:
    """User settings the engine needs, passed by value."""

    tz: tzinfo | None = None
    week_start: WeekStart = "sunday"
    remind_before: int = DEFAULT_REMIND_BEFORE
    custom_rule_parser: CustomRuleParser | None = None

    @classmethod
    def from_config(
        cls, config: AppConfig, custom_rule_parser: CustomRuleParser | None = None
    ) -> EngineSettings:
        return cls(
            tz=resolve_zone(config.ui.timezone),
            week_start=config.ui.week_starts_on,
            remind_before=config.reminders.advance_minutes,
            custom_rule_parser=custom_rule_parser,
        )


@dataclass(frozen=True)
class Summary:
    """Dashboard numbers for a reminder collection at one instant."""

    total: int
    completion_rate: float
    states: dict[str, int]
    progress: dict[str, ProgressItem]
    categories: list[CategoryCount] = field(default_factory=list)


class ReminderEngine:
    """Temporal-state engine for reminders."""

    def __init__(self, settings: EngineSettings | None = None):
        self.settings = settings or EngineSettings()

    def occurrence(self, reminder: Reminder, now: datetime) -> datetime:
        """Occurrence time of the reminder's current instance."""
        return resolve_next_occurrence(
            reminder.date_time,
            reminder.recurrence,
            reminder.recurrence_rule,
            now,
            tz=self.settings.tz,
            custom_rule_parser=self.settings.custom_rule_parser,
        )

    def localize(self, moment: datetime) -> datetime:
        """Express a timestamp in the engine's zone."""
        return to_zone(moment, self.settings.tz)

    def classify(self, reminder: Reminder, now: datetime) -> Classification:
        """Resolve the occurrence and classify the reminder at ``now``."""
        return self.classify_occurrence(reminder, self.occurrence(reminder, now), now)

    def classify_occurrence(
        self, reminder: Reminder, occurrence: datetime, now: datetime
    ) -> Classification:
        """Classify one given instance of a reminder at ``now``."""
        return classify_state(
            reminder,
            occurrence,
            now,
            remind_before=self.settings.remind_before,
            tz=self.settings.tz,
        )

    def occurrences_between(
        self, reminder: Reminder, start: datetime, end: datetime, limit: int = 400
    ) -> list[datetime]:
        """Every occurrence of ``reminder`` from ``start`` to ``end`` inclusive.

        One-time reminders yield at most their own timestamp. Results are in
        the engine zone, ascending.
        """
        found: list[datetime] = []
        cursor = self.localize(start)
        end = self.localize(end)
        while len(found) < limit:
            moment = self.localize(self.occurrence(reminder, cursor))
            if moment < cursor or moment > end:
                break
            found.append(moment)
            cursor = moment + timedelta(microseconds=1)
        return found

    def filter_and_sort(
        self,
        reminders: Iterable[Reminder],
        filters: ReminderFilters,
        now: datetime,
    ) -> list[Reminder]:
        """Filter then order reminders for a view."""
        occurrence_of = occurrence_resolver(
            now, tz=self.settings.tz, custom_rule_parser=self.settings.custom_rule_parser
        )
        matching = apply_filters(
            reminders,
            filters,
            now,
            occurrence_of=occurrence_of,
            week_start=self.settings.week_start,
            tz=self.settings.tz,
        )
        return sort_reminders(
            matching, now, occurrence_of=occurrence_of, tz=self.settings.tz
        )

    def compute_snooze_until(self, now: datetime, minutes: int) -> datetime:
        return compute_snooze_until(self.localize(now), minutes)

    def summarize(
        self,
        reminders: Sequence[Reminder],
        now: datetime,
        custom_categories: Iterable[Category] = (),
        lookup: dict[str, CategoryInfo] | None = None,
    ) -> Summary:
        """Completion, lifecycle and category statistics at ``now``."""
        if lookup is None:
            lookup = build_category_lookup(custom_categories)
        occurrence_of = occurrence_resolver(
            now, tz=self.settings.tz, custom_rule_parser=self.settings.custom_rule_parser
        )
        return Summary(
            total=len(reminders),
            completion_rate=completion_rate(reminders),
            states=state_counts(self.classify(r, now) for r in reminders),
            progress=progress_summary(
                reminders,
                now,
                occurrence_of,
                week_start=self.settings.week_start,
                tz=self.settings.tz,
            ),
            categories=category_breakdown(reminders, lookup),
        )
