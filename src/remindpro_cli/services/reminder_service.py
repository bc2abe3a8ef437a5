"""Reminder service - business logic for reminder operations.

This service layer sits between commands and repositories: it reads
reminders from storage, evaluates them with the ``ReminderEngine`` at a
single ``now`` taken from its clock, and writes snooze/completion changes
back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from remindpro_cli.core.categories import (
    DEFAULT_CATEGORIES,
    CategoryInfo,
    build_category_lookup,
    find_category,
)
from remindpro_cli.core.clock import Clock, SystemClock
from remindpro_cli.core.engine import ReminderEngine, Summary
from remindpro_cli.core.lifecycle import Classification
from remindpro_cli.core.windows import day_bounds
from remindpro_cli.models import (
    Category,
    CategoryCreate,
    Reminder,
    ReminderCreate,
    ReminderFilters,
    ReminderNotFoundError,
    ReminderUpdate,
)
from remindpro_cli.repositories import CategoryRepository, ReminderRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReminderView:
    """A reminder together with its derived state at one instant."""

    reminder: Reminder
    occurrence: datetime
    classification: Classification

    @property
    def state(self) -> str:
        return self.classification.state

    def to_dict(self) -> dict:
        data = self.reminder.model_dump(mode="json")
        data["occurrence"] = self.occurrence.isoformat()
        data["state"] = self.classification.state
        data["due_in_minutes"] = self.classification.due_in_minutes
        data["actionable"] = self.classification.is_actionable
        return data


class ReminderService:
    """Service for reminder business logic."""

    def __init__(
        self,
        reminder_repository: ReminderRepository,
        category_repository: CategoryRepository,
        engine: ReminderEngine | None = None,
        clock: Clock | None = None,
    ):
        """Initialize the reminder service.

        Args:
            reminder_repository: Storage for reminders
            category_repository: Storage for custom categories
            engine: Engine with the user's settings bound
            clock: Source of ``now`` (default: system clock in the engine zone)
        """
        self.repository = reminder_repository
        self.categories = category_repository
        self.engine = engine or ReminderEngine()
        self.clock = clock or SystemClock(self.engine.settings.tz)

    def _view(self, reminder: Reminder, now: datetime) -> ReminderView:
        return ReminderView(
            reminder=reminder,
            occurrence=self.engine.localize(self.engine.occurrence(reminder, now)),
            classification=self.engine.classify(reminder, now),
        )

    async def category_lookup(self) -> dict[str, CategoryInfo]:
        """Default and custom categories merged into one table."""
        return build_category_lookup(await self.categories.list_all())

    async def resolve_category_ids(self, keys: list[str]) -> set[str]:
        """Map category ids or names to ids.

        Raises:
            ReminderNotFoundError: If a key matches no category
        """
        lookup = await self.category_lookup()
        ids = set()
        for key in keys:
            info = find_category(lookup, key)
            if info is None:
                raise ReminderNotFoundError(f"Unknown category '{key}'")
            ids.add(info.id)
        return ids

    async def list_view(
        self, filters: ReminderFilters | None = None, limit: int | None = None
    ) -> list[ReminderView]:
        """Filtered, ordered reminders with their lifecycle state."""
        filters = filters or ReminderFilters()
        now = self.clock.now()
        reminders = await self.repository.list_all()
        ordered = self.engine.filter_and_sort(reminders, filters, now)
        if limit is not None:
            ordered = ordered[:limit]
        logger.debug(
            "list_view: %d of %d reminders match (window=%s)",
            len(ordered),
            len(reminders),
            filters.time_window,
        )
        return [self._view(r, now) for r in ordered]

    async def get_view(self, reminder_id: int) -> ReminderView:
        reminder = await self.repository.get(reminder_id)
        return self._view(reminder, self.clock.now())

    async def snooze(self, reminder_id: int, minutes: int) -> ReminderView:
        """Snooze a reminder for ``minutes`` from now and persist it."""
        now = self.clock.now()
        snooze_until = self.engine.compute_snooze_until(now, minutes)
        reminder = await self.repository.update(
            reminder_id, ReminderUpdate(snooze_until=snooze_until)
        )
        logger.info("reminder %s snoozed until %s", reminder_id, snooze_until.isoformat())
        return self._view(reminder, now)

    async def clear_snooze(self, reminder_id: int) -> ReminderView:
        reminder = await self.repository.update(
            reminder_id, ReminderUpdate(snooze_until=None)
        )
        return self._view(reminder, self.clock.now())

    async def toggle_completion(self, reminder_id: int) -> ReminderView:
        reminder = await self.repository.toggle_completion(reminder_id)
        logger.info("reminder %s completed=%s", reminder_id, reminder.completed)
        return self._view(reminder, self.clock.now())

    async def create(self, reminder_data: ReminderCreate) -> ReminderView:
        reminder = await self.repository.add(reminder_data)
        logger.info("reminder %s created", reminder.id)
        return self._view(reminder, self.clock.now())

    async def update(self, reminder_id: int, updates: ReminderUpdate) -> ReminderView:
        reminder = await self.repository.update(reminder_id, updates)
        return self._view(reminder, self.clock.now())

    async def delete(self, reminder_id: int) -> bool:
        deleted = await self.repository.delete(reminder_id)
        logger.info("reminder %s deleted", reminder_id)
        return deleted

    async def _require_all(self, reminder_ids: list[int]) -> list[Reminder]:
        return [await self.repository.get(reminder_id) for reminder_id in reminder_ids]

    async def bulk_update(
        self, reminder_ids: list[int], updates: ReminderUpdate
    ) -> list[ReminderView]:
        """Apply the same partial update to several reminders.

        Every id is checked and every result validated first, so an unknown
        id or an invalid combination changes nothing.

        Raises:
            ReminderNotFoundError: If any reminder does not exist
            ValueError: If no ids or no changes are given
        """
        if not reminder_ids:
            raise ValueError("No reminder ids given")
        if not updates.model_fields_set:
            raise ValueError("No updates provided")
        changes = updates.model_dump(exclude_unset=True)
        for current in await self._require_all(reminder_ids):
            Reminder.model_validate({**current.model_dump(), **changes})
        now = self.clock.now()
        views = []
        for reminder_id in reminder_ids:
            reminder = await self.repository.update(reminder_id, updates)
            views.append(self._view(reminder, now))
        logger.info(
            "updated %s on reminders %s",
            ", ".join(sorted(updates.model_fields_set)),
            reminder_ids,
        )
        return views

    async def bulk_delete(self, reminder_ids: list[int]) -> int:
        """Delete several reminders; an unknown id deletes nothing.

        Raises:
            ReminderNotFoundError: If any reminder does not exist
        """
        await self._require_all(reminder_ids)
        for reminder_id in reminder_ids:
            await self.repository.delete(reminder_id)
        logger.info("reminders %s deleted", reminder_ids)
        return len(reminder_ids)

    async def calendar_month(self, year: int, month: int) -> dict[date, list[ReminderView]]:
        """Occurrences of every reminder in one month, grouped by day.

        Recurring reminders appear on each day they occur. Each entry is
        classified against its own occurrence time. Days without reminders
        map to an empty list.
        """
        now = self.clock.now()
        first = date(year, month, 1)
        last = first + relativedelta(months=1, days=-1)
        start, _ = day_bounds(first, self.engine.settings.tz)
        _, end = day_bounds(last, self.engine.settings.tz)

        days: dict[date, list[ReminderView]] = {
            first + timedelta(days=offset): [] for offset in range(last.day)
        }
        for reminder in await self.repository.list_all():
            for moment in self.engine.occurrences_between(reminder, start, end):
                days[moment.date()].append(
                    ReminderView(
                        reminder=reminder,
                        occurrence=moment,
                        classification=self.engine.classify_occurrence(
                            reminder, moment, now
                        ),
                    )
                )
        for views in days.values():
            views.sort(key=lambda view: (view.occurrence, view.reminder.id))
        return days

    async def add_category(self, category_data: CategoryCreate) -> Category:
        return await self.categories.add(category_data)

    async def delete_category(self, key: str) -> CategoryInfo:
        """Delete a custom category by id or name.

        Reminders that still use it display as the unknown category.

        Raises:
            ReminderNotFoundError: If no category matches ``key``
            ValueError: For the built-in categories
        """
        info = find_category(await self.category_lookup(), key)
        if info is None:
            raise ReminderNotFoundError(f"Unknown category '{key}'")
        if info.id in DEFAULT_CATEGORIES:
            raise ValueError(f"Category '{info.name}' is built in and cannot be deleted")
        await self.categories.delete(info.id)
        logger.info("category %s deleted", info.id)
        return info

    async def summary(self) -> Summary:
        """Dashboard statistics at the current instant."""
        reminders = await self.repository.list_all()
        lookup = await self.category_lookup()
        return self.engine.summarize(reminders, self.clock.now(), lookup=lookup)
