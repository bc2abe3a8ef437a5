"""In-memory implementations of the repository ports."""

from __future__ import annotations

from collections.abc import Iterable

from remindpro_cli.core.clock import Clock, SystemClock
from remindpro_cli.models import (
    Category,
    CategoryCreate,
    Reminder,
    ReminderCreate,
    ReminderNotFoundError,
    ReminderUpdate,
)
from remindpro_cli.repositories import CategoryRepository, ReminderRepository


class InMemoryReminderRepository(ReminderRepository):
    """Reminder storage kept in a dict, ids assigned incrementally."""

    def __init__(self, reminders: Iterable[Reminder] = (), clock: Clock | None = None):
        self.clock = clock or SystemClock()
        self._reminders: dict[int, Reminder] = {}
        self._next_id = 1
        self.load(reminders)

    def load(self, reminders: Iterable[Reminder]) -> None:
        """Replace the stored reminders."""
        self._reminders = {r.id: r for r in reminders}
        self._next_id = max(self._reminders, default=0) + 1

    def snapshot(self) -> list[Reminder]:
        return list(self._reminders.values())

    def _require(self, reminder_id: int) -> Reminder:
        try:
            return self._reminders[reminder_id]
        except KeyError:
            raise ReminderNotFoundError(f"Reminder {reminder_id} not found") from None

    async def list_all(self) -> list[Reminder]:
        return self.snapshot()

    async def get(self, reminder_id: int) -> Reminder:
        return self._require(reminder_id)

    async def add(self, reminder_data: ReminderCreate) -> Reminder:
        now = self.clock.now()
        reminder = Reminder(
            id=self._next_id,
            created_at=now,
            last_modified=now,
            **reminder_data.model_dump(),
        )
        self._reminders[reminder.id] = reminder
        self._next_id += 1
        return reminder

    async def update(self, reminder_id: int, updates: ReminderUpdate) -> Reminder:
        current = self._require(reminder_id)
        changes = updates.model_dump(exclude_unset=True)
        # Re-validate so model invariants (custom rule, priority range) still hold
        updated = Reminder.model_validate(
            {**current.model_dump(), **changes, "last_modified": self.clock.now()}
        )
        self._reminders[reminder_id] = updated
        return updated

    async def delete(self, reminder_id: int) -> bool:
        self._require(reminder_id)
        del self._reminders[reminder_id]
        return True

    async def toggle_completion(self, reminder_id: int) -> Reminder:
        current = self._require(reminder_id)
        return await self.update(
            reminder_id, ReminderUpdate(completed=not current.completed)
        )


class InMemoryCategoryRepository(CategoryRepository):
    """Custom category storage kept in a dict."""

    def __init__(self, categories: Iterable[Category] = ()):
        self._categories: dict[str, Category] = {}
        self._next_id = 1
        self.load(categories)

    def load(self, categories: Iterable[Category]) -> None:
        self._categories = {c.id: c for c in categories}
        numeric = [int(cid) for cid in self._categories if cid.isdigit()]
        self._next_id = max(numeric, default=0) + 1

    def snapshot(self) -> list[Category]:
        return list(self._categories.values())

    async def list_all(self) -> list[Category]:
        return self.snapshot()

    async def add(self, category_data: CategoryCreate) -> Category:
        category = Category(id=str(self._next_id), **category_data.model_dump())
        self._categories[category.id] = category
        self._next_id += 1
        return category

    async def delete(self, category_id: str) -> bool:
        if category_id not in self._categories:
            raise ReminderNotFoundError(f"Category {category_id} not found")
        del self._categories[category_id]
        return True
