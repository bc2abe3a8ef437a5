"""JSON file backed repositories.

The whole store is one JSON document::

    {"reminders": [...], "categories": [...]}

It is read once on open and rewritten after every mutation.
"""

from __future__ import annotations

import json
import os
from json import JSONDecodeError
from pathlib import Path

from pydantic import ValidationError

from remindpro_cli.adapters.memory import (
    InMemoryCategoryRepository,
    InMemoryReminderRepository,
)
from remindpro_cli.core.clock import Clock
from remindpro_cli.models import (
    Category,
    CategoryCreate,
    Reminder,
    ReminderCreate,
    ReminderUpdate,
)


class JsonFileReminderRepository(InMemoryReminderRepository):
    """Reminder repository that writes through to a ``JsonFileStore``."""

    def __init__(self, store: JsonFileStore, clock: Clock | None = None):
        super().__init__(clock=clock)
        self.store = store

    async def add(self, reminder_data: ReminderCreate) -> Reminder:
        reminder = await super().add(reminder_data)
        self.store.save()
        return reminder

    async def update(self, reminder_id: int, updates: ReminderUpdate) -> Reminder:
        reminder = await super().update(reminder_id, updates)
        self.store.save()
        return reminder

    async def delete(self, reminder_id: int) -> bool:
        deleted = await super().delete(reminder_id)
        self.store.save()
        return deleted


class JsonFileCategoryRepository(InMemoryCategoryRepository):
    """Category repository that writes through to a ``JsonFileStore``."""

    def __init__(self, store: JsonFileStore):
        super().__init__()
        self.store = store

    async def add(self, category_data: CategoryCreate) -> Category:
        category = await super().add(category_data)
        self.store.save()
        return category

    async def delete(self, category_id: str) -> bool:
        deleted = await super().delete(category_id)
        self.store.save()
        return deleted


class JsonFileStore:
    """Owns the JSON document and the repositories backed by it."""

    def __init__(self, path: str | Path, clock: Clock | None = None):
        self.path = Path(path)
        self.reminders = JsonFileReminderRepository(self, clock=clock)
        self.categories = JsonFileCategoryRepository(self)
        self.load()

    def load(self) -> None:
        """Read the document; a missing file is an empty store."""
        if not self.path.exists():
            return
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
            reminders = [Reminder.model_validate(r) for r in data.get("reminders", [])]
            categories = [Category.model_validate(c) for c in data.get("categories", [])]
        except (JSONDecodeError, ValidationError, AttributeError) as e:
            raise RuntimeError(f"Failed to load reminders from {self.path}: {e}") from e
        self.reminders.load(reminders)
        self.categories.load(categories)

    def save(self) -> None:
        """Write the document atomically."""
        document = {
            "reminders": [r.model_dump(mode="json") for r in self.reminders.snapshot()],
            "categories": [c.model_dump(mode="json") for c in self.categories.snapshot()],
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, self.path)
