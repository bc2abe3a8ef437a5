"""Repository abstraction layer for RemindPro.

This module defines the abstract base classes (interfaces) for storage,
following the Ports & Adapters pattern. The reminder engine never talks to
storage; the service layer reads reminders through these ports and writes
snooze and completion changes back through them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from remindpro_cli.models import (
    Category,
    CategoryCreate,
    Reminder,
    ReminderCreate,
    ReminderUpdate,
)


class ReminderRepository(ABC):
    """Abstract base class for reminder persistence operations."""

    @abstractmethod
    async def list_all(self) -> list[Reminder]:
        """List every stored reminder in storage order."""
        raise NotImplementedError(
            "ReminderRepository.list_all() must be implemented by adapter"
        )

    @abstractmethod
    async def get(self, reminder_id: int) -> Reminder:
        """Get a specific reminder by ID.

        Raises:
            ReminderNotFoundError: If the reminder does not exist
        """
        raise NotImplementedError(
            "ReminderRepository.get() must be implemented by adapter"
        )

    @abstractmethod
    async def add(self, reminder_data: ReminderCreate) -> Reminder:
        """Create a new reminder.

        Returns:
            Created Reminder with generated ID and timestamps
        """
        raise NotImplementedError(
            "ReminderRepository.add() must be implemented by adapter"
        )

    @abstractmethod
    async def update(self, reminder_id: int, updates: ReminderUpdate) -> Reminder:
        """Apply a partial update.

        Only fields explicitly set on ``updates`` are changed, so a snooze can
        be cleared by setting ``snooze_until=None``.

        Raises:
            ReminderNotFoundError: If the reminder does not exist
        """
        raise NotImplementedError(
            "ReminderRepository.update() must be implemented by adapter"
        )

    @abstractmethod
    async def delete(self, reminder_id: int) -> bool:
        """Delete a reminder.

        Raises:
            ReminderNotFoundError: If the reminder does not exist
        """
        raise NotImplementedError(
            "ReminderRepository.delete() must be implemented by adapter"
        )

    @abstractmethod
    async def toggle_completion(self, reminder_id: int) -> Reminder:
        """Flip the completed flag.

        Raises:
            ReminderNotFoundError: If the reminder does not exist
        """
        raise NotImplementedError(
            "ReminderRepository.toggle_completion() must be implemented by adapter"
        )


class CategoryRepository(ABC):
    """Abstract base class for custom category persistence."""

    @abstractmethod
    async def list_all(self) -> list[Category]:
        """List custom categories."""
        raise NotImplementedError(
            "CategoryRepository.list_all() must be implemented by adapter"
        )

    @abstractmethod
    async def add(self, category_data: CategoryCreate) -> Category:
        """Create a custom category with a generated id."""
        raise NotImplementedError(
            "CategoryRepository.add() must be implemented by adapter"
        )

    @abstractmethod
    async def delete(self, category_id: str) -> bool:
        """Delete a custom category.

        Raises:
            ReminderNotFoundError: If the category does not exist
        """
        raise NotImplementedError(
            "CategoryRepository.delete() must be implemented by adapter"
        )
