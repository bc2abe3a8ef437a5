"""Storage adapters implementing the repository ports."""

from .json_file import JsonFileStore
from .memory import InMemoryCategoryRepository, InMemoryReminderRepository

__all__ = [
    "InMemoryReminderRepository",
    "InMemoryCategoryRepository",
    "JsonFileStore",
]
