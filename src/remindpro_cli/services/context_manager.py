"""Bootstrap of the storage and service objects used by commands.

Usage Pattern:
    from remindpro_cli.services.context_manager import get_reminder_service

    service = get_reminder_service()
    views = await service.list_view(filters)
"""

from __future__ import annotations

from functools import lru_cache

from remindpro_cli.adapters.json_file import JsonFileStore
from remindpro_cli.core.engine import EngineSettings, ReminderEngine
from remindpro_cli.services.config_service import get_config_service
from remindpro_cli.services.reminder_service import ReminderService
from remindpro_cli.utils.logger import get_logger


@lru_cache(maxsize=1)
def get_store() -> JsonFileStore:
    """Open the reminders document configured for this user."""
    path = get_config_service().get_data_file()
    get_logger().debug("opening reminder store at %s", path)
    return JsonFileStore(path)


@lru_cache(maxsize=1)
def get_reminder_service() -> ReminderService:
    """Get a cached ReminderService wired to the configured store and settings."""
    config = get_config_service().config
    store = get_store()
    engine = ReminderEngine(EngineSettings.from_config(config))
    return ReminderService(store.reminders, store.categories, engine=engine)
