"""Service layer for RemindPro."""

from .config_service import ConfigService, get_config_service
from .reminder_service import ReminderService, ReminderView

__all__ = [
    "ConfigService",
    "get_config_service",
    "ReminderService",
    "ReminderView",
]
