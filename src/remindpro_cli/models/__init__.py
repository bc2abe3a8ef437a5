"""RemindPro domain models.

This package contains the Pydantic models that represent reminders,
categories, view filters and application configuration.
"""

from .config_models import SNOOZE_PRESETS, AppConfig, WeekStart
from .core import (
    ALERT_TYPES,
    COMPLETION_FILTERS,
    PRIORITIES,
    PRIORITY_NAMES,
    RECURRENCES,
    TIME_WINDOWS,
    AlertType,
    Category,
    CategoryCreate,
    CompletionFilter,
    DateRange,
    Recurrence,
    Reminder,
    ReminderCreate,
    ReminderFilters,
    ReminderUpdate,
    TimeWindow,
)
from .exceptions import (
    InvalidRecurrenceError,
    InvalidSnoozeDurationError,
    MalformedCustomRuleError,
    ReminderNotFoundError,
    RemindProError,
)

__all__ = [
    # Reminder models
    "Reminder",
    "ReminderCreate",
    "ReminderUpdate",
    "ReminderFilters",
    "DateRange",
    # Category models
    "Category",
    "CategoryCreate",
    # Value sets
    "Recurrence",
    "AlertType",
    "TimeWindow",
    "CompletionFilter",
    "RECURRENCES",
    "ALERT_TYPES",
    "TIME_WINDOWS",
    "COMPLETION_FILTERS",
    "PRIORITIES",
    "PRIORITY_NAMES",
    # Config models
    "AppConfig",
    "SNOOZE_PRESETS",
    "WeekStart",
    # Errors
    "RemindProError",
    "InvalidRecurrenceError",
    "InvalidSnoozeDurationError",
    "MalformedCustomRuleError",
    "ReminderNotFoundError",
]
