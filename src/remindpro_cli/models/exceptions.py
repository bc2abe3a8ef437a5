"""Custom exceptions for RemindPro."""


class RemindProError(Exception):
    """Base exception for all RemindPro errors."""


class InvalidRecurrenceError(RemindProError, ValueError):
    """Raised when a recurrence value is outside the supported set."""


class InvalidSnoozeDurationError(RemindProError, ValueError):
    """Raised when a snooze duration is not a positive whole number of minutes."""


class MalformedCustomRuleError(RemindProError, ValueError):
    """Raised when a custom recurrence rule cannot be parsed."""


class ReminderNotFoundError(RemindProError, LookupError):
    """Raised when a reminder or category does not exist in storage."""
