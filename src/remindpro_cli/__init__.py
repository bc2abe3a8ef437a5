"""RemindPro CLI - personal reminders with recurrence, snooze and filtered views."""

__version__ = "0.3.0"
