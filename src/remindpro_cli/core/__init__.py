"""Reminder temporal-state engine.

Pure, synchronous functions that derive occurrence times, lifecycle states,
time-window membership, filtered views and display order from reminder
records and an explicit ``now``.
"""

from .categories import CategoryInfo, build_category_lookup, resolve_category
from .clock import Clock, FixedClock, SystemClock
from .engine import EngineSettings, ReminderEngine, Summary
from .filtering import apply_filters
from .lifecycle import LIFECYCLE_STATES, Classification, LifecycleState, classify_state
from .recurrence import CustomRuleParser, parse_rrule, resolve_next_occurrence
from .snooze import compute_snooze_until
from .sorting import sort_reminders
from .windows import in_window

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "ReminderEngine",
    "EngineSettings",
    "Summary",
    "resolve_next_occurrence",
    "parse_rrule",
    "CustomRuleParser",
    "classify_state",
    "Classification",
    "LifecycleState",
    "LIFECYCLE_STATES",
    "in_window",
    "apply_filters",
    "sort_reminders",
    "compute_snooze_until",
    "CategoryInfo",
    "build_category_lookup",
    "resolve_category",
]
