"""Reminder, category and filter data models."""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal, get_args

from pydantic import BaseModel, Field, field_validator, model_validator

Recurrence = Literal["one-time", "daily", "weekly", "monthly", "custom"]
AlertType = Literal["notification", "sound", "vibration", "email", "all"]
TimeWindow = Literal[
    "all", "today", "tomorrow", "this-week", "this-month", "overdue", "custom"
]
CompletionFilter = Literal["all", "completed", "incomplete"]

RECURRENCES: tuple[str, ...] = get_args(Recurrence)
ALERT_TYPES: tuple[str, ...] = get_args(AlertType)
TIME_WINDOWS: tuple[str, ...] = get_args(TimeWindow)
COMPLETION_FILTERS: tuple[str, ...] = get_args(CompletionFilter)

PRIORITIES: frozenset[int] = frozenset({1, 2, 3})
PRIORITY_NAMES = {1: "Low", 2: "Medium", 3: "High"}


def _require_rule(recurrence: str | None, rule: str | None) -> None:
    if recurrence == "custom" and not (rule and rule.strip()):
        raise ValueError("recurrence_rule is required when recurrence is 'custom'")


class Reminder(BaseModel):
    """Reminder model as returned by storage.

    Attributes:
        id: Unique integer identifier
        title: Short reminder title
        description: Optional longer description
        notes: Optional free-form notes
        date_time: Anchor timestamp of the schedule (first or only occurrence)
        category: Default category id (work/health/study/personal) or custom id
        recurrence: Recurrence kind
        recurrence_rule: Rule text, required when recurrence is "custom"
        alert_type: How the external notifier should alert
        alert_sound: Sound name used by the notifier
        completed: Completion flag
        priority: Priority level (1=low, 3=high)
        tags: Free-form tags
        snooze_until: Optional snooze override timestamp
        remind_before: Advance warning in minutes (None = configured default)
        created_at: Creation timestamp
        last_modified: Last update timestamp
    """

    id: int
    title: str = Field(min_length=1)
    description: str | None = None
    notes: str | None = None
    date_time: datetime
    category: str
    recurrence: Recurrence = "one-time"
    recurrence_rule: str | None = None
    alert_type: AlertType = "notification"
    alert_sound: str = "default"
    completed: bool = False
    priority: int = Field(default=1, ge=1, le=3)
    tags: list[str] = Field(default_factory=list)
    snooze_until: datetime | None = None
    remind_before: int | None = Field(default=None, ge=0)
    created_at: datetime | None = None
    last_modified: datetime | None = None

    @model_validator(mode="after")
    def check_custom_rule(self) -> Reminder:
        _require_rule(self.recurrence, self.recurrence_rule)
        return self


class ReminderCreate(BaseModel):
    """Model for creating a new reminder.

    ``alert_type`` is required; ``completed`` and ``priority`` get their
    defaults here.
    """

    title: str = Field(min_length=1)
    description: str | None = None
    notes: str | None = None
    date_time: datetime
    category: str
    recurrence: Recurrence = "one-time"
    recurrence_rule: str | None = None
    alert_type: AlertType
    alert_sound: str = "default"
    priority: int = Field(default=1, ge=1, le=3)
    tags: list[str] = Field(default_factory=list)
    remind_before: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def check_custom_rule(self) -> ReminderCreate:
        _require_rule(self.recurrence, self.recurrence_rule)
        return self


class ReminderUpdate(BaseModel):
    """Model for a partial reminder update.

    All fields are optional - only provided fields will be updated.
    """

    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    notes: str | None = None
    date_time: datetime | None = None
    category: str | None = None
    recurrence: Recurrence | None = None
    recurrence_rule: str | None = None
    alert_type: AlertType | None = None
    alert_sound: str | None = None
    completed: bool | None = None
    priority: int | None = Field(default=None, ge=1, le=3)
    tags: list[str] | None = None
    snooze_until: datetime | None = None
    remind_before: int | None = Field(default=None, ge=0)


class Category(BaseModel):
    """Custom category stored alongside reminders."""

    id: str
    name: str
    color: str = "#9e9e9e"
    emoji: str | None = None
    is_default: bool = False


class CategoryCreate(BaseModel):
    """Model for creating a custom category."""

    name: str = Field(min_length=1)
    color: str = "#9e9e9e"
    emoji: str | None = None


class DateRange(BaseModel):
    """Inclusive calendar-day range used by the ``custom`` time window.

    ``end`` defaults to ``start`` so a single picked day is a valid range.
    """

    start: date
    end: date | None = None

    @field_validator("start", "end", mode="before")
    @classmethod
    def coerce_datetime(cls, v):
        if isinstance(v, datetime):
            return v.date()
        return v

    @model_validator(mode="after")
    def check_order(self) -> DateRange:
        if self.end is None:
            self.end = self.start
        if self.start > self.end:
            raise ValueError("custom range start must not be after its end")
        return self


class ReminderFilters(BaseModel):
    """Composite view filter.

    Attributes:
        search_text: Case-insensitive substring over title/description/notes/tags
        time_window: Named time window applied to the occurrence time
        custom_range: Day range for the ``custom`` window
        categories: Category ids to keep (empty = all)
        completion: Completion filter
        priorities: Priority levels to keep (empty is coerced to all levels)
    """

    search_text: str = ""
    time_window: TimeWindow = "all"
    custom_range: DateRange | None = None
    categories: set[str] = Field(default_factory=set)
    completion: CompletionFilter = "all"
    priorities: set[int] = Field(default_factory=lambda: set(PRIORITIES))

    @field_validator("priorities")
    @classmethod
    def coerce_priorities(cls, v: set[int]) -> set[int]:
        if not v:
            return set(PRIORITIES)
        unknown = v - PRIORITIES
        if unknown:
            raise ValueError(f"unknown priority levels: {sorted(unknown)}")
        return v
