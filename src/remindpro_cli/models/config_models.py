"""Configuration models for RemindPro.

The engine never reads these directly; ``EngineSettings.from_config`` copies
the relevant values so they are passed by value into every computation.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

WeekStart = Literal["sunday", "monday"]

# Quick snooze actions offered on overdue and due-soon reminders
SNOOZE_PRESETS: tuple[int, ...] = (15, 60, 1440)


class UIConfig(BaseModel):
    """UI configuration."""

    timezone: str | None = Field(
        default=None, description="IANA zone name; None uses the system zone"
    )
    week_starts_on: WeekStart = Field(default="sunday")


class ReminderConfig(BaseModel):
    """Reminder behaviour configuration."""

    advance_minutes: int = Field(default=15, ge=0)
    snooze_presets: list[int] = Field(default_factory=lambda: list(SNOOZE_PRESETS))
    show_completed: bool = Field(default=True)

    @field_validator("snooze_presets")
    @classmethod
    def validate_presets(cls, v: list[int]) -> list[int]:
        if not v:
            raise ValueError("at least one snooze preset is required")
        if any(minutes <= 0 for minutes in v):
            raise ValueError("snooze presets must be positive minute counts")
        return v


class OutputConfig(BaseModel):
    """Output configuration."""

    format: str = Field(default="pretty")
    compact: bool = Field(default=False)


class StorageConfig(BaseModel):
    """Storage configuration."""

    data_file: str | None = Field(
        default=None, description="JSON reminders file; None uses the data dir"
    )


class AppConfig(BaseModel):
    """Main RemindPro configuration"""

    ui: UIConfig = Field(default_factory=UIConfig)
    reminders: ReminderConfig = Field(default_factory=ReminderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
