"""Configuration service for RemindPro.

This module provides the ConfigService class, the single source of truth for
configuration. It handles:

- Loading and saving config.json
- Dotted-key access (``ui.week_starts_on``) for the ``config`` command
- Resolving the reminders data file location
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, ValidationError

from remindpro_cli.models.config_models import AppConfig

_APP_NAME = "remindpro_cli"
_DATA_FILE = "reminders.json"


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir(_APP_NAME))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir(_APP_NAME))

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run - write the defaults
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        if self._config is None:
            raise RuntimeError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self._config.model_dump_json(indent=4))
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def reset_config(self, key: str | None = None) -> None:
        """Reset the whole configuration, or a single dotted key, to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
            return
        self.set(key, self.get_from_config(AppConfig(), key))

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    @staticmethod
    def get_from_config(config: AppConfig, key: str) -> Any:
        """Get value from a config object using dot notation."""
        value: Any = config
        for k in key.split("."):
            if not isinstance(value, BaseModel) or k not in type(value).model_fields:
                raise KeyError(f"Unknown config key: {key}")
            value = getattr(value, k)
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not exist
            ValueError: If the value does not validate
        """
        self.get(key)
        keys = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        try:
            self._config = AppConfig.model_validate(config_dict)
        except ValidationError as e:
            raise ValueError(f"Invalid value for {key}: {value!r}") from e
        self.save_config()

    def get_data_file(self) -> Path:
        """Location of the reminders JSON document."""
        configured = self.config.storage.data_file
        if configured:
            return Path(configured).expanduser()
        return self.data_dir / _DATA_FILE


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get the cached ConfigService instance."""
    return ConfigService()
