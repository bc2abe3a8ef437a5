"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state and a
small factory for reminder records.
"""

from __future__ import annotations

from datetime import datetime
from unittest.mock import patch

import pytest

from remindpro_cli.adapters.memory import (
    InMemoryCategoryRepository,
    InMemoryReminderRepository,
)
from remindpro_cli.core.clock import FixedClock
from remindpro_cli.models import Reminder
from remindpro_cli.services.reminder_service import ReminderService

# Wednesday; with a Sunday week start the week runs Jan 7 - Jan 13.
NOW = datetime(2024, 1, 10, 12, 0)


# ---------------------------------------------------------------------------
# Reminder helpers
# ---------------------------------------------------------------------------


def _make_reminder(**overrides) -> Reminder:
    """Build a Reminder with sensible defaults; any field can be overridden."""
    data = {
        "id": 1,
        "title": "Take vitamins",
        "date_time": NOW,
        "category": "health",
    }
    data.update(overrides)
    return Reminder(**data)


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture()
def reminder_service(clock):
    """ReminderService over empty in-memory repositories and a frozen clock."""
    return ReminderService(
        InMemoryReminderRepository(clock=clock),
        InMemoryCategoryRepository(),
        clock=clock,
    )


# ---------------------------------------------------------------------------
# Config isolation helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory.

    Patches platform dirs so config/data files land in *tmp_path* only.
    Also clears the lru_cache so each test gets a fresh service instance.
    """
    from remindpro_cli.services.config_service import get_config_service

    tmpdir = str(tmp_path)
    get_config_service.cache_clear()
    with patch("remindpro_cli.services.config_service.user_config_dir", return_value=tmpdir):
        with patch("remindpro_cli.services.config_service.user_data_dir", return_value=tmpdir):
            from remindpro_cli.services.config_service import ConfigService

            svc = ConfigService()
            yield svc
    get_config_service.cache_clear()


@pytest.fixture()
def make_reminder():
    """Factory fixture: ``make_reminder(title=..., recurrence=...)``."""
    return _make_reminder


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path):
    """Send the application log file into *tmp_path* for every test."""
    import logging

    import remindpro_cli.utils.logger as logger_mod

    def _reset():
        logger_mod._logger = None
        app_logger = logging.getLogger("remindpro_cli")
        for handler in list(app_logger.handlers):
            handler.close()
            app_logger.removeHandler(handler)

    _reset()
    with patch("remindpro_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield
    _reset()
