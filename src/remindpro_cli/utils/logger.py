"""Application-wide logger for remindpro.

Everything under the ``remindpro_cli`` logger namespace ends up in one
rotating file in the platform log directory. Set ``REMINDPRO_LOG_LEVEL``
(e.g. ``INFO``) to log less than the default ``DEBUG``.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "remindpro_cli"
_LOG_FILE = "remindpro.log"
_LEVEL_ENV = "REMINDPRO_LOG_LEVEL"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def get_log_path() -> Path:
    """Location of the current log file."""
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def _configured_level() -> int:
    name = os.environ.get(_LEVEL_ENV, "DEBUG").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.DEBUG


def get_logger() -> logging.Logger:
    """Return the singleton application logger, initialising it on first call.

    Module loggers (``logging.getLogger(__name__)``) inside the package
    propagate into this one.
    """
    global _logger
    if _logger is not None:
        return _logger

    log_path = get_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s:%(lineno)d] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(_configured_level())
    if not logger.handlers:
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger
