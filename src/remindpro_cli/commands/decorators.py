"""Decorators for command functions."""

import asyncio
import functools
import time
import traceback
from collections.abc import Callable

import typer
from rich.markup import escape

from remindpro_cli.models.exceptions import (
    InvalidRecurrenceError,
    InvalidSnoozeDurationError,
    MalformedCustomRuleError,
    ReminderNotFoundError,
)
from remindpro_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    ERROR_STORAGE,
)
from remindpro_cli.utils.logger import get_logger
from remindpro_cli.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def _as_app_error(error: Exception) -> AppError | None:
    """Translate domain errors into an AppError with the matching exit code."""
    if isinstance(error, ReminderNotFoundError):
        return AppError(str(error), ERROR_NOT_FOUND)
    if isinstance(
        error,
        (InvalidRecurrenceError, InvalidSnoozeDurationError, MalformedCustomRuleError),
    ):
        return AppError(str(error), ERROR_INVALID_ARGS)
    if isinstance(error, (ValueError, KeyError)):
        message = error.args[0] if isinstance(error, KeyError) and error.args else str(error)
        return AppError(str(message), ERROR_INVALID_ARGS)
    if isinstance(error, (RuntimeError, OSError)):
        return AppError(str(error), ERROR_STORAGE)
    return None


def command_wrapper(func: Callable):
    """Decorator to wrap command functions with common functionality."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            if asyncio.iscoroutinefunction(func):
                result = asyncio.run(func(*args, **kwargs))
            else:
                result = func(*args, **kwargs)

            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except typer.Exit:
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            app_error = e if isinstance(e, AppError) else _as_app_error(e)
            if app_error is not None:
                logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
                format_error(escape(str(app_error)))
                raise typer.Exit(code=app_error.exit_code) from e

            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            # Generic fallback for unexpected crashes
            format_error(f"An unexpected error occurred: {escape(str(e))}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
