"""Unit tests for command_wrapper and AppError."""

from __future__ import annotations

import pytest
import typer

from remindpro_cli.commands.decorators import AppError, command_wrapper
from remindpro_cli.models import (
    InvalidRecurrenceError,
    InvalidSnoozeDurationError,
    MalformedCustomRuleError,
    ReminderNotFoundError,
)


def _exit_code_for(error: Exception) -> int:
    @command_wrapper
    async def failing():
        raise error

    with pytest.raises(typer.Exit) as exc_info:
        failing()
    return exc_info.value.exit_code


class TestCommandWrapper:
    def test_runs_coroutines(self):
        @command_wrapper
        async def answer():
            return 42

        assert answer() == 42

    def test_runs_plain_functions(self):
        @command_wrapper
        def answer():
            return "sync"

        assert answer() == "sync"

    def test_preserves_name(self):
        @command_wrapper
        async def my_command():
            return None

        assert my_command.__name__ == "my_command"

    @pytest.mark.parametrize(
        "error, code",
        [
            (AppError("custom", 7), 7),
            (ReminderNotFoundError("Reminder 1 not found"), 5),
            (InvalidSnoozeDurationError("negative"), 2),
            (InvalidRecurrenceError("yearly"), 2),
            (MalformedCustomRuleError("bad rule"), 2),
            (ValueError("bad value"), 2),
            (KeyError("Unknown config key: x"), 2),
            (RuntimeError("Failed to load reminders"), 4),
            (ZeroDivisionError("boom"), 1),
        ],
    )
    def test_exit_codes(self, error, code):
        assert _exit_code_for(error) == code

    def test_error_message_is_printed(self, capsys):
        _exit_code_for(ReminderNotFoundError("Reminder 9 not found"))
        assert "Reminder 9 not found" in capsys.readouterr().out

    def test_typer_exit_passes_through(self):
        @command_wrapper
        def stop():
            raise typer.Exit(0)

        with pytest.raises(typer.Exit) as exc_info:
            stop()
        assert exc_info.value.exit_code == 0
