"""CLI tests for the category commands."""

from __future__ import annotations

import json
from unittest.mock import patch

from typer.testing import CliRunner

from remindpro_cli.commands.categories_command import app

runner = CliRunner()


def test_list_defaults(reminder_service):
    with patch(
        "remindpro_cli.commands.categories_command.get_reminder_service",
        return_value=reminder_service,
    ):
        result = runner.invoke(app, ["list", "-o", "json"])
    assert result.exit_code == 0
    assert [c["id"] for c in json.loads(result.stdout)] == [
        "work",
        "health",
        "study",
        "personal",
    ]


def test_add_then_list(reminder_service):
    with patch(
        "remindpro_cli.commands.categories_command.get_reminder_service",
        return_value=reminder_service,
    ):
        result = runner.invoke(app, ["add", "Garden", "--color", "#00aa00"])
        assert result.exit_code == 0
        assert "Garden" in result.stdout
        result = runner.invoke(app, ["list", "-o", "json"])
    garden = json.loads(result.stdout)[-1]
    assert garden == {
        "id": "1",
        "name": "Garden",
        "color": "#00aa00",
        "emoji": None,
        "is_default": False,
    }


def test_table_output(reminder_service):
    with patch(
        "remindpro_cli.commands.categories_command.get_reminder_service",
        return_value=reminder_service,
    ):
        result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "Personal" in result.stdout


def test_delete_custom_category(reminder_service):
    with patch(
        "remindpro_cli.commands.categories_command.get_reminder_service",
        return_value=reminder_service,
    ):
        runner.invoke(app, ["add", "Garden"])
        result = runner.invoke(app, ["delete", "garden", "--yes"])
        assert result.exit_code == 0
        assert "Deleted category 'Garden'" in result.stdout
        result = runner.invoke(app, ["list", "-o", "json"])
    assert "Garden" not in [c["name"] for c in json.loads(result.stdout)]


def test_delete_builtin_category_is_invalid(reminder_service):
    with patch(
        "remindpro_cli.commands.categories_command.get_reminder_service",
        return_value=reminder_service,
    ):
        result = runner.invoke(app, ["delete", "work", "--yes"])
    assert result.exit_code == 2
    assert "built in" in result.stdout


def test_delete_unknown_category_is_not_found(reminder_service):
    with patch(
        "remindpro_cli.commands.categories_command.get_reminder_service",
        return_value=reminder_service,
    ):
        result = runner.invoke(app, ["delete", "nope", "--yes"])
    assert result.exit_code == 5
