"""CLI tests for the config commands."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from remindpro_cli.commands.config import app, parse_value

runner = CliRunner()


class TestParseValue:
    def test_json_values(self):
        assert parse_value("30") == 30
        assert parse_value("true") is True
        assert parse_value("[5, 10]") == [5, 10]

    def test_plain_text(self):
        assert parse_value("monday") == "monday"
        assert parse_value("Europe/Berlin") == "Europe/Berlin"


class TestConfigCommands:
    def test_set_and_get(self, tmp_config):
        result = runner.invoke(app, ["set", "ui.week_starts_on", "monday"])
        assert result.exit_code == 0
        result = runner.invoke(app, ["get", "ui.week_starts_on"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == "monday"

    def test_set_list_value(self, tmp_config):
        result = runner.invoke(app, ["set", "reminders.snooze_presets", "[5, 30]"])
        assert result.exit_code == 0
        result = runner.invoke(app, ["get", "reminders.snooze_presets"])
        assert json.loads(result.stdout) == [5, 30]

    def test_set_invalid_value(self, tmp_config):
        result = runner.invoke(app, ["set", "ui.week_starts_on", "friday"])
        assert result.exit_code == 2

    def test_get_unknown_key(self, tmp_config):
        result = runner.invoke(app, ["get", "ui.theme"])
        assert result.exit_code == 2
        assert "Unknown config key" in result.stdout

    def test_show_json(self, tmp_config):
        result = runner.invoke(app, ["show", "-o", "json"])
        assert result.exit_code == 0
        assert '"week_starts_on": "sunday"' in result.stdout

    def test_reset_key(self, tmp_config):
        runner.invoke(app, ["set", "reminders.advance_minutes", "45"])
        result = runner.invoke(app, ["reset", "reminders.advance_minutes", "--yes"])
        assert result.exit_code == 0
        result = runner.invoke(app, ["get", "reminders.advance_minutes"])
        assert json.loads(result.stdout) == 15
