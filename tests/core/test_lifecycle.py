"""Unit tests for lifecycle classification."""

from __future__ import annotations

from datetime import timedelta

import pytest

from remindpro_cli.core.lifecycle import (
    Classification,
    classify_state,
    minutes_until,
)


class TestClassifyState:
    def test_due_soon_inside_advance_window(self, make_reminder, now):
        reminder = make_reminder(remind_before=15)
        result = classify_state(reminder, now + timedelta(minutes=10), now)
        assert result == Classification("due-soon", 10)

    def test_boundary_is_due_soon(self, make_reminder, now):
        reminder = make_reminder(remind_before=15)
        assert classify_state(reminder, now + timedelta(minutes=15), now).state == "due-soon"

    def test_just_outside_window_is_upcoming(self, make_reminder, now):
        reminder = make_reminder(remind_before=15)
        result = classify_state(reminder, now + timedelta(minutes=16), now)
        assert result.state == "upcoming"
        assert result.due_in_minutes == 16

    def test_past_occurrence_is_overdue(self, make_reminder, now):
        reminder = make_reminder()
        result = classify_state(reminder, now - timedelta(minutes=5), now)
        assert result == Classification("overdue", -5)

    def test_occurrence_at_now_is_not_overdue(self, make_reminder, now):
        assert classify_state(make_reminder(), now, now).state == "due-soon"

    def test_active_snooze_beats_overdue(self, make_reminder, now):
        reminder = make_reminder(snooze_until=now + timedelta(minutes=30))
        result = classify_state(reminder, now - timedelta(minutes=5), now)
        assert result.state == "snoozed"

    def test_expired_snooze_is_ignored(self, make_reminder, now):
        reminder = make_reminder(snooze_until=now - timedelta(minutes=1))
        assert classify_state(reminder, now - timedelta(minutes=5), now).state == "overdue"

    def test_completed_dominates_everything(self, make_reminder, now):
        reminder = make_reminder(completed=True, snooze_until=now + timedelta(hours=1))
        result = classify_state(reminder, now - timedelta(days=2), now)
        assert result.state == "completed"

    def test_setting_default_used_when_reminder_has_none(self, make_reminder, now):
        reminder = make_reminder(remind_before=None)
        occurrence = now + timedelta(minutes=20)
        assert classify_state(reminder, occurrence, now).state == "upcoming"
        assert classify_state(reminder, occurrence, now, remind_before=30).state == "due-soon"

    def test_reminder_value_beats_setting(self, make_reminder, now):
        reminder = make_reminder(remind_before=5)
        result = classify_state(reminder, now + timedelta(minutes=10), now, remind_before=60)
        assert result.state == "upcoming"

    def test_zero_remind_before(self, make_reminder, now):
        reminder = make_reminder(remind_before=0)
        assert classify_state(reminder, now + timedelta(minutes=1), now).state == "upcoming"

    def test_unusable_occurrence_is_upcoming(self, make_reminder, now):
        result = classify_state(make_reminder(), None, now)
        assert result == Classification("upcoming", None)

    def test_unusable_occurrence_still_completed(self, make_reminder, now):
        result = classify_state(make_reminder(completed=True), None, now)
        assert result == Classification("completed", None)

    @pytest.mark.parametrize(
        "state, actionable",
        [
            ("overdue", True),
            ("due-soon", True),
            ("snoozed", False),
            ("upcoming", False),
            ("completed", False),
        ],
    )
    def test_is_actionable(self, state, actionable):
        assert Classification(state, 0).is_actionable is actionable


class TestMinutesUntil:
    def test_floors_partial_minutes(self, now):
        assert minutes_until(now + timedelta(seconds=90), now) == 1
        assert minutes_until(now - timedelta(seconds=30), now) == -1
