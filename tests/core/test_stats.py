"""Unit tests for progress statistics."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from remindpro_cli.core.categories import build_category_lookup
from remindpro_cli.core.filtering import occurrence_resolver
from remindpro_cli.core.lifecycle import Classification
from remindpro_cli.core.stats import (
    category_breakdown,
    completion_rate,
    percentage,
    progress_summary,
    state_counts,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def reminders(make_reminder, now):
    return [
        make_reminder(id=1, category="work", completed=True, date_time=now),
        make_reminder(id=2, category="work", date_time=now - timedelta(hours=1)),
        make_reminder(id=3, category="health", date_time=datetime(2024, 1, 12, 9, 0)),
        make_reminder(id=4, category="work", completed=True, date_time=datetime(2024, 1, 25)),
        make_reminder(id=5, category="garden", date_time=datetime(2024, 2, 5)),
    ]


class TestPercentage:
    @pytest.mark.parametrize(
        "part, total, expected",
        [(1, 3, 33), (2, 3, 67), (1, 2, 50), (0, 5, 0), (0, 0, 0), (4, 4, 100)],
    )
    def test_rounding(self, part, total, expected):
        assert percentage(part, total) == expected


class TestCompletionRate:
    def test_one_decimal(self, make_reminder):
        reminders = [
            make_reminder(id=1, completed=True),
            make_reminder(id=2),
            make_reminder(id=3),
        ]
        assert completion_rate(reminders) == 33.3

    def test_empty(self):
        assert completion_rate([]) == 0.0


class TestProgressSummary:
    def test_windows(self, reminders, now):
        summary = progress_summary(reminders, now, occurrence_resolver(now))
        assert (summary["today"].completed, summary["today"].total) == (1, 2)
        assert (summary["this-week"].completed, summary["this-week"].total) == (1, 3)
        assert (summary["this-month"].completed, summary["this-month"].total) == (2, 4)
        assert summary["this-week"].percentage == 33
        assert summary["today"].label == "Today"

    def test_empty_collection(self, now):
        summary = progress_summary([], now, occurrence_resolver(now))
        assert all(item.total == 0 and item.percentage == 0 for item in summary.values())


class TestCategoryBreakdown:
    def test_largest_first_with_unknown_bucket(self, reminders):
        breakdown = category_breakdown(reminders, build_category_lookup())
        assert [(c.category.id, c.count, c.completed) for c in breakdown] == [
            ("work", 3, 2),
            ("health", 1, 0),
            ("unknown", 1, 0),
        ]


class TestStateCounts:
    def test_every_state_present(self):
        counts = state_counts(
            [Classification("overdue", -3), Classification("overdue", -1)]
        )
        assert counts == {
            "completed": 0,
            "snoozed": 0,
            "overdue": 2,
            "due-soon": 0,
            "upcoming": 0,
        }
