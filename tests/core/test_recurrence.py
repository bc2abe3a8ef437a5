"""Unit tests for recurrence resolution."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from remindpro_cli.core.recurrence import (
    RECURRENCE_PATTERNS,
    describe_recurrence,
    describe_rrule,
    parse_rrule,
    resolve_next_occurrence,
    resolve_rrule,
)
from remindpro_cli.models.exceptions import (
    InvalidRecurrenceError,
    MalformedCustomRuleError,
)


class TestResolveRrule:
    def test_named_patterns(self):
        assert resolve_rrule("daily") == "FREQ=DAILY"
        assert resolve_rrule("bi-weekly") == "FREQ=WEEKLY;INTERVAL=2"

    def test_case_insensitive(self):
        assert resolve_rrule(" Weekdays ") == RECURRENCE_PATTERNS["weekdays"]

    def test_unknown_returns_none(self):
        assert resolve_rrule("hourly") is None
        assert resolve_rrule("") is None


class TestDescribe:
    def test_known_rrule(self):
        assert describe_rrule("FREQ=WEEKLY;INTERVAL=2") == "bi-weekly"

    def test_unknown_rrule_returns_rrule_itself(self):
        assert describe_rrule("FREQ=HOURLY") == "FREQ=HOURLY"

    def test_recurrence_labels(self):
        assert describe_recurrence("one-time") == "One-time"
        assert describe_recurrence("monthly") == "Monthly"

    def test_custom_label_includes_rule(self):
        assert describe_recurrence("custom", "weekdays") == "Custom (weekdays)"
        assert describe_recurrence("custom", "FREQ=HOURLY") == "Custom (FREQ=HOURLY)"


# ---------------------------------------------------------------------------
# Fixed-step recurrences
# ---------------------------------------------------------------------------


class TestFixedSteps:
    def test_daily_catches_up_to_today(self):
        """Daily anchor Jan 1 09:00 evaluated Jan 10 08:00 is due Jan 10 09:00."""
        result = resolve_next_occurrence(
            datetime(2024, 1, 1, 9, 0), "daily", None, datetime(2024, 1, 10, 8, 0)
        )
        assert result == datetime(2024, 1, 10, 9, 0)

    def test_daily_after_todays_time_moves_to_tomorrow(self):
        result = resolve_next_occurrence(
            datetime(2024, 1, 1, 9, 0), "daily", None, datetime(2024, 1, 10, 9, 1)
        )
        assert result == datetime(2024, 1, 11, 9, 0)

    def test_now_exactly_on_occurrence_returns_it(self):
        result = resolve_next_occurrence(
            datetime(2024, 1, 1, 9, 0), "daily", None, datetime(2024, 1, 5, 9, 0)
        )
        assert result == datetime(2024, 1, 5, 9, 0)

    def test_weekly(self):
        result = resolve_next_occurrence(
            datetime(2024, 1, 1, 9, 0), "weekly", None, datetime(2024, 1, 20, 12, 0)
        )
        assert result == datetime(2024, 1, 22, 9, 0)

    def test_monthly_clamps_to_last_day(self):
        """Jan 31 monthly lands on Feb 29 in a leap year."""
        result = resolve_next_occurrence(
            datetime(2024, 1, 31, 10, 0), "monthly", None, datetime(2024, 2, 15)
        )
        assert result == datetime(2024, 2, 29, 10, 0)

    def test_monthly_steps_from_anchor_not_from_clamped_date(self):
        result = resolve_next_occurrence(
            datetime(2024, 1, 31, 10, 0), "monthly", None, datetime(2024, 3, 1)
        )
        assert result == datetime(2024, 3, 31, 10, 0)

    def test_monthly_later_in_same_month_rolls_over(self):
        result = resolve_next_occurrence(
            datetime(2024, 1, 5, 8, 0), "monthly", None, datetime(2024, 4, 20)
        )
        assert result == datetime(2024, 5, 5, 8, 0)

    def test_future_anchor_is_returned_unchanged(self):
        base = datetime(2024, 6, 1, 9, 0)
        assert resolve_next_occurrence(base, "weekly", None, datetime(2024, 1, 1)) == base

    @pytest.mark.parametrize("recurrence", ["daily", "weekly", "monthly"])
    def test_result_never_before_now(self, recurrence):
        base = datetime(2023, 11, 30, 23, 30)
        now = datetime(2024, 2, 29, 23, 45)
        result = resolve_next_occurrence(base, recurrence, None, now)
        assert result >= now


class TestOneTime:
    def test_past_one_time_stays_put(self):
        base = datetime(2024, 1, 1, 9, 0)
        assert resolve_next_occurrence(base, "one-time", None, datetime(2024, 3, 1)) == base

    def test_invalid_recurrence_raises(self):
        with pytest.raises(InvalidRecurrenceError):
            resolve_next_occurrence(datetime(2024, 1, 1), "yearly", None, datetime(2024, 3, 1))


class TestTimezones:
    def test_daily_keeps_wall_clock_across_dst(self):
        """A 09:00 daily reminder stays at 09:00 local after the spring change."""
        ny = ZoneInfo("America/New_York")
        now = datetime(2024, 3, 11, 12, 0, tzinfo=ZoneInfo("UTC"))  # 08:00 EDT
        result = resolve_next_occurrence(
            datetime(2024, 3, 9, 9, 0), "daily", None, now, tz=ny
        )
        assert result == datetime(2024, 3, 11, 9, 0, tzinfo=ny)
        assert result.utcoffset() == timedelta(hours=-4)


# ---------------------------------------------------------------------------
# Custom rules
# ---------------------------------------------------------------------------


class TestCustomRules:
    def test_rrule_by_day(self):
        result = resolve_next_occurrence(
            datetime(2024, 1, 1, 9, 0),  # Monday
            "custom",
            "FREQ=WEEKLY;BYDAY=MO,WE",
            datetime(2024, 1, 4, 10, 0),  # Thursday
        )
        assert result == datetime(2024, 1, 8, 9, 0)

    def test_rrule_prefix_is_accepted(self):
        result = resolve_next_occurrence(
            datetime(2024, 1, 1, 9, 0), "custom", "RRULE:FREQ=DAILY", datetime(2024, 1, 3, 10, 0)
        )
        assert result == datetime(2024, 1, 4, 9, 0)

    def test_named_pattern(self):
        result = resolve_next_occurrence(
            datetime(2024, 1, 5, 9, 0),  # Friday
            "custom",
            "weekdays",
            datetime(2024, 1, 6, 12, 0),
        )
        assert result == datetime(2024, 1, 8, 9, 0)

    def test_exhausted_series_returns_last_occurrence(self):
        result = resolve_next_occurrence(
            datetime(2024, 1, 1, 9, 0), "custom", "FREQ=DAILY;COUNT=3", datetime(2024, 1, 10)
        )
        assert result == datetime(2024, 1, 3, 9, 0)

    def test_future_anchor_returned_unchanged(self):
        base = datetime(2024, 2, 1, 9, 0)
        assert resolve_next_occurrence(base, "custom", "FREQ=DAILY", datetime(2024, 1, 1)) == base

    def test_malformed_rule_falls_back_to_one_time(self):
        base = datetime(2024, 1, 1, 9, 0)
        result = resolve_next_occurrence(base, "custom", "NOT A RULE", datetime(2024, 1, 10))
        assert result == base

    def test_missing_rule_falls_back_to_one_time(self):
        base = datetime(2024, 1, 1, 9, 0)
        assert resolve_next_occurrence(base, "custom", None, datetime(2024, 1, 10)) == base

    def test_strict_mode_raises(self):
        with pytest.raises(MalformedCustomRuleError):
            resolve_next_occurrence(
                datetime(2024, 1, 1, 9, 0),
                "custom",
                "NOT A RULE",
                datetime(2024, 1, 10),
                strict=True,
            )

    def test_pluggable_parser(self):
        calls = []

        def parser(rule):
            calls.append(rule)
            return lambda anchor, now: anchor + timedelta(days=100)

        result = resolve_next_occurrence(
            datetime(2024, 1, 1, 9, 0),
            "custom",
            "every hundred days",
            datetime(2024, 2, 1),
            custom_rule_parser=parser,
        )
        assert calls == ["every hundred days"]
        assert result == datetime(2024, 4, 10, 9, 0)

    def test_parser_returning_none_keeps_base(self):
        base = datetime(2024, 1, 1, 9, 0)
        result = resolve_next_occurrence(
            base,
            "custom",
            "never",
            datetime(2024, 2, 1),
            custom_rule_parser=lambda rule: (lambda anchor, now: None),
        )
        assert result == base


class TestParseRrule:
    def test_empty_rule_raises(self):
        with pytest.raises(MalformedCustomRuleError):
            parse_rrule("   ")

    def test_invalid_rule_raises_eagerly(self):
        with pytest.raises(MalformedCustomRuleError):
            parse_rrule("NOT A RULE")

    def test_returns_callable(self):
        occurrence = parse_rrule("FREQ=DAILY;INTERVAL=2")
        assert occurrence(datetime(2024, 1, 1, 9, 0), datetime(2024, 1, 2)) == datetime(
            2024, 1, 3, 9, 0
        )


class TestCustomRulesWithZone:
    berlin = ZoneInfo("Europe/Berlin")

    def _resolve(self, rule, now):
        return resolve_next_occurrence(
            datetime(2024, 1, 1, 9, 0), "custom", rule, now, tz=self.berlin
        )

    def test_utc_until_with_zoned_anchor(self):
        now = datetime(2024, 1, 10, 8, 0, tzinfo=self.berlin)
        result = self._resolve("FREQ=DAILY;UNTIL=20240120T000000Z", now)
        assert result == datetime(2024, 1, 10, 9, 0, tzinfo=self.berlin)

    def test_floating_until_with_zoned_anchor(self):
        now = datetime(2024, 1, 10, 8, 0, tzinfo=self.berlin)
        result = self._resolve("FREQ=DAILY;UNTIL=20240120T000000", now)
        assert result == datetime(2024, 1, 10, 9, 0, tzinfo=self.berlin)

    def test_ended_series_with_utc_until(self):
        now = datetime(2024, 1, 10, 8, 0, tzinfo=self.berlin)
        result = self._resolve("FREQ=DAILY;UNTIL=20240105T120000Z", now)
        assert result == datetime(2024, 1, 5, 9, 0, tzinfo=self.berlin)

    def test_floating_until_is_wall_time_in_zone(self):
        """08:59:59 Berlin ends the series before the 09:00 instance on Jan 5."""
        now = datetime(2024, 1, 10, 8, 0, tzinfo=self.berlin)
        result = self._resolve("FREQ=DAILY;UNTIL=20240105T085959", now)
        assert result == datetime(2024, 1, 4, 9, 0, tzinfo=self.berlin)

    def test_utc_until_with_naive_anchor(self):
        result = resolve_next_occurrence(
            datetime(2024, 1, 1, 9, 0),
            "custom",
            "FREQ=DAILY;UNTIL=20240103T120000Z",
            datetime(2024, 1, 10),
        )
        assert result == datetime(2024, 1, 3, 9, 0)

    def test_unparseable_until_is_malformed(self):
        with pytest.raises(MalformedCustomRuleError):
            parse_rrule("FREQ=DAILY;UNTIL=someday")


class TestMixedOffsets:
    minus_12 = timezone(timedelta(hours=-12))
    plus_14 = timezone(timedelta(hours=14))

    def test_daily_counts_days_in_anchor_zone(self):
        base = datetime(2024, 1, 1, 9, 0, tzinfo=self.minus_12)
        now = datetime(2024, 1, 10, 0, 30, tzinfo=self.plus_14)  # Jan 8 22:30 at -12
        result = resolve_next_occurrence(base, "daily", None, now)
        assert result == datetime(2024, 1, 9, 9, 0, tzinfo=self.minus_12)
        assert result - timedelta(days=1) < now

    def test_monthly_counts_months_in_anchor_zone(self):
        base = datetime(2024, 1, 31, 9, 0, tzinfo=self.minus_12)
        now = datetime(2024, 3, 1, 0, 30, tzinfo=self.plus_14)  # Feb 28 22:30 at -12
        result = resolve_next_occurrence(base, "monthly", None, now)
        assert result == datetime(2024, 2, 29, 9, 0, tzinfo=self.minus_12)
