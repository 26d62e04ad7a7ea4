"""Unit tests for calendar month counting and date parsing."""

from datetime import date, datetime

import pytest

from rescisao.sdk import (
    InvalidInputError,
    count_months_15_day_rule,
    count_whole_months,
    months_between,
    parse_iso_date,
)


class TestParseIsoDate:
    """Tests for parse_iso_date."""

    def test_parses_calendar_date(self):
        assert parse_iso_date("2024-08-13") == date(2024, 8, 13)

    def test_date_object_passthrough(self):
        assert parse_iso_date(date(2023, 1, 1)) == date(2023, 1, 1)

    def test_datetime_is_reduced_to_date(self):
        assert parse_iso_date(datetime(2023, 1, 1, 23, 59)) == date(2023, 1, 1)

    def test_leap_day(self):
        assert parse_iso_date("2024-02-29") == date(2024, 2, 29)

    @pytest.mark.parametrize("value", [
        "2023-02-29",  # not a leap year
        "2024-13-01",
        "2024-08-13T10:00:00",  # time component not accepted
        "13/08/2024",
        "2024-8-13",
        "\u0662\u0660\u0662\u0663-01-01",  # Arabic-Indic digits
        "\uff12\uff10\uff12\uff14-08-13",  # fullwidth digits
        "not a date",
    ])
    def test_rejects_invalid_strings(self, value):
        with pytest.raises(InvalidInputError):
            parse_iso_date(value, "hire_date")

    @pytest.mark.parametrize("value", [None, ""])
    def test_rejects_missing(self, value):
        with pytest.raises(InvalidInputError, match="hire_date is required"):
            parse_iso_date(value, "hire_date")

    def test_invalid_error_is_value_error(self):
        """InvalidInputError can be caught as a plain ValueError."""
        with pytest.raises(ValueError):
            parse_iso_date("garbage")


class TestMonthsBetween:
    """Tests for months_between (day-of-month ignored)."""

    def test_ignores_day_of_month(self):
        assert months_between(date(2020, 1, 15), date(2020, 4, 10)) == 3

    def test_same_month(self):
        assert months_between(date(2023, 6, 1), date(2023, 6, 30)) == 0

    def test_across_years(self):
        assert months_between(date(2024, 8, 13), date(2026, 9, 18)) == 25

    def test_negative_when_reversed(self):
        assert months_between(date(2023, 6, 1), date(2023, 3, 1)) == -3


class TestFifteenDayRule:
    """Tests for count_months_15_day_rule."""

    def test_end_before_start_is_zero(self):
        assert count_months_15_day_rule(date(2024, 5, 10), date(2024, 5, 9)) == 0

    def test_full_single_month(self):
        assert count_months_15_day_rule(date(2024, 3, 1), date(2024, 3, 31)) == 1

    def test_exactly_fifteen_days_counts(self):
        """Jan 17 - Jan 31 is 15 days inclusive."""
        assert count_months_15_day_rule(date(2024, 1, 17), date(2024, 1, 31)) == 1

    def test_fourteen_days_does_not_count(self):
        assert count_months_15_day_rule(date(2024, 1, 18), date(2024, 1, 31)) == 0

    def test_february_short_month(self):
        """Feb 14 - Feb 28 (non-leap) is 15 days."""
        assert count_months_15_day_rule(date(2023, 2, 14), date(2023, 2, 28)) == 1

    def test_partial_first_and_last_months(self):
        """Aug 13 (19 days) ... Sep 18 two years later (18 days): both count."""
        assert count_months_15_day_rule(date(2024, 8, 13), date(2026, 9, 18)) == 26

    def test_short_last_month_excluded(self):
        """Termination on the 14th does not count that month."""
        assert count_months_15_day_rule(date(2023, 1, 1), date(2023, 6, 14)) == 5

    def test_single_day_range(self):
        assert count_months_15_day_rule(date(2023, 1, 1), date(2023, 1, 1)) == 0

    def test_custom_threshold(self):
        assert count_months_15_day_rule(date(2023, 1, 1), date(2023, 1, 1), threshold=1) == 1

    def test_across_year_boundary(self):
        assert count_months_15_day_rule(date(2023, 11, 1), date(2024, 2, 29)) == 4


class TestWholeMonths:
    """Tests for count_whole_months (anniversary based)."""

    def test_month_not_completed_before_anniversary_day(self):
        assert count_whole_months(date(2024, 1, 20), date(2024, 2, 19)) == 0

    def test_month_completed_on_anniversary_day(self):
        assert count_whole_months(date(2024, 1, 20), date(2024, 2, 20)) == 1

    def test_end_of_month_hire(self):
        assert count_whole_months(date(2020, 1, 31), date(2020, 2, 29)) == 0

    def test_floors_at_zero(self):
        assert count_whole_months(date(2024, 5, 10), date(2024, 3, 1)) == 0

    def test_multiple_years(self):
        assert count_whole_months(date(2020, 3, 15), date(2023, 3, 20)) == 36
