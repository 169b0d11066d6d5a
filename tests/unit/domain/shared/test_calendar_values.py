"""Unit tests for shared calendar value objects."""

from datetime import date, datetime, timezone

import pytest

from domain.shared.errors import InvalidInputError, ValidationError
from domain.shared.value_objects import (
    DayOfWeek,
    MealSlot,
    ShortDay,
    WeekStartDay,
    day_index,
    parse_iso_date,
)


class TestParseIsoDate:
    """Test parse_iso_date()."""

    def test_parses_plain_iso_date(self):
        assert parse_iso_date("2025-01-06") == date(2025, 1, 6)

    def test_date_passes_through(self):
        assert parse_iso_date(date(2025, 1, 6)) == date(2025, 1, 6)

    def test_datetime_is_truncated(self):
        value = datetime(2025, 1, 6, 23, 30, tzinfo=timezone.utc)
        assert parse_iso_date(value) == date(2025, 1, 6)

    def test_timestamp_string_keeps_calendar_date(self):
        assert parse_iso_date("2025-01-06T10:00:00Z") == date(2025, 1, 6)

    @pytest.mark.parametrize("value", ["invalid-date", "", "   ", "2025-13-01", None, 20250106])
    def test_invalid_values_raise(self, value):
        """Test unparseable input raises InvalidInputError."""
        with pytest.raises(InvalidInputError, match="invalid date supplied"):
            parse_iso_date(value)  # type: ignore[arg-type]

    def test_invalid_input_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            parse_iso_date("nope")


class TestDayIndex:
    """Test Sunday-based weekday helpers."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (date(2025, 1, 5), 0),
            (date(2025, 1, 6), 1),
            (date(2025, 1, 10), 5),
            (date(2025, 1, 11), 6),
        ],
    )
    def test_day_index(self, value, expected):
        assert day_index(value) == expected

    def test_day_of_week_from_date(self):
        assert DayOfWeek.from_date(date(2025, 1, 6)) is DayOfWeek.MONDAY
        assert DayOfWeek.from_date(date(2025, 1, 12)) is DayOfWeek.SUNDAY

    def test_day_of_week_from_index(self):
        assert DayOfWeek.from_index(0) is DayOfWeek.SUNDAY
        assert DayOfWeek.from_index(6) is DayOfWeek.SATURDAY

    def test_short_day_from_date(self):
        assert ShortDay.from_date(date(2025, 1, 8)) is ShortDay.WED


class TestWeekStartDay:
    """Test WeekStartDay value object."""

    def test_day_indexes(self):
        assert WeekStartDay.SUNDAY.day_index() == 0
        assert WeekStartDay.MONDAY.day_index() == 1
        assert WeekStartDay.SATURDAY.day_index() == 6

    def test_parse_is_case_insensitive(self):
        assert WeekStartDay.parse("saturday") is WeekStartDay.SATURDAY

    def test_parse_rejects_unsupported_day(self):
        with pytest.raises(ValidationError, match="Invalid week start day"):
            WeekStartDay.parse("WEDNESDAY")


class TestMealSlot:
    """Test MealSlot parsing."""

    def test_parse_accepts_enum_and_names(self):
        assert MealSlot.parse(MealSlot.LUNCH) is MealSlot.LUNCH
        assert MealSlot.parse("Dinner") is MealSlot.DINNER

    def test_parse_rejects_unknown_slot(self):
        with pytest.raises(InvalidInputError, match="invalid meal slot"):
            MealSlot.parse("breakfast")
