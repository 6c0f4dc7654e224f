"""Unit tests for Wednesday calendar arithmetic."""

from datetime import date, datetime, timedelta

import pytest

from midweek.domain import calendar

MONDAY = date(2024, 1, 1)
WEDNESDAY = date(2024, 1, 3)


class TestCurrentOrNextWednesday:
    """Tests for current_or_next_wednesday."""

    def test_wednesday_maps_to_itself(self):
        assert calendar.current_or_next_wednesday(WEDNESDAY) == WEDNESDAY

    def test_thursday_maps_to_next_week(self):
        assert calendar.current_or_next_wednesday(date(2024, 1, 4)) == date(2024, 1, 10)

    def test_tuesday_maps_to_next_day(self):
        assert calendar.current_or_next_wednesday(date(2024, 1, 2)) == WEDNESDAY

    def test_every_weekday_maps_within_six_days(self):
        """Result is always a Wednesday on or after the reference, at most 6 days away."""
        for offset in range(14):
            day = MONDAY + timedelta(days=offset)
            result = calendar.current_or_next_wednesday(day)
            assert calendar.is_wednesday(result)
            assert timedelta(0) <= result - day <= timedelta(days=6)

    def test_time_of_day_is_ignored(self):
        late_wednesday = datetime(2024, 1, 3, 23, 59, 59)
        assert calendar.current_or_next_wednesday(late_wednesday) == WEDNESDAY


class TestWindowOfWednesdays:
    """Tests for window_of_wednesdays."""

    def test_window_from_monday(self):
        """Monday reference: four Wednesdays before the anchor, anchor plus three after."""
        result = calendar.window_of_wednesdays(8, MONDAY)

        assert result == [
            date(2023, 12, 6),
            date(2023, 12, 13),
            date(2023, 12, 20),
            date(2023, 12, 27),
            date(2024, 1, 3),
            date(2024, 1, 10),
            date(2024, 1, 17),
            date(2024, 1, 24),
        ]

    def test_window_from_wednesday_contains_reference(self):
        result = calendar.window_of_wednesdays(8, WEDNESDAY)

        assert result[4] == WEDNESDAY
        assert result[0] == date(2023, 12, 6)

    def test_odd_count_puts_extra_on_future_side(self):
        result = calendar.window_of_wednesdays(3, WEDNESDAY)

        assert result == [date(2023, 12, 27), WEDNESDAY, date(2024, 1, 10)]

    @pytest.mark.parametrize("count", [0, 1, 2, 7, 8, 52])
    def test_window_properties(self, count):
        """Length, weekday, spacing and anchor position hold for any count."""
        result = calendar.window_of_wednesdays(count, MONDAY)

        assert len(result) == count
        assert all(calendar.is_wednesday(day) for day in result)
        assert all(b - a == timedelta(days=7) for a, b in zip(result, result[1:]))
        if count:
            anchor = calendar.current_or_next_wednesday(MONDAY)
            assert result[count // 2] == anchor

    def test_zero_count_is_empty(self):
        assert calendar.window_of_wednesdays(0, MONDAY) == []

    def test_negative_count_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            calendar.window_of_wednesdays(-1, MONDAY)


class TestExtend:
    """Tests for extend_past and extend_future."""

    def test_extend_past_is_ascending_and_excludes_start(self):
        result = calendar.extend_past(WEDNESDAY)

        assert result == [
            date(2023, 12, 6),
            date(2023, 12, 13),
            date(2023, 12, 20),
            date(2023, 12, 27),
        ]

    def test_extend_future_is_ascending_and_excludes_start(self):
        result = calendar.extend_future(WEDNESDAY, 2)

        assert result == [date(2024, 1, 10), date(2024, 1, 17)]

    def test_extensions_join_window_without_gaps(self):
        window = calendar.window_of_wednesdays(8, MONDAY)

        extended = (
            calendar.extend_past(window[0])
            + window
            + calendar.extend_future(window[-1])
        )

        assert len(extended) == 16
        assert len(set(extended)) == 16
        assert all(b - a == timedelta(days=7) for a, b in zip(extended, extended[1:]))

    def test_zero_count_is_empty(self):
        assert calendar.extend_past(WEDNESDAY, 0) == []
        assert calendar.extend_future(WEDNESDAY, 0) == []

    def test_negative_count_raises(self):
        with pytest.raises(ValueError):
            calendar.extend_future(WEDNESDAY, -2)


class TestDayComparisons:
    """Tests for is_past, is_today and is_wednesday."""

    def test_is_past_compares_days_only(self):
        reference = datetime(2024, 1, 3, 0, 0, 1)

        assert calendar.is_past(date(2024, 1, 2), reference)
        assert not calendar.is_past(datetime(2024, 1, 3, 0, 0, 0), reference)
        assert not calendar.is_past(date(2024, 1, 4), reference)

    def test_is_today_ignores_time(self):
        assert calendar.is_today(datetime(2024, 1, 3, 8, 0), datetime(2024, 1, 3, 22, 0))
        assert not calendar.is_today(date(2024, 1, 4), WEDNESDAY)

    def test_is_wednesday(self):
        assert calendar.is_wednesday(WEDNESDAY)
        assert not calendar.is_wednesday(MONDAY)


class TestFormatting:
    """Tests for format_date."""

    def test_format_date(self):
        assert calendar.format_date(datetime(2024, 1, 3, 18, 30)) == "2024-01-03"


class TestProperties:
    """Properties that hold for any day."""

    def test_same_day_is_today_and_never_past(self):
        for offset in range(7):
            day = MONDAY + timedelta(days=offset)
            assert calendar.is_today(day, day)
            assert not calendar.is_past(day, day)

    def test_extend_future_then_past_returns_start(self):
        assert calendar.extend_past(calendar.extend_future(WEDNESDAY, 1)[0], 1) == [
            WEDNESDAY
        ]
