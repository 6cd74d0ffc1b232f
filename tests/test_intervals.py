"""
DateInterval Tests

Tests for half-open date spans.
"""
from __future__ import annotations

from datetime import date, timedelta

from workcal.intervals import DateInterval, shift_date


class TestDateIntervalBounds:
    """Tests for membership and emptiness."""

    def test_range_bounds(self):
        """Start is inclusive, end is exclusive."""
        interval = DateInterval(date(2021, 1, 1), date(2021, 2, 1))

        assert not interval.is_empty()
        assert interval.contains(date(2021, 1, 1))
        assert interval.contains(date(2021, 1, 15))
        assert not interval.contains(date(2021, 2, 1))
        assert not interval.contains(date(2020, 12, 31))

    def test_in_operator(self):
        interval = DateInterval(date(2021, 1, 1), date(2021, 2, 1))
        assert date(2021, 1, 31) in interval
        assert date(2021, 2, 1) not in interval
        assert "2021-01-05" not in interval

    def test_empty_interval(self):
        interval = DateInterval(date(2021, 1, 1), date(2021, 1, 1))
        assert interval.is_empty()
        assert not interval.contains(date(2021, 1, 1))
        assert list(interval) == []
        assert len(interval) == 0

    def test_inclusive_constructor(self):
        interval = DateInterval.inclusive(date(2021, 1, 1), date(2021, 1, 3))
        assert list(interval) == [date(2021, 1, 1), date(2021, 1, 2), date(2021, 1, 3)]


class TestDateIntervalIteration:
    """Tests for lazy, restartable iteration."""

    def test_range_iteration(self):
        """January has 31 days."""
        interval = DateInterval(date(2021, 1, 1), date(2021, 2, 1))
        assert sum(1 for _ in interval) == 31
        assert len(interval) == 31

    def test_iteration_is_ascending_across_year_end(self):
        interval = DateInterval(date(2021, 12, 30), date(2022, 1, 2))
        assert list(interval) == [date(2021, 12, 30), date(2021, 12, 31), date(2022, 1, 1)]

    def test_iteration_restarts(self):
        """Each pass starts again from the beginning."""
        interval = DateInterval(date(2024, 2, 27), date(2024, 3, 2))
        first = list(interval)
        second = list(interval)
        assert first == second
        assert first == [
            date(2024, 2, 27),
            date(2024, 2, 28),
            date(2024, 2, 29),
            date(2024, 3, 1),
        ]

    def test_reversed_bounds_yield_nothing(self):
        """start > end is malformed and iterates as an empty sequence."""
        interval = DateInterval(date(2021, 2, 1), date(2021, 1, 1))
        assert list(interval) == []
        assert len(interval) == 0
        assert not interval.is_empty()

    def test_iteration_up_to_max_date(self):
        interval = DateInterval(date(9999, 12, 29), date.max)
        assert list(interval) == [date(9999, 12, 29), date(9999, 12, 30)]


class TestShiftDate:
    """Tests for clamped date arithmetic."""

    def test_inside_range(self):
        assert shift_date(date(2021, 12, 31), timedelta(days=1)) == date(2022, 1, 1)
        assert shift_date(date(2022, 1, 1), timedelta(days=-1)) == date(2021, 12, 31)

    def test_clamps_at_ends(self):
        assert shift_date(date(9999, 12, 20), timedelta(days=30)) == date.max
        assert shift_date(date(1, 1, 5), timedelta(days=-30)) == date.min
