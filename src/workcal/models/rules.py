"""
WorkCal Holiday Rules

Abstract, immutable specifications of holidays. A rule does not know
which concrete dates it falls on; see workcal.engine.resolution.

Rule kinds (a closed union, dispatched exhaustively):
- SpecificDate: a one-off date, never adjusted
- DayOfMonth: the same month/day every year (e.g. 25 December)
- NthWeekdayOfMonth: the Nth weekday of a month, counted from the
  start (positive offset) or the end (negative offset) of the month
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Union

from .enums import AdjustmentPolicy, Month, Weekday


# Longest month length, leap years included (Feb 29 is a valid rule)
_MAX_DAYS = {m: calendar.monthrange(2000, m.number)[1] for m in Month}


def _check_validity_window(since: date, until: date) -> None:
    if since > until:
        raise ValueError(
            f"valid_since ({since.isoformat()}) is after valid_until ({until.isoformat()})"
        )


@dataclass(frozen=True)
class SpecificDate:
    """
    A holiday on exactly one date.

    Attributes:
        date: The holiday date
        description: Human-readable name
    """
    date: date
    description: str = ""

    @property
    def observed(self) -> AdjustmentPolicy:
        """One-off dates are never moved."""
        return AdjustmentPolicy.NO_ADJUSTMENT


@dataclass(frozen=True)
class DayOfMonth:
    """
    A holiday on a fixed month/day every year.

    Attributes:
        month: Month of the holiday
        day: Day of the month (Feb 29 only resolves in leap years)
        observed: Adjustment policy when the day is blocked
        description: Human-readable name
        valid_since: First date the rule applies (inclusive)
        valid_until: Last date the rule applies (inclusive)
    """
    month: Month
    day: int
    observed: AdjustmentPolicy = AdjustmentPolicy.NO_ADJUSTMENT
    description: str = ""
    valid_since: date = date.min
    valid_until: date = date.max

    def __post_init__(self) -> None:
        max_day = _MAX_DAYS[self.month]
        if not 1 <= self.day <= max_day:
            raise ValueError(
                f"Day {self.day} is not valid for {self.month.value} (1-{max_day})"
            )
        _check_validity_window(self.valid_since, self.valid_until)


@dataclass(frozen=True)
class NthWeekdayOfMonth:
    """
    A holiday on the Nth occurrence of a weekday in a month.

    offset=3 is the third occurrence counting from the 1st;
    offset=-1 is the last occurrence counting back from month end.

    A 5th (or -5th) occurrence that the month does not have lands in
    the neighbouring month. Supplying a sensible offset is the caller's
    responsibility.
    """
    month: Month
    weekday: Weekday
    offset: int
    observed: AdjustmentPolicy = AdjustmentPolicy.NO_ADJUSTMENT
    description: str = ""
    valid_since: date = date.min
    valid_until: date = date.max

    def __post_init__(self) -> None:
        if self.offset == 0:
            raise ValueError("NthWeekdayOfMonth offset must be nonzero")
        # No month holds more than five of any weekday
        if abs(self.offset) > 5:
            raise ValueError(
                f"NthWeekdayOfMonth offset {self.offset} out of range (-5..-1, 1..5)"
            )
        _check_validity_window(self.valid_since, self.valid_until)


HolidayRule = Union[SpecificDate, DayOfMonth, NthWeekdayOfMonth]
