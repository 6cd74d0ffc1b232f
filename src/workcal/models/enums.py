"""
WorkCal Enumerations

Weekdays, months and observance adjustment policies.

All enums inherit from (str, Enum) for YAML/JSON serialization compatibility.
"""
from __future__ import annotations

from datetime import date
from enum import Enum


# =============================================================================
# Weekday
# =============================================================================

class Weekday(str, Enum):
    """Day of the week, ordered Monday first to match date.weekday()."""
    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"
    SUN = "Sun"

    @property
    def number(self) -> int:
        """0 = Monday ... 6 = Sunday."""
        return _WEEKDAYS.index(self)

    @classmethod
    def from_date(cls, d: date) -> Weekday:
        return _WEEKDAYS[d.weekday()]

    @classmethod
    def from_number(cls, number: int) -> Weekday:
        return _WEEKDAYS[number]

    @classmethod
    def parse(cls, name: str) -> Weekday:
        """
        Parse a weekday name.

        Accepts the short form ("Mon") or the full name ("Monday"),
        case-insensitive.

        Raises:
            ValueError: If the name is not a weekday
        """
        key = name.strip().lower()
        for wd in _WEEKDAYS:
            if key == wd.value.lower() or key == _WEEKDAY_NAMES[wd].lower():
                return wd
        raise ValueError(f"Unknown weekday name: {name!r}")


_WEEKDAYS = list(Weekday)

_WEEKDAY_NAMES = {
    Weekday.MON: "Monday",
    Weekday.TUE: "Tuesday",
    Weekday.WED: "Wednesday",
    Weekday.THU: "Thursday",
    Weekday.FRI: "Friday",
    Weekday.SAT: "Saturday",
    Weekday.SUN: "Sunday",
}

WORKWEEK: frozenset[Weekday] = frozenset(
    {Weekday.MON, Weekday.TUE, Weekday.WED, Weekday.THU, Weekday.FRI}
)


# =============================================================================
# Month
# =============================================================================

class Month(str, Enum):
    """Calendar month."""
    JANUARY = "January"
    FEBRUARY = "February"
    MARCH = "March"
    APRIL = "April"
    MAY = "May"
    JUNE = "June"
    JULY = "July"
    AUGUST = "August"
    SEPTEMBER = "September"
    OCTOBER = "October"
    NOVEMBER = "November"
    DECEMBER = "December"

    @property
    def number(self) -> int:
        """1 = January ... 12 = December."""
        return _MONTHS.index(self) + 1

    @classmethod
    def from_number(cls, number: int) -> Month:
        if not 1 <= number <= 12:
            raise ValueError(f"Month number out of range: {number}")
        return _MONTHS[number - 1]

    @classmethod
    def parse(cls, name: str) -> Month:
        """
        Parse a month name.

        Accepts the full name ("January") or its three-letter
        abbreviation ("Jan"), case-insensitive.

        Raises:
            ValueError: If the name is not a month
        """
        key = name.strip().lower()
        for m in _MONTHS:
            if key == m.value.lower() or key == m.value[:3].lower():
                return m
        raise ValueError(f"Unknown month name: {name!r}")


_MONTHS = list(Month)


# =============================================================================
# Adjustment Policy
# =============================================================================

class AdjustmentPolicy(str, Enum):
    """
    How a holiday moves when its raw date is blocked.

    A date is blocked when its weekday is not a working weekday or
    another holiday has already been observed on it.
    """
    PREV = "Prev"                  # Nearest free day on or before
    NEXT = "Next"                  # Nearest free day on or after
    CLOSEST = "Closest"            # Nearer of Prev/Next, ties go to Next
    NO_ADJUSTMENT = "NoAdjustment"  # Absorbed if blocked
