"""
WorkCal Models

Enumerations and immutable holiday rule definitions.
"""
from __future__ import annotations

from .enums import WORKWEEK, AdjustmentPolicy, Month, Weekday
from .rules import DayOfMonth, HolidayRule, NthWeekdayOfMonth, SpecificDate

__all__ = [
    # Enums
    "AdjustmentPolicy",
    "Month",
    "Weekday",
    "WORKWEEK",
    # Rules
    "HolidayRule",
    "SpecificDate",
    "DayOfMonth",
    "NthWeekdayOfMonth",
]
