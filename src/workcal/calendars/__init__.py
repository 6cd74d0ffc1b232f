"""
WorkCal Calendars

Business calendars for working-day calculations.

Provides:
- HolidayCalendar protocol for custom implementations
- BaseCalendar with common business day arithmetic
- BusinessCalendar, configured from weekday mask and holiday rules

Usage:
    from workcal.calendars import BusinessCalendar
    from workcal.models import AdjustmentPolicy, DayOfMonth, Month

    calendar = BusinessCalendar(
        exclude=(DayOfMonth(Month.DECEMBER, 25, AdjustmentPolicy.NEXT, "Christmas"),),
    )

    calendar.is_off_day(date(2021, 12, 27))        # True, Christmas observed
    calendar.working_days_in_range(start, end)     # ascending working days
    calendar.add_business_days(date.today(), 10)   # deadline in business days
"""
from __future__ import annotations

from .base import BaseCalendar, HolidayCalendar
from .business import BusinessCalendar

__all__ = [
    "HolidayCalendar",
    "BaseCalendar",
    "BusinessCalendar",
]
