"""
WorkCal - Business Calendar Engine

WorkCal decides which dates are working days for a configurable
business calendar and enumerates working days over date ranges.

Key Features:
- Holiday rules: specific dates, fixed month/day, Nth weekday of month
- Validity windows per rule
- Observance adjustment (Prev, Next, Closest, NoAdjustment) that is
  aware of weekends and of other holidays
- Working-day ranges and business-day arithmetic
- YAML/JSON calendar files and bundled presets

Quick Start:
    from datetime import date
    from workcal import load_preset

    calendar = load_preset("us_federal")
    calendar.is_off_day(date(2024, 7, 4))                        # True
    calendar.working_days_in_range(date(2024, 7, 1), date(2024, 7, 31))
    calendar.add_business_days(date(2024, 12, 20), 5)

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

from .calendars import BaseCalendar, BusinessCalendar, HolidayCalendar
from .engine import (
    ObservedHoliday,
    ResolvedRule,
    fold_occurrences,
    resolve,
    resolve_observance,
)
from .exceptions import (
    CalendarLoadError,
    CalendarNotFoundError,
    CalendarValidationError,
    DateOutOfRangeError,
    InvalidCalendarError,
    ObservanceOverflowError,
    WorkCalError,
)
from .intervals import DateInterval, shift_date
from .models import (
    WORKWEEK,
    AdjustmentPolicy,
    DayOfMonth,
    HolidayRule,
    Month,
    NthWeekdayOfMonth,
    SpecificDate,
    Weekday,
)
from .packs import (
    CalendarLoader,
    list_presets,
    load_calendar,
    load_calendar_dict,
    load_calendar_from_string,
    load_preset,
)
from .schedule import Schedule, ScheduleOverride, TimeSpan

__all__ = [
    "__version__",
    # Models
    "AdjustmentPolicy",
    "Month",
    "Weekday",
    "WORKWEEK",
    "HolidayRule",
    "SpecificDate",
    "DayOfMonth",
    "NthWeekdayOfMonth",
    # Intervals
    "DateInterval",
    "shift_date",
    # Engine
    "ResolvedRule",
    "ObservedHoliday",
    "resolve",
    "resolve_observance",
    "fold_occurrences",
    # Calendars
    "HolidayCalendar",
    "BaseCalendar",
    "BusinessCalendar",
    # Loading
    "CalendarLoader",
    "load_calendar",
    "load_calendar_dict",
    "load_calendar_from_string",
    "load_preset",
    "list_presets",
    # Schedules
    "TimeSpan",
    "ScheduleOverride",
    "Schedule",
    # Exceptions
    "WorkCalError",
    "CalendarLoadError",
    "CalendarValidationError",
    "CalendarNotFoundError",
    "DateOutOfRangeError",
    "InvalidCalendarError",
    "ObservanceOverflowError",
]
