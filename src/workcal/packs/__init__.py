"""
WorkCal Calendar Packs

Schema validation and loading for calendar files.

Calendar files are YAML or JSON documents describing the working
weekdays and the holiday rules of a business calendar.

Usage:
    from workcal.packs import load_calendar, load_preset, CalendarLoader

    # Load a single calendar
    calendar = load_calendar("path/to/calendar.yaml")

    # Use a loader for multiple files (caches calendars by name)
    loader = CalendarLoader()
    loader.load("path/to/exchanges.yaml")
    nyse = loader.get_calendar("nyse")

    # Bundled presets
    federal = load_preset("us_federal")
"""
from __future__ import annotations

from .loader import (
    CalendarLoader,
    list_presets,
    load_calendar,
    load_calendar_dict,
    load_calendar_from_string,
    load_preset,
    load_schedule_dict,
)
from .schema import (
    CalendarSchema,
    CalendarSetSchema,
    DayOfMonthSchema,
    HolidayRuleSchema,
    NthDayOccuranceSchema,
    ScheduleSchema,
    SpecificDateSchema,
    validate_calendar,
    validate_calendar_set,
)

__all__ = [
    # Loader
    "CalendarLoader",
    "load_calendar",
    "load_calendar_dict",
    "load_calendar_from_string",
    "load_schedule_dict",
    # Presets
    "list_presets",
    "load_preset",
    # Validation
    "validate_calendar",
    "validate_calendar_set",
    # Schemas (for advanced usage)
    "CalendarSchema",
    "CalendarSetSchema",
    "HolidayRuleSchema",
    "SpecificDateSchema",
    "DayOfMonthSchema",
    "NthDayOccuranceSchema",
    "ScheduleSchema",
]
