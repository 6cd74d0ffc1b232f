"""
WorkCal Calendar Schemas

Pydantic models for validating calendar YAML/JSON files.

These schemas define the structure of calendar files that can be loaded
at runtime. They map to the domain models in workcal.models and
workcal.calendars.

Holiday rules are discriminated by their "type" field:
- SpecificDate
- DayOfMonth
- NthDayOccurance
"""
from __future__ import annotations

from datetime import date, time
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, Field, field_validator

from ..models import WORKWEEK, AdjustmentPolicy, Month, Weekday


# =============================================================================
# Name Parsing
# =============================================================================

def _parse_month(value: Any) -> Any:
    if isinstance(value, str):
        return Month.parse(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return Month.from_number(value)
    return value


def _parse_weekday(value: Any) -> Any:
    if isinstance(value, str):
        return Weekday.parse(value)
    return value


def _default_dow() -> list[Weekday]:
    return sorted(WORKWEEK, key=lambda wd: wd.number)


# =============================================================================
# Holiday Rule Schemas
# =============================================================================

class SpecificDateSchema(BaseModel):
    """Schema for a one-off holiday."""
    type: Literal["SpecificDate"]
    date: date
    description: str = Field("", description="Human-readable name")

    model_config = {
        "extra": "forbid",  # Reject unknown fields
    }


class DayOfMonthSchema(BaseModel):
    """Schema for a holiday on the same month/day every year."""
    type: Literal["DayOfMonth"]
    month: Month = Field(..., description="Month name (e.g., 'December' or 'Dec')")
    day: int = Field(..., description="Day of the month")
    observed: AdjustmentPolicy = Field(
        AdjustmentPolicy.NO_ADJUSTMENT,
        description="Adjustment policy when the day is blocked",
    )
    description: str = Field("", description="Human-readable name")
    valid_since: Optional[date] = Field(
        None,
        validation_alias=AliasChoices("valid_since", "since"),
        description="First date the rule applies (default: earliest date)",
    )
    valid_until: Optional[date] = Field(
        None,
        validation_alias=AliasChoices("valid_until", "until"),
        description="Last date the rule applies (default: latest date)",
    )

    @field_validator("month", mode="before")
    @classmethod
    def parse_month(cls, v: Any) -> Any:
        return _parse_month(v)

    model_config = {
        "extra": "forbid",
    }


class NthDayOccuranceSchema(BaseModel):
    """Schema for a holiday on the Nth weekday of a month."""
    type: Literal["NthDayOccurance"]
    month: Month = Field(..., description="Month name")
    dow: Weekday = Field(..., description="Weekday name (e.g., 'Mon' or 'Monday')")
    offset: int = Field(..., description="Occurrence: 1 = first, -1 = last")
    observed: AdjustmentPolicy = Field(
        AdjustmentPolicy.NO_ADJUSTMENT,
        description="Adjustment policy when the day is blocked",
    )
    description: str = Field("", description="Human-readable name")
    valid_since: Optional[date] = Field(
        None, validation_alias=AliasChoices("valid_since", "since"),
    )
    valid_until: Optional[date] = Field(
        None, validation_alias=AliasChoices("valid_until", "until"),
    )

    @field_validator("month", mode="before")
    @classmethod
    def parse_month(cls, v: Any) -> Any:
        return _parse_month(v)

    @field_validator("dow", mode="before")
    @classmethod
    def parse_dow(cls, v: Any) -> Any:
        return _parse_weekday(v)

    @field_validator("offset")
    @classmethod
    def validate_offset(cls, v: int) -> int:
        if v == 0:
            raise ValueError("offset must be nonzero")
        return v

    model_config = {
        "extra": "forbid",
    }


HolidayRuleSchema = Annotated[
    Union[SpecificDateSchema, DayOfMonthSchema, NthDayOccuranceSchema],
    Field(discriminator="type"),
]


# =============================================================================
# Calendar Schema (Top-Level)
# =============================================================================

class CalendarSchema(BaseModel):
    """
    Top-level schema for a calendar file.

    A calendar defines the working weekdays and the holiday rules,
    in the order they are resolved.
    """
    description: str = Field("", description="Human-readable description")
    dow: list[Weekday] = Field(
        default_factory=_default_dow,
        description="Working weekdays (default: Mon-Fri)",
    )
    public: bool = Field(False, description="Whether the calendar is published")
    exclude: list[HolidayRuleSchema] = Field(
        default_factory=list,
        description="Holiday rules, in resolution order",
    )
    inherits: list[str] = Field(
        default_factory=list,
        description="Parent calendar names (not resolved)",
    )

    @field_validator("dow", mode="before")
    @classmethod
    def parse_dow(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple, set, frozenset)):
            return [_parse_weekday(item) for item in v]
        return v

    model_config = {
        "extra": "forbid",  # Reject unknown fields
    }


class CalendarSetSchema(BaseModel):
    """Schema for a file holding several named calendars."""
    calendars: dict[str, CalendarSchema] = Field(
        ..., description="Calendars keyed by name"
    )


# =============================================================================
# Schedule Schemas
# =============================================================================

class TimeSpanSchema(BaseModel):
    """Schema for a time-of-day span."""
    start: time
    end: time
    description: str = ""


class ScheduleOverrideSchema(BaseModel):
    """Schema for a date-ranged schedule override."""
    start_date: date
    end_date: Optional[date] = None
    schedule: list[TimeSpanSchema] = Field(default_factory=list)
    description: str = ""


class ScheduleSchema(BaseModel):
    """Schema for a daily schedule with overrides."""
    default: list[TimeSpanSchema] = Field(default_factory=list)
    overrides: list[ScheduleOverrideSchema] = Field(default_factory=list)


# =============================================================================
# Validation Helpers
# =============================================================================

def is_calendar_set(data: dict[str, Any]) -> bool:
    """Check whether a document holds a mapping of named calendars."""
    return isinstance(data, dict) and isinstance(data.get("calendars"), dict)


def validate_calendar(data: dict[str, Any]) -> CalendarSchema:
    """
    Validate calendar data against schema.

    Args:
        data: Raw calendar data (from YAML/JSON)

    Returns:
        Validated CalendarSchema

    Raises:
        ValidationError: If validation fails
    """
    return CalendarSchema.model_validate(data)


def validate_calendar_set(data: dict[str, Any]) -> CalendarSetSchema:
    """Validate a document of named calendars."""
    return CalendarSetSchema.model_validate(data)
