"""
WorkCal Calendar Loader

Loads and validates calendars from YAML or JSON files.

Converts Pydantic schema models to WorkCal domain models. A file holds
either a single calendar, or a `calendars:` mapping of named calendars.
"""
from __future__ import annotations

import json
import logging
from datetime import date
from importlib import resources
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..calendars import BusinessCalendar
from ..exceptions import CalendarLoadError, CalendarNotFoundError, CalendarValidationError
from ..models import DayOfMonth, HolidayRule, NthWeekdayOfMonth, SpecificDate
from ..schedule import Schedule, ScheduleOverride, TimeSpan
from .schema import (
    CalendarSchema,
    DayOfMonthSchema,
    NthDayOccuranceSchema,
    ScheduleSchema,
    SpecificDateSchema,
    is_calendar_set,
    validate_calendar,
    validate_calendar_set,
)

logger = logging.getLogger(__name__)

PRESETS_PACKAGE = "workcal.packs.presets"


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_rule(
    schema: Union[SpecificDateSchema, DayOfMonthSchema, NthDayOccuranceSchema],
) -> HolidayRule:
    """Convert a holiday rule schema to its rule model."""
    if isinstance(schema, SpecificDateSchema):
        return SpecificDate(date=schema.date, description=schema.description)
    if isinstance(schema, DayOfMonthSchema):
        return DayOfMonth(
            month=schema.month,
            day=schema.day,
            observed=schema.observed,
            description=schema.description,
            valid_since=schema.valid_since or date.min,
            valid_until=schema.valid_until or date.max,
        )
    return NthWeekdayOfMonth(
        month=schema.month,
        weekday=schema.dow,
        offset=schema.offset,
        observed=schema.observed,
        description=schema.description,
        valid_since=schema.valid_since or date.min,
        valid_until=schema.valid_until or date.max,
    )


def _convert_calendar(schema: CalendarSchema) -> BusinessCalendar:
    """Convert CalendarSchema to BusinessCalendar model."""
    return BusinessCalendar(
        description=schema.description,
        dow=frozenset(schema.dow),
        public=schema.public,
        exclude=tuple(_convert_rule(r) for r in schema.exclude),
        inherits=tuple(schema.inherits),
    )


def _convert_schedule(schema: ScheduleSchema) -> Schedule:
    """Convert ScheduleSchema to Schedule model."""
    def spans(items: list) -> tuple[TimeSpan, ...]:
        return tuple(TimeSpan(s.start, s.end, s.description) for s in items)

    return Schedule(
        default=spans(schema.default),
        overrides=tuple(
            ScheduleOverride(
                start_date=o.start_date,
                end_date=o.end_date,
                schedule=spans(o.schedule),
                description=o.description,
            )
            for o in schema.overrides
        ),
    )


def _build_calendar(schema: CalendarSchema, name: str) -> BusinessCalendar:
    """Convert a validated schema, reporting model errors as validation errors."""
    try:
        return _convert_calendar(schema)
    except ValueError as e:
        raise CalendarValidationError(
            message=f"Calendar validation failed: {e}",
            details={"errors": str(e)},
            calendar=name,
        )


def _validate(data: Any, name: str) -> dict[str, CalendarSchema]:
    """Validate raw data into schemas keyed by calendar name."""
    if not isinstance(data, dict):
        raise CalendarValidationError(
            message="Calendar document must be a mapping",
            details={"type": type(data).__name__},
            calendar=name,
        )
    try:
        if is_calendar_set(data):
            return dict(validate_calendar_set(data).calendars)
        return {name: validate_calendar(data)}
    except ValidationError as e:
        raise CalendarValidationError(
            message=f"Calendar validation failed: {e.error_count()} errors",
            details={"errors": e.errors(include_url=False)},
            calendar=name,
        )


# =============================================================================
# Calendar Loader
# =============================================================================

class CalendarLoader:
    """
    Loads calendars from YAML or JSON files.

    Calendars are cached by name: the file stem for single-calendar
    files, or the keys of a `calendars:` mapping.

    Usage:
        loader = CalendarLoader()
        calendar = loader.load("path/to/calendar.yaml")
        same = loader.get_calendar("calendar")
    """

    def __init__(self) -> None:
        self._calendars: dict[str, BusinessCalendar] = {}

    def load(self, path: Union[str, Path]) -> BusinessCalendar:
        """
        Load a calendar file.

        For files with several calendars, all of them are cached and the
        first one is returned.

        Args:
            path: Path to YAML or JSON file

        Returns:
            Loaded BusinessCalendar

        Raises:
            CalendarLoadError: If file cannot be read or parsed
            CalendarValidationError: If validation fails
        """
        path = Path(path)

        try:
            data = self._load_file(path)
        except (OSError, UnicodeDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise CalendarLoadError(
                message=f"Failed to load calendar: {e}",
                details={"path": str(path), "error": str(e)},
                calendar=path.stem,
            )

        loaded = self.load_dict(data, name=path.stem)
        logger.info("Loaded %d calendar(s) from %s", len(loaded), path)
        return next(iter(loaded.values()))

    def load_dict(self, data: Any, name: str = "default") -> dict[str, BusinessCalendar]:
        """
        Load calendars from already-parsed data.

        Args:
            data: Parsed YAML/JSON document
            name: Name for a single-calendar document

        Returns:
            Calendars keyed by name, in document order
        """
        schemas = _validate(data, name)
        if not schemas:
            raise CalendarValidationError(
                message="Calendar document defines no calendars",
                calendar=name,
            )

        loaded = {
            cal_name: _build_calendar(schema, cal_name)
            for cal_name, schema in schemas.items()
        }
        self._calendars.update(loaded)
        return loaded

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in {".yaml", ".yml"}:
                return yaml.safe_load(f)
            elif path.suffix.lower() == ".json":
                return json.load(f)
            else:
                # YAML is a superset of JSON
                return yaml.safe_load(f)

    def get_calendar(self, name: str) -> Optional[BusinessCalendar]:
        """Get a cached calendar by name."""
        return self._calendars.get(name)

    def list_calendars(self) -> list[str]:
        """List names of all loaded calendars."""
        return list(self._calendars.keys())

    def get_all_calendars(self) -> dict[str, BusinessCalendar]:
        """Get all loaded calendars keyed by name, in load order."""
        return dict(self._calendars)


# =============================================================================
# Convenience Functions
# =============================================================================

def load_calendar(path: Union[str, Path]) -> BusinessCalendar:
    """
    Load a calendar from a file.

    Convenience function that creates a temporary loader.
    """
    return CalendarLoader().load(path)


def load_calendar_dict(data: Any, name: str = "default") -> BusinessCalendar:
    """Load a single calendar from parsed data."""
    return next(iter(CalendarLoader().load_dict(data, name=name).values()))


def load_calendar_from_string(
    content: str,
    format: str = "yaml",
) -> BusinessCalendar:
    """
    Load a calendar from a string.

    Args:
        content: YAML or JSON string
        format: "yaml" or "json"

    Returns:
        Loaded BusinessCalendar
    """
    try:
        if format.lower() == "json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise CalendarLoadError(
            message=f"Failed to parse calendar: {e}",
            details={"format": format, "error": str(e)},
        )
    return load_calendar_dict(data)


def load_schedule_dict(data: Any) -> Schedule:
    """
    Load a schedule from parsed data.

    Raises:
        CalendarValidationError: If validation fails
    """
    try:
        return _convert_schedule(ScheduleSchema.model_validate(data))
    except ValidationError as e:
        raise CalendarValidationError(
            message=f"Schedule validation failed: {e.error_count()} errors",
            details={"errors": e.errors(include_url=False)},
        )
    except ValueError as e:
        raise CalendarValidationError(
            message=f"Schedule validation failed: {e}",
            details={"errors": str(e)},
        )


# =============================================================================
# Presets
# =============================================================================

def list_presets() -> list[str]:
    """List the names of bundled calendar presets."""
    return sorted(
        Path(entry.name).stem
        for entry in resources.files(PRESETS_PACKAGE).iterdir()
        if entry.name.endswith(".yaml")
    )


def load_preset(name: str) -> BusinessCalendar:
    """
    Load a bundled calendar preset.

    Args:
        name: Preset name (see list_presets())

    Raises:
        CalendarNotFoundError: If no preset has that name
    """
    resource = resources.files(PRESETS_PACKAGE).joinpath(f"{name}.yaml")
    if not resource.is_file():
        raise CalendarNotFoundError(
            message=f"Unknown calendar preset: {name}",
            details={"available": list_presets()},
            calendar=name,
        )
    data = yaml.safe_load(resource.read_text(encoding="utf-8"))
    return load_calendar_dict(data, name=name)
