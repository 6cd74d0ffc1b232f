"""
WorkCal Exception Hierarchy

Domain-specific exceptions for business calendar resolution.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: WC_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional


@dataclass
class WorkCalError(Exception):
    """
    Base exception for all WorkCal errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (WC_*)
        details: Additional context about the error
        calendar: Name of the calendar involved, if known
        window_start: First date of the query being answered, if any
        window_end: Last date of the query being answered, if any
    """
    message: str
    code: str = "WC_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    calendar: Optional[str] = None
    window_start: Optional[date] = None
    window_end: Optional[date] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.calendar:
            parts.append(f"(calendar: {self.calendar})")
        if self.window_start is not None and self.window_end is not None:
            parts.append(
                f"(window: {self.window_start.isoformat()}..{self.window_end.isoformat()})"
            )
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/CLI output."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.calendar:
            result["calendar"] = self.calendar
        if self.window_start is not None:
            result["window_start"] = self.window_start.isoformat()
        if self.window_end is not None:
            result["window_end"] = self.window_end.isoformat()
        return result


# =============================================================================
# Configuration Errors
# =============================================================================

@dataclass
class CalendarLoadError(WorkCalError):
    """Failed to read or parse a calendar file."""
    code: str = "WC_CALENDAR_LOAD_ERROR"


@dataclass
class CalendarValidationError(WorkCalError):
    """Calendar configuration does not match the expected shape."""
    code: str = "WC_CALENDAR_VALIDATION_ERROR"


@dataclass
class CalendarNotFoundError(WorkCalError):
    """Requested calendar or preset is not known."""
    code: str = "WC_CALENDAR_NOT_FOUND"


# =============================================================================
# Resolution Errors
# =============================================================================

@dataclass
class InvalidCalendarError(WorkCalError):
    """Calendar cannot answer the query (e.g. no eligible weekday)."""
    code: str = "WC_INVALID_CALENDAR"


@dataclass
class ObservanceOverflowError(WorkCalError):
    """Observance scan stepped outside the representable date range."""
    code: str = "WC_OBSERVANCE_OVERFLOW"


@dataclass
class DateOutOfRangeError(WorkCalError):
    """A business-day search ran past date.min/date.max."""
    code: str = "WC_DATE_OUT_OF_RANGE"
