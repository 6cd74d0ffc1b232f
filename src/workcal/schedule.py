"""
WorkCal Schedules

Time-of-day spans with date-ranged overrides. This is a standalone
utility; the holiday engine never consults it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Optional


@dataclass(frozen=True)
class TimeSpan:
    """
    A span of time within a day.

    Equality compares the bounds only; descriptions are labels.
    """
    start: time
    end: time
    description: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(
                f"TimeSpan end {self.end.isoformat()} is before start {self.start.isoformat()}"
            )

    def intersection(self, other: TimeSpan) -> Optional[TimeSpan]:
        """
        Get the overlap of two spans.

        Spans that only touch produce a zero-length span.

        Returns:
            The overlapping span, or None if the spans are disjoint
        """
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        if end < start:
            return None
        return TimeSpan(
            start=start,
            end=end,
            description=f"Intersection of {self.description} and {other.description}",
        )


@dataclass(frozen=True)
class ScheduleOverride:
    """
    Replacement spans for a date range.

    Attributes:
        start_date: First date of the override (inclusive)
        end_date: Last date (inclusive); None for open-ended
        schedule: Spans that apply instead of the default
    """
    start_date: date
    end_date: Optional[date] = None
    schedule: tuple[TimeSpan, ...] = ()
    description: str = ""

    def covers(self, d: date) -> bool:
        if d < self.start_date:
            return False
        return self.end_date is None or d <= self.end_date


@dataclass(frozen=True)
class Schedule:
    """Default daily spans plus date-ranged overrides."""
    default: tuple[TimeSpan, ...] = ()
    overrides: tuple[ScheduleOverride, ...] = ()

    def spans_for(self, d: date) -> tuple[TimeSpan, ...]:
        """Get the spans for a date; the last listed covering override wins."""
        for override in reversed(self.overrides):
            if override.covers(d):
                return override.schedule
        return self.default
