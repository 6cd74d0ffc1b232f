"""
WorkCal Calendar Base

Provides the protocol and base implementation for business calendars
used in working-day calculations.

Subclasses decide which days are off; the base class builds the
business-day arithmetic (add/subtract, next/previous, counting) on top
of working_days_in_range().
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import AbstractSet, Iterator, Protocol, runtime_checkable

from ..exceptions import DateOutOfRangeError, InvalidCalendarError
from ..intervals import shift_date
from ..models import Weekday

_ONE_DAY = timedelta(days=1)


@runtime_checkable
class HolidayCalendar(Protocol):
    """
    Protocol for business calendars.

    Implementations must answer whether a date is off and list the
    working days of a range.
    """

    def is_off_day(self, d: date) -> bool:
        """
        Check if a date is an off-day.

        Args:
            d: Date to check

        Returns:
            True if no business happens on the date
        """
        ...

    def is_business_day(self, d: date) -> bool:
        """Check if a date is a working day."""
        ...

    def working_days_in_range(self, start: date, end: date) -> list[date]:
        """
        Get all working days within a date range.

        Args:
            start: Start date (inclusive)
            end: End date (inclusive)

        Returns:
            Working days in ascending order
        """
        ...


class BaseCalendar(ABC):
    """
    Abstract base class for business calendars.

    Provides common functionality for business day calculations.
    Subclasses must implement `working_weekdays`, `is_off_day()` and
    `working_days_in_range()`.
    """

    # Days fetched per working_days_in_range() call while searching
    search_chunk_days: int = 31

    # Days past a searched span whose holidays may be observed inside it
    search_margin_days: int = 14

    @property
    @abstractmethod
    def working_weekdays(self) -> AbstractSet[Weekday]:
        """Weekdays that can be working days."""
        ...

    @abstractmethod
    def is_off_day(self, d: date) -> bool:
        """Check if a date is an off-day."""
        ...

    @abstractmethod
    def working_days_in_range(self, start: date, end: date) -> list[date]:
        """Get working days in [start, end], ascending."""
        ...

    def is_business_day(self, d: date) -> bool:
        """A business day is any date that is not an off-day."""
        return not self.is_off_day(d)

    def _business_days_in(self, low: date, high: date) -> list[date]:
        """Working days in [low, high], resolved with a margin past high."""
        margin = timedelta(days=self.search_margin_days)
        days = self.working_days_in_range(low, shift_date(high, margin))
        return [d for d in days if d <= high]

    def _iter_business_days(self, origin: date, forward: bool) -> Iterator[date]:
        """
        Yield business days strictly after (or before) origin, nearest first.

        Stops at date.max (or date.min).
        """
        if not self.working_weekdays:
            raise InvalidCalendarError(
                message="Calendar has no working weekday; business days cannot be searched",
            )

        span = timedelta(days=self.search_chunk_days - 1)
        if forward:
            if origin == date.max:
                return
            low = origin + _ONE_DAY
            while True:
                high = shift_date(low, span)
                yield from self._business_days_in(low, high)
                if high == date.max:
                    return
                low = high + _ONE_DAY
        else:
            if origin == date.min:
                return
            high = origin - _ONE_DAY
            while True:
                low = shift_date(high, -span)
                yield from reversed(self._business_days_in(low, high))
                if low == date.min:
                    return
                high = low - _ONE_DAY

    def add_business_days(self, start: date, days: int) -> date:
        """
        Add business days to a date.

        Args:
            start: Starting date
            days: Number of business days to add (can be negative)

        Returns:
            The resulting date after adding business days

        Raises:
            DateOutOfRangeError: If the result would lie past date.max
                (or before date.min)
        """
        if days == 0:
            return start

        remaining = abs(days)
        for current in self._iter_business_days(start, forward=days > 0):
            remaining -= 1
            if remaining == 0:
                return current
        raise DateOutOfRangeError(
            message=f"Cannot move {days} business days from {start.isoformat()}",
            details={"start": start.isoformat(), "days": days},
            window_start=start if days > 0 else date.min,
            window_end=date.max if days > 0 else start,
        )

    def subtract_business_days(self, start: date, days: int) -> date:
        """Subtract business days from a date."""
        return self.add_business_days(start, -days)

    def business_days_between(self, start: date, end: date) -> int:
        """
        Count business days between two dates.

        Args:
            start: Start date (exclusive)
            end: End date (inclusive)

        Returns:
            Number of business days between the dates
        """
        if start >= end:
            return 0
        return len(self._business_days_in(start + _ONE_DAY, end))

    def next_business_day(self, d: date) -> date:
        """
        Get the next business day on or after a date.

        If the given date is a business day, returns it.
        """
        if self.is_business_day(d):
            return d
        for current in self._iter_business_days(d, forward=True):
            return current
        raise DateOutOfRangeError(
            message=f"No business day on or after {d.isoformat()}",
            details={"date": d.isoformat()},
            window_start=d,
            window_end=date.max,
        )

    def previous_business_day(self, d: date) -> date:
        """
        Get the previous business day on or before a date.

        If the given date is a business day, returns it.
        """
        if self.is_business_day(d):
            return d
        for current in self._iter_business_days(d, forward=False):
            return current
        raise DateOutOfRangeError(
            message=f"No business day on or before {d.isoformat()}",
            details={"date": d.isoformat()},
            window_start=date.min,
            window_end=d,
        )
