"""
WorkCal Business Calendar

A configurable calendar built from a set of working weekdays and an
ordered list of holiday rules.

For a query window the calendar resolves every rule to raw dates, folds
the occurrences through observance adjustment in rule order, and
combines the observed holidays with the weekday mask.

Known limitations:
- Rule order matters. Two adjusted holidays competing for the same free
  day are settled in the order the rules are listed, not by date.
- working_days_in_range() looks back 14 days before the range start for
  holidays observed into the range, but does not look past the range
  end.
- is_off_day() resolves only the year of the queried date, so a holiday
  pushed across New Year by its adjustment is only seen by range queries
  that include the previous year. is_business_day() and the business-day
  searches resolve a margin on both sides and do see it.
"""
from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import ClassVar, Optional

from ..engine import ObservedHoliday, ResolvedRule, fold_occurrences, resolve
from ..exceptions import InvalidCalendarError
from ..intervals import DateInterval, shift_date
from ..models import WORKWEEK, HolidayRule, Weekday
from .base import BaseCalendar

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BusinessCalendar(BaseCalendar):
    """
    Business calendar with rule-based holidays.

    Attributes:
        description: Human-readable description
        dow: Weekdays that are potential working days
        public: Whether the calendar is published for others to use
        exclude: Holiday rules, in resolution order
        inherits: Names of parent calendars (stored, not resolved)
    """
    description: str = ""
    dow: frozenset[Weekday] = WORKWEEK
    public: bool = False
    exclude: tuple[HolidayRule, ...] = ()
    inherits: tuple[str, ...] = field(default_factory=tuple)

    # Days before a range start whose holidays may be observed inside it
    LOOKBACK_DAYS: ClassVar[int] = 14

    def __post_init__(self) -> None:
        object.__setattr__(self, "dow", frozenset(self.dow))
        object.__setattr__(self, "exclude", tuple(self.exclude))
        object.__setattr__(self, "inherits", tuple(self.inherits))

    @property
    def working_weekdays(self) -> frozenset[Weekday]:
        return self.dow

    # =========================================================================
    # Resolution
    # =========================================================================

    def resolve_rules(self, window_start: date, window_end: date) -> list[ResolvedRule]:
        """Resolve every rule against the window, in rule order."""
        resolved = []
        for rule in self.exclude:
            entry = resolve(rule, window_start, window_end)
            if entry is not None:
                resolved.append(entry)
        return resolved

    def _fold(self, window_start: date, window_end: date) -> tuple[ObservedHoliday, ...]:
        try:
            holidays = fold_occurrences(
                self.resolve_rules(window_start, window_end), self.dow
            )
        except InvalidCalendarError as e:
            raise InvalidCalendarError(
                message=e.message,
                details=e.details,
                calendar=e.calendar or self.description or None,
                window_start=window_start,
                window_end=window_end,
            ) from e
        logger.debug(
            "Resolved %d observed holidays for %s..%s",
            len(holidays), window_start.isoformat(), window_end.isoformat(),
        )
        return holidays

    def get_off_days(self, window_start: date, window_end: date) -> set[date]:
        """
        Get the observed holiday dates for a window.

        Rules are resolved per whole year, so the result can also hold
        holidays just outside the window. Weekdays outside the mask are
        not included.

        Raises:
            InvalidCalendarError: If a moving rule meets an empty mask
        """
        return {h.observed for h in self._fold(window_start, window_end)}

    def observed_holidays(self, window_start: date, window_end: date) -> list[ObservedHoliday]:
        """
        Get the holidays observed inside a window, sorted by observed date.

        Args:
            window_start: Start date (inclusive)
            window_end: End date (inclusive)
        """
        holidays = [
            h for h in self._fold(window_start, window_end)
            if window_start <= h.observed <= window_end
        ]
        return sorted(holidays, key=lambda h: h.observed)

    def get_holiday_name(self, d: date) -> Optional[str]:
        """
        Get the name of the holiday observed on a date.

        Moved holidays are reported as "<name> (Observed)".

        Returns:
            Holiday name if a holiday is observed on the date, None otherwise
        """
        for holiday in self._fold(d, d):
            if holiday.observed == d:
                if holiday.is_moved:
                    return f"{holiday.description} (Observed)"
                return holiday.description
        return None

    # =========================================================================
    # Queries
    # =========================================================================

    def is_off_day(self, d: date) -> bool:
        """
        Check if a date is an off-day.

        True when the weekday is not a working weekday or a holiday is
        observed on the date.
        """
        if Weekday.from_date(d) not in self.dow:
            return True
        return d in self.get_off_days(d, d)

    def is_business_day(self, d: date) -> bool:
        """
        Check if a date is a working day.

        Holidays are resolved search_margin_days either side of the date,
        the same way next_business_day() and add_business_days() see
        them. For a holiday observed across New Year this can disagree
        with is_off_day(), which resolves only the date's own year.
        """
        if Weekday.from_date(d) not in self.dow:
            return False
        margin = timedelta(days=self.search_margin_days)
        return d not in self.get_off_days(shift_date(d, -margin), shift_date(d, margin))

    def working_days_in_range(self, start: date, end: date) -> list[date]:
        """
        Get the working days between two dates.

        Args:
            start: First date (inclusive)
            end: Last date (inclusive)

        Returns:
            Working days in ascending order; empty if start > end
        """
        if start > end or not self.dow:
            return []

        window_start = shift_date(start, -timedelta(days=self.LOOKBACK_DAYS))
        off_days = self.get_off_days(window_start, end)

        # end may be date.max, so the closing day is chained on
        days = itertools.chain(DateInterval(window_start, end), (end,))
        return [
            d for d in days
            if d >= start
            and Weekday.from_date(d) in self.dow
            and d not in off_days
        ]
