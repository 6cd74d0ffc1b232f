"""
WorkCal Holiday Rule Resolution

Turns an abstract HolidayRule into the concrete raw dates it falls on
within a query window, together with the adjustment policy that applies
to each of them.

Recurring rules are resolved per whole year: the overlap of the rule's
validity window and the query window is widened to full calendar years
and one raw date is produced for each year. Raw dates outside the query
window are kept, since their observance can still move into
it. Raw dates outside the rule's own validity window are dropped.

An occurrence that cannot be constructed (Feb 29 in a non-leap year, or
an offset stepping past date.min/date.max) is skipped on its own; the
other years of the rule are unaffected.
"""
from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Union

from ..models import (
    AdjustmentPolicy,
    DayOfMonth,
    HolidayRule,
    NthWeekdayOfMonth,
    SpecificDate,
)

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class ResolvedRule:
    """
    Raw dates of one rule within a window.

    Attributes:
        dates: Raw holiday dates, ascending
        policy: Adjustment policy applied to every date
        rule: The rule that produced them
    """
    dates: tuple[date, ...]
    policy: AdjustmentPolicy
    rule: HolidayRule


# =============================================================================
# Per-year occurrence
# =============================================================================

def day_of_month_occurrence(rule: DayOfMonth, year: int) -> Optional[date]:
    """Get the raw date of a DayOfMonth rule in a year, if it exists."""
    try:
        return date(year, rule.month.number, rule.day)
    except ValueError:
        logger.debug(
            "Skipping %s %d in %d: no such date",
            rule.month.value, rule.day, year,
        )
        return None


def nth_weekday_occurrence(rule: NthWeekdayOfMonth, year: int) -> Optional[date]:
    """
    Get the raw date of an NthWeekdayOfMonth rule in a year.

    Positive offsets start on the 1st and walk forward to the weekday,
    then step forward offset-1 weeks. Negative offsets start on the last
    day of the month and walk backward, then step back |offset|-1 weeks.
    """
    month = rule.month.number
    target = rule.weekday.number

    try:
        if rule.offset > 0:
            current = date(year, month, 1)
            while current.weekday() != target:
                current += _ONE_DAY
            return current + timedelta(weeks=rule.offset - 1)

        last_day = calendar.monthrange(year, month)[1]
        current = date(year, month, last_day)
        while current.weekday() != target:
            current -= _ONE_DAY
        return current - timedelta(weeks=-rule.offset - 1)
    except OverflowError:
        logger.debug(
            "Skipping %s offset %d of %s in %d: outside representable dates",
            rule.weekday.value, rule.offset, rule.month.value, year,
        )
        return None


# =============================================================================
# Resolution
# =============================================================================

def _resolve_specific(
    rule: SpecificDate,
    window_start: date,
    window_end: date,
) -> Optional[ResolvedRule]:
    if not window_start.year <= rule.date.year <= window_end.year:
        return None
    return ResolvedRule(
        dates=(rule.date,),
        policy=AdjustmentPolicy.NO_ADJUSTMENT,
        rule=rule,
    )


def _resolve_yearly(
    rule: Union[DayOfMonth, NthWeekdayOfMonth],
    window_start: date,
    window_end: date,
) -> Optional[ResolvedRule]:
    overlap_start = max(rule.valid_since, window_start)
    overlap_end = min(rule.valid_until, window_end)
    if overlap_start > overlap_end:
        return None

    if isinstance(rule, DayOfMonth):
        occurrence = day_of_month_occurrence
    else:
        occurrence = nth_weekday_occurrence

    dates = []
    for year in range(overlap_start.year, overlap_end.year + 1):
        raw = occurrence(rule, year)
        if raw is None:
            continue
        if not rule.valid_since <= raw <= rule.valid_until:
            continue
        dates.append(raw)

    # Offsets past the month end can leave a December occurrence in January
    dates.sort()
    return ResolvedRule(dates=tuple(dates), policy=rule.observed, rule=rule)


def resolve(
    rule: HolidayRule,
    window_start: date,
    window_end: date,
) -> Optional[ResolvedRule]:
    """
    Resolve a holiday rule against an inclusive query window.

    Args:
        rule: The rule to resolve
        window_start: First date of the window (inclusive)
        window_end: Last date of the window (inclusive)

    Returns:
        The raw dates and their adjustment policy, or None if the rule
        cannot occur in the window at all

    Raises:
        TypeError: If the rule is not a known rule kind
    """
    if window_start > window_end:
        return None
    if isinstance(rule, SpecificDate):
        return _resolve_specific(rule, window_start, window_end)
    if isinstance(rule, (DayOfMonth, NthWeekdayOfMonth)):
        return _resolve_yearly(rule, window_start, window_end)
    raise TypeError(f"Unknown holiday rule type: {type(rule).__name__}")
