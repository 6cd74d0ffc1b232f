"""
WorkCal Observance Resolution

Computes the observed date of a holiday from its raw date, the holidays
already observed in the same query, and the calendar's working weekdays.

A date is blocked when its weekday is not a working weekday or another
holiday is already observed on it. Policies:
- NoAdjustment: the raw date if free, otherwise the holiday is absorbed
- Next: first free date on or after the raw date
- Prev: first free date on or before the raw date
- Closest: the nearer of Prev and Next; ties go to Next. When one
  direction runs off the representable date range, the other is used

Occurrences are folded in rule order, then chronologically within a
rule. Each occurrence only sees holidays committed before it, so the
order of rules in a calendar can change the outcome when two adjusted
holidays compete for the same free day.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import AbstractSet, Iterable, Optional

from ..exceptions import InvalidCalendarError, ObservanceOverflowError
from ..models import AdjustmentPolicy, Weekday
from .resolution import ResolvedRule

logger = logging.getLogger(__name__)

_FORWARD = timedelta(days=1)
_BACKWARD = timedelta(days=-1)


@dataclass(frozen=True)
class ObservedHoliday:
    """
    A holiday occurrence after adjustment.

    Attributes:
        observed: Date the holiday takes effect
        raw: Date the rule naturally falls on
        policy: Policy used to move it
        description: Name of the rule that produced it
    """
    observed: date
    raw: date
    policy: AdjustmentPolicy
    description: str = ""

    @property
    def is_moved(self) -> bool:
        return self.observed != self.raw


def is_blocked(
    d: date,
    weekday_mask: AbstractSet[Weekday],
    observed: AbstractSet[date],
) -> bool:
    """Check whether a date cannot take a holiday."""
    return Weekday.from_date(d) not in weekday_mask or d in observed


def _scan(
    raw_date: date,
    step: timedelta,
    weekday_mask: AbstractSet[Weekday],
    observed: AbstractSet[date],
) -> date:
    current = raw_date
    try:
        while is_blocked(current, weekday_mask, observed):
            current += step
    except OverflowError:
        direction = "forward" if step > timedelta(0) else "backward"
        raise ObservanceOverflowError(
            message=f"No free day {direction} of {raw_date.isoformat()} within representable dates",
            details={"raw_date": raw_date.isoformat(), "direction": direction},
        ) from None
    return current


def resolve_observance(
    raw_date: date,
    policy: AdjustmentPolicy,
    observed: AbstractSet[date],
    weekday_mask: AbstractSet[Weekday],
) -> Optional[date]:
    """
    Compute the observed date of a single holiday occurrence.

    Args:
        raw_date: Date the holiday naturally falls on
        policy: Adjustment policy for this occurrence
        observed: Holidays already observed in this query
        weekday_mask: Working weekdays of the calendar

    Returns:
        The observed date, or None if a NoAdjustment holiday is absorbed
        by an existing off-day

    Raises:
        InvalidCalendarError: If a moving policy is used with no working
            weekday (the scan could never end)
        ObservanceOverflowError: If the scan runs past date.min/date.max
            (for Closest, only when both directions do)
    """
    if policy is AdjustmentPolicy.NO_ADJUSTMENT:
        if is_blocked(raw_date, weekday_mask, observed):
            return None
        return raw_date

    if not weekday_mask:
        raise InvalidCalendarError(
            message=f"Cannot apply {policy.value} observance without any working weekday",
            details={"raw_date": raw_date.isoformat(), "policy": policy.value},
        )

    if policy is AdjustmentPolicy.NEXT:
        return _scan(raw_date, _FORWARD, weekday_mask, observed)
    if policy is AdjustmentPolicy.PREV:
        return _scan(raw_date, _BACKWARD, weekday_mask, observed)
    if policy is AdjustmentPolicy.CLOSEST:
        # At either end of the date range only one direction exists
        try:
            before = _scan(raw_date, _BACKWARD, weekday_mask, observed)
        except ObservanceOverflowError:
            return _scan(raw_date, _FORWARD, weekday_mask, observed)
        try:
            after = _scan(raw_date, _FORWARD, weekday_mask, observed)
        except ObservanceOverflowError:
            return before
        # Equal distance resolves to the later date
        if raw_date - before < after - raw_date:
            return before
        return after
    raise ValueError(f"Unknown adjustment policy: {policy!r}")


def fold_occurrences(
    resolved: Iterable[ResolvedRule],
    weekday_mask: AbstractSet[Weekday],
) -> tuple[ObservedHoliday, ...]:
    """
    Fold resolved rules into observed holidays, in the order given.

    Every kept occurrence is visible to the occurrences after it.
    Occurrences whose scan overflows the date range are skipped.

    Args:
        resolved: Resolved rules, in calendar rule order
        weekday_mask: Working weekdays of the calendar

    Returns:
        Observed holidays in the order they were committed
    """
    observed: set[date] = set()
    holidays: list[ObservedHoliday] = []

    for entry in resolved:
        description = entry.rule.description
        for raw in entry.dates:
            try:
                when = resolve_observance(raw, entry.policy, observed, weekday_mask)
            except ObservanceOverflowError as e:
                logger.warning(
                    "Skipping holiday %r on %s: %s",
                    description, raw.isoformat(), e.message,
                )
                continue

            if when is None:
                logger.debug(
                    "Holiday %r on %s absorbed by an existing off-day",
                    description, raw.isoformat(),
                )
                continue

            observed.add(when)
            holidays.append(
                ObservedHoliday(
                    observed=when,
                    raw=raw,
                    policy=entry.policy,
                    description=description,
                )
            )

    return tuple(holidays)
