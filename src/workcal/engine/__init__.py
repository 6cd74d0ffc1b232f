"""
WorkCal Engine

Holiday resolution and observance adjustment.

Usage:
    from workcal.engine import resolve, fold_occurrences

    resolved = [r for r in (resolve(rule, start, end) for rule in rules) if r]
    holidays = fold_occurrences(resolved, weekday_mask)
"""
from __future__ import annotations

from .observance import (
    ObservedHoliday,
    fold_occurrences,
    is_blocked,
    resolve_observance,
)
from .resolution import (
    ResolvedRule,
    day_of_month_occurrence,
    nth_weekday_occurrence,
    resolve,
)

__all__ = [
    # Resolution
    "ResolvedRule",
    "resolve",
    "day_of_month_occurrence",
    "nth_weekday_occurrence",
    # Observance
    "ObservedHoliday",
    "resolve_observance",
    "fold_occurrences",
    "is_blocked",
]
