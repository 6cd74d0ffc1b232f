"""
WorkCal Date Intervals

Half-open spans of calendar dates: [start, end).
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator

_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class DateInterval:
    """
    A half-open span of dates, start inclusive, end exclusive.

    Iterating yields every date in the span in ascending order. Each
    call to iter() starts a fresh pass, so an interval can be iterated
    any number of times.

    An interval with start > end is malformed; it contains nothing and
    iterates as an empty sequence.
    """
    start: date
    end: date

    @classmethod
    def inclusive(cls, first: date, last: date) -> DateInterval:
        """Build the interval covering first..last, both inclusive."""
        return cls(first, last + _ONE_DAY)

    def contains(self, d: date) -> bool:
        return self.start <= d < self.end

    def __contains__(self, d: object) -> bool:
        return isinstance(d, date) and self.contains(d)

    def is_empty(self) -> bool:
        return self.start == self.end

    def __len__(self) -> int:
        return max((self.end - self.start).days, 0)

    def __iter__(self) -> Iterator[date]:
        current = self.start
        while current < self.end:
            yield current
            current += _ONE_DAY


def shift_date(d: date, delta: timedelta) -> date:
    """Add a timedelta to a date, clamping at date.min/date.max."""
    try:
        return d + delta
    except OverflowError:
        return date.max if delta > timedelta(0) else date.min
