"""
Pytest configuration and fixtures for WorkCal tests.

Provides helper factories and common calendar fixtures.
"""
from datetime import date

import pytest

from workcal.calendars import BusinessCalendar
from workcal.models import (
    WORKWEEK,
    AdjustmentPolicy,
    DayOfMonth,
    HolidayRule,
    Month,
)


# =============================================================================
# Factory Helpers
# =============================================================================

def make_calendar(
    *rules: HolidayRule,
    dow=WORKWEEK,
    description: str = "Test calendar",
) -> BusinessCalendar:
    """Create a BusinessCalendar from rules, in the order given."""
    return BusinessCalendar(description=description, dow=frozenset(dow), exclude=rules)


def make_day_rule(
    month: Month,
    day: int,
    observed: AdjustmentPolicy = AdjustmentPolicy.NEXT,
    description: str = "",
    valid_since: date = date.min,
    valid_until: date = date.max,
) -> DayOfMonth:
    """Create a DayOfMonth rule (Next observance by default)."""
    return DayOfMonth(
        month=month,
        day=day,
        observed=observed,
        description=description,
        valid_since=valid_since,
        valid_until=valid_until,
    )


CHRISTMAS = make_day_rule(Month.DECEMBER, 25, description="Christmas")
BOXING_DAY = make_day_rule(Month.DECEMBER, 26, description="Boxing Day")
NEW_YEARS_DAY = make_day_rule(Month.JANUARY, 1, description="New Years Day")


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def christmas_calendar() -> BusinessCalendar:
    """Mon-Fri calendar with Christmas and Boxing Day, both observed Next."""
    return make_calendar(CHRISTMAS, BOXING_DAY)


@pytest.fixture
def holiday_season_calendar() -> BusinessCalendar:
    """Christmas, Boxing Day and New Year's Day, all observed Next."""
    return make_calendar(CHRISTMAS, BOXING_DAY, NEW_YEARS_DAY)


@pytest.fixture
def calendar_yaml() -> str:
    """A calendar document using every rule type."""
    return """
description: Office calendar
dow: [Mon, Tue, Wed, Thu, Fri]
public: true
exclude:
  - type: DayOfMonth
    month: December
    day: 25
    observed: Next
    description: Christmas
  - type: DayOfMonth
    month: Dec
    day: 26
    observed: Next
    description: Boxing Day
  - type: NthDayOccurance
    month: January
    dow: Monday
    offset: -1
    description: Last Monday of January
    since: 2020-01-01
  - type: SpecificDate
    date: 2021-03-15
    description: Office move
inherits: [base]
"""
