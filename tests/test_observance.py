"""
Observance Adjustment Tests

Tests for moving holidays off blocked days and for folding occurrences.
"""
from __future__ import annotations

import logging
from datetime import date, timedelta

import pytest

from workcal.engine import (
    ResolvedRule,
    fold_occurrences,
    is_blocked,
    resolve,
    resolve_observance,
)
from workcal.exceptions import InvalidCalendarError, ObservanceOverflowError
from workcal.models import (
    WORKWEEK,
    AdjustmentPolicy,
    DayOfMonth,
    Month,
    SpecificDate,
    Weekday,
)

ALL_DAYS = frozenset(Weekday)

# 2021-12-25 is a Saturday, 2021-12-26 a Sunday
SATURDAY = date(2021, 12, 25)
SUNDAY = date(2021, 12, 26)
FRIDAY = date(2021, 12, 24)
MONDAY = date(2021, 12, 27)


# =============================================================================
# Blocked Days
# =============================================================================

class TestIsBlocked:
    """Tests for the blocked-day predicate."""

    def test_weekend_is_blocked(self):
        assert is_blocked(SATURDAY, WORKWEEK, set())
        assert is_blocked(SUNDAY, WORKWEEK, set())

    def test_observed_holiday_is_blocked(self):
        assert is_blocked(FRIDAY, WORKWEEK, {FRIDAY})

    def test_free_weekday(self):
        assert not is_blocked(FRIDAY, WORKWEEK, set())


# =============================================================================
# Single Occurrence
# =============================================================================

class TestResolveObservance:
    """Tests for each adjustment policy."""

    def test_no_adjustment_on_free_day(self):
        result = resolve_observance(FRIDAY, AdjustmentPolicy.NO_ADJUSTMENT, set(), WORKWEEK)
        assert result == FRIDAY

    def test_no_adjustment_absorbed_by_weekend(self):
        result = resolve_observance(SATURDAY, AdjustmentPolicy.NO_ADJUSTMENT, set(), WORKWEEK)
        assert result is None

    def test_no_adjustment_absorbed_by_holiday(self):
        result = resolve_observance(FRIDAY, AdjustmentPolicy.NO_ADJUSTMENT, {FRIDAY}, WORKWEEK)
        assert result is None

    def test_unblocked_date_never_moves(self):
        for policy in AdjustmentPolicy:
            assert resolve_observance(FRIDAY, policy, set(), WORKWEEK) == FRIDAY

    def test_next_skips_weekend(self):
        result = resolve_observance(SATURDAY, AdjustmentPolicy.NEXT, set(), WORKWEEK)
        assert result == MONDAY

    def test_next_skips_observed_holidays(self):
        result = resolve_observance(SUNDAY, AdjustmentPolicy.NEXT, {MONDAY}, WORKWEEK)
        assert result == date(2021, 12, 28)

    def test_prev_skips_weekend(self):
        result = resolve_observance(SUNDAY, AdjustmentPolicy.PREV, set(), WORKWEEK)
        assert result == FRIDAY

    def test_prev_skips_observed_holidays(self):
        result = resolve_observance(SATURDAY, AdjustmentPolicy.PREV, {FRIDAY}, WORKWEEK)
        assert result == date(2021, 12, 23)

    def test_closest_prefers_nearer_earlier_day(self):
        """Saturday is one day from Friday, two from Monday."""
        result = resolve_observance(SATURDAY, AdjustmentPolicy.CLOSEST, set(), WORKWEEK)
        assert result == FRIDAY

    def test_closest_prefers_nearer_later_day(self):
        """Sunday is two days from Friday, one from Monday."""
        result = resolve_observance(SUNDAY, AdjustmentPolicy.CLOSEST, set(), WORKWEEK)
        assert result == MONDAY

    def test_closest_tie_goes_to_next(self):
        """With Friday taken, Thursday and Monday are both two days from Saturday."""
        result = resolve_observance(SATURDAY, AdjustmentPolicy.CLOSEST, {FRIDAY}, WORKWEEK)
        assert result == MONDAY

    def test_closest_is_never_farther_than_prev_or_next(self):
        observed = {date(2021, 12, 23), MONDAY}
        start = date(2021, 12, 1)
        for i in range(31):
            raw = start + timedelta(days=i)
            before = resolve_observance(raw, AdjustmentPolicy.PREV, observed, WORKWEEK)
            after = resolve_observance(raw, AdjustmentPolicy.NEXT, observed, WORKWEEK)
            closest = resolve_observance(raw, AdjustmentPolicy.CLOSEST, observed, WORKWEEK)

            distance = abs((closest - raw).days)
            assert distance <= (raw - before).days
            assert distance <= (after - raw).days
            assert closest in (before, after)

    def test_custom_weekday_mask(self):
        """A Sun-Thu week moves a Friday holiday to Sunday."""
        mask = frozenset({Weekday.SUN, Weekday.MON, Weekday.TUE, Weekday.WED, Weekday.THU})
        result = resolve_observance(FRIDAY, AdjustmentPolicy.NEXT, set(), mask)
        assert result == SUNDAY

    @pytest.mark.parametrize("policy", [
        AdjustmentPolicy.NEXT,
        AdjustmentPolicy.PREV,
        AdjustmentPolicy.CLOSEST,
    ])
    def test_moving_policy_with_empty_mask(self, policy):
        with pytest.raises(InvalidCalendarError) as exc_info:
            resolve_observance(FRIDAY, policy, set(), frozenset())
        assert exc_info.value.code == "WC_INVALID_CALENDAR"

    def test_no_adjustment_with_empty_mask_is_absorbed(self):
        result = resolve_observance(FRIDAY, AdjustmentPolicy.NO_ADJUSTMENT, set(), frozenset())
        assert result is None

    def test_next_past_max_date(self):
        with pytest.raises(ObservanceOverflowError) as exc_info:
            resolve_observance(date.max, AdjustmentPolicy.NEXT, {date.max}, ALL_DAYS)
        assert exc_info.value.details["direction"] == "forward"

    def test_prev_before_min_date(self):
        with pytest.raises(ObservanceOverflowError):
            resolve_observance(date.min, AdjustmentPolicy.PREV, {date.min}, ALL_DAYS)

    def test_closest_at_min_date_uses_next(self):
        result = resolve_observance(date.min, AdjustmentPolicy.CLOSEST, {date.min}, ALL_DAYS)
        assert result == date.min + timedelta(days=1)

    def test_closest_at_max_date_uses_prev(self):
        result = resolve_observance(date.max, AdjustmentPolicy.CLOSEST, {date.max}, ALL_DAYS)
        assert result == date.max - timedelta(days=1)

    def test_closest_at_min_date_with_weekday_mask(self):
        # 0001-01-01 is a Monday
        mondays = frozenset({Weekday.MON})
        result = resolve_observance(date.min, AdjustmentPolicy.CLOSEST, {date.min}, mondays)
        assert result == date(1, 1, 8)


# =============================================================================
# Folding
# =============================================================================

def _resolved(*rules, start=date(2021, 1, 1), end=date(2021, 12, 31)):
    return [r for r in (resolve(rule, start, end) for rule in rules) if r is not None]


class TestFoldOccurrences:
    """Tests for folding resolved rules in order."""

    def test_later_rules_see_earlier_holidays(self):
        christmas = DayOfMonth(Month.DECEMBER, 25, AdjustmentPolicy.NEXT, "Christmas")
        boxing = DayOfMonth(Month.DECEMBER, 26, AdjustmentPolicy.NEXT, "Boxing Day")

        holidays = fold_occurrences(_resolved(christmas, boxing), WORKWEEK)

        assert [h.observed for h in holidays] == [MONDAY, date(2021, 12, 28)]
        assert [h.raw for h in holidays] == [SATURDAY, SUNDAY]
        assert all(h.is_moved for h in holidays)
        assert holidays[0].description == "Christmas"

    def test_observed_dates_are_unique(self):
        rules = [
            DayOfMonth(Month.DECEMBER, 25, AdjustmentPolicy.CLOSEST, "A"),
            DayOfMonth(Month.DECEMBER, 25, AdjustmentPolicy.CLOSEST, "B"),
            DayOfMonth(Month.DECEMBER, 25, AdjustmentPolicy.CLOSEST, "C"),
        ]
        holidays = fold_occurrences(_resolved(*rules), WORKWEEK)
        observed = [h.observed for h in holidays]

        assert len(observed) == 3
        assert len(set(observed)) == 3

    def test_observed_dates_respect_mask(self):
        rules = [
            DayOfMonth(Month.DECEMBER, 25, AdjustmentPolicy.PREV),
            DayOfMonth(Month.DECEMBER, 26, AdjustmentPolicy.NEXT),
            DayOfMonth(Month.JULY, 4, AdjustmentPolicy.CLOSEST),
        ]
        for holiday in fold_occurrences(_resolved(*rules), WORKWEEK):
            assert Weekday.from_date(holiday.observed) in WORKWEEK

    def test_no_adjustment_on_weekend_is_dropped(self):
        rule = DayOfMonth(Month.DECEMBER, 25, AdjustmentPolicy.NO_ADJUSTMENT, "Christmas")
        assert fold_occurrences(_resolved(rule), WORKWEEK) == ()

    def test_rule_order_changes_outcome(self):
        """An adjusted holiday competing with a fixed one depends on which is listed first."""
        christmas = DayOfMonth(Month.DECEMBER, 25, AdjustmentPolicy.CLOSEST, "Christmas")
        eve = SpecificDate(FRIDAY, "Christmas Eve")

        first = fold_occurrences(_resolved(christmas, eve), WORKWEEK)
        second = fold_occurrences(_resolved(eve, christmas), WORKWEEK)

        assert {h.observed for h in first} == {FRIDAY}
        assert {h.observed for h in second} == {FRIDAY, MONDAY}

    def test_overflowing_occurrence_is_skipped(self, caplog):
        rules = [
            SpecificDate(date.max, "Last day"),
            DayOfMonth(Month.DECEMBER, 31, AdjustmentPolicy.NEXT, "Year end"),
        ]
        resolved = _resolved(*rules, start=date(9999, 12, 1), end=date.max)

        with caplog.at_level(logging.WARNING, logger="workcal"):
            holidays = fold_occurrences(resolved, ALL_DAYS)

        assert [h.observed for h in holidays] == [date.max]
        assert "Year end" in caplog.text

    def test_empty_mask_with_moving_rule(self):
        rule = DayOfMonth(Month.DECEMBER, 25, AdjustmentPolicy.NEXT)
        with pytest.raises(InvalidCalendarError):
            fold_occurrences(_resolved(rule), frozenset())

    def test_policy_carried_from_rule(self):
        rule = DayOfMonth(Month.DECEMBER, 25, AdjustmentPolicy.PREV, "Christmas")
        (holiday,) = fold_occurrences(_resolved(rule), WORKWEEK)
        assert holiday.policy == AdjustmentPolicy.PREV
        assert holiday.observed == FRIDAY

    def test_empty_resolved_rule(self):
        entry = ResolvedRule(
            dates=(),
            policy=AdjustmentPolicy.NEXT,
            rule=DayOfMonth(Month.JUNE, 19),
        )
        assert fold_occurrences([entry], WORKWEEK) == ()
