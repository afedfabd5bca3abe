"""
Unit tests for sleep consistency metrics.

Tests weekday consistency, weekend recovery, per-entry sleep debt,
weekday variability and the capped catch-up recommendation.
"""

import datetime
import math

import pytest

from app.schemas.sleep_entry import SleepEntry
from app.sleep.consistency import (
    MAX_CATCHUP_HOURS,
    analyze_consistency,
    optimal_catchup,
)


# ======================================================================
# Helpers
# ======================================================================


def _make_entry(
    duration: float | None = 8.0,
    weekend: bool = False,
    day: int = 0,
) -> SleepEntry:
    return SleepEntry(
        id=f"entry-{day}",
        date=datetime.date(2024, 6, 3) + datetime.timedelta(days=day),
        start_time="23:00",
        end_time="07:00",
        is_weekend=weekend,
        duration=duration,
    )


def _weekdays(*durations: float) -> list[SleepEntry]:
    return [_make_entry(d, weekend=False, day=i) for i, d in enumerate(durations)]


def _weekends(*durations: float) -> list[SleepEntry]:
    return [_make_entry(d, weekend=True, day=5 + i) for i, d in enumerate(durations)]


# ======================================================================
# analyze_consistency
# ======================================================================


class TestAnalyzeConsistency:

    def test_empty_is_all_zero(self):
        m = analyze_consistency([])
        assert m.weekday_consistency == 0.0
        assert m.weekend_recovery == 0.0
        assert m.sleep_debt == 0.0
        assert m.sleep_variability == 0.0

    def test_reference_example(self):
        """Two 6 h weekdays + one 10 h weekend night."""
        entries = _weekdays(6, 6) + _weekends(10)
        m = analyze_consistency(entries)
        assert m.weekday_consistency == 100.0
        assert m.weekend_recovery == 10.0
        assert m.sleep_debt == 4.0
        assert m.sleep_variability == 0.0

    def test_weekend_flag_is_trusted_over_date(self):
        """A Monday flagged as weekend counts as weekend."""
        entry = _make_entry(9.0, weekend=True, day=0)
        m = analyze_consistency([entry])
        assert m.weekend_recovery == 9.0
        assert m.weekday_consistency == 0.0

    def test_no_weekday_entries(self):
        m = analyze_consistency(_weekends(9, 9))
        assert m.weekday_consistency == 0.0
        assert m.sleep_variability == 0.0
        assert m.weekend_recovery == 18.0

    def test_consistency_tolerance_is_inclusive(self):
        # mean 7; 6 and 8 lie exactly 1 h away.
        m = analyze_consistency(_weekdays(6, 7, 8))
        assert m.weekday_consistency == 100.0

    def test_outlier_breaks_consistency(self):
        # mean 6.5; 4 is 2.5 h below, every other night within 1 h.
        m = analyze_consistency(_weekdays(7, 7, 7, 4, 7.5, 6.5))
        assert m.weekday_consistency == pytest.approx(100.0 * 5 / 6)

    def test_debt_is_per_entry_not_net(self):
        """A 10 h night does not cancel a 6 h night."""
        m = analyze_consistency(_weekdays(6, 10))
        assert m.sleep_debt == 2.0

    def test_debt_includes_weekend_entries(self):
        m = analyze_consistency(_weekdays(8) + _weekends(5))
        assert m.sleep_debt == 3.0

    def test_missing_duration_is_full_deficit(self):
        m = analyze_consistency([_make_entry(None)])
        assert m.sleep_debt == 8.0

    def test_sample_standard_deviation(self):
        m = analyze_consistency(_weekdays(6, 8))
        # mean 7, squared deviations 1 + 1, divisor n-1 = 1.
        assert m.sleep_variability == pytest.approx(math.sqrt(2))

    def test_single_weekday_has_no_variability(self):
        m = analyze_consistency(_weekdays(5))
        assert m.sleep_variability == 0.0

    def test_variability_ignores_weekends(self):
        m = analyze_consistency(_weekdays(7, 7) + _weekends(3, 12))
        assert m.sleep_variability == 0.0

    @pytest.mark.parametrize("durations", [
        (0.0, 24.0, 3.5),
        (8.0, 8.0, 8.0, 8.0, 8.0),
        (2.0, 9.0, 11.0, 4.5),
        (12.0,),
    ])
    def test_bounds(self, durations):
        entries = [
            _make_entry(d, weekend=i % 3 == 2, day=i)
            for i, d in enumerate(durations)
        ]
        m = analyze_consistency(entries)
        assert m.sleep_debt >= 0.0
        assert 0.0 <= m.weekday_consistency <= 100.0
        assert m.weekend_recovery >= 0.0
        assert m.sleep_variability >= 0.0

    def test_idempotent(self):
        entries = _weekdays(5.5, 7.25, 6.0) + _weekends(9.5)
        assert analyze_consistency(entries) == analyze_consistency(entries)

    def test_does_not_mutate_entries(self):
        entries = _weekdays(6, 7) + _weekends(9)
        before = [e.model_copy() for e in entries]
        analyze_consistency(entries)
        assert entries == before


# ======================================================================
# optimal_catchup
# ======================================================================


class TestOptimalCatchup:

    def test_reference_example(self):
        entries = _weekdays(6, 6) + _weekends(10)
        assert optimal_catchup(entries, 8) == 4.0

    def test_no_weekday_entries(self):
        assert optimal_catchup(_weekends(4, 4), 8) == 0.0

    def test_empty(self):
        assert optimal_catchup([], 8) == 0.0

    def test_deficit_below_cap(self):
        assert optimal_catchup(_weekdays(7, 7.5), 8) == 1.5

    def test_no_deficit(self):
        assert optimal_catchup(_weekdays(9, 8), 8) == 0.0

    def test_weekday_surplus_offsets_deficit(self):
        # Aggregate deficit: 2 × 8 − (6 + 9) = 1.
        assert optimal_catchup(_weekdays(6, 9), 8) == 1.0

    @pytest.mark.parametrize("target", [8, 10, 12, 24])
    def test_never_exceeds_cap(self, target):
        entries = _weekdays(0, 1, 2, 3, 4)
        assert optimal_catchup(entries, target) == MAX_CATCHUP_HOURS

    def test_missing_duration_counts_as_zero(self):
        assert optimal_catchup([_make_entry(None)], 3) == 3.0
