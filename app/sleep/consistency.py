"""
Sleep consistency metrics.

Derives four numbers from a set of sleep entries:

- **weekday consistency** — share (0-100) of weekday nights whose
  duration lies within 1 hour of the weekday mean,
- **weekend recovery** — total weekend sleep (hours),
- **sleep debt** — cumulative shortfall against an 8-hour night, summed
  per entry so that a long night never offsets a short one,
- **sleep variability** — sample standard deviation (n-1) of weekday
  durations.

Entries are partitioned by their stored ``is_weekend`` flag; the date is
never re-classified here.  A missing duration counts as zero sleep.

Every call recomputes from the full sequence it receives.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from app.schemas.sleep_analysis import SleepConsistencyMetrics
from app.schemas.sleep_entry import SleepEntry

logger = logging.getLogger(__name__)

# ======================================================================
# Policy constants
# ======================================================================

IDEAL_SLEEP_HOURS = 8.0

# Weekday nights within this many hours of the mean count as consistent.
CONSISTENCY_TOLERANCE_HOURS = 1.0

# Catch-up is never recommended above this, whatever the deficit.
MAX_CATCHUP_HOURS = 4.0


# ======================================================================
# Helpers
# ======================================================================


def _durations(entries: Sequence[SleepEntry]) -> list[float]:
    return [entry.duration or 0.0 for entry in entries]


def _split_by_weekend(
    entries: Sequence[SleepEntry],
) -> tuple[list[SleepEntry], list[SleepEntry]]:
    """Return ``(weekday_entries, weekend_entries)``."""
    weekday = [e for e in entries if not e.is_weekend]
    weekend = [e for e in entries if e.is_weekend]
    return weekday, weekend


def _weekday_consistency(durations: list[float]) -> float:
    if not durations:
        return 0.0
    mean = sum(durations) / len(durations)
    consistent = sum(
        1 for d in durations if abs(d - mean) <= CONSISTENCY_TOLERANCE_HOURS
    )
    return 100.0 * consistent / len(durations)


def _sleep_debt(durations: list[float]) -> float:
    return sum(max(0.0, IDEAL_SLEEP_HOURS - d) for d in durations)


def _sample_stdev(durations: list[float]) -> float:
    """Bessel-corrected standard deviation; ``0`` below two samples."""
    n = len(durations)
    if n < 2:
        return 0.0
    mean = sum(durations) / n
    variance = sum((d - mean) ** 2 for d in durations) / (n - 1)
    return math.sqrt(variance)


# ======================================================================
# Public API
# ======================================================================


def analyze_consistency(entries: Sequence[SleepEntry]) -> SleepConsistencyMetrics:
    """Compute :class:`SleepConsistencyMetrics` for *entries*.

    An empty sequence yields an all-zero record.
    """
    if not entries:
        return SleepConsistencyMetrics.zero()

    weekday, weekend = _split_by_weekend(entries)
    weekday_durations = _durations(weekday)

    metrics = SleepConsistencyMetrics(
        weekday_consistency=_weekday_consistency(weekday_durations),
        weekend_recovery=sum(_durations(weekend)),
        sleep_debt=_sleep_debt(_durations(entries)),
        sleep_variability=_sample_stdev(weekday_durations),
    )
    logger.debug(
        "Consistency over %d entries (%d weekday, %d weekend): %s",
        len(entries), len(weekday), len(weekend), metrics,
    )
    return metrics


def optimal_catchup(entries: Sequence[SleepEntry], target_duration: float) -> float:
    """Recommended catch-up sleep (hours) to offset the weekday deficit.

    The deficit is measured against ``target_duration`` per weekday night
    and capped at :data:`MAX_CATCHUP_HOURS`.  Returns ``0`` with no
    weekday entries.
    """
    weekday, _ = _split_by_weekend(entries)
    if not weekday:
        return 0.0

    total_weekday_sleep = sum(_durations(weekday))
    deficit = max(0.0, len(weekday) * target_duration - total_weekday_sleep)
    return min(deficit, MAX_CATCHUP_HOURS)
