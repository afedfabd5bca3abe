"""
Weekly sleep report.

The caller restricts *entries* to the week window; this module only
aggregates them.  The trend lines are fixed placeholder text and are not
derived from the data yet.
"""

from __future__ import annotations

import datetime
from typing import Sequence

from app.schemas.report import (
    ReportPeriod,
    WeeklyKeyMetrics,
    WeeklyReport,
    WeeklyVisualizations,
)
from app.schemas.sleep_entry import SleepEntry
from app.sleep.time_utils import end_of_week

_SUMMARY_TEMPLATE = (
    "Weekly Sleep Summary: You averaged {average:.1f} hours of sleep this week, "
    "with {catchup:.1f} hours of weekend recovery sleep."
)

# TODO: derive trend lines from week-over-week changes in the key metrics.
_TRENDS = (
    "Sleep duration shows moderate consistency",
    "Weekend recovery sleep is within recommended range",
    "Overall sleep pattern suggests room for improvement",
)

_SLEEP_PATTERN_CHART = "Chart: Sleep Duration Over Time"
_CONSISTENCY_CHART = "Chart: Sleep Schedule Consistency"


def generate_weekly_report(
    entries: Sequence[SleepEntry],
    week_start: datetime.date,
    consistency_score: float = 0.0,
) -> WeeklyReport:
    """Aggregate one week of entries into a :class:`WeeklyReport`.

    Args:
        entries: Entries already restricted to the week window.
        week_start: First day of the window.
        consistency_score: Quality score computed by the caller for the
            same entries; reported as-is.
    """
    total = sum(entry.duration or 0.0 for entry in entries)
    average = total / len(entries) if entries else 0.0
    catchup = sum(entry.duration or 0.0 for entry in entries if entry.is_weekend)

    return WeeklyReport(
        period=ReportPeriod(start_date=week_start, end_date=end_of_week(week_start)),
        summary=_SUMMARY_TEMPLATE.format(average=average, catchup=catchup),
        key_metrics=WeeklyKeyMetrics(
            average_sleep_duration=average,
            consistency_score=consistency_score,
            catchup_sleep_hours=catchup,
        ),
        trends=list(_TRENDS),
        visualizations=WeeklyVisualizations(
            sleep_pattern_chart=_SLEEP_PATTERN_CHART,
            consistency_chart=_CONSISTENCY_CHART,
        ),
    )
