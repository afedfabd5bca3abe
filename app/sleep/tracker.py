"""
Sleep tracker — owns the entry list and configuration.

The tracker is the only stateful component.  It derives each entry's
duration and weekend flag once at creation, then hands read-only
snapshots to the stateless engines:

    entries ──► consistency ──► insights
        └────────────────────► report
"""

from __future__ import annotations

import datetime
import logging
import uuid
from typing import Optional

from app.schemas.insight import MentalHealthInsight
from app.schemas.report import WeeklyReport
from app.schemas.sleep_analysis import SleepAnalysis
from app.schemas.sleep_entry import SleepEntry, SleepEntryCreate
from app.schemas.tracker_config import SleepTrackerConfig, SleepTrackerConfigUpdate
from app.sleep.consistency import analyze_consistency, optimal_catchup
from app.sleep.insights import generate_insights, quality_score
from app.sleep.report import generate_weekly_report
from app.sleep.time_utils import end_of_week, is_weekend, parse_duration, start_of_week

logger = logging.getLogger(__name__)


class SleepTracker:
    """In-memory sleep tracker."""

    def __init__(self, config: Optional[SleepTrackerConfig] = None):
        self.config = config or SleepTrackerConfig()
        self._entries: list[SleepEntry] = []

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    def log_sleep(self, data: SleepEntryCreate) -> SleepEntry:
        """Record a sleep session and return the stored entry.

        Raises:
            ParseError: if either time string is malformed.
        """
        duration = parse_duration(data.start_time, data.end_time)
        weekend = data.is_weekend if data.is_weekend is not None else is_weekend(data.date)

        entry = SleepEntry(
            id=uuid.uuid4().hex,
            date=data.date,
            start_time=data.start_time,
            end_time=data.end_time,
            is_weekend=weekend,
            duration=duration,
        )
        self._entries.append(entry)

        logger.info("Logged sleep %s on %s: %.2f h", entry.id, entry.date, duration)
        if duration < self.config.min_sleep_duration:
            logger.warning(
                "Short sleep on %s: %.2f h (minimum %.1f h)",
                entry.date, duration, self.config.min_sleep_duration,
            )
        return entry

    def get_sleep_entries(
        self,
        start: Optional[datetime.date] = None,
        end: Optional[datetime.date] = None,
    ) -> list[SleepEntry]:
        """Entries within ``[start, end]`` (both optional), sorted by date."""
        entries = list(self._entries)
        if start is not None:
            entries = [e for e in entries if e.date >= start]
        if end is not None:
            entries = [e for e in entries if e.date <= end]
        return sorted(entries, key=lambda e: e.date)

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------

    def get_sleep_analysis(self) -> SleepAnalysis:
        """Metrics, catch-up hours and quality score over all entries."""
        entries = self.get_sleep_entries()
        catchup = optimal_catchup(entries, self.config.target_sleep_duration)
        return SleepAnalysis(
            metrics=analyze_consistency(entries),
            optimal_catchup_hours=min(catchup, self.config.max_weekend_catchup_hours),
            consistency_score=quality_score(entries),
        )

    def get_health_insights(self) -> MentalHealthInsight:
        entries = self.get_sleep_entries()
        if not entries:
            return MentalHealthInsight(sleep_quality_score=0, risk_level="low")
        return generate_insights(self.get_sleep_analysis(), entries)

    def generate_weekly_report(
        self, week_of: Optional[datetime.date] = None,
    ) -> WeeklyReport:
        """Report for the Monday-Sunday week containing *week_of* (default today)."""
        week_start = start_of_week(week_of or datetime.date.today())
        entries = self.get_sleep_entries(week_start, end_of_week(week_start))
        return generate_weekly_report(entries, week_start, quality_score(entries))

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def update_config(self, update: SleepTrackerConfigUpdate) -> SleepTrackerConfig:
        """Merge the fields set on *update* into the current config."""
        merged = {**self.config.model_dump(), **update.model_dump(exclude_none=True)}
        self.config = SleepTrackerConfig(**merged)
        logger.info("Tracker config updated: %s", self.config)
        return self.config
