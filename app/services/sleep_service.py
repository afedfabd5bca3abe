"""
Sleep service.

Thin API-facing layer over :class:`SleepTracker`: maps domain errors
onto HTTP status codes.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status

from app.schemas.insight import MentalHealthInsight
from app.schemas.report import WeeklyReport
from app.schemas.sleep_analysis import SleepAnalysis
from app.schemas.sleep_entry import SleepEntry, SleepEntryCreate
from app.schemas.tracker_config import SleepTrackerConfig, SleepTrackerConfigUpdate
from app.sleep.time_utils import ParseError
from app.sleep.tracker import SleepTracker

logger = logging.getLogger(__name__)


class SleepService:
    """Service for sleep tracking business logic."""

    def __init__(self, tracker: SleepTracker):
        self.tracker = tracker

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    def log_sleep(self, data: SleepEntryCreate) -> SleepEntry:
        try:
            return self.tracker.log_sleep(data)
        except ParseError as e:
            logger.warning("Rejected sleep entry for %s: %s", data.date, e)
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e), )

    def get_entries(
        self, start: Optional[datetime.date] = None, end: Optional[datetime.date] = None,
    ) -> list[SleepEntry]:
        if start and end and start > end:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Range start {start} is after range end {end}",
            )
        return self.tracker.get_sleep_entries(start, end)

    # ------------------------------------------------------------------
    # Analytics
    # ------------------------------------------------------------------

    def get_analysis(self) -> SleepAnalysis:
        return self.tracker.get_sleep_analysis()

    def get_insights(self) -> MentalHealthInsight:
        return self.tracker.get_health_insights()

    def get_weekly_report(self, week_of: Optional[datetime.date] = None) -> WeeklyReport:
        return self.tracker.generate_weekly_report(week_of)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def get_config(self) -> SleepTrackerConfig:
        return self.tracker.config

    def update_config(self, data: SleepTrackerConfigUpdate) -> SleepTrackerConfig:
        return self.tracker.update_config(data)
