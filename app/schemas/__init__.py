"""Pydantic schemas for request/response validation."""

from app.schemas.sleep_entry import SleepEntry, SleepEntryCreate
from app.schemas.sleep_analysis import SleepAnalysis, SleepConsistencyMetrics
from app.schemas.insight import MentalHealthInsight, Recommendation
from app.schemas.report import (
    ReportPeriod,
    WeeklyKeyMetrics,
    WeeklyReport,
    WeeklyVisualizations,
)
from app.schemas.tracker_config import SleepTrackerConfig, SleepTrackerConfigUpdate

__all__ = [
    "SleepEntry",
    "SleepEntryCreate",
    "SleepAnalysis",
    "SleepConsistencyMetrics",
    "MentalHealthInsight",
    "Recommendation",
    "ReportPeriod",
    "WeeklyKeyMetrics",
    "WeeklyReport",
    "WeeklyVisualizations",
    "SleepTrackerConfig",
    "SleepTrackerConfigUpdate",
]
