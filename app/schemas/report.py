"""
Weekly report schemas.
"""

import datetime

from pydantic import BaseModel, Field


class ReportPeriod(BaseModel):
    """Monday-to-Sunday window covered by a report."""

    start_date: datetime.date
    end_date: datetime.date


class WeeklyKeyMetrics(BaseModel):
    average_sleep_duration: float = Field(..., ge=0.0)
    consistency_score: float = Field(..., ge=0.0, le=100.0)
    catchup_sleep_hours: float = Field(..., ge=0.0)


class WeeklyVisualizations(BaseModel):
    """Chart placeholders.  These are descriptive strings, not rendered charts."""

    sleep_pattern_chart: str
    consistency_chart: str


class WeeklyReport(BaseModel):
    """Weekly sleep report."""

    period: ReportPeriod
    summary: str
    key_metrics: WeeklyKeyMetrics
    trends: list[str]
    visualizations: WeeklyVisualizations
