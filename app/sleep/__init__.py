"""Sleep analysis core — consistency metrics, quality score, insights, weekly report."""

from app.sleep.consistency import analyze_consistency, optimal_catchup
from app.sleep.insights import generate_insights, quality_score
from app.sleep.report import generate_weekly_report
from app.sleep.time_utils import ParseError, parse_duration
from app.sleep.tracker import SleepTracker

__all__ = [
    "ParseError",
    "SleepTracker",
    "analyze_consistency",
    "generate_insights",
    "generate_weekly_report",
    "optimal_catchup",
    "parse_duration",
    "quality_score",
]
