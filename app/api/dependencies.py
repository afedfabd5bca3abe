"""
Shared API dependencies.

The tracker is a process-wide in-memory instance; tests replace it via
``app.dependency_overrides[get_tracker]``.
"""

from fastapi import Depends

from app.core.config import settings
from app.schemas.tracker_config import SleepTrackerConfig
from app.services.sleep_service import SleepService
from app.sleep.tracker import SleepTracker

_tracker = SleepTracker(SleepTrackerConfig(
    max_weekend_catchup_hours=settings.MAX_WEEKEND_CATCHUP_HOURS,
    min_sleep_duration=settings.MIN_SLEEP_DURATION,
    target_sleep_duration=settings.TARGET_SLEEP_DURATION,
))


def get_tracker() -> SleepTracker:
    return _tracker


def get_sleep_service(tracker: SleepTracker = Depends(get_tracker)) -> SleepService:
    return SleepService(tracker)
