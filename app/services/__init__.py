"""Business logic services."""

from app.services.sleep_service import SleepService

__all__ = [
    "SleepService",
]
