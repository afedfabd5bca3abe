"""
Tracker configuration endpoints.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_sleep_service
from app.schemas.tracker_config import SleepTrackerConfig, SleepTrackerConfigUpdate
from app.services.sleep_service import SleepService

router = APIRouter()


@router.get("", summary="Get the tracker configuration.", response_model=SleepTrackerConfig)
def get_config(service: SleepService = Depends(get_sleep_service)):
    return service.get_config()


@router.patch("", summary="Update the tracker configuration.", response_model=SleepTrackerConfig)
def update_config(data: SleepTrackerConfigUpdate, service: SleepService = Depends(get_sleep_service)):
    """Only the fields present in the request body are changed."""
    return service.update_config(data)
