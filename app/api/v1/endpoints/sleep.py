"""
Sleep entry endpoints.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_sleep_service
from app.schemas.sleep_entry import SleepEntry, SleepEntryCreate
from app.services.sleep_service import SleepService

router = APIRouter()


@router.post("/entries", summary="Log a sleep session.", response_model=SleepEntry,
             status_code=status.HTTP_201_CREATED, )
def log_sleep(data: SleepEntryCreate, service: SleepService = Depends(get_sleep_service), ):
    """Duration is derived from the start/end times; ``is_weekend`` from the date when omitted."""
    return service.log_sleep(data)


@router.get("/entries", summary="List sleep entries with an optional date range.",
            response_model=list[SleepEntry], )
def list_entries(start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                 end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                 service: SleepService = Depends(get_sleep_service), ):
    return service.get_entries(start, end)
