"""
Sleep entry API schemas.

A sleep entry is one recorded sleep session.  ``duration`` is derived once
at creation from the start/end wall-clock times and ``is_weekend`` is
stored on the entry so that storage-time and analysis-time weekend
classification can never diverge.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class SleepEntryCreate(BaseModel):
    """Schema for logging a sleep session."""

    date: datetime.date = Field(
        ...,
        description="Calendar date the sleep session is attributed to (YYYY-MM-DD)",
    )
    start_time: str = Field(
        ...,
        description="Time of falling asleep (HH:MM or HH:MM AM/PM)",
    )
    end_time: str = Field(
        ...,
        description="Time of waking up (HH:MM or HH:MM AM/PM)",
    )
    is_weekend: Optional[bool] = Field(
        None,
        description="Weekend classification (derived from date when omitted)",
    )


class SleepEntry(BaseModel):
    """A stored sleep session."""

    id: str
    date: datetime.date
    start_time: str
    end_time: str
    is_weekend: bool
    duration: Optional[float] = Field(
        None, ge=0.0, le=24.0,
        description="Hours slept (overnight sessions wrap past midnight)",
    )
