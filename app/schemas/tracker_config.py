"""
Sleep tracker configuration schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field


class SleepTrackerConfig(BaseModel):
    """Per-tracker configuration."""

    max_weekend_catchup_hours: float = Field(
        3.0, gt=0.0, le=24.0,
        description="Upper bound on recommended catch-up sleep (hours)",
    )
    min_sleep_duration: float = Field(
        6.0, gt=0.0, le=24.0,
        description="Sessions shorter than this are flagged as short sleep (hours)",
    )
    target_sleep_duration: float = Field(
        8.0, gt=0.0, le=24.0,
        description="Nightly sleep target used for catch-up computation (hours)",
    )


class SleepTrackerConfigUpdate(BaseModel):
    """Schema for updating tracker configuration (all fields optional)."""

    max_weekend_catchup_hours: Optional[float] = Field(None, gt=0.0, le=24.0)
    min_sleep_duration: Optional[float] = Field(None, gt=0.0, le=24.0)
    target_sleep_duration: Optional[float] = Field(None, gt=0.0, le=24.0)
