"""
Sleep consistency schemas.

Metrics are derived and stateless: they are recomputed from the full
entry set on every analysis call and never cached.
"""

from pydantic import BaseModel, Field


class SleepConsistencyMetrics(BaseModel):
    """Consistency metrics derived from a set of sleep entries."""

    weekday_consistency: float = Field(
        ..., ge=0.0, le=100.0,
        description="Percentage of weekday entries within 1 hour of the weekday mean",
    )
    weekend_recovery: float = Field(
        ..., ge=0.0,
        description="Total weekend sleep (hours)",
    )
    sleep_debt: float = Field(
        ..., ge=0.0,
        description="Cumulative shortfall against an 8-hour night (hours)",
    )
    sleep_variability: float = Field(
        ..., ge=0.0,
        description="Sample standard deviation of weekday durations (hours)",
    )

    @classmethod
    def zero(cls) -> "SleepConsistencyMetrics":
        return cls(
            weekday_consistency=0.0,
            weekend_recovery=0.0,
            sleep_debt=0.0,
            sleep_variability=0.0,
        )


class SleepAnalysis(BaseModel):
    """Bundle handed from the metrics engine to the insight engine."""

    metrics: SleepConsistencyMetrics
    optimal_catchup_hours: float = Field(
        ..., ge=0.0,
        description="Recommended catch-up sleep (hours)",
    )
    consistency_score: float = Field(
        0.0, ge=0.0, le=100.0,
        description="Sleep quality score (0-100) computed by the caller",
    )
