"""
Mental health insight schemas.

Recommendations are listed in the fixed order in which the insight
engine evaluates its checks, not sorted by severity.
"""

from typing import Literal

from pydantic import BaseModel, Field

RecommendationCategory = Literal["sleep-schedule", "catchup-sleep", "consistency", "overall"]
Level = Literal["low", "medium", "high"]
RiskLevel = Literal["low", "moderate", "high"]


class Recommendation(BaseModel):
    """A single rule-based recommendation."""

    category: RecommendationCategory
    description: str
    priority: Level
    impact: Level


class MentalHealthInsight(BaseModel):
    """Complete insight returned by the insights endpoint."""

    recommendations: list[Recommendation] = Field(default_factory=list)
    sleep_quality_score: float = Field(
        ..., ge=0.0, le=100.0,
        description="Sleep quality score (0-100)",
    )
    risk_level: RiskLevel
    improvement_areas: list[str] = Field(default_factory=list)
    success_factors: list[str] = Field(default_factory=list)
