"""
Sleep quality score and mental health insights.

Scoring
-------
The quality score is a fixed linear policy on top of the consistency
metrics:

    score = weekday_consistency
            - min(sleep_variability × 5, 30)
            - min(sleep_debt × 5, 40)

clamped to [0, 100] after each subtraction and rounded to the nearest
integer.  The two penalties are independent and can both apply.

Insights
--------
Four checks run in a fixed order, each appending either a recommendation
(plus, for most checks, an improvement area) or a success factor:

1. schedule consistency (score < 60),
2. sleep debt (> 2 h medium, (0, 2] h low, 0 success),
3. weekend recovery (< 2 h),
4. variability (> 1.5 h).

The risk level is evaluated last and is independent of the list:
``high`` if score < 50 or debt > 4 h, ``moderate`` if score < 70 or
debt > 2 h, ``low`` otherwise.

Thresholds are heuristic constants, not a validated clinical model.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from app.schemas.insight import MentalHealthInsight, Recommendation, RiskLevel
from app.schemas.sleep_analysis import SleepAnalysis
from app.schemas.sleep_entry import SleepEntry
from app.sleep.consistency import analyze_consistency

logger = logging.getLogger(__name__)

# ======================================================================
# Scoring policy
# ======================================================================

_VARIABILITY_PENALTY_PER_HOUR = 5.0
_VARIABILITY_PENALTY_CAP = 30.0
_DEBT_PENALTY_PER_HOUR = 5.0
_DEBT_PENALTY_CAP = 40.0

# ======================================================================
# Insight thresholds
# ======================================================================

_CONSISTENCY_SCORE_MIN = 60.0
_DEBT_MEDIUM_HOURS = 2.0
_WEEKEND_RECOVERY_MIN_HOURS = 2.0
_VARIABILITY_MAX_HOURS = 1.5

# (label, score below, debt above); first match wins.
_RISK_RULES: list[tuple[RiskLevel, float, float]] = [
    ("high", 50.0, 4.0),
    ("moderate", 70.0, 2.0),
]


def _clamp_score(value: float) -> float:
    return max(0.0, min(100.0, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# ======================================================================
# Quality score
# ======================================================================


def quality_score(entries: Sequence[SleepEntry]) -> int:
    """Sleep quality score (0-100) for *entries*; ``0`` when empty."""
    if not entries:
        return 0

    metrics = analyze_consistency(entries)

    score = metrics.weekday_consistency
    score = _clamp_score(score - min(
        metrics.sleep_variability * _VARIABILITY_PENALTY_PER_HOUR,
        _VARIABILITY_PENALTY_CAP,
    ))
    score = _clamp_score(score - min(
        metrics.sleep_debt * _DEBT_PENALTY_PER_HOUR,
        _DEBT_PENALTY_CAP,
    ))
    return _round_half_up(score)


# ======================================================================
# Risk level
# ======================================================================


def _risk_level(consistency_score: float, sleep_debt: float) -> RiskLevel:
    for label, score_below, debt_above in _RISK_RULES:
        if consistency_score < score_below or sleep_debt > debt_above:
            return label
    return "low"


# ======================================================================
# Insights
# ======================================================================


def generate_insights(
    analysis: SleepAnalysis,
    entries: Sequence[SleepEntry],
) -> MentalHealthInsight:
    """Build a :class:`MentalHealthInsight` from a precomputed analysis.

    ``analysis.consistency_score`` must already hold the quality score;
    it is reported as ``sleep_quality_score`` without being recomputed.
    *entries* is the sequence the analysis was derived from.

    Returns:
        :class:`MentalHealthInsight` with recommendations in evaluation
        order, the risk level, and improvement/success summaries.
    """
    metrics = analysis.metrics
    score = analysis.consistency_score

    recommendations: list[Recommendation] = []
    improvement_areas: list[str] = []
    success_factors: list[str] = []

    # 1. Schedule consistency.
    if score < _CONSISTENCY_SCORE_MIN:
        recommendations.append(Recommendation(
            category="sleep-schedule",
            description="Try to maintain consistent sleep and wake times throughout the week.",
            priority="high",
            impact="high",
        ))
        improvement_areas.append("Inconsistent sleep schedule")
    else:
        success_factors.append("Good sleep schedule consistency")

    # 2. Sleep debt.
    if metrics.sleep_debt > _DEBT_MEDIUM_HOURS:
        recommendations.append(Recommendation(
            category="catchup-sleep",
            description="Address accumulated sleep debt by going to bed earlier on weeknights.",
            priority="medium",
            impact="medium",
        ))
        improvement_areas.append("Accumulated sleep debt")
    elif metrics.sleep_debt > 0:
        recommendations.append(Recommendation(
            category="catchup-sleep",
            description="A small sleep debt has built up; a slightly earlier bedtime will clear it.",
            priority="low",
            impact="low",
        ))
    else:
        success_factors.append("No sleep debt")

    # 3. Weekend recovery.
    if metrics.weekend_recovery < _WEEKEND_RECOVERY_MIN_HOURS:
        recommendations.append(Recommendation(
            category="catchup-sleep",
            description="Consider getting more recovery sleep on weekends to offset weekday sleep debt.",
            priority="medium",
            impact="medium",
        ))
    else:
        success_factors.append("Adequate weekend recovery sleep")

    # 4. Variability.
    if metrics.sleep_variability > _VARIABILITY_MAX_HOURS:
        recommendations.append(Recommendation(
            category="consistency",
            description="Your weekday sleep duration varies a lot; aim for a similar amount each night.",
            priority="medium",
            impact="medium",
        ))
        improvement_areas.append("High sleep duration variability")
    else:
        success_factors.append("Stable weekday sleep duration")

    risk_level = _risk_level(score, metrics.sleep_debt)
    logger.debug(
        "Insights for %d entries: %d recommendations, risk=%s",
        len(entries), len(recommendations), risk_level,
    )

    return MentalHealthInsight(
        recommendations=recommendations,
        sleep_quality_score=score,
        risk_level=risk_level,
        improvement_areas=improvement_areas,
        success_factors=success_factors,
    )
