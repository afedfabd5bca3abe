"""
Analytics endpoints — consistency analysis, insights, and weekly report.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_sleep_service
from app.schemas.insight import MentalHealthInsight
from app.schemas.report import WeeklyReport
from app.schemas.sleep_analysis import SleepAnalysis
from app.services.sleep_service import SleepService

router = APIRouter()


@router.get(
    "/analysis",
    summary="Get consistency metrics, catch-up hours and quality score.",
    response_model=SleepAnalysis,
)
def get_analysis(service: SleepService = Depends(get_sleep_service)):
    return service.get_analysis()


@router.get(
    "/insights",
    summary="Get recommendations and risk level.",
    response_model=MentalHealthInsight,
)
def get_insights(service: SleepService = Depends(get_sleep_service)):
    return service.get_insights()


@router.get(
    "/weekly-report",
    summary="Get the weekly sleep report.",
    response_model=WeeklyReport,
)
def get_weekly_report(
    week_of: Optional[datetime.date] = Query(
        None, description="Any date inside the week (defaults to today)"
    ),
    service: SleepService = Depends(get_sleep_service),
):
    return service.get_weekly_report(week_of)
