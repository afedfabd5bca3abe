"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import analytics, config, sleep

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    sleep.router, prefix="/sleep", tags=["Sleep entries"]
)
api_router.include_router(
    analytics.router, prefix="/analytics", tags=["Analytics"]
)
api_router.include_router(
    config.router, prefix="/config", tags=["Tracker configuration"]
)
