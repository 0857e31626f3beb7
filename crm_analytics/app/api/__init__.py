"""API router collection for the CRM analytics service."""

from fastapi import APIRouter

from crm_analytics.app.api import analytics, health

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(analytics.router)

__all__ = ["api_router"]
