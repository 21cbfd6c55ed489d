from fastapi import APIRouter

from insights_engine.api.endpoints import activities, filters, health, insights, summary, teachers

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
api_router.include_router(activities.router, tags=["activities"])
api_router.include_router(teachers.router, tags=["teachers"])
api_router.include_router(summary.router, tags=["summary"])
api_router.include_router(insights.router, tags=["insights"])
api_router.include_router(filters.router, tags=["filters"])
