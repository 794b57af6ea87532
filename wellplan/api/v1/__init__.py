"""API v1 router aggregation."""

from fastapi import APIRouter

from wellplan.api.v1.endpoints import health, plans, tools

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(plans.router, prefix="/plans", tags=["plans"])
api_router.include_router(tools.router, prefix="/tools", tags=["tools"])
