"""API v1 router configuration."""

from fastapi import APIRouter

from energiepilot.api.v1.endpoints import analyse, health

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    health.router,
    tags=["health"],
)

api_router.include_router(
    analyse.router,
    tags=["analyse"],
)
