"""API routes package."""

from fastapi import APIRouter

from app.routers.api import assist, dashboard, reference, requests

# Create main API router with /api prefix
ROUTER = APIRouter(prefix="/api")

# Include all sub-routers
ROUTER.include_router(requests.ROUTER)
ROUTER.include_router(dashboard.ROUTER)
ROUTER.include_router(assist.ROUTER)
ROUTER.include_router(reference.ROUTER)

__all__ = [
    "assist",
    "dashboard",
    "reference",
    "requests",
    "ROUTER",
]
