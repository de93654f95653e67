"""
Main API router
"""
from fastapi import APIRouter

from app.api.v1 import (
    health,
    version,
    punch,
    status,
    supervisor,
    directory,
    settings,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(version.router, tags=["version"])
api_router.include_router(punch.router, tags=["attendance"])
api_router.include_router(status.router, tags=["attendance"])
api_router.include_router(supervisor.router, prefix="/auth", tags=["authentication"])
api_router.include_router(directory.router, tags=["directory"])
api_router.include_router(settings.router, tags=["settings"])
