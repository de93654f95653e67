"""
Health check endpoint
"""
from fastapi import APIRouter
from app.core.constants import SERVICE_NAME

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint

    Returns service status. Does not touch the database.
    """
    return {
        "status": "ok",
        "service": SERVICE_NAME,
    }
