"""
Public settings and location registry endpoints
"""
from fastapi import APIRouter, Depends
from app.core.deps import get_store
from app.db.store import AttendanceStore
from app.schemas.settings import (
    LocationListResponse,
    LocationOut,
    PublicSettings,
    SettingsResponse,
)
from app.services.geofence_service import effective_radius
from app.services.settings_service import get_locations, get_runtime_settings

router = APIRouter()


@router.get("/settings", response_model=SettingsResponse)
def read_settings(store: AttendanceStore = Depends(get_store)):
    """Factory fallback point, radius and timezone. The supervisor PIN is never returned."""
    runtime = get_runtime_settings(store)
    return SettingsResponse(settings=PublicSettings(
        factory_lat=runtime.fallback_latitude if runtime.has_fallback_point else None,
        factory_lng=runtime.fallback_longitude if runtime.has_fallback_point else None,
        geofence_radius_m=runtime.default_radius_meters,
        timezone=runtime.timezone_id,
    ))


@router.get("/locations", response_model=LocationListResponse)
def read_locations(store: AttendanceStore = Depends(get_store)):
    """Authorized locations in registry order, with the radius actually applied."""
    runtime = get_runtime_settings(store)
    return LocationListResponse(locations=[
        LocationOut(
            name=loc.name,
            latitude=loc.latitude,
            longitude=loc.longitude,
            radius_meters=effective_radius(loc, runtime.default_radius_meters),
        )
        for loc in get_locations(store)
    ])
