"""
Public settings and location registry schemas (never exposes the supervisor PIN)
"""
from typing import List, Optional, Union
from pydantic import BaseModel, Field


class PublicSettings(BaseModel):
    factory_lat: Optional[float] = Field(None, description="Fallback factory latitude; null when unset")
    factory_lng: Optional[float] = Field(None, description="Fallback factory longitude; null when unset")
    geofence_radius_m: float
    timezone: str


class SettingsResponse(BaseModel):
    success: bool = True
    settings: PublicSettings


class LocationOut(BaseModel):
    name: str
    latitude: float
    longitude: float
    radius_meters: float


class LocationListResponse(BaseModel):
    success: bool = True
    locations: List[LocationOut]


class SupervisorAuthRequest(BaseModel):
    pin: Optional[Union[str, int]] = None


class SupervisorAuthResponse(BaseModel):
    success: bool
