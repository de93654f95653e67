"""
Geofence resolution.
Uses the Haversine formula to find the nearest authorized location and
checks the point against its radius. Pure: no store access.
"""
import math
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from app.utils.geo import haversine_distance


class GeofenceLocation(Protocol):
    name: str
    latitude: float
    longitude: float
    radius_meters: Optional[float]


class FallbackPoint(Protocol):
    fallback_latitude: float
    fallback_longitude: float
    default_radius_meters: float


@dataclass(frozen=True)
class GeofenceResult:
    matched_name: str
    within_geofence: bool
    distance_meters: float


def effective_radius(location: GeofenceLocation, default_radius_m: float) -> float:
    """Per-location override if set, else the default radius."""
    if location.radius_meters is not None and location.radius_meters > 0:
        return float(location.radius_meters)
    return float(default_radius_m)


def resolve(
    lat: float,
    lng: float,
    locations: Sequence[GeofenceLocation],
    fallback: FallbackPoint,
) -> GeofenceResult:
    """
    Resolve a coordinate against the registry.

    Args:
        lat: Point latitude (finite; validated by the caller)
        lng: Point longitude (finite; validated by the caller)
        locations: Registry in order; ties go to the first listed
        fallback: Factory point and default radius used when the registry is empty

    Returns:
        GeofenceResult with the nearest location's name, whether the point is
        within its radius (inclusive), and the distance to it in meters.
    """
    if locations:
        nearest = None
        nearest_distance = math.inf
        for location in locations:
            distance = haversine_distance(lat, lng, location.latitude, location.longitude)
            # Strict "<" keeps the earlier location on ties
            if nearest is None or distance < nearest_distance:
                nearest = location
                nearest_distance = distance
        radius = effective_radius(nearest, fallback.default_radius_meters)
        return GeofenceResult(
            matched_name=nearest.name,
            within_geofence=nearest_distance <= radius,
            distance_meters=nearest_distance,
        )

    if not (math.isfinite(fallback.fallback_latitude) and math.isfinite(fallback.fallback_longitude)):
        return GeofenceResult(matched_name="", within_geofence=False, distance_meters=math.inf)

    distance = haversine_distance(lat, lng, fallback.fallback_latitude, fallback.fallback_longitude)
    return GeofenceResult(
        matched_name="",
        within_geofence=distance <= fallback.default_radius_meters,
        distance_meters=distance,
    )
