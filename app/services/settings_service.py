"""
Runtime settings and location registry.

Both are read from the store on every call; there is no cache and no staleness
bound. Missing or unparseable rows fall back to the process config defaults.
"""
import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional

from app.core.config import settings
from app.core.constants import (
    SETTING_FACTORY_LAT,
    SETTING_FACTORY_LNG,
    SETTING_GEOFENCE_RADIUS_M,
    SETTING_SUPERVISOR_PIN,
    SETTING_TIMEZONE,
)
from app.db.store import AttendanceStore
from app.models.location import Location
from app.utils.datetime_utils import resolve_zone

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeSettings:
    fallback_latitude: float
    fallback_longitude: float
    default_radius_meters: float
    timezone_id: str
    supervisor_secret: str

    @property
    def has_fallback_point(self) -> bool:
        return math.isfinite(self.fallback_latitude) and math.isfinite(self.fallback_longitude)


def _parse_float(raw: Optional[str]) -> float:
    if raw is None:
        return math.nan
    try:
        return float(str(raw).strip())
    except ValueError:
        return math.nan


def settings_from_map(values: Dict[str, Optional[str]]) -> RuntimeSettings:
    """Build RuntimeSettings from raw app_settings rows."""
    radius = _parse_float(values.get(SETTING_GEOFENCE_RADIUS_M))
    if not math.isfinite(radius) or radius <= 0:
        if values.get(SETTING_GEOFENCE_RADIUS_M) not in (None, ""):
            _log.warning("Ignoring invalid %s=%r", SETTING_GEOFENCE_RADIUS_M, values.get(SETTING_GEOFENCE_RADIUS_M))
        radius = settings.DEFAULT_GEOFENCE_RADIUS_M

    return RuntimeSettings(
        fallback_latitude=_parse_float(values.get(SETTING_FACTORY_LAT)),
        fallback_longitude=_parse_float(values.get(SETTING_FACTORY_LNG)),
        default_radius_meters=radius,
        timezone_id=resolve_zone((values.get(SETTING_TIMEZONE) or "").strip()).key,
        supervisor_secret=values.get(SETTING_SUPERVISOR_PIN) or settings.DEFAULT_SUPERVISOR_PIN,
    )


def get_runtime_settings(store: AttendanceStore) -> RuntimeSettings:
    """Fresh read of the app_settings table."""
    return settings_from_map(store.get_settings_map())


def get_locations(store: AttendanceStore) -> List[Location]:
    """Fresh read of the location registry, in registry order."""
    return store.get_locations()
