"""
Database initialization script
Helper function to seed the settings keys and a first location for a fresh install
"""
import logging
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.constants import (
    SETTING_FACTORY_LAT,
    SETTING_FACTORY_LNG,
    SETTING_GEOFENCE_RADIUS_M,
    SETTING_SUPERVISOR_PIN,
    SETTING_TIMEZONE,
)
from app.models.location import Location
from app.models.setting import AppSetting

_log = logging.getLogger(__name__)


def init_db(db: Session, factory_lat: float = None, factory_lng: float = None) -> None:
    """
    Create any missing app_settings rows, and a "Main Gate" location when a
    factory point is given and the registry is empty.

    This is a helper function and should NOT be auto-run on startup.
    Call manually when needed for initial setup.
    """
    defaults = {
        SETTING_FACTORY_LAT: None if factory_lat is None else str(factory_lat),
        SETTING_FACTORY_LNG: None if factory_lng is None else str(factory_lng),
        SETTING_GEOFENCE_RADIUS_M: str(settings.DEFAULT_GEOFENCE_RADIUS_M),
        SETTING_TIMEZONE: settings.DEFAULT_TIMEZONE,
        SETTING_SUPERVISOR_PIN: settings.DEFAULT_SUPERVISOR_PIN,
    }
    existing = {row.key for row in db.query(AppSetting).all()}
    for key, value in defaults.items():
        if key not in existing:
            db.add(AppSetting(key=key, value=value))
            _log.info("Created setting %s", key)

    if factory_lat is not None and factory_lng is not None and db.query(Location).count() == 0:
        db.add(Location(name="Main Gate", latitude=factory_lat, longitude=factory_lng, sort_order=0))
        _log.info("Created location Main Gate at (%s, %s)", factory_lat, factory_lng)

    db.commit()
