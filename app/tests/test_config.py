"""
Tests for configuration validation and runtime settings parsing
"""
import math

import pytest
from pydantic import ValidationError

from app.core.config import Settings, settings
from app.core.constants import (
    SETTING_FACTORY_LAT,
    SETTING_FACTORY_LNG,
    SETTING_GEOFENCE_RADIUS_M,
    SETTING_SUPERVISOR_PIN,
    SETTING_TIMEZONE,
)
from app.db.init_db import init_db
from app.models.location import Location
from app.models.setting import AppSetting
from app.services.settings_service import get_runtime_settings, settings_from_map
from app.utils.datetime_utils import resolve_zone


def test_prod_settings_rejects_wildcard_origins():
    settings = Settings(APP_ENV="prod", ALLOWED_ORIGINS="*", DEFAULT_SUPERVISOR_PIN="9876")
    with pytest.raises(ValueError, match="ALLOWED_ORIGINS"):
        settings.validate_production()


def test_prod_settings_rejects_default_pin():
    settings = Settings(APP_ENV="prod", ALLOWED_ORIGINS="https://example.com")
    with pytest.raises(ValueError, match="DEFAULT_SUPERVISOR_PIN"):
        settings.validate_production()


def test_local_settings_allow_defaults():
    settings = Settings(APP_ENV="local", ALLOWED_ORIGINS="*")
    settings.validate_production()
    assert settings.get_allowed_origins_list() == ["*"]


def test_get_allowed_origins_list():
    settings = Settings(ALLOWED_ORIGINS="https://example.com, https://app.example.com")
    assert settings.get_allowed_origins_list() == ["https://example.com", "https://app.example.com"]


def test_invalid_app_env_rejected():
    with pytest.raises(ValidationError):
        Settings(APP_ENV="dev")


def test_log_level_normalized():
    assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


def test_runtime_settings_defaults():
    """Empty app_settings: no fallback point, 80 m, Asia/Kolkata, default PIN"""
    runtime = settings_from_map({})
    assert math.isnan(runtime.fallback_latitude)
    assert runtime.has_fallback_point is False
    assert runtime.default_radius_meters == 80
    assert runtime.timezone_id == "Asia/Kolkata"
    assert runtime.supervisor_secret == "4321"


def test_runtime_settings_parsed():
    runtime = settings_from_map({
        SETTING_FACTORY_LAT: " 19.0760 ",
        SETTING_FACTORY_LNG: "72.8777",
        SETTING_GEOFENCE_RADIUS_M: "150",
        SETTING_TIMEZONE: "Europe/London",
        SETTING_SUPERVISOR_PIN: "9999",
    })
    assert runtime.fallback_latitude == 19.076
    assert runtime.fallback_longitude == 72.8777
    assert runtime.has_fallback_point is True
    assert runtime.default_radius_meters == 150
    assert runtime.timezone_id == "Europe/London"
    assert runtime.supervisor_secret == "9999"


@pytest.mark.parametrize("raw", ["abc", "-5", "0", "nan", "inf"])
def test_invalid_radius_falls_back(raw):
    assert settings_from_map({SETTING_GEOFENCE_RADIUS_M: raw}).default_radius_meters == 80


def test_unparseable_factory_point_is_unset():
    runtime = settings_from_map({SETTING_FACTORY_LAT: "north", SETTING_FACTORY_LNG: "72.9"})
    assert runtime.has_fallback_point is False


def test_unknown_timezone_falls_back():
    assert resolve_zone("Mars/Olympus").key == "Asia/Kolkata"
    assert resolve_zone("").key == "Asia/Kolkata"


def test_unknown_timezone_row_uses_configured_default(monkeypatch):
    monkeypatch.setattr(settings, "DEFAULT_TIMEZONE", "Europe/London")

    assert settings_from_map({SETTING_TIMEZONE: "Mars/Olympus"}).timezone_id == "Europe/London"
    assert settings_from_map({}).timezone_id == "Europe/London"
    assert resolve_zone("Mars/Olympus").key == "Europe/London"


def test_init_db_seeds_settings_and_location(db, store):
    init_db(db, factory_lat=19.0, factory_lng=72.9)
    runtime = get_runtime_settings(store)
    assert runtime.fallback_latitude == 19.0
    assert runtime.default_radius_meters == 80
    assert [loc.name for loc in store.get_locations()] == ["Main Gate"]


def test_init_db_keeps_existing_rows(db, store):
    db.add(AppSetting(key=SETTING_SUPERVISOR_PIN, value="1357"))
    db.add(Location(name="Gate A", latitude=19.0, longitude=72.9))
    db.commit()

    init_db(db, factory_lat=18.0, factory_lng=73.0)

    assert get_runtime_settings(store).supervisor_secret == "1357"
    assert [loc.name for loc in store.get_locations()] == ["Gate A"]
    assert db.query(AppSetting).count() == 5
