"""
Pytest configuration and fixtures
"""
import os

# Keep the app's own engine off the filesystem during tests
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("APP_ENV", "local")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.main import app
from app.db.base import Base
from app.db.store import AttendanceStore
from app.core.deps import get_db
from app.core.constants import (
    SETTING_FACTORY_LAT,
    SETTING_FACTORY_LNG,
    SETTING_GEOFENCE_RADIUS_M,
    SETTING_SUPERVISOR_PIN,
    SETTING_TIMEZONE,
)

# Import all models to ensure they're registered with Base.metadata
from app.models import AppSetting, Location, RosterMember, SubjectKind  # noqa


# Use in-memory SQLite for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

SUPERVISOR_PIN = "2468"


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def store(db):
    """AttendanceStore over the test session"""
    return AttendanceStore(db)


@pytest.fixture(scope="function")
def client(db):
    """Test client fixture with database override"""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def factory_settings(db):
    """Settings rows: Asia/Kolkata, 80 m default radius, no fallback point"""
    def _make(**overrides):
        values = {
            SETTING_GEOFENCE_RADIUS_M: "80",
            SETTING_TIMEZONE: "Asia/Kolkata",
            SETTING_SUPERVISOR_PIN: SUPERVISOR_PIN,
        }
        values.update(overrides)
        for key, value in values.items():
            db.add(AppSetting(key=key, value=value))
        db.commit()
        return values
    return _make


@pytest.fixture
def gate_a(db, factory_settings):
    """Registry with a single location, Gate A at (19.0, 72.9), radius 80 m"""
    factory_settings()
    location = Location(name="Gate A", latitude=19.0, longitude=72.9, radius_meters=80, sort_order=0)
    db.add(location)
    db.commit()
    db.refresh(location)
    return location


@pytest.fixture
def add_member(db):
    """Add a roster member: add_member("W1", "Ravi", kind=SubjectKind.WORKER, active=True)"""
    def _add(subject_id, name, kind=SubjectKind.WORKER, active=True, credential=None):
        member = RosterMember(
            subject_id=subject_id,
            display_name=name,
            kind=kind.value,
            active=active,
            credential=credential,
        )
        db.add(member)
        db.commit()
        db.refresh(member)
        return member
    return _add


@pytest.fixture
def supervisor_headers():
    """Header carrying the PIN seeded by factory_settings"""
    return {"X-Supervisor-Pin": SUPERVISOR_PIN}
