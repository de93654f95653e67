"""
Tests for the punch endpoint
"""
import math

from fastapi import status
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from app.core.deps import get_store
from app.core.errors import InfrastructureError
from app.db.store import AttendanceStore
from app.main import app
from app.models.punch_log import PunchLog, UnauthorizedAttempt

METERS_PER_DEGREE_LAT = 6371000 * math.pi / 180


def test_punch_inside_geofence(client, db: Session, gate_a):
    """Legacy body keys are accepted; inside punch is a plain success"""
    response = client.post(
        "/api/v1/punch",
        json={"workerId": "W1", "name": "Ravi", "action": "LOGIN", "lat": 19.0, "lng": 72.9, "accuracy": 8},
        headers={"User-Agent": "factory-tablet/1.0"},
    )
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["success"] is True
    assert data["authorized"] is True
    assert data["warning"] is False
    assert data["message"] == "Marked LOGIN for Ravi"
    assert data["matched_location_name"] == "Gate A"
    assert data["distance_meters"] == 0

    event = db.query(PunchLog).one()
    assert event.id == data["event_id"]
    assert event.client_agent == "factory-tablet/1.0"


def test_punch_outside_geofence_returns_warning(client, db: Session, gate_a):
    """Outside punch: accepted and logged, but success=false with a warning"""
    response = client.post(
        "/api/v1/punch",
        json={
            "subject_id": "W1",
            "subject_name": "Ravi",
            "action": "LOGOUT",
            "lat": 19.0 + 500 / METERS_PER_DEGREE_LAT,
            "lng": 72.9,
        },
    )
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["success"] is False
    assert data["authorized"] is False
    assert data["warning"] is True
    assert "500 m from Gate A" in data["message"]
    assert abs(data["distance_meters"] - 500) < 1

    assert db.query(PunchLog).count() == 1
    assert db.query(UnauthorizedAttempt).count() == 1


def test_punch_without_geofence_has_null_distance(client, db: Session, factory_settings):
    factory_settings()
    response = client.post(
        "/api/v1/punch",
        json={"workerId": "W1", "name": "Ravi", "action": "LOGIN", "lat": 19.0, "lng": 72.9},
    )
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["warning"] is True
    assert data["distance_meters"] is None


def test_punch_missing_fields_is_400(client, db: Session, gate_a):
    """Field-level errors, nothing written"""
    response = client.post(
        "/api/v1/punch",
        json={"workerId": "W1", "action": "LOGIN", "lat": 19.0},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    data = response.json()
    assert data["error"] is True
    fields = {e["field"] for e in data["errors"]}
    assert fields == {"subject_name", "lng"}
    assert db.query(PunchLog).count() == 0


def test_punch_oversized_integer_coordinate_is_400(client, db: Session, gate_a):
    """A JSON integer too large for a float is a bad coordinate, not a server error"""
    response = client.post(
        "/api/v1/punch",
        json={"workerId": "W1", "name": "Ravi", "action": "LOGIN", "lat": 10 ** 400, "lng": 72.9},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"] == [{"field": "lat", "message": "must be a finite number"}]
    assert db.query(PunchLog).count() == 0


def test_punch_invalid_action_is_400(client, db: Session, gate_a):
    response = client.post(
        "/api/v1/punch",
        json={"workerId": "W1", "name": "Ravi", "action": "BREAK", "lat": 19.0, "lng": 72.9},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"] == [{"field": "action", "message": "must be LOGIN or LOGOUT"}]
    assert db.query(PunchLog).count() == 0


def test_punch_malformed_json_is_422(client, db: Session, gate_a):
    response = client.post(
        "/api/v1/punch",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert db.query(PunchLog).count() == 0


class _PrimaryWriteFails(AttendanceStore):
    def append_event(self, event):
        raise InfrastructureError("Could not write to punch_logs")


class _SecondaryWriteFails(AttendanceStore):
    def append_unauthorized(self, attempt):
        raise InfrastructureError("Could not write to unauthorized_attempts")


def test_punch_store_failure_is_503(client, db: Session, gate_a):
    app.dependency_overrides[get_store] = lambda: _PrimaryWriteFails(db)
    response = client.post(
        "/api/v1/punch",
        json={"workerId": "W1", "name": "Ravi", "action": "LOGIN", "lat": 19.0, "lng": 72.9},
    )
    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert response.json()["detail"] == "Could not write to punch_logs"
    assert db.query(PunchLog).count() == 0


def test_punch_secondary_failure_is_invisible_to_caller(client, db: Session, gate_a):
    app.dependency_overrides[get_store] = lambda: _SecondaryWriteFails(db)
    response = client.post(
        "/api/v1/punch",
        json={"workerId": "W1", "name": "Ravi", "action": "LOGIN", "lat": 19.05, "lng": 72.9},
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["warning"] is True
    assert db.query(PunchLog).count() == 1
    assert db.query(UnauthorizedAttempt).count() == 0


def test_punch_database_error_on_unauthorized_write_is_still_201(client, db: Session, gate_a, monkeypatch):
    real_commit = db.commit
    commits = []

    def commit_then_fail():
        commits.append(1)
        if len(commits) == 2:
            raise OperationalError("INSERT INTO unauthorized_attempts", {}, Exception("disk I/O error"))
        real_commit()

    monkeypatch.setattr(db, "commit", commit_then_fail)
    response = client.post(
        "/api/v1/punch",
        json={"workerId": "W1", "name": "Ravi", "action": "LOGIN", "lat": 19.05, "lng": 72.9},
    )
    monkeypatch.undo()

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["warning"] is True
    event = db.query(PunchLog).one()
    assert data["event_id"] == event.id
    assert db.query(UnauthorizedAttempt).count() == 0
