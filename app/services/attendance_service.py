"""
Attendance service - punch recording

Every valid punch is written to punch_logs exactly once, inside or outside the
geofence ("log everything, flag suspicious"). Punches outside every geofence
also get one best-effort row in unauthorized_attempts; a failure there is
logged and reported on the outcome, never raised.
"""
import logging
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from app.core.constants import REASON_OUTSIDE_FACTORY
from app.core.errors import InfrastructureError, ValidationError
from app.db.store import AttendanceStore
from app.models.punch_log import PunchAction, PunchLog, UnauthorizedAttempt
from app.models.roster import SubjectKind
from app.services import geofence_service
from app.services.settings_service import get_locations, get_runtime_settings
from app.utils.datetime_utils import format_punch_timestamp, now_utc, resolve_zone
from app.utils.geo import is_finite_coordinate

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SecondaryWriteWarning:
    """The unauthorized-attempt row could not be written after the punch itself was."""
    subject_id: str
    timestamp: str
    error: str


@dataclass(frozen=True)
class PunchOutcome:
    # Primary outcome
    event: PunchLog
    authorized: bool
    distance_meters: float
    matched_location_name: str
    # Side-channel outcome
    unauthorized_logged: bool = False
    secondary_warning: Optional[SecondaryWriteWarning] = None


@dataclass(frozen=True)
class PunchRequest:
    subject_id: str
    subject_name: str
    subject_kind: SubjectKind
    action: PunchAction
    lat: float
    lng: float
    accuracy: Optional[float]
    client_agent: str


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_punch(
    subject_id: Any,
    subject_name: Any,
    subject_kind: Any,
    action: Any,
    lat: Any,
    lng: Any,
    accuracy: Any = None,
    client_agent: Any = "",
) -> PunchRequest:
    """
    Check a raw punch request and normalize it.

    Raises:
        ValidationError: listing every offending field; nothing has been read or written
    """
    errors: List[Dict[str, str]] = []

    for field, value in (("subject_id", subject_id), ("subject_name", subject_name), ("action", action)):
        if _blank(value):
            errors.append({"field": field, "message": "is required"})
        elif not isinstance(value, str):
            errors.append({"field": field, "message": "must be a string"})

    parsed_action = None
    if isinstance(action, str) and action.strip():
        try:
            parsed_action = PunchAction(action)
        except ValueError:
            errors.append({"field": "action", "message": "must be LOGIN or LOGOUT"})

    parsed_kind = SubjectKind.WORKER
    if not _blank(subject_kind):
        try:
            parsed_kind = SubjectKind(subject_kind)
        except ValueError:
            errors.append({"field": "subject_kind", "message": "must be WORKER or EMPLOYEE"})

    for field, value in (("lat", lat), ("lng", lng)):
        if value is None:
            errors.append({"field": field, "message": "is required"})
        elif not is_finite_coordinate(value):
            errors.append({"field": field, "message": "must be a finite number"})

    if accuracy is not None and not is_finite_coordinate(accuracy):
        errors.append({"field": "accuracy", "message": "must be a finite number"})

    if errors:
        raise ValidationError(errors)

    return PunchRequest(
        subject_id=subject_id.strip(),
        subject_name=subject_name.strip(),
        subject_kind=parsed_kind,
        action=parsed_action,
        lat=float(lat),
        lng=float(lng),
        accuracy=float(accuracy) if accuracy is not None else None,
        client_agent=client_agent if isinstance(client_agent, str) else "",
    )


def _finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


def record_punch(
    store: AttendanceStore,
    subject_id: Any,
    subject_name: Any,
    subject_kind: Any,
    action: Any,
    lat: Any,
    lng: Any,
    accuracy: Any = None,
    client_agent: Any = "",
    now: Optional[datetime] = None,
) -> PunchOutcome:
    """
    Record one LOGIN/LOGOUT punch.

    Args:
        store: Attendance store for this request
        subject_id: Worker or employee id as selected by the user
        subject_name: Display name as selected by the user
        subject_kind: WORKER (default) or EMPLOYEE
        action: LOGIN or LOGOUT
        lat: GPS latitude
        lng: GPS longitude
        accuracy: GPS accuracy in meters (optional)
        client_agent: Caller's User-Agent
        now: Override for the server clock (tests)

    Returns:
        PunchOutcome with the stored row, the geofence verdict, and whether the
        unauthorized-attempt row was written

    Raises:
        ValidationError: Invalid input; nothing persisted
        InfrastructureError: Settings/registry could not be read or the punch row
            could not be written; safe to retry
    """
    request = validate_punch(subject_id, subject_name, subject_kind, action, lat, lng, accuracy, client_agent)

    runtime = get_runtime_settings(store)
    locations = get_locations(store)

    zone = resolve_zone(runtime.timezone_id)
    timestamp = format_punch_timestamp(now or now_utc(), zone)

    verdict = geofence_service.resolve(request.lat, request.lng, locations, runtime)

    event = store.append_event(PunchLog(
        timestamp=timestamp,
        subject_id=request.subject_id,
        subject_name=request.subject_name,
        subject_kind=request.subject_kind.value,
        action=request.action.value,
        latitude=request.lat,
        longitude=request.lng,
        accuracy_meters=request.accuracy,
        within_geofence=verdict.within_geofence,
        client_agent=request.client_agent,
        matched_location_name=verdict.matched_name,
    ))

    if verdict.within_geofence:
        _log.info(
            "punch %s: subject_id=%s action=%s location=%s distance=%.1fm",
            event.id, request.subject_id, request.action.value, verdict.matched_name, verdict.distance_meters,
        )
        return PunchOutcome(
            event=event,
            authorized=True,
            distance_meters=verdict.distance_meters,
            matched_location_name=verdict.matched_name,
        )

    _log.warning(
        "punch %s outside geofence: subject_id=%s action=%s nearest=%r distance=%s",
        event.id, request.subject_id, request.action.value, verdict.matched_name, verdict.distance_meters,
    )

    warning = None
    try:
        store.append_unauthorized(UnauthorizedAttempt(
            timestamp=timestamp,
            subject_id=request.subject_id,
            subject_name=request.subject_name,
            subject_kind=request.subject_kind.value,
            latitude=request.lat,
            longitude=request.lng,
            accuracy_meters=request.accuracy,
            distance_meters=_finite_or_none(verdict.distance_meters),
            reason=REASON_OUTSIDE_FACTORY,
            client_agent=request.client_agent,
        ))
    except InfrastructureError as e:
        warning = SecondaryWriteWarning(subject_id=request.subject_id, timestamp=timestamp, error=e.detail)
        _log.warning("Failed to write unauthorized attempt for punch %s: %s", event.id, e.detail, exc_info=e.cause)

    return PunchOutcome(
        event=event,
        authorized=False,
        distance_meters=verdict.distance_meters,
        matched_location_name=verdict.matched_name,
        unauthorized_logged=warning is None,
        secondary_warning=warning,
    )
