"""
Punch endpoint: records a LOGIN/LOGOUT for a worker or employee.
Accepts the legacy client body {workerId, name, action, lat, lng, accuracy};
the User-Agent header is stored with the punch.
"""
import math
from fastapi import APIRouter, Depends, Request
from app.core.deps import get_store
from app.db.store import AttendanceStore
from app.schemas.punch import PunchRequest, PunchResponse
from app.services.attendance_service import record_punch

router = APIRouter()


def _outside_message(distance_m: float, location_name: str) -> str:
    if not math.isfinite(distance_m):
        return "Your location could not be matched to the factory. The punch was recorded for review."
    where = location_name or "the factory"
    return f"Your location appears to be {distance_m:.0f} m from {where}. The punch was recorded for review."


@router.post("/punch", response_model=PunchResponse, status_code=201)
def punch_endpoint(
    body: PunchRequest,
    request: Request,
    store: AttendanceStore = Depends(get_store),
):
    """
    Record a punch. Always 201 once validated and stored; a punch outside every
    geofence comes back with success=false and warning=true.
    """
    outcome = record_punch(
        store,
        subject_id=body.subject_id,
        subject_name=body.subject_name,
        subject_kind=body.subject_kind,
        action=body.action,
        lat=body.lat,
        lng=body.lng,
        accuracy=body.accuracy,
        client_agent=request.headers.get("user-agent", ""),
    )
    distance = outcome.distance_meters if math.isfinite(outcome.distance_meters) else None

    if not outcome.authorized:
        return PunchResponse(
            success=False,
            authorized=False,
            warning=True,
            message=_outside_message(outcome.distance_meters, outcome.matched_location_name),
            distance_meters=distance,
            matched_location_name=outcome.matched_location_name,
            event_id=outcome.event.id,
        )

    return PunchResponse(
        success=True,
        authorized=True,
        warning=False,
        message=f"Marked {outcome.event.action} for {outcome.event.subject_name}",
        distance_meters=distance,
        matched_location_name=outcome.matched_location_name,
        event_id=outcome.event.id,
    )
