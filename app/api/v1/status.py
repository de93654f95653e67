"""
Presence status endpoint (supervisor only)
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query
from app.core.deps import get_store, require_supervisor
from app.db.store import AttendanceStore
from app.models.roster import SubjectKind
from app.schemas.status import DerivedStatusOut, StatusResponse
from app.services.status_service import compute_status

router = APIRouter()


@router.get("/status", response_model=StatusResponse, dependencies=[Depends(require_supervisor)])
def status_endpoint(
    kind: Optional[SubjectKind] = Query(None, description="Only WORKER or only EMPLOYEE rows"),
    store: AttendanceStore = Depends(get_store),
):
    """
    Who is present right now: one row per active roster member, derived from
    each member's most recent punch. Requires the X-Supervisor-Pin header.
    """
    rows = compute_status(store, kind=kind)
    return StatusResponse(
        status=[DerivedStatusOut.model_validate(r) for r in rows],
        total=len(rows),
    )
