"""
Supervisor PIN check endpoint
"""
from fastapi import APIRouter, Depends, HTTPException, status
from app.core.deps import get_store
from app.db.store import AttendanceStore
from app.schemas.settings import SupervisorAuthRequest, SupervisorAuthResponse
from app.services.supervisor_service import authenticate

router = APIRouter()


@router.post("/supervisor", response_model=SupervisorAuthResponse)
def supervisor_auth(body: SupervisorAuthRequest, store: AttendanceStore = Depends(get_store)):
    """Returns success=true for the right PIN, 401 otherwise."""
    if not authenticate(store, None if body.pin is None else str(body.pin)):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid PIN",
        )
    return SupervisorAuthResponse(success=True)
