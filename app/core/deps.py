"""
Dependencies and guards for FastAPI endpoints
"""
from typing import Generator, Optional
from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session
from app.core.constants import SUPERVISOR_PIN_HEADER
from app.db.session import SessionLocal
from app.db.store import AttendanceStore
from app.services.supervisor_service import authenticate


def get_db() -> Generator:
    """Dependency for getting database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_store(db: Session = Depends(get_db)) -> AttendanceStore:
    """One AttendanceStore per request, around the request's session"""
    return AttendanceStore(db)


def require_supervisor(
    pin: Optional[str] = Header(None, alias=SUPERVISOR_PIN_HEADER),
    store: AttendanceStore = Depends(get_store),
) -> None:
    """
    Gate supervisor-only endpoints on the X-Supervisor-Pin header

    Usage:
        @router.get("/status", dependencies=[Depends(require_supervisor)])
    """
    if not authenticate(store, pin):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid PIN",
        )
