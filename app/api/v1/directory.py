"""
Roster endpoints used by the worker and employee punch pages
"""
from fastapi import APIRouter, Depends
from app.core.deps import get_store
from app.db.store import AttendanceStore
from app.schemas.directory import (
    EmployeeListResponse,
    EmployeeOut,
    WorkerListResponse,
    WorkerOut,
)
from app.services.directory_service import get_active_employees, get_active_workers

router = APIRouter()


@router.get("/workers", response_model=WorkerListResponse)
def list_workers(store: AttendanceStore = Depends(get_store)):
    """Active workers in roster order."""
    return WorkerListResponse(
        workers=[WorkerOut.model_validate(w) for w in get_active_workers(store)]
    )


@router.get("/employees", response_model=EmployeeListResponse)
def list_employees(store: AttendanceStore = Depends(get_store)):
    """Active employees in roster order, with the credential the page checks locally."""
    return EmployeeListResponse(
        emps=[EmployeeOut.model_validate(e) for e in get_active_employees(store)]
    )
