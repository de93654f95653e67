"""
Punch schemas
"""
from typing import Any, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class PunchRequest(BaseModel):
    """
    Punch request body. Accepts the legacy client keys (workerId, name) as well
    as subject_id/subject_name. Fields are deliberately loose: the attendance
    service validates them and answers 400 with per-field errors.
    """
    subject_id: Any = Field(None, validation_alias=AliasChoices("subject_id", "workerId", "empId"))
    subject_name: Any = Field(None, validation_alias=AliasChoices("subject_name", "name"))
    subject_kind: Any = Field(None, validation_alias=AliasChoices("subject_kind", "kind"))
    action: Any = None
    lat: Any = None
    lng: Any = None
    accuracy: Any = None

    model_config = ConfigDict(extra="ignore")


class PunchResponse(BaseModel):
    """Result of a recorded punch. success=False with warning=True means recorded but outside the geofence."""
    success: bool
    authorized: bool
    warning: bool
    message: str
    distance_meters: Optional[float] = Field(None, description="Distance to nearest geofence center; null if unmeasurable")
    matched_location_name: str = ""
    event_id: int
