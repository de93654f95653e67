"""
Presence status schemas
"""
from typing import List
from pydantic import BaseModel, ConfigDict


class DerivedStatusOut(BaseModel):
    subject_id: str
    subject_name: str
    subject_kind: str
    last_action: str
    last_timestamp: str
    present: bool

    model_config = ConfigDict(from_attributes=True)


class StatusResponse(BaseModel):
    success: bool = True
    status: List[DerivedStatusOut]
    total: int
