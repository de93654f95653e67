"""
Roster schemas, shaped like the legacy worker/employee pickers expect
"""
from typing import List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class WorkerOut(BaseModel):
    worker_id: str = Field(validation_alias=AliasChoices("subject_id", "workerId"), serialization_alias="workerId")
    name: str = Field(validation_alias=AliasChoices("display_name", "name"))
    active: bool

    model_config = ConfigDict(from_attributes=True)


class EmployeeOut(BaseModel):
    """Includes the plaintext credential: the employee page checks it client-side."""
    emp_id: str = Field(validation_alias=AliasChoices("subject_id", "empId"), serialization_alias="empId")
    name: str = Field(validation_alias=AliasChoices("display_name", "name"))
    password: Optional[str] = Field(None, validation_alias=AliasChoices("credential", "password"))

    model_config = ConfigDict(from_attributes=True)


class WorkerListResponse(BaseModel):
    success: bool = True
    workers: List[WorkerOut]


class EmployeeListResponse(BaseModel):
    success: bool = True
    emps: List[EmployeeOut]
