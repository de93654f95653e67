"""
Roster model: workers and employees eligible to punch
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.sql import func
import enum
from app.db.base import Base


class SubjectKind(str, enum.Enum):
    WORKER = "WORKER"
    EMPLOYEE = "EMPLOYEE"


class RosterMember(Base):
    __tablename__ = "roster_members"

    id = Column(Integer, primary_key=True, index=True)
    subject_id = Column(String, unique=True, nullable=False, index=True)
    display_name = Column(String, nullable=False)
    kind = Column(String, default=SubjectKind.WORKER.value, nullable=False, index=True)
    credential = Column(String, nullable=True)  # Employees only; plaintext, checked by the client
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), nullable=False)
