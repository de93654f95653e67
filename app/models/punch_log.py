"""
Append-only punch log and unauthorized-attempt log
"""
from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime
from sqlalchemy.sql import func
import enum
from app.db.base import Base


class PunchAction(str, enum.Enum):
    LOGIN = "LOGIN"
    LOGOUT = "LOGOUT"


class PunchLog(Base):
    __tablename__ = "punch_logs"

    id = Column(Integer, primary_key=True, index=True)
    timestamp = Column(String, nullable=False)  # Formatted in the TIMEZONE setting, e.g. "19/10/2026, 14:03:22"
    subject_id = Column(String, nullable=False, index=True)
    subject_name = Column(String, nullable=False)
    subject_kind = Column(String, default="WORKER", nullable=False)
    action = Column(String, nullable=False)  # LOGIN/LOGOUT
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    accuracy_meters = Column(Float, nullable=True)
    within_geofence = Column(Boolean, nullable=False)
    client_agent = Column(String, default="", nullable=False)
    matched_location_name = Column(String, default="", nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), nullable=False)


class UnauthorizedAttempt(Base):
    __tablename__ = "unauthorized_attempts"

    id = Column(Integer, primary_key=True, index=True)
    timestamp = Column(String, nullable=False)
    subject_id = Column(String, nullable=False, index=True)
    subject_name = Column(String, nullable=False)
    subject_kind = Column(String, default="WORKER", nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    accuracy_meters = Column(Float, nullable=True)
    distance_meters = Column(Float, nullable=True)  # None when no geofence could be measured
    reason = Column(String, nullable=False)
    client_agent = Column(String, default="", nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), nullable=False)
