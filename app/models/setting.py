"""
Key/value settings rows (FACTORY_LAT, FACTORY_LNG, GEOFENCE_RADIUS_M, TIMEZONE, SUPERVISOR_PIN)
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from app.db.base import Base


class AppSetting(Base):
    __tablename__ = "app_settings"

    id = Column(Integer, primary_key=True, index=True)
    key = Column(String, unique=True, nullable=False, index=True)
    value = Column(String, nullable=True)  # Raw text, parsed by settings_service
    updated_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), onupdate=func.current_timestamp(), nullable=False)
