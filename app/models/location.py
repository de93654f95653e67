"""
Authorized location (geofence center) model
"""
from sqlalchemy import Boolean, Column, Float, Integer, String
from app.db.base import Base


class Location(Base):
    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    radius_meters = Column(Float, nullable=True)  # None -> GEOFENCE_RADIUS_M setting
    sort_order = Column(Integer, default=0, nullable=False)  # Registry order; first listed wins ties
    active = Column(Boolean, default=True, nullable=False)
