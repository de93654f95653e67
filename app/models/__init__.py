"""
Database models
"""
from app.models.setting import AppSetting
from app.models.location import Location
from app.models.roster import RosterMember, SubjectKind
from app.models.punch_log import PunchLog, PunchAction, UnauthorizedAttempt

__all__ = [
    "AppSetting",
    "Location",
    "RosterMember",
    "SubjectKind",
    "PunchLog",
    "PunchAction",
    "UnauthorizedAttempt",
]
