"""
Attendance store: the get/append interface the attendance services run against.

One store wraps one SQLAlchemy session and is built per request by the
composition root (see app.core.deps.get_store). Nothing is cached between
calls; every getter reads the tables fresh. SQLAlchemy failures are logged and
re-raised as InfrastructureError so services never see driver exceptions.
"""
import logging
from typing import Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import InfrastructureError
from app.models.location import Location
from app.models.punch_log import PunchLog, UnauthorizedAttempt
from app.models.roster import RosterMember, SubjectKind
from app.models.setting import AppSetting

_log = logging.getLogger(__name__)


class AttendanceStore:
    def __init__(self, db: Session):
        self.db = db

    # --- reads ---

    def get_settings_map(self) -> Dict[str, Optional[str]]:
        """All app_settings rows as {key: raw value}."""
        try:
            rows = self.db.query(AppSetting).all()
        except SQLAlchemyError as e:
            raise self._read_failed("app_settings", e)
        return {row.key: row.value for row in rows if row.key}

    def get_locations(self) -> List[Location]:
        """Active locations in registry order."""
        try:
            return (
                self.db.query(Location)
                .filter(Location.active == True)
                .order_by(Location.sort_order, Location.id)
                .all()
            )
        except SQLAlchemyError as e:
            raise self._read_failed("locations", e)

    def get_roster(self, kind: SubjectKind) -> List[RosterMember]:
        """Active roster members of one kind, in roster order."""
        try:
            return (
                self.db.query(RosterMember)
                .filter(RosterMember.kind == kind.value, RosterMember.active == True)
                .order_by(RosterMember.id)
                .all()
            )
        except SQLAlchemyError as e:
            raise self._read_failed("roster_members", e)

    def get_all_events(self) -> List[PunchLog]:
        """Full punch history in append order."""
        try:
            return self.db.query(PunchLog).order_by(PunchLog.id).all()
        except SQLAlchemyError as e:
            raise self._read_failed("punch_logs", e)

    # --- appends ---

    def append_event(self, event: PunchLog) -> PunchLog:
        """Persist and commit one punch row."""
        return self._append(event, "punch_logs")

    def append_unauthorized(self, attempt: UnauthorizedAttempt) -> UnauthorizedAttempt:
        """Persist and commit one unauthorized-attempt row."""
        return self._append(attempt, "unauthorized_attempts")

    def _append(self, row, table: str):
        # Commit is the last step that can raise: InfrastructureError means nothing was written
        try:
            self.db.add(row)
            self.db.flush()
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            _log.error("append to %s failed: %s", table, e)
            raise InfrastructureError(f"Could not write to {table}", cause=e)
        return row

    def _read_failed(self, table: str, e: SQLAlchemyError) -> InfrastructureError:
        _log.error("read from %s failed: %s", table, e)
        return InfrastructureError(f"Could not read {table}", cause=e)
