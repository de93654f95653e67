"""
Directory of active workers and employees eligible to punch
"""
from typing import List

from app.db.store import AttendanceStore
from app.models.roster import RosterMember, SubjectKind


def get_active_workers(store: AttendanceStore) -> List[RosterMember]:
    """Active workers in roster order."""
    return store.get_roster(SubjectKind.WORKER)


def get_active_employees(store: AttendanceStore) -> List[RosterMember]:
    """Active employees in roster order. Rows carry the plaintext credential."""
    return store.get_roster(SubjectKind.EMPLOYEE)
