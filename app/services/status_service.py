"""
Presence status derived from the punch log.

Stateless: each call re-reads the full history and the active roster. The most
recent event per subject (compared as date-times in the configured timezone)
decides presence; roster members without events are reported as NONE.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from app.db.store import AttendanceStore
from app.models.punch_log import PunchAction, PunchLog
from app.models.roster import RosterMember, SubjectKind
from app.services.settings_service import get_runtime_settings
from app.utils.datetime_utils import parse_punch_timestamp, resolve_zone

NO_ACTION = "NONE"


@dataclass(frozen=True)
class DerivedStatus:
    subject_id: str
    subject_name: str
    subject_kind: str
    last_action: str
    last_timestamp: str
    present: bool


def latest_events(events: List[PunchLog], zone) -> Dict[str, PunchLog]:
    """
    Reduce the history to the latest event per subject_id.

    Unparseable timestamps rank below every parseable one; on equal keys the
    event appended later wins.
    """
    latest: Dict[str, Tuple[Tuple[bool, datetime], PunchLog]] = {}
    for event in events:
        if not event.subject_id:
            continue
        parsed = parse_punch_timestamp(event.timestamp, zone)
        key = (parsed is not None, parsed or datetime.min)
        current = latest.get(event.subject_id)
        if current is None or key >= current[0]:
            latest[event.subject_id] = (key, event)
    return {subject_id: event for subject_id, (_, event) in latest.items()}


def _roster(store: AttendanceStore, kind: Optional[SubjectKind]) -> List[RosterMember]:
    kinds = [kind] if kind else [SubjectKind.WORKER, SubjectKind.EMPLOYEE]
    members: List[RosterMember] = []
    seen = set()
    for k in kinds:
        for member in store.get_roster(k):
            if member.subject_id in seen:
                continue
            seen.add(member.subject_id)
            members.append(member)
    return members


def compute_status(store: AttendanceStore, kind: Optional[SubjectKind] = None) -> List[DerivedStatus]:
    """
    One DerivedStatus per active roster member, in roster order.

    Args:
        store: Attendance store for this request
        kind: Restrict to workers or employees (default: both, workers first)

    Returns:
        List of DerivedStatus; subjects with history but no active roster row are dropped
    """
    zone = resolve_zone(get_runtime_settings(store).timezone_id)
    latest = latest_events(store.get_all_events(), zone)

    result: List[DerivedStatus] = []
    for member in _roster(store, kind):
        event = latest.get(member.subject_id)
        if event is None:
            result.append(DerivedStatus(
                subject_id=member.subject_id,
                subject_name=member.display_name,
                subject_kind=member.kind,
                last_action=NO_ACTION,
                last_timestamp="",
                present=False,
            ))
            continue
        result.append(DerivedStatus(
            subject_id=member.subject_id,
            subject_name=event.subject_name or member.display_name,
            subject_kind=member.kind,
            last_action=event.action,
            last_timestamp=event.timestamp,
            present=event.action == PunchAction.LOGIN.value,
        ))
    return result
