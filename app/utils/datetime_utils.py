"""
Timezone-aware datetime helpers.
- Punch timestamps are stored as text in the configured timezone (legacy sheet layout).
- Comparisons always go through parse_punch_timestamp, never string ordering.
"""
import logging
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.core.config import settings
from app.core.constants import PUNCH_TIMESTAMP_FORMAT

UTC = timezone.utc

_log = logging.getLogger(__name__)


def now_utc() -> datetime:
    """Current time in UTC (timezone-aware)."""
    return datetime.now(UTC)


def resolve_zone(timezone_id: Optional[str], default: Optional[str] = None) -> ZoneInfo:
    """ZoneInfo for timezone_id; unknown or empty ids fall back to default (DEFAULT_TIMEZONE)."""
    default = default or settings.DEFAULT_TIMEZONE
    if timezone_id:
        try:
            return ZoneInfo(timezone_id)
        except (ZoneInfoNotFoundError, ValueError):
            _log.warning("Unknown timezone %r, using %s", timezone_id, default)
    return ZoneInfo(default)


def format_punch_timestamp(dt: datetime, zone: ZoneInfo) -> str:
    """Render dt in zone as 'DD/MM/YYYY, HH:MM:SS'. Naive datetimes are treated as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(zone).strftime(PUNCH_TIMESTAMP_FORMAT)


def parse_punch_timestamp(value: Optional[str], zone: ZoneInfo) -> Optional[datetime]:
    """
    Parse a stored punch timestamp into a naive wall-clock datetime in zone.

    Accepts the legacy 'DD/MM/YYYY, HH:MM:SS' layout (also without the comma)
    and ISO-8601. Offset-aware ISO values are converted into zone first.
    Returns None when the value cannot be parsed.
    """
    if not value:
        return None
    text = value.strip()
    for fmt in (PUNCH_TIMESTAMP_FORMAT, "%d/%m/%Y %H:%M:%S"):
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        return None
    if dt.tzinfo is not None:
        dt = dt.astimezone(zone).replace(tzinfo=None)
    return dt
