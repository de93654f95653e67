"""
Supervisor PIN check
"""
import hmac
import logging
from typing import Optional

from app.db.store import AttendanceStore
from app.services.settings_service import get_runtime_settings

_log = logging.getLogger(__name__)


def authenticate(store: AttendanceStore, pin: Optional[str]) -> bool:
    """Compare pin to the SUPERVISOR_PIN setting. No lockout, no hashing."""
    if not pin:
        return False
    secret = get_runtime_settings(store).supervisor_secret
    ok = hmac.compare_digest(str(pin).encode("utf-8"), secret.encode("utf-8"))
    if not ok:
        _log.info("Rejected supervisor PIN")
    return ok
