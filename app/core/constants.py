"""
Constants shared across the attendance backend
"""

SERVICE_NAME = "factory-attendance-backend"

# Reason recorded on every unauthorized_attempts row
REASON_OUTSIDE_FACTORY = "Location outside factory"

# Legacy sheet timestamp layout (en-GB locale), e.g. "19/10/2026, 14:03:22"
PUNCH_TIMESTAMP_FORMAT = "%d/%m/%Y, %H:%M:%S"

# app_settings keys
SETTING_FACTORY_LAT = "FACTORY_LAT"
SETTING_FACTORY_LNG = "FACTORY_LNG"
SETTING_GEOFENCE_RADIUS_M = "GEOFENCE_RADIUS_M"
SETTING_TIMEZONE = "TIMEZONE"
SETTING_SUPERVISOR_PIN = "SUPERVISOR_PIN"

SUPERVISOR_PIN_HEADER = "X-Supervisor-Pin"
