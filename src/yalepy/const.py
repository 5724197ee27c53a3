"""Constants for the yalepy library."""

from enum import Enum, StrEnum

# Yale Home API base URL
API_BASE_URL = "https://mob.yalehomesystem.co.uk/yapi"

# Yale Home app Basic-auth key. This is an *app-level* credential shared by
# every installation, not a user secret. Without it the token endpoint
# answers "invalid_client".
YALE_AUTH_KEY = (
    "VnVWWDZYVjlXSUNzVHJhcUVpdVNCUHBwZ3ZPakxUeXNsRU1LUHBjdTpkd3RPbE15WEtE"
    "NUJ5ZW1GWHV0am55eGhrc0U3V0ZFY2p0dFcyOXRaSWNuWHlSWHFsWVBEZ1BSZE1xczF4"
    "R3VwVTlxa1o4UE5ubGlQanY5Z2hBZFFtMHpsM0h4V3dlS0ZBcGZzakpMcW1GMm1HR1lX"
    "Rlpad01MRkw3MGR0bmNndQ=="
)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded ; charset=utf-8"

# Only area 1 exists on consumer panels
PANEL_AREA = "1"

# Acknowledgement value for an accepted mode change
ACK_OK = "OK"

# User agent
USER_AGENT = "yalepy/0.1.0"


class Path(StrEnum):
    """API endpoint paths, relative to the base URL."""

    AUTH = "o/token"
    PANEL_MODE = "api/panel/mode"
    DEVICE_STATUS = "api/panel/device_status"


class AlarmState(StrEnum):
    """Panel modes as sent and returned by the Yale API."""

    ARMED = "arm"
    HOME = "home"
    DISARMED = "disarm"


class DeviceType(StrEnum):
    """Device types we know how to map to sensors."""

    DOOR_CONTACT = "device_type.door_contact"
    PIR = "device_type.pir"


class ContactState(Enum):
    """State of a door/window contact sensor."""

    NONE = "none"
    OPEN = "open"
    CLOSED = "closed"


class MotionState(Enum):
    """State of a PIR motion sensor."""

    NONE = "none"
    TRIGGERED = "triggered"


CONTACT_STATUS_MAP: dict[str, ContactState] = {
    "device_status.dc_close": ContactState.CLOSED,
    "device_status.dc_open": ContactState.OPEN,
}

MOTION_STATUS_MAP: dict[str, MotionState] = {
    "device_status.pir_triggered": MotionState.TRIGGERED,
}
