"""yalepy — Python client library for the Yale Home alarm API.

Usage:
    from yalepy import YaleClient

    async with aiohttp.ClientSession() as session:
        client = YaleClient(session)
        token = await client.async_get_access_token("username", "password")
        print(await client.async_get_status(token))
        for sensor in await client.async_get_devices(token):
            print(f"{sensor.name}: {sensor.state}")
"""

from .client import YaleClient, process_response
from .const import AlarmState, ContactState, MotionState
from .exceptions import (
    YaleApiError,
    YaleConnectionError,
    YaleDecodeError,
    YaleDomainError,
    YaleError,
    YalePreconditionError,
    YaleUnhandledStatusError,
)
from .models import AccessToken, ContactSensor, Device, MotionSensor, Sensor

__all__ = [
    "YaleClient",
    "process_response",
    "AlarmState",
    "ContactState",
    "MotionState",
    "AccessToken",
    "Device",
    "ContactSensor",
    "MotionSensor",
    "Sensor",
    "YaleError",
    "YaleApiError",
    "YaleConnectionError",
    "YaleDecodeError",
    "YaleDomainError",
    "YalePreconditionError",
    "YaleUnhandledStatusError",
]

__version__ = "0.1.0"
