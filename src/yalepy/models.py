"""Data models for the yalepy library."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from .const import (
    ACK_OK,
    CONTACT_STATUS_MAP,
    MOTION_STATUS_MAP,
    AlarmState,
    ContactState,
    DeviceType,
    MotionState,
)
from .decoders import (
    AccessTokenPayload,
    DevicePayload,
    PanelAckPayload,
    PanelModePayload,
)
from .exceptions import YaleDecodeError, YaleDomainError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccessToken:
    """A bearer token and the instant it stops being valid.

    Nothing refreshes the token; callers track staleness with
    ``is_expired`` and request a new one themselves.
    """

    token: str
    expiration: datetime

    @property
    def is_expired(self) -> bool:
        """Return True once the expiration instant has passed."""
        return datetime.now(UTC) >= self.expiration

    @classmethod
    def from_payload(
        cls, payload: AccessTokenPayload, now: datetime | None = None
    ) -> AccessToken:
        """Create from a decoded token response.

        Args:
            payload: Decoded token response.
            now: Time the request was made. Defaults to the current time.
        """
        issued = now or datetime.now(UTC)
        try:
            expiration = issued + timedelta(seconds=payload.expires_in)
        except (OverflowError, ValueError) as err:
            raise YaleDecodeError(
                f"expiry out of range: {payload.expires_in}", "$.expires_in"
            ) from err
        return cls(token=payload.token, expiration=expiration)


def parse_alarm_state(mode: str) -> AlarmState:
    """Map a panel mode string to an AlarmState.

    Raises:
        YaleDomainError: If the mode is not one of arm, home or disarm.
    """
    try:
        return AlarmState(mode)
    except ValueError:
        raise YaleDomainError(f"Unrecognized panel mode: {mode!r}") from None


def alarm_state_from_payload(modes: list[PanelModePayload]) -> AlarmState:
    """Return the current state; it is always the first array element."""
    return parse_alarm_state(modes[0].mode)


def confirm_alarm_state(
    requested: AlarmState, ack: PanelAckPayload
) -> AlarmState:
    """Return the requested state if the panel acknowledged the change.

    The API does not echo the new mode back, so an ``OK`` acknowledgement is
    the only confirmation we get.
    """
    if ack.acknowledgement != ACK_OK:
        raise YaleDomainError(
            f"Panel rejected mode change to {requested.value!r}: "
            f"{ack.acknowledgement!r}"
        )
    return requested


@dataclass(frozen=True)
class Device:
    """A device attached to the alarm panel."""

    identifier: str
    name: str


@dataclass(frozen=True)
class ContactSensor(Device):
    """A door or window contact."""

    state: ContactState = ContactState.NONE

    @property
    def is_open(self) -> bool:
        return self.state is ContactState.OPEN

    @staticmethod
    def parse_state(status: str) -> ContactState:
        return CONTACT_STATUS_MAP.get(status, ContactState.NONE)


@dataclass(frozen=True)
class MotionSensor(Device):
    """A PIR motion detector."""

    state: MotionState = MotionState.NONE

    @property
    def is_triggered(self) -> bool:
        return self.state is MotionState.TRIGGERED

    @staticmethod
    def parse_state(status: str) -> MotionState:
        return MOTION_STATUS_MAP.get(status, MotionState.NONE)


Sensor = ContactSensor | MotionSensor


def parse_sensor(payload: DevicePayload) -> Sensor | None:
    """Map a device to its sensor variant, or None for unknown types."""
    match payload.type:
        case DeviceType.DOOR_CONTACT:
            return ContactSensor(
                identifier=payload.id,
                name=payload.name,
                state=ContactSensor.parse_state(payload.status),
            )
        case DeviceType.PIR:
            return MotionSensor(
                identifier=payload.id,
                name=payload.name,
                state=MotionSensor.parse_state(payload.status),
            )
        case _:
            _LOGGER.debug(
                "Skipping device %s with unsupported type %s",
                payload.id,
                payload.type,
            )
            return None


def parse_sensors(payloads: Iterable[DevicePayload]) -> list[Sensor]:
    """Map devices to sensors, dropping unsupported device types."""
    return [
        sensor
        for sensor in (parse_sensor(payload) for payload in payloads)
        if sensor is not None
    ]
