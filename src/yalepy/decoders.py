"""Response decoders for the Yale API.

Each decoder takes an already deserialized JSON value and either returns a
typed payload or raises YaleDecodeError naming the path that did not match.
Unknown keys are ignored.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from .exceptions import YaleDecodeError


@dataclass(frozen=True)
class AccessTokenPayload:
    """Body of a successful password grant."""

    token: str
    expires_in: float


@dataclass(frozen=True)
class PanelModePayload:
    """One element of the panel mode array."""

    mode: str


@dataclass(frozen=True)
class PanelAckPayload:
    """Body returned after a mode change request."""

    acknowledgement: str


@dataclass(frozen=True)
class DevicePayload:
    """A device as listed by the device status endpoint."""

    id: str
    name: str
    type: str
    status: str


@dataclass(frozen=True)
class ErrorPayload:
    """OAuth-style error body returned with 4xx responses."""

    error: str
    description: str | None = None


def _object(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise YaleDecodeError(
            f"expected an object, got {type(value).__name__}", path
        )
    return value


def _array(value: Any, path: str) -> list[Any]:
    if not isinstance(value, list):
        raise YaleDecodeError(
            f"expected an array, got {type(value).__name__}", path
        )
    return value


def _field(obj: dict[str, Any], key: str, path: str) -> Any:
    if key not in obj:
        raise YaleDecodeError("missing field", f"{path}.{key}")
    return obj[key]


def _string(obj: dict[str, Any], key: str, path: str) -> str:
    value = _field(obj, key, path)
    if not isinstance(value, str):
        raise YaleDecodeError(
            f"expected a string, got {type(value).__name__}", f"{path}.{key}"
        )
    return value


def _number(obj: dict[str, Any], key: str, path: str) -> float:
    value = _field(obj, key, path)
    # bool is an int subclass but never a valid number here
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise YaleDecodeError(
            f"expected a number, got {type(value).__name__}", f"{path}.{key}"
        )
    if not math.isfinite(value):
        raise YaleDecodeError(
            f"expected a finite number, got {value}", f"{path}.{key}"
        )
    return value


def decode_access_token(data: Any) -> AccessTokenPayload:
    """Decode ``{access_token: str, expires_in: number}``."""
    obj = _object(data, "$")
    return AccessTokenPayload(
        token=_string(obj, "access_token", "$"),
        expires_in=_number(obj, "expires_in", "$"),
    )


def decode_panel_get(data: Any) -> list[PanelModePayload]:
    """Decode the panel mode array.

    The current panel state is always the first element. Callers must not
    read meaning into any further elements, but they are still validated.
    An empty array is rejected since there is no state to report.
    """
    items = _array(data, "$")
    if not items:
        raise YaleDecodeError("expected at least one element", "$[0]")
    result = []
    for index, item in enumerate(items):
        path = f"$[{index}]"
        obj = _object(item, path)
        result.append(PanelModePayload(mode=_string(obj, "mode", path)))
    return result


def decode_panel_set(data: Any) -> PanelAckPayload:
    """Decode ``{acknowledgement: str}``.

    Any string is accepted; whether it means success is decided by the
    caller.
    """
    obj = _object(data, "$")
    return PanelAckPayload(acknowledgement=_string(obj, "acknowledgement", "$"))


def decode_devices(data: Any) -> list[DevicePayload]:
    """Decode the device status array."""
    result = []
    for index, item in enumerate(_array(data, "$")):
        path = f"$[{index}]"
        obj = _object(item, path)
        result.append(
            DevicePayload(
                id=_string(obj, "id", path),
                name=_string(obj, "name", path),
                type=_string(obj, "type", path),
                status=_string(obj, "status", path),
            )
        )
    return result


def decode_error(data: Any) -> ErrorPayload:
    """Decode ``{error: str, error_description?: str}``."""
    obj = _object(data, "$")
    description = obj.get("error_description")
    if description is not None and not isinstance(description, str):
        raise YaleDecodeError(
            f"expected a string, got {type(description).__name__}",
            "$.error_description",
        )
    return ErrorPayload(
        error=_string(obj, "error", "$"),
        description=description,
    )
