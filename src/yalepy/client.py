"""Yale Home API client."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any, TypeVar

import aiohttp

from .const import (
    API_BASE_URL,
    FORM_CONTENT_TYPE,
    PANEL_AREA,
    USER_AGENT,
    YALE_AUTH_KEY,
    AlarmState,
    Path,
)
from .decoders import (
    AccessTokenPayload,
    DevicePayload,
    PanelAckPayload,
    decode_access_token,
    decode_devices,
    decode_error,
    decode_panel_get,
    decode_panel_set,
)
from .exceptions import (
    YaleApiError,
    YaleConnectionError,
    YaleDecodeError,
    YalePreconditionError,
    YaleUnhandledStatusError,
)
from .models import (
    AccessToken,
    Sensor,
    alarm_state_from_payload,
    confirm_alarm_state,
    parse_sensors,
)

_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")
_U = TypeVar("_U")

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_SERVER_ERROR = 500


async def _read_json(resp: aiohttp.ClientResponse) -> Any:
    try:
        # The API does not always label JSON bodies as such
        return await resp.json(content_type=None)
    except (json.JSONDecodeError, UnicodeDecodeError) as err:
        raise YaleDecodeError(f"response body is not JSON: {err}") from err


async def process_response(
    resp: aiohttp.ClientResponse,
    decoder: Callable[[Any], _T],
    on_success: Callable[[_T], _U],
) -> _U:
    """Turn an HTTP response into a result or an exception.

    Only the status code drives the decision:

    * 200: the body is decoded with ``decoder`` and passed to ``on_success``.
    * 4xx: the body is decoded as an error payload and raised as YaleApiError.
      Seen so far: 400 ``invalid_request`` (missing username or password),
      400 ``unsupported_grant_type`` and 401 ``invalid_grant`` (bad
      credentials).
    * anything else: YaleUnhandledStatusError, without reading the body,
      which for 5xx is often not JSON at all.

    Raises:
        YaleDecodeError: If the body does not match what was expected.
        YaleApiError: For 4xx responses.
        YaleUnhandledStatusError: For any other non-200 status.
    """
    status = resp.status
    if status == HTTP_OK:
        decoded = decoder(await _read_json(resp))
        return on_success(decoded)

    if HTTP_BAD_REQUEST <= status < HTTP_SERVER_ERROR:
        error = decode_error(await _read_json(resp))
        description = (
            f'"{error.description}"' if error.description else "No description given."
        )
        raise YaleApiError(
            f'HTTP {status} "{error.error}", {description}',
            status_code=status,
            error=error.error,
            description=error.description,
        )

    raise YaleUnhandledStatusError(status)


class YaleClient:
    """Async client for the Yale Home alarm API.

    The client keeps no token state: every authenticated call takes the
    AccessToken returned by ``async_get_access_token``.

    Usage:
        async with aiohttp.ClientSession() as session:
            client = YaleClient(session)
            token = await client.async_get_access_token("user", "password")
            state = await client.async_get_status(token)
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        *,
        auth_key: str = YALE_AUTH_KEY,
        base_url: str = API_BASE_URL,
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp client session (caller manages lifecycle,
                timeouts included).
            auth_key: Basic-auth app key (defaults to the Yale Home app).
            base_url: API base URL.
        """
        self._session = session
        self._auth_key = auth_key
        self._base_url = base_url.rstrip("/")

    def _url(self, path: Path) -> str:
        return f"{self._base_url}/{path}/"

    # ── HTTP helpers ─────────────────────────────────────────────────

    async def _request(
        self,
        method: str,
        path: Path,
        *,
        headers: dict[str, str],
        data: dict[str, str] | None,
        decoder: Callable[[Any], _T],
        on_success: Callable[[_T], _U],
    ) -> _U:
        """Issue one request and hand the response to process_response."""
        headers = {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
            **headers,
        }
        if data is not None:
            headers["Content-Type"] = FORM_CONTENT_TYPE

        try:
            async with self._session.request(
                method, self._url(path), headers=headers, data=data
            ) as resp:
                return await process_response(resp, decoder, on_success)
        except aiohttp.ClientError as err:
            raise YaleConnectionError(
                f"Connection error: {method} {path}: {err}"
            ) from err

    @staticmethod
    def _bearer(access_token: AccessToken | None) -> dict[str, str]:
        if access_token is None or not access_token.token:
            raise YalePreconditionError(
                "No access token. Call async_get_access_token() first."
            )
        return {"Authorization": f"Bearer {access_token.token}"}

    # ── Authentication ───────────────────────────────────────────────

    async def async_get_access_token(
        self, username: str, password: str
    ) -> AccessToken:
        """Authenticate with username and password.

        Returns:
            AccessToken with an absolute expiration time.

        Raises:
            YaleApiError: If credentials are invalid.
            YaleConnectionError: If unable to reach the API.
        """
        requested_at = datetime.now(UTC)

        def _on_success(payload: AccessTokenPayload) -> AccessToken:
            _LOGGER.debug("Token acquired, expires in %ss", payload.expires_in)
            return AccessToken.from_payload(payload, now=requested_at)

        return await self._request(
            "POST",
            Path.AUTH,
            headers={"Authorization": f"Basic {self._auth_key}"},
            data={
                "grant_type": "password",
                "username": username,
                "password": password,
            },
            decoder=decode_access_token,
            on_success=_on_success,
        )

    # ── Panel ────────────────────────────────────────────────────────

    async def async_get_status(self, access_token: AccessToken) -> AlarmState:
        """Get the current panel mode.

        Raises:
            YalePreconditionError: If the access token is empty.
            YaleDomainError: If the panel reports an unknown mode.
        """
        headers = self._bearer(access_token)
        return await self._request(
            "GET",
            Path.PANEL_MODE,
            headers=headers,
            data=None,
            decoder=decode_panel_get,
            on_success=alarm_state_from_payload,
        )

    async def async_set_status(
        self, access_token: AccessToken, alarm_state: AlarmState
    ) -> AlarmState:
        """Set the panel mode.

        Returns:
            The requested state, once the panel has acknowledged it.

        Raises:
            YalePreconditionError: If the access token is empty.
            YaleDomainError: If the panel does not acknowledge the change.
        """
        headers = self._bearer(access_token)
        _LOGGER.debug("Requesting panel mode %s", alarm_state)

        def _on_success(ack: PanelAckPayload) -> AlarmState:
            return confirm_alarm_state(alarm_state, ack)

        return await self._request(
            "POST",
            Path.PANEL_MODE,
            headers=headers,
            data={"area": PANEL_AREA, "mode": alarm_state.value},
            decoder=decode_panel_set,
            on_success=_on_success,
        )

    # ── Devices ──────────────────────────────────────────────────────

    async def async_get_devices(self, access_token: AccessToken) -> list[Sensor]:
        """Get contact and motion sensors.

        Devices of any other type are left out of the result.

        Raises:
            YalePreconditionError: If the access token is empty.
        """
        headers = self._bearer(access_token)

        def _on_success(devices: list[DevicePayload]) -> list[Sensor]:
            sensors = parse_sensors(devices)
            _LOGGER.debug(
                "Found %d sensors among %d devices", len(sensors), len(devices)
            )
            return sensors

        return await self._request(
            "GET",
            Path.DEVICE_STATUS,
            headers=headers,
            data=None,
            decoder=decode_devices,
            on_success=_on_success,
        )
