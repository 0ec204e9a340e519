"""API client for Radio Thermostat devices.

This module provides functions to interact with the thermostat's local
HTTP+JSON interface. Every request is a single attempt; retrying is left to
the caller.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import httpx
from homeassistant.helpers.httpx_client import create_async_httpx_client

from .const import ENDPOINT_HUMIDITY, ENDPOINT_MODEL, ENDPOINT_STATE, ENDPOINT_SYS
from .models import SystemInfo, ThermostatState

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant

_LOGGER = logging.getLogger(__name__)


class RadioThermostatCommunicationError(Exception):
    """Exception raised when the thermostat cannot be talked to.

    Covers non-2xx responses, transport errors and undecodable bodies alike.

    Attributes:
        url: The URL of the failing request.
        status: The HTTP status code, or None when no response was received.

    """

    def __init__(
        self, message: str, url: str | None = None, status: int | None = None
    ) -> None:
        """Initialize the error with the failing URL and status."""
        super().__init__(message)
        self.url = url
        self.status = status


def is_success(status: int) -> bool:
    """Check if HTTP status code is in the 2xx success range.

    Args:
        status: HTTP status code to check.

    Returns:
        True if status code is between 200 and 299, False otherwise.

    """
    return 200 <= status < 300  # noqa: PLR2004


def validate_response(response: httpx.Response, url: str) -> Any:  # noqa: ANN401
    """Validate HTTP response and return parsed JSON data.

    Args:
        response: HTTP response object to validate.
        url: Requested URL, used for error reporting.

    Returns:
        Parsed JSON data from response.

    Raises:
        RadioThermostatCommunicationError: If the status is not 2xx or the body
            is not valid JSON.

    """
    status = response.status_code
    if not is_success(status):
        _LOGGER.error("Request to %s status: %s", url, status)
        error_msg = f"Request to {url} failed: {status}"
        raise RadioThermostatCommunicationError(error_msg, url, status)

    try:
        return response.json()
    except ValueError as err:
        _LOGGER.error("Request to %s status: %s, invalid JSON body", url, status)
        error_msg = f"Invalid JSON from {url}: {err}"
        raise RadioThermostatCommunicationError(error_msg, url, status) from err


def create_session_client(hass: HomeAssistant) -> httpx.AsyncClient:
    """Create HTTP client for talking to the thermostat.

    Args:
        hass: Home Assistant instance.

    Returns:
        Configured httpx AsyncClient.

    """
    return create_async_httpx_client(hass)


async def async_request(
    session: httpx.AsyncClient,
    base_url: str,
    path: str,
    method: str = "GET",
    body: str | None = None,
) -> Any:  # noqa: ANN401
    """Perform one request against the thermostat.

    Args:
        session: HTTP client session.
        base_url: Device endpoint root.
        path: Path relative to ``base_url``.
        method: HTTP method.
        body: Optional raw JSON body.

    Returns:
        Decoded JSON value.

    Raises:
        RadioThermostatCommunicationError: On any failure.

    """
    url = f"{base_url}{path}"
    _LOGGER.debug("%s %s %s", method, url, body or "")

    try:
        response = await session.request(method, url, content=body)
    except httpx.HTTPError as err:
        _LOGGER.error("Request to %s status: %s", url, err)
        error_msg = f"Request to {url} failed: {err}"
        raise RadioThermostatCommunicationError(error_msg, url) from err

    return validate_response(response, url)


def _decode(decoder: Any, data: Any, url: str) -> Any:  # noqa: ANN401
    try:
        return decoder(data)
    except (KeyError, TypeError, ValueError, AttributeError) as err:
        _LOGGER.error("Unexpected response from %s: %s", url, data)
        error_msg = f"Unexpected response from {url}: {err}"
        raise RadioThermostatCommunicationError(error_msg, url) from err


async def async_get_state(
    session: httpx.AsyncClient, base_url: str
) -> ThermostatState:
    """Fetch the full thermostat state.

    Raises:
        RadioThermostatCommunicationError: If the request or decoding fails.

    """
    data = await async_request(session, base_url, ENDPOINT_STATE)
    return _decode(ThermostatState.from_dict, data, f"{base_url}{ENDPOINT_STATE}")


async def async_update_state(
    session: httpx.AsyncClient, base_url: str, payload: dict[str, int]
) -> None:
    """Send a partial update of the thermostat state.

    Args:
        session: HTTP client session.
        base_url: Device endpoint root.
        payload: One-key object such as ``{"tmode": 1}``.

    Raises:
        RadioThermostatCommunicationError: If the request fails.

    """
    await async_request(
        session, base_url, ENDPOINT_STATE, method="POST", body=json.dumps(payload)
    )


async def async_get_model(session: httpx.AsyncClient, base_url: str) -> str:
    """Fetch the device model name."""
    data = await async_request(session, base_url, ENDPOINT_MODEL)
    return _decode(lambda d: str(d["model"]), data, f"{base_url}{ENDPOINT_MODEL}")


async def async_get_sys_info(session: httpx.AsyncClient, base_url: str) -> SystemInfo:
    """Fetch serial number and firmware version."""
    data = await async_request(session, base_url, ENDPOINT_SYS)
    return _decode(SystemInfo.from_dict, data, f"{base_url}{ENDPOINT_SYS}")


async def async_get_humidity(
    session: httpx.AsyncClient, base_url: str
) -> float | None:
    """Fetch relative humidity.

    Returns:
        The humidity in percent, or None when the response carries no value.
        Devices without a humidity sensor report a negative value.

    """
    data = await async_request(session, base_url, ENDPOINT_HUMIDITY)
    humidity = data.get("humidity") if isinstance(data, dict) else None
    if humidity is None:
        return None
    return _decode(float, humidity, f"{base_url}{ENDPOINT_HUMIDITY}")
