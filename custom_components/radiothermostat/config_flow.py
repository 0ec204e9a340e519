"""
Configuration flow for Radio Thermostat integration.

This module handles the setup of a thermostat through Home Assistant's
config flow system. The device is probed before the entry is created.
"""

import logging
from typing import Any

import voluptuous as vol
from homeassistant.config_entries import ConfigFlow, ConfigFlowResult
from homeassistant.const import CONF_NAME
from homeassistant.helpers.httpx_client import get_async_client

from . import api
from .const import (
    CONF_BASE_URL,
    CONF_ENABLE_FAN_INTERFACE,
    CONF_MIN_POLL_INTERVAL,
    DEFAULT_MIN_POLL_INTERVAL,
    DEFAULT_NAME,
    DOMAIN,
    ERROR_CANNOT_CONNECT,
    ERROR_UNKNOWN,
)
from .models import clamp_poll_interval

_LOGGER = logging.getLogger(__name__)


class RadioThermostatConfigFlow(ConfigFlow, domain=DOMAIN):
    """Handle configuration flow for Radio Thermostat integration."""

    VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """
        Handle the initial step of the config flow.

        Args:
            user_input: User input data containing the device URL and options.

        Returns:
            ConfigFlowResult indicating the next step or errors.

        """
        errors: dict[str, str] = {}

        if user_input is not None:
            base_url = user_input[CONF_BASE_URL].rstrip("/")

            try:
                session = get_async_client(self.hass)
                sys_info = await api.async_get_sys_info(session, base_url)
                _LOGGER.info("Found Radio Thermostat %s", sys_info.serial_number)

            except api.RadioThermostatCommunicationError:
                _LOGGER.exception("Connection error (%s)", ERROR_CANNOT_CONNECT)
                errors["base"] = ERROR_CANNOT_CONNECT
            except Exception:
                _LOGGER.exception(
                    "Unexpected error while probing the thermostat (%s)",
                    ERROR_UNKNOWN,
                )
                errors["base"] = ERROR_UNKNOWN

            else:
                await self.async_set_unique_id(sys_info.serial_number)
                self._abort_if_unique_id_configured()

                name = user_input.get(CONF_NAME) or DEFAULT_NAME
                return self.async_create_entry(
                    title=name,
                    data={
                        CONF_BASE_URL: base_url,
                        CONF_NAME: name,
                        CONF_MIN_POLL_INTERVAL: clamp_poll_interval(
                            user_input.get(CONF_MIN_POLL_INTERVAL)
                        ),
                        CONF_ENABLE_FAN_INTERFACE: user_input.get(
                            CONF_ENABLE_FAN_INTERFACE, False
                        ),
                    },
                )

        return self.async_show_form(
            step_id="user",
            data_schema=vol.Schema(
                {
                    vol.Required(CONF_BASE_URL): str,
                    vol.Optional(CONF_NAME, default=DEFAULT_NAME): str,
                    vol.Optional(
                        CONF_MIN_POLL_INTERVAL, default=DEFAULT_MIN_POLL_INTERVAL
                    ): vol.Coerce(int),
                    vol.Optional(CONF_ENABLE_FAN_INTERFACE, default=False): bool,
                }
            ),
            errors=errors,
        )
