"""Coordinator for Radio Thermostat fan state."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed

from .api import RadioThermostatCommunicationError
from .const import DOMAIN, FAN_UPDATE_INTERVAL

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant

    from .device import RadioThermostatDevice

_LOGGER = logging.getLogger(__name__)


class RadioThermostatFanCoordinator(DataUpdateCoordinator[bool]):
    """Coordinator that pushes the fan state on a fixed interval.

    Fan changes triggered by the device schedule are otherwise invisible, so
    listeners are notified on every tick whether or not the value changed.
    """

    def __init__(
        self,
        hass: HomeAssistant,
        config_entry: ConfigEntry,
        device: RadioThermostatDevice,
    ) -> None:
        """Initialize the coordinator."""
        super().__init__(
            hass,
            _LOGGER,
            config_entry=config_entry,
            name=f"{DOMAIN}_fan",
            update_interval=timedelta(seconds=FAN_UPDATE_INTERVAL),
            always_update=True,
        )
        self.device = device

    async def _async_update_data(self) -> bool:
        """Read the fan state through the device cache."""
        try:
            active = await self.device.async_get_fan_active()
        except RadioThermostatCommunicationError as err:
            raise UpdateFailed(f"Connection error while polling fan: {err}") from err

        _LOGGER.debug("Fan state update for %s: %s", self.device.config.name, active)
        return active
