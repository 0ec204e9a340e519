"""Humidity sensor for Radio Thermostat devices."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorStateClass,
)
from homeassistant.const import PERCENTAGE

from .api import RadioThermostatCommunicationError
from .const import DOMAIN

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.device_registry import DeviceInfo
    from homeassistant.helpers.entity_platform import AddEntitiesCallback

    from .device import RadioThermostatDevice

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the humidity sensor when the device reports humidity."""
    entry_data = hass.data[DOMAIN][entry.entry_id]
    if not entry_data.humidity_supported:
        _LOGGER.debug("No humidity support for entry %s", entry.entry_id)
        return

    async_add_entities(
        [RadioThermostatHumiditySensor(entry_data.device, entry_data.device_info)],
        update_before_add=True,
    )


class RadioThermostatHumiditySensor(SensorEntity):
    """Current relative humidity measured by the thermostat."""

    _attr_has_entity_name = True
    _attr_name = "Humidity"
    _attr_device_class = SensorDeviceClass.HUMIDITY
    _attr_state_class = SensorStateClass.MEASUREMENT
    _attr_native_unit_of_measurement = PERCENTAGE

    def __init__(self, device: RadioThermostatDevice, device_info: DeviceInfo) -> None:
        """Initialize the humidity sensor."""
        self._device = device
        self._attr_unique_id = f"{device.config.base_url}_humidity"
        self._attr_device_info = device_info

    async def async_update(self) -> None:
        """Read the current humidity from the device."""
        try:
            humidity = await self._device.async_get_humidity()
        except RadioThermostatCommunicationError as err:
            if self._attr_available:
                _LOGGER.warning(
                    "Could not read humidity of %s: %s", self._device.config.name, err
                )
            self._attr_available = False
            return

        self._attr_available = True
        self._attr_native_value = humidity
