"""Climate entity for Radio Thermostat devices.

The entity polls the device through the shared state cache. Only OFF, HEAT
and COOL are offered; AUTO set on the device itself is resolved on read.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from homeassistant.components.climate import (
    ClimateEntity,
    ClimateEntityFeature,
    HVACAction,
    HVACMode,
)
from homeassistant.const import ATTR_TEMPERATURE, UnitOfTemperature
from homeassistant.exceptions import HomeAssistantError

from .api import RadioThermostatCommunicationError
from .const import (
    DOMAIN,
    HVAC_ACTION_MAP,
    HVAC_MODE_MAP,
    HVAC_MODE_REVERSE_MAP,
    TARGET_TEMPERATURE_STEP,
    CurrentState,
)
from .device import device_setpoint, fahrenheit_to_celsius

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
    """Set up the climate entity for a Radio Thermostat."""
    entry_data = hass.data[DOMAIN][entry.entry_id]
    async_add_entities(
        [RadioThermostatClimateEntity(entry_data.device, entry_data.device_info)],
        update_before_add=True,
    )


class RadioThermostatClimateEntity(ClimateEntity):
    """Climate entity for Radio Thermostat devices.

    Temperatures are exposed in Celsius and converted from the device's
    Fahrenheit values.
    """

    _attr_temperature_unit = UnitOfTemperature.CELSIUS
    _attr_target_temperature_step = TARGET_TEMPERATURE_STEP
    _attr_has_entity_name = True
    _attr_name = None
    _attr_should_poll = True
    _attr_hvac_modes = list(HVAC_MODE_MAP)
    _attr_supported_features = (
        ClimateEntityFeature.TARGET_TEMPERATURE
        | ClimateEntityFeature.TURN_OFF
        | ClimateEntityFeature.TURN_ON
    )
    _attr_min_temp = 7.0
    _attr_max_temp = 35.0

    def __init__(self, device: RadioThermostatDevice, device_info: DeviceInfo) -> None:
        """Initialize the climate entity.

        Args:
            device: Cached access to the thermostat.
            device_info: Registry information shared by all entities.

        """
        self._device = device
        self._attr_unique_id = f"{device.config.base_url}_climate"
        self._attr_device_info = device_info
        self._attr_hvac_mode = HVACMode.OFF
        self._attr_hvac_action = None
        self._attr_current_temperature = None
        self._attr_target_temperature = None

    async def async_update(self) -> None:
        """Refresh all values; the device cache collapses them into one request."""
        try:
            current_state = await self._device.async_get_current_state()
            target_mode = await self._device.async_get_target_mode()
            current_temperature = await self._device.async_get_current_temperature()
            target_temperature = await self._device.async_get_target_temperature()
        except RadioThermostatCommunicationError as err:
            if self._attr_available:
                _LOGGER.warning(
                    "Lost connection to %s: %s", self._device.config.name, err
                )
            self._attr_available = False
            return

        self._attr_available = True
        self._attr_hvac_mode = HVAC_MODE_REVERSE_MAP[target_mode]
        self._attr_hvac_action = self._map_hvac_action(current_state)
        self._attr_current_temperature = current_temperature
        self._attr_target_temperature = target_temperature

    def _map_hvac_action(self, current_state: CurrentState) -> HVACAction:
        if current_state == CurrentState.OFF and self._attr_hvac_mode == HVACMode.OFF:
            return HVACAction.OFF
        return HVAC_ACTION_MAP[current_state]

    async def async_set_hvac_mode(self, hvac_mode: HVACMode) -> None:
        """Set the HVAC mode and pick up the setpoint that comes with it.

        Args:
            hvac_mode: The HVAC mode to set.

        """
        if hvac_mode not in HVAC_MODE_MAP:
            error_msg = f"Unsupported HVAC mode: {hvac_mode}"
            raise HomeAssistantError(error_msg)

        try:
            target_temperature = await self._device.async_set_target_mode(
                HVAC_MODE_MAP[hvac_mode]
            )
        except RadioThermostatCommunicationError as err:
            error_msg = f"Failed to set HVAC mode of {self._device.config.name}"
            raise HomeAssistantError(error_msg) from err

        self._attr_hvac_mode = hvac_mode
        self._attr_target_temperature = target_temperature
        self.async_write_ha_state()

    async def async_set_temperature(self, **kwargs: Any) -> None:  # noqa: ANN401
        """Set the target temperature.

        Args:
            **kwargs: Keyword arguments containing temperature data.

        """
        temperature = kwargs.get(ATTR_TEMPERATURE)
        if temperature is None:
            return

        try:
            sent = await self._device.async_set_target_temperature(temperature)
        except RadioThermostatCommunicationError as err:
            error_msg = f"Failed to set temperature of {self._device.config.name}"
            raise HomeAssistantError(error_msg) from err

        if sent:
            self._attr_target_temperature = fahrenheit_to_celsius(
                device_setpoint(temperature)
            )
            self.async_write_ha_state()

    async def async_turn_on(self) -> None:
        """Turn the thermostat on in heating mode."""
        await self.async_set_hvac_mode(HVACMode.HEAT)

    async def async_turn_off(self) -> None:
        """Turn the thermostat off."""
        await self.async_set_hvac_mode(HVACMode.OFF)
