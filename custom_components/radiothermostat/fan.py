"""Fan entity for Radio Thermostat devices."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from homeassistant.components.fan import FanEntity, FanEntityFeature
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .api import RadioThermostatCommunicationError
from .const import DOMAIN
from .coordinator import RadioThermostatFanCoordinator

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.device_registry import DeviceInfo
    from homeassistant.helpers.entity_platform import AddEntitiesCallback

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the fan entity if the fan interface is enabled."""
    entry_data = hass.data[DOMAIN][entry.entry_id]
    if entry_data.fan_coordinator is None:
        _LOGGER.debug("Fan interface disabled for entry %s", entry.entry_id)
        return

    async_add_entities(
        [RadioThermostatFanEntity(entry_data.fan_coordinator, entry_data.device_info)]
    )


class RadioThermostatFanEntity(
    CoordinatorEntity[RadioThermostatFanCoordinator], FanEntity
):
    """Fan of a Radio Thermostat: on when running, otherwise automatic."""

    _attr_has_entity_name = True
    _attr_name = "Fan"
    _attr_supported_features = FanEntityFeature.TURN_ON | FanEntityFeature.TURN_OFF

    def __init__(
        self, coordinator: RadioThermostatFanCoordinator, device_info: DeviceInfo
    ) -> None:
        """Initialize the fan entity."""
        super().__init__(coordinator)
        self._attr_unique_id = f"{coordinator.device.config.base_url}_fan"
        self._attr_device_info = device_info

    @property
    def is_on(self) -> bool | None:
        """Return True if the fan is active."""
        return self.coordinator.data

    async def _async_set_active(self, active: bool) -> None:  # noqa: FBT001
        try:
            await self.coordinator.device.async_set_fan_active(active)
        except RadioThermostatCommunicationError as err:
            error_msg = f"Failed to set fan of {self.coordinator.device.config.name}"
            raise HomeAssistantError(error_msg) from err

        await self.coordinator.async_request_refresh()

    async def async_turn_on(
        self,
        percentage: int | None = None,
        preset_mode: str | None = None,
        **kwargs: Any,  # noqa: ANN401
    ) -> None:
        """Force the fan on."""
        await self._async_set_active(True)  # noqa: FBT003

    async def async_turn_off(self, **kwargs: Any) -> None:  # noqa: ANN401
        """Return the fan to automatic control."""
        await self._async_set_active(False)  # noqa: FBT003
