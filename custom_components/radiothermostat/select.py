"""Temperature display units select for Radio Thermostat devices."""

from __future__ import annotations

from typing import TYPE_CHECKING

from homeassistant.components.select import SelectEntity
from homeassistant.const import EntityCategory, UnitOfTemperature

from .const import DOMAIN

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.device_registry import DeviceInfo
    from homeassistant.helpers.entity_platform import AddEntitiesCallback

    from .device import RadioThermostatDevice


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the display units select."""
    entry_data = hass.data[DOMAIN][entry.entry_id]
    async_add_entities(
        [RadioThermostatDisplayUnitsSelect(entry_data.device, entry_data.device_info)]
    )


class RadioThermostatDisplayUnitsSelect(SelectEntity):
    """Display units of the thermostat, which only offers Fahrenheit."""

    _attr_has_entity_name = True
    _attr_name = "Temperature display units"
    _attr_entity_category = EntityCategory.CONFIG
    _attr_should_poll = False
    _attr_options = [UnitOfTemperature.FAHRENHEIT]

    def __init__(self, device: RadioThermostatDevice, device_info: DeviceInfo) -> None:
        """Initialize the display units select."""
        self._device = device
        self._attr_unique_id = f"{device.config.base_url}_display_units"
        self._attr_device_info = device_info

    @property
    def current_option(self) -> str:
        """Return the display units reported by the device."""
        return self._device.display_units

    async def async_select_option(self, option: str) -> None:
        """Accept the selection; the display units never change."""
        self._device.set_display_units(option)
        self.async_write_ha_state()
