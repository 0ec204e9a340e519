from __future__ import annotations

import logging
from dataclasses import dataclass

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import Platform
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import ConfigEntryNotReady
from homeassistant.helpers.device_registry import DeviceInfo

from .api import RadioThermostatCommunicationError, create_session_client
from .const import DOMAIN, MANUFACTURER, UNKNOWN
from .coordinator import RadioThermostatFanCoordinator
from .device import RadioThermostatDevice
from .models import RadioThermostatConfig

_LOGGER = logging.getLogger(__name__)

PLATFORMS = [Platform.CLIMATE, Platform.FAN, Platform.SELECT, Platform.SENSOR]


@dataclass
class RadioThermostatData:
    """Runtime data shared by the platforms of one config entry."""

    device: RadioThermostatDevice
    device_info: DeviceInfo
    humidity_supported: bool
    fan_coordinator: RadioThermostatFanCoordinator | None = None


async def async_build_device_info(device: RadioThermostatDevice) -> DeviceInfo:
    """Collect identification fields for the device registry."""
    serial_number = await device.async_get_serial_number()
    identifier = device.config.base_url if serial_number == UNKNOWN else serial_number
    return DeviceInfo(
        identifiers={(DOMAIN, identifier)},
        name=device.config.name,
        manufacturer=MANUFACTURER,
        model=await device.async_get_model(),
        serial_number=serial_number,
        sw_version=await device.async_get_firmware(),
        configuration_url=device.config.base_url,
    )


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    _LOGGER.info(
        "Setting up Radio Thermostat integration for entry %s", entry.entry_id
    )

    try:
        config = RadioThermostatConfig.from_mapping(entry.data)
    except ValueError as err:
        _LOGGER.error("Invalid configuration for entry %s: %s", entry.entry_id, err)
        return False

    session = create_session_client(hass)
    device = RadioThermostatDevice(session, config)

    try:
        await device.async_get_state()
    except RadioThermostatCommunicationError as err:
        raise ConfigEntryNotReady(
            f"Cannot reach thermostat at {config.base_url}: {err}"
        ) from err

    device_info = await async_build_device_info(device)
    humidity_supported = await device.async_probe_humidity()
    _LOGGER.debug(
        "Humidity %s supported by %s",
        "is" if humidity_supported else "is not",
        config.name,
    )

    fan_coordinator = None
    if config.enable_fan_interface:
        fan_coordinator = RadioThermostatFanCoordinator(hass, entry, device)
        await fan_coordinator.async_config_entry_first_refresh()

    hass.data.setdefault(DOMAIN, {})[entry.entry_id] = RadioThermostatData(
        device=device,
        device_info=device_info,
        humidity_supported=humidity_supported,
        fan_coordinator=fan_coordinator,
    )

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    _LOGGER.info(
        "Successfully setup Radio Thermostat integration for entry %s", entry.entry_id
    )
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    _LOGGER.info(
        "Unloading Radio Thermostat integration for entry %s", entry.entry_id
    )

    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    if not unload_ok:
        _LOGGER.warning("Failed to unload some platforms for entry %s", entry.entry_id)
        return False

    data: RadioThermostatData | None = hass.data.get(DOMAIN, {}).pop(
        entry.entry_id, None
    )
    if data is not None and data.fan_coordinator is not None:
        await data.fan_coordinator.async_shutdown()
        _LOGGER.debug("Stopped fan updates for entry %s", entry.entry_id)

    _LOGGER.info(
        "Successfully unloaded Radio Thermostat integration for entry %s",
        entry.entry_id,
    )
    return True
