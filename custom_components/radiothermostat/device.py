"""State cache and mode translation for a Radio Thermostat device.

All entities of one thermostat read through a single RadioThermostatDevice.
State fetches are throttled to the configured minimum poll interval and
concurrent callers share one in-flight request.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING

from homeassistant.const import UnitOfTemperature

from . import api
from .api import RadioThermostatCommunicationError
from .const import (
    AUTO_COOL_ABOVE,
    AUTO_HEAT_BELOW,
    UNKNOWN,
    FanMode,
    FanState,
    TargetMode,
)
from .models import SystemInfo

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from .const import CurrentState
    from .models import RadioThermostatConfig, ThermostatState

_LOGGER = logging.getLogger(__name__)


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert a Fahrenheit temperature to Celsius."""
    return (fahrenheit - 32) * 5 / 9


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert a Celsius temperature to Fahrenheit."""
    return celsius * 9 / 5 + 32


def device_setpoint(celsius: float) -> int:
    """Return the whole °F setpoint the device stores for a Celsius target."""
    return round(celsius_to_fahrenheit(celsius))


def resolve_auto_mode(temperature: float) -> TargetMode:
    """Pick the mode that replaces AUTO for the given temperature in °F."""
    if temperature < AUTO_HEAT_BELOW:
        return TargetMode.HEAT
    if temperature > AUTO_COOL_ABOVE:
        return TargetMode.COOL
    return TargetMode.OFF


class RadioThermostatDevice:
    """Cached, single-flight access to one thermostat.

    The cache holds the last successfully fetched snapshot and the time the
    fetch started. A refresh happens only when no snapshot exists or the snapshot
    is older than the minimum poll interval. Writes do not touch the cache.
    Failed refreshes leave the cache untouched.
    """

    def __init__(
        self,
        session: httpx.AsyncClient,
        config: RadioThermostatConfig,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the device.

        Args:
            session: HTTP client session for device requests.
            config: Normalised thermostat configuration.
            monotonic: Clock used to age the cached state, in seconds.

        """
        self._session = session
        self._config = config
        self._monotonic = monotonic

        self._snapshot: ThermostatState | None = None
        self._fetched_at: float | None = None
        self._gate = asyncio.Lock()

        self._model: str | None = None
        self._sys_info: SystemInfo | None = None

    @property
    def config(self) -> RadioThermostatConfig:
        """Return the thermostat configuration."""
        return self._config

    @property
    def snapshot(self) -> ThermostatState | None:
        """Return the last fetched state without touching the device."""
        return self._snapshot

    @property
    def fetched_at(self) -> float | None:
        """Return the monotonic time of the last successful fetch."""
        return self._fetched_at

    @property
    def in_flight(self) -> bool:
        """Return True while a state refresh is running."""
        return self._gate.locked()

    def _is_fresh(self, now: float) -> bool:
        if self._snapshot is None or self._fetched_at is None:
            return False
        return (now - self._fetched_at) * 1000 <= self._config.min_poll_interval

    async def async_get_state(self) -> ThermostatState:
        """Return the device state, fetching it only when the cache is too old.

        Raises:
            RadioThermostatCommunicationError: If a needed fetch fails.

        """
        async with self._gate:
            started = self._monotonic()
            if self._is_fresh(started):
                return self._snapshot

            snapshot = await api.async_get_state(self._session, self._config.base_url)
            self._snapshot = snapshot
            self._fetched_at = started
            _LOGGER.debug("Fetched state from %s: %s", self._config.base_url, snapshot)
            return snapshot

    async def _async_update(self, key: str, value: int) -> None:
        await api.async_update_state(
            self._session, self._config.base_url, {key: value}
        )

    async def async_get_current_state(self) -> CurrentState:
        """Return what the HVAC system is doing right now."""
        state = await self.async_get_state()
        _LOGGER.debug("Current heating/cooling state: %s", state.tstate)
        return state.tstate

    async def async_get_target_mode(self) -> TargetMode:
        """Return the target mode, replacing AUTO on the device if needed.

        The device's AUTO mode gives no usable setpoint, so it is resolved from
        the current temperature and the resolved mode is written back.
        """
        state = await self.async_get_state()
        mode = state.tmode
        if mode == TargetMode.AUTO:
            mode = resolve_auto_mode(state.temp)
            _LOGGER.info(
                "Thermostat %s is in AUTO at %s°F, switching to %s",
                self._config.name,
                state.temp,
                mode.name,
            )
            await self._async_update("tmode", int(mode))
        _LOGGER.debug("Target heating/cooling state: %s", mode)
        return mode

    async def async_set_target_mode(self, mode: TargetMode) -> float:
        """Set the target mode and return the target temperature it brings.

        Returns:
            The target temperature in Celsius after the mode change.

        """
        _LOGGER.debug("Setting target heating/cooling state: %s", mode)
        await self._async_update("tmode", int(mode))
        # served from the cache while it is within the poll interval
        return await self.async_get_target_temperature()

    async def async_get_current_temperature(self) -> float:
        """Return the current temperature in Celsius."""
        state = await self.async_get_state()
        _LOGGER.debug("Current temperature: %s°F", state.temp)
        return fahrenheit_to_celsius(state.temp)

    async def async_get_target_temperature(self) -> float:
        """Return the setpoint of the active mode in Celsius.

        Without a heating or cooling setpoint the current temperature is used.
        """
        state = await self.async_get_state()
        target = state.temp
        if state.tmode == TargetMode.HEAT and state.t_heat is not None:
            target = state.t_heat
        elif state.tmode == TargetMode.COOL and state.t_cool is not None:
            target = state.t_cool
        _LOGGER.debug("Target temperature: %s°F", target)
        return fahrenheit_to_celsius(target)

    async def async_set_target_temperature(self, celsius: float) -> bool:
        """Set the setpoint of the active mode.

        Only a temporary setpoint: a mode change or the device schedule resets
        it. Nothing is sent unless the target mode is HEAT or COOL.

        Returns:
            True if an update was sent to the device.

        """
        target = device_setpoint(celsius)
        _LOGGER.debug("Setting target temperature: %s°F", target)

        state = await self.async_get_state()
        if state.tmode == TargetMode.HEAT:
            await self._async_update("t_heat", target)
            return True
        if state.tmode == TargetMode.COOL:
            await self._async_update("t_cool", target)
            return True

        _LOGGER.debug("Ignoring target temperature in mode %s", state.tmode.name)
        return False

    @property
    def display_units(self) -> UnitOfTemperature:
        """Return the display units; the device is Fahrenheit-native."""
        return UnitOfTemperature.FAHRENHEIT

    def set_display_units(self, value: str) -> None:
        """Accept a display units change without applying it."""
        _LOGGER.debug("Ignoring display units change to %s", value)

    async def async_get_fan_active(self) -> bool:
        """Return True if the fan is running or forced on."""
        state = await self.async_get_state()
        _LOGGER.debug("Fan state: %s, fan mode: %s", state.fstate, state.fmode)
        return state.fstate == FanState.ON or state.fmode == FanMode.ON

    async def async_set_fan_active(self, active: bool) -> None:  # noqa: FBT001
        """Force the fan on, or hand it back to automatic control."""
        fmode = FanMode.ON if active else FanMode.AUTO
        _LOGGER.debug("Setting fan mode: %s", fmode.name)
        await self._async_update("fmode", int(fmode))

    async def async_get_humidity(self) -> float | None:
        """Return the current relative humidity."""
        humidity = await api.async_get_humidity(self._session, self._config.base_url)
        _LOGGER.debug("Current relative humidity: %s", humidity)
        return humidity

    async def async_probe_humidity(self) -> bool:
        """Check once whether the device reports humidity."""
        try:
            humidity = await self.async_get_humidity()
        except RadioThermostatCommunicationError:
            _LOGGER.warning(
                "Humidity probe failed for %s, assuming it is unsupported",
                self._config.name,
            )
            return False
        return humidity is not None and humidity >= 0

    async def async_get_model(self) -> str:
        """Return the model name, probing the device the first time."""
        if self._model is None:
            try:
                self._model = await api.async_get_model(
                    self._session, self._config.base_url
                )
            except RadioThermostatCommunicationError:
                _LOGGER.warning("Could not read model of %s", self._config.name)
                self._model = UNKNOWN
        return self._model

    async def _async_get_sys_info(self) -> SystemInfo:
        if self._sys_info is None:
            try:
                self._sys_info = await api.async_get_sys_info(
                    self._session, self._config.base_url
                )
            except RadioThermostatCommunicationError:
                _LOGGER.warning("Could not read system info of %s", self._config.name)
                self._sys_info = SystemInfo(serial_number=UNKNOWN, firmware=UNKNOWN)
        return self._sys_info

    async def async_get_serial_number(self) -> str:
        """Return the serial number, probing the device the first time."""
        return (await self._async_get_sys_info()).serial_number

    async def async_get_firmware(self) -> str:
        """Return the firmware version, probing the device the first time."""
        return (await self._async_get_sys_info()).firmware
