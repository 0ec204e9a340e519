"""Data models for Radio Thermostat integration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .const import (
    CONF_BASE_URL,
    CONF_ENABLE_FAN_INTERFACE,
    CONF_MIN_POLL_INTERVAL,
    DEFAULT_MIN_POLL_INTERVAL,
    DEFAULT_NAME,
    MIN_POLL_INTERVAL_LOWER,
    MIN_POLL_INTERVAL_UPPER,
    CurrentState,
    FanMode,
    FanState,
    TargetMode,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class ThermostatState:
    """Immutable snapshot of the ``/tstat`` resource.

    Temperatures are in Fahrenheit, as reported by the device. The device only
    reports the setpoint of the active mode, so ``t_heat`` and ``t_cool`` may be
    missing.
    """

    tstate: CurrentState
    tmode: TargetMode
    temp: float
    t_heat: float | None = None
    t_cool: float | None = None
    fstate: FanState | None = None
    fmode: FanMode | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ThermostatState:
        """Decode a ``/tstat`` response.

        Raises:
            KeyError: If a mandatory field is missing.
            ValueError: If a field holds an unexpected value.
            TypeError: If a field holds an unexpected type.

        """
        fstate = data.get("fstate")
        fmode = data.get("fmode")
        return cls(
            tstate=CurrentState(data["tstate"]),
            tmode=TargetMode(data["tmode"]),
            temp=float(data["temp"]),
            t_heat=_optional_float(data.get("t_heat")),
            t_cool=_optional_float(data.get("t_cool")),
            fstate=None if fstate is None else FanState(fstate),
            fmode=None if fmode is None else FanMode(fmode),
        )


@dataclass(frozen=True, slots=True)
class SystemInfo:
    """Identification fields of the ``/sys`` resource."""

    serial_number: str
    firmware: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SystemInfo:
        """Decode a ``/sys`` response."""
        return cls(serial_number=str(data["uuid"]), firmware=str(data["fw_version"]))


@dataclass(frozen=True)
class RadioThermostatConfig:
    """Normalised configuration of one thermostat.

    Attributes:
        base_url: Device endpoint root, without trailing slash.
        name: Display name of the thermostat.
        min_poll_interval: Minimum time between state fetches, in milliseconds.
        enable_fan_interface: Whether to expose the fan entity.

    """

    base_url: str
    name: str = DEFAULT_NAME
    min_poll_interval: int = DEFAULT_MIN_POLL_INTERVAL
    enable_fan_interface: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RadioThermostatConfig:
        """Build a config from config entry data, applying defaults and limits.

        Raises:
            ValueError: If ``base_url`` is missing or empty.

        """
        base_url = data.get(CONF_BASE_URL)
        if not base_url:
            error_msg = f'"{CONF_BASE_URL}" must be defined in the config'
            raise ValueError(error_msg)

        return cls(
            base_url=str(base_url).rstrip("/"),
            name=data.get("name") or DEFAULT_NAME,
            min_poll_interval=clamp_poll_interval(data.get(CONF_MIN_POLL_INTERVAL)),
            enable_fan_interface=bool(data.get(CONF_ENABLE_FAN_INTERFACE, False)),
        )


def clamp_poll_interval(value: float | None) -> int:
    """Return the minimum poll interval in milliseconds, clamped to its limits."""
    if value is None:
        return DEFAULT_MIN_POLL_INTERVAL
    return max(MIN_POLL_INTERVAL_LOWER, min(MIN_POLL_INTERVAL_UPPER, int(value)))


def _optional_float(value: Any) -> float | None:  # noqa: ANN401
    return None if value is None else float(value)
