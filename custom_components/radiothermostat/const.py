"""Constants for Radio Thermostat integration.

This module contains all the constants used throughout the integration,
including device endpoints, configuration keys, protocol enumerations and
mapping dictionaries.
"""

from enum import IntEnum

from homeassistant.components.climate import HVACAction, HVACMode

DOMAIN = "radiothermostat"
MANUFACTURER = "Radio Thermostat"

ENDPOINT_STATE = "/tstat"
ENDPOINT_MODEL = "/tstat/model"
ENDPOINT_HUMIDITY = "/tstat/humidity"
ENDPOINT_SYS = "/sys"

CONF_BASE_URL = "base_url"
CONF_MIN_POLL_INTERVAL = "min_poll_interval"
CONF_ENABLE_FAN_INTERFACE = "enable_fan_interface"

DEFAULT_NAME = "Thermostat"
DEFAULT_MIN_POLL_INTERVAL = 5000  # milliseconds
MIN_POLL_INTERVAL_LOWER = 3000
MIN_POLL_INTERVAL_UPPER = 15000

FAN_UPDATE_INTERVAL = 15  # seconds

UNKNOWN = "unknown"

# AUTO is resolved against the current temperature (°F)
AUTO_HEAT_BELOW = 60
AUTO_COOL_ABOVE = 85

# setpoints are whole °F, one of which is 5/9 °C
TARGET_TEMPERATURE_STEP = 5 / 9

ERROR_CANNOT_CONNECT = "cannot_connect"
ERROR_UNKNOWN = "unknown_error"


class CurrentState(IntEnum):
    """HVAC activity reported in ``tstate``."""

    OFF = 0
    HEAT = 1
    COOL = 2


class TargetMode(IntEnum):
    """Target operating mode reported in ``tmode``."""

    OFF = 0
    HEAT = 1
    COOL = 2
    AUTO = 3


class FanMode(IntEnum):
    """Fan mode reported in ``fmode``."""

    AUTO = 0
    CIRCULATE = 1
    ON = 2


class FanState(IntEnum):
    """Fan activity reported in ``fstate``."""

    OFF = 0
    ON = 1


HVAC_MODE_MAP = {
    HVACMode.OFF: TargetMode.OFF,
    HVACMode.HEAT: TargetMode.HEAT,
    HVACMode.COOL: TargetMode.COOL,
}
HVAC_MODE_REVERSE_MAP = {value: key for key, value in HVAC_MODE_MAP.items()}
HVAC_ACTION_MAP = {
    CurrentState.OFF: HVACAction.IDLE,
    CurrentState.HEAT: HVACAction.HEATING,
    CurrentState.COOL: HVACAction.COOLING,
}
