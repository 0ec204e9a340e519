"""Shared helpers for Radio Thermostat tests."""

from typing import Any

from custom_components.radiothermostat.const import (
    CurrentState,
    FanMode,
    FanState,
    TargetMode,
)
from custom_components.radiothermostat.models import ThermostatState

BASE_URL = "http://192.168.1.50"


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, now: float = 1000.0) -> None:
        """Start the clock at the given time in seconds."""
        self.now = now

    def __call__(self) -> float:
        """Return the current time."""
        return self.now

    def advance(self, seconds: float) -> None:
        """Move the clock forward."""
        self.now += seconds


def make_state(**overrides: Any) -> ThermostatState:  # noqa: ANN401
    """Create a heating thermostat state, optionally overriding fields.

    Args:
        **overrides: Field values replacing the defaults.

    Returns:
        A ThermostatState snapshot.

    """
    fields = {
        "tstate": CurrentState.HEAT,
        "tmode": TargetMode.HEAT,
        "temp": 68.0,
        "t_heat": 70.0,
        "t_cool": None,
        "fstate": FanState.OFF,
        "fmode": FanMode.AUTO,
    }
    fields.update(overrides)
    return ThermostatState(**fields)
