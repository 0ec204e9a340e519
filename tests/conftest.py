"""Pytest configuration and fixtures for Radio Thermostat tests."""

from unittest.mock import Mock

import httpx
import pytest

from custom_components.radiothermostat.models import RadioThermostatConfig

from .common import BASE_URL, FakeClock


@pytest.fixture
def fake_clock() -> FakeClock:
    """Fixture providing a controllable monotonic clock."""
    return FakeClock()


@pytest.fixture
def mock_session() -> Mock:
    """Create a mock HTTP session."""
    return Mock(spec=httpx.AsyncClient)


@pytest.fixture
def config() -> RadioThermostatConfig:
    """Fixture providing a thermostat configuration with default options."""
    return RadioThermostatConfig(base_url=BASE_URL, name="Hallway")


@pytest.fixture
def sample_state_response() -> dict:
    """Fixture providing a sample /tstat response.

    Returns:
        A dictionary representing a thermostat in heating mode.

    """
    return {
        "temp": 68.5,
        "tmode": 1,
        "fmode": 0,
        "override": 0,
        "hold": 0,
        "t_heat": 70.0,
        "tstate": 1,
        "fstate": 0,
        "time": {"day": 3, "hour": 19, "minute": 4},
        "t_type_post": 0,
    }


@pytest.fixture
def sample_sys_response() -> dict:
    """Fixture providing a sample /sys response."""
    return {
        "uuid": "5cdad4123456",
        "api_version": 113,
        "fw_version": "1.04.84",
        "wlan_fw_version": "v10.105576",
    }
