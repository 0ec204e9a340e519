"""Tests for the Radio Thermostat integration setup."""

from unittest.mock import AsyncMock, Mock, patch

import pytest
from homeassistant.exceptions import ConfigEntryNotReady

from custom_components.radiothermostat import (
    PLATFORMS,
    RadioThermostatData,
    async_build_device_info,
    async_setup_entry,
    async_unload_entry,
)
from custom_components.radiothermostat.api import RadioThermostatCommunicationError
from custom_components.radiothermostat.const import (
    CONF_BASE_URL,
    CONF_ENABLE_FAN_INTERFACE,
    DOMAIN,
    MANUFACTURER,
    UNKNOWN,
)
from custom_components.radiothermostat.models import RadioThermostatConfig

from .common import BASE_URL

INIT = "custom_components.radiothermostat"


@pytest.fixture
def mock_hass() -> Mock:
    """Create a mock Home Assistant instance."""
    hass = Mock()
    hass.data = {}
    hass.config_entries = Mock()
    hass.config_entries.async_forward_entry_setups = AsyncMock()
    hass.config_entries.async_unload_platforms = AsyncMock(return_value=True)
    return hass


@pytest.fixture
def mock_device(config: RadioThermostatConfig) -> Mock:
    """Create a mock thermostat device."""
    device = Mock()
    device.config = config
    device.async_get_state = AsyncMock()
    device.async_get_model = AsyncMock(return_value="CT50 V1.94")
    device.async_get_serial_number = AsyncMock(return_value="5cdad4123456")
    device.async_get_firmware = AsyncMock(return_value="1.04.84")
    device.async_probe_humidity = AsyncMock(return_value=True)
    return device


def _entry(data: dict) -> Mock:
    entry = Mock()
    entry.entry_id = "test_entry"
    entry.data = data
    return entry


class TestAsyncBuildDeviceInfo:
    """Tests for async_build_device_info function."""

    @pytest.mark.asyncio
    async def test_device_info_uses_identification_caches(
        self, mock_device: Mock
    ) -> None:
        """Test that model, serial number and firmware are reported."""
        info = await async_build_device_info(mock_device)
        assert info["identifiers"] == {(DOMAIN, "5cdad4123456")}
        assert info["manufacturer"] == MANUFACTURER
        assert info["model"] == "CT50 V1.94"
        assert info["serial_number"] == "5cdad4123456"
        assert info["sw_version"] == "1.04.84"

    @pytest.mark.asyncio
    async def test_device_info_falls_back_to_url(self, mock_device: Mock) -> None:
        """Test that an unknown serial number is not used as identifier."""
        mock_device.async_get_serial_number.return_value = UNKNOWN
        info = await async_build_device_info(mock_device)
        assert info["identifiers"] == {(DOMAIN, BASE_URL)}


class TestAsyncSetupEntry:
    """Tests for async_setup_entry function."""

    @pytest.mark.asyncio
    async def test_async_setup_entry_stores_runtime_data(
        self, mock_hass: Mock, mock_device: Mock
    ) -> None:
        """Test that setup probes the device and forwards platforms."""
        entry = _entry({CONF_BASE_URL: BASE_URL})
        with (
            patch(f"{INIT}.create_session_client", return_value=Mock()),
            patch(f"{INIT}.RadioThermostatDevice", return_value=mock_device),
        ):
            assert await async_setup_entry(mock_hass, entry) is True

        data = mock_hass.data[DOMAIN]["test_entry"]
        assert isinstance(data, RadioThermostatData)
        assert data.device is mock_device
        assert data.humidity_supported is True
        assert data.fan_coordinator is None
        mock_device.async_get_state.assert_awaited_once()
        mock_hass.config_entries.async_forward_entry_setups.assert_awaited_once_with(
            entry, PLATFORMS
        )

    @pytest.mark.asyncio
    async def test_async_setup_entry_creates_fan_coordinator(
        self, mock_hass: Mock, mock_device: Mock
    ) -> None:
        """Test that the fan coordinator exists only when enabled."""
        entry = _entry({CONF_BASE_URL: BASE_URL, CONF_ENABLE_FAN_INTERFACE: True})
        coordinator = Mock()
        coordinator.async_config_entry_first_refresh = AsyncMock()
        with (
            patch(f"{INIT}.create_session_client", return_value=Mock()),
            patch(f"{INIT}.RadioThermostatDevice", return_value=mock_device),
            patch(
                f"{INIT}.RadioThermostatFanCoordinator", return_value=coordinator
            ) as coordinator_cls,
        ):
            assert await async_setup_entry(mock_hass, entry) is True

        coordinator_cls.assert_called_once_with(mock_hass, entry, mock_device)
        coordinator.async_config_entry_first_refresh.assert_awaited_once()
        assert mock_hass.data[DOMAIN]["test_entry"].fan_coordinator is coordinator

    @pytest.mark.asyncio
    async def test_async_setup_entry_fails_without_base_url(
        self, mock_hass: Mock
    ) -> None:
        """Test that a missing base_url aborts setup."""
        assert await async_setup_entry(mock_hass, _entry({})) is False
        mock_hass.config_entries.async_forward_entry_setups.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_async_setup_entry_not_ready_when_unreachable(
        self, mock_hass: Mock, mock_device: Mock
    ) -> None:
        """Test that an unreachable thermostat retries setup later."""
        mock_device.async_get_state.side_effect = RadioThermostatCommunicationError(
            "boom"
        )
        with (
            patch(f"{INIT}.create_session_client", return_value=Mock()),
            patch(f"{INIT}.RadioThermostatDevice", return_value=mock_device),
            pytest.raises(ConfigEntryNotReady),
        ):
            await async_setup_entry(mock_hass, _entry({CONF_BASE_URL: BASE_URL}))


class TestAsyncUnloadEntry:
    """Tests for async_unload_entry function."""

    @pytest.mark.asyncio
    async def test_async_unload_entry_stops_fan_updates(
        self, mock_hass: Mock, mock_device: Mock
    ) -> None:
        """Test that unloading drops runtime data and stops the fan timer."""
        coordinator = Mock()
        coordinator.async_shutdown = AsyncMock()
        mock_hass.data[DOMAIN] = {
            "test_entry": RadioThermostatData(
                device=mock_device,
                device_info={},
                humidity_supported=False,
                fan_coordinator=coordinator,
            )
        }
        assert await async_unload_entry(mock_hass, _entry({})) is True
        coordinator.async_shutdown.assert_awaited_once()
        assert "test_entry" not in mock_hass.data[DOMAIN]

    @pytest.mark.asyncio
    async def test_async_unload_entry_keeps_data_when_platforms_fail(
        self, mock_hass: Mock, mock_device: Mock
    ) -> None:
        """Test that a failed platform unload keeps the runtime data."""
        mock_hass.config_entries.async_unload_platforms.return_value = False
        mock_hass.data[DOMAIN] = {"test_entry": Mock()}
        assert await async_unload_entry(mock_hass, _entry({})) is False
        assert "test_entry" in mock_hass.data[DOMAIN]
