"""Shared fixtures: in-memory collaborators for snapshot tests."""

import logging

import pytest

from devsnap.backends.base import DeviceContext, OSContext
from devsnap.backends.memory import (
    DeviceIdentity,
    NetworkEntry,
    StaticCapabilities,
    StaticConnectivity,
    StaticDeviceInfo,
    StaticPermissions,
)
from devsnap.models.constants import READ_PHONE_STATE, TelephonyPolicy
from devsnap.models.device_models import DisplaySize
from devsnap.models.network_models import LegacyNetworkInfo
from devsnap.utils.logger import Logger

TOP_LEVEL_KEYS = {
    "androidId",
    "manufacturer",
    "model",
    "brand",
    "apiVersion",
    "platformVersion",
    "carrierName",
    "realDisplaySize",
    "displayDensity",
    "networks",
    "locale",
    "timeZone",
}


def make_identity(**overrides) -> DeviceIdentity:
    """Identity of a Pixel 7 on API 33, with optional overrides."""
    values = {
        "android_id": "9774d56d682e549c",
        "manufacturer": "Google",
        "model": "Pixel 7",
        "brand": "google",
        "api_version": "33",
        "platform_version": "13",
        "carrier_name": "T-Mobile",
        "display_size": DisplaySize(width=1080, height=2400),
        "display_density": 420,
        "locale": "en_US",
        "time_zone": "America/Los_Angeles",
        "visible_frame_top": 118,
        "status_bar_resource": 84,
    }
    values.update(overrides)
    return DeviceIdentity(**values)


def make_context(
    networks=None,
    *,
    api_level=33,
    granted=(),
    telephony=None,
    active=None,
    policy=TelephonyPolicy.SKIP_WHEN_GRANTED,
    identity=None,
) -> DeviceContext:
    """Build a DeviceContext over in-memory collaborators."""
    return DeviceContext(
        device=StaticDeviceInfo(identity or make_identity()),
        connectivity=StaticConnectivity(networks or {}, active=active),
        permissions=StaticPermissions(granted),
        os=OSContext(api_level=api_level),
        telephony=telephony,
        telephony_policy=policy,
    )


@pytest.fixture
def wifi_caps():
    """Wi-Fi capabilities with SSID and signal strength exposed."""
    return StaticCapabilities(
        transports=[1],
        capabilities=[12, 16],
        link_upstream_kbps=20000,
        link_downstream_kbps=80000,
        fields={"mSSID": '"HomeNet"', "mSignalStrength": -55},
    )


@pytest.fixture
def cell_caps():
    """Cellular capabilities with unknown bandwidth and no private fields."""
    return StaticCapabilities(
        transports=[0], capabilities=[4, 12], link_upstream_kbps=-1
    )


@pytest.fixture
def wifi_legacy():
    """Legacy info of a connected, non-roaming Wi-Fi network."""
    return LegacyNetworkInfo(
        type=1,
        type_name="WIFI",
        is_connected=True,
        is_available=True,
        is_roaming=False,
        state="CONNECTED",
        detailed_state="CONNECTED",
        extra_info='"HomeNet"',
    )


@pytest.fixture
def networks(wifi_caps, cell_caps, wifi_legacy):
    """Two networks: Wi-Fi (caps + legacy) and cellular (caps only)."""
    return {
        "wlan0": NetworkEntry(capabilities=wifi_caps, legacy=wifi_legacy),
        "rmnet0": NetworkEntry(capabilities=cell_caps),
    }


@pytest.fixture
def phone_state_granted():
    """Permissions granting READ_PHONE_STATE."""
    return (READ_PHONE_STATE,)


@pytest.fixture
def reset_logger():
    """Leave the devsnap logger unconfigured before and after a test."""
    Logger._configured = False
    yield
    logger = logging.getLogger("devsnap")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    Logger._configured = False
