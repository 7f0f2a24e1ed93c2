"""Host backend - reports the machine devsnap runs on using psutil and socket.

Each network interface becomes a network handle. Transport is inferred from
the interface name, bandwidth from the link speed, and the legacy info
object from the interface state, so both resolution strategies have data
to work with. The host has no telephony service and grants no permissions.
"""

from __future__ import annotations

import locale
import platform
import re
import socket
import time
import uuid
from pathlib import Path

import psutil

from devsnap.backends.base import (
    ConnectivityService,
    DeviceContext,
    DeviceInfoProvider,
    NetworkCapabilities,
    NetworkHandle,
    OSContext,
)
from devsnap.backends.memory import StaticCapabilities, StaticPermissions
from devsnap.models.constants import MODERN_API_LEVEL, TelephonyPolicy
from devsnap.models.device_models import DisplaySize
from devsnap.models.network_models import LegacyNetworkInfo

# Interface name prefixes → transport code (index into TRANSPORT_NAMES)
_TRANSPORT_PREFIXES: tuple[tuple[tuple[str, ...], int], ...] = (
    (("rmnet", "wwan", "ccmni"), 0),
    (("wlan", "wl", "wifi"), 1),
    (("bnep", "bt-pan"), 2),
    (("eth", "en", "usb"), 3),
    (("tun", "tap", "wg", "ppp", "utun", "ipsec"), 4),
    (("aware",), 5),
    (("lowpan", "wpan"), 6),
)

# Transport code → legacy (type, type name)
_LEGACY_TYPES: dict[int, tuple[int, str]] = {
    0: (0, "MOBILE"),
    1: (1, "WIFI"),
    2: (7, "BLUETOOTH"),
    3: (9, "ETHERNET"),
    4: (17, "VPN"),
}

_DMI_DIR = Path("/sys/class/dmi/id")


def _is_loopback(name: str) -> bool:
    return re.fullmatch(r"lo\d*", name) is not None


def _transport_for(name: str) -> int | None:
    """Infer the transport code of an interface from its name."""
    if _is_loopback(name):
        return None
    lowered = name.lower()
    for prefixes, code in _TRANSPORT_PREFIXES:
        if lowered.startswith(prefixes):
            return code
    return None


def _read_dmi(field_name: str) -> str | None:
    try:
        return (_DMI_DIR / field_name).read_text().strip() or None
    except OSError:
        return None


class HostConnectivity(ConnectivityService):
    """Connectivity service over the host's network interfaces.

    Interface state is read once at construction, so every lookup within a
    request sees the same view.
    """

    def __init__(self) -> None:
        self._stats = psutil.net_if_stats()
        self._addrs = psutil.net_if_addrs()

    def list_networks(self) -> list[NetworkHandle]:
        return list(self._addrs)

    def _ipv4_addresses(self, name: str) -> list[str]:
        return [
            addr.address
            for addr in self._addrs.get(name, [])
            if addr.family == socket.AF_INET
        ]

    def capabilities_of(self, handle: NetworkHandle) -> NetworkCapabilities | None:
        name = str(handle)
        if_stats = self._stats.get(name)
        if if_stats is None:
            return None

        transport = _transport_for(name)
        transports = [] if transport is None else [transport]

        capabilities = []
        if if_stats.isup and not _is_loopback(name):
            capabilities.extend([12, 21])  # INTERNET, NOT_SUSPENDED
            if transport in (1, 3):
                capabilities.append(11)  # NOT_METERED
            if transport != 4:
                capabilities.append(15)  # NOT_VPN

        speed_kbps = if_stats.speed * 1000 if if_stats.speed > 0 else -1
        return StaticCapabilities(
            transports=transports,
            capabilities=sorted(capabilities),
            link_upstream_kbps=speed_kbps,
            link_downstream_kbps=speed_kbps,
            fields={"mNetworkSpecifier": name},
        )

    def legacy_info_of(self, handle: NetworkHandle) -> LegacyNetworkInfo | None:
        name = str(handle)
        transport = _transport_for(name)
        if transport not in _LEGACY_TYPES:
            return None

        if_stats = self._stats.get(name)
        is_up = bool(if_stats and if_stats.isup)
        connected = is_up and bool(self._ipv4_addresses(name))
        legacy_type, legacy_name = _LEGACY_TYPES[transport]
        return LegacyNetworkInfo(
            type=legacy_type,
            type_name=legacy_name,
            is_connected=connected,
            is_available=is_up,
            state="CONNECTED" if connected else "DISCONNECTED",
            detailed_state="CONNECTED" if connected else "DISCONNECTED",
            extra_info=", ".join(self._ipv4_addresses(name)) or None,
        )

    def active_network(self) -> NetworkHandle | None:
        """Return the first non-loopback interface that is up."""
        for name, if_stats in self._stats.items():
            if if_stats.isup and not _is_loopback(name):
                return name
        return None


class HostDeviceInfo(DeviceInfoProvider):
    """Identity and locale of the host; hosts report no display."""

    def __init__(self, api_level: int) -> None:
        self._api_level = api_level

    def android_id(self) -> str | None:
        return f"{uuid.getnode():012x}"

    def manufacturer(self) -> str | None:
        return _read_dmi("sys_vendor") or platform.system() or None

    def model_name(self) -> str | None:
        return _read_dmi("product_name") or platform.machine() or None

    def brand(self) -> str | None:
        return platform.system().lower() or None

    def api_version(self) -> str:
        return str(self._api_level)

    def platform_version(self) -> str | None:
        return platform.release() or None

    def carrier_name(self) -> str | None:
        return None

    def real_display_size(self) -> DisplaySize:
        return DisplaySize(width=0, height=0)

    def display_density(self) -> float:
        return 0.0

    def locale(self) -> str | None:
        return locale.getlocale()[0]

    def time_zone(self) -> str | None:
        return time.tzname[time.localtime().tm_isdst > 0] or None


def create_host_context(
    api_level: int = MODERN_API_LEVEL,
    telephony_policy: TelephonyPolicy = TelephonyPolicy.SKIP_WHEN_GRANTED,
    modern_threshold: int = MODERN_API_LEVEL,
) -> DeviceContext:
    """Build collaborators describing the local host.

    Args:
        api_level: API level to report; below modern_threshold the legacy
            strategy is used.
        telephony_policy: Policy for the modern strategy.
        modern_threshold: First API level handled by the modern strategy.
    """
    return DeviceContext(
        device=HostDeviceInfo(api_level),
        connectivity=HostConnectivity(),
        permissions=StaticPermissions(),
        os=OSContext(api_level=api_level, modern_threshold=modern_threshold),
        telephony_policy=telephony_policy,
    )
