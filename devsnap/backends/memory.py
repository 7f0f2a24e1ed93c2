"""In-memory collaborators holding fixed values.

Used by the profile and host backends, and handy for embedding devsnap in
another agent that already knows the device state.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from devsnap.backends.base import (
    ConnectivityService,
    DeviceInfoProvider,
    NetworkCapabilities,
    NetworkHandle,
    PermissionChecker,
    TelephonyService,
)
from devsnap.models.device_models import DisplaySize
from devsnap.models.network_models import LegacyNetworkInfo


class StaticCapabilities(NetworkCapabilities):
    """Capability object with fixed transports, capabilities and bandwidth.

    Private platform attributes (``mSSID`` and friends) are set as plain
    instance attributes from ``fields``; omitted ones stay missing.
    """

    def __init__(
        self,
        transports: Iterable[int] = (),
        capabilities: Iterable[int] = (),
        link_upstream_kbps: int = -1,
        link_downstream_kbps: int = -1,
        fields: Mapping[str, Any] | None = None,
    ) -> None:
        self._transports = frozenset(transports)
        self._capabilities = frozenset(capabilities)
        self._link_upstream_kbps = link_upstream_kbps
        self._link_downstream_kbps = link_downstream_kbps
        for name, value in (fields or {}).items():
            setattr(self, name, value)

    def has_transport(self, transport: int) -> bool:
        return transport in self._transports

    def has_capability(self, capability: int) -> bool:
        return capability in self._capabilities

    @property
    def link_upstream_bandwidth_kbps(self) -> int:
        return self._link_upstream_kbps

    @property
    def link_downstream_bandwidth_kbps(self) -> int:
        return self._link_downstream_kbps


@dataclass(frozen=True)
class NetworkEntry:
    """What the platform knows about one network."""

    capabilities: NetworkCapabilities | None = None
    legacy: LegacyNetworkInfo | None = None


class StaticConnectivity(ConnectivityService):
    """Connectivity service over a fixed, ordered set of networks."""

    def __init__(
        self,
        networks: Mapping[NetworkHandle, NetworkEntry] | None = None,
        active: NetworkHandle | None = None,
    ) -> None:
        self._networks = dict(networks or {})
        self._active = active

    def list_networks(self) -> list[NetworkHandle]:
        return list(self._networks)

    def capabilities_of(self, handle: NetworkHandle) -> NetworkCapabilities | None:
        entry = self._networks.get(handle)
        return entry.capabilities if entry else None

    def legacy_info_of(self, handle: NetworkHandle) -> LegacyNetworkInfo | None:
        entry = self._networks.get(handle)
        return entry.legacy if entry else None

    def active_network(self) -> NetworkHandle | None:
        return self._active


class StaticTelephony(TelephonyService):
    """Telephony service with a fixed data state and signal level."""

    def __init__(self, data_state: int, signal_level: int | None = None) -> None:
        self._data_state = data_state
        self._signal_level = signal_level

    def data_state(self) -> int:
        return self._data_state

    def signal_strength_level(self) -> int | None:
        return self._signal_level


class StaticPermissions(PermissionChecker):
    """Grants exactly the listed permissions."""

    def __init__(self, granted: Iterable[str] = ()) -> None:
        self._granted = frozenset(granted)

    def has_permission(self, name: str) -> bool:
        return name in self._granted


@dataclass(frozen=True)
class DeviceIdentity:
    """Identity, display and locale values for StaticDeviceInfo."""

    android_id: str | None
    manufacturer: str | None
    model: str | None
    brand: str | None
    api_version: str
    platform_version: str | None
    carrier_name: str | None
    display_size: DisplaySize
    display_density: float
    locale: str | None
    time_zone: str | None
    visible_frame_top: int | None = None
    status_bar_resource: int | None = None


class StaticDeviceInfo(DeviceInfoProvider):
    """Device info provider backed by a DeviceIdentity."""

    def __init__(self, identity: DeviceIdentity) -> None:
        self.identity = identity

    def android_id(self) -> str | None:
        return self.identity.android_id

    def manufacturer(self) -> str | None:
        return self.identity.manufacturer

    def model_name(self) -> str | None:
        return self.identity.model

    def brand(self) -> str | None:
        return self.identity.brand

    def api_version(self) -> str:
        return self.identity.api_version

    def platform_version(self) -> str | None:
        return self.identity.platform_version

    def carrier_name(self) -> str | None:
        return self.identity.carrier_name

    def real_display_size(self) -> DisplaySize:
        return self.identity.display_size

    def display_density(self) -> float:
        return self.identity.display_density

    def locale(self) -> str | None:
        return self.identity.locale

    def time_zone(self) -> str | None:
        return self.identity.time_zone

    def visible_display_frame_top(self) -> int | None:
        return self.identity.visible_frame_top

    def status_bar_height_resource(self) -> int | None:
        return self.identity.status_bar_resource
