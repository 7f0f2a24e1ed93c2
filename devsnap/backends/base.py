"""Abstract collaborator interfaces for device snapshot backends.

Every platform backend supplies the same small set of read-only services:

- DeviceInfoProvider: identity, display and locale getters
- ConnectivityService: network enumeration and per-network lookups
- TelephonyService: cellular data state (optional)
- PermissionChecker: runtime permission checks

A DeviceContext bundles them for one request. Backends degrade gracefully:
a lookup with nothing to report returns None rather than raising.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from dataclasses import dataclass, field

from devsnap.models.constants import MODERN_API_LEVEL, TelephonyPolicy
from devsnap.models.device_models import DisplaySize
from devsnap.models.network_models import LegacyNetworkInfo

# Opaque identifier for one OS-visible network; only valid for one request
NetworkHandle = Hashable


class NetworkCapabilities(ABC):
    """Platform descriptor of a network's properties.

    Implementations may also carry private attributes (``mSSID``,
    ``mSignalStrength``, ``mNetworkSpecifier``) that only some platform
    versions expose; those are read through devsnap.backends.fields.
    """

    @abstractmethod
    def has_transport(self, transport: int) -> bool:
        """Return True if the network uses the given transport code."""
        pass

    @abstractmethod
    def has_capability(self, capability: int) -> bool:
        """Return True if the given capability code is set."""
        pass

    @property
    @abstractmethod
    def link_upstream_bandwidth_kbps(self) -> int:
        """Upstream bandwidth estimate in kbps, -1 if unknown."""
        pass

    @property
    @abstractmethod
    def link_downstream_bandwidth_kbps(self) -> int:
        """Downstream bandwidth estimate in kbps, -1 if unknown."""
        pass


class ConnectivityService(ABC):
    """Read-only view of the platform connectivity manager."""

    @abstractmethod
    def list_networks(self) -> list[NetworkHandle]:
        """List every network currently known to the platform.

        Returns
        -------
            Network handles in platform order (not stable across calls).
        """
        pass

    @abstractmethod
    def capabilities_of(self, handle: NetworkHandle) -> NetworkCapabilities | None:
        """Get capabilities for a network, or None if it has none (e.g., closed)."""
        pass

    @abstractmethod
    def legacy_info_of(self, handle: NetworkHandle) -> LegacyNetworkInfo | None:
        """Get the legacy connectivity-info object for a network, if any."""
        pass

    @abstractmethod
    def active_network(self) -> NetworkHandle | None:
        """Get the current default network with a one-shot query."""
        pass


class TelephonyService(ABC):
    """Read-only view of the platform telephony manager."""

    @abstractmethod
    def data_state(self) -> int:
        """Get the cellular data-connection state code."""
        pass

    @abstractmethod
    def signal_strength_level(self) -> int | None:
        """Get the cellular signal level (0-4), or None if unavailable."""
        pass


class PermissionChecker(ABC):
    """Runtime permission checks for the reporting process."""

    @abstractmethod
    def has_permission(self, name: str) -> bool:
        """Return True if the named permission is granted."""
        pass


class DeviceInfoProvider(ABC):
    """Identity, display and locale getters for the device."""

    @abstractmethod
    def android_id(self) -> str | None:
        pass

    @abstractmethod
    def manufacturer(self) -> str | None:
        pass

    @abstractmethod
    def model_name(self) -> str | None:
        pass

    @abstractmethod
    def brand(self) -> str | None:
        pass

    @abstractmethod
    def api_version(self) -> str:
        pass

    @abstractmethod
    def platform_version(self) -> str | None:
        pass

    @abstractmethod
    def carrier_name(self) -> str | None:
        pass

    @abstractmethod
    def real_display_size(self) -> DisplaySize:
        pass

    @abstractmethod
    def display_density(self) -> float:
        pass

    @abstractmethod
    def locale(self) -> str | None:
        pass

    @abstractmethod
    def time_zone(self) -> str | None:
        pass

    def visible_display_frame_top(self) -> int | None:
        """Top edge of the visible window frame in pixels, if measurable."""
        return None

    def status_bar_height_resource(self) -> int | None:
        """Status bar height from platform resources, if defined."""
        return None


@dataclass(frozen=True)
class OSContext:
    """Platform version facts used to pick extraction strategies."""

    api_level: int
    modern_threshold: int = MODERN_API_LEVEL

    @property
    def is_modern(self) -> bool:
        """Return True if connectivity is reported through capabilities only."""
        return self.api_level >= self.modern_threshold


@dataclass(frozen=True)
class DeviceContext:
    """Collaborators for one snapshot request.

    Built by the request-handling layer and passed into the builder; nothing
    in it outlives the request.
    """

    device: DeviceInfoProvider
    connectivity: ConnectivityService
    permissions: PermissionChecker
    os: OSContext
    telephony: TelephonyService | None = None
    telephony_policy: TelephonyPolicy = field(
        default=TelephonyPolicy.SKIP_WHEN_GRANTED
    )
