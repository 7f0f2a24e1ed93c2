"""Capability metadata extraction for a single network."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from devsnap.backends.base import ConnectivityService, NetworkHandle
from devsnap.backends.fields import NETWORK_SPECIFIER, SIGNAL_STRENGTH, SSID
from devsnap.backends.transport import transport_types
from devsnap.models.constants import NET_CAPABILITIES
from devsnap.models.network_models import CapabilitySnapshot
from devsnap.utils.logger import Logger

T = TypeVar("T")


def _read(what: str, call: Callable[[], T], default: T) -> T:
    """Read one capability property, falling back to ``default`` on failure."""
    try:
        return call()
    except Exception as e:
        Logger.emit("capabilities", "DEBUG", f"{what} unavailable: {e}")
        return default


def capabilities_of(
    connectivity: ConnectivityService, handle: NetworkHandle
) -> CapabilitySnapshot | None:
    """Collect capability metadata for a network.

    Bandwidth values are copied unchanged, including the -1 "unknown"
    marker. A property that fails to read falls back to its empty value
    (an empty list, or -1 for bandwidth) without affecting the others.
    SSID, signal strength and network specifier come from optional
    platform attributes and are None where the platform hides them.

    Args:
        connectivity: Connectivity service to query.
        handle: Network to describe.

    Returns
    -------
        CapabilitySnapshot, or None if the platform has no capability data
        for the network.
    """
    try:
        caps = connectivity.capabilities_of(handle)
    except Exception as e:
        Logger.emit("capabilities", "DEBUG", f"Capabilities unavailable: {e}")
        return None
    if caps is None:
        return None

    return CapabilitySnapshot(
        transport_types=_read("transports", lambda: transport_types(caps), []),
        capability_names=_read(
            "capabilities",
            lambda: [
                name
                for code, name in NET_CAPABILITIES.items()
                if caps.has_capability(code)
            ],
            [],
        ),
        link_upstream_kbps=_read(
            "upstream bandwidth", lambda: caps.link_upstream_bandwidth_kbps, -1
        ),
        link_downstream_kbps=_read(
            "downstream bandwidth", lambda: caps.link_downstream_bandwidth_kbps, -1
        ),
        signal_strength=SIGNAL_STRENGTH.extract(caps),
        network_specifier=NETWORK_SPECIFIER.extract(caps),
        ssid=SSID.extract(caps),
    )
