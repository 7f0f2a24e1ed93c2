"""Transport classification for capability objects."""

from __future__ import annotations

from devsnap.backends.base import NetworkCapabilities
from devsnap.models.constants import TRANSPORT_NAMES, UNKNOWN_TRANSPORT_NAME
from devsnap.models.network_models import TransportDescriptor

UNKNOWN_TRANSPORT = TransportDescriptor(
    code=len(TRANSPORT_NAMES), name=UNKNOWN_TRANSPORT_NAME
)


def classify_transport(caps: NetworkCapabilities) -> TransportDescriptor:
    """Classify a network by its primary transport.

    The lowest matching transport code wins, so a network that is both
    BLUETOOTH and WIFI_AWARE is reported as BLUETOOTH. Clients depend on
    this ordering.

    Args:
        caps: Capability object to classify.

    Returns
    -------
        TransportDescriptor for the first match, or UNKNOWN_TRANSPORT.
    """
    for code, name in enumerate(TRANSPORT_NAMES):
        if caps.has_transport(code):
            return TransportDescriptor(code=code, name=name)
    return UNKNOWN_TRANSPORT


def transport_types(caps: NetworkCapabilities) -> list[int]:
    """List every known transport code the capability object advertises."""
    return [code for code in range(len(TRANSPORT_NAMES)) if caps.has_transport(code)]
