"""Pydantic models for structured output."""

from devsnap.models.device_models import (
    AutomationResponse,
    DeviceSnapshot,
    DisplaySize,
    SystemBars,
)
from devsnap.models.network_models import (
    CapabilitySnapshot,
    ConnectivityRecord,
    LegacyNetworkInfo,
    TransportDescriptor,
)

__all__ = [
    "AutomationResponse",
    "DeviceSnapshot",
    "DisplaySize",
    "SystemBars",
    # Network models
    "CapabilitySnapshot",
    "ConnectivityRecord",
    "LegacyNetworkInfo",
    "TransportDescriptor",
]
