"""Collaborator backends and the network introspection core."""

from devsnap.backends.base import (
    ConnectivityService,
    DeviceContext,
    DeviceInfoProvider,
    NetworkCapabilities,
    OSContext,
    PermissionChecker,
    TelephonyService,
)
from devsnap.backends.factory import create_device_context, get_connectivity_strategy
from devsnap.backends.network import NetworkReportAssembler

__all__ = [
    "ConnectivityService",
    "DeviceContext",
    "DeviceInfoProvider",
    "NetworkCapabilities",
    "NetworkReportAssembler",
    "OSContext",
    "PermissionChecker",
    "TelephonyService",
    "create_device_context",
    "get_connectivity_strategy",
]
