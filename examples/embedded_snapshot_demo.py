#!/usr/bin/env python3
"""Demo script building a snapshot from in-memory collaborators."""

from devsnap.backends.base import DeviceContext, OSContext
from devsnap.backends.memory import (
    DeviceIdentity,
    NetworkEntry,
    StaticCapabilities,
    StaticConnectivity,
    StaticDeviceInfo,
    StaticPermissions,
    StaticTelephony,
)
from devsnap.models.device_models import DisplaySize
from devsnap.snapshot import DeviceSnapshotBuilder


def build_context(api_level: int) -> DeviceContext:
    """Describe an emulator with one Wi-Fi network."""
    identity = DeviceIdentity(
        android_id="emulator-5554",
        manufacturer="Google",
        model="sdk_gphone64_x86_64",
        brand="google",
        api_version=str(api_level),
        platform_version="14",
        carrier_name="Android",
        display_size=DisplaySize(width=1080, height=2340),
        display_density=440,
        locale="en_US",
        time_zone="UTC",
    )
    wifi = StaticCapabilities(
        transports=[1],
        capabilities=[12, 16],
        link_upstream_kbps=1000,
        link_downstream_kbps=5000,
        fields={"mSSID": '"AndroidWifi"'},
    )
    return DeviceContext(
        device=StaticDeviceInfo(identity),
        connectivity=StaticConnectivity(
            {"wifi": NetworkEntry(capabilities=wifi)}, active="wifi"
        ),
        permissions=StaticPermissions(),
        os=OSContext(api_level=api_level),
        telephony=StaticTelephony(data_state=2, signal_level=4),
    )


def main():
    """Print the snapshot for a modern and a legacy API level."""
    for api_level in (34, 28):
        print("=" * 60)
        print(f"API level {api_level}")
        print("=" * 60)
        print(DeviceSnapshotBuilder(build_context(api_level)).to_json())
        print()


if __name__ == "__main__":
    main()
