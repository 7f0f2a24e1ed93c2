"""Device profile backend - builds a DeviceContext from a YAML/JSON file.

A profile describes everything the collaborators would report for one
device, so agents and tests can reproduce a snapshot without the device:

    device:
      android_id: 9774d56d682e549c
      manufacturer: Google
      model: Pixel 7
      brand: google
      api_level: 33
      platform_version: "13"
      carrier_name: T-Mobile
      display: {width: 1080, height: 2400, density: 420}
      locale: en_US
      time_zone: America/Los_Angeles
      status_bar: {visible_frame_top: 118, resource_height: 118}
    permissions: [android.permission.READ_PHONE_STATE]
    telephony: {data_state: 2, signal_level: 3}
    active_network: wlan0
    networks:
      - id: wlan0
        capabilities:
          transports: [WIFI]
          capabilities: [INTERNET, VALIDATED]
          link_upstream_kbps: 20000
          link_downstream_kbps: 80000
          fields: {mSSID: '"HomeNet"', mSignalStrength: -55}
        legacy: {type: 1, type_name: WIFI, is_connected: true, state: CONNECTED}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

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
from devsnap.models.constants import (
    MODERN_API_LEVEL,
    NET_CAPABILITIES,
    TRANSPORT_NAMES,
    TelephonyPolicy,
)
from devsnap.models.device_models import DisplaySize
from devsnap.models.network_models import LegacyNetworkInfo
from devsnap.utils.logger import Logger

_CAPABILITY_CODES = {name: code for code, name in NET_CAPABILITIES.items()}


class ProfileError(Exception):
    """Raised when a device profile cannot be read or is invalid."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        super().__init__(f"Invalid device profile {self.path}: {reason}")


def _handle_text(value: Any) -> Any:
    """Accept numeric network ids, which YAML loads as int."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def _to_code(value: int | str, names: dict[str, int], kind: str) -> int:
    if isinstance(value, int):
        return value
    code = names.get(str(value).upper())
    if code is None:
        raise ValueError(f"Unknown {kind}: {value}")
    return code


class DisplayProfile(BaseModel):
    """Display section of a profile."""

    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)
    density: float = Field(..., ge=0)


class StatusBarProfile(BaseModel):
    """Status bar measurements of a profile."""

    visible_frame_top: int | None = None
    resource_height: int | None = None


class DeviceProfile(BaseModel):
    """Identity section of a profile."""

    android_id: str | None = None
    manufacturer: str | None = None
    model: str | None = None
    brand: str | None = None
    api_level: int = Field(MODERN_API_LEVEL, ge=1)
    platform_version: str | None = None
    carrier_name: str | None = None
    display: DisplayProfile = Field(
        default_factory=lambda: DisplayProfile(width=0, height=0, density=0)
    )
    locale: str | None = None
    time_zone: str | None = None
    status_bar: StatusBarProfile = Field(default_factory=StatusBarProfile)


class CapabilitiesProfile(BaseModel):
    """Capability object of one network; names or numeric codes are accepted."""

    transports: list[int] = Field(default_factory=list)
    capabilities: list[int] = Field(default_factory=list)
    link_upstream_kbps: int = -1
    link_downstream_kbps: int = -1
    fields: dict[str, Any] = Field(default_factory=dict)

    @field_validator("transports", mode="before")
    @classmethod
    def _transport_codes(cls, values: list[int | str]) -> list[int]:
        names = {name: code for code, name in enumerate(TRANSPORT_NAMES)}
        return [_to_code(value, names, "transport") for value in values]

    @field_validator("capabilities", mode="before")
    @classmethod
    def _capability_codes(cls, values: list[int | str]) -> list[int]:
        return [_to_code(value, _CAPABILITY_CODES, "capability") for value in values]


class LegacyProfile(BaseModel):
    """Legacy connectivity-info object of one network."""

    type: int
    type_name: str
    subtype: int = 0
    subtype_name: str = ""
    is_connected: bool = False
    is_available: bool = False
    is_failover: bool = False
    is_roaming: bool = False
    state: str = "UNKNOWN"
    detailed_state: str = "IDLE"
    extra_info: str | None = None


class NetworkProfile(BaseModel):
    """One network of a profile."""

    id: str
    capabilities: CapabilitiesProfile | None = None
    legacy: LegacyProfile | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_text(cls, value: Any) -> Any:
        return _handle_text(value)


class TelephonyProfile(BaseModel):
    """Telephony section of a profile."""

    data_state: int
    signal_level: int | None = Field(None, ge=0, le=4)


class Profile(BaseModel):
    """A complete device profile."""

    device: DeviceProfile = Field(default_factory=DeviceProfile)
    permissions: list[str] = Field(default_factory=list)
    telephony: TelephonyProfile | None = None
    active_network: str | None = None
    networks: list[NetworkProfile] = Field(default_factory=list)

    @field_validator("active_network", mode="before")
    @classmethod
    def _active_text(cls, value: Any) -> Any:
        return _handle_text(value)


def _read_document(path: Path) -> Any:
    try:
        text = path.read_text()
    except OSError as e:
        raise ProfileError(path, str(e)) from e

    try:
        if path.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ProfileError(path, str(e)) from e


def parse_profile(data: Any, source: str | Path = "<profile>") -> Profile:
    """Validate a profile document.

    Raises
    ------
        ProfileError: If the document does not describe a valid profile.
    """
    try:
        return Profile.model_validate(data or {})
    except ValidationError as e:
        raise ProfileError(source, str(e)) from e


def context_from_profile(
    profile: Profile,
    telephony_policy: TelephonyPolicy = TelephonyPolicy.SKIP_WHEN_GRANTED,
    modern_threshold: int = MODERN_API_LEVEL,
) -> DeviceContext:
    """Build in-memory collaborators that report what the profile describes."""
    device = profile.device
    identity = DeviceIdentity(
        android_id=device.android_id,
        manufacturer=device.manufacturer,
        model=device.model,
        brand=device.brand,
        api_version=str(device.api_level),
        platform_version=device.platform_version,
        carrier_name=device.carrier_name,
        display_size=DisplaySize(
            width=device.display.width, height=device.display.height
        ),
        display_density=device.display.density,
        locale=device.locale,
        time_zone=device.time_zone,
        visible_frame_top=device.status_bar.visible_frame_top,
        status_bar_resource=device.status_bar.resource_height,
    )

    networks: dict[str, NetworkEntry] = {}
    for network in profile.networks:
        caps = None
        if network.capabilities is not None:
            caps = StaticCapabilities(
                transports=network.capabilities.transports,
                capabilities=network.capabilities.capabilities,
                link_upstream_kbps=network.capabilities.link_upstream_kbps,
                link_downstream_kbps=network.capabilities.link_downstream_kbps,
                fields=network.capabilities.fields,
            )
        legacy = None
        if network.legacy is not None:
            legacy = LegacyNetworkInfo(**network.legacy.model_dump())
        networks[network.id] = NetworkEntry(capabilities=caps, legacy=legacy)

    telephony = None
    if profile.telephony is not None:
        telephony = StaticTelephony(
            profile.telephony.data_state, profile.telephony.signal_level
        )

    return DeviceContext(
        device=StaticDeviceInfo(identity),
        connectivity=StaticConnectivity(networks, active=profile.active_network),
        permissions=StaticPermissions(profile.permissions),
        os=OSContext(api_level=device.api_level, modern_threshold=modern_threshold),
        telephony=telephony,
        telephony_policy=telephony_policy,
    )


def load_profile(
    path: str | Path,
    telephony_policy: TelephonyPolicy = TelephonyPolicy.SKIP_WHEN_GRANTED,
    modern_threshold: int = MODERN_API_LEVEL,
) -> DeviceContext:
    """Load a YAML or JSON device profile into a DeviceContext.

    Args:
        path: Profile file; ``.json`` is parsed as JSON, anything else as YAML.
        telephony_policy: Policy for the modern strategy.
        modern_threshold: First API level handled by the modern strategy.

    Raises
    ------
        ProfileError: If the file cannot be read or is invalid.
    """
    path = Path(path)
    profile = parse_profile(_read_document(path), source=path)
    Logger.emit(
        "profile",
        "DEBUG",
        f"Loaded profile {path} ({len(profile.networks)} networks, "
        f"api level {profile.device.api_level})",
    )
    return context_from_profile(profile, telephony_policy, modern_threshold)
