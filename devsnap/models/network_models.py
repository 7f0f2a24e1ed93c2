"""Pydantic models for per-network connectivity records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from devsnap.models.constants import TRANSPORT_NAMES


class TransportDescriptor(BaseModel):
    """Canonical classification of a network's primary transport."""

    model_config = ConfigDict(frozen=True)

    code: int = Field(
        ...,
        description="Index into the transport vocabulary, or its length if unknown",
        ge=0,
        le=len(TRANSPORT_NAMES),
    )
    name: str = Field(..., description="Transport name (e.g., 'WIFI', 'UNKNOWN')")


class CapabilitySnapshot(BaseModel):
    """Capability metadata advertised for one network."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    transport_types: list[int] = Field(
        default_factory=list,
        alias="transportTypes",
        description="Every transport code the network advertises",
    )
    capability_names: list[str] = Field(
        default_factory=list,
        alias="networkCapabilities",
        description="Named capabilities currently set (e.g., 'INTERNET')",
    )
    link_upstream_kbps: int = Field(
        -1, alias="linkUpstreamBandwidthKbps", description="-1 when unknown"
    )
    link_downstream_kbps: int = Field(
        -1, alias="linkDownBandwidthKbps", description="-1 when unknown"
    )
    signal_strength: int | None = Field(None, alias="signalStrength")
    network_specifier: str | None = Field(None, alias="networkSpecifier")
    ssid: str | None = Field(None, alias="SSID")


@dataclass(frozen=True)
class LegacyNetworkInfo:
    """Legacy connectivity-info object reported by older platforms.

    Attributes:
        type: Legacy network type code (e.g., 1 for WIFI).
        type_name: Legacy network type name.
        subtype: Network subtype code (0 when not applicable).
        subtype_name: Network subtype name (e.g., 'LTE').
        is_connected: Whether the network is connected.
        is_available: Whether the network is available.
        is_failover: Whether this network is a failover attempt.
        is_roaming: Whether the device is roaming on this network.
        state: Coarse state name (e.g., 'CONNECTED').
        detailed_state: Detailed state name (e.g., 'OBTAINING_IPADDR').
        extra_info: Free-form extra info (e.g., an APN or quoted SSID).
    """

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


class ConnectivityRecord(BaseModel):
    """Per-network output record.

    Only the keys a resolution strategy writes are serialized, so a legacy
    record never carries ``cellState`` and a modern one never carries
    ``isRoaming``. A key that was written serializes as null when its value
    is unavailable.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Modern strategy
    cell_state: str | None = Field(None, alias="cellState")
    cell_signal_strength: int | None = Field(None, alias="cellSignalStrength")

    # Both strategies
    type: int | None = Field(None, description="Network type code")
    type_name: str | None = Field(None, alias="typeName")

    # Legacy strategy
    subtype: int | None = None
    subtype_name: str | None = Field(None, alias="subtypeName")
    is_connected: bool | None = Field(None, alias="isConnected")
    detailed_state: str | None = Field(None, alias="detailedState")
    state: str | None = None
    extra_info: str | None = Field(None, alias="extraInfo")
    is_available: bool | None = Field(None, alias="isAvailable")
    is_failover: bool | None = Field(None, alias="isFailover")
    is_roaming: bool | None = Field(None, alias="isRoaming")

    capabilities: CapabilitySnapshot | None = None

    @field_serializer("capabilities")
    def _serialize_capabilities(
        self, capabilities: CapabilitySnapshot | None
    ) -> dict[str, Any] | None:
        if capabilities is None:
            return None
        return capabilities.model_dump(by_alias=True)

    def is_empty(self) -> bool:
        """Return True if no written field holds a value."""
        return all(getattr(self, name) is None for name in self.model_fields_set)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary of the written keys."""
        return self.model_dump(by_alias=True, exclude_unset=True)
