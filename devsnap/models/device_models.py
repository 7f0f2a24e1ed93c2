"""Pydantic models for the device snapshot response."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from devsnap.models.network_models import ConnectivityRecord


class DisplaySize(BaseModel):
    """Real (unscaled) display size in pixels."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class DeviceSnapshot(BaseModel):
    """Complete result of one device-info request.

    Every top-level key is always present; unavailable values serialize as
    null.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    android_id: str | None = Field(..., alias="androidId")
    manufacturer: str | None = Field(...)
    model: str | None = Field(...)
    brand: str | None = Field(...)
    api_version: str = Field(..., alias="apiVersion")
    platform_version: str | None = Field(..., alias="platformVersion")
    carrier_name: str | None = Field(..., alias="carrierName")
    real_display_size: DisplaySize = Field(..., alias="realDisplaySize")
    display_density: float = Field(..., alias="displayDensity", ge=0)
    networks: list[ConnectivityRecord] = Field(default_factory=list)
    locale: str | None = Field(...)
    time_zone: str | None = Field(..., alias="timeZone")

    @field_serializer("real_display_size")
    def _serialize_display_size(self, size: DisplaySize) -> str:
        return str(size)

    @field_serializer("networks")
    def _serialize_networks(
        self, networks: list[ConnectivityRecord]
    ) -> list[dict[str, Any]]:
        return [record.to_dict() for record in networks]

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON-serializable response body."""
        return self.model_dump(by_alias=True)


class SystemBars(BaseModel):
    """System bar metrics."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_bar: int = Field(..., alias="statusBar", ge=0)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON-serializable response body."""
        return self.model_dump(by_alias=True)


class AutomationResponse(BaseModel):
    """Response envelope shared by every endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str | None = Field(None, alias="sessionId")
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return self.model_dump(by_alias=True)
