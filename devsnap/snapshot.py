"""Device snapshot assembly.

DeviceSnapshotBuilder composes identity, display and locale getters with
the network report into a DeviceSnapshot. SystemBarsReporter measures the
status bar. Both take an explicit DeviceContext and keep no state between
requests.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from devsnap.backends.base import DeviceContext
from devsnap.backends.fields import format_null
from devsnap.backends.network import NetworkReportAssembler
from devsnap.models.constants import WINDOW_FRAME_API_LEVEL
from devsnap.models.device_models import AutomationResponse, DeviceSnapshot, SystemBars
from devsnap.utils.logger import Logger


class SnapshotError(Exception):
    """Base exception for snapshot failures."""

    pass


class SnapshotSerializationError(SnapshotError):
    """Raised when collected values cannot form a valid response."""

    def __init__(self, what: str, reason: str) -> None:
        self.what = what
        super().__init__(f"Cannot serialize {what}: {reason}")


class DeviceSnapshotBuilder:
    """Builds the device-info response body for one request."""

    def __init__(self, context: DeviceContext) -> None:
        self._context = context
        self._assembler = NetworkReportAssembler(context)

    def build(self) -> DeviceSnapshot:
        """Collect every field of the snapshot.

        Returns
        -------
            A new DeviceSnapshot; missing data shows up as null fields or
            omitted network records.

        Raises
        ------
            SnapshotSerializationError: If a collected value does not fit the
                response shape.
        """
        Logger.emit("snapshot", "INFO", "Get Device Info command")
        device = self._context.device

        try:
            networks = self._assembler.build_report()
            return DeviceSnapshot(
                android_id=device.android_id(),
                manufacturer=device.manufacturer(),
                model=device.model_name(),
                brand=device.brand(),
                api_version=device.api_version(),
                platform_version=device.platform_version(),
                carrier_name=format_null(device.carrier_name()),
                real_display_size=device.real_display_size(),
                display_density=device.display_density(),
                networks=networks,
                locale=device.locale(),
                time_zone=device.time_zone(),
            )
        except ValidationError as e:
            raise SnapshotSerializationError("device snapshot", str(e)) from e

    def to_dict(self) -> dict[str, Any]:
        """Build the snapshot and convert it to a JSON-serializable dict."""
        return _dump(self.build().to_dict, "device snapshot")

    def to_json(self, indent: int | None = 2) -> str:
        """Build the snapshot and encode it as JSON."""
        return _encode(self.to_dict(), indent, "device snapshot")


class SystemBarsReporter:
    """Measures system bars for one request."""

    def __init__(self, context: DeviceContext) -> None:
        self._context = context

    def status_bar_height(self) -> int:
        """Get the status bar height in pixels.

        Newer platforms measure the top of the visible window frame; older
        ones read the ``status_bar_height`` dimension resource. Anything
        unmeasurable reports 0.
        """
        device = self._context.device
        if self._context.os.api_level >= WINDOW_FRAME_API_LEVEL:
            height = device.visible_display_frame_top()
        else:
            height = device.status_bar_height_resource()

        if height is None or height <= 0:
            return 0
        return height

    def build(self) -> SystemBars:
        """Collect the system bars response body."""
        Logger.emit("snapshot", "INFO", "Get status bar height of the device")
        try:
            return SystemBars(status_bar=self.status_bar_height())
        except ValidationError as e:
            raise SnapshotSerializationError("system bars", str(e)) from e


def build_response(session_id: str | None, value: Any) -> dict[str, Any]:
    """Wrap a response body in the session envelope."""
    return AutomationResponse(session_id=session_id, value=value).to_dict()


def _dump(dump: Any, what: str) -> dict[str, Any]:
    try:
        result: dict[str, Any] = dump()
    except (TypeError, ValueError) as e:
        raise SnapshotSerializationError(what, str(e)) from e
    return result


def _encode(data: dict[str, Any], indent: int | None, what: str) -> str:
    try:
        return json.dumps(data, indent=indent)
    except (TypeError, ValueError) as e:
        raise SnapshotSerializationError(what, str(e)) from e
