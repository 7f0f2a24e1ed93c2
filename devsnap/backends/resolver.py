"""Connectivity-state resolution strategies.

Two platform generations report connectivity differently:

- Legacy platforms expose a per-network info object with detailed state
  and roaming/failover flags.
- Modern platforms only expose capability objects; cellular state comes
  from the telephony service and is gated by READ_PHONE_STATE.

Each generation is one ConnectivityStrategy. Both produce the same
ConnectivityRecord shape and attach capability metadata for the network.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, TypeVar

from devsnap.backends.base import DeviceContext, NetworkHandle
from devsnap.backends.capabilities import capabilities_of
from devsnap.backends.fields import format_null
from devsnap.backends.transport import classify_transport
from devsnap.models.constants import READ_PHONE_STATE, CellState
from devsnap.models.network_models import ConnectivityRecord
from devsnap.utils.logger import Logger

T = TypeVar("T")


def _query(what: str, call: Callable[..., T], *args: Any) -> T | None:
    """Call a collaborator, treating any failure as missing data."""
    try:
        return call(*args)
    except Exception as e:
        Logger.emit("resolver", "DEBUG", f"{what} unavailable: {e}")
        return None


class ConnectivityStrategy(ABC):
    """Resolves one network handle into a ConnectivityRecord."""

    name: str = "base"

    def __init__(self, context: DeviceContext) -> None:
        self._context = context

    def resolve(self, handle: NetworkHandle) -> ConnectivityRecord:
        """Resolve the state fields for a network and attach its capabilities.

        Args:
            handle: Network to resolve.

        Returns
        -------
            ConnectivityRecord with the strategy's fields plus ``capabilities``
            (None if the network has no capability data).
        """
        fields = self._resolve_state(handle)
        fields["capabilities"] = capabilities_of(self._context.connectivity, handle)
        return ConnectivityRecord(**fields)

    @abstractmethod
    def _resolve_state(self, handle: NetworkHandle) -> dict[str, Any]:
        """Return the strategy-specific record fields for a network."""
        pass


class LegacyStrategy(ConnectivityStrategy):
    """Copies the legacy connectivity-info object field by field."""

    name = "legacy"

    def _resolve_state(self, handle: NetworkHandle) -> dict[str, Any]:
        info = _query(
            "legacy network info", self._context.connectivity.legacy_info_of, handle
        )
        if info is None:
            return {}

        return {
            "type": info.type,
            "type_name": info.type_name,
            "subtype": info.subtype,
            "subtype_name": info.subtype_name,
            "is_connected": info.is_connected,
            "detailed_state": info.detailed_state,
            "state": info.state,
            "extra_info": format_null(info.extra_info),
            "is_available": info.is_available,
            "is_failover": info.is_failover,
            "is_roaming": info.is_roaming,
        }


class ModernStrategy(ConnectivityStrategy):
    """Reads telephony state and classifies the active network's transport.

    Whether those reads happen depends on READ_PHONE_STATE and the context's
    TelephonyPolicy; when they are skipped only ``capabilities`` is reported.
    The active network is fetched with a one-shot query, no callback is
    registered.
    """

    name = "modern"

    def _resolve_state(self, handle: NetworkHandle) -> dict[str, Any]:
        context = self._context
        granted = bool(
            _query("permission", context.permissions.has_permission, READ_PHONE_STATE)
        )
        if not context.telephony_policy.reads_telephony(granted):
            return {}

        fields: dict[str, Any] = {}
        fields.update(self._telephony_fields())
        fields.update(self._active_transport_fields())
        return fields

    def _telephony_fields(self) -> dict[str, Any]:
        telephony = self._context.telephony
        if telephony is None:
            return {}

        data_state = _query("telephony data state", telephony.data_state)
        if data_state is None:
            return {}

        fields: dict[str, Any] = {
            "cell_state": str(CellState.from_data_state(data_state))
        }
        level = _query("signal strength", telephony.signal_strength_level)
        if level is not None:
            # Signal level of the cellular data network
            fields["cell_signal_strength"] = level
        return fields

    def _active_transport_fields(self) -> dict[str, Any]:
        connectivity = self._context.connectivity
        active = _query("active network", connectivity.active_network)
        if active is None:
            return {}

        caps = _query(
            "active network capabilities", connectivity.capabilities_of, active
        )
        if caps is None:
            return {}

        transport = _query("active network transport", classify_transport, caps)
        if transport is None:
            return {}
        return {"type": transport.code, "type_name": transport.name}
