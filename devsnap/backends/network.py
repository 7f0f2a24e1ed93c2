"""Network report assembly - one ConnectivityRecord per reportable network."""

from __future__ import annotations

from devsnap.backends.base import DeviceContext, NetworkHandle
from devsnap.backends.factory import get_connectivity_strategy
from devsnap.backends.resolver import ConnectivityStrategy
from devsnap.models.network_models import ConnectivityRecord
from devsnap.utils.logger import Logger


class NetworkReportAssembler:
    """Builds the ``networks`` section of a device snapshot.

    The strategy is chosen once, from the context's OS version, and reused
    for every network in the request.
    """

    def __init__(
        self,
        context: DeviceContext,
        strategy: ConnectivityStrategy | None = None,
    ) -> None:
        """Initialize the assembler.

        Args:
            context: Collaborators for the current request.
            strategy: Resolution strategy; selected from the context if None.
        """
        self._context = context
        self._strategy = strategy or get_connectivity_strategy(context)

    @property
    def strategy(self) -> ConnectivityStrategy:
        """The resolution strategy used for this request."""
        return self._strategy

    def build_report(
        self, handles: list[NetworkHandle] | None = None
    ) -> list[ConnectivityRecord]:
        """Resolve every network and keep the records that carry data.

        Args:
            handles: Networks to report, in order. Defaults to every network
                the connectivity service lists.

        Returns
        -------
            Records in enumeration order; networks whose record has no
            populated field are left out.
        """
        if handles is None:
            handles = self._context.connectivity.list_networks()

        records: list[ConnectivityRecord] = []
        for handle in handles:
            record = self._strategy.resolve(handle)
            if record.is_empty():
                Logger.emit("network", "DEBUG", f"No data for network {handle!r}")
                continue
            records.append(record)
        return records
