"""Constants for devsnap models and backends."""

import sys

if sys.version_info >= (3, 11):  # noqa: UP036
    from enum import StrEnum
else:
    from backports.strenum import StrEnum  # noqa: UP035

# Index in this tuple == platform transport constant (TRANSPORT_CELLULAR = 0, ...)
TRANSPORT_NAMES: tuple[str, ...] = (
    "CELLULAR",
    "WIFI",
    "BLUETOOTH",
    "ETHERNET",
    "VPN",
    "WIFI_AWARE",
    "LOWPAN",
    "TEST",
)

UNKNOWN_TRANSPORT_NAME = "UNKNOWN"

# Named boolean network capabilities, keyed by platform capability constant
NET_CAPABILITIES: dict[int, str] = {
    0: "MMS",
    1: "SUPL",
    2: "DUN",
    3: "FOTA",
    4: "IMS",
    5: "CBS",
    6: "WIFI_P2P",
    7: "IA",
    8: "RCS",
    9: "XCAP",
    10: "EIMS",
    11: "NOT_METERED",
    12: "INTERNET",
    13: "NOT_RESTRICTED",
    14: "TRUSTED",
    15: "NOT_VPN",
    16: "VALIDATED",
    17: "CAPTIVE_PORTAL",
    18: "NOT_ROAMING",
    19: "FOREGROUND",
    20: "NOT_CONGESTED",
    21: "NOT_SUSPENDED",
    22: "OEM_PAID",
    23: "MCX",
    24: "PARTIAL_CONNECTIVITY",
    25: "TEMPORARILY_NOT_METERED",
    32: "HEAD_UNIT",
}

# First API level that reports connectivity through capability objects only
MODERN_API_LEVEL = 29

# First API level where the status bar is measured from the visible window frame
WINDOW_FRAME_API_LEVEL = 26

READ_PHONE_STATE = "android.permission.READ_PHONE_STATE"


class CellState(StrEnum):
    """Telephony data-connection states."""

    DISCONNECTED = "DISCONNECTED"
    CONNECTING = "CONNECTING"
    CONNECTED = "CONNECTED"
    SUSPENDED = "SUSPENDED"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_data_state(cls, data_state: int | None) -> "CellState":
        """Map a telephony data-state code to its name."""
        return _DATA_STATES.get(data_state, cls.UNKNOWN)  # type: ignore[arg-type]


_DATA_STATES: dict[int, CellState] = {
    0: CellState.DISCONNECTED,
    1: CellState.CONNECTING,
    2: CellState.CONNECTED,
    3: CellState.SUSPENDED,
}


class TelephonyPolicy(StrEnum):
    """When the modern strategy reads telephony and active-network fields.

    SKIP_WHEN_GRANTED reads them only while READ_PHONE_STATE is denied, which
    is how deployed agents have always behaved. READ_WHEN_GRANTED reads them
    only while the permission is granted.
    """

    SKIP_WHEN_GRANTED = "skip_when_granted"
    READ_WHEN_GRANTED = "read_when_granted"

    def reads_telephony(self, permission_granted: bool) -> bool:
        """Return True if telephony fields should be read."""
        if self is TelephonyPolicy.READ_WHEN_GRANTED:
            return permission_granted
        return not permission_granted
