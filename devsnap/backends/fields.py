"""Best-effort access to optional platform attributes.

Some capability attributes (SSID, signal strength, network specifier) have
no public accessor on every platform version. Each one is described by an
OptionalField that lists the attribute names it may live under; reading it
yields the value or ABSENT, never an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class _Absent:
    """Sentinel for an attribute that could not be read."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()

JSONValue = str | int | float | bool | None


def format_null(value: Any) -> JSONValue:
    """Normalize a value for JSON output.

    None and empty strings become None; JSON scalars pass through unchanged;
    any other object is rendered with str().
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value or None
    if isinstance(value, bool | int | float):
        return value
    return str(value)


@dataclass(frozen=True)
class OptionalField:
    """An attribute that only some platform variants expose.

    Attributes:
        name: Logical field name used in output.
        attributes: Candidate attribute names, checked in order.
        expected: JSON type(s) the formatted value must have, or None for any.
    """

    name: str
    attributes: tuple[str, ...]
    expected: type | tuple[type, ...] | None = None

    def read(self, source: object) -> Any:
        """Return the raw attribute value, or ABSENT if no candidate is readable."""
        for attribute in self.attributes:
            try:
                return getattr(source, attribute)
            except AttributeError:
                continue
            except Exception:
                # Accessors backed by platform calls may fail in other ways
                return ABSENT
        return ABSENT

    def extract(self, source: object) -> JSONValue:
        """Return the formatted value, or None if absent or of the wrong type."""
        value = self.read(source)
        if value is ABSENT:
            return None
        formatted = format_null(value)
        if (
            formatted is not None
            and self.expected is not None
            and not isinstance(formatted, self.expected)
        ):
            return None
        return formatted


SIGNAL_STRENGTH = OptionalField("signalStrength", ("mSignalStrength",), int)
NETWORK_SPECIFIER = OptionalField("networkSpecifier", ("mNetworkSpecifier",), str)
SSID = OptionalField("SSID", ("mSSID",), str)


def extract_safe_json_value(
    field_name: str,
    source: object,
    expected: type | tuple[type, ...] | None = None,
) -> JSONValue:
    """Read a named attribute off an opaque object without failing.

    Ad-hoc entry point for a single attribute name. The capability fields
    reported for every network use the module-level OptionalField
    instances instead, which can try several candidate attributes.

    Args:
        field_name: Attribute name, public or not (e.g., 'mSSID').
        source: Object to read from.
        expected: Optional JSON type(s) the value must have.

    Returns
    -------
        The formatted value, or None on any failure.
    """
    return OptionalField(field_name, (field_name,), expected).extract(source)
