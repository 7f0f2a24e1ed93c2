"""Tests for best-effort optional attribute access."""

from types import SimpleNamespace

from devsnap.backends.fields import (
    ABSENT,
    SSID,
    OptionalField,
    extract_safe_json_value,
    format_null,
)


class _Exploding:
    """Object whose private accessor fails like a platform call."""

    @property
    def mSSID(self):
        raise RuntimeError("hidden API blocked")


def test_extract_missing_attribute_returns_null():
    """Test that a missing attribute yields None instead of raising."""
    assert extract_safe_json_value("mSSID", object()) is None
    assert extract_safe_json_value("mSSID", SimpleNamespace()) is None


def test_extract_failing_accessor_returns_null():
    """Test that an accessor raising a non-AttributeError yields None."""
    assert extract_safe_json_value("mSSID", _Exploding()) is None
    assert SSID.read(_Exploding()) is ABSENT


def test_extract_present_values():
    """Test that present values are formatted and returned."""
    source = SimpleNamespace(mSSID='"HomeNet"', mSignalStrength=-55, mEmpty="")

    assert extract_safe_json_value("mSSID", source) == '"HomeNet"'
    assert extract_safe_json_value("mSignalStrength", source) == -55
    assert extract_safe_json_value("mEmpty", source) is None


def test_extract_wrong_type_returns_null():
    """Test that a value of the wrong type is treated as unavailable."""
    source = SimpleNamespace(mSignalStrength="strong")

    assert extract_safe_json_value("mSignalStrength", source, int) is None
    assert extract_safe_json_value("mSignalStrength", source) == "strong"


def test_format_null():
    """Test JSON null formatting of raw values."""
    assert format_null(None) is None
    assert format_null("") is None
    assert format_null("x") == "x"
    assert format_null(0) == 0
    assert format_null(False) is False
    assert format_null(1.5) == 1.5

    class Specifier:
        def __str__(self):
            return "TelephonyNetworkSpecifier [mSubId = 1]"

    assert format_null(Specifier()) == "TelephonyNetworkSpecifier [mSubId = 1]"


def test_optional_field_checks_candidates_in_order():
    """Test that the first readable candidate attribute wins."""
    field = OptionalField("SSID", ("mWifiSsid", "mSSID"), str)

    assert field.extract(SimpleNamespace(mSSID="b")) == "b"
    assert field.extract(SimpleNamespace(mWifiSsid="a", mSSID="b")) == "a"
    assert field.read(SimpleNamespace()) is ABSENT


def test_absent_sentinel():
    """Test the ABSENT sentinel is a falsy singleton."""
    assert not ABSENT
    assert repr(ABSENT) == "ABSENT"
    assert type(ABSENT)() is ABSENT
