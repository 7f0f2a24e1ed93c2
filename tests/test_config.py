"""Tests for environment-driven settings."""

import pytest

from devsnap.config import DEFAULT_PORT, Settings, load_settings
from devsnap.models.constants import TelephonyPolicy
from devsnap.utils.env import EnvVarTypeError

_VARS = [
    "DEVSNAP_LOG_LEVEL",
    "DEVSNAP_HOST",
    "DEVSNAP_PORT",
    "DEVSNAP_TELEPHONY_POLICY",
    "DEVSNAP_MODERN_API_LEVEL",
    "DEVSNAP_PROFILE",
    "DEVSNAP_HOST_API_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Unset every DEVSNAP_* variable."""
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    """Test settings without any environment variables."""
    assert load_settings() == Settings()
    assert load_settings().port == DEFAULT_PORT


def test_overrides(monkeypatch):
    """Test environment variables override defaults."""
    monkeypatch.setenv("DEVSNAP_PORT", "7000")
    monkeypatch.setenv("DEVSNAP_TELEPHONY_POLICY", "read_when_granted")
    monkeypatch.setenv("DEVSNAP_MODERN_API_LEVEL", "30")
    monkeypatch.setenv("DEVSNAP_PROFILE", "/tmp/device.yaml")

    settings = load_settings()

    assert settings.port == 7000
    assert settings.telephony_policy is TelephonyPolicy.READ_WHEN_GRANTED
    assert settings.modern_api_level == 30
    assert settings.profile == "/tmp/device.yaml"


@pytest.mark.parametrize(
    ("name", "value"),
    [("DEVSNAP_PORT", "http"), ("DEVSNAP_TELEPHONY_POLICY", "always")],
)
def test_invalid_values(monkeypatch, name, value):
    """Test invalid values raise EnvVarTypeError."""
    monkeypatch.setenv(name, value)

    with pytest.raises(EnvVarTypeError):
        load_settings()


def test_telephony_policy():
    """Test policy decisions for both permission outcomes."""
    assert TelephonyPolicy.SKIP_WHEN_GRANTED.reads_telephony(False) is True
    assert TelephonyPolicy.SKIP_WHEN_GRANTED.reads_telephony(True) is False
    assert TelephonyPolicy.READ_WHEN_GRANTED.reads_telephony(True) is True
    assert TelephonyPolicy.READ_WHEN_GRANTED.reads_telephony(False) is False
