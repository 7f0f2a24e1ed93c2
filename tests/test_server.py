"""Tests for the HTTP endpoint."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from conftest import TOP_LEVEL_KEYS, make_context, make_identity
from devsnap.backends.profile import ProfileError
from devsnap.server import create_app


@pytest.fixture
def client(networks):
    """Client for an app serving a fresh context per request."""
    return TestClient(create_app(lambda: make_context(networks)))


def test_device_info(client):
    """Test the device info envelope and key set."""
    response = client.get("/session/abc-123/appium/device/info")

    assert response.status_code == 200
    body = response.json()
    assert body["sessionId"] == "abc-123"
    assert set(body["value"]) == TOP_LEVEL_KEYS
    assert len(body["value"]["networks"]) == 2


def test_system_bars(client):
    """Test the system bars envelope."""
    response = client.get("/session/abc-123/appium/device/system_bars")

    assert response.status_code == 200
    assert response.json() == {"sessionId": "abc-123", "value": {"statusBar": 118}}


def test_context_built_per_request(networks):
    """Test the context factory runs once per request."""
    calls = []

    def factory():
        calls.append(1)
        return make_context(networks)

    client = TestClient(create_app(factory))
    client.get("/session/s/appium/device/info")
    client.get("/session/s/appium/device/info")

    assert len(calls) == 2


def test_serialization_failure_is_500():
    """Test structural failures map to an error envelope."""
    context = make_context(identity=make_identity(display_density=-1))
    client = TestClient(create_app(lambda: context))

    response = client.get("/session/xyz/appium/device/info")

    assert response.status_code == 500
    body = response.json()
    assert body["sessionId"] == "xyz"
    assert body["value"]["error"] == "unknown error"
    assert "Cannot serialize device snapshot" in body["value"]["message"]


@pytest.mark.parametrize(
    "route", ["/session/s1/appium/device/info", "/session/s1/appium/device/system_bars"]
)
def test_profile_failure_is_500(route):
    """Test a profile that fails to reload still gets the session envelope."""

    def factory():
        raise ProfileError("gone.yaml", "No such file or directory")

    response = TestClient(create_app(factory)).get(route)

    assert response.status_code == 500
    body = response.json()
    assert body["sessionId"] == "s1"
    assert body["value"]["error"] == "unknown error"
    assert "gone.yaml" in body["value"]["message"]


def test_unexpected_failure_is_500(networks):
    """Test any collaborator exception maps to the error envelope."""
    context = make_context(networks)
    context.device.real_display_size = MagicMock(
        side_effect=RuntimeError("display service died")
    )
    client = TestClient(create_app(lambda: context))

    response = client.get("/session/s2/appium/device/info")

    assert response.status_code == 500
    assert response.json() == {
        "sessionId": "s2",
        "value": {"error": "unknown error", "message": "display service died"},
    }
