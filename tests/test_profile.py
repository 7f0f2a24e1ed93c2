"""Tests for the device profile backend."""

import json
from pathlib import Path

import pytest
import yaml

from conftest import make_context
from devsnap.backends.profile import (
    ProfileError,
    context_from_profile,
    load_profile,
    parse_profile,
)
from devsnap.models.constants import TelephonyPolicy
from devsnap.snapshot import DeviceSnapshotBuilder

PROFILE_YAML = """
device:
  android_id: 9774d56d682e549c
  manufacturer: Google
  model: Pixel 7
  brand: google
  api_level: 33
  platform_version: "13"
  carrier_name: T-Mobile
  display: {width: 1080, height: 2400, density: 420}
  locale: en_US
  time_zone: America/Los_Angeles
  status_bar: {visible_frame_top: 118, resource_height: 84}
networks:
  - id: wlan0
    capabilities:
      transports: [WIFI]
      capabilities: [INTERNET, VALIDATED]
      link_upstream_kbps: 20000
      link_downstream_kbps: 80000
      fields:
        mSSID: '"HomeNet"'
        mSignalStrength: -55
    legacy:
      type: 1
      type_name: WIFI
      is_connected: true
      is_available: true
      state: CONNECTED
      detailed_state: CONNECTED
      extra_info: '"HomeNet"'
  - id: rmnet0
    capabilities:
      transports: [0]
      capabilities: [IMS, 12]
"""

EXAMPLES = Path(__file__).resolve().parent.parent / "examples" / "profiles"


@pytest.fixture
def profile_path(tmp_path):
    """Profile file equivalent to the conftest networks fixture."""
    path = tmp_path / "pixel7.yaml"
    path.write_text(PROFILE_YAML)
    return path


def test_profile_matches_in_memory_collaborators(profile_path, networks):
    """Test a YAML profile produces the same snapshot as in-memory collaborators."""
    from_file = DeviceSnapshotBuilder(load_profile(profile_path)).to_dict()
    in_memory = DeviceSnapshotBuilder(make_context(networks)).to_dict()

    assert from_file == in_memory


def test_json_profile(tmp_path):
    """Test .json profiles are parsed as JSON."""
    path = tmp_path / "device.json"
    path.write_text(
        json.dumps(
            {
                "device": {"model": "Nexus 5X", "api_level": 27},
                "networks": [
                    {"id": "wlan0", "legacy": {"type": 1, "type_name": "WIFI"}}
                ],
            }
        )
    )

    context = load_profile(path)

    assert context.os.api_level == 27
    assert not context.os.is_modern
    assert context.device.model_name() == "Nexus 5X"
    assert context.device.api_version() == "27"
    assert context.connectivity.legacy_info_of("wlan0").type_name == "WIFI"


def test_policy_and_threshold_passed_through(profile_path):
    """Test runtime settings override profile defaults."""
    context = load_profile(
        profile_path,
        telephony_policy=TelephonyPolicy.READ_WHEN_GRANTED,
        modern_threshold=34,
    )

    assert context.telephony_policy is TelephonyPolicy.READ_WHEN_GRANTED
    assert not context.os.is_modern


def test_telephony_and_permissions():
    """Test telephony and permission sections."""
    profile = parse_profile(
        {
            "permissions": ["android.permission.READ_PHONE_STATE"],
            "telephony": {"data_state": 2, "signal_level": 4},
            "active_network": "wlan0",
        }
    )

    assert profile.telephony.signal_level == 4
    assert profile.active_network == "wlan0"


def test_numeric_network_ids():
    """Test YAML integer network ids resolve like their string form."""
    profile = parse_profile(
        yaml.safe_load(
            "active_network: 1\n"
            "networks:\n"
            "  - id: 1\n"
            "    capabilities: {transports: [WIFI]}\n"
        )
    )

    assert profile.networks[0].id == "1"
    assert profile.active_network == "1"
    context = context_from_profile(profile)
    assert context.connectivity.active_network() == "1"
    assert context.connectivity.capabilities_of("1").has_transport(1)


@pytest.mark.parametrize(
    "document",
    [
        {"networks": [{"id": "x", "capabilities": {"transports": ["CARRIER_PIGEON"]}}]},
        {"networks": [{"id": "x", "capabilities": {"capabilities": ["TELEPORT"]}}]},
        {"device": {"api_level": 0}},
        {"telephony": {"data_state": 2, "signal_level": 9}},
        {"networks": [{"capabilities": {}}]},
    ],
)
def test_invalid_profiles(document):
    """Test invalid documents raise ProfileError."""
    with pytest.raises(ProfileError):
        parse_profile(document)


def test_unreadable_profile(tmp_path):
    """Test missing files and malformed YAML raise ProfileError."""
    with pytest.raises(ProfileError):
        load_profile(tmp_path / "missing.yaml")

    broken = tmp_path / "broken.yaml"
    broken.write_text("device: [unclosed")
    with pytest.raises(ProfileError) as excinfo:
        load_profile(broken)
    assert "broken.yaml" in str(excinfo.value)


@pytest.mark.parametrize("name", ["pixel7.yaml", "nexus5x_legacy.yaml"])
def test_example_profiles_load(name):
    """Test the bundled example profiles are valid."""
    data = DeviceSnapshotBuilder(load_profile(EXAMPLES / name)).to_dict()

    assert data["networks"]
