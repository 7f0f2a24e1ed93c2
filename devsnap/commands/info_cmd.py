"""Info and bars commands - print snapshot responses as JSON."""

from __future__ import annotations

import json

import click

from devsnap.backends.factory import create_device_context
from devsnap.backends.profile import ProfileError
from devsnap.config import Settings
from devsnap.snapshot import (
    DeviceSnapshotBuilder,
    SnapshotError,
    SystemBarsReporter,
    build_response,
)


def run_info(
    settings: Settings,
    profile: str | None = None,
    session_id: str | None = None,
    compact: bool = False,
) -> None:
    """Print the device-info response for a profile or the local host."""
    try:
        context = create_device_context(settings, profile)
        body = DeviceSnapshotBuilder(context).to_dict()
    except (ProfileError, SnapshotError) as e:
        raise click.ClickException(str(e)) from e

    indent = None if compact else 2
    click.echo(json.dumps(build_response(session_id, body), indent=indent))


def run_bars(settings: Settings, profile: str | None = None) -> None:
    """Print the system-bars response for a profile or the local host."""
    try:
        context = create_device_context(settings, profile)
        body = SystemBarsReporter(context).build().to_dict()
    except (ProfileError, SnapshotError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(json.dumps(build_response(None, body), indent=2))
