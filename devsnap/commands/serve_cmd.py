"""Serve command - runs the HTTP endpoint with uvicorn."""

from __future__ import annotations

from pathlib import Path

import click
import uvicorn

from devsnap.backends.factory import create_device_context
from devsnap.backends.profile import ProfileError, load_profile
from devsnap.config import Settings
from devsnap.server import create_app
from devsnap.utils.logger import Logger


def run_serve(settings: Settings, profile: str | None = None) -> None:
    """Serve device snapshots until interrupted.

    A profile is validated once up front so a broken file fails at startup
    instead of on the first request.
    """
    profile = profile or settings.profile
    if profile:
        try:
            load_profile(Path(profile))
        except ProfileError as e:
            raise click.ClickException(str(e)) from e

    def context_factory():
        return create_device_context(settings, profile)

    log = Logger.get("server")
    source = profile or "local host"
    log.info(f"Serving {source} on http://{settings.host}:{settings.port}")

    uvicorn.run(
        create_app(context_factory),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
