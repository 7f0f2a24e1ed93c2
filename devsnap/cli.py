#!/usr/bin/env python3
"""Devsnap CLI - Command-line interface for devsnap."""

from dataclasses import replace

import click

from devsnap.config import load_settings
from devsnap.models.constants import TelephonyPolicy
from devsnap.utils.env import EnvVarError
from devsnap.utils.logger import Logger

_profile_option = click.option(
    "--profile",
    "-p",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Device profile (YAML or JSON). Defaults to $DEVSNAP_PROFILE, "
    "then the local host.",
)


@click.group()
@click.pass_context
def devsnap(ctx):
    """Devsnap - device snapshot reporting for automated-testing agents."""
    try:
        settings = load_settings()
    except EnvVarError as e:
        raise click.ClickException(str(e)) from e

    if not Logger.is_configured():
        try:
            Logger.configure(level=settings.log_level, timestamps=True)
        except ValueError as e:
            raise click.ClickException(
                f"Invalid DEVSNAP_LOG_LEVEL: {settings.log_level}"
            ) from e
    ctx.obj = settings


@devsnap.command()
@_profile_option
@click.option(
    "--session", "session_id", default=None, help="Session id for the envelope"
)
@click.option("--compact", is_flag=True, help="Print JSON on a single line")
@click.option(
    "--policy",
    type=click.Choice([policy.value for policy in TelephonyPolicy]),
    default=None,
    help="When modern platforms read telephony fields",
)
@click.pass_obj
def info(settings, profile, session_id, compact, policy):
    """Print the device info snapshot."""
    from devsnap.commands.info_cmd import run_info

    if policy:
        settings = replace(settings, telephony_policy=TelephonyPolicy(policy))
    run_info(settings, profile=profile, session_id=session_id, compact=compact)


@devsnap.command()
@_profile_option
@click.pass_obj
def bars(settings, profile):
    """Print the system bars measurements."""
    from devsnap.commands.info_cmd import run_bars

    run_bars(settings, profile=profile)


@devsnap.command()
@_profile_option
@click.option("--host", default=None, help="Bind address (default $DEVSNAP_HOST)")
@click.option("--port", type=int, default=None, help="Port (default $DEVSNAP_PORT)")
@click.pass_obj
def serve(settings, profile, host, port):
    """Serve device snapshots over HTTP."""
    from devsnap.commands.serve_cmd import run_serve

    settings = replace(
        settings,
        host=host or settings.host,
        port=port or settings.port,
    )
    run_serve(settings, profile=profile)


@devsnap.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display devsnap version information."""
    from devsnap.commands.version_cmd import run_version

    if verbose:
        Logger.set_level("DEBUG")

    run_version(verbose=verbose)


if __name__ == "__main__":
    devsnap()
