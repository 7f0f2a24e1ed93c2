"""Version command - displays devsnap version information."""

import click

from devsnap.version import DEVSNAP_VERSION


def run_version(verbose: bool = False) -> None:
    """Display devsnap version information.

    Args:
        verbose: If True, show the full hash and build date.
    """
    if not verbose:
        click.echo(f"devsnap {DEVSNAP_VERSION}")
        return

    click.echo(f"devsnap version {DEVSNAP_VERSION.full_version()}")
    click.echo("\nDetailed version information:")
    click.echo(f"  Semantic Version: {DEVSNAP_VERSION}")
    click.echo(f"  Build Date:       {DEVSNAP_VERSION.date:%Y-%m-%d}")
    click.echo(f"  Package Hash:     {DEVSNAP_VERSION.hash}")
