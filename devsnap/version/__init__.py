"""Devsnap version information."""

from devsnap.version.devsnap_version import DEVSNAP_VERSION, Version

__all__ = ["DEVSNAP_VERSION", "Version"]
