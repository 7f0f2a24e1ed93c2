"""Devsnap - device snapshot reporting for automated-testing agents."""

from devsnap.version.devsnap_version import DEVSNAP_VERSION, Version

__version__ = str(DEVSNAP_VERSION)
__version_info__ = DEVSNAP_VERSION

__all__ = [
    "DEVSNAP_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
