"""Factories for connectivity strategies and device contexts.

Strategy selection happens once per request from the OS context:
modern platforms (capability objects only) → ModernStrategy,
older platforms (legacy info objects) → LegacyStrategy.

Device contexts come from a device profile file when one is given,
otherwise from the host devsnap is running on.
"""

from __future__ import annotations

from pathlib import Path

from devsnap.backends.base import DeviceContext
from devsnap.backends.resolver import (
    ConnectivityStrategy,
    LegacyStrategy,
    ModernStrategy,
)
from devsnap.config import Settings
from devsnap.utils.logger import Logger


def get_connectivity_strategy(context: DeviceContext) -> ConnectivityStrategy:
    """Select the resolution strategy for the context's platform version.

    Args:
        context: Collaborators for the current request.

    Returns
    -------
        ModernStrategy if the API level is at or above the modern threshold,
        LegacyStrategy otherwise.
    """
    strategy: ConnectivityStrategy
    if context.os.is_modern:
        strategy = ModernStrategy(context)
    else:
        strategy = LegacyStrategy(context)

    Logger.emit(
        "factory",
        "DEBUG",
        f"Using {strategy.name} connectivity strategy "
        f"(api level {context.os.api_level})",
    )
    return strategy


def create_device_context(
    settings: Settings, profile: str | Path | None = None
) -> DeviceContext:
    """Build the collaborators for one request.

    Args:
        settings: Runtime settings (policy, thresholds, default profile).
        profile: Device profile path; falls back to settings.profile, then
            to the local host.

    Returns
    -------
        A fresh DeviceContext.

    Raises
    ------
        ProfileError: If the profile cannot be loaded.
    """
    profile = profile or settings.profile
    if profile:
        from devsnap.backends.profile import load_profile

        return load_profile(
            profile,
            telephony_policy=settings.telephony_policy,
            modern_threshold=settings.modern_api_level,
        )

    from devsnap.backends.host import create_host_context

    return create_host_context(
        api_level=settings.host_api_level,
        telephony_policy=settings.telephony_policy,
        modern_threshold=settings.modern_api_level,
    )
