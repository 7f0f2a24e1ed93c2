"""Runtime settings read from DEVSNAP_* environment variables."""

from __future__ import annotations

from dataclasses import dataclass

from devsnap.models.constants import MODERN_API_LEVEL, TelephonyPolicy
from devsnap.utils.env import get_env

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 6790


@dataclass(frozen=True)
class Settings:
    """Settings shared by the CLI and the HTTP server.

    Attributes:
        log_level: Logger level name.
        host: Server bind address.
        port: Server port.
        telephony_policy: When modern platforms read telephony fields.
        modern_api_level: First API level handled by the modern strategy.
        profile: Default device profile path (None reports the local host).
        host_api_level: API level reported by the host backend.
    """

    log_level: str = "INFO"
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    telephony_policy: TelephonyPolicy = TelephonyPolicy.SKIP_WHEN_GRANTED
    modern_api_level: int = MODERN_API_LEVEL
    profile: str | None = None
    host_api_level: int = MODERN_API_LEVEL


def load_settings() -> Settings:
    """Read settings from the environment.

    Raises:
        EnvVarTypeError: If a variable has an invalid value.
    """
    return Settings(
        log_level=get_env("DEVSNAP_LOG_LEVEL", default="INFO"),
        host=get_env("DEVSNAP_HOST", default=DEFAULT_HOST),
        port=get_env("DEVSNAP_PORT", default=DEFAULT_PORT, as_type=int),
        telephony_policy=get_env(
            "DEVSNAP_TELEPHONY_POLICY",
            default=TelephonyPolicy.SKIP_WHEN_GRANTED,
            as_type=TelephonyPolicy,
        ),
        modern_api_level=get_env(
            "DEVSNAP_MODERN_API_LEVEL", default=MODERN_API_LEVEL, as_type=int
        ),
        profile=get_env("DEVSNAP_PROFILE", log=True),
        host_api_level=get_env(
            "DEVSNAP_HOST_API_LEVEL", default=MODERN_API_LEVEL, as_type=int
        ),
    )
