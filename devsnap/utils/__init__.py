"""Devsnap utilities - shared helper functions and utilities."""

from devsnap.utils.env import (
    EnvVarError,
    EnvVarNotSetError,
    EnvVarTypeError,
    get_env,
    require_env,
)
from devsnap.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarNotSetError",
    "EnvVarTypeError",
    "get_env",
    "require_env",
    # Logger
    "LogLevel",
    "Logger",
    "LoggerNotConfiguredError",
]
