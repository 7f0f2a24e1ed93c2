"""Environment variable helpers with type coercion and logging.

Usage:
    from devsnap.utils.env import get_env, require_env

    port = get_env("DEVSNAP_PORT", default=6790, as_type=int)
    profile = get_env("DEVSNAP_PROFILE", log=True)

    # Required (raises if not set)
    serial = require_env("ANDROID_SERIAL")
"""

from __future__ import annotations

import os
from typing import Any, TypeVar, cast, overload

T = TypeVar("T")


class EnvVarError(Exception):
    """Base exception for environment variable errors."""

    pass


class EnvVarNotSetError(EnvVarError):
    """Raised when a required environment variable is not set."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Required environment variable not set: {name}")


class EnvVarTypeError(EnvVarError):
    """Raised when an environment variable cannot be converted to the expected type."""

    def __init__(self, name: str, value: str, expected_type: type) -> None:
        self.name = name
        self.value = value
        self.expected_type = expected_type
        super().__init__(f"Cannot convert {name}='{value}' to {expected_type.__name__}")


def _coerce_type(name: str, value: str, as_type: type) -> Any:
    """Convert a string value to the specified type.

    Raises:
        EnvVarTypeError: If conversion fails.
    """
    try:
        # "false", "0", "" and friends are False
        if as_type is bool:
            return value.lower() not in ("false", "0", "", "no", "off")
        if as_type is str:
            return value
        if as_type is list:
            return [item.strip() for item in value.split(",") if item.strip()]
        # int, float, enums and anything else constructible from a string
        return as_type(value)
    except (ValueError, TypeError) as e:
        raise EnvVarTypeError(name, value, as_type) from e


def _log_access(name: str, value: str | None) -> None:
    """Log environment variable access if the logger is configured."""
    from devsnap.utils.logger import Logger

    Logger.emit("env", "DEBUG", f"ENV GET {name}={value}")


@overload
def get_env(name: str, *, default: T, as_type: type[T], log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, default: T, log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, as_type: type[T], log: bool = ...) -> T | None:
    ...


@overload
def get_env(name: str, *, log: bool = ...) -> str | None:
    ...


def get_env(
    name: str,
    *,
    default: T | None = None,
    as_type: type[T] | None = None,
    log: bool = False,
) -> T | str | None:
    """Get an environment variable with optional type coercion.

    Args:
        name: Environment variable name.
        default: Value returned when the variable is not set.
        as_type: Type to convert the value to (bool, int, float, str, list,
            or any type constructible from a string, such as a StrEnum).
        log: If True, log the access (uses Logger if configured).

    Returns:
        The converted value, or default if not set.

    Raises:
        EnvVarTypeError: If as_type is specified and conversion fails.

    Examples:
        >>> get_env("DEVSNAP_PORT", default=6790, as_type=int)
        6790
    """
    value = os.environ.get(name)

    if log:
        _log_access(name, value)

    if value is None:
        return default

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value


def require_env(
    name: str,
    *,
    as_type: type[T] | None = None,
    log: bool = False,
) -> T | str:
    """Get a required environment variable (raises if not set).

    Raises:
        EnvVarNotSetError: If the variable is not set.
        EnvVarTypeError: If as_type is specified and conversion fails.
    """
    value = os.environ.get(name)

    if value is None:
        raise EnvVarNotSetError(name)

    if log:
        _log_access(name, value)

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value
