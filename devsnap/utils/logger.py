"""Centralized logging for devsnap.

Applications configure logging once before use; library code that may run
unconfigured (backends embedded in another agent) logs through
``Logger.emit``, which is a no-op until ``Logger.configure`` has been called.

Usage:
    from devsnap.utils.logger import Logger

    # Configure once at startup (required before Logger.get)
    Logger.configure(level="INFO", timestamps=True)

    log = Logger.get("server")
    log.info("Listening on 127.0.0.1:6790")

    # Safe from library code
    Logger.emit("resolver", "DEBUG", "telephony unavailable")
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import TextIO


class LogLevel(Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        """Convert to Python logging level."""
        level: int = getattr(logging, self.value)
        return level


class LoggerNotConfiguredError(Exception):
    """Raised when trying to use Logger before calling Logger.configure()."""

    def __init__(self) -> None:
        super().__init__(
            "Logger not configured. Call Logger.configure() at application startup."
        )


class Logger:
    """Centralized logging for devsnap.

    Example:
        >>> Logger.configure(level="DEBUG", output="stderr")
        >>> Logger.get("snapshot").info("Get Device Info command")
    """

    _configured: bool = False
    _root_name: str = "devsnap"

    @classmethod
    def configure(
        cls,
        level: str | LogLevel = "INFO",
        output: str | Path | TextIO | None = None,
        timestamps: bool = True,
        include_location: bool = False,
    ) -> None:
        """Configure the logger. Must be called before Logger.get().

        Args:
            level: Log level name or LogLevel value.
            output: Where to send logs:
                - None: stderr (default, keeps stdout clean for JSON output)
                - "stdout": sys.stdout
                - str/Path: File path
                - TextIO: Any file-like object
            timestamps: Include timestamps in messages (default True).
            include_location: Include [filename:lineno] (default False).
        """
        if isinstance(level, str):
            level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(level.to_logging_level())

        for existing_handler in logger.handlers[:]:
            logger.removeHandler(existing_handler)
            existing_handler.close()

        new_handler: logging.Handler
        if output is None:
            new_handler = logging.StreamHandler(sys.stderr)
        elif output == "stdout":
            new_handler = logging.StreamHandler(sys.stdout)
        elif isinstance(output, str | Path):
            new_handler = logging.FileHandler(str(output))
        elif hasattr(output, "write"):
            new_handler = logging.StreamHandler(output)
        else:
            raise ValueError(f"Invalid output: {type(output)}")

        new_handler.setLevel(level.to_logging_level())

        parts = []
        if timestamps:
            parts.append("%(asctime)s")
        parts.append("%(levelname)s")
        parts.append("[%(name)s]")
        if include_location:
            parts.append("[%(filename)s:%(lineno)d]")
        parts.append("%(message)s")

        new_handler.setFormatter(logging.Formatter(" ".join(parts)))
        logger.addHandler(new_handler)
        logger.propagate = False

        cls._configured = True

    @classmethod
    def get(cls, name: str | None = None) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name (appended to "devsnap."). If None, returns root logger.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if name:
            return logging.getLogger(f"{cls._root_name}.{name}")
        return logging.getLogger(cls._root_name)

    @classmethod
    def set_level(cls, level: str | LogLevel) -> None:
        """Change log level without reconfiguring.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if isinstance(level, str):
            level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(level.to_logging_level())
        for handler in logger.handlers:
            handler.setLevel(level.to_logging_level())

    @classmethod
    def is_configured(cls) -> bool:
        """Check if logger has been configured."""
        return cls._configured

    @classmethod
    def emit(cls, name: str, level: str | LogLevel, message: str) -> None:
        """Log a message if the logger is configured, otherwise do nothing."""
        if not cls._configured:
            return
        if isinstance(level, str):
            level = LogLevel(level.upper())
        cls.get(name).log(level.to_logging_level(), message)
