"""Tests for the centralized logging utility."""

from io import StringIO

import pytest

from devsnap.utils.logger import Logger, LoggerNotConfiguredError


def test_logger_unconfigured(reset_logger):
    """Test that Logger.get before configuration raises and emit is a no-op."""
    with pytest.raises(LoggerNotConfiguredError):
        Logger.get("test")

    Logger.emit("test", "ERROR", "dropped")


def test_logger_configuration(reset_logger):
    """Test logger configuration."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)

    assert Logger.is_configured()

    Logger.get("test_config").debug("Debug message")

    content = output.getvalue()
    assert "DEBUG" in content
    assert "[devsnap.test_config]" in content
    assert "Debug message" in content


def test_logger_set_level(reset_logger):
    """Test changing log level."""
    output = StringIO()
    Logger.configure(level="INFO", output=output, timestamps=False)

    log = Logger.get("test_level")
    log.debug("Hidden")
    assert "Hidden" not in output.getvalue()

    Logger.set_level("DEBUG")
    log.debug("Visible")
    assert "Visible" in output.getvalue()


def test_emit_when_configured(reset_logger):
    """Test emit respects the configured level."""
    output = StringIO()
    Logger.configure(level="INFO", output=output, timestamps=False)

    Logger.emit("resolver", "DEBUG", "quiet")
    Logger.emit("snapshot", "INFO", "Get Device Info command")

    content = output.getvalue()
    assert "quiet" not in content
    assert "INFO [devsnap.snapshot] Get Device Info command" in content


def test_invalid_output(reset_logger):
    """Test an unusable output target is rejected."""
    with pytest.raises(ValueError):
        Logger.configure(output=42)
