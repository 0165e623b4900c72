"""
Tests for core/config.py and core/logging.py.
"""

import logging

import pytest
from pydantic import ValidationError

from tagcheck.core.config import Settings, settings
from tagcheck.core.logging import LOG_FORMAT, configure_logging, get_logger


def test_settings_defaults():
    """Test default configuration values."""
    config = Settings(_env_file=None)

    assert config.INDENT_WIDTH == 4
    assert config.HTML_EXTENSIONS == [".html", ".htm"]
    assert config.DOCUMENT_ENCODING == "utf-8"


def test_settings_normalization():
    """Test level and extension normalization."""
    config = Settings(_env_file=None, LOG_LEVEL=" debug ", HTML_EXTENSIONS=["XHTML", ".Html", " "])

    assert config.LOG_LEVEL == "DEBUG"
    assert config.HTML_EXTENSIONS == [".xhtml", ".html"]


def test_settings_from_environment(monkeypatch):
    """Test values are read from the environment."""
    monkeypatch.setenv("INDENT_WIDTH", "2")

    assert Settings(_env_file=None).INDENT_WIDTH == 2


def test_settings_rejects_negative_indent():
    """Test INDENT_WIDTH must be >= 0."""
    with pytest.raises(ValidationError):
        Settings(_env_file=None, INDENT_WIDTH=-1)


def test_get_logger():
    """Test logger helper returns named stdlib loggers."""
    logger = get_logger("tagcheck.test")

    assert isinstance(logger, logging.Logger)
    assert logger.name == "tagcheck.test"


def test_configure_logging_uses_settings_level(monkeypatch):
    """Test the default level comes from settings.LOG_LEVEL."""
    calls = []
    monkeypatch.setattr(settings, "LOG_LEVEL", "WARNING")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging()
    configure_logging("debug")
    configure_logging("nonsense")

    assert [c["level"] for c in calls] == [logging.WARNING, logging.DEBUG, logging.INFO]
    assert calls[0]["format"] == LOG_FORMAT
