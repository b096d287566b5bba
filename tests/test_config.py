import logging

from oauth_shapes.config import Settings, get_settings
from oauth_shapes.log import configure_logging


def test_defaults():
    settings = get_settings()
    assert settings.LOG_LEVEL == "WARNING"
    assert settings.ENABLE_DEBUG_LOGGING is False
    assert settings.LOG_REJECTIONS is True
    assert settings.MAX_DESCRIPTION_VIOLATIONS == 5


def test_environment_override(monkeypatch):
    """Settings are read from OAUTH_SHAPES_* environment variables"""
    monkeypatch.setenv("OAUTH_SHAPES_LOG_LEVEL", "info")
    monkeypatch.setenv("OAUTH_SHAPES_MAX_DESCRIPTION_VIOLATIONS", "10")
    settings = get_settings()
    assert settings.LOG_LEVEL == "info"
    assert settings.MAX_DESCRIPTION_VIOLATIONS == 10


def test_settings_cached():
    assert get_settings() is get_settings()


def test_configure_logging_level():
    assert configure_logging(Settings(LOG_LEVEL="info")) == logging.INFO


def test_configure_logging_debug_flag():
    settings = Settings(LOG_LEVEL="ERROR", ENABLE_DEBUG_LOGGING=True)
    assert configure_logging(settings) == logging.DEBUG


def test_configure_logging_unknown_level():
    assert configure_logging(Settings(LOG_LEVEL="chatty")) == logging.WARNING
