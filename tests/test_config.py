"""Tests for settings loading and logging configuration."""

import pytest
import structlog

from docschema.config import Settings, get_settings
from docschema.engine import ValidationEngine
from docschema.logging_config import configure_logging


@pytest.fixture
def clean_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(clean_settings, monkeypatch):  # pylint: disable=redefined-outer-name,unused-argument
    for name in ("DOCSCHEMA_MAX_DEPTH", "DOCSCHEMA_CONCURRENT_VALIDATION", "DOCSCHEMA_LOG_LEVEL", "DOCSCHEMA_DEBUG"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.MAX_DEPTH == 32
    assert settings.CONCURRENT_VALIDATION is True
    assert settings.LOG_LEVEL == "info"
    assert settings.DEBUG is False


def test_environment_overrides_engine_defaults(clean_settings, monkeypatch):  # pylint: disable=redefined-outer-name,unused-argument
    monkeypatch.setenv("DOCSCHEMA_MAX_DEPTH", "5")
    monkeypatch.setenv("DOCSCHEMA_CONCURRENT_VALIDATION", "false")

    engine = ValidationEngine()

    assert engine.max_depth == 5
    assert engine.concurrent is False


def test_explicit_arguments_win(clean_settings, monkeypatch):  # pylint: disable=redefined-outer-name,unused-argument
    monkeypatch.setenv("DOCSCHEMA_MAX_DEPTH", "5")

    engine = ValidationEngine(max_depth=9, concurrent=True)

    assert engine.max_depth == 9
    assert engine.concurrent is True


def test_configure_logging():
    try:
        configure_logging(Settings(_env_file=None, LOG_LEVEL="warning", DEBUG=True))

        assert structlog.is_configured()
    finally:
        structlog.reset_defaults()


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging(Settings(_env_file=None, LOG_LEVEL="chatty"))
