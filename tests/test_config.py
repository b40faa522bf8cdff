"""Unit tests for configuration and logging setup."""

import logging

from bunkapp.config import Settings, get_settings
from bunkapp.logging_setup import setup_logging


def test_defaults(monkeypatch):
    """Settings fall back to defaults when the environment is empty."""
    for name in ('APP_NAME', 'APP_TAGLINE', 'DEFAULT_CRITERIA', 'STORAGE_PATH',
                 'ALLOW_ORIGINS', 'DEBUG', 'LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()
    assert settings == Settings()
    assert settings.default_criteria == 75.0
    assert settings.allow_origins == ["*"]
    assert settings.debug is False


def test_environment_overrides(monkeypatch):
    """Environment variables override defaults."""
    monkeypatch.setenv('APP_NAME', 'SkipSmart')
    monkeypatch.setenv('DEFAULT_CRITERIA', '80')
    monkeypatch.setenv('STORAGE_PATH', '/tmp/inputs.json')
    monkeypatch.setenv('ALLOW_ORIGINS', 'http://a.example, http://b.example')
    monkeypatch.setenv('DEBUG', 'true')
    monkeypatch.setenv('LOG_LEVEL', 'debug')

    settings = get_settings()
    assert settings.app_name == 'SkipSmart'
    assert settings.default_criteria == 80.0
    assert settings.storage_path == '/tmp/inputs.json'
    assert settings.allow_origins == ['http://a.example', 'http://b.example']
    assert settings.debug is True
    assert settings.log_level == 'DEBUG'


def test_invalid_default_criteria(monkeypatch):
    """Unparseable or out-of-range criteria fall back to 75."""
    for value in ('abc', '0', '150', '-5'):
        monkeypatch.setenv('DEFAULT_CRITERIA', value)
        assert get_settings().default_criteria == 75.0


def test_setup_logging():
    """The project logger is configured at the requested level."""
    logger = setup_logging("warning")
    assert logger.name == "bunkapp"
    assert logger.level == logging.WARNING
    assert logger.propagate is False

    assert setup_logging("nonsense").level == logging.INFO
    assert setup_logging("DEBUG", console=False).handlers == []
