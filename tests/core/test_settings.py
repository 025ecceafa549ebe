"""Tests for core.settings module.

Covers:
- AttributerSettings instantiation with defaults
- Environment variable override with the ATTRIBUTER_ prefix
- Field validation
- get_settings caching
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from attributer.core.settings import AttributerSettings, get_settings


class TestAttributerSettingsDefaults:
    def test_default_log_level(self):
        s = AttributerSettings()
        assert s.log_level == "WARNING"

    def test_default_log_format(self):
        s = AttributerSettings()
        assert s.log_format == "auto"

    def test_default_service_name(self):
        s = AttributerSettings()
        assert s.service_name == "attributer"


class TestAttributerSettingsEnvOverride:
    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("ATTRIBUTER_LOG_LEVEL", "debug")
        s = AttributerSettings()
        assert s.log_level == "DEBUG"

    def test_log_format_from_env(self, monkeypatch):
        monkeypatch.setenv("ATTRIBUTER_LOG_FORMAT", "console")
        s = AttributerSettings()
        assert s.log_format == "console"

    def test_unprefixed_env_is_ignored(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        s = AttributerSettings()
        assert s.log_level == "WARNING"


class TestAttributerSettingsValidation:
    def test_invalid_log_level(self):
        with pytest.raises(PydanticValidationError):
            AttributerSettings(log_level="LOUD")

    def test_invalid_log_format(self):
        with pytest.raises(PydanticValidationError):
            AttributerSettings(log_format="xml")


class TestGetSettings:
    def test_is_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()
