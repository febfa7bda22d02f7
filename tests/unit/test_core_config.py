"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Environment enum values
- Settings loading from ENUMIZER_* environment variables
- Validation (log level, module header)
- Default values
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from enumizer.core.config import Settings, get_settings
from enumizer.core.enums import Environment


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset the settings singleton around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.mark.unit
class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


@pytest.mark.unit
class TestSettingsDefaults:
    """Test default values with an empty environment."""

    def test_defaults(self):
        """Test defaults apply when no variables are set."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.log_generated_source is False
        assert settings.module_header.startswith("Generated by enumizer")
        assert settings.is_development is True
        assert settings.uses_json_logs is False


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings field validation."""

    def test_log_level_is_upper_cased(self):
        """Test log level names are normalized."""
        with patch.dict(os.environ, {"ENUMIZER_LOG_LEVEL": "debug"}, clear=True):
            assert get_settings().log_level == "DEBUG"

    def test_log_level_rejects_unknown_names(self):
        """Test unknown level names are rejected."""
        with patch.dict(os.environ, {"ENUMIZER_LOG_LEVEL": "chatty"}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings()

        assert "log_level must be one of" in str(exc_info.value)

    def test_module_header_must_be_single_line(self):
        """Test multi-line headers are rejected."""
        with pytest.raises(ValidationError):
            Settings(module_header="line one\nline two")

    @pytest.mark.parametrize("environment", ["testing", "ci"])
    def test_json_logs_in_automation(self, environment):
        """Test testing and CI environments use JSON logs."""
        with patch.dict(os.environ, {"ENUMIZER_ENVIRONMENT": environment}, clear=True):
            assert get_settings().uses_json_logs is True


@pytest.mark.unit
class TestGetSettings:
    """Test cached settings accessor."""

    def test_get_settings_is_cached(self):
        """Test the same instance is returned until the cache is cleared."""
        with patch.dict(os.environ, {}, clear=True):
            assert get_settings() is get_settings()
