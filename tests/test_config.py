"""Tests for application configuration."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from quest_commands.config import Settings, get_settings


class TestSettingsDefaults:
    """Tests for default configuration values."""

    def test_default_history_size(self):
        """History keeps 100 entries by default."""
        settings = Settings(_env_file=None)
        assert settings.history_max_size == 100

    def test_default_autocomplete_limit(self):
        """Autocomplete returns up to 10 suggestions by default."""
        settings = Settings(_env_file=None)
        assert settings.autocomplete_limit == 10

    def test_default_debug_is_false(self):
        """Debug mode should be off by default."""
        settings = Settings(_env_file=None)
        assert settings.debug is False
        assert settings.effective_log_level == "WARNING"


class TestSettingsFromEnvironment:
    """Tests for loading settings from the environment."""

    def test_history_size_from_env(self):
        """HISTORY_MAX_SIZE overrides the default."""
        with patch.dict(os.environ, {"HISTORY_MAX_SIZE": "25"}, clear=False):
            settings = Settings(_env_file=None)
            assert settings.history_max_size == 25

    def test_env_is_case_insensitive(self):
        """Lower-case variable names work too."""
        with patch.dict(os.environ, {"autocomplete_limit": "4"}, clear=False):
            settings = Settings(_env_file=None)
            assert settings.autocomplete_limit == 4

    def test_debug_forces_debug_logging(self):
        """DEBUG=true switches logging to DEBUG."""
        with patch.dict(os.environ, {"DEBUG": "true", "LOG_LEVEL": "ERROR"}, clear=False):
            settings = Settings(_env_file=None)
            assert settings.effective_log_level == "DEBUG"


class TestSettingsValidation:
    """Tests for configuration validation."""

    def test_history_size_must_be_positive(self):
        """A zero-length history is rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, history_max_size=0)

    def test_autocomplete_limit_must_be_positive(self):
        """A zero suggestion limit is rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, autocomplete_limit=0)

    def test_autocomplete_limit_capped_at_ten(self):
        """AUTOCOMPLETE_LIMIT above ten is rejected."""
        with patch.dict(os.environ, {"AUTOCOMPLETE_LIMIT": "30"}, clear=False):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_log_level_must_be_known(self):
        """Unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_returns_same_instance(self):
        """get_settings is cached."""
        assert get_settings() is get_settings()
