"""Tests for ClientSettings."""

import os
from unittest.mock import patch

import pytest

from httpy.config import ClientSettings, build_settings
from httpy.exceptions import HttpyConfigError


class TestClientSettingsFromEnv:
    """Tests for ClientSettings.from_env()."""

    def test_defaults_without_env(self):
        """Should fall back to defaults when nothing is set."""
        with patch.dict(os.environ, {}, clear=True):
            settings = ClientSettings.from_env()
        assert settings.base_url == ""
        assert settings.timeout == 30.0
        assert settings.debug is False

    def test_reads_all_vars(self):
        """Should parse every supported variable."""
        env = {
            "HTTPY_BASE_URL": "http://localhost:3000/api",
            "HTTPY_TIMEOUT_MS": "1500",
            "HTTPY_DEBUG": "1",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = ClientSettings.from_env()
        assert settings.base_url == "http://localhost:3000/api"
        assert settings.timeout == 1.5
        assert settings.debug is True

    def test_debug_requires_exact_flag(self):
        """Only "1" enables debug output."""
        with patch.dict(os.environ, {"HTTPY_DEBUG": "true"}, clear=True):
            assert ClientSettings.from_env().debug is False

    def test_malformed_timeout_raises(self):
        """Should raise ValueError when HTTPY_TIMEOUT_MS is not an integer."""
        env = {"HTTPY_TIMEOUT_MS": "not_a_number"}
        with patch.dict(os.environ, env, clear=True), pytest.raises(ValueError):
            ClientSettings.from_env()

    def test_zero_timeout_raises_config_error(self):
        """Should reject a timeout that is not positive."""
        env = {"HTTPY_TIMEOUT_MS": "0"}
        with patch.dict(os.environ, env, clear=True), pytest.raises(HttpyConfigError):
            ClientSettings.from_env()


class TestBuildSettings:
    """Tests for build_settings()."""

    def test_valid_values(self):
        """Should return validated settings."""
        settings = build_settings(base_url="http://server", timeout=2)
        assert settings.base_url == "http://server"
        assert settings.timeout == 2.0

    def test_negative_timeout_raises(self):
        """Should wrap validation errors in HttpyConfigError."""
        with pytest.raises(HttpyConfigError):
            build_settings(timeout=-1)
