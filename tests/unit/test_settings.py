"""Unit tests for client settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from goldrush import __version__
from goldrush.config.settings import DEFAULT_BASE_URL, ClientSettings

pytestmark = pytest.mark.usefixtures("clean_env")


class TestDefaults:
    def test_defaults(self):
        settings = ClientSettings()
        assert settings.api_key == ""
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout_seconds == 30.0
        assert settings.max_retries == 3
        assert settings.retry_base_delay_seconds == 0.2
        assert settings.rate_limit_per_second is None
        assert settings.circuit_breaker_enabled is False

    def test_user_agent_carries_version(self):
        assert ClientSettings().user_agent.endswith(__version__)


class TestEnvironment:
    def test_reads_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("GOLDRUSH_API_KEY", "cqt_env")
        monkeypatch.setenv("GOLDRUSH_MAX_RETRIES", "5")
        monkeypatch.setenv("GOLDRUSH_RATE_LIMIT_PER_SECOND", "4")
        monkeypatch.setenv("GOLDRUSH_CIRCUIT_BREAKER_ENABLED", "true")

        settings = ClientSettings()

        assert settings.api_key == "cqt_env"
        assert settings.max_retries == 5
        assert settings.rate_limit_per_second == 4.0
        assert settings.circuit_breaker_enabled is True

    def test_arguments_override_environment(self, monkeypatch):
        monkeypatch.setenv("GOLDRUSH_MAX_RETRIES", "5")
        assert ClientSettings(max_retries=1).max_retries == 1


class TestValidation:
    @pytest.mark.parametrize("value", [-1, 11])
    def test_max_retries_bounds(self, value):
        with pytest.raises(ValidationError):
            ClientSettings(max_retries=value)

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            ClientSettings(timeout_seconds=0)

    def test_negative_base_delay_rejected(self):
        with pytest.raises(ValidationError):
            ClientSettings(retry_base_delay_seconds=-0.1)

    def test_settings_are_frozen(self):
        settings = ClientSettings()
        with pytest.raises(ValidationError):
            settings.max_retries = 7
