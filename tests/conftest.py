"""Shared test fixtures for the client test suite."""

from __future__ import annotations

import os

import pytest

from goldrush.config.settings import ClientSettings
from goldrush.resilience.circuit_breaker import CircuitBreaker
from tests.fakes import BASE_URL, SleepRecorder


# ---------------------------------------------------------------------------
# Keep the environment from leaking into ClientSettings
# ---------------------------------------------------------------------------

@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove GOLDRUSH_* variables so settings only see test values."""
    for key in list(os.environ):
        if key.startswith("GOLDRUSH_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def settings(clean_env: None) -> ClientSettings:
    """Test settings with safe defaults."""
    return ClientSettings(
        api_key="test-key",
        base_url=BASE_URL,
        max_retries=3,
        retry_base_delay_seconds=0.1,
    )


# ---------------------------------------------------------------------------
# Component fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def sleeps() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def circuit_breaker() -> CircuitBreaker:
    return CircuitBreaker(window_size=10, failure_threshold=5, cooldown_seconds=30)
