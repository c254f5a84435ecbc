"""Pydantic Settings for the GoldRush client.

All environment variables use the GOLDRUSH_ prefix.
Example: GOLDRUSH_API_KEY=cqt_xxx, GOLDRUSH_MAX_RETRIES=5
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from goldrush import __version__

DEFAULT_BASE_URL = "https://api.covalenthq.com"


class ClientSettings(BaseSettings):
    """Client configuration validated from arguments or environment variables.

    Settings are frozen once built so a single instance can be shared by
    every concurrent call without synchronization.
    """

    # Credential (blank is rejected by the client, not here)
    api_key: str = ""

    # Transport
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = Field(default=30.0, gt=0)
    user_agent: str = f"goldrush-client-py/{__version__}"

    # Retry
    max_retries: int = Field(default=3, ge=0, le=10)
    retry_base_delay_seconds: float = Field(default=0.2, ge=0)

    # Rate limiting (None disables the limiter)
    rate_limit_per_second: float | None = Field(default=None, gt=0)
    rate_limit_burst: int = Field(default=20, ge=1)
    rate_limit_backoff_seconds: int = Field(default=60, ge=0)

    # Circuit breaker
    circuit_breaker_enabled: bool = False
    cb_window_size: int = Field(default=10, ge=1)
    cb_failure_threshold: int = Field(default=5, ge=1)
    cb_cooldown_seconds: int = Field(default=30, ge=1)

    model_config = {"env_prefix": "GOLDRUSH_", "frozen": True}
