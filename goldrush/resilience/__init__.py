"""Resilience components for the GoldRush client."""

from goldrush.resilience.circuit_breaker import CircuitBreaker, CircuitState
from goldrush.resilience.rate_limiter import RateLimiter, TokenBucket

__all__ = [
    "CircuitBreaker",
    "CircuitState",
    "RateLimiter",
    "TokenBucket",
]
