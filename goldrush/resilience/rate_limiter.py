"""Client-side token bucket rate limiter.

Keeps outgoing requests under the API's request rate. One bucket is shared
by every call made through a client.

Key behaviors:
- the bucket starts full, holding ``burst`` tokens
- acquire() takes one token, suspending (async sleep) while the bucket is empty
- reduce_rate() slows the refill for a while after the API answers 429;
  the configured rate comes back once that window has passed
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class TokenBucket:
    """Token bucket state."""

    capacity: int
    rate: float  # tokens per second currently applied
    base_rate: float  # configured rate, restored after a slowdown
    tokens: float
    updated_at: float  # time.monotonic() of the last refill
    slow_until: float | None = None

    @property
    def is_reduced(self) -> bool:
        return self.slow_until is not None

    def refill(self, now: float) -> None:
        """Credit the tokens earned since ``updated_at``."""
        if now <= self.updated_at:
            return
        if self.slow_until is not None and now >= self.slow_until:
            self.rate = self.base_rate
            self.slow_until = None
            logger.info("Request rate restored to %.4f/s", self.rate)

        earned = (now - self.updated_at) * self.rate
        self.tokens = min(float(self.capacity), self.tokens + earned)
        self.updated_at = now


class RateLimiter:
    """Token bucket rate limiter.

    Args:
        per_second: Sustained requests per second.
        burst: Bucket capacity, i.e. how many requests may go out back to back.
    """

    def __init__(self, per_second: float = 10.0, burst: int = 20) -> None:
        if per_second <= 0:
            raise ValueError("per_second must be positive")
        if burst < 1:
            raise ValueError("burst must be at least 1")

        self._bucket = TokenBucket(
            capacity=burst,
            rate=per_second,
            base_rate=per_second,
            tokens=float(burst),
            updated_at=time.monotonic(),
        )
        self._lock = asyncio.Lock()

    async def acquire(self) -> None:
        """Take one token, waiting for the bucket to refill if it is empty."""
        bucket = self._bucket
        while True:
            async with self._lock:
                bucket.refill(time.monotonic())
                if bucket.tokens >= 1.0:
                    bucket.tokens -= 1.0
                    return
                shortfall = 1.0 - bucket.tokens
                wait_time = shortfall / bucket.rate

            logger.debug("Rate limit reached, waiting %.3fs", wait_time)
            # Other callers may refill or drain the bucket meanwhile; re-check after waking
            await asyncio.sleep(wait_time)

    def reduce_rate(self, factor: float = 0.5, duration_seconds: int = 60) -> None:
        """Slow the refill to ``factor`` of the configured rate for a while.

        Repeated calls restart the window; they never compound below
        ``base_rate * factor``.
        """
        bucket = self._bucket
        bucket.refill(time.monotonic())
        bucket.rate = bucket.base_rate * factor
        bucket.slow_until = time.monotonic() + duration_seconds

        logger.warning(
            "API rate limited; slowing to %.4f/s (configured %.4f/s) for %ds",
            bucket.rate,
            bucket.base_rate,
            duration_seconds,
        )

    def get_stats(self) -> dict:
        """Snapshot of the bucket after refilling it to now."""
        bucket = self._bucket
        bucket.refill(time.monotonic())
        return {
            "current_tokens": bucket.tokens,
            "max_tokens": bucket.capacity,
            "refill_rate": bucket.rate,
            "is_reduced": bucket.is_reduced,
        }
