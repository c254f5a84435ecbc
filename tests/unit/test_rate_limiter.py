"""Unit tests for the token bucket rate limiter."""

from __future__ import annotations

import time

import pytest

from goldrush.resilience.rate_limiter import RateLimiter, TokenBucket


class TestTokenBucket:
    """Tests for the TokenBucket dataclass."""

    def _bucket(self, **overrides) -> TokenBucket:
        fields = {"capacity": 2, "rate": 0.5, "base_rate": 0.5, "tokens": 0.0, "updated_at": 100.0}
        fields.update(overrides)
        return TokenBucket(**fields)

    def test_refill_credits_elapsed_time(self) -> None:
        bucket = self._bucket()
        bucket.refill(102.0)
        assert bucket.tokens == pytest.approx(1.0)
        assert bucket.updated_at == 102.0

    def test_refill_ignores_clock_going_backwards(self) -> None:
        bucket = self._bucket(tokens=1.0)
        bucket.refill(99.0)
        assert bucket.tokens == 1.0
        assert bucket.updated_at == 100.0

    def test_refill_caps_at_capacity(self) -> None:
        bucket = self._bucket()
        bucket.refill(10_000.0)
        assert bucket.tokens == 2.0

    def test_expired_slowdown_restores_base_rate(self) -> None:
        bucket = self._bucket(rate=0.25, slow_until=101.0)
        assert bucket.is_reduced is True
        bucket.refill(101.5)
        assert bucket.rate == 0.5
        assert bucket.is_reduced is False


class TestRateLimiter:
    """Tests for the RateLimiter class."""

    def test_starts_full(self) -> None:
        stats = RateLimiter(per_second=2.0, burst=4).get_stats()
        assert stats["current_tokens"] == pytest.approx(4.0)
        assert stats["max_tokens"] == 4
        assert stats["refill_rate"] == pytest.approx(2.0)
        assert stats["is_reduced"] is False

    @pytest.mark.parametrize("per_second, burst", [(0, 1), (-1.0, 1), (1.0, 0)])
    def test_rejects_invalid_configuration(self, per_second, burst) -> None:
        with pytest.raises(ValueError):
            RateLimiter(per_second=per_second, burst=burst)

    async def test_acquire_consumes_token(self) -> None:
        limiter = RateLimiter(per_second=0.1, burst=3)
        await limiter.acquire()
        assert limiter.get_stats()["current_tokens"] == pytest.approx(2.0, abs=0.1)

    async def test_burst_goes_out_without_waiting(self) -> None:
        limiter = RateLimiter(per_second=0.1, burst=5)

        start = time.monotonic()
        for _ in range(5):
            await limiter.acquire()

        assert time.monotonic() - start < 0.5
        assert limiter.get_stats()["current_tokens"] < 1.0

    async def test_acquire_blocks_when_no_tokens(self) -> None:
        """acquire() waits for a refill once the bucket is empty."""
        limiter = RateLimiter(per_second=4.0, burst=1)
        await limiter.acquire()

        start = time.monotonic()
        await limiter.acquire()
        elapsed = time.monotonic() - start

        # 1 token at 4 tokens/s
        assert elapsed >= 0.15

    def test_reduce_rate(self) -> None:
        limiter = RateLimiter(per_second=2.0, burst=2)

        limiter.reduce_rate(factor=0.5, duration_seconds=300)

        stats = limiter.get_stats()
        assert stats["refill_rate"] == pytest.approx(1.0)
        assert stats["is_reduced"] is True

    def test_reduce_rate_does_not_compound(self) -> None:
        limiter = RateLimiter(per_second=2.0, burst=2)

        limiter.reduce_rate(factor=0.5)
        limiter.reduce_rate(factor=0.5)

        assert limiter.get_stats()["refill_rate"] == pytest.approx(1.0)

    def test_rate_restores_after_backoff_expires(self) -> None:
        limiter = RateLimiter(per_second=2.0, burst=2)
        limiter.reduce_rate(factor=0.5, duration_seconds=300)

        bucket = limiter._bucket
        bucket.slow_until = time.monotonic() - 1
        bucket.updated_at = time.monotonic() - 1

        stats = limiter.get_stats()
        assert stats["is_reduced"] is False
        assert stats["refill_rate"] == pytest.approx(2.0)

    def test_tokens_do_not_exceed_max(self) -> None:
        limiter = RateLimiter(per_second=1.0, burst=2)
        limiter._bucket.updated_at = time.monotonic() - 100

        assert limiter.get_stats()["current_tokens"] <= 2.0
