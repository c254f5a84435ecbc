"""Circuit breaker guarding the API.

Tracks transient failures using a sliding window of recent calls and
transitions through closed → open → half-open states so a failing API is not
hammered with requests that cannot succeed.

State machine:
- Closed → Open: failure count in sliding window reaches threshold
- Open → Half-Open: cooldown period elapses
- Half-Open → Closed: trial request succeeds
- Half-Open → Open: trial request fails
"""

from __future__ import annotations

import logging
import time
from collections import deque
from enum import Enum

logger = logging.getLogger(__name__)


class CircuitState(str, Enum):
    """Circuit breaker states."""

    CLOSED = "closed"
    OPEN = "open"
    HALF_OPEN = "half_open"


class CircuitBreaker:
    """Sliding window circuit breaker.

    Args:
        window_size: Maximum number of recent calls to track.
        failure_threshold: Number of failures in the window that opens the circuit.
        cooldown_seconds: Seconds to stay open before allowing a trial request.
    """

    def __init__(
        self,
        window_size: int = 10,
        failure_threshold: int = 5,
        cooldown_seconds: int = 30,
    ) -> None:
        self._window_size = window_size
        self._failure_threshold = failure_threshold
        self._cooldown_seconds = cooldown_seconds
        self._state = CircuitState.CLOSED
        self._recent_calls: deque[tuple[float, bool]] = deque()
        self._last_state_change = time.monotonic()

    @property
    def state(self) -> CircuitState:
        return self._state

    def can_call(self) -> bool:
        """Check whether a request may be sent.

        - Closed: always allowed.
        - Open: allowed only once the cooldown has elapsed (moves to half-open).
        - Half-open: allowed (trial request).
        """
        if self._state == CircuitState.OPEN:
            elapsed = time.monotonic() - self._last_state_change
            if elapsed >= self._cooldown_seconds:
                self._transition(CircuitState.HALF_OPEN)
                return True
            return False

        return True

    def record_success(self) -> None:
        """Record a request that got an answer.

        In half-open state, closes the circuit and resets the window.
        """
        if self._state == CircuitState.HALF_OPEN:
            self._transition(CircuitState.CLOSED)
            self._recent_calls.clear()
            return

        self._append_call(success=True)

    def record_failure(self) -> None:
        """Record a transient failure.

        In half-open state, reopens the circuit.
        In closed state, opens it once failures reach the threshold.
        """
        if self._state == CircuitState.HALF_OPEN:
            self._transition(CircuitState.OPEN)
            self._recent_calls.clear()
            return

        self._append_call(success=False)

        if self._state == CircuitState.CLOSED:
            failure_count = sum(1 for _, success in self._recent_calls if not success)
            if failure_count >= self._failure_threshold:
                self._transition(CircuitState.OPEN)

    def _transition(self, state: CircuitState) -> None:
        logger.info("Circuit breaker %s → %s", self._state.value, state.value)
        self._state = state
        self._last_state_change = time.monotonic()

    def _append_call(self, *, success: bool) -> None:
        """Append a call result to the sliding window, trimming to window_size."""
        self._recent_calls.append((time.monotonic(), success))
        while len(self._recent_calls) > self._window_size:
            self._recent_calls.popleft()
