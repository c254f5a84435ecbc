"""Retry dispatcher: drives one request to a terminal typed result.

The attempt loop is an explicit state machine:

    ATTEMPTING --success--------------------------> SUCCEEDED
    ATTEMPTING --failure, retryable, budget left--> RETRYING --sleep--> ATTEMPTING
    ATTEMPTING --failure, terminal or exhausted---> FAILED

Retry schedule: base_delay, base_delay*2, base_delay*4, ... (no jitter).
Total sends never exceed max_retries + 1. Client errors, serialization
failures and API domain errors are never retried.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import ValidationError

from goldrush.errors import (
    CircuitOpenError,
    ErrorKind,
    MissingCredentialError,
    NetworkError,
    SerializationError,
)
from goldrush.http.classifier import Classification, classify, error_for
from goldrush.http.transport import Transport
from goldrush.models.envelope import ResponseEnvelope, parse_envelope, parse_error_body
from goldrush.models.request import RequestSpec
from goldrush.resilience.circuit_breaker import CircuitBreaker
from goldrush.resilience.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

SleepFn = Callable[[float], Awaitable[Any]]


class DispatchState(str, Enum):
    """States of the attempt loop."""

    ATTEMPTING = "attempting"
    RETRYING = "retrying"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class RetryState:
    """Retry bookkeeping owned by a single dispatch call."""

    max_retries: int
    base_delay: float
    attempt: int = 0

    @property
    def exhausted(self) -> bool:
        return self.attempt >= self.max_retries


def backoff_delay(base_delay: float, attempt: int) -> float:
    """Delay before retry number ``attempt`` (1-based)."""
    if attempt < 1:
        raise ValueError("attempt must be >= 1")
    return base_delay * 2 ** (attempt - 1)


def next_step(retry: RetryState, classification: Classification) -> DispatchState:
    """Decide what follows a failed attempt."""
    if not classification.retryable or retry.exhausted:
        return DispatchState.FAILED
    return DispatchState.RETRYING


def is_blank(credential: str | None) -> bool:
    return credential is None or not credential.strip()


@dataclass
class _Attempt:
    envelope: ResponseEnvelope | None = None
    classification: Classification | None = None
    cause: BaseException | None = None


class RetryDispatcher:
    """Sends requests through a ``Transport`` with classification and retry.

    Parameters
    ----------
    transport:
        Shared transport used for every attempt.
    credential:
        API key sent as a bearer token.
    max_retries:
        Retries after the first send (total sends <= max_retries + 1).
    base_delay:
        Backoff delay in seconds before the first retry.
    timeout:
        Per-attempt timeout override; ``None`` uses the transport default.
    rate_limiter, circuit_breaker:
        Optional resilience components consulted around every send.
    sleep:
        Awaitable used for backoff delays (injectable for tests).
    """

    def __init__(
        self,
        transport: Transport,
        credential: str | None,
        *,
        max_retries: int = 3,
        base_delay: float = 0.2,
        timeout: float | None = None,
        rate_limiter: RateLimiter | None = None,
        circuit_breaker: CircuitBreaker | None = None,
        rate_limit_backoff_seconds: int = 60,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if base_delay < 0:
            raise ValueError("base_delay must be >= 0")

        self._transport = transport
        self._credential = credential
        self._max_retries = max_retries
        self._base_delay = base_delay
        self._timeout = timeout
        self._rate_limiter = rate_limiter
        self._circuit_breaker = circuit_breaker
        self._rate_limit_backoff_seconds = rate_limit_backoff_seconds
        self._sleep = sleep

    @property
    def max_retries(self) -> int:
        return self._max_retries

    async def dispatch(self, spec: RequestSpec, data_type: Any = None) -> ResponseEnvelope:
        """Send ``spec`` until it succeeds or fails terminally.

        Returns the parsed envelope whose ``data`` has ``data_type``.

        Raises
        ------
        MissingCredentialError
            Before any I/O, if the request needs auth and the credential is blank.
        GoldRushError
            The classified error of the last attempt.
        """
        if spec.requires_auth and is_blank(self._credential):
            raise MissingCredentialError()

        request_id = str(uuid.uuid4())
        retry = RetryState(max_retries=self._max_retries, base_delay=self._base_delay)
        state = DispatchState.ATTEMPTING
        outcome = _Attempt()

        while True:
            if state is DispatchState.ATTEMPTING:
                if self._circuit_breaker is not None and not self._circuit_breaker.can_call():
                    self._log_failure(
                        spec,
                        request_id,
                        retry.attempt,
                        ErrorKind.CIRCUIT_OPEN,
                        reason="circuit breaker open",
                    )
                    raise CircuitOpenError(attempts=retry.attempt)
                outcome = await self._attempt(spec, data_type, request_id)
                if outcome.classification is None:
                    state = DispatchState.SUCCEEDED
                else:
                    state = next_step(retry, outcome.classification)

            elif state is DispatchState.RETRYING:
                retry.attempt += 1
                delay = backoff_delay(retry.base_delay, retry.attempt)
                logger.warning(
                    "%s %s failed (%s), retry %d/%d in %.2fs",
                    spec.method,
                    spec.path,
                    outcome.classification.kind.value,
                    retry.attempt,
                    retry.max_retries,
                    delay,
                    extra={
                        "request_id": request_id,
                        "method": spec.method,
                        "path": spec.path,
                        "status_code": outcome.classification.status_code,
                        "attempt": retry.attempt,
                        "delay_seconds": delay,
                        "error_kind": outcome.classification.kind.value,
                    },
                )
                await self._sleep(delay)
                state = DispatchState.ATTEMPTING

            elif state is DispatchState.SUCCEEDED:
                return outcome.envelope

            else:
                classification = outcome.classification
                sends = retry.attempt + 1
                self._log_failure(
                    spec,
                    request_id,
                    sends,
                    classification.kind,
                    status_code=classification.status_code,
                    reason=classification.reason,
                )
                raise error_for(classification, attempts=sends) from outcome.cause

    @staticmethod
    def _log_failure(
        spec: RequestSpec,
        request_id: str,
        sends: int,
        kind: ErrorKind,
        *,
        status_code: int | None = None,
        reason: str | None = None,
    ) -> None:
        logger.error(
            "%s %s failed after %d attempt(s): %s",
            spec.method,
            spec.path,
            sends,
            kind.value,
            extra={
                "request_id": request_id,
                "method": spec.method,
                "path": spec.path,
                "status_code": status_code,
                "attempt": sends,
                "error_kind": kind.value,
                "error_reason": reason,
            },
        )

    async def _attempt(
        self,
        spec: RequestSpec,
        data_type: Any,
        request_id: str,
    ) -> _Attempt:
        """Perform one send and classify its outcome."""
        if self._rate_limiter is not None:
            await self._rate_limiter.acquire()

        try:
            raw = await self._transport.send(
                spec, self._credential, self._timeout, request_id=request_id
            )
        except (NetworkError, SerializationError) as exc:
            result = _Attempt(classification=classify(transport_error=exc), cause=exc)
        else:
            result = self._interpret(raw.status_code, raw.content, data_type)

        self._record(result.classification)
        return result

    @staticmethod
    def _interpret(status_code: int, content: bytes, data_type: Any) -> _Attempt:
        if not 200 <= status_code <= 299:
            error_body = parse_error_body(content, status_code)
            return _Attempt(classification=classify(status_code, error_body=error_body))

        try:
            envelope = parse_envelope(content, data_type)
        except ValidationError as exc:
            return _Attempt(
                classification=classify(status_code, parse_error=exc), cause=exc
            )

        classification = classify(status_code, envelope=envelope)
        if classification is None:
            return _Attempt(envelope=envelope)
        return _Attempt(envelope=envelope, classification=classification)

    def _record(self, classification: Classification | None) -> None:
        transient = classification is not None and classification.retryable

        if self._circuit_breaker is not None:
            if transient:
                self._circuit_breaker.record_failure()
            else:
                self._circuit_breaker.record_success()

        if (
            self._rate_limiter is not None
            and classification is not None
            and classification.kind is ErrorKind.RATE_LIMITED
        ):
            self._rate_limiter.reduce_rate(
                duration_seconds=self._rate_limit_backoff_seconds
            )
