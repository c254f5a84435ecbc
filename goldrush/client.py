"""GoldRush API client.

Wires settings, the shared transport, the optional rate limiter and circuit
breaker, and the retry dispatcher together, and exposes the endpoint
services on top of them.

A blank API key is rejected at construction time, before any transport is
created, so no request can ever leave without a credential.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping
from typing import Any

import httpx

from goldrush.config.settings import ClientSettings
from goldrush.errors import MissingCredentialError
from goldrush.http.dispatcher import RetryDispatcher, SleepFn, is_blank
from goldrush.http.transport import Transport
from goldrush.models.envelope import ResponseEnvelope
from goldrush.models.request import RequestSpec
from goldrush.pagination import ItemsFn, PageIterator, default_items
from goldrush.resilience.circuit_breaker import CircuitBreaker
from goldrush.resilience.rate_limiter import RateLimiter
from goldrush.services.balances import BalanceService
from goldrush.services.transactions import TransactionService

logger = logging.getLogger(__name__)

Params = Mapping[str, object] | Iterable[tuple[str, object]] | None


class GoldRushClient:
    """Async client for the GoldRush multi-chain data API.

    Parameters
    ----------
    api_key:
        API key; falls back to ``settings.api_key`` (``GOLDRUSH_API_KEY``).
    settings:
        Client settings; defaults are read from the environment.
    http_transport:
        Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.
    sleep:
        Awaitable used for retry backoff.

    Raises
    ------
    MissingCredentialError
        If no non-blank API key is available.
    """

    def __init__(
        self,
        api_key: str | None = None,
        settings: ClientSettings | None = None,
        *,
        http_transport: httpx.AsyncBaseTransport | None = None,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        self._settings = settings or ClientSettings()
        credential = api_key if api_key is not None else self._settings.api_key
        if is_blank(credential):
            raise MissingCredentialError()

        self._transport = Transport(
            self._settings.base_url,
            self._settings.timeout_seconds,
            self._settings.user_agent,
            http_transport=http_transport,
        )

        self.rate_limiter: RateLimiter | None = None
        if self._settings.rate_limit_per_second is not None:
            self.rate_limiter = RateLimiter(
                per_second=self._settings.rate_limit_per_second,
                burst=self._settings.rate_limit_burst,
            )

        self.circuit_breaker: CircuitBreaker | None = None
        if self._settings.circuit_breaker_enabled:
            self.circuit_breaker = CircuitBreaker(
                window_size=self._settings.cb_window_size,
                failure_threshold=self._settings.cb_failure_threshold,
                cooldown_seconds=self._settings.cb_cooldown_seconds,
            )

        self._dispatcher = RetryDispatcher(
            self._transport,
            credential,
            max_retries=self._settings.max_retries,
            base_delay=self._settings.retry_base_delay_seconds,
            rate_limiter=self.rate_limiter,
            circuit_breaker=self.circuit_breaker,
            rate_limit_backoff_seconds=self._settings.rate_limit_backoff_seconds,
            sleep=sleep,
        )

        self.balances = BalanceService(self._dispatcher)
        self.transactions = TransactionService(self._dispatcher)

        logger.debug(
            "GoldRush client ready: base_url=%s max_retries=%d",
            self._settings.base_url,
            self._settings.max_retries,
        )

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def dispatcher(self) -> RetryDispatcher:
        return self._dispatcher

    async def request(self, spec: RequestSpec, data_type: Any = None) -> ResponseEnvelope:
        """Dispatch a prepared request."""
        return await self._dispatcher.dispatch(spec, data_type)

    async def get(
        self, path: str, params: Params = None, data_type: Any = None
    ) -> ResponseEnvelope:
        """GET ``path`` and parse the envelope's data as ``data_type``."""
        return await self._dispatcher.dispatch(RequestSpec.get(path, params), data_type)

    def paginate(
        self,
        path: str,
        params: Params = None,
        data_type: Any = None,
        *,
        items: ItemsFn = default_items,
    ) -> PageIterator:
        """Iterate over the pages of any page-number paged endpoint."""
        return PageIterator(
            self._dispatcher.dispatch,
            RequestSpec.get(path, params),
            data_type,
            items=items,
        )

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> GoldRushClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
