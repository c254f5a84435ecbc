"""Single-exchange HTTP transport.

Owns one long-lived ``httpx.AsyncClient`` so connections are pooled and
reused across calls. ``send()`` performs exactly one request: it does not
retry, parse or classify. Failures before a usable response (DNS, TLS,
connect, read, timeout, redirect loops) surface as ``NetworkError``. A body
whose Content-Encoding cannot be decoded surfaces as ``SerializationError``.
Every other received response, whatever its status, is returned as a
``RawResponse``.

SECURITY: The bearer credential is only ever placed in the request header.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx

from goldrush.errors import NetworkError, SerializationError
from goldrush.models.request import RequestSpec

logger = logging.getLogger(__name__)


def _describe(exc: Exception) -> str:
    return f"{type(exc).__name__}: {exc}" if str(exc) else type(exc).__name__


@dataclass(frozen=True)
class RawResponse:
    """Status code and undecoded body of one exchange."""

    status_code: int
    content: bytes
    headers: dict[str, str] = field(default_factory=dict)


class Transport:
    """Async HTTP transport bound to one API base URL.

    Parameters
    ----------
    base_url:
        API root, e.g. "https://api.covalenthq.com".
    timeout_seconds:
        Default per-request timeout covering connect, read and write.
    user_agent:
        Identifying ``User-Agent`` header value.
    http_transport:
        Optional httpx transport (e.g. ``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 30.0,
        user_agent: str | None = None,
        *,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {"Accept": "application/json"}
        if user_agent:
            headers["User-Agent"] = user_agent

        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout_seconds,
            headers=headers,
            follow_redirects=True,
            transport=http_transport,
        )

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def send(
        self,
        spec: RequestSpec,
        credential: str | None,
        timeout: float | None = None,
        *,
        request_id: str | None = None,
    ) -> RawResponse:
        """Execute one request and return its raw response.

        Raises
        ------
        NetworkError
            If no response was received.
        SerializationError
            If the response body could not be decoded.
        """
        headers: dict[str, str] = {}
        if spec.requires_auth and credential:
            headers["Authorization"] = f"Bearer {credential}"
        if request_id is not None:
            headers["X-Request-ID"] = request_id

        kwargs: dict = {"params": list(spec.query), "headers": headers}
        if timeout is not None:
            kwargs["timeout"] = timeout

        try:
            response = await self._client.request(spec.method, spec.path, **kwargs)
        except httpx.DecodingError as exc:
            # The response arrived but its Content-Encoding could not be undone
            logger.debug(
                "Undecodable body for %s %s",
                spec.method,
                spec.path,
                extra={"request_id": request_id},
            )
            raise SerializationError(_describe(exc)) from exc
        except httpx.RequestError as exc:
            logger.debug(
                "Transport failure for %s %s: %s",
                spec.method,
                spec.path,
                type(exc).__name__,
                extra={"request_id": request_id},
            )
            raise NetworkError(_describe(exc)) from exc

        return RawResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> Transport:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
