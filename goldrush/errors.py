"""Error hierarchy for the GoldRush client.

Every terminal outcome of a dispatch is one of these exceptions. Each class
carries the ``ErrorKind`` it represents and whether that kind is eligible for
retry; the dispatcher relies on ``retryable`` and nothing else when deciding
whether to send again.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Classification taxonomy for failed requests."""

    MISSING_CREDENTIAL = "missing_credential"
    NETWORK_FAILURE = "network_failure"
    RATE_LIMITED = "rate_limited"
    CLIENT_REQUEST_ERROR = "client_request_error"
    SERVER_FAILURE = "server_failure"
    SERIALIZATION_FAILURE = "serialization_failure"
    API_DOMAIN_ERROR = "api_domain_error"
    CIRCUIT_OPEN = "circuit_open"


class GoldRushError(Exception):
    """Base error for all client errors."""

    kind: ErrorKind | None = None
    retryable: bool = False
    message: str = "GoldRush request failed"

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        code: int | None = None,
        attempts: int = 0,
        **kwargs: object,
    ) -> None:
        self.message = message or self.__class__.message
        self.status_code = status_code
        self.code = code
        self.attempts = attempts
        self.details = kwargs
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (status {self.status_code})"
        return self.message


class MissingCredentialError(GoldRushError):
    """The API key was not provided or is blank."""

    kind = ErrorKind.MISSING_CREDENTIAL
    message = "Missing API key"


class NetworkError(GoldRushError):
    """DNS, TLS, connect, read or timeout failure before a response arrived."""

    kind = ErrorKind.NETWORK_FAILURE
    retryable = True
    message = "Network failure"


class RateLimitedError(GoldRushError):
    """The API answered 429 Too Many Requests."""

    kind = ErrorKind.RATE_LIMITED
    retryable = True
    message = "Rate limited by the API"


class ClientRequestError(GoldRushError):
    """The API rejected the request (4xx other than 429)."""

    kind = ErrorKind.CLIENT_REQUEST_ERROR
    message = "Request rejected by the API"


class ServerError(GoldRushError):
    """The API failed to serve the request (5xx)."""

    kind = ErrorKind.SERVER_FAILURE
    retryable = True
    message = "API server failure"


class SerializationError(GoldRushError):
    """A 2xx response body did not match the expected shape."""

    kind = ErrorKind.SERIALIZATION_FAILURE
    message = "Response body could not be parsed"


class ApiDomainError(GoldRushError):
    """A well-formed response envelope carried a business-level error."""

    kind = ErrorKind.API_DOMAIN_ERROR
    message = "API returned an error"


class CircuitOpenError(GoldRushError):
    """The circuit breaker is open; the request was not sent."""

    kind = ErrorKind.CIRCUIT_OPEN
    message = "Circuit breaker open for the API"


ERROR_TYPES: dict[ErrorKind, type[GoldRushError]] = {
    ErrorKind.MISSING_CREDENTIAL: MissingCredentialError,
    ErrorKind.NETWORK_FAILURE: NetworkError,
    ErrorKind.RATE_LIMITED: RateLimitedError,
    ErrorKind.CLIENT_REQUEST_ERROR: ClientRequestError,
    ErrorKind.SERVER_FAILURE: ServerError,
    ErrorKind.SERIALIZATION_FAILURE: SerializationError,
    ErrorKind.API_DOMAIN_ERROR: ApiDomainError,
    ErrorKind.CIRCUIT_OPEN: CircuitOpenError,
}
