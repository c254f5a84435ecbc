"""Pure classification of request outcomes.

Maps a transport failure, an HTTP status, a body that failed to parse, or an
envelope carrying an ``error`` object onto an ``ErrorKind`` plus a retry
decision. Classification has no side effects and is deterministic for
identical inputs.

Rules:
- Transport failure           -> NETWORK_FAILURE        (retryable)
- Undecodable body encoding   -> SERIALIZATION_FAILURE
- 429                         -> RATE_LIMITED           (retryable)
- 500-599                     -> SERVER_FAILURE         (retryable)
- 400-499 except 429          -> CLIENT_REQUEST_ERROR
- any other non-2xx           -> CLIENT_REQUEST_ERROR
- 2xx, body fails to parse    -> SERIALIZATION_FAILURE
- 2xx, envelope.error present -> API_DOMAIN_ERROR
- 2xx otherwise               -> success (None)
"""

from __future__ import annotations

from dataclasses import dataclass

from goldrush.errors import ERROR_TYPES, ErrorKind, GoldRushError
from goldrush.models.envelope import ApiErrorBody, ResponseEnvelope

TOO_MANY_REQUESTS = 429

_RETRYABLE_KINDS = frozenset(
    {ErrorKind.NETWORK_FAILURE, ErrorKind.RATE_LIMITED, ErrorKind.SERVER_FAILURE}
)


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one failed attempt."""

    kind: ErrorKind
    retryable: bool
    status_code: int | None = None
    error: ApiErrorBody | None = None
    reason: str | None = None


def is_retryable(kind: ErrorKind) -> bool:
    return kind in _RETRYABLE_KINDS


def _make(
    kind: ErrorKind,
    status_code: int | None = None,
    error: ApiErrorBody | None = None,
    reason: str | None = None,
) -> Classification:
    return Classification(
        kind=kind,
        retryable=is_retryable(kind),
        status_code=status_code,
        error=error,
        reason=reason,
    )


def classify(
    status_code: int | None = None,
    *,
    envelope: ResponseEnvelope | None = None,
    error_body: ApiErrorBody | None = None,
    transport_error: BaseException | None = None,
    parse_error: BaseException | None = None,
) -> Classification | None:
    """Classify one attempt's outcome.

    Returns ``None`` when the attempt is a clean success.
    """
    if transport_error is not None:
        kind = getattr(transport_error, "kind", None)
        if kind is not ErrorKind.SERIALIZATION_FAILURE:
            kind = ErrorKind.NETWORK_FAILURE
        return _make(kind, reason=str(transport_error) or None)

    if status_code is None:
        raise ValueError("status_code is required when no transport error occurred")

    if status_code == TOO_MANY_REQUESTS:
        return _make(ErrorKind.RATE_LIMITED, status_code, error_body)
    if 500 <= status_code <= 599:
        return _make(ErrorKind.SERVER_FAILURE, status_code, error_body)
    if not 200 <= status_code <= 299:
        return _make(ErrorKind.CLIENT_REQUEST_ERROR, status_code, error_body)

    if parse_error is not None:
        return _make(
            ErrorKind.SERIALIZATION_FAILURE,
            status_code,
            reason=str(parse_error) or None,
        )
    if envelope is not None and envelope.error is not None:
        error = envelope.error
        if error.status_code is None:
            error = error.model_copy(update={"status_code": status_code})
        return _make(ErrorKind.API_DOMAIN_ERROR, status_code, error)

    return None


def error_for(classification: Classification, *, attempts: int = 0) -> GoldRushError:
    """Build the exception matching a classification."""
    error_type = ERROR_TYPES[classification.kind]
    body = classification.error
    message = body.message if body is not None and body.message else classification.reason
    return error_type(
        message,
        status_code=classification.status_code,
        code=body.code if body is not None else None,
        attempts=attempts,
    )
