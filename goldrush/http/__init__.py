"""Request dispatch layer: transport, classification and retry."""

from goldrush.http.classifier import Classification, classify, error_for
from goldrush.http.dispatcher import (
    DispatchState,
    RetryDispatcher,
    RetryState,
    backoff_delay,
    next_step,
)
from goldrush.http.transport import RawResponse, Transport

__all__ = [
    "Classification",
    "DispatchState",
    "RawResponse",
    "RetryDispatcher",
    "RetryState",
    "Transport",
    "backoff_delay",
    "classify",
    "error_for",
    "next_step",
]
