"""Async client for the GoldRush multi-chain data API."""

__version__ = "0.1.0"

from goldrush.chains import Chain
from goldrush.client import GoldRushClient
from goldrush.config import ClientSettings
from goldrush.errors import (
    ApiDomainError,
    CircuitOpenError,
    ClientRequestError,
    ErrorKind,
    GoldRushError,
    MissingCredentialError,
    NetworkError,
    RateLimitedError,
    SerializationError,
    ServerError,
)
from goldrush.models import (
    ApiErrorBody,
    BalancesOptions,
    PageInfo,
    PortfolioOptions,
    RequestSpec,
    ResponseEnvelope,
    SingleTxOptions,
    TxOptions,
)
from goldrush.logging_config import configure_logging
from goldrush.pagination import PageIterator

__all__ = [
    "ApiDomainError",
    "ApiErrorBody",
    "BalancesOptions",
    "Chain",
    "CircuitOpenError",
    "ClientRequestError",
    "ClientSettings",
    "ErrorKind",
    "GoldRushClient",
    "GoldRushError",
    "MissingCredentialError",
    "NetworkError",
    "PageInfo",
    "PageIterator",
    "PortfolioOptions",
    "RateLimitedError",
    "RequestSpec",
    "ResponseEnvelope",
    "SerializationError",
    "ServerError",
    "SingleTxOptions",
    "TxOptions",
    "configure_logging",
]
