"""Public models for the GoldRush client."""

from goldrush.models.balances import (
    BalanceItem,
    BalancesData,
    PortfolioData,
    PortfolioHolding,
    PortfolioItem,
)
from goldrush.models.envelope import (
    ApiErrorBody,
    PageInfo,
    PageLinks,
    ResponseEnvelope,
    parse_envelope,
    parse_error_body,
)
from goldrush.models.options import (
    BalancesOptions,
    PageOptions,
    PortfolioOptions,
    QueryOptions,
    SingleTxOptions,
    TxOptions,
)
from goldrush.models.request import RequestSpec, build_query
from goldrush.models.transactions import LogEvent, TransactionItem, TransactionsData

__all__ = [
    "ApiErrorBody",
    "BalanceItem",
    "BalancesData",
    "BalancesOptions",
    "LogEvent",
    "PageInfo",
    "PageLinks",
    "PageOptions",
    "PortfolioData",
    "PortfolioHolding",
    "PortfolioItem",
    "PortfolioOptions",
    "QueryOptions",
    "RequestSpec",
    "ResponseEnvelope",
    "SingleTxOptions",
    "TransactionItem",
    "TransactionsData",
    "TxOptions",
    "build_query",
    "parse_envelope",
    "parse_error_body",
]
