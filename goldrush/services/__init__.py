"""Endpoint services built on the dispatch layer."""

from goldrush.services.balances import BalanceService
from goldrush.services.base import BaseService
from goldrush.services.transactions import TransactionService

__all__ = [
    "BalanceService",
    "BaseService",
    "TransactionService",
]
