"""Response data models for balance endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class BalanceItem(BaseModel):
    """A token balance held by a wallet."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    contract_address: str | None = None
    contract_ticker_symbol: str | None = None
    contract_name: str | None = None
    contract_decimals: int | None = None
    balance: str | None = None  # raw integer amount, kept as text
    quote_rate: float | None = None
    quote: float | None = None
    token_type: str | None = Field(default=None, alias="type")
    is_spam: bool | None = None
    logo_url: str | None = None
    last_transferred_at: str | None = None
    native_token: bool | None = None

    @property
    def symbol(self) -> str:
        return self.contract_ticker_symbol or "Unknown"


class BalancesData(BaseModel):
    model_config = ConfigDict(extra="allow")

    address: str | None = None
    chain_id: int | None = None
    chain_name: str | None = None
    quote_currency: str | None = None
    updated_at: str | None = None
    items: list[BalanceItem] = []


class PortfolioHolding(BaseModel):
    model_config = ConfigDict(extra="allow")

    timestamp: str | None = None
    quote_rate: float | None = None
    open: dict | None = None
    high: dict | None = None
    low: dict | None = None
    close: dict | None = None


class PortfolioItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    contract_address: str | None = None
    contract_ticker_symbol: str | None = None
    contract_decimals: int | None = None
    holdings: list[PortfolioHolding] = []


class PortfolioData(BaseModel):
    model_config = ConfigDict(extra="allow")

    address: str | None = None
    chain_id: int | None = None
    chain_name: str | None = None
    quote_currency: str | None = None
    updated_at: str | None = None
    items: list[PortfolioItem] = []
