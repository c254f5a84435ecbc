"""Response data models for transaction endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class LogEvent(BaseModel):
    model_config = ConfigDict(extra="allow")

    sender_address: str | None = None
    sender_name: str | None = None
    log_offset: int | None = None
    raw_log_topics: list[str] | None = None
    raw_log_data: str | None = None
    decoded: dict | None = None


class TransactionItem(BaseModel):
    """A transaction touching a wallet."""

    model_config = ConfigDict(extra="allow")

    tx_hash: str | None = None
    from_address: str | None = None
    to_address: str | None = None
    value: str | None = None
    successful: bool | None = None
    block_height: int | None = None
    block_hash: str | None = None
    block_signed_at: str | None = None
    gas_price: int | None = None
    gas_spent: int | None = None
    fees_paid: str | None = None
    value_quote: float | None = None
    gas_quote: float | None = None
    log_events: list[LogEvent] | None = None


class TransactionsData(BaseModel):
    model_config = ConfigDict(extra="allow")

    address: str | None = None
    chain_id: int | None = None
    chain_name: str | None = None
    quote_currency: str | None = None
    updated_at: str | None = None
    current_page: int | None = None
    items: list[TransactionItem] = []
