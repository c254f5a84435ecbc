"""Query option models for endpoint calls.

Field aliases are the wire parameter names. Unset options are not sent.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from goldrush.models.request import QueryPairs, build_query


class QueryOptions(BaseModel):
    """Base for option models that render to query parameters."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_query(self) -> QueryPairs:
        return build_query(self.model_dump(by_alias=True, exclude_none=True))


class PageOptions(QueryOptions):
    """Page-number pagination options (pages are 0-indexed)."""

    page_number: int | None = Field(default=None, ge=0, alias="page-number")
    page_size: int | None = Field(default=None, ge=1, alias="page-size")


class BalancesOptions(PageOptions):
    quote_currency: str | None = Field(default=None, alias="quote-currency")
    nft: bool | None = None
    no_spam: bool | None = Field(default=None, alias="no-spam")
    no_nft_fetch: bool | None = Field(default=None, alias="no-nft-fetch")
    no_nft_asset_metadata: bool | None = Field(
        default=None, alias="no-nft-asset-metadata"
    )


class PortfolioOptions(PageOptions):
    quote_currency: str | None = Field(default=None, alias="quote-currency")
    days: int | None = Field(default=None, ge=1)


class TxOptions(PageOptions):
    quote_currency: str | None = Field(default=None, alias="quote-currency")
    no_logs: bool | None = Field(default=None, alias="no-logs")
    block_signed_at_asc: bool | None = Field(default=None, alias="block-signed-at-asc")
    with_internal: bool | None = Field(default=None, alias="with-internal")
    with_state: bool | None = Field(default=None, alias="with-state")
    with_input_data: bool | None = Field(default=None, alias="with-input-data")
    starting_block: int | None = Field(default=None, ge=0, alias="starting-block")
    ending_block: int | None = Field(default=None, ge=0, alias="ending-block")


class SingleTxOptions(QueryOptions):
    quote_currency: str | None = Field(default=None, alias="quote-currency")
    no_logs: bool | None = Field(default=None, alias="no-logs")
    with_internal: bool | None = Field(default=None, alias="with-internal")
    with_state: bool | None = Field(default=None, alias="with-state")
    with_input_data: bool | None = Field(default=None, alias="with-input-data")
