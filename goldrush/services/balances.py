"""Balance endpoints."""

from __future__ import annotations

from goldrush.models.balances import BalancesData, PortfolioData
from goldrush.models.envelope import ResponseEnvelope
from goldrush.models.options import BalancesOptions, PortfolioOptions
from goldrush.models.request import RequestSpec
from goldrush.services.base import BaseService, options_query, path_segment


class BalanceService(BaseService):
    """Token balances and portfolio history for wallets."""

    async def get_token_balances_for_wallet_address(
        self,
        chain_name: str,
        address: str,
        options: BalancesOptions | None = None,
    ) -> ResponseEnvelope[BalancesData]:
        """Native, ERC20 and (optionally) NFT balances held by ``address``."""
        path = (
            f"/v1/{path_segment('chain_name', chain_name)}"
            f"/address/{path_segment('address', address)}/balances_v2/"
        )
        spec = RequestSpec("GET", path, options_query(options))
        return await self._dispatcher.dispatch(spec, BalancesData)

    async def get_historical_portfolio_for_wallet_address(
        self,
        chain_name: str,
        address: str,
        options: PortfolioOptions | None = None,
    ) -> ResponseEnvelope[PortfolioData]:
        path = (
            f"/v1/{path_segment('chain_name', chain_name)}"
            f"/address/{path_segment('address', address)}/portfolio_v2/"
        )
        spec = RequestSpec("GET", path, options_query(options))
        return await self._dispatcher.dispatch(spec, PortfolioData)
