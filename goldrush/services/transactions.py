"""Transaction endpoints."""

from __future__ import annotations

from goldrush.models.envelope import ResponseEnvelope
from goldrush.models.options import SingleTxOptions, TxOptions
from goldrush.models.request import RequestSpec
from goldrush.models.transactions import TransactionItem, TransactionsData
from goldrush.pagination import PageIterator
from goldrush.services.base import BaseService, options_query, path_segment


class TransactionService(BaseService):
    """Wallet transaction history and single-transaction lookups."""

    @staticmethod
    def _transactions_spec(
        chain_name: str, address: str, options: TxOptions | None
    ) -> RequestSpec:
        path = (
            f"/v1/{path_segment('chain_name', chain_name)}"
            f"/address/{path_segment('address', address)}/transactions_v2/"
        )
        return RequestSpec("GET", path, options_query(options))

    async def get_all_transactions_for_address(
        self,
        chain_name: str,
        address: str,
        options: TxOptions | None = None,
    ) -> ResponseEnvelope[TransactionsData]:
        """One page of transactions for ``address``.

        Use ``iter_transactions()`` to walk every page.
        """
        spec = self._transactions_spec(chain_name, address, options)
        return await self._dispatcher.dispatch(spec, TransactionsData)

    def iter_transactions(
        self,
        chain_name: str,
        address: str,
        options: TxOptions | None = None,
    ) -> PageIterator[TransactionItem]:
        """Page through all transactions for ``address``.

        Starts at ``options.page_number`` (0 when unset). Nothing is sent
        until the iterator is consumed.
        """
        spec = self._transactions_spec(chain_name, address, options)
        return PageIterator(self._dispatcher.dispatch, spec, TransactionsData)

    async def get_transaction(
        self,
        chain_name: str,
        tx_hash: str,
        options: SingleTxOptions | None = None,
    ) -> ResponseEnvelope[TransactionsData]:
        path = (
            f"/v1/{path_segment('chain_name', chain_name)}"
            f"/transaction_v2/{path_segment('tx_hash', tx_hash)}/"
        )
        spec = RequestSpec("GET", path, options_query(options))
        return await self._dispatcher.dispatch(spec, TransactionsData)
