"""
Statistics endpoints
"""

import logging
from typing import Any, Optional

from ..client import ApiClient
from ..models import (
    ListResponse,
    StatsPeriod,
    StatsQuery,
    SupplyResponse,
    TopStatsResponse,
)
from ..validation import require_address, validate_timestamp_range


class StatisticsModule:
    """
    Network statistics: time series over a window and leaderboards over a span.

    Time series take a StatsQuery; leaderboards take a span such as "24h",
    "3d" or "7d".

    Example:
        >>> stats = StatisticsModule(ApiClient())
        >>> tps = stats.get_tps(StatsQuery(interval_type="hour", limit=24))
        >>> top = stats.get_top_gas_used("7d")
    """

    def __init__(self, client: ApiClient, logger: Optional[logging.Logger] = None):
        self.client = client
        self.logger = logger or logging.getLogger(__name__)

    def _series(self, endpoint: str, query: Optional[StatsQuery], **extra: Any) -> Any:
        query = query or StatsQuery()
        validate_timestamp_range(query.min_timestamp, query.max_timestamp)
        self.logger.debug(f"Getting statistics from {endpoint}")
        return self.client.request(endpoint, {**query.to_params(), **extra})

    def _top(self, endpoint: str, span_type: StatsPeriod, limit: Optional[int] = None) -> Any:
        self.logger.debug(f"Getting {span_type} leaderboard from {endpoint}")
        return self.client.request(endpoint, {'spanType': span_type, 'limit': limit})

    # Network

    def get_supply(self) -> SupplyResponse:
        """Get the current supply snapshot, every amount in drip"""
        return self.client.request('/statistics/supply')

    def get_mining(self, query: Optional[StatsQuery] = None) -> Any:
        """Get hash rate, difficulty and block time"""
        return self._series('/statistics/mining', query)

    def get_tps(self, query: Optional[StatsQuery] = None) -> ListResponse:
        """Get transactions per second"""
        return self._series('/statistics/tps', query)

    def get_transaction(self, query: Optional[StatsQuery] = None) -> ListResponse:
        """Get transaction counts"""
        return self._series('/statistics/transaction', query)

    def get_contract(self, query: Optional[StatsQuery] = None) -> ListResponse:
        """Get contract creation counts"""
        return self._series('/statistics/contract', query)

    def get_pow_reward(self, query: Optional[StatsQuery] = None) -> ListResponse:
        """Get PoW mining rewards"""
        return self._series('/statistics/reward/pow', query)

    def get_pos_reward(self, query: Optional[StatsQuery] = None) -> ListResponse:
        """Get PoS staking rewards"""
        return self._series('/statistics/reward/pos', query)

    # Accounts

    def get_account_growth(self, query: Optional[StatsQuery] = None) -> ListResponse:
        """Get new account counts"""
        return self._series('/statistics/account/growth', query)

    def get_account_active(self, query: Optional[StatsQuery] = None) -> ListResponse:
        """Get active account counts"""
        return self._series('/statistics/account/active', query)

    def get_account_active_overall(self, query: Optional[StatsQuery] = None) -> ListResponse:
        """Get active account counts across both spaces"""
        return self._series('/statistics/account/active/overall', query)

    def get_cfx_holder(self, query: Optional[StatsQuery] = None) -> ListResponse:
        """Get CFX holder counts"""
        return self._series('/statistics/cfx/holder', query)

    # Transfers

    def get_cfx_transfer(self, query: Optional[StatsQuery] = None) -> ListResponse:
        """Get CFX transfer counts, senders and amounts"""
        return self._series('/statistics/cfx/transfer', query)

    def get_token_transfer(self, query: Optional[StatsQuery] = None,
                           contract: Optional[str] = None) -> ListResponse:
        """Get token transfer counts, optionally for one contract"""
        if contract is not None:
            require_address(contract, "contract")
        return self._series('/statistics/token/transfer', query, contract=contract)

    # Tokens

    def get_token_holder(self, contract: str, query: Optional[StatsQuery] = None) -> ListResponse:
        """
        Get holder counts of a token.

        Args:
            contract: Token contract address
            query: Time window and paging
        """
        require_address(contract, "contract")
        return self._series('/statistics/token/holder', query, contract=contract)

    def get_unique_sender(self, contract: str, query: Optional[StatsQuery] = None) -> ListResponse:
        """Get unique sender counts of a token"""
        require_address(contract, "contract")
        return self._series('/statistics/token/unique/sender', query, contract=contract)

    def get_unique_receiver(self, contract: str, query: Optional[StatsQuery] = None) -> ListResponse:
        """Get unique receiver counts of a token"""
        require_address(contract, "contract")
        return self._series('/statistics/token/unique/receiver', query, contract=contract)

    def get_unique_participant(self, contract: str,
                               query: Optional[StatsQuery] = None) -> ListResponse:
        """Get unique participant counts of a token"""
        require_address(contract, "contract")
        return self._series('/statistics/token/unique/participant', query, contract=contract)

    # Blocks

    def get_block_basefee(self, query: Optional[StatsQuery] = None) -> ListResponse:
        """Get base fee per block, in drip"""
        return self._series('/statistics/block/base-fee', query)

    def get_block_avg_priority_fee(self, query: Optional[StatsQuery] = None) -> ListResponse:
        """Get average priority fee per block, in drip"""
        return self._series('/statistics/block/avg-priority-fee', query)

    def get_block_gas_used(self, query: Optional[StatsQuery] = None) -> ListResponse:
        """Get gas used per block"""
        return self._series('/statistics/block/gas-used', query)

    def get_block_txs_by_type(self, query: Optional[StatsQuery] = None) -> ListResponse:
        """Get transaction counts per block, by transaction type"""
        return self._series('/statistics/block/txs-by-type', query)

    # Leaderboards

    def get_top_miner(self, span_type: StatsPeriod = '24h',
                      limit: Optional[int] = None) -> TopStatsResponse:
        """Get miners ranked by mined blocks"""
        return self._top('/statistics/top/miner', span_type, limit)

    def get_top_gas_used(self, span_type: StatsPeriod = '24h',
                         limit: Optional[int] = None) -> TopStatsResponse:
        """Get accounts ranked by gas used"""
        return self._top('/statistics/top/gas/used', span_type, limit)

    def get_top_cfx_sender(self, span_type: StatsPeriod = '24h',
                           limit: Optional[int] = None) -> TopStatsResponse:
        """Get accounts ranked by CFX sent"""
        return self._top('/statistics/top/cfx/sender', span_type, limit)

    def get_top_cfx_receiver(self, span_type: StatsPeriod = '24h',
                             limit: Optional[int] = None) -> TopStatsResponse:
        """Get accounts ranked by CFX received"""
        return self._top('/statistics/top/cfx/receiver', span_type, limit)

    def get_top_transaction_sender(self, span_type: StatsPeriod = '24h',
                                   limit: Optional[int] = None) -> TopStatsResponse:
        """Get accounts ranked by transactions sent"""
        return self._top('/statistics/top/transaction/sender', span_type, limit)

    def get_top_transaction_receiver(self, span_type: StatsPeriod = '24h',
                                     limit: Optional[int] = None) -> TopStatsResponse:
        """Get accounts ranked by transactions received"""
        return self._top('/statistics/top/transaction/receiver', span_type, limit)

    def get_top_token_transfer(self, span_type: StatsPeriod = '24h',
                               limit: Optional[int] = None) -> TopStatsResponse:
        """Get tokens ranked by transfer count"""
        return self._top('/statistics/top/token/transfer', span_type, limit)

    def get_top_token_sender(self, span_type: StatsPeriod = '24h',
                             limit: Optional[int] = None) -> TopStatsResponse:
        """Get accounts ranked by token transfers sent"""
        return self._top('/statistics/top/token/sender', span_type, limit)

    def get_top_token_receiver(self, span_type: StatsPeriod = '24h',
                               limit: Optional[int] = None) -> TopStatsResponse:
        """Get accounts ranked by token transfers received"""
        return self._top('/statistics/top/token/receiver', span_type, limit)

    def get_top_token_participant(self, span_type: StatsPeriod = '24h',
                                  limit: Optional[int] = None) -> TopStatsResponse:
        """Get accounts ranked by token transfers sent or received"""
        return self._top('/statistics/top/token/participant', span_type, limit)
