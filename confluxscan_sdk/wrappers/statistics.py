"""
Statistics endpoints with display formatting
"""

import logging
from typing import Any, Optional

from ..formatters.responses import (
    BLOCK_FEE_RULES,
    CFX_TRANSFER_STAT_RULES,
    MINER_LIST_RULES,
    MINER_RULES,
    MINING_RULES,
    REWARD_RULES,
    STAT_LIST_RULES,
    STAT_RULES,
    SUPPLY_RULES,
    TOP_CFX_LIST_RULES,
    TOP_CFX_RULES,
    TOP_COUNT_LIST_RULES,
    TOP_COUNT_RULES,
    TOP_GAS_LIST_RULES,
    TOP_GAS_RULES,
    FieldRules,
    format_list_response,
    format_record,
    wrap_response,
)
from ..models import ResponseEnvelope, StatsPeriod, StatsQuery
from ..modules.statistics import StatisticsModule


class StatisticsWrapper:
    """
    Statistics endpoints returning ``ResponseEnvelope(raw, formatted)``.

    Series points get readable ``statTime`` values and grouped counters;
    leaderboards get CFX, gas or count formatting depending on what they rank.

    Example:
        >>> stats = StatisticsWrapper(StatisticsModule(ApiClient()))
        >>> stats.get_supply().formatted["totalSupply"]
        '5,000,000,000 CFX'
    """

    def __init__(self, statistics: StatisticsModule, logger: Optional[logging.Logger] = None):
        self.statistics = statistics
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def _series(raw: Any, rules: FieldRules = STAT_RULES) -> ResponseEnvelope:
        """Wrap a statistics series with its points and totals formatted"""
        return wrap_response(raw, format_list_response(raw, rules, STAT_LIST_RULES))

    @staticmethod
    def _top(raw: Any, rules: FieldRules, list_rules: FieldRules) -> ResponseEnvelope:
        """Wrap a leaderboard with its entries and totals formatted"""
        return wrap_response(raw, format_list_response(raw, rules, list_rules))

    # Network

    def get_supply(self) -> ResponseEnvelope:
        """Get CFX supply figures in CFX"""
        raw = self.statistics.get_supply()
        return wrap_response(raw, format_record(raw, SUPPLY_RULES))

    def get_mining(self, query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        """Get mining difficulty, hash rate and block time series"""
        raw = self.statistics.get_mining(query)
        return wrap_response(raw, format_list_response(raw, MINING_RULES, MINING_RULES))

    def get_tps(self, query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        """Get transactions per second over time"""
        return self._series(self.statistics.get_tps(query))

    def get_transaction(self, query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        """Get transaction counts over time"""
        return self._series(self.statistics.get_transaction(query))

    def get_contract(self, query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        """Get contract creation counts over time"""
        return self._series(self.statistics.get_contract(query))

    def get_pow_reward(self, query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        """Get PoW mining rewards in CFX over time"""
        return self._series(self.statistics.get_pow_reward(query), REWARD_RULES)

    def get_pos_reward(self, query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        """Get PoS staking rewards in CFX over time"""
        return self._series(self.statistics.get_pos_reward(query), REWARD_RULES)

    # Accounts

    def get_account_growth(self, query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        """Get new account counts over time"""
        return self._series(self.statistics.get_account_growth(query))

    def get_account_active(self, query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        """Get active account counts over time"""
        return self._series(self.statistics.get_account_active(query))

    def get_account_active_overall(self, query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        """Get active account counts across both spaces"""
        return self._series(self.statistics.get_account_active_overall(query))

    def get_cfx_holder(self, query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        """Get CFX holder counts over time"""
        return self._series(self.statistics.get_cfx_holder(query))

    # Transfers

    def get_cfx_transfer(self, query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        """Get CFX transfer counts and amounts over time"""
        return self._series(self.statistics.get_cfx_transfer(query), CFX_TRANSFER_STAT_RULES)

    def get_token_transfer(self, query: Optional[StatsQuery] = None,
                           contract: Optional[str] = None) -> ResponseEnvelope:
        """Get token transfer counts, optionally for one contract"""
        return self._series(self.statistics.get_token_transfer(query, contract))

    # Tokens

    def get_token_holder(self, contract: str,
                         query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        """Get holder counts of a token over time"""
        return self._series(self.statistics.get_token_holder(contract, query))

    def get_unique_sender(self, contract: str,
                          query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        """Get unique sender counts of a token"""
        return self._series(self.statistics.get_unique_sender(contract, query))

    def get_unique_receiver(self, contract: str,
                            query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        """Get unique receiver counts of a token"""
        return self._series(self.statistics.get_unique_receiver(contract, query))

    def get_unique_participant(self, contract: str,
                               query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        """Get unique participant counts of a token"""
        return self._series(self.statistics.get_unique_participant(contract, query))

    # Blocks

    def get_block_basefee(self, query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        """Get block base fees in Gdrip"""
        return self._series(self.statistics.get_block_basefee(query), BLOCK_FEE_RULES)

    def get_block_avg_priority_fee(self, query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        """Get average block priority fees in Gdrip"""
        return self._series(self.statistics.get_block_avg_priority_fee(query), BLOCK_FEE_RULES)

    def get_block_gas_used(self, query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        """Get gas used per block"""
        return self._series(self.statistics.get_block_gas_used(query), BLOCK_FEE_RULES)

    def get_block_txs_by_type(self, query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        """Get block transaction counts by transaction type"""
        return self._series(self.statistics.get_block_txs_by_type(query))

    # Leaderboards

    def get_top_miner(self, span_type: StatsPeriod = '24h',
                      limit: Optional[int] = None) -> ResponseEnvelope:
        """Get miners ranked by mined blocks"""
        raw = self.statistics.get_top_miner(span_type, limit)
        return self._top(raw, MINER_RULES, MINER_LIST_RULES)

    def get_top_gas_used(self, span_type: StatsPeriod = '24h',
                         limit: Optional[int] = None) -> ResponseEnvelope:
        """Get accounts ranked by gas used, in Gdrip"""
        raw = self.statistics.get_top_gas_used(span_type, limit)
        return self._top(raw, TOP_GAS_RULES, TOP_GAS_LIST_RULES)

    def get_top_cfx_sender(self, span_type: StatsPeriod = '24h',
                           limit: Optional[int] = None) -> ResponseEnvelope:
        """Get accounts ranked by CFX sent"""
        raw = self.statistics.get_top_cfx_sender(span_type, limit)
        return self._top(raw, TOP_CFX_RULES, TOP_CFX_LIST_RULES)

    def get_top_cfx_receiver(self, span_type: StatsPeriod = '24h',
                             limit: Optional[int] = None) -> ResponseEnvelope:
        """Get accounts ranked by CFX received"""
        raw = self.statistics.get_top_cfx_receiver(span_type, limit)
        return self._top(raw, TOP_CFX_RULES, TOP_CFX_LIST_RULES)

    def get_top_transaction_sender(self, span_type: StatsPeriod = '24h',
                                   limit: Optional[int] = None) -> ResponseEnvelope:
        """Get accounts ranked by transactions sent"""
        raw = self.statistics.get_top_transaction_sender(span_type, limit)
        return self._top(raw, TOP_COUNT_RULES, TOP_COUNT_LIST_RULES)

    def get_top_transaction_receiver(self, span_type: StatsPeriod = '24h',
                                     limit: Optional[int] = None) -> ResponseEnvelope:
        """Get accounts ranked by transactions received"""
        raw = self.statistics.get_top_transaction_receiver(span_type, limit)
        return self._top(raw, TOP_COUNT_RULES, TOP_COUNT_LIST_RULES)

    def get_top_token_transfer(self, span_type: StatsPeriod = '24h',
                               limit: Optional[int] = None) -> ResponseEnvelope:
        """Get tokens ranked by transfer count"""
        raw = self.statistics.get_top_token_transfer(span_type, limit)
        return self._top(raw, TOP_COUNT_RULES, TOP_COUNT_LIST_RULES)

    def get_top_token_sender(self, span_type: StatsPeriod = '24h',
                             limit: Optional[int] = None) -> ResponseEnvelope:
        """Get accounts ranked by token transfers sent"""
        raw = self.statistics.get_top_token_sender(span_type, limit)
        return self._top(raw, TOP_COUNT_RULES, TOP_COUNT_LIST_RULES)

    def get_top_token_receiver(self, span_type: StatsPeriod = '24h',
                               limit: Optional[int] = None) -> ResponseEnvelope:
        """Get accounts ranked by token transfers received"""
        raw = self.statistics.get_top_token_receiver(span_type, limit)
        return self._top(raw, TOP_COUNT_RULES, TOP_COUNT_LIST_RULES)

    def get_top_token_participant(self, span_type: StatsPeriod = '24h',
                                  limit: Optional[int] = None) -> ResponseEnvelope:
        """Get accounts ranked by token transfers sent or received"""
        raw = self.statistics.get_top_token_participant(span_type, limit)
        return self._top(raw, TOP_COUNT_RULES, TOP_COUNT_LIST_RULES)
