"""
Entry points bundling every endpoint group over one client
"""

import logging
from typing import Optional

import requests

from .client import ApiClient
from .config import ApiConfig
from .models import ResponseEnvelope, StatsPeriod, StatsQuery
from .modules import AccountModule, ContractModule, NFTModule, StatisticsModule, UtilsModule
from .wrappers import AccountWrapper, ContractWrapper, NFTWrapper, StatisticsWrapper, UtilsWrapper


class CoreScanner:
    """
    ConfluxScan Core API returning raw payloads.

    Every endpoint group shares one ApiClient, and so one HTTP session.

    Example:
        >>> with CoreScanner(ApiConfig(api_key="...")) as scanner:
        ...     tokens = scanner.account.get_tokens("cfx:aap...", "CRC20")
        ...     abi = scanner.contract.get_abi("cfx:acg...")
    """

    def __init__(
        self,
        config: Optional[ApiConfig] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the scanner.

        Args:
            config: API configuration (default: mainnet, no API key)
            session: HTTP session to send requests through
            logger: Logger handed to the client and every endpoint group
        """
        self.logger = logger or logging.getLogger(__name__)
        self.client = ApiClient(config, session=session, logger=logger)
        self.account = AccountModule(self.client, logger)
        self.contract = ContractModule(self.client, logger)
        self.nft = NFTModule(self.client, logger)
        self.statistics = StatisticsModule(self.client, logger)
        self.utils = UtilsModule(self.client, logger)
        self.logger.debug(f"Core scanner initialized for {self.client.config.target}")

    @property
    def config(self) -> ApiConfig:
        return self.client.config

    def close(self):
        """Close the underlying session"""
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


class CoreScannerWrapper:
    """
    ConfluxScan Core API returning ``ResponseEnvelope(raw, formatted)``.

    Wraps a CoreScanner; ``formatted`` holds the display-ready copy of each
    payload and ``raw`` the payload as received.

    Example:
        >>> with CoreScannerWrapper(ApiConfig(target="testnet")) as scanner:
        ...     supply = scanner.get_supply_stats()
        ...     print(supply.formatted["totalCirculating"])
    """

    def __init__(
        self,
        config: Optional[ApiConfig] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.scanner = CoreScanner(config, session=session, logger=logger)
        self.account = AccountWrapper(self.scanner.account, logger)
        self.contract = ContractWrapper(self.scanner.contract, logger)
        self.nft = NFTWrapper(self.scanner.nft, logger)
        self.stats = StatisticsWrapper(self.scanner.statistics, logger)
        self.utils = UtilsWrapper(self.scanner.utils, logger)

    # Contracts

    def get_contract_abi(self, address: str) -> ResponseEnvelope:
        """Get the ABI of a verified contract"""
        return self.contract.get_abi(address)

    def get_contract_source_code(self, address: str) -> ResponseEnvelope:
        """Get the verified source code of a contract"""
        return self.contract.get_source_code(address)

    # Accounts

    def get_account_tokens(self, address: str, token_type: str = "CRC20") -> ResponseEnvelope:
        """
        Get tokens held by an account, amounts scaled by their decimals.

        Args:
            address: Account address
            token_type: Token standard(s) to list (default: CRC20)
        """
        return self.account.get_tokens(address, token_type)

    # Statistics

    def get_active_account_stats(self, query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        return self.stats.get_account_active(query)

    def get_cfx_holder_stats(self, query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        return self.stats.get_cfx_holder(query)

    def get_tps_stats(self, query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        return self.stats.get_tps(query)

    def get_top_gas_used(self, span_type: StatsPeriod = '24h') -> ResponseEnvelope:
        return self.stats.get_top_gas_used(span_type)

    def get_top_transaction_senders(self, span_type: StatsPeriod = '24h') -> ResponseEnvelope:
        return self.stats.get_top_transaction_sender(span_type)

    def get_top_miners(self, span_type: StatsPeriod = '24h') -> ResponseEnvelope:
        return self.stats.get_top_miner(span_type)

    def get_pow_reward_stats(self, query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        return self.stats.get_pow_reward(query)

    def get_pos_reward_stats(self, query: Optional[StatsQuery] = None) -> ResponseEnvelope:
        return self.stats.get_pos_reward(query)

    def get_supply_stats(self) -> ResponseEnvelope:
        """Get the supply snapshot with every amount in CFX"""
        return self.stats.get_supply()

    def close(self):
        """Close the underlying session"""
        self.scanner.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
