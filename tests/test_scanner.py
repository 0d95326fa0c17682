import inspect
import logging
from unittest.mock import MagicMock

import pytest

from confluxscan_sdk import (
    ApiConfig,
    CoreScanner,
    CoreScannerWrapper,
    ResponseEnvelope,
    ValidationError,
)
from confluxscan_sdk.wrappers.account import AccountWrapper
from confluxscan_sdk.wrappers.contract import ContractWrapper
from confluxscan_sdk.wrappers.nft import NFTWrapper
from confluxscan_sdk.wrappers.statistics import StatisticsWrapper
from confluxscan_sdk.wrappers.utils import UtilsWrapper

from conftest import ACCOUNT, CONTRACT, TOKEN


class TestCoreScanner:
    """Tests for the raw scanner"""

    def test_modules_share_one_client(self, scanner):
        assert scanner.account.client is scanner.client
        assert scanner.contract.client is scanner.client
        assert scanner.nft.client is scanner.client
        assert scanner.statistics.client is scanner.client
        assert scanner.utils.client is scanner.client

    def test_config_reaches_requests(self, session, last_request):
        scanner = CoreScanner(ApiConfig(target="testnet", api_key="key"), session=session)

        scanner.statistics.get_supply()

        url = session.get.call_args[0][0]
        assert url.startswith("https://api-testnet.confluxscan.org/statistics/supply")
        assert last_request()[1] == {"apiKey": "key"}

    def test_logger_is_shared(self, session):
        logger = logging.getLogger("confluxscan-test")
        scanner = CoreScanner(session=session, logger=logger)

        assert scanner.client.logger is logger
        assert scanner.account.logger is logger

    def test_context_manager(self, session):
        with CoreScanner(session=session):
            pass
        session.close.assert_called_once()


class TestCoreScannerWrapper:
    """Tests for the formatting scanner"""

    def test_account_tokens(self, wrapper, respond, last_request):
        respond({
            "total": 1,
            "list": [{
                "contract": TOKEN,
                "name": "Wrapped CFX",
                "symbol": "WCFX",
                "decimals": 18,
                "amount": "1000000000000000000",
            }],
        })

        envelope = wrapper.get_account_tokens(ACCOUNT)

        assert isinstance(envelope, ResponseEnvelope)
        assert envelope.formatted["total"] == 1
        assert envelope.formatted["list"][0]["amount"] == "1"
        assert envelope.raw["list"][0]["amount"] == "1000000000000000000"
        assert last_request() == ("/account/tokens", {"account": ACCOUNT, "tokenType": "CRC20"})

    def test_invalid_address_sends_nothing(self, wrapper, session):
        with pytest.raises(ValidationError, match="Invalid address: invalid_address"):
            wrapper.get_contract_abi("invalid_address")
        session.get.assert_not_called()

    def test_source_code(self, wrapper, respond):
        respond([{"ContractName": "WCFX"}])

        envelope = wrapper.get_contract_source_code(CONTRACT)

        assert envelope.formatted == {"ContractName": "WCFX"}

    @pytest.mark.parametrize("method, path", [
        ("get_active_account_stats", "/statistics/account/active"),
        ("get_cfx_holder_stats", "/statistics/cfx/holder"),
        ("get_tps_stats", "/statistics/tps"),
        ("get_pow_reward_stats", "/statistics/reward/pow"),
        ("get_pos_reward_stats", "/statistics/reward/pos"),
        ("get_supply_stats", "/statistics/supply"),
        ("get_top_gas_used", "/statistics/top/gas/used"),
        ("get_top_transaction_senders", "/statistics/top/transaction/sender"),
        ("get_top_miners", "/statistics/top/miner"),
    ])
    def test_convenience_methods(self, wrapper, respond, last_request, method, path):
        respond({"list": []})

        envelope = getattr(wrapper, method)()

        assert last_request()[0] == path
        assert envelope.raw == {"list": []}

    def test_exposes_wrappers(self, wrapper):
        assert wrapper.stats.statistics is wrapper.scanner.statistics
        assert wrapper.account.account is wrapper.scanner.account

    def test_close(self):
        session = MagicMock()
        with CoreScannerWrapper(session=session):
            pass
        session.close.assert_called_once()


class TestWrapperDocumentation:
    """Public wrapper methods describe what they format"""

    @pytest.mark.parametrize("wrapper_class", [
        AccountWrapper,
        ContractWrapper,
        NFTWrapper,
        StatisticsWrapper,
        UtilsWrapper,
    ])
    def test_public_methods_have_docstrings(self, wrapper_class):
        undocumented = [
            name for name, method in inspect.getmembers(wrapper_class, inspect.isfunction)
            if not name.startswith('_') and not inspect.getdoc(method)
        ]
        assert undocumented == []
