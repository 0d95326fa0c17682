import pytest

from confluxscan_sdk.exceptions import ValidationError
from confluxscan_sdk.models import ListQuery

from conftest import ACCOUNT, CONTRACT, TOKEN


class TestAccountModule:
    """Tests for the raw account endpoints"""

    def test_transactions_query(self, scanner, respond, last_request):
        respond({"total": 0, "list": []})

        scanner.account.get_transactions(ACCOUNT, ListQuery(
            skip=0, limit=10, from_address=ACCOUNT, start_block=100, sort="desc",
        ))

        path, params = last_request()
        assert path == "/account/transactions"
        assert params == {
            "account": ACCOUNT,
            "skip": "0",
            "limit": "10",
            "from": ACCOUNT,
            "startBlock": "100",
            "sort": "DESC",
        }

    def test_cfx_transfers(self, scanner, last_request):
        scanner.account.get_cfx_transfers(ACCOUNT)
        assert last_request() == ("/account/cfx/transfers", {"account": ACCOUNT})

    def test_crc20_transfers_with_contract(self, scanner, last_request):
        scanner.account.get_crc20_transfers(ACCOUNT, contract=TOKEN)

        path, params = last_request()
        assert path == "/account/crc20/transfers"
        assert params["contract"] == TOKEN

    @pytest.mark.parametrize("method, path", [
        ("get_crc721_transfers", "/account/crc721/transfers"),
        ("get_crc1155_transfers", "/account/crc1155/transfers"),
        ("get_crc3525_transfers", "/account/crc3525/transfers"),
    ])
    def test_nft_transfers(self, scanner, last_request, method, path):
        getattr(scanner.account, method)(ACCOUNT, contract=CONTRACT, token_id="7")

        assert last_request() == (path, {"account": ACCOUNT, "contract": CONTRACT, "tokenId": "7"})

    def test_transfers_by_type(self, scanner, last_request):
        scanner.account.get_transfers(ACCOUNT, transfer_type="CFX,CRC20")
        assert last_request()[1]["transferType"] == "CFX,CRC20"

    def test_approvals(self, scanner, last_request):
        scanner.account.get_approvals(ACCOUNT, token_type="CRC721", by_token_id=True)

        assert last_request() == ("/account/approvals", {
            "account": ACCOUNT,
            "tokenType": "CRC721",
            "byTokenId": "true",
        })

    def test_tokens(self, scanner, respond, last_request):
        respond({"total": 1, "list": [{"symbol": "USDT"}]})

        data = scanner.account.get_tokens(ACCOUNT, "CRC20")

        assert data == {"total": 1, "list": [{"symbol": "USDT"}]}
        assert last_request() == ("/account/tokens", {"account": ACCOUNT, "tokenType": "CRC20"})

    def test_token_infos_joins_contracts(self, scanner, last_request):
        scanner.account.get_token_infos([TOKEN, CONTRACT])
        assert last_request() == ("/token/tokeninfos", {"contracts": f"{TOKEN},{CONTRACT}"})

    def test_invalid_account_sends_nothing(self, scanner, session):
        with pytest.raises(ValidationError, match="Invalid account"):
            scanner.account.get_transactions("invalid_address")
        session.get.assert_not_called()

    def test_invalid_contract_filter(self, scanner, session):
        with pytest.raises(ValidationError, match="Invalid contract"):
            scanner.account.get_crc20_transfers(ACCOUNT, contract="bad")
        session.get.assert_not_called()

    def test_inverted_time_window(self, scanner, session):
        with pytest.raises(ValidationError):
            scanner.account.get_cfx_transfers(ACCOUNT, ListQuery(min_timestamp=20, max_timestamp=10))
        session.get.assert_not_called()

    def test_empty_token_infos(self, scanner, session):
        with pytest.raises(ValidationError):
            scanner.account.get_token_infos([])
        session.get.assert_not_called()


class TestAccountWrapper:
    """Tests for formatted account endpoints"""

    def test_transactions_formatted(self, wrapper, respond):
        raw = {
            "total": 1,
            "list": [{
                "hash": "0x15b73dd77ab6fb9ba061a41f0df2cfa8737a9b390260556c8759a33ac0325932",
                "timestamp": 1677649200,
                "value": "2000000000000000000",
                "gasPrice": "1000000000",
            }],
        }
        respond(raw)

        envelope = wrapper.account.get_transactions(ACCOUNT)

        item = envelope.formatted["list"][0]
        assert item["value"] == "2 CFX"
        assert item["gasPrice"] == "1 Gdrip"
        assert item["timestamp"] == "2023-03-01 05:40:00"
        assert envelope.raw["list"][0]["value"] == "2000000000000000000"

    def test_crc20_transfers_use_address_info(self, wrapper, respond):
        respond({
            "total": 1,
            "list": [{"contract": TOKEN, "amount": "1000000"}],
            "addressInfo": {TOKEN: {"token": {"decimals": 6, "symbol": "USDT"}}},
        })

        envelope = wrapper.account.get_crc20_transfers(ACCOUNT)

        assert envelope.formatted["list"][0]["amount"] == "1"

    def test_transfers_without_address_info_default_to_18(self, wrapper, respond):
        respond({"total": 1, "list": [{"contract": TOKEN, "amount": "1000000000000000000"}]})

        envelope = wrapper.account.get_transfers(ACCOUNT)

        assert envelope.formatted["list"][0]["amount"] == "1"

    def test_approvals_pass_through(self, wrapper, respond):
        respond({"total": 0, "list": []})

        envelope = wrapper.account.get_approvals(ACCOUNT)

        assert envelope.formatted is envelope.raw
