"""
Account endpoints with display formatting
"""

import logging
from typing import Optional, Sequence, Union

from ..formatters.responses import (
    CFX_TRANSFER_RULES,
    TIMESTAMP_RULES,
    TRANSACTION_RULES,
    account_token_rules,
    format_list_response,
    token_transfer_rules,
    wrap_response,
)
from ..models import ListQuery, ResponseEnvelope
from ..modules.account import AccountModule


class AccountWrapper:
    """
    Account endpoints returning ``ResponseEnvelope(raw, formatted)``.

    Amounts in ``formatted`` are scaled to whole units: CFX values carry the
    ``CFX`` unit, token amounts use the decimals reported for their contract.
    """

    def __init__(self, account: AccountModule, logger: Optional[logging.Logger] = None):
        self.account = account
        self.logger = logger or logging.getLogger(__name__)

    def get_transactions(self, account: str, query: Optional[ListQuery] = None) -> ResponseEnvelope:
        """Get transactions of an account with CFX values, gas fees and dates formatted"""
        raw = self.account.get_transactions(account, query)
        return wrap_response(raw, format_list_response(raw, TRANSACTION_RULES))

    def get_cfx_transfers(self, account: str, query: Optional[ListQuery] = None) -> ResponseEnvelope:
        """Get CFX transfers of an account with amounts in CFX"""
        raw = self.account.get_cfx_transfers(account, query)
        return wrap_response(raw, format_list_response(raw, CFX_TRANSFER_RULES))

    def get_crc20_transfers(self, account: str, query: Optional[ListQuery] = None,
                            contract: Optional[str] = None) -> ResponseEnvelope:
        """
        Get CRC20 transfers with amounts scaled by each token's decimals.

        Decimals come from the response's ``addressInfo``; a contract missing
        from it is treated as an 18 decimal token.
        """
        raw = self.account.get_crc20_transfers(account, query, contract)
        rules = token_transfer_rules(raw.get('addressInfo') if isinstance(raw, dict) else None)
        return wrap_response(raw, format_list_response(raw, rules))

    def get_crc721_transfers(self, account: str, query: Optional[ListQuery] = None,
                             contract: Optional[str] = None,
                             token_id: Optional[str] = None) -> ResponseEnvelope:
        """Get CRC721 transfers with readable timestamps"""
        raw = self.account.get_crc721_transfers(account, query, contract, token_id)
        return wrap_response(raw, format_list_response(raw, TIMESTAMP_RULES))

    def get_crc1155_transfers(self, account: str, query: Optional[ListQuery] = None,
                              contract: Optional[str] = None,
                              token_id: Optional[str] = None) -> ResponseEnvelope:
        """Get CRC1155 transfers with readable timestamps"""
        raw = self.account.get_crc1155_transfers(account, query, contract, token_id)
        return wrap_response(raw, format_list_response(raw, TIMESTAMP_RULES))

    def get_crc3525_transfers(self, account: str, query: Optional[ListQuery] = None,
                              contract: Optional[str] = None,
                              token_id: Optional[str] = None) -> ResponseEnvelope:
        """Get CRC3525 transfers with readable timestamps"""
        raw = self.account.get_crc3525_transfers(account, query, contract, token_id)
        return wrap_response(raw, format_list_response(raw, TIMESTAMP_RULES))

    def get_transfers(self, account: str, query: Optional[ListQuery] = None,
                      transfer_type: Optional[str] = None) -> ResponseEnvelope:
        """Get transfers of every token type, amounts scaled by their token decimals"""
        raw = self.account.get_transfers(account, query, transfer_type)
        rules = token_transfer_rules(raw.get('addressInfo') if isinstance(raw, dict) else None)
        return wrap_response(raw, format_list_response(raw, rules))

    def get_approvals(self, account: str, token_type: Optional[str] = None,
                      by_token_id: Optional[bool] = None) -> ResponseEnvelope:
        """Get token approvals granted by an account, unformatted"""
        raw = self.account.get_approvals(account, token_type, by_token_id)
        return wrap_response(raw, raw)

    def get_tokens(self, account: str, token_type: Optional[str] = None) -> ResponseEnvelope:
        """
        Get tokens held by an account.

        Each ``amount`` is scaled by the token's own ``decimals``; ``total``
        stays a count.

        Example:
            >>> envelope = wrapper.get_tokens("cfx:aap...", "CRC20")
            >>> envelope.formatted["list"][0]["amount"]
            '1'
        """
        self.logger.debug(f"Formatting tokens for {account}")
        raw = self.account.get_tokens(account, token_type)
        return wrap_response(raw, format_list_response(raw, account_token_rules))

    def get_token_infos(self, contracts: Union[str, Sequence[str]]) -> ResponseEnvelope:
        """Get token metadata for one or more contracts, unformatted"""
        raw = self.account.get_token_infos(contracts)
        return wrap_response(raw, raw)
