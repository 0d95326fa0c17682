"""
NFT endpoints with display formatting
"""

import logging
from typing import Optional

from ..formatters.responses import (
    NFT_BALANCE_RULES,
    TIMESTAMP_RULES,
    format_list_response,
    wrap_response,
)
from ..models import ResponseEnvelope
from ..modules.nft import NFTModule


class NFTWrapper:
    """NFT endpoints returning ``ResponseEnvelope(raw, formatted)``"""

    def __init__(self, nft: NFTModule, logger: Optional[logging.Logger] = None):
        self.nft = nft
        self.logger = logger or logging.getLogger(__name__)

    def get_balances(self, owner: str, skip: Optional[int] = None,
                     limit: Optional[int] = None) -> ResponseEnvelope:
        """Get NFT balances of an owner with grouped counts"""
        raw = self.nft.get_balances(owner, skip, limit)
        return wrap_response(raw, format_list_response(raw, NFT_BALANCE_RULES))

    def get_tokens(self, contract: str, owner: Optional[str] = None,
                   skip: Optional[int] = None, limit: Optional[int] = None,
                   sort: Optional[str] = None,
                   with_brief_info: Optional[bool] = None) -> ResponseEnvelope:
        """Get the tokens of an NFT contract, optionally held by one owner"""
        raw = self.nft.get_tokens(contract, owner, skip, limit, sort, with_brief_info)
        return wrap_response(raw, raw)

    def get_preview(self, contract: str, token_id: str,
                    with_metadata: Optional[bool] = None) -> ResponseEnvelope:
        """Get the preview of one NFT, with metadata on request"""
        raw = self.nft.get_preview(contract, token_id, with_metadata)
        return wrap_response(raw, raw)

    def get_fungible_tokens(self, contract: str, skip: Optional[int] = None,
                            limit: Optional[int] = None) -> ResponseEnvelope:
        """Get the fungible tokens bound to a CRC3525 contract"""
        raw = self.nft.get_fungible_tokens(contract, skip, limit)
        return wrap_response(raw, raw)

    def get_owners(self, contract: str, token_id: str, skip: Optional[int] = None,
                   limit: Optional[int] = None) -> ResponseEnvelope:
        """Get the owners of one NFT"""
        raw = self.nft.get_owners(contract, token_id, skip, limit)
        return wrap_response(raw, raw)

    def get_transfers(self, contract: str, token_id: Optional[str] = None,
                      skip: Optional[int] = None, limit: Optional[int] = None,
                      sort: Optional[str] = None) -> ResponseEnvelope:
        """Get NFT transfers with readable timestamps"""
        raw = self.nft.get_transfers(contract, token_id, skip, limit, sort)
        return wrap_response(raw, format_list_response(raw, TIMESTAMP_RULES))
