"""
NFT endpoints
"""

import logging
from typing import Any, Dict, Optional

from ..client import ApiClient
from ..models import ListResponse
from ..validation import require_address, require_value


class NFTModule:
    """NFT balances, tokens, metadata, owners and transfers"""

    def __init__(self, client: ApiClient, logger: Optional[logging.Logger] = None):
        self.client = client
        self.logger = logger or logging.getLogger(__name__)

    def get_balances(self, owner: str, skip: Optional[int] = None,
                     limit: Optional[int] = None) -> ListResponse:
        """
        Get NFT balances of an owner, one entry per contract.

        Args:
            owner: Owner address
            skip: Records to skip
            limit: Records to return
        """
        require_address(owner, "owner")
        return self.client.request('/nft/balances', {
            'owner': owner,
            'skip': skip,
            'limit': limit,
        })

    def get_tokens(self, contract: str, owner: Optional[str] = None,
                   skip: Optional[int] = None, limit: Optional[int] = None,
                   sort: Optional[str] = None,
                   with_brief_info: Optional[bool] = None) -> ListResponse:
        """
        Get tokens of an NFT contract, optionally held by one owner.

        Args:
            contract: NFT contract address
            owner: Restrict to tokens held by this address
            skip: Records to skip
            limit: Records to return
            sort: "ASC" or "DESC"
            with_brief_info: Include name and image of each token
        """
        require_address(contract, "contract")
        if owner is not None:
            require_address(owner, "owner")
        return self.client.request('/nft/tokens', {
            'contract': contract,
            'owner': owner,
            'skip': skip,
            'limit': limit,
            'sort': sort.upper() if sort else None,
            'withBriefInfo': with_brief_info,
        })

    def get_preview(self, contract: str, token_id: str,
                    with_metadata: Optional[bool] = None) -> Dict[str, Any]:
        """
        Get the metadata preview of one token.

        Args:
            contract: NFT contract address
            token_id: Token id
            with_metadata: Include the raw metadata document
        """
        require_address(contract, "contract")
        require_value(token_id, "tokenId")
        return self.client.request('/nft/preview', {
            'contract': contract,
            'tokenId': token_id,
            'withMetadata': with_metadata,
        })

    def get_fungible_tokens(self, contract: str, skip: Optional[int] = None,
                            limit: Optional[int] = None) -> ListResponse:
        """Get the fungible tokens bound to a CRC3525 contract"""
        require_address(contract, "contract")
        return self.client.request('/nft/fungibleTokens', {
            'contract': contract,
            'skip': skip,
            'limit': limit,
        })

    def get_owners(self, contract: str, token_id: str, skip: Optional[int] = None,
                   limit: Optional[int] = None) -> ListResponse:
        """Get the owners of one token"""
        require_address(contract, "contract")
        require_value(token_id, "tokenId")
        return self.client.request('/nft/owners', {
            'contract': contract,
            'tokenId': token_id,
            'skip': skip,
            'limit': limit,
        })

    def get_transfers(self, contract: str, token_id: Optional[str] = None,
                      skip: Optional[int] = None, limit: Optional[int] = None,
                      sort: Optional[str] = None) -> ListResponse:
        """
        Get transfers of an NFT contract, optionally of one token.

        Args:
            contract: NFT contract address
            token_id: Restrict to one token
            skip: Records to skip
            limit: Records to return
            sort: "ASC" or "DESC"
        """
        require_address(contract, "contract")
        self.logger.debug(f"Getting NFT transfers for {contract}")
        return self.client.request('/nft/transfers', {
            'contract': contract,
            'tokenId': token_id,
            'skip': skip,
            'limit': limit,
            'sort': sort.upper() if sort else None,
        })
