"""
Account endpoints
"""

import logging
from typing import Any, Dict, Optional, Sequence, Union

from ..client import ApiClient
from ..models import ListQuery, ListResponse, Params
from ..validation import require_address, split_addresses, validate_timestamp_range


class AccountModule:
    """
    Account activity, transfers, approvals and token holdings.

    Example:
        >>> account = AccountModule(ApiClient())
        >>> txs = account.get_transactions("cfx:aap...", ListQuery(limit=10))
    """

    def __init__(self, client: ApiClient, logger: Optional[logging.Logger] = None):
        self.client = client
        self.logger = logger or logging.getLogger(__name__)

    def _list(self, endpoint: str, account: str, query: Optional[ListQuery],
              **extra: Any) -> ListResponse:
        require_address(account, "account")
        query = query or ListQuery()
        validate_timestamp_range(query.min_timestamp, query.max_timestamp)
        params: Params = {'account': account, **query.to_params(), **extra}
        self.logger.debug(f"Listing {endpoint} for {account}")
        return self.client.request(endpoint, params)

    def get_transactions(self, account: str, query: Optional[ListQuery] = None) -> ListResponse:
        """
        Get transactions sent or received by an account.

        Args:
            account: Account address
            query: Paging and filtering options

        Returns:
            ``{total, list, addressInfo}`` with values in drip
        """
        return self._list('/account/transactions', account, query)

    def get_cfx_transfers(self, account: str, query: Optional[ListQuery] = None) -> ListResponse:
        """Get CFX transfers of an account"""
        return self._list('/account/cfx/transfers', account, query)

    def get_crc20_transfers(self, account: str, query: Optional[ListQuery] = None,
                            contract: Optional[str] = None) -> ListResponse:
        """
        Get CRC20 token transfers of an account.

        Args:
            account: Account address
            query: Paging and filtering options
            contract: Restrict to one token contract
        """
        if contract is not None:
            require_address(contract, "contract")
        return self._list('/account/crc20/transfers', account, query, contract=contract)

    def get_crc721_transfers(self, account: str, query: Optional[ListQuery] = None,
                             contract: Optional[str] = None,
                             token_id: Optional[str] = None) -> ListResponse:
        """Get CRC721 transfers of an account"""
        if contract is not None:
            require_address(contract, "contract")
        return self._list('/account/crc721/transfers', account, query,
                          contract=contract, tokenId=token_id)

    def get_crc1155_transfers(self, account: str, query: Optional[ListQuery] = None,
                              contract: Optional[str] = None,
                              token_id: Optional[str] = None) -> ListResponse:
        """Get CRC1155 transfers of an account"""
        if contract is not None:
            require_address(contract, "contract")
        return self._list('/account/crc1155/transfers', account, query,
                          contract=contract, tokenId=token_id)

    def get_crc3525_transfers(self, account: str, query: Optional[ListQuery] = None,
                              contract: Optional[str] = None,
                              token_id: Optional[str] = None) -> ListResponse:
        """Get CRC3525 transfers of an account"""
        if contract is not None:
            require_address(contract, "contract")
        return self._list('/account/crc3525/transfers', account, query,
                          contract=contract, tokenId=token_id)

    def get_transfers(self, account: str, query: Optional[ListQuery] = None,
                      transfer_type: Optional[str] = None) -> ListResponse:
        """
        Get transfers of every kind for an account.

        Args:
            account: Account address
            query: Paging and filtering options
            transfer_type: Comma separated kinds, e.g. "CFX,CRC20"
        """
        return self._list('/account/transfers', account, query, transferType=transfer_type)

    def get_approvals(self, account: str, token_type: Optional[str] = None,
                      by_token_id: Optional[bool] = None) -> Dict[str, Any]:
        """
        Get token approvals granted by an account.

        Args:
            account: Account address
            token_type: "CRC20", "CRC721" or "CRC1155"
            by_token_id: Group NFT approvals by token id
        """
        require_address(account, "account")
        return self.client.request('/account/approvals', {
            'account': account,
            'tokenType': token_type,
            'byTokenId': by_token_id,
        })

    def get_tokens(self, account: str, token_type: Optional[str] = None) -> ListResponse:
        """
        Get tokens held by an account.

        Args:
            account: Account address
            token_type: Token standard(s), e.g. "CRC20" or "CRC20,CRC721"

        Returns:
            ``{total, list}``; amounts are raw base units with their ``decimals``
        """
        require_address(account, "account")
        self.logger.debug(f"Getting {token_type or 'all'} tokens for {account}")
        return self.client.request('/account/tokens', {
            'account': account,
            'tokenType': token_type,
        })

    def get_token_infos(self, contracts: Union[str, Sequence[str]]) -> Any:
        """
        Get metadata of one or more token contracts.

        Args:
            contracts: Contract addresses, as a list or a comma separated string

        Raises:
            ValidationError: If no contract is given or one is invalid
        """
        addresses = split_addresses(contracts, "contracts")
        return self.client.request('/token/tokeninfos', {
            'contracts': ','.join(addresses),
        })
