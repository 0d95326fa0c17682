"""
Contract endpoints
"""

import json
import logging
from typing import Any, Dict, List, Optional

from ..client import ApiClient
from ..exceptions import ApiError, ValidationError
from ..validation import require_address


class ContractModule:
    """Verified contract ABI, source code and verification status"""

    def __init__(self, client: ApiClient, logger: Optional[logging.Logger] = None):
        self.client = client
        self.logger = logger or logging.getLogger(__name__)

    def get_abi(self, address: str) -> List[Dict[str, Any]]:
        """
        Get the ABI of a verified contract.

        Args:
            address: Contract address

        Returns:
            Decoded ABI

        Raises:
            ValidationError: If the address is invalid
            ApiError: If the contract is not verified
        """
        require_address(address)
        self.logger.debug(f"Getting ABI for {address}")
        data = self.client.request('/contract/getabi', {'address': address})

        if isinstance(data, dict):
            data = data.get('abi')
        if not data:
            self.logger.error(f"No ABI returned for {address}")
            raise ApiError(f"Contract {address} not verified or ABI not available")

        if isinstance(data, str):
            try:
                return json.loads(data)
            except ValueError as exc:
                raise ApiError(f"Contract {address} returned an invalid ABI") from exc
        return data

    def get_source_code(self, address: str) -> Dict[str, Any]:
        """
        Get the verified source code of a contract.

        Args:
            address: Contract address

        Returns:
            Source record (SourceCode, ABI, ContractName, CompilerVersion, ...)

        Raises:
            ValidationError: If the address is invalid
            ApiError: If the contract is not verified
        """
        require_address(address)
        self.logger.debug(f"Getting source code for {address}")
        data = self.client.request('/contract/getsourcecode', {'address': address})

        if isinstance(data, list):
            data = data[0] if data else None
        if not data:
            self.logger.error(f"No source code returned for {address}")
            raise ApiError(f"Contract {address} not verified or source code not available")
        return data

    def check_verify_status(self, guid: str) -> Dict[str, Any]:
        """
        Check the status of a source code verification request.

        Args:
            guid: GUID returned when the verification was submitted
        """
        if not guid:
            raise ValidationError("GUID is required for checking verification status")
        return self.client.request('/contract/checkverifystatus', {'guid': guid})

    def verify_proxy_contract(self, address: str,
                              expected_implementation: Optional[str] = None) -> Dict[str, Any]:
        """
        Submit a proxy contract for verification.

        Args:
            address: Proxy contract address
            expected_implementation: Implementation the proxy should point to
        """
        require_address(address)
        if expected_implementation is not None:
            require_address(expected_implementation, "implementation address")
        return self.client.request('/contract/verifyproxycontract', {
            'address': address,
            'expectedimplementation': expected_implementation,
        })

    def check_proxy_verification(self, guid: str) -> Dict[str, Any]:
        """
        Check the status of a proxy verification request.

        Args:
            guid: GUID returned by verify_proxy_contract
        """
        if not guid:
            raise ValidationError("GUID is required for checking proxy verification status")
        return self.client.request('/contract/checkproxyverification', {'guid': guid})
