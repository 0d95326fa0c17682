"""
Utility endpoints
"""

import logging
from typing import Any, Optional

from ..client import ApiClient
from ..validation import require_value


class UtilsModule:
    """Method signature decoding"""

    def __init__(self, client: ApiClient, logger: Optional[logging.Logger] = None):
        self.client = client
        self.logger = logger or logging.getLogger(__name__)

    def decode_method(self, hashes: str) -> Any:
        """
        Decode transactions' method calls by transaction hash.

        Args:
            hashes: Transaction hash, or several separated by commas
        """
        require_value(hashes, "hashes")
        return self.client.request('/util/decode/method', {'hashes': hashes})

    def decode_method_raw(self, contracts: str, inputs: str) -> Any:
        """
        Decode raw call data against verified contracts.

        Args:
            contracts: Contract address, or several separated by commas
            inputs: Call data, one per contract, separated by commas
        """
        require_value(contracts, "contracts")
        require_value(inputs, "inputs")
        return self.client.request('/util/decode/method/raw', {
            'contracts': contracts,
            'inputs': inputs,
        })
