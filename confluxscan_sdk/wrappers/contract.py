"""
Contract endpoints wrapped in response envelopes
"""

import logging
from typing import Optional

from ..formatters.responses import wrap_response
from ..models import ResponseEnvelope
from ..modules.contract import ContractModule


class ContractWrapper:
    """Contract endpoints; their payloads carry nothing to format"""

    def __init__(self, contract: ContractModule, logger: Optional[logging.Logger] = None):
        self.contract = contract
        self.logger = logger or logging.getLogger(__name__)

    def get_abi(self, address: str) -> ResponseEnvelope:
        """Get the decoded ABI of a verified contract"""
        abi = self.contract.get_abi(address)
        return wrap_response(abi, abi)

    def get_source_code(self, address: str) -> ResponseEnvelope:
        """Get the verified source code and compiler settings of a contract"""
        source = self.contract.get_source_code(address)
        return wrap_response(source, source)

    def check_verify_status(self, guid: str) -> ResponseEnvelope:
        """Check a source verification request by its guid"""
        status = self.contract.check_verify_status(guid)
        return wrap_response(status, status)

    def verify_proxy_contract(self, address: str,
                              expected_implementation: Optional[str] = None) -> ResponseEnvelope:
        """Submit a proxy contract for implementation verification"""
        result = self.contract.verify_proxy_contract(address, expected_implementation)
        return wrap_response(result, result)

    def check_proxy_verification(self, guid: str) -> ResponseEnvelope:
        """Check a proxy verification request by its guid"""
        status = self.contract.check_proxy_verification(guid)
        return wrap_response(status, status)
