"""
Utility endpoints wrapped in response envelopes
"""

import logging
from typing import Optional

from ..formatters.responses import wrap_response
from ..models import ResponseEnvelope
from ..modules.utils import UtilsModule


class UtilsWrapper:
    """Method decoding; decoded calls are returned as the API sends them"""

    def __init__(self, utils: UtilsModule, logger: Optional[logging.Logger] = None):
        self.utils = utils
        self.logger = logger or logging.getLogger(__name__)

    def decode_method(self, hashes: str) -> ResponseEnvelope:
        """Decode transaction methods by transaction hash"""
        raw = self.utils.decode_method(hashes)
        return wrap_response(raw, raw)

    def decode_method_raw(self, contracts: str, inputs: str) -> ResponseEnvelope:
        """Decode raw call data against the given contracts"""
        raw = self.utils.decode_method_raw(contracts, inputs)
        return wrap_response(raw, raw)
