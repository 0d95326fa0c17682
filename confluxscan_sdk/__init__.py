"""
ConfluxScan Python SDK

Python client for the ConfluxScan (Conflux Core Space) explorer API.

Features:
- Account, contract, NFT, statistics and utility endpoints
- CIP-37 address validation before any request is sent
- Exact CFX, gas and token amount formatting
- Raw and display-ready payloads side by side
"""

__version__ = "1.0.0"
__author__ = "ConfluxScan SDK Contributors"

from .client import ApiClient
from .config import ApiConfig
from .exceptions import (
    ApiError,
    ConfluxScanError,
    FormatError,
    TransportError,
    ValidationError,
)
from .models import ListQuery, ResponseEnvelope, StatsQuery
from .scanner import CoreScanner, CoreScannerWrapper
from .validation import is_valid_address

__all__ = [
    "ApiClient",
    "ApiConfig",
    "ApiError",
    "ConfluxScanError",
    "CoreScanner",
    "CoreScannerWrapper",
    "FormatError",
    "ListQuery",
    "ResponseEnvelope",
    "StatsQuery",
    "TransportError",
    "ValidationError",
    "is_valid_address",
]
