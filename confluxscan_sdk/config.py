"""
Client configuration for the ConfluxScan SDK
"""

from dataclasses import dataclass
from typing import Dict, Literal, Optional

from .exceptions import ValidationError

Target = Literal['mainnet', 'testnet']

MAINNET_HOST = "https://api.confluxscan.org"
TESTNET_HOST = "https://api-testnet.confluxscan.org"

DEFAULT_HOSTS: Dict[str, str] = {
    'mainnet': MAINNET_HOST,
    'testnet': TESTNET_HOST,
}


@dataclass(frozen=True)
class ApiConfig:
    """
    Immutable settings shared by every module of a scanner instance.

    Args:
        target: Network to query, "mainnet" or "testnet" (default: mainnet)
        api_key: Optional API key, sent as the ``apiKey`` query parameter
        host: Optional host overriding the network default
        timeout: Request timeout in seconds handed to the transport (default: 30)

    Example:
        >>> ApiConfig(target="testnet").base_url
        'https://api-testnet.confluxscan.org'
    """
    target: Target = 'mainnet'
    api_key: Optional[str] = None
    host: Optional[str] = None
    timeout: float = 30

    def __post_init__(self):
        if self.target not in DEFAULT_HOSTS:
            raise ValidationError(
                f"Invalid target: {self.target}. Expected 'mainnet' or 'testnet'"
            )

    @property
    def base_url(self) -> str:
        """Host the requests are sent to, without a trailing slash"""
        return (self.host or DEFAULT_HOSTS[self.target]).rstrip('/')
