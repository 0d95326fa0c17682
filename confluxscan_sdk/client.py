"""
HTTP client for the ConfluxScan API
"""

import logging
from typing import Any, Optional
from urllib.parse import urlencode

import requests

from .config import ApiConfig
from .exceptions import ApiError, TransportError
from .models import Params


class ApiClient:
    """
    Issues requests to the ConfluxScan API and unwraps its
    ``{code, message, data}`` envelope.

    One attempt per call; there is no retry or backoff.

    Example:
        >>> client = ApiClient(ApiConfig(target="testnet"))
        >>> supply = client.request("/statistics/supply")
    """

    def __init__(
        self,
        config: Optional[ApiConfig] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the client.

        Args:
            config: API configuration (default: mainnet, no API key)
            session: HTTP session to send requests through (default: a new requests.Session)
            logger: Logger for request tracing (default: this module's logger)
        """
        self.config = config or ApiConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({
            'Accept': 'application/json',
        })
        self.logger.debug(
            f"API client initialized for {self.config.target} at {self.config.base_url}"
        )

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def build_url(self, endpoint: str, params: Optional[Params] = None) -> str:
        """
        Build the request URL.

        None values are dropped, booleans are sent as ``true``/``false`` and
        the API key, when configured, is appended as ``apiKey``.

        Args:
            endpoint: Path such as ``/account/tokens``
            params: Query parameters

        Returns:
            Absolute URL
        """
        query = []
        for key, value in (params or {}).items():
            if value is None:
                continue
            if isinstance(value, bool):
                value = 'true' if value else 'false'
            query.append((key, str(value)))

        if self.config.api_key:
            query.append(('apiKey', self.config.api_key))

        url = f"{self.base_url}{endpoint}"
        if query:
            url = f"{url}?{urlencode(query)}"
        return url

    def request(self, endpoint: str, params: Optional[Params] = None) -> Any:
        """
        Make a GET request and return the envelope's ``data``.

        Args:
            endpoint: Path such as ``/account/tokens``
            params: Query parameters

        Returns:
            The unwrapped ``data`` field

        Raises:
            TransportError: If the request fails or the status is not 2xx
            ApiError: If the body is not an envelope or its code is not 0
        """
        url = self.build_url(endpoint, params)
        self.logger.debug(f"Making API request to {endpoint}")

        try:
            response = self.session.get(url, timeout=self.config.timeout)
        except requests.RequestException as exc:
            self.logger.error(f"API request to {endpoint} failed: {exc}")
            raise TransportError(None, str(exc)) from exc

        if not response.ok:
            self.logger.error(
                f"API request to {endpoint} failed with status "
                f"{response.status_code} {response.reason}"
            )
            raise TransportError(response.status_code, response.reason or "")

        try:
            envelope = response.json()
        except ValueError as exc:
            self.logger.error(f"API response from {endpoint} is not valid JSON")
            raise ApiError(f"Invalid JSON response from {endpoint}") from exc

        return self._unwrap(endpoint, envelope)

    def _unwrap(self, endpoint: str, envelope: Any) -> Any:
        if not isinstance(envelope, dict):
            self.logger.error(f"Unexpected response format from {endpoint}")
            raise ApiError(f"Invalid response format from {endpoint}")

        code = envelope.get('code')
        if code is not None and str(code) != "0":
            message = envelope.get('message') or f"API returned error code {code}"
            self.logger.error(f"API returned error for {endpoint}: {message}")
            raise ApiError(message, code=code)

        self.logger.debug(f"API request to {endpoint} successful")
        return envelope.get('data')

    def close(self):
        """Close the session"""
        self.session.close()

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, *args):
        """Context manager exit"""
        self.close()

