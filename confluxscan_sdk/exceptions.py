"""
Exceptions raised by the ConfluxScan SDK
"""

from typing import Optional


class ConfluxScanError(Exception):
    """Base class for all SDK errors"""


class ValidationError(ConfluxScanError, ValueError):
    """
    Input rejected locally, before any request was issued.

    Raised for invalid addresses, missing GUIDs or hashes, empty contract
    lists and inverted timestamp ranges.
    """


class TransportError(ConfluxScanError):
    """
    The HTTP layer did not deliver a successful response.

    Attributes:
        status_code: HTTP status code, or None when no response was received
        reason: Status text or the underlying transport error message
    """

    def __init__(self, status_code: Optional[int], reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            message = f"HTTP request failed: {reason}"
        else:
            message = f"HTTP error! status: {status_code}"
            if reason:
                message += f" ({reason})"
        super().__init__(message)


class ApiError(ConfluxScanError):
    """
    The API answered but reported a failure, or returned no usable data.

    Attributes:
        code: Envelope status code when the API supplied one
    """

    def __init__(self, message: str, code: Optional[int] = None):
        self.code = code
        super().__init__(message)


class FormatError(ConfluxScanError, ValueError):
    """A raw value could not be parsed as a base-unit integer"""
