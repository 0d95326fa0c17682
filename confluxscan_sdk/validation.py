"""
Input validation run before any request is issued
"""

from typing import Any, Iterable, List, Optional, Sequence, Union

from cfx_address import Base32Address

from .exceptions import ValidationError


def is_valid_address(address: Any) -> bool:
    """
    Check a Conflux Core base32 address (e.g. ``cfx:aap...``).

    Args:
        address: Address string

    Returns:
        True if the address decodes with a valid checksum, False otherwise
    """
    if not isinstance(address, str) or not address:
        return False
    return Base32Address.is_valid_base32(address)


def validate_addresses(addresses: Iterable[Any]) -> bool:
    """True only if every address is valid"""
    return all(is_valid_address(address) for address in addresses)


def require_address(address: Any, label: str = "address") -> str:
    """
    Return the address unchanged or raise.

    Args:
        address: Address to check
        label: Name used in the error message

    Raises:
        ValidationError: ``Invalid <label>: <address>``
    """
    if not is_valid_address(address):
        raise ValidationError(f"Invalid {label}: {address}")
    return address


def require_value(value: Any, label: str) -> Any:
    """Reject None and empty strings with ``Invalid <label>: <value>``"""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"Invalid {label}: {value}")
    return value


def split_addresses(contracts: Union[str, Sequence[str], None], label: str = "contracts") -> List[str]:
    """
    Normalize a comma separated string or a sequence into a list of valid addresses.

    Raises:
        ValidationError: If the list is empty or any address is invalid
    """
    if isinstance(contracts, str):
        items = [item.strip() for item in contracts.split(',') if item.strip()]
    else:
        items = list(contracts or [])
    if not items:
        raise ValidationError(f"At least one address is required for {label}")
    for item in items:
        require_address(item, label)
    return items


def validate_timestamp_range(min_timestamp: Optional[int] = None,
                             max_timestamp: Optional[int] = None) -> None:
    """
    Reject a window whose start is after its end.

    Missing bounds are accepted.

    Raises:
        ValidationError: If min_timestamp > max_timestamp
    """
    if min_timestamp is None or max_timestamp is None:
        return
    if min_timestamp > max_timestamp:
        raise ValidationError(
            f"minTimestamp ({min_timestamp}) must not be greater than "
            f"maxTimestamp ({max_timestamp})"
        )
