"""
Base-unit scaling for amounts and gas

Amounts arrive from the API as integers in the smallest unit (drip for
CFX, the token's own base unit otherwise). Everything here stays in
``int`` arithmetic; a float never touches an amount.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Union

from ..exceptions import FormatError

RawAmount = Union[str, int, float]

CFX_DECIMALS = 18
GAS_DECIMALS = 9

_DECIMAL_RE = re.compile(r'^[+-]?\d+$')
_HEX_RE = re.compile(r'^[+-]?0[xX][0-9a-fA-F]+$')


def to_base_units(value: RawAmount) -> int:
    """
    Parse a raw API value into an integer amount.

    Accepts decimal strings, ``0x`` hex strings, ints and floats holding an
    integral value (including scientific notation such as ``1.5e18``).

    Args:
        value: Raw amount

    Returns:
        The amount as an arbitrary-precision integer

    Raises:
        FormatError: If the value is not an integer in any accepted form
    """
    if isinstance(value, bool):
        raise FormatError(f"Cannot convert {value!r} to an integer amount")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        try:
            exact = Decimal(repr(value))
        except InvalidOperation as exc:
            raise FormatError(f"Cannot convert {value!r} to an integer amount") from exc
        if not exact.is_finite() or exact != exact.to_integral_value():
            raise FormatError(f"Cannot convert {value!r} to an integer amount")
        return int(exact)
    if isinstance(value, str):
        text = value.strip()
        if _DECIMAL_RE.match(text):
            return int(text)
        if _HEX_RE.match(text):
            return int(text, 16)
    raise FormatError(f"Cannot convert {value!r} to an integer amount")


def format_unit(value: RawAmount, decimals: int) -> str:
    """
    Divide a base-unit amount by 10^decimals without losing precision.

    Trailing fractional zeros are trimmed, so whole amounts come back as a
    bare integer.

    Args:
        value: Raw amount in base units
        decimals: Number of decimals of the unit

    Returns:
        Decimal string

    Raises:
        FormatError: If the value cannot be parsed or decimals is negative

    Example:
        >>> format_unit("1000000000000000000", 18)
        '1'
        >>> format_unit("1500000000000000000", 18)
        '1.5'
    """
    if decimals < 0:
        raise FormatError(f"decimals must be non-negative, got {decimals}")
    amount = to_base_units(value)
    sign = '-' if amount < 0 else ''
    whole, fraction = divmod(abs(amount), 10 ** decimals)
    if decimals == 0 or fraction == 0:
        return f"{sign}{whole}"
    digits = str(fraction).rjust(decimals, '0').rstrip('0')
    return f"{sign}{whole}.{digits}"
