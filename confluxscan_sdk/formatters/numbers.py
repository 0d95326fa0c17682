"""
Number formatting for display

All functions are total: malformed input degrades to a sentinel ("0",
"0%", "0 CFX") instead of raising, so one bad field never fails a listing.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

from ..exceptions import FormatError
from .units import CFX_DECIMALS, GAS_DECIMALS, format_unit

Numeric = Union[str, int, float, Decimal, None]

CFX_UNIT = "CFX"
GAS_UNIT = "Gdrip"

MAX_FRACTION_DIGITS = 4
# Inputs above 10**MAX_EXPONENT are malformed, below 10**-MAX_EXPONENT they are zero
MAX_EXPONENT = 1000


def _to_decimal(value: Numeric) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, float):
            number = Decimal(repr(value))
        elif isinstance(value, str):
            number = Decimal(value.strip())
        else:
            number = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return None
    if not number.is_finite() or number.adjusted() > MAX_EXPONENT:
        return None
    if number.adjusted() < -MAX_EXPONENT:
        return Decimal(0)
    return number


def format_number(value: Numeric) -> str:
    """
    Format a number with comma separators and up to 4 decimal places.

    Extra fractional digits are truncated, not rounded. Trailing fractional
    zeros are dropped.

    Args:
        value: Number or numeric string

    Returns:
        Formatted string, or "0" for empty and non-numeric input

    Example:
        >>> format_number(1234567.123456)
        '1,234,567.1234'
        >>> format_number("1000000")
        '1,000,000'
    """
    number = _to_decimal(value)
    if number is None:
        return "0"

    text = format(number, 'f')
    negative = text.startswith('-')
    whole, _, fraction = text.lstrip('-').partition('.')
    fraction = fraction[:MAX_FRACTION_DIGITS].rstrip('0')

    result = f"{int(whole):,}"
    if fraction:
        result = f"{result}.{fraction}"
    if negative and result != "0":
        result = f"-{result}"
    return result


def format_percentage(value: Numeric) -> str:
    """
    Format a value as a percentage with 2 decimal places.

    Args:
        value: Percentage value (50.5 means 50.5%)

    Returns:
        Formatted string with a trailing %, or "0%" for invalid input

    Example:
        >>> format_percentage(50.5678)
        '50.57%'
    """
    number = _to_decimal(value)
    if number is None:
        return "0%"
    try:
        rounded = number.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return "0%"
    return f"{rounded}%"


def format_gas(value: Numeric) -> str:
    """
    Format a gas amount given in drip at the Gdrip (10^9) scale.

    Args:
        value: Gas amount in drip

    Returns:
        Formatted number without unit

    Example:
        >>> format_gas(1000000000)
        '1'
    """
    if value is None or value == "" or value == 0 or value == "0":
        return "0"
    if isinstance(value, float) and math.isfinite(value):
        value = math.floor(value)
    try:
        return format_number(format_unit(value, GAS_DECIMALS))
    except FormatError:
        return "0"


def format_gas_price(value: Numeric) -> str:
    """Format a gas amount with the Gdrip unit, e.g. "1 Gdrip" """
    return f"{format_gas(value)} {GAS_UNIT}"


def format_token_amount(
    amount: Numeric,
    decimals: Union[int, str] = CFX_DECIMALS,
    is_currency_unit: bool = False
) -> str:
    """
    Format a token amount given in base units.

    Args:
        amount: Raw amount in base units
        decimals: Number of decimals for the token (default: 18)
        is_currency_unit: Append the CFX unit (default: False)

    Returns:
        Formatted amount, "0" (or "0 CFX") for empty or malformed input

    Example:
        >>> format_token_amount("1000000000000000000", 18)
        '1'
        >>> format_token_amount("1000000000000000000", 18, True)
        '1 CFX'
    """
    empty = f"0 {CFX_UNIT}" if is_currency_unit else "0"
    if not amount:
        return empty
    try:
        formatted = format_number(format_unit(amount, int(decimals)))
    except (FormatError, TypeError, ValueError):
        return empty
    return f"{formatted} {CFX_UNIT}" if is_currency_unit else formatted


def format_cfx(value: Numeric) -> str:
    """
    Format a drip amount as CFX.

    Example:
        >>> format_cfx("1000000000000000000")
        '1 CFX'
        >>> format_cfx(None)
        '0 CFX'
    """
    return format_token_amount(value, CFX_DECIMALS, is_currency_unit=True)
