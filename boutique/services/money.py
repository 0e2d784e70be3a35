"""
Money Utilities - Safe Decimal operations for monetary values.

Avoids float precision issues by using Decimal throughout.
"""
import re
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

# Currency markers that appear in storefront price labels ("Rs. 1,250", "PKR 900")
_PRICE_MARKERS = re.compile(r"rs\.?|pkr", re.IGNORECASE)

# Leading number of a cleaned label; trailing text such as "/-" or "only" is ignored
_LEADING_NUMBER = re.compile(r"\s*([-+]?(?:\d+\.?\d*|\.\d+))")


def to_decimal(value: Union[str, int, float, Decimal, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        if isinstance(value, float):
            # Go through str to keep the printed precision
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Union[str, int, float, Decimal]) -> Decimal:
    """Round a monetary value to two places, half-up."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def multiply(value: Union[str, int, float, Decimal], factor: Union[str, int, float, Decimal]) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def to_float(value: Union[str, int, float, Decimal]) -> float:
    """
    Convert Decimal to float for JSON serialization.

    Use only at API boundaries, not for internal calculations.
    """
    return float(to_decimal(value))


def parse_price_text(text: str | None) -> Decimal:
    """
    Parse a price label as rendered on a product card or detail page.

    Strips currency markers and thousands separators, then reads the leading
    number:
        "Rs. 1,250"    -> Decimal("1250")
        "PKR 899.50"   -> Decimal("899.50")
        "Rs. 1,250/-"  -> Decimal("1250")

    Text without a leading number yields Decimal("0"). The sign is kept;
    callers decide whether a negative price is acceptable.
    """
    if not text:
        return Decimal("0")

    cleaned = _PRICE_MARKERS.sub("", text).replace(",", "")
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return Decimal("0")

    return to_decimal(match.group(1))
