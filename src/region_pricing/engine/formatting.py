"""
Display formatting for price rows.

Amounts are rendered as "<currency> <amount>" with two decimals. Fees are
rendered as a percentage, or "Free" when zero or unset.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

Number = Union[Decimal, float, int, str]

NOT_AVAILABLE = "N/A"
FREE = "Free"

_CENTS = Decimal("0.01")


def to_decimal(value: Optional[Number]) -> Optional[Decimal]:
    """
    Coerce a raw amount to Decimal; None and blank strings stay None.

    Raises ValueError for NaN or infinite amounts and InvalidOperation for
    text that is not a number.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    if not isinstance(value, Decimal):
        # str() first so floats like 1.7 don't carry binary noise
        value = Decimal(str(value))
    if not value.is_finite():
        raise ValueError(f"Not a finite amount: {value}")
    return value


def _two_places(value: Decimal) -> str:
    return str(value.quantize(_CENTS, rounding=ROUND_HALF_UP))


def format_amount(value: Optional[Number], currency_code: str) -> str:
    """Format an amount as "<currency> <value to 2dp>", or "N/A" when absent."""
    amount = to_decimal(value)
    if amount is None:
        return NOT_AVAILABLE
    return f"{currency_code} {_two_places(amount)}"


def format_fee_percent(value: Optional[Number]) -> str:
    """Format a fee as "<value to 2dp>%"; zero or absent fees are "Free"."""
    fee = to_decimal(value)
    if fee is None or fee <= 0:
        return FREE
    return f"{_two_places(fee)}%"
