"""Decimal helpers shared by the calculators"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from pyrme_loans.domain.exceptions import InvalidInput

Number = Union[int, float, str, Decimal]

WHOLE_UNIT = Decimal("1")
HUNDRED = Decimal("100")

# Largest amount the calculators accept (10^15 rupees). Keeps every rounded
# intermediate inside the default 28-digit context.
MAX_AMOUNT = Decimal(10) ** 15


def to_decimal(value: Number, name: str) -> Decimal:
    """
    Coerce a user-supplied number to Decimal.

    Floats go through str() so 10.5 becomes Decimal("10.5") rather than its
    binary expansion. NaN, infinities, booleans and garbage raise InvalidInput.
    """
    if isinstance(value, bool):
        raise InvalidInput(f"{name} must be a number")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidInput(f"{name} must be a number")
    if not result.is_finite():
        raise InvalidInput(f"{name} must be finite")
    return result


def to_amount(value: Number, name: str) -> Decimal:
    """Decimal money amount, rejected when above MAX_AMOUNT"""
    result = to_decimal(value, name)
    if result > MAX_AMOUNT:
        raise InvalidInput(f"{name} must not exceed {MAX_AMOUNT:,f}")
    return result


def round_half_up(value: Decimal, places: int = 0) -> Decimal:
    """Round to `places` decimals, halves away from zero (2.5 -> 3)"""
    exponent = WHOLE_UNIT if places == 0 else Decimal(1).scaleb(-places)
    try:
        return value.quantize(exponent, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidInput(f"{value:E} is too large to round to {places} decimal places")


def to_whole_units(value: Decimal) -> int:
    """Round half-up to whole currency units"""
    return int(round_half_up(value))
