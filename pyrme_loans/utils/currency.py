"""INR display formatting (en-IN digit grouping, no paise)"""

from decimal import Decimal

from pyrme_loans.config import settings
from pyrme_loans.utils.money import Number, round_half_up, to_decimal

LAKH = Decimal("100000")


def group_indian(digits: str) -> str:
    """
    Group a string of digits the Indian way.

    Last three digits form one group, everything before is split into pairs:
        "500000"   -> "5,00,000"
        "12345678" -> "1,23,45,678"
    """
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_inr(value: Number, symbol: str | None = None) -> str:
    """Whole-rupee amount, e.g. 1625099.6 -> "₹16,25,100" """
    symbol = settings.currency_symbol if symbol is None else symbol
    amount = round_half_up(to_decimal(value, "value"))
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{group_indian(str(abs(int(amount))))}"


def format_inr_compact(value: Number, symbol: str | None = None) -> str:
    """Amounts of one lakh and above as lakhs with one decimal ("₹5.0L")"""
    symbol = settings.currency_symbol if symbol is None else symbol
    amount = to_decimal(value, "value")
    if amount >= LAKH:
        return f"{symbol}{round_half_up(amount / LAKH, 1)}L"
    return format_inr(amount, symbol)
