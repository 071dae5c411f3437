"""Fixed-point helpers for balances and rates."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

MONEY_QUANTUM = Decimal("0.01")
RATE_QUANTUM = Decimal("0.000001")
ZERO = Decimal("0.00")


class Currency(str, Enum):
    USD = "USD"
    SAR = "SAR"
    YER = "YER"


SUPPORTED_CURRENCIES: tuple[str, ...] = tuple(currency.value for currency in Currency)


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # floats go through str() so 0.1 stays 0.1
    return Decimal(str(value))


def quantize_money(value: Decimal | int | float | str) -> Decimal:
    """Round to two decimal places, half up."""
    return to_decimal(value).quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def quantize_rate(value: Decimal | int | float | str) -> Decimal:
    """Round to six decimal places, half up."""
    return to_decimal(value).quantize(RATE_QUANTUM, rounding=ROUND_HALF_UP)


def is_supported_currency(code: str) -> bool:
    return code in SUPPORTED_CURRENCIES


__all__ = [
    "Currency",
    "SUPPORTED_CURRENCIES",
    "ZERO",
    "to_decimal",
    "quantize_money",
    "quantize_rate",
    "is_supported_currency",
]
