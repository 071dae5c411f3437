"""Validation of quotes received from rate sources."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from exchange_office.core.money import to_decimal
from exchange_office.modules.rates.exceptions import RateProviderError


def parse_quote(source: str, label: str, value: Any) -> Decimal:
    """Decimal form of a quoted rate; anything but a finite positive number is rejected."""
    if value is None or isinstance(value, bool):
        raise RateProviderError(source, f"missing quote {label}")
    try:
        rate = to_decimal(value)
    except (InvalidOperation, TypeError, AttributeError, ValueError) as exc:
        raise RateProviderError(source, f"malformed quote {label}: {value!r}") from exc
    if not rate.is_finite() or rate <= 0:
        raise RateProviderError(source, f"unusable quote {label}: {value!r}")
    return rate
