"""Domain models for exchange rates."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

# (base, target) -> rate
RateTable = dict[tuple[str, str], Decimal]


@dataclass(slots=True)
class ExchangeRate:
    id: str
    base_currency: str
    target_currency: str
    rate: Decimal
    updated_at: Optional[datetime] = None

    @property
    def pair(self) -> tuple[str, str]:
        return self.base_currency, self.target_currency
