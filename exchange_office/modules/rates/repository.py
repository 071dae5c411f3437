"""Repository protocol for exchange rates."""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol, Sequence

from exchange_office.db.models import ExchangeRate as ExchangeRateModel


class ExchangeRateRepository(Protocol):
    async def get_rate(self, base_currency: str, target_currency: str) -> ExchangeRateModel | None:
        ...

    async def list_rates(self) -> Sequence[ExchangeRateModel]:
        ...

    async def count(self) -> int:
        ...

    async def upsert_rate(self, base_currency: str, target_currency: str, rate: Decimal) -> ExchangeRateModel:
        ...
