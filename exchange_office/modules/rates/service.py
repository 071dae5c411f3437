"""Exchange rate domain service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from exchange_office.core.money import is_supported_currency, quantize_rate, to_decimal
from exchange_office.db.models import ExchangeRate as ExchangeRateModel

from .exceptions import RateUnavailableError
from .models import ExchangeRate
from .repository import ExchangeRateRepository

logger = logging.getLogger(__name__)

DEFAULT_RATES: tuple[tuple[str, str, str], ...] = (
    ("USD", "SAR", "3.7500"),
    ("USD", "YER", "250.00"),
    ("SAR", "USD", "0.2667"),
    ("SAR", "YER", "66.67"),
    ("YER", "USD", "0.0040"),
    ("YER", "SAR", "0.0150"),
)


@dataclass(slots=True)
class RateService:
    repository: ExchangeRateRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "RateService":
        from exchange_office.infrastructure.database.repositories.rate_repository import SqlExchangeRateRepository

        return cls(SqlExchangeRateRepository(session))

    async def resolve_rate(self, base_currency: str, target_currency: str) -> Decimal:
        """Rate converting one unit of ``base_currency`` into ``target_currency``.

        Falls back to the inverse of the reverse pair when only that one is
        stored. Stored rates that are not positive are ignored.
        """
        if base_currency == target_currency:
            return Decimal("1")

        direct = await self.repository.get_rate(base_currency, target_currency)
        if direct is not None and _is_positive(direct.rate):
            return quantize_rate(direct.rate)

        reverse = await self.repository.get_rate(target_currency, base_currency)
        if reverse is not None and _is_positive(reverse.rate):
            inverse = quantize_rate(Decimal("1") / to_decimal(reverse.rate))
            if inverse > 0:
                return inverse

        raise RateUnavailableError(base_currency, target_currency)

    async def list_rates(self) -> list[ExchangeRate]:
        rows = await self.repository.list_rates()
        return [self._to_domain(row) for row in rows]

    async def upsert_rates(self, rates: Mapping[tuple[str, str], Decimal | float | str]) -> int:
        """Store supported pairs from ``rates`` and return how many were written."""
        written = 0
        for (base_currency, target_currency), rate in rates.items():
            if base_currency == target_currency:
                continue
            if not (is_supported_currency(base_currency) and is_supported_currency(target_currency)):
                continue
            if not _is_positive(rate):
                logger.warning("Skipping unusable rate %s/%s: %r", base_currency, target_currency, rate)
                continue
            await self.repository.upsert_rate(base_currency, target_currency, quantize_rate(rate))
            written += 1
        return written

    async def initialize_defaults(self) -> bool:
        """Install the seed rates when the table is empty."""
        if await self.repository.count() > 0:
            return False
        for base_currency, target_currency, rate in DEFAULT_RATES:
            await self.repository.upsert_rate(base_currency, target_currency, quantize_rate(rate))
        logger.info("Default exchange rates initialized")
        return True

    @staticmethod
    def _to_domain(model: ExchangeRateModel) -> ExchangeRate:
        return ExchangeRate(
            id=model.id,
            base_currency=model.base_currency,
            target_currency=model.target_currency,
            rate=quantize_rate(model.rate),
            updated_at=model.updated_at,
        )


def _is_positive(rate: Decimal | float | str) -> bool:
    # also false for values that round to zero at rate precision
    try:
        value = quantize_rate(rate)
    except (InvalidOperation, TypeError, ValueError):
        return False
    return value.is_finite() and value > 0
