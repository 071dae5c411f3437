"""SQLAlchemy implementation of the exchange rate repository."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from exchange_office.db.models import ExchangeRate, utcnow


class SqlExchangeRateRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_rate(self, base_currency: str, target_currency: str) -> ExchangeRate | None:
        stmt = select(ExchangeRate).where(
            ExchangeRate.base_currency == base_currency,
            ExchangeRate.target_currency == target_currency,
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_rates(self) -> Sequence[ExchangeRate]:
        stmt = select(ExchangeRate).order_by(ExchangeRate.base_currency, ExchangeRate.target_currency)
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(ExchangeRate))
        return int(result.scalar_one())

    async def upsert_rate(self, base_currency: str, target_currency: str, rate: Decimal) -> ExchangeRate:
        row = await self.get_rate(base_currency, target_currency)
        if row is None:
            row = ExchangeRate(base_currency=base_currency, target_currency=target_currency, rate=rate)
            self.session.add(row)
        else:
            row.rate = rate
            row.updated_at = utcnow()
        await self.session.flush()
        return row
