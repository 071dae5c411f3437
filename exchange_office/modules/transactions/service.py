"""Transaction history service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from exchange_office.core.money import quantize_money, quantize_rate
from exchange_office.db.models import Transaction as TransactionModel

from .models import TransactionFilters, TransactionRecord
from .repository import TransactionRepository


@dataclass(slots=True)
class TransactionService:
    repository: TransactionRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "TransactionService":
        from exchange_office.infrastructure.database.repositories.transaction_repository import (
            SqlTransactionRepository,
        )

        return cls(SqlTransactionRepository(session))

    async def list_transactions(
        self,
        client_id: str,
        filters: Optional[TransactionFilters] = None,
    ) -> list[TransactionRecord]:
        rows = await self.repository.list_transactions(client_id, filters or TransactionFilters())
        return [self.to_domain(row) for row in rows]

    async def list_all(self, client_id: str) -> list[TransactionRecord]:
        return await self.list_transactions(client_id, TransactionFilters(limit=None))

    @staticmethod
    def to_domain(model: TransactionModel) -> TransactionRecord:
        return TransactionRecord(
            id=model.id,
            client_id=model.client_id,
            type=model.type,
            amount=quantize_money(model.amount),
            currency_from=model.currency_from,
            currency_to=model.currency_to,
            receiver_id=model.receiver_id,
            exchange_rate=quantize_rate(model.exchange_rate) if model.exchange_rate is not None else None,
            message=model.message,
            created_at=model.created_at,
        )
