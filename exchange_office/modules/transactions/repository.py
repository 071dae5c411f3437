"""Repository protocol for the transaction log."""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol, Sequence

from exchange_office.db.models import Transaction as TransactionModel

from .models import TransactionFilters


class TransactionRepository(Protocol):
    async def add_transaction(
        self,
        *,
        client_id: str,
        type: str,
        amount: Decimal,
        currency_from: str,
        currency_to: str,
        receiver_id: str | None = None,
        exchange_rate: Decimal | None = None,
        message: str | None = None,
    ) -> TransactionModel:
        ...

    async def list_transactions(self, client_id: str, filters: TransactionFilters) -> Sequence[TransactionModel]:
        ...
