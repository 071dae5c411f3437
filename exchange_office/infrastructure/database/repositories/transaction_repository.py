"""SQLAlchemy implementation of the transaction log."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from sqlalchemy import desc, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from exchange_office.db.models import Transaction
from exchange_office.modules.transactions.models import TransactionFilters


class SqlTransactionRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

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
    ) -> Transaction:
        tx = Transaction(
            client_id=client_id,
            type=type,
            amount=amount,
            currency_from=currency_from,
            currency_to=currency_to,
            receiver_id=receiver_id,
            exchange_rate=exchange_rate,
            message=message,
        )
        self.session.add(tx)
        await self.session.flush()
        return tx

    async def list_transactions(self, client_id: str, filters: TransactionFilters) -> Sequence[Transaction]:
        stmt = select(Transaction).where(Transaction.client_id == client_id)
        if filters.type:
            stmt = stmt.where(Transaction.type == filters.type)
        if filters.currency:
            stmt = stmt.where(
                or_(
                    Transaction.currency_from == filters.currency,
                    Transaction.currency_to == filters.currency,
                )
            )
        if filters.date_from is not None:
            stmt = stmt.where(Transaction.created_at >= filters.date_from)
        if filters.date_to is not None:
            stmt = stmt.where(Transaction.created_at <= filters.date_to)

        stmt = stmt.order_by(desc(Transaction.created_at)).offset(filters.offset)
        if filters.limit is not None:
            stmt = stmt.limit(filters.limit)
        result = await self.session.execute(stmt)
        return result.scalars().all()
