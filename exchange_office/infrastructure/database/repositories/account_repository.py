"""SQLAlchemy implementation of the per-currency account repository."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from exchange_office.core.money import ZERO
from exchange_office.db.models import Account
from exchange_office.modules.accounts.exceptions import ConcurrentUpdateError


class SqlAccountRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_for_client(self, client_id: str) -> Sequence[Account]:
        stmt = select(Account).where(Account.client_id == client_id).order_by(Account.currency)
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def get(self, client_id: str, currency: str) -> Account | None:
        stmt = (
            select(Account)
            .where(Account.client_id == client_id, Account.currency == currency)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_or_create(self, client_id: str, currency: str) -> Account:
        account = await self.get(client_id, currency)
        if account is not None:
            return account

        account = Account(client_id=client_id, currency=currency, balance=ZERO)
        self.session.add(account)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            # another request created the same (client, currency) row first
            raise ConcurrentUpdateError() from exc
        return account

    async def set_balance(self, account: Account, balance: Decimal) -> Account:
        account.balance = balance
        try:
            await self.session.flush()
        except StaleDataError as exc:
            raise ConcurrentUpdateError() from exc
        return account
