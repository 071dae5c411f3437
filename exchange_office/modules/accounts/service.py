"""Account domain service"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from exchange_office.core.money import SUPPORTED_CURRENCIES, quantize_money
from exchange_office.db.models import Account as AccountModel

from .models import Account
from .repository import AccountRepository


@dataclass(slots=True)
class AccountService:
    repository: AccountRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "AccountService":
        from exchange_office.infrastructure.database.repositories.account_repository import SqlAccountRepository

        return cls(SqlAccountRepository(session))

    async def list_accounts(self, client_id: str) -> list[Account]:
        """Return one account per supported currency, creating missing ones at zero."""
        existing = {row.currency for row in await self.repository.list_for_client(client_id)}
        for currency in SUPPORTED_CURRENCIES:
            if currency not in existing:
                await self.repository.get_or_create(client_id, currency)
        rows = await self.repository.list_for_client(client_id)
        return [self.to_domain(row) for row in rows]

    @staticmethod
    def to_domain(model: AccountModel) -> Account:
        return Account(
            id=model.id,
            client_id=model.client_id,
            currency=model.currency,
            balance=quantize_money(model.balance),
            updated_at=model.updated_at,
        )
