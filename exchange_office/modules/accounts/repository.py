"""Repository protocol for per-currency accounts."""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol, Sequence

from exchange_office.db.models import Account as AccountModel


class AccountRepository(Protocol):
    async def list_for_client(self, client_id: str) -> Sequence[AccountModel]:
        ...

    async def get(self, client_id: str, currency: str) -> AccountModel | None:
        ...

    async def get_or_create(self, client_id: str, currency: str) -> AccountModel:
        ...

    async def set_balance(self, account: AccountModel, balance: Decimal) -> AccountModel:
        ...
