"""SQLAlchemy implementation of the client repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from exchange_office.db.models import Client as ClientModel
from exchange_office.modules.clients.models import Client


class SqlClientRepository:
    """Client repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, client_id: str) -> Client | None:
        stmt = select(ClientModel).where(ClientModel.id == client_id)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def get_by_username(self, username: str) -> Client | None:
        stmt = select(ClientModel).where(ClientModel.username == username)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def create_client(self, *, username: str, password_hash: str, name: str) -> Client:
        model = ClientModel(username=username, password_hash=password_hash, name=name)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: ClientModel | None) -> Client | None:
        if model is None:
            return None
        return Client(
            id=str(model.id),
            username=model.username,
            name=model.name,
            password_hash=model.password_hash,
            created_at=model.created_at,
        )
