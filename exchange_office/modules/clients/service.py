"""Domain services for client identity."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from exchange_office.core.security import hash_password, verify_password
from .exceptions import ClientAlreadyExistsError, ClientNotFoundError
from .models import Client, ClientCreateInput, ClientIdentity
from .repository import ClientRepository


class ClientService:
    """Encapsulates client lookup, authentication and provisioning."""

    def __init__(self, repository: ClientRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "ClientService":
        from exchange_office.infrastructure.database.repositories.client_repository import SqlClientRepository

        return cls(SqlClientRepository(session))

    async def get_by_id(self, client_id: str) -> Client | None:
        return await self._repository.get_by_id(client_id)

    async def get_by_username(self, username: str) -> Client | None:
        return await self._repository.get_by_username(username)

    async def require(self, client_id: str) -> Client:
        client = await self._repository.get_by_id(client_id)
        if client is None:
            raise ClientNotFoundError()
        return client

    async def authenticate(self, username: str, password: str) -> Client | None:
        client = await self._repository.get_by_username(username)
        if client is None:
            return None
        if not verify_password(password, client.password_hash):
            return None
        return client

    async def create_client(self, payload: ClientCreateInput) -> Client:
        existing = await self._repository.get_by_username(payload.username)
        if existing is not None:
            raise ClientAlreadyExistsError(payload.username)

        return await self._repository.create_client(
            username=payload.username,
            password_hash=hash_password(payload.password),
            name=payload.name,
        )

    async def verify_recipient(self, requesting_client_id: str, username: str) -> ClientIdentity:
        """Public identity of a prospective transfer recipient.

        The requesting client is never a valid recipient of its own transfer,
        so looking yourself up is reported the same way as an unknown name.
        """
        client = await self._repository.get_by_username(username)
        if client is None or client.id == requesting_client_id:
            raise ClientNotFoundError("Recipient not found")
        return client.public_identity()
