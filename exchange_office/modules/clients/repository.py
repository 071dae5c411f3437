"""Repository protocol for clients."""

from __future__ import annotations

from typing import Protocol

from .models import Client


class ClientRepository(Protocol):
    """Abstract repository interface for client persistence."""

    async def get_by_id(self, client_id: str) -> Client | None:
        ...

    async def get_by_username(self, username: str) -> Client | None:
        ...

    async def create_client(self, *, username: str, password_hash: str, name: str) -> Client:
        ...
