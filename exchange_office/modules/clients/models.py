"""Domain models for clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class Client:
    id: str
    username: str
    name: str
    password_hash: str = field(repr=False)
    created_at: Optional[datetime] = None

    def public_identity(self) -> "ClientIdentity":
        return ClientIdentity(username=self.username, name=self.name)


@dataclass(slots=True, frozen=True)
class ClientIdentity:
    """What other clients may see about a client."""

    username: str
    name: str


@dataclass(slots=True)
class ClientCreateInput:
    username: str
    password: str
    name: str
