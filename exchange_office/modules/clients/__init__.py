"""Client domain services and models."""

from .exceptions import ClientAlreadyExistsError, ClientNotFoundError
from .models import Client, ClientCreateInput, ClientIdentity
from .service import ClientService

__all__ = [
    "Client",
    "ClientCreateInput",
    "ClientIdentity",
    "ClientService",
    "ClientAlreadyExistsError",
    "ClientNotFoundError",
]
