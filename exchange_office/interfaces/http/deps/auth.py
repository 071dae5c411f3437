"""Bearer-token authentication dependency."""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from exchange_office.core.exceptions import AuthenticationError
from exchange_office.core.security import decode_access_token
from exchange_office.modules.clients import Client, ClientService

from .services import get_client_service

security = HTTPBearer(auto_error=False)


async def get_current_client(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    clients: ClientService = Depends(get_client_service),
) -> Client:
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Access token required", missing=True)
    token_data = decode_access_token(credentials.credentials)
    return await clients.require(token_data.client_id)


__all__ = ["get_current_client", "security"]
