"""Authentication endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status

from exchange_office.core.security import create_access_token
from exchange_office.interfaces.http.deps import get_client_service, get_current_client
from exchange_office.modules.clients import Client, ClientService
from exchange_office.schemas import ClientResponse, LoginRequest, LoginResponse

router = APIRouter()


@router.post("/login", response_model=LoginResponse, summary="Client login")
async def login(
    payload: LoginRequest,
    client_service: ClientService = Depends(get_client_service),
) -> LoginResponse:
    client = await client_service.authenticate(payload.username, payload.password)
    if client is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")

    token = create_access_token(client.id, client.username)
    return LoginResponse(token=token, client=ClientResponse.model_validate(client))


@router.get("/user", response_model=ClientResponse, summary="Current client identity")
async def current_user(client: Client = Depends(get_current_client)) -> ClientResponse:
    return ClientResponse.model_validate(client)
