"""Exchange and transfer endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from exchange_office.interfaces.http.deps import (
    get_client_service,
    get_current_client,
    get_db_session,
    get_ledger_service,
)
from exchange_office.modules.clients import Client, ClientService
from exchange_office.modules.ledger import LedgerService
from exchange_office.schemas import (
    ExchangeRequest,
    ExchangeResponse,
    RecipientResponse,
    TransferRequest,
    TransferResponse,
)

router = APIRouter()


@router.post("/exchange", response_model=ExchangeResponse, summary="Exchange between own currency accounts")
async def exchange(
    payload: ExchangeRequest,
    client: Client = Depends(get_current_client),
    ledger: LedgerService = Depends(get_ledger_service),
    db: AsyncSession = Depends(get_db_session),
) -> ExchangeResponse:
    result = await ledger.exchange(
        client.id,
        payload.from_currency.value,
        payload.to_currency.value,
        payload.amount,
    )
    await db.commit()
    return ExchangeResponse(
        exchange_rate=result.rate,
        converted_amount=result.converted_amount,
        new_balances=result.new_balances,
    )


@router.post("/transfer", response_model=TransferResponse, summary="Transfer funds to another client")
async def transfer(
    payload: TransferRequest,
    client: Client = Depends(get_current_client),
    ledger: LedgerService = Depends(get_ledger_service),
    db: AsyncSession = Depends(get_db_session),
) -> TransferResponse:
    result = await ledger.transfer(
        client.id,
        payload.recipient_username,
        payload.currency.value,
        payload.amount,
        payload.message,
    )
    await db.commit()
    return TransferResponse(
        recipient=RecipientResponse.model_validate(result.recipient),
        new_balance=result.new_balance,
    )


@router.get("/clients/verify/{username}", response_model=RecipientResponse, summary="Check a transfer recipient")
async def verify_recipient(
    username: str,
    client: Client = Depends(get_current_client),
    client_service: ClientService = Depends(get_client_service),
) -> RecipientResponse:
    identity = await client_service.verify_recipient(client.id, username)
    return RecipientResponse.model_validate(identity)
