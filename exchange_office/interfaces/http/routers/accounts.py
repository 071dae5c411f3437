"""Per-currency account balances of the current client."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from exchange_office.interfaces.http.deps import get_account_service, get_current_client, get_db_session
from exchange_office.modules.accounts import AccountService
from exchange_office.modules.clients import Client
from exchange_office.schemas import AccountResponse

router = APIRouter()


@router.get("", response_model=list[AccountResponse], summary="List balances, opening missing currencies at zero")
async def list_accounts(
    client: Client = Depends(get_current_client),
    service: AccountService = Depends(get_account_service),
    db: AsyncSession = Depends(get_db_session),
) -> list[AccountResponse]:
    accounts = await service.list_accounts(client.id)
    await db.commit()
    return [AccountResponse.model_validate(account) for account in accounts]
