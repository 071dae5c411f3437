"""Transaction history and analytics endpoints."""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from exchange_office.interfaces.http.deps import get_analytics_service, get_current_client, get_transaction_service
from exchange_office.modules.analytics import AnalyticsService
from exchange_office.modules.clients import Client
from exchange_office.modules.transactions import TransactionFilters, TransactionService
from exchange_office.schemas import AnalyticsResponse, TransactionResponse

router = APIRouter()


def transaction_filters(
    type: Optional[str] = Query(default=None, pattern="^(all|exchange|transfer|received)$"),
    currency: Optional[str] = Query(default=None, pattern="^(all|USD|SAR|YER)$"),
    date_from: Optional[datetime] = Query(default=None, alias="dateFrom"),
    date_to: Optional[datetime] = Query(default=None, alias="dateTo"),
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
) -> TransactionFilters:
    return TransactionFilters(
        type=type,
        currency=currency,
        date_from=date_from,
        date_to=date_to,
        limit=limit,
        offset=offset,
    )


@router.get("/transactions", response_model=list[TransactionResponse], summary="Transaction history")
async def list_transactions(
    filters: TransactionFilters = Depends(transaction_filters),
    client: Client = Depends(get_current_client),
    service: TransactionService = Depends(get_transaction_service),
) -> list[TransactionResponse]:
    records = await service.list_transactions(client.id, filters)
    return [TransactionResponse.model_validate(record) for record in records]


@router.get("/analytics", response_model=AnalyticsResponse, summary="Activity analytics")
async def analytics(
    client: Client = Depends(get_current_client),
    service: AnalyticsService = Depends(get_analytics_service),
) -> AnalyticsResponse:
    summary = await service.summarize(client.id)
    return AnalyticsResponse.model_validate(summary)
