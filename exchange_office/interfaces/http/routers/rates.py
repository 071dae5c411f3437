"""Public exchange rate endpoints."""
from fastapi import APIRouter, Depends

from exchange_office.interfaces.http.deps import get_rate_service
from exchange_office.modules.rates import RateService
from exchange_office.schemas import ExchangeRateResponse, RateResponse

router = APIRouter()


@router.get("", response_model=list[ExchangeRateResponse], summary="All stored rates")
async def list_rates(service: RateService = Depends(get_rate_service)) -> list[ExchangeRateResponse]:
    return [ExchangeRateResponse.model_validate(rate) for rate in await service.list_rates()]


@router.get("/public", response_model=list[ExchangeRateResponse], summary="All stored rates (public page)")
async def list_public_rates(service: RateService = Depends(get_rate_service)) -> list[ExchangeRateResponse]:
    return [ExchangeRateResponse.model_validate(rate) for rate in await service.list_rates()]


@router.get("/{from_currency}/{to_currency}", response_model=RateResponse, summary="Rate for one pair")
async def get_rate(
    from_currency: str,
    to_currency: str,
    service: RateService = Depends(get_rate_service),
) -> RateResponse:
    rate = await service.resolve_rate(from_currency.upper(), to_currency.upper())
    return RateResponse(rate=rate)
