"""Liveness probe."""
from fastapi import APIRouter

from exchange_office import __version__
from exchange_office.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="Service health")
async def health() -> HealthResponse:
    return HealthResponse(version=__version__)
