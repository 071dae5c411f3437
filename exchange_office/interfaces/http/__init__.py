"""HTTP interface: router assembly."""

from fastapi import APIRouter

from .routers import accounts, auth, health, ledger, rates, transactions


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(auth.router, prefix="/auth", tags=["auth"])
    router.include_router(accounts.router, prefix="/accounts", tags=["accounts"])
    router.include_router(ledger.router, tags=["ledger"])
    router.include_router(transactions.router, tags=["transactions"])
    router.include_router(rates.router, prefix="/exchange-rates", tags=["exchange rates"])
    router.include_router(health.router, tags=["health"])
    return router


__all__ = [
    "create_api_router",
]
