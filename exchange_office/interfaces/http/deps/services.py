"""Service dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from exchange_office.modules.accounts import AccountService
from exchange_office.modules.analytics import AnalyticsService
from exchange_office.modules.clients import ClientService
from exchange_office.modules.ledger import LedgerService
from exchange_office.modules.rates import RateService
from exchange_office.modules.transactions import TransactionService

from .database import get_db_session


def get_client_service(db: AsyncSession = Depends(get_db_session)) -> ClientService:
    return ClientService.with_session(db)


def get_account_service(db: AsyncSession = Depends(get_db_session)) -> AccountService:
    return AccountService.with_session(db)


def get_ledger_service(db: AsyncSession = Depends(get_db_session)) -> LedgerService:
    return LedgerService.with_session(db)


def get_rate_service(db: AsyncSession = Depends(get_db_session)) -> RateService:
    return RateService.with_session(db)


def get_transaction_service(db: AsyncSession = Depends(get_db_session)) -> TransactionService:
    return TransactionService.with_session(db)


def get_analytics_service(db: AsyncSession = Depends(get_db_session)) -> AnalyticsService:
    return AnalyticsService.with_session(db)


__all__ = [
    "get_client_service",
    "get_account_service",
    "get_ledger_service",
    "get_rate_service",
    "get_transaction_service",
    "get_analytics_service",
]
