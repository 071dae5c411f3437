"""SQLAlchemy-backed repository implementations."""

from .account_repository import SqlAccountRepository
from .client_repository import SqlClientRepository
from .rate_repository import SqlExchangeRateRepository
from .transaction_repository import SqlTransactionRepository

__all__ = [
    "SqlAccountRepository",
    "SqlClientRepository",
    "SqlExchangeRateRepository",
    "SqlTransactionRepository",
]
