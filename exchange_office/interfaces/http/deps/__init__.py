"""Reusable FastAPI dependencies."""

from .auth import get_current_client
from .database import get_db_session
from .services import (
    get_account_service,
    get_analytics_service,
    get_client_service,
    get_ledger_service,
    get_rate_service,
    get_transaction_service,
)

__all__ = [
    "get_current_client",
    "get_db_session",
    "get_account_service",
    "get_analytics_service",
    "get_client_service",
    "get_ledger_service",
    "get_rate_service",
    "get_transaction_service",
]
