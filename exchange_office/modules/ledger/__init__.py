"""Ledger operations: exchange and transfer."""

from .exceptions import (
    InsufficientBalanceError,
    InvalidAmountError,
    InvalidRecipientError,
    RecipientNotFoundError,
    SameCurrencyExchangeError,
    UnsupportedCurrencyError,
)
from .models import ExchangeResult, TransferResult
from .service import LedgerService

__all__ = [
    "ExchangeResult",
    "TransferResult",
    "LedgerService",
    "InsufficientBalanceError",
    "InvalidAmountError",
    "InvalidRecipientError",
    "RecipientNotFoundError",
    "SameCurrencyExchangeError",
    "UnsupportedCurrencyError",
]
