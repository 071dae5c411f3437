"""Transaction log exports"""

from .models import TransactionFilters, TransactionRecord, TransactionType
from .service import TransactionService

__all__ = [
    "TransactionFilters",
    "TransactionRecord",
    "TransactionType",
    "TransactionService",
]
