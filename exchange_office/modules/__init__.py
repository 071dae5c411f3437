"""Feature modules and their public exports."""

from . import accounts, analytics, clients, ledger, rates, transactions

__all__ = [
    "accounts",
    "analytics",
    "clients",
    "ledger",
    "rates",
    "transactions",
]
