"""Results of ledger operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from exchange_office.modules.clients.models import ClientIdentity


@dataclass(slots=True)
class ExchangeResult:
    rate: Decimal
    converted_amount: Decimal
    new_balances: dict[str, Decimal] = field(default_factory=dict)


@dataclass(slots=True)
class TransferResult:
    recipient: ClientIdentity
    new_balance: Decimal
