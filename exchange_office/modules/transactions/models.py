"""Domain models for the transaction log."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionType(str, Enum):
    EXCHANGE = "exchange"
    TRANSFER = "transfer"
    RECEIVED = "received"


@dataclass(slots=True)
class TransactionRecord:
    id: str
    client_id: str
    type: str
    amount: Decimal
    currency_from: Optional[str]
    currency_to: Optional[str]
    receiver_id: Optional[str]
    exchange_rate: Optional[Decimal]
    message: Optional[str]
    created_at: datetime


@dataclass(slots=True)
class TransactionFilters:
    """Optional narrowing of a client's history. ``None`` means no filter."""

    type: Optional[str] = None
    currency: Optional[str] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    limit: Optional[int] = 50
    offset: int = 0

    def __post_init__(self) -> None:
        # "all" is what the history page sends for an unset dropdown
        if self.type == "all":
            self.type = None
        if self.currency == "all":
            self.currency = None
        self.date_from = _as_utc(self.date_from)
        self.date_to = _as_utc(self.date_to)


def _as_utc(moment: Optional[datetime]) -> Optional[datetime]:
    # naive bounds are taken as UTC, the zone the log is written in
    if moment is None:
        return None
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)
