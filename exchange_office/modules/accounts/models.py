"""Domain models for per-currency accounts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(slots=True)
class Account:
    id: str
    client_id: str
    currency: str
    balance: Decimal
    updated_at: Optional[datetime] = None
