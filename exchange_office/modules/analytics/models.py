"""Analytics summary models."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

NO_DATA = "No data"


@dataclass(slots=True)
class CurrencyShare:
    currency: str
    count: int
    volume: Decimal


@dataclass(slots=True)
class MonthlyActivity:
    month: str
    exchanges: int
    transfers: int
    volume: Decimal


@dataclass(slots=True)
class PairRate:
    pair: str
    avg_rate: Decimal
    count: int


@dataclass(slots=True)
class Trends:
    transaction_trend: int
    volume_trend: Decimal


@dataclass(slots=True)
class AnalyticsSummary:
    total_transactions: int
    total_exchange_volume: Decimal
    total_transfer_volume: Decimal
    average_transaction_value: Decimal
    most_active_month: str = NO_DATA
    currency_distribution: list[CurrencyShare] = field(default_factory=list)
    monthly_activity: list[MonthlyActivity] = field(default_factory=list)
    exchange_rate_efficiency: list[PairRate] = field(default_factory=list)
    recent_trends: Trends = field(default_factory=lambda: Trends(0, Decimal("0.00")))
