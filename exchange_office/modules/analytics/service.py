"""Per-client analytics computed from the transaction log."""

from __future__ import annotations

from collections import Counter, defaultdict
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Iterable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from exchange_office.core.money import SUPPORTED_CURRENCIES, ZERO, quantize_money, quantize_rate
from exchange_office.modules.transactions import TransactionRecord, TransactionService, TransactionType

from .models import NO_DATA, AnalyticsSummary, CurrencyShare, MonthlyActivity, PairRate, Trends

TREND_WINDOW = timedelta(days=30)

# rows that move the client's own money out
_OUTGOING = {TransactionType.EXCHANGE.value, TransactionType.TRANSFER.value}


def _as_utc(moment: datetime) -> datetime:
    # SQLite drops tzinfo on the way back
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def _volume(records: Iterable[TransactionRecord]) -> Decimal:
    return quantize_money(sum((r.amount for r in records if r.type in _OUTGOING), ZERO))


@dataclass(slots=True)
class AnalyticsService:
    transactions: TransactionService

    @classmethod
    def with_session(cls, session: AsyncSession) -> "AnalyticsService":
        return cls(TransactionService.with_session(session))

    async def summarize(self, client_id: str, now: Optional[datetime] = None) -> AnalyticsSummary:
        records = await self.transactions.list_all(client_id)
        return build_summary(records, now or datetime.now(timezone.utc))


def build_summary(records: list[TransactionRecord], now: datetime) -> AnalyticsSummary:
    if not records:
        return AnalyticsSummary(
            total_transactions=0,
            total_exchange_volume=ZERO,
            total_transfer_volume=ZERO,
            average_transaction_value=ZERO,
        )

    exchanges = [r for r in records if r.type == TransactionType.EXCHANGE.value]
    transfers = [r for r in records if r.type == TransactionType.TRANSFER.value]
    exchange_volume = _volume(exchanges)
    transfer_volume = _volume(transfers)

    return AnalyticsSummary(
        total_transactions=len(records),
        total_exchange_volume=exchange_volume,
        total_transfer_volume=transfer_volume,
        average_transaction_value=quantize_money((exchange_volume + transfer_volume) / len(records)),
        most_active_month=_most_active_month(records),
        currency_distribution=_currency_distribution(records),
        monthly_activity=_monthly_activity(records),
        exchange_rate_efficiency=_pair_rates(exchanges),
        recent_trends=_trends(records, _as_utc(now)),
    )


def _month(record: TransactionRecord) -> str:
    return _as_utc(record.created_at).strftime("%Y-%m")


def _most_active_month(records: list[TransactionRecord]) -> str:
    counts = Counter(_month(r) for r in records)
    if not counts:
        return NO_DATA
    # ties go to the most recent month
    return max(counts.items(), key=lambda item: (item[1], item[0]))[0]


def _currency_distribution(records: list[TransactionRecord]) -> list[CurrencyShare]:
    shares = []
    for currency in SUPPORTED_CURRENCIES:
        touching = [r for r in records if currency in (r.currency_from, r.currency_to)]
        volume = sum((r.amount for r in touching if r.currency_from == currency), ZERO)
        shares.append(CurrencyShare(currency=currency, count=len(touching), volume=quantize_money(volume)))
    return shares


def _monthly_activity(records: list[TransactionRecord]) -> list[MonthlyActivity]:
    by_month: dict[str, list[TransactionRecord]] = defaultdict(list)
    for record in records:
        by_month[_month(record)].append(record)
    return [
        MonthlyActivity(
            month=month,
            exchanges=sum(1 for r in rows if r.type == TransactionType.EXCHANGE.value),
            transfers=sum(1 for r in rows if r.type == TransactionType.TRANSFER.value),
            volume=_volume(rows),
        )
        for month, rows in sorted(by_month.items())
    ]


def _pair_rates(exchanges: list[TransactionRecord]) -> list[PairRate]:
    by_pair: dict[str, list[Decimal]] = defaultdict(list)
    for record in exchanges:
        if record.exchange_rate is not None:
            by_pair[f"{record.currency_from}/{record.currency_to}"].append(record.exchange_rate)
    return [
        PairRate(pair=pair, avg_rate=quantize_rate(sum(rates, Decimal("0")) / len(rates)), count=len(rates))
        for pair, rates in sorted(by_pair.items())
    ]


def _trends(records: list[TransactionRecord], now: datetime) -> Trends:
    recent_start = now - TREND_WINDOW
    previous_start = recent_start - TREND_WINDOW
    recent = [r for r in records if recent_start <= _as_utc(r.created_at) <= now]
    previous = [r for r in records if previous_start <= _as_utc(r.created_at) < recent_start]
    return Trends(
        transaction_trend=len(recent) - len(previous),
        volume_trend=quantize_money(_volume(recent) - _volume(previous)),
    )
