"""
Tests for the analytics summary built from a client's history.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from exchange_office.modules.analytics import build_summary
from exchange_office.modules.transactions import TransactionRecord

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def record(kind, amount, cur_from, cur_to, created_at, rate=None) -> TransactionRecord:
    return TransactionRecord(
        id=f"{kind}-{created_at.isoformat()}",
        client_id="client-1",
        type=kind,
        amount=Decimal(amount),
        currency_from=cur_from,
        currency_to=cur_to,
        receiver_id=None,
        exchange_rate=Decimal(rate) if rate else None,
        message=None,
        created_at=created_at,
    )


HISTORY = [
    record("exchange", "100.00", "USD", "SAR", NOW - timedelta(days=1), "3.75"),
    record("exchange", "50.00", "USD", "SAR", NOW - timedelta(days=2), "3.80"),
    record("transfer", "20.00", "SAR", "SAR", NOW - timedelta(days=3)),
    # received money is not the client's own volume
    record("received", "500.00", "YER", "YER", NOW - timedelta(days=40)),
    record("exchange", "10.00", "SAR", "YER", NOW - timedelta(days=45), "66.67"),
]


class TestBuildSummary:
    """Tests for build_summary."""

    def test_empty_history(self) -> None:
        summary = build_summary([], NOW)

        assert summary.total_transactions == 0
        assert summary.total_exchange_volume == Decimal("0.00")
        assert summary.most_active_month == "No data"
        assert summary.monthly_activity == []

    def test_totals(self) -> None:
        summary = build_summary(HISTORY, NOW)

        assert summary.total_transactions == 5
        assert summary.total_exchange_volume == Decimal("160.00")
        assert summary.total_transfer_volume == Decimal("20.00")
        assert summary.average_transaction_value == Decimal("36.00")

    def test_most_active_month(self) -> None:
        assert build_summary(HISTORY, NOW).most_active_month == "2026-10"

    def test_monthly_activity_is_chronological(self) -> None:
        activity = build_summary(HISTORY, NOW).monthly_activity

        assert [m.month for m in activity] == ["2026-09", "2026-10"]
        assert (activity[1].exchanges, activity[1].transfers, activity[1].volume) == (2, 1, Decimal("170.00"))

    def test_currency_distribution(self) -> None:
        shares = {share.currency: share for share in build_summary(HISTORY, NOW).currency_distribution}

        assert shares["USD"].count == 2
        assert shares["USD"].volume == Decimal("150.00")
        assert shares["SAR"].count == 4

    def test_average_rate_per_pair(self) -> None:
        pairs = {p.pair: p for p in build_summary(HISTORY, NOW).exchange_rate_efficiency}

        assert pairs["USD/SAR"].avg_rate == Decimal("3.775000")
        assert pairs["USD/SAR"].count == 2
        assert pairs["SAR/YER"].count == 1

    def test_recent_trends(self) -> None:
        """Last 30 days against the 30 days before."""
        trends = build_summary(HISTORY, NOW).recent_trends

        assert trends.transaction_trend == 1
        assert trends.volume_trend == Decimal("160.00")

    def test_naive_timestamps_are_utc(self) -> None:
        naive = [record("exchange", "5.00", "USD", "SAR", datetime(2026, 10, 18, 9, 0), "3.75")]

        assert build_summary(naive, NOW).recent_trends.transaction_trend == 1
