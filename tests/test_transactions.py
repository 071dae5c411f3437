"""
Tests for transaction history filtering.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from exchange_office.db.models import Transaction as TransactionModel
from exchange_office.modules.transactions import TransactionFilters, TransactionService

from .conftest import add_client

NOW = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def client_id(run):
    """One client with four history rows spread over four days."""

    async def seed(session):
        client = await add_client(session, "dana")
        rows = [
            ("exchange", "USD", "SAR", Decimal("3.75")),
            ("transfer", "USD", "USD", None),
            ("received", "SAR", "SAR", None),
            ("exchange", "YER", "USD", Decimal("0.004")),
        ]
        for days_ago, (kind, cur_from, cur_to, rate) in enumerate(rows):
            session.add(
                TransactionModel(
                    client_id=client.id,
                    type=kind,
                    amount=Decimal("10.00"),
                    currency_from=cur_from,
                    currency_to=cur_to,
                    exchange_rate=rate,
                    created_at=NOW - timedelta(days=days_ago),
                )
            )
        await session.flush()
        return client.id

    return run(seed)


def listed(run, client_id, **filters):
    return run(
        lambda s: TransactionService.with_session(s).list_transactions(client_id, TransactionFilters(**filters))
    )


class TestTransactionFilters:
    """Tests for TransactionService.list_transactions."""

    def test_newest_first(self, run, client_id) -> None:
        records = listed(run, client_id)
        assert [r.type for r in records] == ["exchange", "transfer", "received", "exchange"]
        assert records[0].currency_from == "USD"

    def test_filter_by_type(self, run, client_id) -> None:
        assert {r.type for r in listed(run, client_id, type="exchange")} == {"exchange"}
        assert len(listed(run, client_id, type="all")) == 4

    def test_filter_by_currency_matches_either_side(self, run, client_id) -> None:
        records = listed(run, client_id, currency="USD")
        assert len(records) == 3
        assert all("USD" in (r.currency_from, r.currency_to) for r in records)

    def test_filter_by_date_range(self, run, client_id) -> None:
        records = listed(
            run,
            client_id,
            date_from=NOW - timedelta(days=2, hours=1),
            date_to=NOW - timedelta(hours=1),
        )
        assert [r.type for r in records] == ["transfer", "received"]

    def test_naive_bounds_are_utc(self) -> None:
        filters = TransactionFilters(date_from=datetime(2026, 1, 1))
        assert filters.date_from == datetime(2026, 1, 1, tzinfo=timezone.utc)

    def test_limit_and_offset(self, run, client_id) -> None:
        records = listed(run, client_id, limit=2, offset=1)
        assert [r.type for r in records] == ["transfer", "received"]

    def test_other_clients_history_is_hidden(self, run, client_id) -> None:
        async def other(session):
            return (await add_client(session, "eve")).id

        assert listed(run, run(other)) == []
