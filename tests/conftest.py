"""Shared fixtures.

The application reads its settings once, so the test database location is put
into the environment before anything from ``exchange_office`` is imported.
"""

import asyncio
import os
import tempfile
from decimal import Decimal
from pathlib import Path

_TEST_DIR = Path(tempfile.mkdtemp(prefix="exchange-office-tests-"))
API_DB_PATH = _TEST_DIR / "api.db"

os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE__URL"] = f"sqlite+aiosqlite:///{API_DB_PATH}"
os.environ["RATES__REFRESH_INTERVAL_SECONDS"] = "0"
os.environ["RATES__FREE_CURRENCY_API_KEY"] = ""
os.environ["RATES__FIXER_API_KEY"] = ""

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from exchange_office.core.security import hash_password  # noqa: E402
from exchange_office.db.models import Account as AccountModel  # noqa: E402
from exchange_office.db.models import Client as ClientModel  # noqa: E402
from exchange_office.infrastructure.database.base import Base  # noqa: E402

PASSWORD = "secret123"
PASSWORD_HASH = hash_password(PASSWORD)


def build_client(username: str, balances: dict[str, str] | None = None) -> ClientModel:
    client = ClientModel(username=username, password_hash=PASSWORD_HASH, name=username.title())
    client.accounts = [
        AccountModel(currency=currency, balance=Decimal(amount))
        for currency, amount in (balances or {}).items()
    ]
    return client


async def add_client(session, username: str, balances: dict[str, str] | None = None) -> ClientModel:
    client = build_client(username, balances)
    session.add(client)
    await session.flush()
    return client


@pytest.fixture()
def session_factory(tmp_path):
    """A fresh SQLite database per test.

    ``NullPool`` keeps connections from outliving the event loop that opened
    them, since every ``run`` call gets its own loop.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}", poolclass=NullPool)

    async def create_tables() -> None:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(create_tables())
    yield async_sessionmaker(engine, expire_on_commit=False)
    asyncio.run(engine.dispose())


@pytest.fixture()
def run(session_factory):
    """Run ``fn(session)`` in one committed unit of work and return its result."""

    def _run(fn):
        async def unit_of_work():
            async with session_factory() as session:
                try:
                    result = await fn(session)
                    await session.commit()
                    return result
                except Exception:
                    await session.rollback()
                    raise

        return asyncio.run(unit_of_work())

    return _run


@pytest.fixture(scope="session")
def api_client():
    from fastapi.testclient import TestClient

    from exchange_office.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture()
def seed_client(api_client):
    """Insert a client straight into the API database; returns its id."""
    engine = create_engine(f"sqlite:///{API_DB_PATH}")

    def _seed(username: str, balances: dict[str, str] | None = None) -> str:
        with Session(engine) as session:
            client = build_client(username, balances)
            session.add(client)
            session.commit()
            return client.id

    yield _seed
    engine.dispose()


@pytest.fixture()
def login(api_client):
    def _login(username: str, password: str = PASSWORD) -> dict[str, str]:
        resp = api_client.post("/api/auth/login", json={"username": username, "password": password})
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['token']}"}

    return _login
