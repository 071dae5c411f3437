"""
Tests for the per-request database session dependency.
"""

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import select

from exchange_office.db.models import Client as ClientModel
from exchange_office.infrastructure.database import session as db_session
from exchange_office.interfaces.http.deps import get_db_session
from exchange_office.interfaces.http.errors import register_error_handlers
from exchange_office.modules.ledger import InvalidAmountError

from .conftest import build_client


@pytest.fixture()
def app_client(monkeypatch, session_factory):
    monkeypatch.setattr(db_session, "AsyncSessionFactory", session_factory)
    app = FastAPI()
    register_error_handlers(app)

    @app.post("/clients/{username}")
    async def create(username: str, fail: bool = False, db=Depends(get_db_session)):
        db.add(build_client(username, {"USD": "10.00"}))
        await db.flush()
        if fail:
            raise InvalidAmountError()
        return {"ok": True}

    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


def stored_usernames(run):
    async def read(session):
        return list((await session.execute(select(ClientModel.username))).scalars())

    return run(read)


class TestRequestSession:
    def test_commits_after_success(self, app_client, run) -> None:
        assert app_client.post("/clients/grace").status_code == 200
        assert stored_usernames(run) == ["grace"]

    def test_rolls_back_when_handler_raises(self, app_client, run) -> None:
        """Flushed rows are discarded when the handler fails."""
        resp = app_client.post("/clients/heidi", params={"fail": True})

        assert resp.status_code == 400
        assert stored_usernames(run) == []
