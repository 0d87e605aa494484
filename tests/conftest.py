"""Shared fixtures: an in-memory SQLite database per test."""

import os

os.environ.setdefault("TJ_DATABASE_URL", "sqlite://")

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

import tradejournal.models  # noqa: F401  (populate metadata)
from tradejournal.database import enable_sqlite_foreign_keys, get_session
from tradejournal.main import app
from tradejournal.models import Account, Asset
from tradejournal.services.batch_submission import BatchSubmissionCoordinator
from tradejournal.services.directories import AccountDirectory, AssetDirectory
from tradejournal.services.ledger_store import LedgerStore
from tradejournal.services.reporting import JournalReports

TODAY = date(2025, 3, 14)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def seeded(session):
    """Two accounts (A1, A2) and two assets (X, Y)."""
    session.add(Account(id="A1", name="Main", owner_id="alice", initial_capital=Decimal("1000")))
    session.add(Account(id="A2", name="Swing", owner_id="bob", initial_capital=Decimal("500")))
    session.add(Asset(id="X", name="Bitcoin", type="Crypto"))
    session.add(Asset(id="Y", name="EURUSD", type="Forex"))
    session.commit()
    return session


@pytest.fixture
def ledger(seeded):
    return LedgerStore(seeded)


@pytest.fixture
def coordinator(seeded, ledger):
    return BatchSubmissionCoordinator(ledger, AccountDirectory(seeded), AssetDirectory(seeded))


@pytest.fixture
def reports(seeded, ledger):
    return JournalReports(ledger, AccountDirectory(seeded), AssetDirectory(seeded))


@pytest.fixture
def client(engine, seeded):
    def _get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


def row(account_id="A1", asset_id="X", start="1000", profit="50", lot="0.1", **extra):
    """A raw batch row in the caller's camelCase wire format."""
    data = {
        "accountId": account_id,
        "assetId": asset_id,
        "startBalance": start,
        "dailyProfit": profit,
        "lotSize": lot,
    }
    data.update(extra)
    return data
