"""
Shared test fixtures.

Each test gets a fresh in-memory Ledger and, where storage is
involved, a private in-memory SQLite database. No test touches
the real accounts database.
"""

import os

# Minimum bcrypt cost keeps account creation fast.
# Must be set before personal_bank.config is imported.
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ADMIN_SECRET"] = "admin123"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from personal_bank.domain.ledger import Ledger
from personal_bank.services.persistence_service import SqlPersistenceGateway
from personal_bank.services.session_service import BankSession
from personal_bank.services.transfer_service import TransferService


@pytest.fixture
def engine():
    """
    In-memory SQLite shared across connections.

    StaticPool keeps a single connection, so tables created by
    one session are visible to the next.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def gateway(engine):
    return SqlPersistenceGateway(engine)


@pytest.fixture
def ledger():
    return Ledger()


@pytest.fixture
def transfer_service(ledger):
    return TransferService(ledger)


@pytest.fixture
def session(ledger):
    return BankSession(ledger, admin_secret="admin123")


@pytest.fixture
def alice_and_bob(ledger):
    """A1/Alice/pw1 and A2/Bob/pw2, both at zero balance."""
    alice = ledger.create_account("Alice", "A1", "pw1")
    bob = ledger.create_account("Bob", "A2", "pw2")
    return alice, bob
