"""
Persistence service: bulk load and save of the whole ledger.

The ledger lives in memory while the program runs. It is
read once at start-up with load_all() and written once at
shutdown with save_all(). A save replaces everything that
was stored before, inside a single database transaction:
either the whole ledger is written or nothing is.

Storage failures are wrapped in PersistenceError. A failed
save rolls back the database and never touches the in-memory
ledger, so the caller can still retry or report.
"""

import logging
from typing import Protocol

from sqlalchemy import Engine, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from personal_bank.domain.account import Account
from personal_bank.domain.ledger import Ledger
from personal_bank.exceptions import PersistenceError
from personal_bank.models import AccountRecord, Base, TransactionLogEntry
from personal_bank.models.base import make_session_factory
from personal_bank.money import from_minor_units, to_minor_units

logger = logging.getLogger(__name__)


class PersistenceGateway(Protocol):
    def load_all(self) -> Ledger: ...

    def save_all(self, ledger: Ledger) -> None: ...


class SqlPersistenceGateway:
    """Stores the ledger in any database SQLAlchemy can reach."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = make_session_factory(engine)

    def _ensure_schema(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def load_all(self) -> Ledger:
        """
        Rebuild the ledger from storage.

        An empty or brand-new database yields an empty ledger;
        that is the normal first-run case, not an error.
        """
        ledger = Ledger()
        try:
            self._ensure_schema()
            with self.session_factory() as db:
                records = db.execute(
                    select(AccountRecord)
                    .options(selectinload(AccountRecord.transactions))
                    .order_by(AccountRecord.position)
                ).scalars().all()

                for record in records:
                    ledger.restore(Account(
                        holder_name=record.holder_name,
                        account_number=record.account_number,
                        credential_hash=record.credential_hash,
                        balance=from_minor_units(record.balance_cents),
                        transactions=[entry.text for entry in record.transactions],
                    ))
        except SQLAlchemyError as e:
            logger.error("Failed to load accounts: %s", e)
            raise PersistenceError(f"Error loading account data: {e}") from e

        if len(ledger) == 0:
            logger.info("No existing data found. Starting fresh.")
        else:
            logger.info("Loaded %d accounts", len(ledger))
        return ledger

    def save_all(self, ledger: Ledger) -> None:
        """Replace everything in storage with the current ledger."""
        try:
            self._ensure_schema()
            with self.session_factory() as db:
                try:
                    db.execute(delete(TransactionLogEntry))
                    db.execute(delete(AccountRecord))

                    for position, account in enumerate(ledger):
                        record = AccountRecord(
                            account_number=account.account_number,
                            holder_name=account.holder_name,
                            credential_hash=account.credential_hash,
                            balance_cents=to_minor_units(account.balance),
                            position=position,
                        )
                        record.transactions = [
                            TransactionLogEntry(sequence=sequence, text=text)
                            for sequence, text in enumerate(account.history())
                        ]
                        db.add(record)

                    db.commit()
                except SQLAlchemyError:
                    db.rollback()
                    raise
        except SQLAlchemyError as e:
            logger.error("Failed to save accounts: %s", e)
            raise PersistenceError(f"Error saving account data: {e}") from e

        logger.info("Saved %d accounts", len(ledger))
