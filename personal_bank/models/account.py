"""
Persisted account row.

This is the storage shape of an Account. The in-memory
domain object lives in personal_bank.domain.account; the
persistence gateway converts between the two.
"""

from sqlalchemy import BigInteger, String, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from personal_bank.models.base import Base


class AccountRecord(Base):
    __tablename__ = "accounts"
    __table_args__ = (
        CheckConstraint("balance_cents >= 0", name="ck_accounts_balance_non_negative"),
    )

    account_number: Mapped[str] = mapped_column(String(34), primary_key=True)
    holder_name: Mapped[str] = mapped_column(String(100), nullable=False)
    credential_hash: Mapped[str] = mapped_column(String(128), nullable=False)
    # Integer cents: exact on every backend, SQLite included
    balance_cents: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0
    )
    # Insertion order within the ledger, so a reload enumerates the same way
    position: Mapped[int] = mapped_column(nullable=False, default=0)

    # Log lines, oldest first
    transactions: Mapped[list["TransactionLogEntry"]] = relationship(
        back_populates="account",
        order_by="TransactionLogEntry.sequence",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<AccountRecord {self.account_number} ({self.balance_cents} cents)>"
