"""
Transaction log entry model.

One row per line of an account's transaction log. The
sequence column preserves insertion order; entries are
append-only in the domain, so rows are only ever written
as part of a full save.
"""

from sqlalchemy import ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from personal_bank.models.base import Base


class TransactionLogEntry(Base):
    __tablename__ = "transaction_log"
    __table_args__ = (
        UniqueConstraint("account_number", "sequence", name="uq_log_account_sequence"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    account_number: Mapped[str] = mapped_column(
        ForeignKey("accounts.account_number", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    sequence: Mapped[int] = mapped_column(nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)

    account: Mapped["AccountRecord"] = relationship(back_populates="transactions")

    def __repr__(self) -> str:
        return f"<TransactionLogEntry {self.account_number}#{self.sequence}>"
