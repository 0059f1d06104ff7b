"""
Database models package.

All models must be imported here so that they are registered
on Base.metadata before the tables are created.
"""

from personal_bank.models.base import Base
from personal_bank.models.account import AccountRecord
from personal_bank.models.transaction_log import TransactionLogEntry

__all__ = [
    "Base",
    "AccountRecord",
    "TransactionLogEntry",
]
