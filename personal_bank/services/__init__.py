"""Business logic services."""

from personal_bank.services.transfer_service import TransferService
from personal_bank.services.session_service import BankSession, SessionState
from personal_bank.services.persistence_service import (
    PersistenceGateway,
    SqlPersistenceGateway,
)

__all__ = [
    "TransferService",
    "BankSession",
    "SessionState",
    "PersistenceGateway",
    "SqlPersistenceGateway",
]
