"""In-memory domain objects: accounts and the ledger that owns them."""

from personal_bank.domain.account import Account
from personal_bank.domain.ledger import Ledger

__all__ = ["Account", "Ledger"]
