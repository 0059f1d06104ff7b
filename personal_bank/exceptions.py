"""
Error taxonomy for banking operations.

Every BankingError is recoverable: the caller reports it and
carries on. They subclass ValueError so code that only cares
about "bad input" can catch them together.

PersistenceError is the only fatal condition.
"""

from decimal import Decimal


class BankingError(ValueError):
    """Base class for recoverable banking errors."""


class InvalidAmountError(BankingError):
    """Raised when an amount is not positive or is out of range."""

    def __init__(self, amount, message: str | None = None):
        self.amount = amount
        super().__init__(
            message or f"Invalid amount {amount}. Please enter a positive value."
        )


class InsufficientFundsError(BankingError):
    """Raised when a withdrawal or transfer exceeds the balance."""

    def __init__(self, balance: Decimal, requested: Decimal):
        self.balance = balance
        self.requested = requested
        super().__init__(f"Insufficient funds. Current balance: {balance:.2f}")


class AccountAlreadyExistsError(BankingError):
    def __init__(self, account_number: str):
        self.account_number = account_number
        super().__init__(f"Account number '{account_number}' already exists")


class AccountNotFoundError(BankingError):
    def __init__(self, account_number: str):
        self.account_number = account_number
        super().__init__(f"Account '{account_number}' not found")


class WrongCredentialError(BankingError):
    """Raised when a credential does not match."""

    def __init__(self, message: str = "Incorrect password. Access denied."):
        super().__init__(message)


class InvalidCredentialError(BankingError):
    """Raised when a new credential is empty or too long to hash."""


class SessionStateError(BankingError):
    """Raised when an operation is not allowed in the current session state."""


class PersistenceError(RuntimeError):
    """Raised when the ledger cannot be loaded from or saved to storage."""
