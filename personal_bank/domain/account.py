"""
Customer account.

An account holds its identity, a hashed credential, its
balance and its transaction log. It enforces its own
invariants only: the balance never goes negative, and a
failed deposit or withdrawal changes nothing.

Cross-account rules (transfers) live in TransferService.
"""

import logging
from decimal import Decimal

from personal_bank.exceptions import InsufficientFundsError, InvalidAmountError
from personal_bank.money import (
    MAX_AMOUNT,
    ZERO,
    format_amount,
    format_log_amount,
    to_amount,
)
from personal_bank.security import hash_credential, verify_credential

logger = logging.getLogger(__name__)


class Account:

    def __init__(
        self,
        holder_name: str,
        account_number: str,
        credential_hash: str,
        balance: Decimal = ZERO,
        transactions: list[str] | None = None,
    ):
        self._holder_name = holder_name
        self._account_number = account_number
        self._credential_hash = credential_hash
        self._balance = to_amount(balance)
        self._transactions = list(transactions or [])

        if self._balance < ZERO:
            raise ValueError(
                f"Account {account_number} cannot start with a negative balance"
            )

    @classmethod
    def open(cls, holder_name: str, account_number: str, credential: str) -> "Account":
        """Create a new zero-balance account from a plain-text credential."""
        return cls(holder_name, account_number, hash_credential(credential))

    @property
    def holder_name(self) -> str:
        return self._holder_name

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def credential_hash(self) -> str:
        return self._credential_hash

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def formatted_balance(self) -> str:
        return format_amount(self._balance)

    # --- Credentials ---

    def authenticate(self, candidate: str) -> bool:
        """True if the candidate matches the stored credential."""
        return verify_credential(candidate, self._credential_hash)

    def set_credential(self, new_credential: str) -> None:
        """
        Replace the credential unconditionally.

        Re-authentication is the caller's job (see BankSession).
        """
        self._credential_hash = hash_credential(new_credential)

    # --- Money movement ---

    def deposit(self, amount, record: bool = True) -> Decimal:
        """
        Add a positive amount to the balance.

        Returns the new balance. With record=False no log line
        is written; TransferService uses this to write its own.
        The resulting balance may not exceed MAX_AMOUNT.
        """
        amount = to_amount(amount)
        if amount <= ZERO:
            raise InvalidAmountError(amount)
        if self._balance + amount > MAX_AMOUNT:
            raise InvalidAmountError(
                amount, f"Deposit would exceed the maximum balance of {MAX_AMOUNT}."
            )

        self._balance += amount
        if record:
            self._transactions.append(f"Deposit: {format_log_amount(amount)}")
        logger.debug("Deposited %s into %s", amount, self._account_number)
        return self._balance

    def withdraw(self, amount, record: bool = True) -> Decimal:
        """
        Remove a positive amount from the balance.

        Raises InsufficientFundsError, carrying the current
        balance, if the amount exceeds it. The balance is
        untouched on every failure path.
        """
        amount = to_amount(amount)
        if amount <= ZERO:
            raise InvalidAmountError(amount)
        if amount > self._balance:
            raise InsufficientFundsError(self._balance, amount)

        self._balance -= amount
        if record:
            self._transactions.append(f"Withdraw: {format_log_amount(amount)}")
        logger.debug("Withdrew %s from %s", amount, self._account_number)
        return self._balance

    # --- Transaction log ---

    def record_transaction(self, text: str) -> None:
        self._transactions.append(text)

    def history(self) -> list[str]:
        """Return a copy of the log, oldest first."""
        return list(self._transactions)

    def __repr__(self) -> str:
        return f"<Account {self._account_number} {self._holder_name} ({self.formatted_balance})>"
