"""
Session service: authentication and dispatch for one interactive session.

A session moves through a small state machine:

    ANONYMOUS -> AUTHENTICATED -> ANONYMOUS   (customer login / logout)
    ANONYMOUS -> ADMIN         -> ANONYMOUS   (admin login / logout)

The session owns no banking data. It holds the Ledger it was
given and, while authenticated, a reference to the logged-in
account. Operations called in the wrong state raise
SessionStateError.
"""

import enum
import logging
import secrets
from decimal import Decimal

from personal_bank.domain.account import Account
from personal_bank.domain.ledger import Ledger
from personal_bank.exceptions import (
    AccountNotFoundError,
    SessionStateError,
    WrongCredentialError,
)
from personal_bank.schemas.account import AccountCreate, AccountSummary
from personal_bank.services.transfer_service import TransferService

logger = logging.getLogger(__name__)


class SessionState(str, enum.Enum):
    ANONYMOUS = "ANONYMOUS"
    AUTHENTICATED = "AUTHENTICATED"
    ADMIN = "ADMIN"


class BankSession:

    def __init__(
        self,
        ledger: Ledger,
        admin_secret: str,
        transfer_service: TransferService | None = None,
    ):
        self.ledger = ledger
        self._admin_secret = admin_secret
        self.transfer_service = transfer_service or TransferService(ledger)
        self.state = SessionState.ANONYMOUS
        self.account: Account | None = None

    def _require(self, state: SessionState) -> None:
        if self.state != state:
            raise SessionStateError(
                f"Operation requires {state.value} session "
                f"(current: {self.state.value})"
            )

    def _current_account(self) -> Account:
        self._require(SessionState.AUTHENTICATED)
        return self.account

    # --- Authentication ---

    def login(self, account_number: str, credential: str) -> Account:
        """
        Authenticate an account holder.

        Looks the account up, then checks the credential. On
        failure nothing changes and the session stays anonymous.
        """
        self._require(SessionState.ANONYMOUS)

        account = self.ledger.lookup(account_number)
        if account is None:
            raise AccountNotFoundError(account_number)

        if not account.authenticate(credential):
            logger.warning("Failed login for account %s", account_number)
            raise WrongCredentialError()

        self.account = account
        self.state = SessionState.AUTHENTICATED
        logger.info("Account %s logged in", account_number)
        return account

    def admin_login(self, candidate: str) -> bool:
        """Compare against the configured admin secret."""
        self._require(SessionState.ANONYMOUS)

        if not secrets.compare_digest(
            candidate.encode("utf-8"), self._admin_secret.encode("utf-8")
        ):
            logger.warning("Failed admin login")
            return False

        self.state = SessionState.ADMIN
        logger.info("Admin logged in")
        return True

    def logout(self) -> None:
        self.account = None
        self.state = SessionState.ANONYMOUS

    def update_credential(
        self, account: Account, current_credential: str, new_credential: str
    ) -> None:
        """Re-authenticate with the current credential, then replace it."""
        if not account.authenticate(current_credential):
            raise WrongCredentialError("Incorrect password. Cannot update.")
        account.set_credential(new_credential)
        logger.info("Credential updated for account %s", account.account_number)

    # --- Anonymous operations ---

    def open_account(self, request: AccountCreate) -> Account:
        self._require(SessionState.ANONYMOUS)
        return self.ledger.create_account(
            request.holder_name, request.account_number, request.credential
        )

    # --- Account holder operations ---

    def deposit(self, amount) -> Decimal:
        return self._current_account().deposit(amount)

    def withdraw(self, amount) -> Decimal:
        return self._current_account().withdraw(amount)

    def balance(self) -> Decimal:
        return self._current_account().balance

    def history(self) -> list[str]:
        return self._current_account().history()

    def transfer(self, recipient_account_number: str, amount) -> Account:
        return self.transfer_service.transfer(
            self._current_account(), recipient_account_number, amount
        )

    def change_credential(self, current_credential: str, new_credential: str) -> None:
        self.update_credential(
            self._current_account(), current_credential, new_credential
        )

    # --- Admin operations ---

    def list_accounts(self) -> list[AccountSummary]:
        self._require(SessionState.ADMIN)
        return self.ledger.list_all()

    def delete_account(self, account_number: str) -> bool:
        self._require(SessionState.ADMIN)
        return self.ledger.delete_account(account_number)
