"""
Ledger: the registry of all accounts.

The ledger exclusively owns every Account, keyed by account
number. Nothing else keeps accounts around between operations;
callers get a reference for the duration of one operation.

A Ledger is an ordinary object, not a module-level global.
Build one per process (or per test) and pass it explicitly.
"""

import logging
from typing import Iterator

from personal_bank.domain.account import Account
from personal_bank.exceptions import AccountAlreadyExistsError
from personal_bank.money import ZERO
from personal_bank.schemas.account import AccountSummary

logger = logging.getLogger(__name__)


class Ledger:

    def __init__(self):
        self._accounts: dict[str, Account] = {}

    def create_account(
        self, name: str, account_number: str, credential: str
    ) -> Account:
        """
        Open a new zero-balance account.

        Raises AccountAlreadyExistsError if the number is taken;
        the existing account is left untouched.
        """
        if account_number in self._accounts:
            raise AccountAlreadyExistsError(account_number)

        account = Account.open(name, account_number, credential)
        self._accounts[account_number] = account
        logger.info("Created account %s", account_number)
        return account

    def restore(self, account: Account) -> Account:
        """Insert an already-built account, e.g. one loaded from storage."""
        if account.account_number in self._accounts:
            raise AccountAlreadyExistsError(account.account_number)
        self._accounts[account.account_number] = account
        return account

    def lookup(self, account_number: str) -> Account | None:
        return self._accounts.get(account_number)

    def delete_account(self, account_number: str) -> bool:
        """
        Remove an account. Returns False if there was none.

        No balance check is made: any remaining funds are
        discarded with the account.
        """
        account = self._accounts.pop(account_number, None)
        if account is None:
            return False

        if account.balance > ZERO:
            logger.warning(
                "Deleted account %s with non-zero balance %s",
                account_number,
                account.formatted_balance,
            )
        else:
            logger.info("Deleted account %s", account_number)
        return True

    def list_all(self) -> list[AccountSummary]:
        """Snapshot of (name, number, balance) for every account."""
        return [
            AccountSummary(
                holder_name=account.holder_name,
                account_number=account.account_number,
                balance=account.balance,
            )
            for account in self._accounts.values()
        ]

    def __iter__(self) -> Iterator[Account]:
        return iter(list(self._accounts.values()))

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_number: object) -> bool:
        return account_number in self._accounts
