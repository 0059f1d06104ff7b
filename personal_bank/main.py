"""
Personal Bank: interactive text-menu driver.

This is the entry point for the application. It loads the
ledger, runs the menu loop against a BankSession and saves
the ledger on exit.

    python -m personal_bank.main
"""

import sys
from decimal import Decimal
from typing import Callable

from pydantic import ValidationError

from personal_bank.config import get_settings
from personal_bank.exceptions import (
    BankingError,
    InvalidAmountError,
    PersistenceError,
)
from personal_bank.logging_config import setup_logging
from personal_bank.models.base import make_engine
from personal_bank.money import ZERO, format_amount, to_amount
from personal_bank.schemas.account import AccountCreate
from personal_bank.services.persistence_service import SqlPersistenceGateway
from personal_bank.services.session_service import BankSession


class BankConsole:
    """
    Menu loop over a BankSession.

    input_func and output default to the builtins; tests pass
    their own to script a session.
    """

    def __init__(
        self,
        session: BankSession,
        title: str = "Bank Management System",
        input_func: Callable[[str], str] | None = None,
        output: Callable[[str], None] | None = None,
    ):
        self.session = session
        self.title = title
        self._input = input_func or input
        self._output = output or print

    def run(self) -> None:
        """Show the main menu until the user chooses to exit."""
        try:
            while self._main_menu():
                pass
        except EOFError:
            self._output("")

    # --- Prompts ---

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _choice(self, low: int, high: int) -> int:
        while True:
            raw = self._ask("Enter your choice: ")
            try:
                choice = int(raw)
            except ValueError:
                self._output("Invalid input. Please enter a valid number.")
                continue
            if low <= choice <= high:
                return choice
            self._output("Invalid choice. Please try again.")

    def _amount(self, prompt: str) -> Decimal:
        while True:
            raw = self._ask(prompt)
            try:
                amount = to_amount(raw)
            except InvalidAmountError as e:
                self._output(f"{e} Please try again.")
                continue
            except ValueError:
                self._output("Invalid input. Please enter a valid amount.")
                continue
            if amount > ZERO:
                return amount
            self._output("Amount must be greater than zero. Please try again.")

    def _menu(self, heading: str, options: list[str]) -> int:
        self._output(f"\n========== {heading} ==========")
        for number, label in enumerate(options, start=1):
            self._output(f"{number}. {label}")
        return self._choice(1, len(options))

    # --- Main menu ---

    def _main_menu(self) -> bool:
        choice = self._menu(
            self.title,
            ["Create Bank Account", "Login to Account", "Admin Login", "Exit"],
        )
        if choice == 1:
            self._create_account()
        elif choice == 2:
            self._login()
        elif choice == 3:
            self._admin_login()
        else:
            return False
        return True

    def _create_account(self) -> None:
        name = self._ask("Enter Account Holder Name: ")
        account_number = self._ask("Enter Account Number: ")

        if account_number in self.session.ledger:
            self._output("Account number already exists. Please try again.")
            return

        credential = self._ask("Set Password: ")
        try:
            request = AccountCreate(
                holder_name=name,
                account_number=account_number,
                credential=credential,
            )
            self.session.open_account(request)
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors())
            self._output(f"Invalid account details ({fields}). Please try again.")
            return
        except BankingError as e:
            self._output(str(e))
            return
        self._output("Account created successfully.")

    def _login(self) -> None:
        account_number = self._ask("Enter Account Number: ")
        if account_number not in self.session.ledger:
            self._output("Account not found. Please try again.")
            return

        credential = self._ask("Enter Password: ")
        try:
            self.session.login(account_number, credential)
        except BankingError as e:
            self._output(str(e))
            return

        try:
            self._account_menu()
        finally:
            self.session.logout()

    def _admin_login(self) -> None:
        candidate = self._ask("Enter Admin Password: ")
        if not self.session.admin_login(candidate):
            self._output("Incorrect admin password. Access denied.")
            return

        try:
            self._admin_menu()
        finally:
            self.session.logout()

    # --- Account menu ---

    def _account_menu(self) -> None:
        options = [
            "Deposit",
            "Withdraw",
            "Check Balance",
            "View Transaction History",
            "Transfer Funds",
            "Update Password",
            "Logout",
        ]
        while True:
            choice = self._menu("Account Menu", options)
            if choice == 7:
                return
            try:
                self._account_action(choice)
            except BankingError as e:
                self._output(str(e))

    def _account_action(self, choice: int) -> None:
        if choice == 1:
            balance = self.session.deposit(self._amount("Enter amount to deposit: "))
            self._output(f"Deposit successful. New balance: {format_amount(balance)}")
        elif choice == 2:
            balance = self.session.withdraw(self._amount("Enter amount to withdraw: "))
            self._output(f"Withdrawal successful. New balance: {format_amount(balance)}")
        elif choice == 3:
            self._output(f"Available balance: {format_amount(self.session.balance())}")
        elif choice == 4:
            history = self.session.history()
            if not history:
                self._output("No transactions yet.")
            for line in history:
                self._output(line)
        elif choice == 5:
            self._transfer()
        elif choice == 6:
            self._update_credential()

    def _transfer(self) -> None:
        recipient = self._ask("Enter recipient's account number: ")
        if recipient not in self.session.ledger:
            self._output("Recipient account not found. Please try again.")
            return

        amount = self._amount("Enter amount to transfer: ")
        self.session.transfer(recipient, amount)
        self._output("Transfer successful.")

    def _update_credential(self) -> None:
        current = self._ask("Enter current password: ")
        if not self.session.account.authenticate(current):
            self._output("Incorrect password. Cannot update.")
            return

        new = self._ask("Enter new password: ")
        self.session.change_credential(current, new)
        self._output("Password updated successfully.")

    # --- Admin menu ---

    def _admin_menu(self) -> None:
        options = ["View All Accounts", "Delete an Account", "Logout"]
        while True:
            choice = self._menu("Admin Menu", options)
            if choice == 1:
                self._view_all_accounts()
            elif choice == 2:
                self._delete_account()
            else:
                return

    def _view_all_accounts(self) -> None:
        summaries = self.session.list_accounts()
        if not summaries:
            self._output("No accounts to display.")
            return

        self._output("Account Holder Name | Account Number | Balance")
        for summary in summaries:
            self._output(
                f"{summary.holder_name} | {summary.account_number} | "
                f"{summary.formatted_balance}"
            )

    def _delete_account(self) -> None:
        account_number = self._ask("Enter the account number to delete: ")
        if self.session.delete_account(account_number):
            self._output("Account deleted successfully.")
        else:
            self._output("Account not found. Please try again.")


def main() -> int:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    gateway = SqlPersistenceGateway(make_engine(settings.DATABASE_URL))
    try:
        ledger = gateway.load_all()
    except PersistenceError as e:
        print(e, file=sys.stderr)
        return 1

    session = BankSession(ledger, admin_secret=settings.ADMIN_SECRET)
    BankConsole(session, title=settings.APP_NAME).run()

    try:
        gateway.save_all(ledger)
    except PersistenceError as e:
        print(e, file=sys.stderr)
        return 1

    print(f"Thank you for using the {settings.APP_NAME}. Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
