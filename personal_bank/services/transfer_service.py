"""
Transfer service: moves money between two accounts.

A transfer is one logical unit:
1. Resolve the recipient
2. Withdraw from the sender
3. Deposit to the recipient
4. Log both sides

Withdraw always happens before deposit, and log lines are
written only after both balances have moved. If any step
fails, neither account's balance or log is changed.
"""

import logging

from personal_bank.domain.account import Account
from personal_bank.domain.ledger import Ledger
from personal_bank.exceptions import AccountNotFoundError
from personal_bank.money import format_log_amount, to_amount

logger = logging.getLogger(__name__)


class TransferService:

    def __init__(self, ledger: Ledger):
        self.ledger = ledger

    def transfer(
        self, sender: Account, recipient_account_number: str, amount
    ) -> Account:
        """
        Transfer an amount from sender to the named recipient.

        Returns the recipient account. Transferring to the
        sender's own account is allowed.

        Raises AccountNotFoundError, InvalidAmountError or
        InsufficientFundsError; in every case both accounts
        are left exactly as they were.
        """
        recipient = self.ledger.lookup(recipient_account_number)
        if recipient is None:
            raise AccountNotFoundError(recipient_account_number)

        amount = to_amount(amount)

        # Fails before anything moves: nothing to undo
        sender.withdraw(amount, record=False)

        try:
            recipient.deposit(amount, record=False)
        except Exception:
            # Put the withdrawn funds back before reporting the failure
            sender.deposit(amount, record=False)
            logger.error(
                "Transfer of %s from %s to %s rolled back",
                amount,
                sender.account_number,
                recipient.account_number,
            )
            raise

        shown = format_log_amount(amount)
        sender.record_transaction(
            f"Transferred {shown} to {recipient.account_number}"
        )
        recipient.record_transaction(
            f"Received {shown} from {sender.account_number}"
        )

        logger.info(
            "Transferred %s from %s to %s",
            amount,
            sender.account_number,
            recipient.account_number,
        )
        return recipient
