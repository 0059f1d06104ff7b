"""
Tests for the BankSession controller.
"""

from decimal import Decimal

import pytest

from personal_bank.exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    InvalidCredentialError,
    SessionStateError,
    WrongCredentialError,
)
from personal_bank.schemas.account import AccountCreate
from personal_bank.services.session_service import SessionState


def login_alice(session):
    return session.login("A1", "pw1")


# --- Authentication ---

class TestLogin:

    def test_login_succeeds(self, session, alice_and_bob):
        alice, _ = alice_and_bob
        account = login_alice(session)

        assert account is alice
        assert session.state == SessionState.AUTHENTICATED
        assert session.account is alice

    def test_unknown_account(self, session, alice_and_bob):
        with pytest.raises(AccountNotFoundError):
            session.login("A9", "pw1")

        assert session.state == SessionState.ANONYMOUS
        assert session.account is None

    def test_wrong_credential(self, session, alice_and_bob):
        with pytest.raises(WrongCredentialError):
            session.login("A1", "wrong")

        assert session.state == SessionState.ANONYMOUS

    def test_logout_returns_to_anonymous(self, session, alice_and_bob):
        login_alice(session)
        session.logout()

        assert session.state == SessionState.ANONYMOUS
        assert session.account is None

    def test_no_nested_login(self, session, alice_and_bob):
        login_alice(session)

        with pytest.raises(SessionStateError):
            session.login("A2", "pw2")
        with pytest.raises(SessionStateError):
            session.admin_login("admin123")


class TestAdminLogin:

    def test_correct_secret(self, session):
        assert session.admin_login("admin123") is True
        assert session.state == SessionState.ADMIN

    def test_wrong_secret(self, session):
        assert session.admin_login("admin") is False
        assert session.state == SessionState.ANONYMOUS

    def test_secret_compared_exactly(self, session):
        assert session.admin_login("admin123 ") is False
        assert session.admin_login("ADMIN123") is False


class TestUpdateCredential:

    def test_update_with_current_credential(self, session, alice_and_bob):
        alice, _ = alice_and_bob
        session.update_credential(alice, "pw1", "pw1-new")

        assert alice.authenticate("pw1-new")
        assert not alice.authenticate("pw1")

    def test_update_with_wrong_current_credential(self, session, alice_and_bob):
        alice, _ = alice_and_bob

        with pytest.raises(WrongCredentialError, match="Cannot update"):
            session.update_credential(alice, "wrong", "pw1-new")

        assert alice.authenticate("pw1")

    def test_change_credential_for_logged_in_account(self, session, alice_and_bob):
        alice, _ = alice_and_bob
        login_alice(session)
        session.change_credential("pw1", "changed")

        assert alice.authenticate("changed")

    def test_credential_too_long_for_hashing(self, session, alice_and_bob):
        alice, _ = alice_and_bob
        login_alice(session)

        with pytest.raises(InvalidCredentialError, match="72 bytes"):
            session.change_credential("pw1", "x" * 80)

        assert alice.authenticate("pw1")
        assert session.state == SessionState.AUTHENTICATED

    def test_multibyte_credential_counted_in_bytes(self, session, alice_and_bob):
        alice, _ = alice_and_bob

        with pytest.raises(InvalidCredentialError):
            session.update_credential(alice, "pw1", "é" * 40)

        assert alice.authenticate("pw1")


# --- Dispatch ---

class TestAccountOperations:

    def test_open_account(self, session, ledger):
        account = session.open_account(AccountCreate(
            holder_name="Carol", account_number="C1", credential="pw3",
        ))

        assert ledger.lookup("C1") is account
        assert session.state == SessionState.ANONYMOUS

    def test_open_duplicate_account(self, session, alice_and_bob):
        with pytest.raises(AccountAlreadyExistsError):
            session.open_account(AccountCreate(
                holder_name="Mallory", account_number="A1", credential="x",
            ))

    def test_deposit_withdraw_balance_history(self, session, alice_and_bob):
        login_alice(session)

        assert session.deposit(Decimal("100")) == Decimal("100.00")
        assert session.withdraw(Decimal("30")) == Decimal("70.00")
        assert session.balance() == Decimal("70.00")
        assert session.history() == ["Deposit: 100.0", "Withdraw: 30.0"]

    def test_transfer(self, session, alice_and_bob):
        _, bob = alice_and_bob
        login_alice(session)
        session.deposit(Decimal("100"))

        session.transfer("A2", Decimal("40"))

        assert session.balance() == Decimal("60.00")
        assert bob.balance == Decimal("40.00")

    def test_operations_require_login(self, session, alice_and_bob):
        with pytest.raises(SessionStateError):
            session.deposit(Decimal("10"))
        with pytest.raises(SessionStateError):
            session.balance()
        with pytest.raises(SessionStateError):
            session.transfer("A2", Decimal("1"))

    def test_admin_cannot_use_account_operations(self, session, alice_and_bob):
        session.admin_login("admin123")

        with pytest.raises(SessionStateError):
            session.history()


class TestAdminOperations:

    def test_list_accounts(self, session, alice_and_bob):
        session.admin_login("admin123")
        numbers = {row.account_number for row in session.list_accounts()}

        assert numbers == {"A1", "A2"}

    def test_delete_account(self, session, ledger, alice_and_bob):
        session.admin_login("admin123")

        assert session.delete_account("A2") is True
        assert ledger.lookup("A2") is None
        assert session.delete_account("A2") is False

    def test_admin_operations_require_admin(self, session, alice_and_bob):
        with pytest.raises(SessionStateError):
            session.list_accounts()

        login_alice(session)
        with pytest.raises(SessionStateError):
            session.delete_account("A2")
