"""
Tests for the Ledger registry.
"""

from decimal import Decimal

import pytest

from personal_bank.domain.account import Account
from personal_bank.domain.ledger import Ledger
from personal_bank.exceptions import AccountAlreadyExistsError


class TestCreateAccount:

    def test_create_account_succeeds(self, ledger):
        account = ledger.create_account("Alice", "A1", "pw1")

        assert account.account_number == "A1"
        assert account.balance == Decimal("0.00")
        assert ledger.lookup("A1") is account
        assert "A1" in ledger
        assert len(ledger) == 1

    def test_duplicate_number_rejected(self, ledger):
        original = ledger.create_account("Alice", "A1", "pw1")
        original.deposit(Decimal("100"))

        with pytest.raises(AccountAlreadyExistsError) as exc_info:
            ledger.create_account("Mallory", "A1", "other")

        assert exc_info.value.account_number == "A1"
        assert ledger.lookup("A1") is original
        assert original.holder_name == "Alice"
        assert original.balance == Decimal("100.00")
        assert original.authenticate("pw1")

    def test_ledgers_are_independent(self):
        first = Ledger()
        second = Ledger()
        first.create_account("Alice", "A1", "pw1")

        assert second.lookup("A1") is None


class TestLookup:

    def test_unknown_number_is_absent(self, ledger):
        assert ledger.lookup("missing") is None

    def test_keys_match_account_numbers(self, ledger, alice_and_bob):
        for account in ledger:
            assert ledger.lookup(account.account_number) is account


class TestDeleteAccount:

    def test_delete_existing(self, ledger, alice_and_bob):
        assert ledger.delete_account("A2") is True
        assert ledger.lookup("A2") is None
        assert len(ledger) == 1

    def test_delete_missing(self, ledger):
        assert ledger.delete_account("nope") is False

    def test_delete_funded_account_is_allowed(self, ledger, alice_and_bob, caplog):
        alice, _ = alice_and_bob
        alice.deposit(Decimal("25"))

        with caplog.at_level("WARNING", logger="personal_bank"):
            assert ledger.delete_account("A1") is True

        assert ledger.lookup("A1") is None
        assert "non-zero balance" in caplog.text


class TestListAll:

    def test_empty(self, ledger):
        assert ledger.list_all() == []

    def test_lists_every_account(self, ledger, alice_and_bob):
        alice, _ = alice_and_bob
        alice.deposit(Decimal("100"))

        rows = {row.account_number: row for row in ledger.list_all()}

        assert set(rows) == {"A1", "A2"}
        assert rows["A1"].holder_name == "Alice"
        assert rows["A1"].balance == Decimal("100.00")
        assert rows["A1"].formatted_balance == "100.00"
        assert rows["A2"].formatted_balance == "0.00"

    def test_listing_is_a_snapshot(self, ledger, alice_and_bob):
        alice, _ = alice_and_bob
        rows = ledger.list_all()
        alice.deposit(Decimal("5"))

        assert rows[0].balance == Decimal("0.00")


class TestRestore:

    def test_restore_inserts_account(self, ledger):
        account = Account("Carol", "C1", "hash", balance=Decimal("7.25"))
        ledger.restore(account)

        assert ledger.lookup("C1") is account

    def test_restore_rejects_duplicates(self, ledger, alice_and_bob):
        with pytest.raises(AccountAlreadyExistsError):
            ledger.restore(Account("Other", "A1", "hash"))
