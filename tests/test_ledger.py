"""
Tests for the ledger module.

This module contains tests for the Ledger class, including account
creation, username uniqueness and lookups.
"""

import pytest
import uuid
from decimal import Decimal
from unittest.mock import patch

from console_bank.errors import AccountNotFound, DuplicateUsername, InvalidAmount, InvalidFormat
from console_bank.ledger import Ledger
from console_bank.models import Account, Found, NotFound


def customer_fields(username, **overrides):
    fields = {
        "username": username,
        "address": "1 High Street, London",
        "email": f"{username}@example.com",
        "phone_number": "07700 900123",
    }
    fields.update(overrides)
    return fields


class TestLedger:
    """Test Ledger class."""

    @pytest.fixture
    def ledger(self):
        """Create an empty Ledger for testing."""
        return Ledger()

    @pytest.fixture
    def sample_account(self, ledger):
        """Create a sample account for testing."""
        return ledger.create(initial_deposit=Decimal('100.00'), **customer_fields("alice"))

    def test_new_ledger_is_empty(self, ledger):
        """Test a fresh ledger has no accounts."""
        assert len(ledger) == 0
        assert ledger.accounts == ()

    def test_create_account_success(self, ledger):
        """Test successful account creation."""
        account = ledger.create(initial_deposit=Decimal('250.50'), **customer_fields("alice"))

        assert isinstance(account, Account)
        assert account.balance == Decimal('250.50')
        assert account.customer.username == "alice"
        assert account.customer.email == "alice@example.com"
        assert account.customer.phone_number == "07700 900123"
        assert account.customer.address == "1 High Street, London"
        assert len(ledger) == 1

    def test_create_account_default_deposit(self, ledger):
        """Test account creation without an initial deposit."""
        account = ledger.create(**customer_fields("alice"))

        assert account.balance == Decimal('0.00')

    def test_account_number_is_uuid(self, sample_account):
        """Test account numbers are UUID strings."""
        assert str(uuid.UUID(sample_account.account_number)) == sample_account.account_number

    def test_account_numbers_unique(self, ledger):
        """Test each account gets a distinct number."""
        numbers = {ledger.create(**customer_fields(f"user{i}")).account_number for i in range(10)}

        assert len(numbers) == 10

    def test_account_number_collision_regenerated(self, ledger):
        """Test a colliding account number is regenerated."""
        with patch.object(ledger, 'generate_account_number', side_effect=["SAME", "SAME", "OTHER"]):
            first = ledger.create(**customer_fields("alice"))
            second = ledger.create(**customer_fields("bob"))

        assert first.account_number == "SAME"
        assert second.account_number == "OTHER"

    def test_create_duplicate_username(self, ledger, sample_account):
        """Test duplicate username leaves the ledger unchanged."""
        with pytest.raises(DuplicateUsername, match="alice"):
            ledger.create(**customer_fields("alice", email="other@example.com"))

        assert len(ledger) == 1
        assert ledger.accounts == (sample_account,)

    def test_username_match_is_case_sensitive(self, ledger, sample_account):
        """Test usernames differing only by case are distinct."""
        account = ledger.create(**customer_fields("Alice"))

        assert account is not sample_account
        assert len(ledger) == 2

    @pytest.mark.parametrize("username", ["", "   "])
    def test_create_blank_username(self, ledger, username):
        """Test blank username is rejected."""
        with pytest.raises(InvalidFormat, match="Username cannot be empty"):
            ledger.create(**customer_fields(username, email="someone@example.com"))

        assert len(ledger) == 0

    def test_create_invalid_email(self, ledger):
        """Test malformed email is rejected."""
        with pytest.raises(InvalidFormat, match="Invalid email"):
            ledger.create(**customer_fields("alice", email="not-an-email"))

    def test_create_invalid_phone(self, ledger):
        """Test non-UK phone number is rejected."""
        with pytest.raises(InvalidFormat, match="Invalid UK phone number"):
            ledger.create(**customer_fields("alice", phone_number="555-1234"))

    def test_create_negative_initial_deposit(self, ledger):
        """Test negative opening balance is rejected."""
        with pytest.raises(InvalidAmount, match="Initial deposit cannot be negative"):
            ledger.create(initial_deposit=Decimal('-1.00'), **customer_fields("alice"))

        assert len(ledger) == 0

    @pytest.mark.parametrize("deposit", [Decimal('1E+30'), Decimal('NaN'), Decimal('0.00000000001')])
    def test_create_out_of_range_initial_deposit(self, ledger, deposit):
        """Test opening balances outside the money bound are rejected."""
        with pytest.raises(InvalidAmount, match="Initial deposit is out of range"):
            ledger.create(initial_deposit=deposit, **customer_fields("alice"))

        assert len(ledger) == 0

    def test_exists(self, ledger, sample_account):
        """Test exists for known and unknown usernames."""
        assert ledger.exists("alice") is True
        assert ledger.exists("bob") is False
        assert ledger.exists("ALICE") is False
        assert "alice" in ledger
        assert "bob" not in ledger

    def test_find_by_username_found(self, ledger, sample_account):
        """Test lookup returns the exact account created."""
        ledger.create(**customer_fields("bob"))

        result = ledger.find_by_username("alice")

        assert isinstance(result, Found)
        assert result.account is sample_account

    def test_find_by_username_not_found(self, ledger, sample_account):
        """Test lookup of an unknown username."""
        result = ledger.find_by_username("ghost")

        assert isinstance(result, NotFound)
        assert result.username == "ghost"
        assert not result

    def test_find_in_empty_ledger(self, ledger):
        """Test lookup in an empty ledger."""
        assert ledger.find_by_username("alice").found is False

    def test_get_account(self, ledger, sample_account):
        """Test get_account returns the account."""
        assert ledger.get_account("alice") is sample_account

    def test_get_account_missing(self, ledger):
        """Test get_account raises for unknown usernames."""
        with pytest.raises(AccountNotFound, match="ghost"):
            ledger.get_account("ghost")

    def test_accounts_in_creation_order(self, ledger):
        """Test accounts keep insertion order."""
        names = ["carol", "alice", "bob"]
        for name in names:
            ledger.create(**customer_fields(name))

        assert [account.customer.username for account in ledger] == names

    def test_accounts_snapshot_is_immutable(self, ledger, sample_account):
        """Test the accounts property cannot be used to mutate the ledger."""
        snapshot = ledger.accounts
        ledger.create(**customer_fields("bob"))

        assert len(snapshot) == 1
        assert len(ledger.accounts) == 2

    def test_uniqueness_over_many_creates(self, ledger):
        """Test no two accounts share a username whatever the sequence of creates."""
        attempts = ["a", "b", "a", "c", "b", "d", "a"]
        for name in attempts:
            try:
                ledger.create(**customer_fields(name))
            except DuplicateUsername:
                pass

        usernames = [account.customer.username for account in ledger]
        assert sorted(usernames) == ["a", "b", "c", "d"]
        assert len(usernames) == len(set(usernames))

    def test_separate_ledgers_are_independent(self):
        """Test ledgers do not share state."""
        first = Ledger()
        second = Ledger()
        first.create(**customer_fields("alice"))

        assert len(second) == 0
        assert second.exists("alice") is False
