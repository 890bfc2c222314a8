"""
Ledger for the console bank.

The ledger owns every account created during a session and enforces that
usernames are unique.
"""

import logging
import uuid
from decimal import Decimal
from threading import RLock
from typing import Iterator, List, Tuple

from .errors import AccountNotFound, DuplicateUsername, InvalidAmount, InvalidFormat
from .models import Account, AccountLookup, Customer, Found, NotFound
from .money import is_within_bounds, to_decimal
from .validators import is_blank, is_valid_email, is_valid_phone_number


class Ledger:
    """In-memory collection of accounts, kept in creation order."""

    def __init__(self):
        """Initialize an empty ledger."""
        self._accounts: List[Account] = []
        self._lock = RLock()
        self.logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(self.accounts)

    def __contains__(self, username) -> bool:
        return self.exists(username)

    @property
    def accounts(self) -> Tuple[Account, ...]:
        """Snapshot of all accounts in creation order."""
        with self._lock:
            return tuple(self._accounts)

    def generate_account_number(self) -> str:
        """Generate a unique account number."""
        return str(uuid.uuid4())

    def exists(self, username: str) -> bool:
        """Check whether an account with exactly this username exists."""
        with self._lock:
            return any(account.customer.username == username for account in self._accounts)

    def find_by_username(self, username: str) -> AccountLookup:
        """Find the account owned by username."""
        with self._lock:
            for account in self._accounts:
                if account.customer.username == username:
                    return Found(account)
        return NotFound(username)

    def get_account(self, username: str) -> Account:
        """Get the account owned by username, raising AccountNotFound if absent."""
        lookup = self.find_by_username(username)
        if not lookup.found:
            raise AccountNotFound(username)
        return lookup.account

    def create(self, username: str, address: str, email: str, phone_number: str,
               initial_deposit: Decimal = Decimal('0.00')) -> Account:
        """
        Create a customer and account and add them to the ledger.

        Args:
            username: Unique username of the new customer
            address: Free-text postal address
            email: Email address in local@domain.tld form
            phone_number: UK phone number
            initial_deposit: Opening balance, must not be negative

        Returns:
            The new Account

        Raises:
            InvalidFormat: If the username is blank or email/phone are malformed
            InvalidAmount: If the initial deposit is negative or out of range
            DuplicateUsername: If the username is already taken
        """
        if is_blank(username):
            raise InvalidFormat("Username cannot be empty")

        if not is_valid_email(email):
            raise InvalidFormat(f"Invalid email: {email!r}")

        if not is_valid_phone_number(phone_number):
            raise InvalidFormat(f"Invalid UK phone number: {phone_number!r}")

        initial_deposit = to_decimal(initial_deposit)
        if not is_within_bounds(initial_deposit):
            raise InvalidAmount("Initial deposit is out of range")

        if initial_deposit < 0:
            raise InvalidAmount("Initial deposit cannot be negative")

        customer = Customer(
            username=username,
            address=address,
            email=email,
            phone_number=phone_number
        )

        # Uniqueness check and append form one atomic unit
        with self._lock:
            if self.exists(username):
                self.logger.warning(f"Rejected duplicate username: {username}")
                raise DuplicateUsername(username)

            account_number = self.generate_account_number()
            while any(account.account_number == account_number for account in self._accounts):
                account_number = self.generate_account_number()

            account = Account(
                account_number=account_number,
                customer=customer,
                balance=initial_deposit
            )
            self._accounts.append(account)

        self.logger.info(f"Created account {account.account_number} for {username}")
        return account
