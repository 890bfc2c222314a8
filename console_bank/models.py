"""
Data models for the console bank.

This module contains the core data structures used throughout the application.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from threading import RLock
from typing import Optional, Union

from .errors import BankError


@dataclass(frozen=True)
class Customer:
    """Identity and contact details of an account holder."""

    username: str
    address: str = ""
    email: str = ""
    phone_number: str = ""


@dataclass
class Account:
    """Represents a bank account owned by exactly one customer."""

    account_number: str
    customer: Customer
    balance: Decimal = Decimal('0.00')
    _lock: RLock = field(default_factory=RLock, init=False, repr=False, compare=False)

    def __post_init__(self):
        """Initialize account after creation."""
        # Ensure balance is a Decimal
        if not isinstance(self.balance, Decimal):
            self.balance = Decimal(str(self.balance))

    @property
    def username(self) -> str:
        return self.customer.username

    @property
    def lock(self) -> RLock:
        """Lock guarding balance read-modify-write."""
        return self._lock


@dataclass(frozen=True)
class Found:
    """Lookup result when an account exists."""

    account: Account

    @property
    def found(self) -> bool:
        return True

    def __bool__(self):
        return True


@dataclass(frozen=True)
class NotFound:
    """Lookup result when no account matches."""

    username: str

    @property
    def found(self) -> bool:
        return False

    def __bool__(self):
        return False


AccountLookup = Union[Found, NotFound]


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a balance operation."""

    success: bool
    balance: Decimal
    amount: Decimal = Decimal('0.00')
    message: str = ""
    error: Optional[BankError] = None

    def __bool__(self):
        return self.success
