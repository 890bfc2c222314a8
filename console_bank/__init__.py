"""
Console Bank

An interactive console banking session. Accounts live in an in-memory
ledger for the lifetime of the process and support deposits, withdrawals
and balance checks.
"""

__version__ = "0.1.0"
__author__ = "Developer"
__email__ = "dev@example.com"

from typing import Optional

from .models import Account, Customer, Found, NotFound, OperationResult
from .errors import (
    BankError, DuplicateUsername, AccountNotFound, InsufficientFunds,
    InvalidFormat, InvalidAmount,
)
from .config import Settings
from .ledger import Ledger
from .account_manager import AccountManager
from .messages import MessageSink, ConsoleSink, RecordingSink
from .cli import BankSession, main


def create_session(settings: Optional[Settings] = None,
                   sink: Optional[MessageSink] = None) -> BankSession:
    """
    Create a BankSession with a fresh ledger.

    Args:
        settings: Session settings, defaults apply when omitted
        sink: Message sink, a coloured console sink when omitted

    Returns:
        BankSession instance
    """
    return BankSession(ledger=Ledger(), sink=sink, settings=settings)


__all__ = [
    "Account",
    "Customer",
    "Found",
    "NotFound",
    "OperationResult",
    "BankError",
    "DuplicateUsername",
    "AccountNotFound",
    "InsufficientFunds",
    "InvalidFormat",
    "InvalidAmount",
    "Settings",
    "Ledger",
    "AccountManager",
    "MessageSink",
    "ConsoleSink",
    "RecordingSink",
    "BankSession",
    "create_session",
    "main"
]
