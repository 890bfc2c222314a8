"""
Exception classes for the console bank.

Every error here is recoverable: the session reports it to the user and
re-prompts or returns to a menu.
"""


class BankError(Exception):
    """Base class for all banking errors."""
    pass


class DuplicateUsername(BankError):
    """Raised when an account is created with a username already in the ledger."""

    def __init__(self, username: str):
        super().__init__(f"Username already exists: {username}")
        self.username = username


class AccountNotFound(BankError):
    """Raised when no account matches the given username."""

    def __init__(self, username: str):
        super().__init__(f"Account not found: {username}")
        self.username = username


class InsufficientFunds(BankError):
    """
    Raised when a withdrawal exceeds the current balance.

    AccountManager does not raise this; it is attached to the failed
    OperationResult instead.
    """
    pass


class InvalidFormat(BankError):
    """Raised when user supplied text (amount, email, phone, blank) is malformed."""
    pass


class InvalidAmount(BankError):
    """Raised when an amount is numeric but not acceptable (zero or negative)."""
    pass
