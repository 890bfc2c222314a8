"""
Account manager for the console bank.

This module contains the business logic for changing the balance of a
single account. Outcomes are returned as OperationResult values and
reported through a message sink; business failures never raise.
"""

import logging
from decimal import Decimal
from typing import Optional

from .config import Settings
from .errors import InsufficientFunds, InvalidAmount
from .messages import ConsoleSink, MessageSink
from .models import Account, OperationResult
from .money import (
    add_amounts, format_currency, is_within_bounds, subtract_amounts, to_decimal
)


class AccountManager:
    """Performs deposits, withdrawals and balance checks on one account."""

    def __init__(self, account: Account, sink: Optional[MessageSink] = None,
                 settings: Optional[Settings] = None):
        """Bind the manager to an account."""
        self.account = account
        self.settings = settings if settings is not None else Settings()
        self.sink = sink if sink is not None else ConsoleSink(color=self.settings.color)
        self.logger = logging.getLogger(__name__)

    def format_currency(self, amount: Decimal) -> str:
        return format_currency(amount, self.settings.currency_symbol)

    def _failed(self, amount: Decimal, balance: Decimal, message: str, error) -> OperationResult:
        self.sink.error(message)
        return OperationResult(
            success=False,
            balance=balance,
            amount=amount,
            message=message,
            error=error
        )

    def _reject_amount(self, amount: Decimal, operation: str) -> Optional[OperationResult]:
        """Return a failed result if amount is not allowed for this operation."""
        if not is_within_bounds(amount):
            self.logger.debug(f"Rejected out of range {operation} on {self.account.account_number}")
            return self._failed(
                amount,
                self.account.balance,
                f"The {operation} amount is out of range. Please try again.",
                InvalidAmount(f"{operation.capitalize()} amount is out of range")
            )

        if amount > 0 or not self.settings.reject_non_positive_amounts:
            return None

        self.logger.debug(f"Rejected {operation} of {amount} on {self.account.account_number}")
        return self._failed(
            amount,
            self.account.balance,
            f"The {operation} amount must be greater than zero. Please try again.",
            InvalidAmount(f"{operation.capitalize()} amount must be positive")
        )

    def _reject_balance(self, amount: Decimal, balance: Decimal, operation: str) -> OperationResult:
        self.logger.info(f"Rejected {operation} of {amount}: balance would leave the supported range")
        return self._failed(
            amount,
            balance,
            f"The {operation} would take your balance out of the supported range. Please try again.",
            InvalidAmount("Resulting balance is out of range")
        )

    def deposit(self, amount: Decimal) -> OperationResult:
        """Deposit money to the account."""
        amount = to_decimal(amount)
        rejected = self._reject_amount(amount, "deposit")
        if rejected is not None:
            return rejected

        with self.account.lock:
            balance = self.account.balance
            new_balance = add_amounts(balance, amount)
            in_range = is_within_bounds(new_balance)
            if in_range:
                self.account.balance = new_balance

        if not in_range:
            return self._reject_balance(amount, balance, "deposit")

        message = (
            f"You have successfully deposited {self.format_currency(amount)} to your account. "
            f"Your new balance is {self.format_currency(new_balance)}"
        )
        self.logger.info(f"Deposit of {amount} to {self.account.account_number}, balance {new_balance}")
        self.sink.info(message)
        return OperationResult(success=True, balance=new_balance, amount=amount, message=message)

    def withdraw(self, amount: Decimal) -> OperationResult:
        """
        Withdraw money from the account.

        Withdrawing the whole balance is allowed; withdrawing more leaves the
        balance unchanged and returns a failed result carrying InsufficientFunds.
        """
        amount = to_decimal(amount)
        rejected = self._reject_amount(amount, "withdrawal")
        if rejected is not None:
            return rejected

        with self.account.lock:
            balance = self.account.balance
            insufficient = amount > balance
            new_balance = balance if insufficient else subtract_amounts(balance, amount)
            in_range = is_within_bounds(new_balance)
            if not insufficient and in_range:
                self.account.balance = new_balance

        if insufficient:
            self.logger.info(
                f"Insufficient funds for withdrawal of {amount} from {self.account.account_number}"
            )
            return self._failed(
                amount,
                balance,
                "Insufficient funds to withdraw from your account. Please try again.",
                InsufficientFunds(f"Insufficient funds. Available: {self.format_currency(balance)}")
            )

        if not in_range:
            return self._reject_balance(amount, balance, "withdrawal")

        message = (
            f"You have successfully withdrawn {self.format_currency(amount)} from your account. "
            f"Your new balance is {self.format_currency(new_balance)}"
        )
        self.logger.info(f"Withdrawal of {amount} from {self.account.account_number}, balance {new_balance}")
        self.sink.info(message)
        return OperationResult(success=True, balance=new_balance, amount=amount, message=message)

    def view_balance(self) -> Decimal:
        """Report and return the current balance."""
        with self.account.lock:
            balance = self.account.balance
        self.sink.info(f"Your current balance is {self.format_currency(balance)}")
        return balance
