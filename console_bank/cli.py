"""
CLI interface for the console bank.

This module provides the interactive menu loop used to create accounts and
manage their balances, and the click entry point that starts it.
"""

import click
import logging
import sys
from decimal import Decimal
from typing import Callable, Optional

from .config import (
    Settings, LOG_LEVELS, DEFAULT_LOG_LEVEL, LOG_FORMAT, SEPARATOR,
    MAIN_CREATE_ACCOUNT, MAIN_MANAGE_ACCOUNT, MAIN_EXIT,
    ACCOUNT_DEPOSIT, ACCOUNT_WITHDRAW, ACCOUNT_VIEW_BALANCE, ACCOUNT_BACK,
)
from .errors import BankError, InvalidFormat
from .ledger import Ledger
from .account_manager import AccountManager
from .messages import ConsoleSink, MessageSink
from .models import Account
from .money import parse_amount, parse_initial_deposit
from .validators import is_blank, is_valid_email, is_valid_phone_number

logger = logging.getLogger(__name__)


class EndOfInput(Exception):
    """Raised when the input stream is exhausted."""
    pass


def read_stdin_line() -> Optional[str]:
    """Read one line from stdin, or None at end of input."""
    line = click.get_text_stream('stdin').readline()
    if line == "":
        return None
    return line.rstrip("\r\n")


class BankSession:
    """Interactive banking session over one ledger."""

    def __init__(self, ledger: Optional[Ledger] = None, sink: Optional[MessageSink] = None,
                 settings: Optional[Settings] = None,
                 read_line: Callable[[], Optional[str]] = read_stdin_line):
        """Initialize the session."""
        self.settings = settings if settings is not None else Settings()
        self.ledger = ledger if ledger is not None else Ledger()
        self.sink = sink if sink is not None else ConsoleSink(color=self.settings.color)
        self.read_line = read_line

    def read_input(self) -> str:
        """Read lines until a non-blank one arrives and return it trimmed."""
        while True:
            line = self.read_line()
            if line is None:
                raise EndOfInput()
            if is_blank(line):
                self.sink.error("Invalid input, please try again.")
                self.sink.input("")
            else:
                return line.strip()

    def prompt(self, text: str) -> str:
        self.sink.input(text)
        return self.read_input()

    def run(self) -> None:
        """Run the main menu until the user exits or input ends."""
        self.sink.info("Welcome to Banking App! Here, you can create a new account and manage your account.")
        self.sink.info(SEPARATOR)
        try:
            while self.main_menu_step():
                pass
        except EndOfInput:
            logger.debug("Input ended, closing session")
            self.sink.info("Goodbye!")

    def main_menu_step(self) -> bool:
        """Handle one main menu choice. Returns False when the session should end."""
        self.display_main_options()
        choice = self.read_input()

        if choice == MAIN_CREATE_ACCOUNT:
            self.setup_account()
        elif choice == MAIN_MANAGE_ACCOUNT:
            self.bank_options()
        elif choice == MAIN_EXIT:
            self.sink.info("Goodbye!")
            return False
        else:
            self.sink.error("Invalid request! Please enter a number from 1-3.")
        return True

    def display_main_options(self) -> None:
        self.sink.info("Select an option to continue")
        self.sink.info("1. Create a new account (1)")
        self.sink.info("2. Manage your account (2)")
        self.sink.info("3. Exit (3)")
        self.sink.input("")

    def display_bank_options(self) -> None:
        self.sink.info("Select an option to continue")
        self.sink.info("1. Deposit (1)")
        self.sink.info("2. Withdraw (2)")
        self.sink.info("3. View Balance (3)")
        self.sink.info("4. Back (4)")
        self.sink.input("")

    def get_unique_username(self) -> str:
        while True:
            username = self.prompt("Enter a unique username")
            if self.ledger.exists(username):
                self.sink.error("Username already exists! Please enter a unique one.")
            else:
                return username

    def get_email(self) -> str:
        while True:
            email = self.prompt("Enter your email")
            if is_valid_email(email):
                return email
            self.sink.error("Invalid email! Please enter a valid email address.")

    def get_phone_number(self) -> str:
        while True:
            phone_number = self.prompt("Enter your phone number")
            if is_valid_phone_number(phone_number):
                return phone_number
            self.sink.error("Invalid input! Please enter a valid UK phone number.")

    def get_amount(self, prompt_text: str, error_text: str) -> Decimal:
        while True:
            raw = self.prompt(prompt_text)
            try:
                return parse_amount(raw, self.settings.currency_symbol)
            except InvalidFormat as e:
                logger.debug(f"Rejected amount input: {e}")
                self.sink.error(error_text)

    def setup_account(self) -> Optional[Account]:
        """Create a new account, re-prompting for each invalid field."""
        username = self.get_unique_username()
        email = self.get_email()
        phone_number = self.get_phone_number()
        address = self.prompt("Enter your address")

        raw_deposit = self.prompt("Enter your initial deposit")
        initial_deposit, parsed = parse_initial_deposit(raw_deposit, self.settings.currency_symbol)
        if not parsed:
            self.sink.warning("Invalid deposit amount! Therefore, it was set to 0. You can deposit money later.")

        try:
            account = self.ledger.create(
                username=username,
                address=address,
                email=email,
                phone_number=phone_number,
                initial_deposit=initial_deposit
            )
        except BankError as e:
            logger.warning(f"Account creation failed: {e}")
            self.sink.error(f"Account could not be created: {e}")
            return None

        self.sink.success("Your account has been successfully created!")
        self.sink.info(f"Your account number is {account.account_number}")
        return account

    def bank_options(self) -> None:
        """Manage an existing account until the user goes back."""
        username = self.prompt("Enter your username")
        lookup = self.ledger.find_by_username(username)
        if not lookup.found:
            self.sink.error("Account not found!")
            return

        account = lookup.account
        manager = AccountManager(account, self.sink, self.settings)

        while True:
            self.display_bank_options()
            choice = self.read_input()

            if choice == ACCOUNT_DEPOSIT:
                self.deposit_option(manager)
            elif choice == ACCOUNT_WITHDRAW:
                self.withdraw_option(manager)
            elif choice == ACCOUNT_VIEW_BALANCE:
                manager.view_balance()
            elif choice == ACCOUNT_BACK:
                return
            else:
                self.sink.error("Invalid request! Please enter a number from 1-4.")

    def deposit_option(self, manager: AccountManager) -> None:
        click.clear()
        self.sink.info("Deposit")
        self.sink.info(SEPARATOR)
        amount = self.get_amount(
            "Enter the amount you want to deposit",
            "Invalid deposit number! Please enter a valid amount"
        )
        manager.deposit(amount)

    def withdraw_option(self, manager: AccountManager) -> None:
        click.clear()
        self.sink.info("Withdraw")
        self.sink.info(SEPARATOR)
        amount = self.get_amount(
            "Enter the amount you want to withdraw",
            "Invalid withdraw number! Please enter a valid amount"
        )
        manager.withdraw(amount)


@click.command()
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default=DEFAULT_LOG_LEVEL, help='Diagnostic log level (written to stderr)')
@click.option('--allow-non-positive-amounts', is_flag=True, default=False,
              help='Accept zero or negative deposit and withdrawal amounts')
@click.option('--no-color', is_flag=True, default=False, help='Disable coloured output')
def cli(log_level, allow_non_positive_amounts, no_color):
    """Console Bank - create accounts and manage balances interactively"""
    settings = Settings(
        reject_non_positive_amounts=not allow_non_positive_amounts,
        log_level=log_level,
        color=not no_color
    )
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, stream=sys.stderr)
    logger.debug(f"Starting session with {settings}")

    BankSession(settings=settings).run()


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
