"""
Money helpers for the console bank.

Amounts are always Decimal. Values are only rounded for display; stored
balances keep whatever precision the arithmetic produced.
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Tuple

from .config import (
    CURRENCY_SYMBOL, THOUSANDS_SEPARATOR, MONEY_PLACES, ZERO,
    MAX_AMOUNT, MAX_DECIMAL_PLACES, MONEY_CONTEXT,
)
from .errors import InvalidFormat

# Optional sign, digits, optional decimal point. No exponents or underscores.
AMOUNT_PATTERN = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)$")


def to_decimal(value) -> Decimal:
    """Convert a number or numeric string to Decimal without going through float."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def is_within_bounds(amount: Decimal) -> bool:
    """Check that amount is finite, at most MAX_AMOUNT in size and not too finely divided."""
    if not amount.is_finite():
        return False
    if abs(amount) > MAX_AMOUNT:
        return False
    return amount.normalize(MONEY_CONTEXT).as_tuple().exponent >= -MAX_DECIMAL_PLACES


def add_amounts(first: Decimal, second: Decimal) -> Decimal:
    """Add two bounded amounts exactly."""
    return MONEY_CONTEXT.add(first, second)


def subtract_amounts(first: Decimal, second: Decimal) -> Decimal:
    """Subtract two bounded amounts exactly."""
    return MONEY_CONTEXT.subtract(first, second)


def format_amount(amount: Decimal) -> str:
    """Format an amount with exactly two fractional digits."""
    return str(to_decimal(amount).quantize(MONEY_PLACES, rounding=ROUND_HALF_UP, context=MONEY_CONTEXT))


def format_currency(amount: Decimal, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format an amount for display, e.g. £150.00."""
    return f"{symbol}{format_amount(amount)}"


def parse_amount(amount_str: str, symbol: str = CURRENCY_SYMBOL) -> Decimal:
    """
    Parse an amount typed by the user.

    Args:
        amount_str: Raw text, optionally carrying the currency symbol and
            thousands separators.
        symbol: Currency symbol to strip.

    Returns:
        The parsed Decimal.

    Raises:
        InvalidFormat: If the text is not a plain decimal number, or the
            number is larger than MAX_AMOUNT or has more than
            MAX_DECIMAL_PLACES fractional digits.
    """
    if amount_str is None:
        raise InvalidFormat("Invalid amount: no input")

    clean_str = amount_str.replace(symbol, '').replace(THOUSANDS_SEPARATOR, '').strip()
    if not AMOUNT_PATTERN.match(clean_str):
        raise InvalidFormat(f"Invalid amount: {amount_str!r}")

    try:
        amount = Decimal(clean_str)
    except (InvalidOperation, ValueError):
        raise InvalidFormat(f"Invalid amount: {amount_str!r}")

    if not is_within_bounds(amount):
        raise InvalidFormat(f"Invalid amount: {amount_str!r} is out of range")

    return amount


def parse_initial_deposit(amount_str: str, symbol: str = CURRENCY_SYMBOL) -> Tuple[Decimal, bool]:
    """
    Parse the opening deposit of a new account.

    Returns a (amount, parsed) pair. Text that does not parse, is out of
    range, or parses to a negative number degrades to a zero balance with
    parsed set to False.
    """
    try:
        amount = parse_amount(amount_str, symbol)
    except InvalidFormat:
        return ZERO, False

    if amount < 0:
        return ZERO, False

    return amount, True
