"""
Configuration for the console bank.

Constants used across the package and the Settings object built by the CLI.
"""

from dataclasses import dataclass
from decimal import Context, Decimal

# --- Money ---
CURRENCY_SYMBOL = "£"
THOUSANDS_SEPARATOR = ","
MONEY_PLACES = Decimal("0.01")
ZERO = Decimal("0.00")

# Amounts and balances stay within these bounds so that every sum of two
# of them is exact in MONEY_CONTEXT.
MAX_AMOUNT = Decimal("1E+24")
MAX_DECIMAL_PLACES = 10
MONEY_CONTEXT = Context(prec=50)

# --- Menus ---
MAIN_CREATE_ACCOUNT = "1"
MAIN_MANAGE_ACCOUNT = "2"
MAIN_EXIT = "3"

ACCOUNT_DEPOSIT = "1"
ACCOUNT_WITHDRAW = "2"
ACCOUNT_VIEW_BALANCE = "3"
ACCOUNT_BACK = "4"

SEPARATOR = "=" * 47

# --- Logging ---
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class Settings:
    """Runtime settings for a banking session."""

    currency_symbol: str = CURRENCY_SYMBOL
    reject_non_positive_amounts: bool = True
    log_level: str = DEFAULT_LOG_LEVEL
    color: bool = True

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")
