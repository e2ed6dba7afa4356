"""
moneyparse - Exact Decimal Money Parsing

Converts human-authored decimal numerals into integer amounts of a currency's
minor unit, without ever passing through floating point.

Key Features:
- Strict decimal grammar: optional "-", digits, optional "." and fraction
- Half-away-from-zero rounding when the input is more precise than the currency
- Pluggable currency registries (ISO table, in-memory lists, YAML files)
- Formatter producing decimal strings that re-parse to the same amount

Example Usage:
    from moneyparse import DecimalMoneyParser, ISOCurrencies

    parser = DecimalMoneyParser(ISOCurrencies())
    parser.parse("-12.345", "USD")  # Money(amount=-1235, currency='USD')
"""

__version__ = "0.1.0"
__author__ = "Karl Davis"

from .core.currency import Currency, CurrencyList, ISOCurrencies
from .core.decimal_parser import DecimalMoneyParser, parse_decimal
from .core.errors import (
    MalformedNumeralError,
    MissingCurrencyError,
    MoneyParseError,
    UnknownCurrencyError,
)
from .core.formatter import DecimalMoneyFormatter
from .core.money import Money

__all__ = [
    "Currency",
    "CurrencyList",
    "DecimalMoneyFormatter",
    "DecimalMoneyParser",
    "ISOCurrencies",
    "MalformedNumeralError",
    "MissingCurrencyError",
    "Money",
    "MoneyParseError",
    "UnknownCurrencyError",
    "parse_decimal",
]
