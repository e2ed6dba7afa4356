"""
Core Package

Decimal parsing, currency registries, the Money value type and configuration.

This package provides:
- DecimalMoneyParser for exact decimal-string to minor-unit conversion
- Currency registries mapping codes to subunit exponents
- Money, an immutable integer amount of minor units
- Configuration management for environment-specific settings
"""

from .config import (
    Config,
    Environment,
    build_currencies,
    get_config,
    reload_config,
)
from .currency import (
    AggregateCurrencies,
    Currencies,
    Currency,
    CurrencyList,
    ISOCurrencies,
    load_currency_list,
)
from .decimal_parser import (
    DecimalMoneyParser,
    DecimalNumeral,
    assemble,
    lex,
    normalize,
    parse_decimal,
    round_to_subunit,
)
from .errors import (
    MalformedNumeralError,
    MissingCurrencyError,
    MoneyParseError,
    UnknownCurrencyError,
)
from .formatter import DecimalMoneyFormatter, minor_units_to_decimal_str
from .money import Money

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "build_currencies",
    "get_config",
    "reload_config",
    # Currencies
    "AggregateCurrencies",
    "Currencies",
    "Currency",
    "CurrencyList",
    "ISOCurrencies",
    "load_currency_list",
    # Parsing and formatting
    "DecimalMoneyFormatter",
    "DecimalMoneyParser",
    "DecimalNumeral",
    "assemble",
    "lex",
    "minor_units_to_decimal_str",
    "normalize",
    "parse_decimal",
    "round_to_subunit",
    # Errors
    "MalformedNumeralError",
    "MissingCurrencyError",
    "MoneyParseError",
    "UnknownCurrencyError",
    "Money",
]
