#!/usr/bin/env python3
"""
Parser Error Types

All failures are caused by caller input and are terminal. Every error derives
from MoneyParseError so callers can catch the whole family at once.
"""


class MoneyParseError(ValueError):
    """Base class for every money parsing failure."""

    pass


class MissingCurrencyError(MoneyParseError):
    """Raised when no currency was supplied to a parser that requires one."""

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "Decimal amounts carry no currency symbol; pass the currency explicitly"
        )


class MalformedNumeralError(MoneyParseError):
    """Raised when a trimmed input does not match the decimal-numeral grammar."""

    def __init__(self, numeral: str):
        self.numeral = numeral
        super().__init__(f'Cannot parse "{numeral}" to Money.')


class UnknownCurrencyError(MoneyParseError):
    """Raised by a currency registry that cannot resolve a currency code."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Cannot find currency {code}")
