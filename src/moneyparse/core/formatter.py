#!/usr/bin/env python3
"""
Decimal Money Formatter

Renders Money back into a plain decimal string with exactly as many
fractional digits as the currency's minor unit. Output re-parses to the same
amount with DecimalMoneyParser.
"""

from .currency import Currencies
from .money import Money, int_to_digits


def minor_units_to_decimal_str(amount: int, subunit: int) -> str:
    """
    Convert minor units to a decimal string using pure integer arithmetic.

    Args:
        amount: Amount in minor units
        subunit: Fractional digits of the currency

    Returns:
        Decimal string without grouping separators

    Examples:
        minor_units_to_decimal_str(4599, 2) -> "45.99"
        minor_units_to_decimal_str(-5, 2) -> "-0.05"
        minor_units_to_decimal_str(1200, 0) -> "1200"
    """
    sign = "-" if amount < 0 else ""
    digits = int_to_digits(abs(amount))

    if subunit == 0:
        return f"{sign}{digits}"

    digits = digits.rjust(subunit + 1, "0")
    return f"{sign}{digits[:-subunit]}.{digits[-subunit:]}"


class DecimalMoneyFormatter:
    """Formats Money as a decimal string using a currency registry."""

    def __init__(self, currencies: Currencies):
        self.currencies = currencies

    def format(self, money: Money) -> str:
        """
        Format Money as a decimal string.

        Raises:
            UnknownCurrencyError: If the registry cannot resolve the currency
        """
        subunit = self.currencies.subunit_for(money.currency)
        return minor_units_to_decimal_str(money.amount, subunit)
