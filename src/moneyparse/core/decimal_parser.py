#!/usr/bin/env python3
"""
Decimal Money Parser

Converts a plain decimal numeral such as "-12.345", ".5" or "7" into an exact
Money amount expressed in the currency's minor units.

Pipeline (each stage is a pure function):
1. lex: validate the numeral grammar, split sign / integer run / fraction run
2. normalize: join both digit runs into one unsigned digit string
3. round_to_subunit: pad or round to exactly the currency's subunit digits
4. assemble: strip leading zeros, reattach the sign, build Money

Key Principles:
- Digits are handled as strings from start to finish, never as floats
- Rounding is half away from zero, decided by the first discarded digit
- Currency symbols and grouping separators are not accepted
"""

import logging
import re
from dataclasses import dataclass

from .currency import Currencies, CurrencyLike, ISOCurrencies, as_currency
from .errors import MalformedNumeralError, MissingCurrencyError
from .money import Money

logger = logging.getLogger(__name__)

DECIMAL_PATTERN = re.compile(
    r"(?P<sign>-)?(?P<digits>0|[1-9][0-9]*)?\.?(?P<fraction>[0-9]+)?"
)

# Only ASCII blanks, NUL and vertical tab are trimmed; other Unicode whitespace is rejected
TRIM_CHARACTERS = " \t\n\r\0\x0b"


@dataclass(frozen=True)
class DecimalNumeral:
    """Validated parse result of a decimal numeral."""

    negative: bool
    integer_digits: str
    # None when no fractional run was supplied at all
    fraction_digits: str | None


def lex(raw: str) -> DecimalNumeral:
    """
    Validate a trimmed numeral and split it into its parts.

    Args:
        raw: Numeral already stripped of surrounding whitespace

    Returns:
        DecimalNumeral with sign, integer digits and fraction digits

    Raises:
        MalformedNumeralError: If the string is not a well-formed decimal numeral
    """
    match = DECIMAL_PATTERN.fullmatch(raw)
    if match is None or (match.group("digits") is None and match.group("fraction") is None):
        logger.debug(f"Rejected numeral {raw!r}")
        raise MalformedNumeralError(raw)

    return DecimalNumeral(
        negative=match.group("sign") == "-",
        integer_digits=match.group("digits") or "",
        fraction_digits=match.group("fraction"),
    )


def normalize(numeral: DecimalNumeral) -> tuple[bool, str, int]:
    """
    Join integer and fraction digits into one unsigned digit string.

    Returns:
        (negative, unsigned_digits, fraction_len) where fraction_len counts the
        trailing fractional digits of unsigned_digits
    """
    fraction = numeral.fraction_digits or ""
    return numeral.negative, numeral.integer_digits + fraction, len(fraction)


def _increment(digits: str) -> str:
    """Add one to an unsigned digit string, carrying leftward."""
    result = list(digits)
    position = len(result) - 1
    while position >= 0:
        if result[position] == "9":
            result[position] = "0"
            position -= 1
        else:
            result[position] = chr(ord(result[position]) + 1)
            return "".join(result)
    # Carry overflowed the most significant digit: 999 -> 1000
    return "1" + "".join(result)


def round_to_subunit(unsigned_digits: str, fraction_len: int, subunit: int) -> str:
    """
    Express an unsigned digit string in minor units.

    The trailing fraction_len digits of unsigned_digits are fractional. The
    result has exactly subunit fractional digits folded in, so it reads as a
    count of minor units (leading zeros are left for the caller to strip).

    Args:
        unsigned_digits: Integer and fraction digits concatenated
        fraction_len: How many trailing digits are fractional
        subunit: Fractional digits supported by the target currency

    Returns:
        Unsigned minor-unit digit string, possibly with leading zeros

    Examples:
        round_to_subunit("1005", 3, 2) -> "101"
        round_to_subunit("1004", 3, 2) -> "100"
        round_to_subunit("3", 0, 2) -> "300"
        round_to_subunit("9995", 3, 2) -> "1000"
    """
    if fraction_len == subunit:
        return unsigned_digits

    if fraction_len < subunit:
        return unsigned_digits + "0" * (subunit - fraction_len)

    boundary = len(unsigned_digits) - fraction_len + subunit
    retained = unsigned_digits[:boundary] or "0"
    if unsigned_digits[boundary] >= "5":
        retained = _increment(retained)

    logger.debug(
        f"Rounded {unsigned_digits!r} ({fraction_len} fraction digits) "
        f"to {retained!r} at subunit {subunit}"
    )
    return retained


def assemble(negative: bool, magnitude: str, currency: CurrencyLike) -> Money:
    """
    Build the final Money from an unsigned minor-unit magnitude.

    Leading zeros are stripped and a zero result never carries a sign.
    """
    magnitude = magnitude.lstrip("0") or "0"
    if negative and magnitude != "0":
        magnitude = "-" + magnitude
    return Money.from_minor_units(magnitude, currency)


class DecimalMoneyParser:
    """
    Parses plain decimal strings into Money.

    The parser cannot infer a currency from the string, so every call must
    supply one. Subunit exponents come from the injected registry.

    Example:
        parser = DecimalMoneyParser(ISOCurrencies())
        parser.parse("1.005", "USD") -> Money(amount=101, currency='USD')
    """

    def __init__(self, currencies: Currencies):
        self.currencies = currencies

    def parse(self, money: str, force_currency: CurrencyLike | None = None) -> Money:
        """
        Parse a decimal string into Money.

        Args:
            money: Decimal numeral like "12.34", "-0.5" or ".5"
            force_currency: Currency (or code) of the amount; required

        Returns:
            Money in minor units of force_currency

        Raises:
            MissingCurrencyError: If no currency is supplied
            MalformedNumeralError: If the trimmed input is not a decimal numeral
            UnknownCurrencyError: If the registry cannot resolve the currency
        """
        if force_currency is None:
            raise MissingCurrencyError()
        if not isinstance(money, str):
            raise TypeError(f"Formatted raw money should be a string, e.g. 1.00, got: {money!r}")

        currency = as_currency(force_currency)
        decimal = money.strip(TRIM_CHARACTERS)

        if decimal == "":
            return Money.zero(currency)

        numeral = lex(decimal)
        negative, unsigned_digits, fraction_len = normalize(numeral)
        subunit = self.currencies.subunit_for(currency)
        magnitude = round_to_subunit(unsigned_digits, fraction_len, subunit)
        return assemble(negative, magnitude, currency)


def parse_decimal(
    money: str,
    currency: CurrencyLike | None,
    currencies: Currencies | None = None,
) -> Money:
    """
    Parse a decimal string with a one-off parser.

    Uses the ISO currency table unless a registry is given.
    """
    if currencies is None:
        currencies = ISOCurrencies()
    return DecimalMoneyParser(currencies).parse(money, currency)
