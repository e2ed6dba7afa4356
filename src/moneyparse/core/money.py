#!/usr/bin/env python3
"""
Money Primitive Type

Immutable money value that stores an exact integer amount of minor units
(cents for USD, yen for JPY) together with its currency.
Never holds a float, so no representation error can creep in.
"""

import re
from dataclasses import dataclass

from .currency import Currency, CurrencyLike, as_currency

_INTEGER_PATTERN = re.compile(r"-?[0-9]+")

# Digits per chunk; well under the interpreter's int<->str conversion limit
_CHUNK_DIGITS = 1000
_CHUNK = 10**_CHUNK_DIGITS


def digits_to_int(digits: str) -> int:
    """
    Convert a signed digit string to int, one chunk of digits at a time.

    Handles strings of any length, including those beyond the limit that
    int() enforces on a single conversion.
    """
    negative = digits.startswith("-")
    magnitude = digits[1:] if negative else digits
    value = 0
    for start in range(0, len(magnitude), _CHUNK_DIGITS):
        chunk = magnitude[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return -value if negative else value


def int_to_digits(value: int) -> str:
    """Render an int of any size as a signed digit string."""
    if -_CHUNK < value < _CHUNK:
        return str(value)

    sign = "-" if value < 0 else ""
    value = abs(value)
    chunks = []
    while value:
        value, chunk = divmod(value, _CHUNK)
        chunks.append(str(chunk).zfill(_CHUNK_DIGITS))
    return sign + "".join(reversed(chunks)).lstrip("0")


@dataclass(frozen=True)
class Money:
    """
    Immutable amount of minor units in a single currency.

    Supports both positive and negative amounts. Arithmetic is only defined
    between amounts of the same currency.

    Examples:
        >>> price = Money.from_minor_units("1234", "USD")
        >>> price.amount
        1234
        >>> str(-price)
        '-1234 USD'
        >>> price + Money(66, Currency("USD"))
        Money(amount=1300, currency='USD')
    """

    amount: int
    currency: Currency

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError(f"Money amount must be an int of minor units, got: {self.amount!r}")
        if not isinstance(self.currency, Currency):
            raise TypeError(f"Money currency must be a Currency, got: {self.currency!r}")

    @classmethod
    def from_minor_units(cls, digits: str, currency: CurrencyLike) -> "Money":
        """
        Create Money from a signed integer digit string.

        Args:
            digits: String like "1234", "-50" or "0"
            currency: Currency or currency code

        Returns:
            Money object

        Raises:
            ValueError: If digits is not a plain signed integer
        """
        if not isinstance(digits, str) or not _INTEGER_PATTERN.fullmatch(digits):
            raise ValueError(f"Minor units must be a signed integer digit string, got: {digits!r}")
        return cls(amount=digits_to_int(digits), currency=as_currency(currency))

    @classmethod
    def zero(cls, currency: CurrencyLike) -> "Money":
        """Create a zero amount in the given currency."""
        return cls(amount=0, currency=as_currency(currency))

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_negative(self) -> bool:
        return self.amount < 0

    def is_positive(self) -> bool:
        return self.amount > 0

    def abs(self) -> "Money":
        """Return absolute value of Money."""
        return Money(amount=abs(self.amount), currency=self.currency)

    def _check_same_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot operate on different currencies: {self.currency} and {other.currency}"
            )

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def __mul__(self, scalar: int) -> "Money":
        """Multiply Money by integer scalar."""
        if isinstance(scalar, bool) or not isinstance(scalar, int):
            return NotImplemented
        return Money(amount=self.amount * scalar, currency=self.currency)

    def __neg__(self) -> "Money":
        return Money(amount=-self.amount, currency=self.currency)

    def __lt__(self, other: "Money") -> bool:
        """Less than comparison."""
        self._check_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: "Money") -> bool:
        """Less than or equal comparison."""
        self._check_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: "Money") -> bool:
        """Greater than comparison."""
        self._check_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: "Money") -> bool:
        """Greater than or equal comparison."""
        self._check_same_currency(other)
        return self.amount >= other.amount

    def __str__(self) -> str:
        """Format as minor units with currency code."""
        return f"{int_to_digits(self.amount)} {self.currency.code}"

    def __repr__(self) -> str:
        return f"Money(amount={int_to_digits(self.amount)}, currency='{self.currency.code}')"
