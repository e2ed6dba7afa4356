#!/usr/bin/env python3
"""
Currency Registry

Maps currency codes to their subunit exponent: the number of fractional
decimal digits represented by the currency's minor unit.

Registry Types:
- CurrencyList: in-memory mapping, the building block for everything else
- ISOCurrencies: fixed table of common ISO 4217 currencies
- AggregateCurrencies: ordered chain of registries, first match wins
- load_currency_list(): CurrencyList read from a YAML file

Examples:
    USD -> 2 (cents)
    JPY -> 0 (no subdivision)
    KWD -> 3 (fils)
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

import yaml

from .errors import UnknownCurrencyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Currency:
    """
    Opaque currency reference identified by its code.

    Codes are normalized to upper case so that "usd" and "USD" compare equal.
    """

    code: str

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code.strip():
            raise ValueError(f"Currency code must be a non-empty string, got: {self.code!r}")
        object.__setattr__(self, "code", self.code.strip().upper())

    def __str__(self) -> str:
        return self.code


CurrencyLike = Union[Currency, str]


def as_currency(currency: CurrencyLike) -> Currency:
    """Coerce a code string or Currency into a Currency."""
    if isinstance(currency, Currency):
        return currency
    return Currency(currency)


class Currencies(ABC):
    """Abstract currency registry consumed by parsers and formatters."""

    @abstractmethod
    def contains(self, currency: Currency) -> bool:
        """Check whether the registry knows this currency."""

    @abstractmethod
    def subunit_for(self, currency: Currency) -> int:
        """
        Get the subunit exponent for a currency.

        Raises:
            UnknownCurrencyError: If the currency is not registered
        """

    @abstractmethod
    def __iter__(self) -> Iterator[Currency]:
        """Iterate over every registered currency."""

    def __contains__(self, currency: object) -> bool:
        if isinstance(currency, str):
            currency = Currency(currency)
        if not isinstance(currency, Currency):
            return False
        return self.contains(currency)


class CurrencyList(Currencies):
    """In-memory registry backed by a code-to-exponent mapping."""

    def __init__(self, subunits: Mapping[str, int]):
        self._subunits: dict[str, int] = {}
        for code, subunit in subunits.items():
            if not isinstance(code, str) or not code.strip():
                raise ValueError(f"Currency code must be a non-empty string, got: {code!r}")
            # bool is an int subclass but never a valid exponent
            if isinstance(subunit, bool) or not isinstance(subunit, int) or subunit < 0:
                raise ValueError(
                    f"Subunit for currency {code} must be a non-negative integer, got: {subunit!r}"
                )
            self._subunits[code.strip().upper()] = subunit

    def contains(self, currency: Currency) -> bool:
        return currency.code in self._subunits

    def subunit_for(self, currency: Currency) -> int:
        if currency.code not in self._subunits:
            raise UnknownCurrencyError(currency.code)
        return self._subunits[currency.code]

    def __iter__(self) -> Iterator[Currency]:
        return (Currency(code) for code in self._subunits)

    def __len__(self) -> int:
        return len(self._subunits)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self._subunits)} currencies)"


# ISO 4217 minor units for commonly used currencies
ISO_SUBUNITS: dict[str, int] = {
    # Two decimal places
    "AUD": 2,
    "BRL": 2,
    "CAD": 2,
    "CHF": 2,
    "CNY": 2,
    "CZK": 2,
    "DKK": 2,
    "EUR": 2,
    "GBP": 2,
    "HKD": 2,
    "INR": 2,
    "MXN": 2,
    "NOK": 2,
    "NZD": 2,
    "PLN": 2,
    "SEK": 2,
    "SGD": 2,
    "USD": 2,
    "ZAR": 2,
    # No subdivision
    "CLP": 0,
    "ISK": 0,
    "JPY": 0,
    "KRW": 0,
    "PYG": 0,
    "UGX": 0,
    "VND": 0,
    "XAF": 0,
    "XOF": 0,
    # Three decimal places
    "BHD": 3,
    "IQD": 3,
    "JOD": 3,
    "KWD": 3,
    "LYD": 3,
    "OMR": 3,
    "TND": 3,
    # Four decimal places (units of account)
    "CLF": 4,
    "UYW": 4,
}


class ISOCurrencies(CurrencyList):
    """Registry of common ISO 4217 currencies."""

    def __init__(self) -> None:
        super().__init__(ISO_SUBUNITS)


class AggregateCurrencies(Currencies):
    """
    Chain of registries searched in order.

    Useful for layering custom currencies in front of the ISO table: the first
    registry that contains a currency decides its subunit.
    """

    def __init__(self, registries: Iterable[Currencies]):
        self._registries = list(registries)

    def contains(self, currency: Currency) -> bool:
        return any(registry.contains(currency) for registry in self._registries)

    def subunit_for(self, currency: Currency) -> int:
        for registry in self._registries:
            if registry.contains(currency):
                return registry.subunit_for(currency)
        raise UnknownCurrencyError(currency.code)

    def __iter__(self) -> Iterator[Currency]:
        seen: set[str] = set()
        for registry in self._registries:
            for currency in registry:
                if currency.code not in seen:
                    seen.add(currency.code)
                    yield currency


def load_currency_list(path: Path) -> CurrencyList:
    """
    Load a currency registry from a YAML file.

    Accepts either a flat mapping or one nested under a "currencies" key:

        currencies:
          USD: 2
          XBT: 8

    Args:
        path: YAML file to read

    Returns:
        CurrencyList with the file's currencies

    Raises:
        ValueError: If the file is missing, unreadable, or not a code-to-exponent mapping
    """
    path = Path(path)
    try:
        with open(path) as f:
            data: Any = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"Cannot load currencies from {path}: {e}") from e

    if isinstance(data, dict) and "currencies" in data:
        data = data["currencies"] or {}

    if not isinstance(data, dict):
        raise ValueError(f"Currencies file {path} must contain a mapping of code to subunit")

    try:
        currencies = CurrencyList(data)
    except ValueError as e:
        raise ValueError(f"Invalid currencies file {path}: {e}") from e

    logger.debug(f"Loaded {len(currencies)} currencies from {path}")
    return currencies
