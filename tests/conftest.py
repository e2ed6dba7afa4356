"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path

import pytest

import moneyparse.core.config as config_module
from moneyparse.core.currency import CurrencyList, ISOCurrencies
from moneyparse.core.decimal_parser import DecimalMoneyParser


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def currencies() -> CurrencyList:
    """Small registry covering every interesting subunit exponent."""
    return CurrencyList({"USD": 2, "EUR": 2, "JPY": 0, "KWD": 3, "BTC": 8})


@pytest.fixture
def parser(currencies) -> DecimalMoneyParser:
    """Parser backed by the small test registry."""
    return DecimalMoneyParser(currencies)


@pytest.fixture
def iso_parser() -> DecimalMoneyParser:
    """Parser backed by the ISO currency table."""
    return DecimalMoneyParser(ISOCurrencies())


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables and reset the cached configuration."""
    monkeypatch.setenv("MONEYPARSE_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.delenv("MONEYPARSE_DEFAULT_CURRENCY", raising=False)
    monkeypatch.delenv("MONEYPARSE_CURRENCIES_FILE", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "currency: Tests for currency registries and Money")
    config.addinivalue_line("markers", "parser: Tests for decimal parsing and rounding")
    config.addinivalue_line("markers", "cli: Tests for the command-line interface")
