#!/usr/bin/env python3
"""
Configuration Management for moneyparse

Handles environment-based configuration. Values come from environment
variables, optionally loaded from a .env file in the working directory.

Environment Variables:
- MONEYPARSE_ENV: development, test or production
- LOG_LEVEL: logging level name (default INFO)
- DEBUG: "true" to enable debug mode
- MONEYPARSE_DEFAULT_CURRENCY: currency used by the CLI when none is given
- MONEYPARSE_CURRENCIES_FILE: YAML file with extra currency subunits
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .currency import (
    AggregateCurrencies,
    Currencies,
    Currency,
    ISOCurrencies,
    load_currency_list,
)

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class Config:
    """
    Main configuration class for moneyparse.

    Loads configuration from environment variables with defaults suitable for
    local use.
    """

    environment: Environment
    default_currency: str | None = None
    currencies_file: Path | None = None

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("MONEYPARSE_ENV", "development"))

        currencies_file = os.getenv("MONEYPARSE_CURRENCIES_FILE")
        default_currency = os.getenv("MONEYPARSE_DEFAULT_CURRENCY", "").strip()

        return cls(
            environment=env,
            default_currency=default_currency.upper() or None,
            currencies_file=Path(currencies_file).expanduser() if currencies_file else None,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not isinstance(getattr(logging, self.log_level, None), int):
            errors.append(f"Unknown log level: {self.log_level}")

        if self.currencies_file is not None and not self.currencies_file.is_file():
            errors.append(f"currencies_file does not exist: {self.currencies_file}")

        if self.default_currency is not None:
            try:
                Currency(self.default_currency)
            except ValueError as e:
                errors.append(f"Invalid default currency: {e}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary."""
        result: dict[str, Any] = {}
        for field_name, field_value in self.__dict__.items():
            if isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value
        return result


def build_currencies(config: Config) -> Currencies:
    """
    Build the currency registry described by the configuration.

    Currencies from currencies_file take precedence over the ISO table.
    """
    if config.currencies_file is None:
        return ISOCurrencies()
    return AggregateCurrencies([load_currency_list(config.currencies_file), ISOCurrencies()])


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()
