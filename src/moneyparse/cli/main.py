#!/usr/bin/env python3
"""
Main CLI Entry Point for moneyparse

Converts amounts between decimal numerals and minor units from the shell.
"""

import logging

import click

from ..core.config import build_currencies, get_config
from ..core.decimal_parser import DecimalMoneyParser
from ..core.errors import MoneyParseError
from ..core.formatter import DecimalMoneyFormatter
from ..core.money import Money, int_to_digits

# Lets negative amounts like "-12.34" through as arguments instead of options
AMOUNT_COMMAND_SETTINGS = {"ignore_unknown_options": True}


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """
    moneyparse - Exact decimal money parsing

    Converts decimal amounts like "12.345" into integer minor units of a
    currency, rounding half away from zero.
    """
    ctx.ensure_object(dict)

    # Configure debug logging if requested
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("moneyparse").setLevel(logging.DEBUG)

    config = get_config()
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config
    ctx.obj["currencies"] = build_currencies(config)

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        if config.currencies_file:
            click.echo(f"Currencies file: {config.currencies_file}")


@main.command(context_settings=AMOUNT_COMMAND_SETTINGS)
@click.argument("amount")
@click.option("--currency", "-c", help="Currency code (default: MONEYPARSE_DEFAULT_CURRENCY)")
@click.pass_context
def parse(ctx: click.Context, amount: str, currency: str | None) -> None:
    """
    Parse a decimal AMOUNT into minor units.

    Example:
      moneyparse parse 12.345 --currency USD   -> 1235
    """
    config = ctx.obj["config"]
    parser = DecimalMoneyParser(ctx.obj["currencies"])

    try:
        money = parser.parse(amount, currency or config.default_currency)
    except MoneyParseError as e:
        raise click.ClickException(str(e)) from e

    if ctx.obj["verbose"]:
        click.echo(str(money))
    else:
        click.echo(int_to_digits(money.amount))


@main.command("format", context_settings=AMOUNT_COMMAND_SETTINGS)
@click.argument("minor_units")
@click.option("--currency", "-c", help="Currency code (default: MONEYPARSE_DEFAULT_CURRENCY)")
@click.pass_context
def format_command(ctx: click.Context, minor_units: str, currency: str | None) -> None:
    """
    Format integer MINOR_UNITS as a decimal amount.

    Example:
      moneyparse format 1235 --currency USD   -> 12.35
    """
    config = ctx.obj["config"]
    currency = currency or config.default_currency
    if currency is None:
        raise click.ClickException("No currency given; use --currency or MONEYPARSE_DEFAULT_CURRENCY")

    try:
        money = Money.from_minor_units(minor_units.strip(), currency)
        click.echo(DecimalMoneyFormatter(ctx.obj["currencies"]).format(money))
    except ValueError as e:
        raise click.ClickException(str(e)) from e


@main.command()
@click.pass_context
def currencies(ctx: click.Context) -> None:
    """List known currencies with their subunit exponents."""
    registry = ctx.obj["currencies"]
    for currency in sorted(registry, key=lambda c: c.code):
        click.echo(f"{currency.code}  {registry.subunit_for(currency)}")


@main.command()
def version() -> None:
    """Show version information."""
    from moneyparse import __author__, __version__

    click.echo(f"moneyparse v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Default Currency: {config_obj.default_currency or '(none)'}")
    click.echo(f"  Currencies File: {config_obj.currencies_file or '(none)'}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


if __name__ == "__main__":
    main()
