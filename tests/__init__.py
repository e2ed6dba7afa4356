"""
Test Suite for moneyparse

Test Structure:
- unit/test_core/: parser stages, currencies, Money, formatter, configuration
- unit/test_cli/: click commands run through CliRunner

Test Categories (markers):
- parser: decimal grammar, rounding and the full parse pipeline
- currency: registries, Money and formatting
- cli: command-line interface
"""
