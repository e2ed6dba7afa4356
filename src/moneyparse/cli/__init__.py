"""
Command Line Interface Package

Thin CLI over the moneyparse library.

Command Structure:
- moneyparse parse: decimal numeral to minor units
- moneyparse format: minor units to decimal numeral
- moneyparse currencies: list known currencies and their subunits
- moneyparse version / config: utility commands
"""
