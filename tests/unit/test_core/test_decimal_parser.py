#!/usr/bin/env python3
"""Tests for decimal money parsing."""

import pytest

from moneyparse.core.currency import Currency, CurrencyList
from moneyparse.core.decimal_parser import (
    DecimalMoneyParser,
    DecimalNumeral,
    assemble,
    lex,
    normalize,
    parse_decimal,
    round_to_subunit,
)
from moneyparse.core.errors import (
    MalformedNumeralError,
    MissingCurrencyError,
    MoneyParseError,
    UnknownCurrencyError,
)
from moneyparse.core.money import Money


class TestLex:
    """Test numeral grammar validation."""

    @pytest.mark.parser
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("7", DecimalNumeral(False, "7", None)),
            ("-12.345", DecimalNumeral(True, "12", "345")),
            (".5", DecimalNumeral(False, "", "5")),
            ("-.5", DecimalNumeral(True, "", "5")),
            ("0.00", DecimalNumeral(False, "0", "00")),
            ("5.", DecimalNumeral(False, "5", None)),
            ("1000", DecimalNumeral(False, "1000", None)),
        ],
        ids=["integer", "negative_fraction", "bare_fraction", "negative_bare_fraction",
             "zero_with_fraction", "trailing_dot", "trailing_zeros"],
    )
    def test_valid_numerals(self, raw, expected):
        """Test well-formed numerals split into sign and digit runs."""
        assert lex(raw) == expected

    @pytest.mark.parser
    @pytest.mark.parametrize(
        "raw",
        ["-", ".", "-.", "1.2.3", "--1", "abc", "01.5", "+1", "1,000", "$5", "1e5", "1 000", "١٢"],
    )
    def test_malformed_numerals(self, raw):
        """Test strings outside the grammar are rejected with the original text."""
        with pytest.raises(MalformedNumeralError) as exc_info:
            lex(raw)
        assert exc_info.value.numeral == raw
        assert raw in str(exc_info.value)


class TestNormalize:
    """Test joining of digit runs."""

    @pytest.mark.parser
    def test_concatenates_digit_runs(self):
        """Test integer and fraction digits become one unsigned string."""
        assert normalize(DecimalNumeral(True, "12", "345")) == (True, "12345", 3)

    @pytest.mark.parser
    def test_absent_fraction_has_zero_length(self):
        """Test a numeral without a fraction reports zero fractional digits."""
        assert normalize(DecimalNumeral(False, "7", None)) == (False, "7", 0)

    @pytest.mark.parser
    def test_absent_integer_digits(self):
        """Test a bare fraction keeps only its digits."""
        assert normalize(DecimalNumeral(False, "", "5")) == (False, "5", 1)


class TestRoundToSubunit:
    """Test padding, truncation and rounding to the currency's subunit."""

    @pytest.mark.parser
    def test_exact_precision_is_unchanged(self):
        """Test matching precision returns the very same digit string."""
        digits = "001234"
        assert round_to_subunit(digits, 2, 2) is digits

    @pytest.mark.parser
    @pytest.mark.parametrize(
        "digits,fraction_len,subunit,expected",
        [
            ("3", 0, 2, "300"),
            ("5", 1, 2, "50"),
            ("12", 0, 0, "12"),
            ("15", 1, 3, "1500"),
        ],
    )
    def test_pads_missing_fraction_digits(self, digits, fraction_len, subunit, expected):
        """Test fewer fractional digits than the subunit are zero padded."""
        assert round_to_subunit(digits, fraction_len, subunit) == expected

    @pytest.mark.parser
    @pytest.mark.parametrize(
        "digits,fraction_len,subunit,expected",
        [
            ("1005", 3, 2, "101"),
            ("1004", 3, 2, "100"),
            ("10049999", 7, 2, "100"),
            ("12345", 3, 2, "1235"),
            ("9995", 3, 2, "1000"),
            ("9999", 2, 0, "100"),
            ("05", 1, 0, "1"),
            ("5", 1, 0, "1"),
            ("4", 1, 0, "0"),
            ("25", 1, 0, "3"),
        ],
        ids=["half_rounds_up", "below_half_truncates", "only_first_discarded_digit",
             "round_up", "carry_grows_string", "carry_whole_units", "zero_point_five",
             "bare_half", "bare_below_half", "whole_unit_half"],
    )
    def test_rounds_excess_fraction_digits(self, digits, fraction_len, subunit, expected):
        """Test excess fractional digits round half away from zero."""
        assert round_to_subunit(digits, fraction_len, subunit) == expected


class TestAssemble:
    """Test sign reattachment and canonical digits."""

    @pytest.mark.parser
    def test_strips_leading_zeros(self):
        """Test insignificant zeros are removed."""
        assert assemble(False, "000123", "USD") == Money(123, Currency("USD"))

    @pytest.mark.parser
    def test_negative_zero_is_zero(self):
        """Test a zero magnitude never keeps its sign."""
        money = assemble(True, "000", "USD")
        assert money.amount == 0
        assert not money.is_negative()

    @pytest.mark.parser
    def test_negative_sign_is_applied(self):
        """Test non-zero negative magnitudes become negative amounts."""
        assert assemble(True, "0050", "EUR") == Money(-50, Currency("EUR"))


class TestDecimalMoneyParser:
    """Test the full parse pipeline."""

    @pytest.mark.parser
    @pytest.mark.parametrize(
        "raw,currency,expected",
        [
            ("1.005", "USD", 101),
            ("1.004", "USD", 100),
            ("3", "USD", 300),
            (".5", "USD", 50),
            ("-12.345", "USD", -1235),
            ("-12.344", "USD", -1234),
            ("-1.005", "USD", -101),
            ("0.99", "USD", 99),
            ("  12.34  ", "USD", 1234),
            ("5.", "USD", 500),
            ("1234.5", "JPY", 1235),
            ("-0.5", "JPY", -1),
            ("0.4", "JPY", 0),
            ("1.2345", "KWD", 1235),
            ("0.00000001", "BTC", 1),
        ],
    )
    def test_parse_amounts(self, parser, raw, currency, expected):
        """Test decimal strings convert to the expected minor units."""
        money = parser.parse(raw, currency)
        assert money.amount == expected
        assert money.currency == Currency(currency)

    @pytest.mark.parser
    def test_negative_zero_parses_to_zero(self, parser):
        """Test "-0.00" yields a non-negative zero."""
        money = parser.parse("-0.00", "USD")
        assert money.is_zero()
        assert str(money) == "0 USD"

    @pytest.mark.parser
    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    def test_empty_input_is_zero(self, parser, raw):
        """Test empty input yields zero in the given currency."""
        assert parser.parse(raw, "JPY") == Money.zero("JPY")

    @pytest.mark.parser
    def test_empty_input_does_not_consult_registry(self, parser):
        """Test empty input succeeds even for currencies the registry lacks."""
        assert parser.parse("", "XYZ") == Money.zero("XYZ")

    @pytest.mark.parser
    @pytest.mark.parametrize("raw", ["1.2.3", "--1", "abc", "01.5", "-", "."])
    def test_malformed_input(self, parser, raw):
        """Test malformed numerals raise MalformedNumeralError."""
        with pytest.raises(MalformedNumeralError):
            parser.parse(raw, "USD")

    @pytest.mark.parser
    def test_missing_currency(self, parser):
        """Test omitting the currency raises MissingCurrencyError."""
        with pytest.raises(MissingCurrencyError):
            parser.parse("1.00")

    @pytest.mark.parser
    def test_missing_currency_checked_before_input(self, parser):
        """Test missing currency wins over empty or malformed input."""
        with pytest.raises(MissingCurrencyError):
            parser.parse("", None)
        with pytest.raises(MissingCurrencyError):
            parser.parse("abc", None)

    @pytest.mark.parser
    def test_unknown_currency(self, parser):
        """Test unregistered currencies propagate UnknownCurrencyError."""
        with pytest.raises(UnknownCurrencyError) as exc_info:
            parser.parse("1.00", "XYZ")
        assert exc_info.value.code == "XYZ"

    @pytest.mark.parser
    def test_errors_share_base_class(self, parser):
        """Test every parse failure is a MoneyParseError and a ValueError."""
        for raw, currency in [("abc", "USD"), ("1", None), ("1", "XYZ")]:
            with pytest.raises(MoneyParseError):
                parser.parse(raw, currency)
        assert issubclass(MoneyParseError, ValueError)

    @pytest.mark.parser
    def test_non_string_input(self, parser):
        """Test non-string input is a type error."""
        with pytest.raises(TypeError):
            parser.parse(1.5, "USD")  # type: ignore[arg-type]

    @pytest.mark.parser
    def test_accepts_currency_objects_and_lowercase_codes(self, parser):
        """Test currency can be a Currency or any-case code."""
        assert parser.parse("1", Currency("usd")) == parser.parse("1", "USD")
        assert parser.parse("1", "usd").currency.code == "USD"

    @pytest.mark.parser
    def test_arbitrarily_long_amounts_stay_exact(self, parser):
        """Test amounts far beyond float precision parse exactly."""
        raw = "123456789012345678901234567890.995"
        money = parser.parse(raw, "USD")
        assert money.amount == 12345678901234567890123456789100

    @pytest.mark.parser
    def test_amounts_beyond_int_string_limit(self, parser):
        """Test numerals with thousands of digits convert without a conversion error."""
        ones = (10**5000 - 1) // 9  # 5000 ones

        money = parser.parse("1" * 5000 + ".005", "USD")
        assert money.amount == ones * 100 + 1

        negative = parser.parse("-" + "1" * 5000 + ".004", "USD")
        assert negative.amount == -ones * 100

    @pytest.mark.parser
    @pytest.mark.parametrize("raw", ["\u00a01.00", "1.00\u2003", "\u30001"])
    def test_unicode_whitespace_is_not_trimmed(self, parser, raw):
        """Test only ASCII blanks, NUL and vertical tab are trimmed."""
        with pytest.raises(MalformedNumeralError):
            parser.parse(raw, "USD")

    @pytest.mark.parser
    def test_ascii_control_whitespace_is_trimmed(self, parser):
        """Test NUL, vertical tab and carriage return around a numeral are ignored."""
        assert parser.parse("\x0b\r 1.25\0\n", "USD").amount == 125

    @pytest.mark.parser
    @pytest.mark.parametrize("n", [0, 1, 7, 42, 999, 10**25])
    @pytest.mark.parametrize("currency,subunit", [("USD", 2), ("JPY", 0), ("KWD", 3), ("BTC", 8)])
    def test_integers_scale_by_subunit(self, parser, n, currency, subunit):
        """Test whole numbers become n * 10**subunit minor units."""
        assert parser.parse(str(n), currency).amount == n * 10**subunit

    @pytest.mark.parser
    def test_custom_registry(self):
        """Test the parser honours the injected registry."""
        parser = DecimalMoneyParser(CurrencyList({"USD": 4}))
        assert parser.parse("1.23456", "USD").amount == 12346


class TestParseDecimal:
    """Test the module-level convenience function."""

    @pytest.mark.parser
    def test_defaults_to_iso_currencies(self):
        """Test the ISO table is used when no registry is passed."""
        assert parse_decimal("12.345", "USD").amount == 1235
        assert parse_decimal("12.5", "JPY").amount == 13

    @pytest.mark.parser
    def test_empty_registry_is_respected(self):
        """Test an explicitly empty registry is not replaced by the ISO table."""
        with pytest.raises(UnknownCurrencyError):
            parse_decimal("1", "USD", CurrencyList({}))
