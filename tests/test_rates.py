"""
Tests for the rate table and the conversion engine.
"""

import math

import pytest

from fx_converter.rates.engine import ConversionEngine
from fx_converter.rates.rate_table import DEFAULT_RATES, RateTable
from fx_converter.shared.errors import InvalidAmountError, UnknownCurrencyError

ALL_CODES = list(DEFAULT_RATES)


class TestRateTable:
    """Test cases for RateTable."""

    def test_default_table_has_seventeen_currencies(self, rate_table):
        """Test the built-in table size and ordering."""
        assert len(rate_table) == 17
        assert rate_table.codes()[:3] == ("USD", "EUR", "GBP")
        assert rate_table.codes()[-1] == "PHP"

    def test_rate_lookup(self, rate_table):
        """Test looking up known rates."""
        assert rate_table.rate("USD") == 1.0
        assert rate_table.rate("JPY") == 155.8
        assert rate_table.rate("KRW") == 1310.0

    def test_unknown_code_raises(self, rate_table):
        """Test that an unknown code raises UnknownCurrencyError."""
        with pytest.raises(UnknownCurrencyError) as exc_info:
            rate_table.rate("XXX")
        assert exc_info.value.code == "XXX"

    def test_display_name_falls_back_to_code(self):
        """Test display names, including codes without a registered name."""
        table = RateTable({"USD": 1.0, "ZZZ": 2.0}, {"USD": "US Dollar"})
        assert table.display_name("USD") == "US Dollar"
        assert table.display_name("ZZZ") == "ZZZ"
        assert table.display_name("QQQ") == "QQQ"

    def test_codes_keep_insertion_order(self):
        """Test that iteration order is the construction order."""
        table = RateTable({"SEK": 10.6, "AUD": 0.66, "MXN": 18.3})
        assert table.codes() == ("SEK", "AUD", "MXN")
        assert [c.code for c in table.currencies()] == ["SEK", "AUD", "MXN"]

    def test_currencies_carry_name_and_rate(self, rate_table):
        """Test the currency listing used by the rates command."""
        eur = rate_table.currencies()[1]
        assert eur.code == "EUR"
        assert eur.name == "Euro"
        assert eur.rate == 0.85

    @pytest.mark.parametrize("bad_rate", [0.0, -1.5])
    def test_non_positive_rate_rejected(self, bad_rate):
        """Test that a table cannot be built with a non-positive rate."""
        with pytest.raises(ValueError):
            RateTable({"USD": 1.0, "BAD": bad_rate})

    def test_contains(self, rate_table):
        """Test membership checks."""
        assert "TRY" in rate_table
        assert "ARS" not in rate_table


class TestConversionEngine:
    """Test cases for ConversionEngine."""

    def test_convert_via_base_currency(self, engine):
        """Test the amount / from_rate * to_rate bridge."""
        assert engine.convert(100.0, "USD", "EUR") == pytest.approx(85.0)
        assert engine.convert(85.0, "EUR", "USD") == pytest.approx(100.0)
        assert engine.convert(10.0, "GBP", "JPY") == (10.0 / 0.73) * 155.8

    @pytest.mark.parametrize("amount", [0, -5, -0.01, math.nan])
    def test_invalid_amount(self, engine, amount):
        """Test that non-positive amounts are rejected."""
        with pytest.raises(InvalidAmountError):
            engine.convert(amount, "USD", "EUR")

    def test_unknown_source_currency(self, engine):
        """Test conversion from an unknown currency."""
        with pytest.raises(UnknownCurrencyError):
            engine.convert(10, "XXX", "EUR")

    def test_unknown_target_currency(self, engine):
        """Test conversion to an unknown currency, including volatile-only codes."""
        with pytest.raises(UnknownCurrencyError):
            engine.convert(10, "USD", "ARS")

    def test_amount_checked_before_currency(self, engine):
        """Test that an invalid amount wins over an unknown currency."""
        with pytest.raises(InvalidAmountError):
            engine.convert(-1, "XXX", "YYY")

    @pytest.mark.parametrize(
        "amount,from_code,to_code",
        [
            (5e-324, "JPY", "USD"),
            (5e-324, "PHP", "USD"),
            (1e308, "USD", "KRW"),
            (math.inf, "USD", "EUR"),
        ],
    )
    def test_result_out_of_range(self, engine, amount, from_code, to_code):
        """Test that results that underflow to zero or overflow are rejected."""
        with pytest.raises(InvalidAmountError):
            engine.convert(amount, from_code, to_code)

    @pytest.mark.parametrize("code", ALL_CODES)
    @pytest.mark.parametrize("amount", [0.01, 1.0, 123.45, 10_000_000.0])
    def test_self_conversion(self, engine, code, amount):
        """Test that converting a currency to itself returns the amount."""
        assert engine.convert(amount, code, code) == pytest.approx(amount, rel=1e-12)

    @pytest.mark.parametrize("from_code", ALL_CODES)
    @pytest.mark.parametrize("to_code", ["USD", "JPY", "KRW", "GBP"])
    def test_round_trip(self, engine, from_code, to_code):
        """Test that converting there and back returns the original amount."""
        amount = 987.65
        there = engine.convert(amount, from_code, to_code)
        back = engine.convert(there, to_code, from_code)
        assert back == pytest.approx(amount, rel=1e-9)

    def test_engine_uses_given_table(self):
        """Test the engine against a custom table."""
        engine = ConversionEngine(RateTable({"AAA": 2.0, "BBB": 8.0}))
        assert engine.convert(3.0, "AAA", "BBB") == 12.0
