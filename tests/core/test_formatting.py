"""Tests for display formatting helpers."""

import pytest

from casino_math.formatting import format_currency, format_percent


class TestFormatCurrency:
    """Tests for currency formatting."""

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (0, "$0.00"),
            (25, "$25.00"),
            (1234.5, "$1,234.50"),
            (1000000, "$1,000,000.00"),
            (-0.27027, "-$0.27"),
            (-1234.5, "-$1,234.50"),
        ],
    )
    def test_format(self, amount, expected):
        assert format_currency(amount) == expected

    def test_custom_symbol(self):
        assert format_currency(10, symbol="€") == "€10.00"


class TestFormatPercent:
    """Tests for percentage formatting."""

    def test_default_two_decimals(self):
        assert format_percent(100 / 37) == "2.70%"

    def test_custom_decimals(self):
        assert format_percent(5.263157, 1) == "5.3%"
        assert format_percent(100, 0) == "100%"

    def test_negative(self):
        assert format_percent(-0.5) == "-0.50%"
