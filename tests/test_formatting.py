"""Tests for VND display formatting."""

from decimal import Decimal

import pytest

from src.calculators.formatting import format_currency, format_currency_short, format_percent


class TestFormatCurrency:
    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (0, "0"),
            (999, "999"),
            (40000000, "40.000.000"),
            (Decimal("1234.5"), "1.235"),
            (Decimal("3744000.4"), "3.744.000"),
            (-1500, "-1.500"),
            (1255000.0, "1.255.000"),
        ],
    )
    def test_grouping_and_rounding(self, amount: object, expected: str) -> None:
        assert format_currency(amount) == expected  # type: ignore[arg-type]


class TestFormatCurrencyShort:
    def test_billions(self) -> None:
        assert format_currency_short(1500000000) == "1.5 tỷ"

    def test_millions(self) -> None:
        assert format_currency_short(12345678) == "12.3 tr"

    def test_negative_millions(self) -> None:
        assert format_currency_short(-2500000) == "-2.5 tr"

    def test_below_a_million(self) -> None:
        assert format_currency_short(999999) == "999.999"


class TestFormatPercent:
    def test_two_digits(self) -> None:
        assert format_percent(Decimal("3.6749633")) == "3.67%"

    def test_zero(self) -> None:
        assert format_percent(0) == "0.00%"
