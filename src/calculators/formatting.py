"""Display formatting for VND amounts."""

from decimal import ROUND_HALF_UP, Decimal

from src.calculators.exceptions import to_amount

_BILLION = Decimal("1000000000")
_MILLION = Decimal("1000000")


def format_currency(amount: Decimal | int | float) -> str:
    """Whole VND with vi-VN thousands grouping, e.g. 40000000 -> "40.000.000"."""
    value = to_amount(amount, "Amount", limit=None)
    rounded = value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{int(rounded):,}".replace(",", ".")


def format_currency_short(amount: Decimal | int | float) -> str:
    """Compact form: "1.5 tỷ" for billions, "12.3 tr" for millions."""
    value = to_amount(amount, "Amount", limit=None)
    if abs(value) >= _BILLION:
        return f"{value / _BILLION:.1f} tỷ"
    if abs(value) >= _MILLION:
        return f"{value / _MILLION:.1f} tr"
    return format_currency(value)


def format_percent(value: Decimal | int | float, digits: int = 2) -> str:
    return f"{to_amount(value, 'Percentage', limit=None):.{digits}f}%"
