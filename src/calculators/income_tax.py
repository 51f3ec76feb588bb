"""Progressive income tax calculator — bracket-by-bracket breakdown."""

from decimal import Decimal
from typing import NamedTuple

from src.calculators.exceptions import to_amount
from src.calculators.tax_data import NOT_TAXABLE_LABEL, TaxBracket


class BracketLine(NamedTuple):
    """Tax charged within one bracket."""

    bracket_index: int  # 1-based
    label: str
    rate: Decimal
    lower: Decimal
    upper: Decimal | None  # None = no cap
    taxable_amount: Decimal
    tax: Decimal
    is_highest: bool


class ProgressiveTaxResult(NamedTuple):
    tax: Decimal
    bracket_label: str
    lines: tuple[BracketLine, ...]


def compute_progressive_tax(
    taxable_income: Decimal | int,
    brackets: tuple[TaxBracket, ...],
) -> ProgressiveTaxResult:
    """Calculate progressive tax with per-bracket breakdown.

    Bracket upper limits are inclusive: income exactly on a boundary is
    taxed entirely within the lower bracket. One line is emitted per
    bracket reached and the last one is flagged as the highest.

    Args:
        taxable_income: Income after insurance and deductions.
        brackets: Brackets sorted ascending, last one uncapped.

    Returns:
        ProgressiveTaxResult with total tax, highest bracket label and lines.
    """
    income = to_amount(taxable_income, "Taxable income")
    if income <= 0:
        return ProgressiveTaxResult(Decimal("0"), NOT_TAXABLE_LABEL, ())

    lines: list[BracketLine] = []
    total_tax = Decimal("0")
    previous_limit = Decimal("0")

    for index, bracket in enumerate(brackets, start=1):
        if income <= previous_limit:
            break

        upper = bracket.upper if bracket.upper is not None else income
        taxable = min(income, upper) - previous_limit
        tax = taxable * bracket.rate
        total_tax += tax

        lines.append(BracketLine(
            bracket_index=index,
            label=bracket.label,
            rate=bracket.rate,
            lower=previous_limit,
            upper=bracket.upper,
            taxable_amount=taxable,
            tax=tax,
            is_highest=False,
        ))

        if bracket.upper is None or income <= bracket.upper:
            break
        previous_limit = bracket.upper

    lines[-1] = lines[-1]._replace(is_highest=True)

    return ProgressiveTaxResult(total_tax, lines[-1].label, tuple(lines))
