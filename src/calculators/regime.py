"""Regime evaluator — insurance, deductions and bracket tax for one regime."""

import logging
from decimal import Decimal
from typing import Any, NamedTuple

from src.calculators.exceptions import InvalidInputError, to_amount
from src.calculators.income_tax import BracketLine, compute_progressive_tax
from src.calculators.insurance import InsuranceBreakdown, InsuranceMode, compute_insurance
from src.calculators.tax_data import REGIMES, Regime, RegimeConfig

logger = logging.getLogger(__name__)


class TaxInput(NamedTuple):
    """One monthly calculation request."""

    gross_salary: Decimal | int
    dependents: int = 0
    region: int = 1
    insurance_mode: InsuranceMode | str = InsuranceMode.OFFICIAL
    custom_insurance: Decimal | int | None = None


class RegimeResult(NamedTuple):
    gross_salary: Decimal
    insurance: InsuranceBreakdown
    personal_deduction: Decimal
    dependent_deduction: Decimal
    total_deduction: Decimal
    taxable_income: Decimal
    tax_amount: Decimal
    net_salary: Decimal
    bracket_label: str
    bracket_lines: tuple[BracketLine, ...]


def resolve_regime(regime: Regime | RegimeConfig | str) -> RegimeConfig:
    """Accept a RegimeConfig, a Regime or its string value."""
    if isinstance(regime, RegimeConfig):
        return regime
    try:
        return REGIMES[Regime(regime)]
    except ValueError as e:
        valid = ", ".join(r.value for r in Regime)
        raise InvalidInputError(f"Unknown regime: {regime!r}. Must be one of: {valid}") from e


def validate_dependents(dependents: Any) -> int:
    if isinstance(dependents, bool) or not isinstance(dependents, int) or dependents < 0:
        raise InvalidInputError(
            f"Dependents must be a non-negative integer, got {dependents!r}."
        )
    return dependents


def evaluate_regime(
    tax_input: TaxInput,
    regime: Regime | RegimeConfig | str,
) -> RegimeResult:
    """Calculate monthly PIT and net salary under a single regime.

    Taxable income is gross minus insurance minus personal and dependent
    deductions, floored at zero. Net salary is gross minus insurance minus tax.

    Raises:
        InvalidInputError: On any invalid field of tax_input.
    """
    config = resolve_regime(regime)
    dependents = validate_dependents(tax_input.dependents)
    gross = to_amount(tax_input.gross_salary, "Gross salary")

    insurance = compute_insurance(
        gross,
        tax_input.region,
        tax_input.insurance_mode,
        tax_input.custom_insurance,
    )

    dependent_deduction = config.per_dependent_deduction * dependents
    total_deduction = config.personal_deduction + dependent_deduction
    taxable_income = max(Decimal("0"), gross - insurance.total - total_deduction)

    tax = compute_progressive_tax(taxable_income, config.brackets)
    net_salary = gross - insurance.total - tax.tax

    logger.debug(
        "gross=%s insurance=%s taxable=%s tax=%s net=%s",
        gross, insurance.total, taxable_income, tax.tax, net_salary,
    )

    return RegimeResult(
        gross_salary=gross,
        insurance=insurance,
        personal_deduction=config.personal_deduction,
        dependent_deduction=dependent_deduction,
        total_deduction=total_deduction,
        taxable_income=taxable_income,
        tax_amount=tax.tax,
        net_salary=net_salary,
        bracket_label=tax.bracket_label,
        bracket_lines=tax.lines,
    )
