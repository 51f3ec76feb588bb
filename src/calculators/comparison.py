"""Comparison engine — old vs new regime side by side."""

from decimal import Decimal
from typing import NamedTuple

from src.calculators.gross_from_net import solve_gross_for_net
from src.calculators.insurance import InsuranceMode
from src.calculators.regime import RegimeResult, TaxInput, evaluate_regime
from src.calculators.tax_data import Regime


class ComparisonResult(NamedTuple):
    old_regime: RegimeResult
    new_regime: RegimeResult
    savings: Decimal  # new net - old net
    savings_percent: Decimal  # relative to old net, x100


def compare(tax_input: TaxInput) -> ComparisonResult:
    """Evaluate both regimes for the same input and derive the net saving.

    Savings percentage is relative to the old-regime net salary and is
    zero when that net salary is not positive.
    """
    old = evaluate_regime(tax_input, Regime.OLD)
    new = evaluate_regime(tax_input, Regime.NEW)
    savings = new.net_salary - old.net_salary
    savings_percent = (
        savings / old.net_salary * 100 if old.net_salary > 0 else Decimal("0")
    )

    return ComparisonResult(
        old_regime=old,
        new_regime=new,
        savings=savings,
        savings_percent=savings_percent,
    )


def compare_from_net(
    target_net: Decimal | int,
    dependents: int = 0,
    region: int = 1,
    insurance_mode: InsuranceMode | str = InsuranceMode.OFFICIAL,
    custom_insurance: Decimal | int | None = None,
) -> ComparisonResult:
    """Compare both regimes for the gross salary that yields target_net under the new law."""
    gross = solve_gross_for_net(
        target_net,
        dependents,
        region,
        insurance_mode,
        custom_insurance,
        regime=Regime.NEW,
    )
    return compare(TaxInput(gross, dependents, region, insurance_mode, custom_insurance))
