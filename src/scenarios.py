"""Reference-scenario checks shared by scripts/eval.py and the eval test suite."""

from decimal import Decimal
from typing import Any

from src.calculators.comparison import ComparisonResult, compare
from src.calculators.regime import RegimeResult, TaxInput

# Figures compared per regime: scenario key -> attribute getter
_FIELDS: dict[str, Any] = {
    "insurance_total": lambda r: r.insurance.total,
    "total_deduction": lambda r: r.total_deduction,
    "taxable_income": lambda r: r.taxable_income,
    "tax_amount": lambda r: r.tax_amount,
    "net_salary": lambda r: r.net_salary,
}

_TOLERANCE = Decimal("1")


def build_input(scenario: dict[str, Any]) -> TaxInput:
    raw = scenario["input"]
    return TaxInput(
        gross_salary=raw["gross_salary"],
        dependents=raw.get("dependents", 0),
        region=raw.get("region", 1),
        insurance_mode=raw.get("insurance_mode", "official"),
        custom_insurance=raw.get("custom_insurance"),
    )


def _check_regime(name: str, result: RegimeResult, expected: dict[str, Any]) -> list[str]:
    mismatches: list[str] = []
    for key, getter in _FIELDS.items():
        if key not in expected:
            continue
        actual = getter(result)
        if abs(actual - Decimal(str(expected[key]))) > _TOLERANCE:
            mismatches.append(f"{name}.{key}: expected {expected[key]}, got {actual}")
    if "bracket" in expected and result.bracket_label != expected["bracket"]:
        mismatches.append(
            f"{name}.bracket: expected {expected['bracket']!r}, got {result.bracket_label!r}"
        )
    return mismatches


def check_scenario(scenario: dict[str, Any]) -> tuple[ComparisonResult, list[str]]:
    """Run one scenario and return the comparison plus any mismatch messages."""
    result = compare(build_input(scenario))
    expected = scenario["expected"]

    mismatches = _check_regime("old", result.old_regime, expected.get("old", {}))
    mismatches += _check_regime("new", result.new_regime, expected.get("new", {}))
    if "savings" in expected:
        if abs(result.savings - Decimal(str(expected["savings"]))) > _TOLERANCE:
            mismatches.append(f"savings: expected {expected['savings']}, got {result.savings}")
    return result, mismatches
