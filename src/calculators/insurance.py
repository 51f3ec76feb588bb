"""Mandatory insurance calculator — social, health and unemployment contributions."""

from decimal import Decimal
from enum import Enum
from typing import Any, NamedTuple

from src.calculators.exceptions import InvalidInputError, to_amount
from src.calculators.tax_data import (
    INSURANCE_RATES,
    REGIONAL_UNEMPLOYMENT_CEILING,
    SOCIAL_HEALTH_CEILING,
)

_ZERO = Decimal("0")


class InsuranceMode(str, Enum):
    OFFICIAL = "official"  # contributions on gross salary, capped
    NONE = "none"
    CUSTOM = "custom"  # caller-supplied total, split proportionally


class InsuranceBreakdown(NamedTuple):
    """Employee insurance contributions for one month."""

    social: Decimal
    health: Decimal
    unemployment: Decimal
    total: Decimal


def validate_region(region: Any) -> int:
    """Return region unchanged if it is a known wage region, else raise."""
    if isinstance(region, bool) or region not in REGIONAL_UNEMPLOYMENT_CEILING:
        valid = ", ".join(str(r) for r in sorted(REGIONAL_UNEMPLOYMENT_CEILING))
        raise InvalidInputError(f"Unknown region: {region!r}. Must be one of: {valid}")
    return int(region)


def compute_insurance(
    gross_salary: Decimal | int,
    region: int,
    mode: InsuranceMode | str = InsuranceMode.OFFICIAL,
    custom_amount: Decimal | int | None = None,
) -> InsuranceBreakdown:
    """Calculate employee social, health and unemployment insurance.

    Official mode applies each rate to gross salary capped at the relevant
    ceiling: social and health share a national ceiling, unemployment uses
    the regional one. Custom mode splits the supplied amount across the
    three categories in proportion to their official rates, and keeps the
    supplied amount as the authoritative total.

    Args:
        gross_salary: Monthly gross salary in VND (must be >= 0).
        region: Wage region 1-4.
        mode: One of official, none, custom.
        custom_amount: Total monthly contribution; required in custom mode.

    Returns:
        InsuranceBreakdown with social, health, unemployment and total.

    Raises:
        InvalidInputError: On negative amounts, an unknown region or mode,
            or custom mode without an amount.
    """
    gross = to_amount(gross_salary, "Gross salary")
    if gross < 0:
        raise InvalidInputError("Gross salary must be non-negative.")
    region = validate_region(region)
    try:
        mode = InsuranceMode(mode)
    except ValueError as e:
        valid = ", ".join(m.value for m in InsuranceMode)
        raise InvalidInputError(f"Invalid insurance mode: {mode!r}. Must be one of: {valid}") from e

    if mode is InsuranceMode.NONE:
        return InsuranceBreakdown(_ZERO, _ZERO, _ZERO, _ZERO)

    if mode is InsuranceMode.CUSTOM:
        if custom_amount is None:
            raise InvalidInputError("Custom insurance mode requires a custom insurance amount.")
        custom = to_amount(custom_amount, "Custom insurance amount")
        if custom < 0:
            raise InvalidInputError("Custom insurance amount must be non-negative.")
        total_rate = INSURANCE_RATES.total
        return InsuranceBreakdown(
            social=custom * INSURANCE_RATES.social / total_rate,
            health=custom * INSURANCE_RATES.health / total_rate,
            unemployment=custom * INSURANCE_RATES.unemployment / total_rate,
            total=custom,
        )

    social_health_base = min(gross, SOCIAL_HEALTH_CEILING)
    unemployment_base = min(gross, REGIONAL_UNEMPLOYMENT_CEILING[region])
    social = social_health_base * INSURANCE_RATES.social
    health = social_health_base * INSURANCE_RATES.health
    unemployment = unemployment_base * INSURANCE_RATES.unemployment

    return InsuranceBreakdown(
        social=social,
        health=health,
        unemployment=unemployment,
        total=social + health + unemployment,
    )
