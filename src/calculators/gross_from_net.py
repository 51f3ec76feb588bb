"""Gross-from-net solver — bisection over gross salary."""

import logging
from decimal import ROUND_HALF_UP, Decimal

from src.calculators.exceptions import MAX_AMOUNT, InvalidInputError, to_amount
from src.calculators.insurance import InsuranceMode, compute_insurance
from src.calculators.regime import TaxInput, evaluate_regime, resolve_regime, validate_dependents
from src.calculators.tax_data import DEFAULT_REGIME, Regime, RegimeConfig

logger = logging.getLogger(__name__)

TOLERANCE = Decimal("1000")  # VND
MAX_ITERATIONS = 100
_INITIAL_MULTIPLIER = Decimal("2")
_MAX_MULTIPLIER = Decimal("5")
_EXPANSION_FACTOR = Decimal("1.5")
# Probes reach at most 7.5x the target and must stay within MAX_AMOUNT.
MAX_TARGET_NET = MAX_AMOUNT / 10


def solve_gross_for_net(
    target_net: Decimal | int,
    dependents: int = 0,
    region: int = 1,
    insurance_mode: InsuranceMode | str = InsuranceMode.OFFICIAL,
    custom_insurance: Decimal | int | None = None,
    regime: Regime | RegimeConfig | str = DEFAULT_REGIME,
) -> Decimal:
    """Find the gross salary whose net salary matches target_net.

    Net salary is non-decreasing in gross salary, so a bisection between
    target_net and a multiple of it converges. The upper bound starts at
    2x target and grows by 1.5x while it still undershoots, up to 5x.
    If even that bound undershoots, the search runs anyway and the result
    is the best approximation within the bound.

    Args:
        target_net: Desired monthly net salary in VND (must be >= 0).
        dependents: Number of registered dependents.
        region: Wage region 1-4.
        insurance_mode: One of official, none, custom.
        custom_insurance: Total monthly contribution for custom mode.
        regime: Regime whose rules are applied; defaults to the new law.

    Returns:
        Gross salary rounded to whole VND, accurate within TOLERANCE.
    """
    target = to_amount(target_net, "Target net salary", limit=MAX_TARGET_NET)
    if target < 0:
        raise InvalidInputError("Target net salary must be non-negative.")
    config = resolve_regime(regime)
    validate_dependents(dependents)
    # Fail before searching rather than on the first probe.
    compute_insurance(target, region, insurance_mode, custom_insurance)

    def net_at(gross: Decimal) -> Decimal:
        probe = TaxInput(gross, dependents, region, insurance_mode, custom_insurance)
        return evaluate_regime(probe, config).net_salary

    low = target
    high = target * _INITIAL_MULTIPLIER

    while net_at(high) < target and high < target * _MAX_MULTIPLIER:
        high *= _EXPANSION_FACTOR
        logger.debug("Expanded upper bound to %s", high)

    if net_at(high) < target:
        logger.warning(
            "Upper bound %s still below target net %s; result is approximate",
            high, target,
        )

    iterations = 0
    while high - low > TOLERANCE and iterations < MAX_ITERATIONS:
        mid = (low + high) // 2
        if net_at(mid) < target:
            low = mid
        else:
            high = mid
        iterations += 1

    gross = ((low + high) / 2).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    logger.debug("Solved gross=%s for net=%s in %d iterations", gross, target, iterations)
    return gross
