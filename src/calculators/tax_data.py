"""Vietnamese PIT constants — brackets, deductions, insurance rates and ceilings.

Hardcoded Python constants (not DB-driven). Two regimes are modelled side
by side: the 7-bracket law in force until 2025 and the 5-bracket law
effective from 01/01/2026. All amounts are monthly VND.
"""

from decimal import Decimal
from enum import Enum
from typing import NamedTuple


class TaxBracket(NamedTuple):
    """A single progressive tax bracket."""

    upper: Decimal | None  # inclusive; None = no cap
    rate: Decimal
    label: str


class RegimeConfig(NamedTuple):
    """Deductions and bracket table for one legal regime."""

    personal_deduction: Decimal
    per_dependent_deduction: Decimal
    brackets: tuple[TaxBracket, ...]


class InsuranceRates(NamedTuple):
    """Employee-side mandatory insurance rates."""

    social: Decimal
    health: Decimal
    unemployment: Decimal

    @property
    def total(self) -> Decimal:
        return self.social + self.health + self.unemployment


class Regime(str, Enum):
    OLD = "old"
    NEW = "new"


NOT_TAXABLE_LABEL = "Không chịu thuế"

INSURANCE_RATES = InsuranceRates(
    social=Decimal("0.08"),
    health=Decimal("0.015"),
    unemployment=Decimal("0.01"),
)

# 20 × base salary 2,340,000
SOCIAL_HEALTH_CEILING = Decimal("46800000")

# 20 × regional minimum wage
REGIONAL_UNEMPLOYMENT_CEILING: dict[int, Decimal] = {
    1: Decimal("99200000"),
    2: Decimal("88200000"),
    3: Decimal("77200000"),
    4: Decimal("69000000"),
}

OLD_BRACKETS = (
    TaxBracket(Decimal("5000000"), Decimal("0.05"), "Bậc 1"),
    TaxBracket(Decimal("10000000"), Decimal("0.10"), "Bậc 2"),
    TaxBracket(Decimal("18000000"), Decimal("0.15"), "Bậc 3"),
    TaxBracket(Decimal("32000000"), Decimal("0.20"), "Bậc 4"),
    TaxBracket(Decimal("52000000"), Decimal("0.25"), "Bậc 5"),
    TaxBracket(Decimal("80000000"), Decimal("0.30"), "Bậc 6"),
    TaxBracket(None, Decimal("0.35"), "Bậc 7"),
)

# From 01/01/2026
NEW_BRACKETS = (
    TaxBracket(Decimal("10000000"), Decimal("0.05"), "Bậc 1"),
    TaxBracket(Decimal("30000000"), Decimal("0.15"), "Bậc 2"),
    TaxBracket(Decimal("60000000"), Decimal("0.25"), "Bậc 3"),
    TaxBracket(Decimal("100000000"), Decimal("0.30"), "Bậc 4"),
    TaxBracket(None, Decimal("0.35"), "Bậc 5"),
)

OLD_REGIME = RegimeConfig(
    personal_deduction=Decimal("11000000"),
    per_dependent_deduction=Decimal("4400000"),
    brackets=OLD_BRACKETS,
)

NEW_REGIME = RegimeConfig(
    personal_deduction=Decimal("15500000"),
    per_dependent_deduction=Decimal("6200000"),
    brackets=NEW_BRACKETS,
)

REGIMES: dict[Regime, RegimeConfig] = {
    Regime.OLD: OLD_REGIME,
    Regime.NEW: NEW_REGIME,
}

DEFAULT_REGIME = Regime.NEW
