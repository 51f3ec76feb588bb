"""Pydantic models for API requests and responses."""

from typing import Literal

from pydantic import BaseModel, Field

from config.settings import settings
from src.calculators.comparison import ComparisonResult
from src.calculators.exceptions import MAX_AMOUNT
from src.calculators.gross_from_net import MAX_TARGET_NET
from src.calculators.income_tax import BracketLine
from src.calculators.insurance import InsuranceMode
from src.calculators.regime import RegimeResult
from src.calculators.tax_data import Regime, RegimeConfig, TaxBracket

# --- Requests ---


class CompareRequest(BaseModel):
    """Request body for the /compare endpoint."""

    salary: float = Field(ge=0, le=float(MAX_AMOUNT))
    salary_mode: Literal["gross", "net"] = "gross"
    dependents: int = Field(default=0, ge=0)
    region: int = Field(default_factory=lambda: settings.default_region)
    insurance_mode: InsuranceMode = InsuranceMode.OFFICIAL
    custom_insurance: float | None = Field(default=None, ge=0, le=float(MAX_AMOUNT))


class GrossFromNetRequest(BaseModel):
    """Request body for the /gross-from-net endpoint."""

    target_net: float = Field(ge=0, le=float(MAX_TARGET_NET))
    dependents: int = Field(default=0, ge=0)
    region: int = Field(default_factory=lambda: settings.default_region)
    insurance_mode: InsuranceMode = InsuranceMode.OFFICIAL
    custom_insurance: float | None = Field(default=None, ge=0, le=float(MAX_AMOUNT))
    regime: Regime = Regime.NEW


# --- Responses ---


class InsuranceOut(BaseModel):
    social: float
    health: float
    unemployment: float
    total: float


class BracketLineOut(BaseModel):
    bracket: int
    label: str
    rate: float
    lower: float
    upper: float | None = None
    taxable_amount: float
    tax: float
    is_highest: bool

    @classmethod
    def from_line(cls, line: BracketLine) -> "BracketLineOut":
        return cls(
            bracket=line.bracket_index,
            label=line.label,
            rate=float(line.rate),
            lower=float(line.lower),
            upper=float(line.upper) if line.upper is not None else None,
            taxable_amount=float(line.taxable_amount),
            tax=float(line.tax),
            is_highest=line.is_highest,
        )


class RegimeResultOut(BaseModel):
    gross_salary: float
    insurance: InsuranceOut
    personal_deduction: float
    dependent_deduction: float
    total_deduction: float
    taxable_income: float
    tax_amount: float
    net_salary: float
    bracket: str
    bracket_breakdown: list[BracketLineOut]

    @classmethod
    def from_result(cls, result: RegimeResult) -> "RegimeResultOut":
        return cls(
            gross_salary=float(result.gross_salary),
            insurance=InsuranceOut(
                social=float(result.insurance.social),
                health=float(result.insurance.health),
                unemployment=float(result.insurance.unemployment),
                total=float(result.insurance.total),
            ),
            personal_deduction=float(result.personal_deduction),
            dependent_deduction=float(result.dependent_deduction),
            total_deduction=float(result.total_deduction),
            taxable_income=float(result.taxable_income),
            tax_amount=float(result.tax_amount),
            net_salary=float(result.net_salary),
            bracket=result.bracket_label,
            bracket_breakdown=[BracketLineOut.from_line(line) for line in result.bracket_lines],
        )


class CompareResponse(BaseModel):
    old_regime: RegimeResultOut
    new_regime: RegimeResultOut
    savings: float
    savings_percent: float

    @classmethod
    def from_comparison(cls, comparison: ComparisonResult) -> "CompareResponse":
        return cls(
            old_regime=RegimeResultOut.from_result(comparison.old_regime),
            new_regime=RegimeResultOut.from_result(comparison.new_regime),
            savings=float(comparison.savings),
            savings_percent=float(round(comparison.savings_percent, 2)),
        )


class GrossFromNetResponse(BaseModel):
    gross_salary: float
    net_salary: float
    regime: Regime


class BracketOut(BaseModel):
    upper: float | None = None
    rate: float
    label: str

    @classmethod
    def from_bracket(cls, bracket: TaxBracket) -> "BracketOut":
        return cls(
            upper=float(bracket.upper) if bracket.upper is not None else None,
            rate=float(bracket.rate),
            label=bracket.label,
        )


class RegimeConfigOut(BaseModel):
    personal_deduction: float
    per_dependent_deduction: float
    brackets: list[BracketOut]

    @classmethod
    def from_config(cls, config: RegimeConfig) -> "RegimeConfigOut":
        return cls(
            personal_deduction=float(config.personal_deduction),
            per_dependent_deduction=float(config.per_dependent_deduction),
            brackets=[BracketOut.from_bracket(b) for b in config.brackets],
        )


class RegionOut(BaseModel):
    region: int
    label: str
    description: str
    unemployment_ceiling: float


class RegimesResponse(BaseModel):
    regimes: dict[Regime, RegimeConfigOut]
    insurance_rates: dict[str, float]
    social_health_ceiling: float
    unemployment_ceilings: dict[int, float]
    regions: list[RegionOut]


class ProvinceOut(BaseModel):
    name: str
    region: int
