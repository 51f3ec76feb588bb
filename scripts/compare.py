"""Compare monthly PIT under the old and new law from the command line.

Usage:
    python scripts/compare.py --salary 40000000 --dependents 2
    python scripts/compare.py --salary 30000000 --net --province "Đà Nẵng"
    python scripts/compare.py --salary 40000000 --insurance custom --custom-insurance 5000000 --yearly
"""

import argparse
import logging
import sys
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.settings import settings
from src.calculators.comparison import ComparisonResult, compare, compare_from_net
from src.calculators.exceptions import InvalidInputError
from src.calculators.formatting import format_currency, format_percent
from src.calculators.insurance import InsuranceMode
from src.calculators.regime import RegimeResult, TaxInput
from src.calculators.regions import region_for_province

logging.basicConfig(level=logging.WARNING)
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def _amount(value: str) -> Decimal:
    """argparse type for VND amounts; accepts 40000000 or 40_000_000."""
    try:
        return Decimal(value.replace("_", ""))
    except ArithmeticError as e:
        raise argparse.ArgumentTypeError(f"not an amount: {value!r}") from e


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Old vs new Vietnamese PIT comparison")
    parser.add_argument("--salary", type=_amount, required=True, help="Monthly salary in VND")
    parser.add_argument("--net", action="store_true", help="Treat --salary as desired net salary")
    parser.add_argument("--dependents", type=int, default=0)
    location = parser.add_mutually_exclusive_group()
    location.add_argument("--region", type=int, choices=[1, 2, 3, 4])
    location.add_argument("--province", help="Province name, e.g. 'Hà Nội'")
    parser.add_argument(
        "--insurance",
        choices=[m.value for m in InsuranceMode],
        default=InsuranceMode.OFFICIAL.value,
    )
    parser.add_argument("--custom-insurance", type=_amount, default=None)
    parser.add_argument("--yearly", action="store_true", help="Show amounts x12")
    return parser.parse_args(argv)


def _rows(result: RegimeResult, multiplier: int) -> list[tuple[str, Decimal]]:
    return [
        ("Gross salary", result.gross_salary * multiplier),
        ("Insurance", result.insurance.total * multiplier),
        ("Deductions", result.total_deduction * multiplier),
        ("Taxable income", result.taxable_income * multiplier),
        ("Tax", result.tax_amount * multiplier),
        ("Net salary", result.net_salary * multiplier),
    ]


def report(comparison: ComparisonResult, yearly: bool = False) -> None:
    """Log a side-by-side table of both regimes."""
    multiplier = 12 if yearly else 1
    old_rows = _rows(comparison.old_regime, multiplier)
    new_rows = _rows(comparison.new_regime, multiplier)

    logger.info("%-16s %18s %18s", "", "Old law", "New law (2026)")
    for (label, old_value), (_, new_value) in zip(old_rows, new_rows):
        logger.info(
            "%-16s %18s %18s", label, format_currency(old_value), format_currency(new_value)
        )
    logger.info(
        "%-16s %18s %18s",
        "Highest bracket",
        comparison.old_regime.bracket_label,
        comparison.new_regime.bracket_label,
    )
    logger.info(
        "Savings: %s VND (%s)",
        format_currency(comparison.savings * multiplier),
        format_percent(comparison.savings_percent),
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        if args.province:
            region = region_for_province(args.province)
        else:
            region = args.region or settings.default_region

        if args.net:
            comparison = compare_from_net(
                args.salary, args.dependents, region, args.insurance, args.custom_insurance
            )
        else:
            comparison = compare(TaxInput(
                args.salary, args.dependents, region, args.insurance, args.custom_insurance
            ))
    except InvalidInputError as e:
        logger.error("%s", e)
        return 2

    report(comparison, yearly=args.yearly)
    return 0


if __name__ == "__main__":
    sys.exit(main())
