"""Reference-scenario evaluation for the PIT calculator.

Runs all scenarios from tests/eval/test_scenarios.yaml through the
comparison engine and reports which figures match.

Usage:
    python scripts/eval.py
"""

import logging
import sys
from pathlib import Path
from typing import Any

import yaml

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.calculators.formatting import format_currency
from src.scenarios import check_scenario

logging.basicConfig(level=logging.WARNING)
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

SCENARIOS_PATH = Path(__file__).parent.parent / "tests" / "eval" / "test_scenarios.yaml"


def load_scenarios() -> list[dict[str, Any]]:
    """Load evaluation scenarios from YAML."""
    data = yaml.safe_load(SCENARIOS_PATH.read_text(encoding="utf-8"))
    return data["scenarios"]


def main() -> int:
    """Run the full evaluation suite."""
    scenarios = load_scenarios()
    logger.info("Loaded %d reference scenarios", len(scenarios))

    failed = 0
    for scenario in scenarios:
        result, mismatches = check_scenario(scenario)
        status = "PASS" if not mismatches else "MISS"
        logger.info(
            "  [%s] %-32s old net=%s new net=%s savings=%s",
            status,
            scenario["id"],
            format_currency(result.old_regime.net_salary),
            format_currency(result.new_regime.net_salary),
            format_currency(result.savings),
        )
        for mismatch in mismatches:
            logger.info("         %s", mismatch)
        failed += bool(mismatches)

    logger.info("=" * 60)
    logger.info("Passed %d/%d", len(scenarios) - failed, len(scenarios))
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
