"""Calculator exceptions."""

from decimal import Decimal
from typing import Any

# One quadrillion VND; keeps solver arithmetic well inside Decimal precision.
MAX_AMOUNT = Decimal("1000000000000000")


class InvalidInputError(ValueError):
    """Raised when a calculation request carries an invalid parameter."""


def to_amount(value: Any, name: str, limit: Decimal | None = MAX_AMOUNT) -> Decimal:
    """Coerce an int/float/str/Decimal amount to Decimal.

    Floats go through str() so 0.1 stays 0.1 rather than its binary expansion.
    """
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be a number, got {value!r}.")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except ArithmeticError as e:
            raise InvalidInputError(f"{name} must be a number, got {value!r}.") from e
    if not amount.is_finite():
        raise InvalidInputError(f"{name} must be finite, got {value!r}.")
    if limit is not None and abs(amount) > limit:
        raise InvalidInputError(f"{name} must not exceed {limit} VND in magnitude.")
    return amount
