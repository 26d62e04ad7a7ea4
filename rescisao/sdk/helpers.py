"""Shared rounding and input guards for the severance calculators."""

import math
import sys


class InvalidInputError(ValueError):
    """Raised when a termination request or calculator input is invalid."""
    pass


def round2(amount: float) -> float:
    """Round to 2 decimal places, half-up.

    The value is nudged by machine epsilon before shifting so that amounts
    like 1.005 (stored as 1.00499999...) still round up.
    Example: 1.005 -> 1.01 (plain round() gives 1.0)

    Raises:
        InvalidInputError: If the amount (or amount * 100) is not finite
    """
    shifted = (amount + sys.float_info.epsilon) * 100
    if not math.isfinite(shifted):
        raise InvalidInputError(f"amount out of range: {amount!r}")
    return math.floor(shifted + 0.5) / 100


def require_positive_salary(salary: float) -> None:
    """Raise InvalidInputError unless salary is strictly positive."""
    if isinstance(salary, bool) or not isinstance(salary, (int, float)):
        raise InvalidInputError("salary must be a number")
    if not (math.isfinite(salary) and salary > 0):
        raise InvalidInputError("salary must be > 0")
