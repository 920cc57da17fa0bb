"""
Error handling for bettermath.

Numeric failures are expressed through IEEE values (nan, +/-inf) by default.
The helpers here centralize that policy so that callers can opt into
explicit errors through configuration.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np


# =============================================================================
# Error Codes
# =============================================================================

# Numerical errors (50-59)
BM_ERROR_NUMERICAL_ERROR = 50
BM_ERROR_DIVISION_BY_ZERO = 51


_ERROR_MESSAGES = {
    BM_ERROR_NUMERICAL_ERROR: "Numerical error",
    BM_ERROR_DIVISION_BY_ZERO: "Division by zero",
}


# =============================================================================
# Exception Class
# =============================================================================

class BetterMathError(Exception):
    """
    Base exception for bettermath errors.

    Only raised when the numeric policy is set to RAISE; the default policy
    propagates nan/inf instead.
    """

    ERROR_NUMERICAL_ERROR = BM_ERROR_NUMERICAL_ERROR
    ERROR_DIVISION_BY_ZERO = BM_ERROR_DIVISION_BY_ZERO

    def __init__(self, code: int, message: Optional[str] = None):
        """
        Create a bettermath exception.

        Args:
            code: One of the BM_ERROR_* codes
            message: Optional detailed message (looked up from the code if not provided)
        """
        self.code = code
        if message is None:
            message = _ERROR_MESSAGES.get(code, f"Unknown error (code={code})")
        self.message = message
        super().__init__(f"bettermath error {code}: {message}")

    @classmethod
    def from_code(cls, code: int, context: str = "") -> "BetterMathError":
        """Create exception from error code with optional context."""
        base_msg = _ERROR_MESSAGES.get(code, "Unknown error")
        msg = f"{context}: {base_msg}" if context else base_msg
        return cls(code, msg)


# =============================================================================
# IEEE Arithmetic
# =============================================================================

def to_float(value) -> float:
    """Convert a number to float; integers beyond the float range become +/-inf.

    Examples:
        >>> to_float(3)
        3.0
        >>> to_float(-10 ** 400)
        -inf
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics instead of raising ZeroDivisionError.

    Operands outside the float range are treated as +/-inf.

    Examples:
        >>> ieee_divide(1, 0)
        inf
        >>> ieee_divide(0, 0)
        nan
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.float64(to_float(numerator)) / np.float64(to_float(denominator)))


# =============================================================================
# Policy Checks
# =============================================================================

def check_numeric(
    value: float,
    context: str = "",
    *,
    zero_division: bool = False,
) -> float:
    """
    Apply the configured numeric policy to a computed result.

    Args:
        value: Result of a computation
        context: Name of the operation, used in the error message
        zero_division: True when the result came from a zero denominator

    Returns:
        value, unchanged, when the policy allows it

    Raises:
        BetterMathError: If the policy is RAISE and the result is
            non-finite or was produced by a zero denominator
    """
    from bettermath._config import NumericPolicy, get_config

    if get_config().compute.numeric_policy != NumericPolicy.RAISE:
        return value

    if zero_division:
        raise BetterMathError.from_code(BM_ERROR_DIVISION_BY_ZERO, context)
    if isinstance(value, float) and not math.isfinite(value):
        raise BetterMathError.from_code(BM_ERROR_NUMERICAL_ERROR, context)
    return value


__all__ = [
    "BM_ERROR_NUMERICAL_ERROR",
    "BM_ERROR_DIVISION_BY_ZERO",
    "BetterMathError",
    "to_float",
    "ieee_divide",
    "check_numeric",
]
