"""
Element-wise Mathematical Transforms.

This module provides element-wise transformation functions. Every function
is a mapper: a number in gives a number out, an array (of numbers, or of
records with a key) gives an array of the same length.

Implemented Transforms:
    - Power: square, cube, sqrt, cbrt, pow
    - Exponential/log: exp, expm1, log (ln), log1p, log10, log2, logb
    - Rounding/sign: floor, ceil, round, trunc, abs, sign, format
    - Trigonometric: sin, cos, tan, asin, acos, atan, atan2 and the
      hyperbolic variants
    - Arithmetic by scalar: add, subtract, multiply, divide, modulo, clamp
    - Sign helpers: samesign, copysign, between

Numeric Semantics:
    Results follow IEEE-754 arithmetic: ``log(0)`` is
    ``-inf``, ``sqrt(-1)`` is ``nan``, ``divide(1, 0)`` is ``inf``. No
    ValueError or ZeroDivisionError is raised for out-of-domain input.
"""

from __future__ import annotations

import builtins
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable

import numpy as np

from bettermath._errors import ieee_divide, to_float
from bettermath._typing import elementwise


def _ieee(func: Callable, *args: float) -> float:
    """Evaluate a numpy ufunc on scalars, silencing floating point warnings."""
    with np.errstate(all="ignore"):
        return float(func(*(np.float64(to_float(a)) for a in args)))


# =============================================================================
# Power Family
# =============================================================================

@elementwise
def square(x):
    """Multiply a number by itself.

    Examples:
        >>> square(3)
        9
        >>> square([{"a": 1}, {"a": 8}], "a")
        [1, 64]
    """
    return x * x


@elementwise
def cube(x):
    """Multiply a number by its square."""
    return x * x * x


@elementwise
def sqrt(x):
    """Square root (nan for negative input)."""
    return _ieee(np.sqrt, x)


@elementwise
def cbrt(x):
    """Cube root, defined for negative input."""
    return _ieee(np.cbrt, x)


@elementwise
def pow(x, exponent):
    """Raise a number (or each element) to an exponent.

    Args:
        x: Base.
        exponent: Exponent applied to every element.

    Returns:
        x ** exponent as a float.

    Examples:
        >>> pow(2, 5)
        32.0
        >>> pow([2, 3, 4], 2)
        [4.0, 9.0, 16.0]
    """
    return _ieee(np.power, x, exponent)


# =============================================================================
# Exponential / Logarithm Family
# =============================================================================

@elementwise
def exp(x):
    return _ieee(np.exp, x)


@elementwise
def expm1(x):
    """exp(x) - 1, accurate for small x."""
    return _ieee(np.expm1, x)


@elementwise
def log(x):
    """Natural logarithm (-inf at 0, nan for negative input)."""
    return _ieee(np.log, x)


ln = log


@elementwise
def log1p(x):
    """log(1 + x), accurate for small x."""
    return _ieee(np.log1p, x)


@elementwise
def log10(x):
    return _ieee(np.log10, x)


@elementwise
def log2(x):
    return _ieee(np.log2, x)


@elementwise
def logb(x, base):
    """Logarithm of x in an arbitrary base.

    Computed as ``log(x) / log(base)``; base 1 gives an infinite or nan
    result instead of raising.

    Examples:
        >>> logb(8, 2)
        3.0
        >>> logb([1, 10, 100], 10)
        [0.0, 1.0, 2.0]
    """
    return ieee_divide(_ieee(np.log, x), _ieee(np.log, base))


# =============================================================================
# Rounding / Sign Family
# =============================================================================

@elementwise
def floor(x):
    return _ieee(np.floor, x)


@elementwise
def ceil(x):
    return _ieee(np.ceil, x)


@elementwise
def round(x):
    """Round half up (towards +inf), as ``floor(x + 0.5)``.

    Unlike the builtin ``round``, halves are not rounded to even:
    ``round(2.5) == 3`` and ``round(-2.5) == -2``.
    """
    x = to_float(x)
    if not math.isfinite(x):
        return x
    return float(math.floor(x + 0.5))


@elementwise
def trunc(x):
    return _ieee(np.trunc, x)


@elementwise
def abs(x):
    return builtins.abs(x)


@elementwise
def sign(x):
    """-1.0, 0.0 or 1.0 (nan stays nan)."""
    return _ieee(np.sign, x)


@elementwise
def format(x, precision):
    """Round to a fixed number of decimals and return a number.

    Rounds the exact binary value of x half-up, so results agree with
    fixed-point formatting (``format(1.005, 2) == 1.0`` because 1.005 is
    stored as 1.00499...).

    Args:
        x: Number to round.
        precision: Number of digits after the decimal point.

    Returns:
        The rounded value as a float (not a display string).
    """
    x = to_float(x)
    if not math.isfinite(x):
        return x
    quantum = Decimal(1).scaleb(-int(precision))
    return float(Decimal(x).quantize(quantum, rounding=ROUND_HALF_UP))


# =============================================================================
# Trigonometric Family
# =============================================================================

@elementwise
def sin(x):
    return _ieee(np.sin, x)


@elementwise
def cos(x):
    return _ieee(np.cos, x)


@elementwise
def tan(x):
    return _ieee(np.tan, x)


@elementwise
def asin(x):
    return _ieee(np.arcsin, x)


@elementwise
def acos(x):
    return _ieee(np.arccos, x)


@elementwise
def atan(x):
    return _ieee(np.arctan, x)


@elementwise
def atan2(a, b):
    """Arc tangent of the ratio ``a / b``, element-wise over a.

    Defined as ``atan(a / b)``: the result lies in [-pi/2, pi/2] and does not
    use the signs of both arguments to pick a quadrant.
    """
    return _ieee(np.arctan, ieee_divide(a, b))


@elementwise
def sinh(x):
    return _ieee(np.sinh, x)


@elementwise
def cosh(x):
    return _ieee(np.cosh, x)


@elementwise
def tanh(x):
    return _ieee(np.tanh, x)


@elementwise
def asinh(x):
    return _ieee(np.arcsinh, x)


@elementwise
def acosh(x):
    return _ieee(np.arccosh, x)


@elementwise
def atanh(x):
    return _ieee(np.arctanh, x)


# =============================================================================
# Arithmetic by Scalar
# =============================================================================

@elementwise
def add(x, operand):
    """Add a scalar to a number or to every element."""
    return x + operand


@elementwise
def subtract(x, operand):
    return x - operand


@elementwise
def multiply(x, factor):
    """Multiply a number or every element by a scalar factor."""
    return x * factor


@elementwise
def divide(x, divisor):
    """Divide a number or every element by a scalar (IEEE on zero)."""
    return ieee_divide(x, divisor)


@elementwise
def modulo(x, divisor):
    """Floor modulo with the sign of the divisor; nan when divisor is 0."""
    return _ieee(np.remainder, x, divisor)


@elementwise
def clamp(x, lower, upper):
    """Limit a number to the closed interval [lower, upper].

    Examples:
        >>> clamp(15, 0, 10)
        10
        >>> clamp([-5, 5, 15], 0, 10)
        [0, 5, 10]
    """
    return builtins.min(builtins.max(x, lower), upper)


# =============================================================================
# Sign Helpers
# =============================================================================

@elementwise
def samesign(x, y):
    """True when x and y have the same sign (zero counts as positive)."""
    return (x >= 0) != (y < 0)


@elementwise
def copysign(x, y):
    """Copy the sign of y onto x."""
    return x if (x >= 0) != (y < 0) else -x


@elementwise
def between(x, a, b):
    """True when x lies in the closed interval spanned by a and b (either order)."""
    return (a <= x <= b) or (b <= x <= a)


__all__ = [
    # Power
    "square",
    "cube",
    "sqrt",
    "cbrt",
    "pow",
    # Exponential / log
    "exp",
    "expm1",
    "log",
    "ln",
    "log1p",
    "log10",
    "log2",
    "logb",
    # Rounding / sign
    "floor",
    "ceil",
    "round",
    "trunc",
    "abs",
    "sign",
    "format",
    # Trigonometric
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "atan2",
    "sinh",
    "cosh",
    "tanh",
    "asinh",
    "acosh",
    "atanh",
    # Arithmetic by scalar
    "add",
    "subtract",
    "multiply",
    "divide",
    "modulo",
    "clamp",
    # Sign helpers
    "samesign",
    "copysign",
    "between",
]
