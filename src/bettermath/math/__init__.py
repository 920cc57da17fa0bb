"""
bettermath Math Module.

This module provides number-level mathematical operations, including:

    - Element-wise transforms (powers, logarithms, rounding, trigonometry,
      arithmetic by a scalar, clamping)
    - Number-theoretic primitives (primality, factors, divisors, gcd/lcm)
    - Matrix transpose and two-point slope

All mappers accept a number, an array of numbers, or an array of records
with a key, through the shared dispatch in ``bettermath._typing``.

Example:
    >>> import bettermath.math as bmath
    >>>
    >>> bmath.square([1, 2, 3])
    [1, 4, 9]
    >>> bmath.is_prime([{"n": 7}, {"n": 8}], key="n")
    [True, False]
"""

from bettermath.math.transforms import (
    # Power
    square,
    cube,
    sqrt,
    cbrt,
    pow,
    # Exponential / log
    exp,
    expm1,
    log,
    ln,
    log1p,
    log10,
    log2,
    logb,
    # Rounding / sign
    floor,
    ceil,
    round,
    trunc,
    abs,
    sign,
    format,
    # Trigonometric
    sin,
    cos,
    tan,
    asin,
    acos,
    atan,
    atan2,
    sinh,
    cosh,
    tanh,
    asinh,
    acosh,
    atanh,
    # Arithmetic by scalar
    add,
    subtract,
    multiply,
    divide,
    modulo,
    clamp,
    # Sign helpers
    samesign,
    copysign,
    between,
)

from bettermath.math.numtheory import (
    is_even,
    is_odd,
    is_prime,
    is_composite,
    factors,
    divisors,
    gcd,
    lcm,
    undirected_edges,
    factorial,
)

from bettermath.math.linalg import (
    transpose,
    slope,
)

__all__ = [
    # Transforms
    "square",
    "cube",
    "sqrt",
    "cbrt",
    "pow",
    "exp",
    "expm1",
    "log",
    "ln",
    "log1p",
    "log10",
    "log2",
    "logb",
    "floor",
    "ceil",
    "round",
    "trunc",
    "abs",
    "sign",
    "format",
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
    "add",
    "subtract",
    "multiply",
    "divide",
    "modulo",
    "clamp",
    "samesign",
    "copysign",
    "between",
    # Number theory
    "is_even",
    "is_odd",
    "is_prime",
    "is_composite",
    "factors",
    "divisors",
    "gcd",
    "lcm",
    "undirected_edges",
    "factorial",
    # Linear algebra
    "transpose",
    "slope",
]
