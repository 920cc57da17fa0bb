"""
Number-Theoretic Primitives.

Primality, factorization, divisors, gcd/lcm and small combinatorial helpers.
Every function is a mapper: it accepts a number, an array of numbers, or an
array of records with a key, and returns a result per element.

Input Conventions:
    Functions that need an integer work on ``|round(n)|`` where ``round`` is
    half-up (``floor(n + 0.5)``), so 12.4 behaves like 12 and -7 like 7.
    ``factors`` and ``divisors`` return a list per element, so an array input
    gives a list of lists.
"""

from __future__ import annotations

import builtins
import math
import numbers
from typing import List

from bettermath._errors import ieee_divide, to_float
from bettermath._typing import elementwise


def _safe_int(n) -> int:
    """|round(n)| with half-up rounding."""
    if isinstance(n, numbers.Integral):
        return builtins.abs(int(n))
    return builtins.abs(math.floor(n + 0.5))


def _finite(n) -> bool:
    """math.isfinite for integers of any size."""
    return isinstance(n, numbers.Integral) or math.isfinite(n)


# =============================================================================
# Parity
# =============================================================================

@elementwise
def is_even(n) -> bool:
    """Return True when n is divisible by 2.

    Examples:
        >>> is_even(4)
        True
        >>> is_even([4, 501])
        [True, False]
    """
    return n % 2 == 0


@elementwise
def is_odd(n) -> bool:
    return not n % 2 == 0


# =============================================================================
# Primality
# =============================================================================

@elementwise
def is_prime(n) -> bool:
    """Return True when n is prime, by trial division.

    Algorithm:
        - n == 0 -> False
        - n == 2 -> True
        - otherwise divide |round(n)| by every i in [2, ceil(sqrt(|round(n)|))];
          any exact divisor -> False, else True

    Time Complexity:
        O(sqrt(n)) per element.

    Args:
        n: Number to test.

    Returns:
        True if no divisor was found. Non-finite input is never prime.

    Notes:
        1 and -1 report True because the trial range is empty; callers that
        need the textbook definition should exclude them.

    Examples:
        >>> is_prime(97)
        True
        >>> is_prime([100, 200, 2])
        [False, False, True]
    """
    if not n:
        return False
    if n == 2:
        return True
    if not _finite(n):
        return False

    safe_n = _safe_int(n)
    go_until = math.isqrt(safe_n)
    for i in builtins.range(2, go_until + 1):
        if safe_n % i == 0:
            return False
    return True


@elementwise
def is_composite(n) -> bool:
    """Negation of is_prime."""
    return not is_prime.kernel(n)


# =============================================================================
# Factorization
# =============================================================================

@elementwise
def factors(n) -> List[int]:
    """Return the prime factors of n, smallest first, with repetition.

    Algorithm:
        Starting from w = |round(n)|, repeatedly divide out the smallest
        i in [2, w/2] dividing the remaining value and record i. The bound
        w/2 is fixed from the start, so a prime cofactor is still found.
        When no factor is found at all the result is [w].

    Examples:
        >>> factors(12)
        [2, 2, 3]
        >>> factors(7)
        [7]
        >>> factors([12, 7])
        [[2, 2, 3], [7]]
    """
    if not _finite(n):
        return [builtins.abs(n)]

    start_n = _safe_int(n)
    remaining = start_n
    result = []
    finished = False
    while not finished:
        finished = True
        for i in builtins.range(2, start_n // 2 + 1):
            if remaining % i == 0:
                remaining //= i
                result.append(i)
                finished = False
                break

    if not result:
        result.append(start_n)
    return result


@elementwise
def divisors(n, proper: bool = False) -> List[int]:
    """Return the divisors of n in ascending order.

    Args:
        n: Number whose divisors are listed (|round(n)| is used).
        proper: If True, exclude n itself.

    Returns:
        [1, every i in [2, n/2] dividing n, n]. For n == 1 the result is [1].

    Examples:
        >>> divisors(12)
        [1, 2, 3, 4, 6, 12]
        >>> divisors(12, proper=True)
        [1, 2, 3, 4, 6]
    """
    if not _finite(n):
        return []

    safe_n = _safe_int(n)
    result = [1]
    for i in builtins.range(2, safe_n // 2 + 1):
        if safe_n % i == 0:
            result.append(i)
    if not proper and safe_n != 1:
        result.append(safe_n)
    return result


# =============================================================================
# GCD / LCM
# =============================================================================

@elementwise
def gcd(a, b):
    """Greatest common divisor by the iterative Euclidean algorithm.

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd([12, 9], 6)
        [6, 3]
    """
    if not (_finite(a) and _finite(b)):
        return math.nan
    while b:
        a, b = b, a % b
    return a


@elementwise
def lcm(a, b):
    """Least common multiple, ``a / gcd(a, b) * b``.

    lcm(0, 0) is nan (0 / 0), not an error.
    """
    return ieee_divide(a, gcd.kernel(a, b)) * to_float(b)


# =============================================================================
# Combinatorics
# =============================================================================

@elementwise
def undirected_edges(n):
    """Upper bound on the edges of a simple undirected graph on n nodes."""
    return n * (n - 1) / 2


@elementwise
def factorial(n):
    """Compute n! as a float.

    The result is the true factorial, so factorial(5) is 5! = 120 and not 4!.
    Negative input returns inf rather than raising; results beyond the float
    range overflow to inf.

    Examples:
        >>> factorial(5)
        120.0
        >>> factorial(-1)
        inf
    """
    if n < 0 or math.isinf(to_float(n)):
        return math.inf
    if n == 0:
        return 1.0

    acc = 1.0
    k = 1
    while k <= n and not math.isinf(acc):
        acc *= k
        k += 1
    return acc


__all__ = [
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
]
