"""
Descriptive Statistics.

This module provides reducers over a sequence of numbers. Every function
first normalizes its input with ``pluck`` so that it accepts:

    - a list, tuple or numpy array of numbers
    - a list of records together with a key (default "value")
    - a map of name -> record together with a key

Mathematical Background:
    The variance is the population variance (divides by n, not n - 1), and
    the standard deviation and z-scores are derived from it.

Empty Input:
    ``sum`` and ``product`` return their identities (0 and 1). Reducers that
    divide by the length return nan for an empty sequence instead of
    raising, unless the numeric policy is set to RAISE.
"""

from __future__ import annotations

import builtins
import functools
import math
import operator
from typing import Any, Dict, List

import numpy as np

from bettermath._errors import check_numeric, ieee_divide, to_float
from bettermath._typing import (
    KeyInput,
    NumericInput,
    ensure_values,
    restore_shape,
)


def _sum(values: List[float]) -> float:
    return functools.reduce(operator.add, values, 0)


def _mean(values: List[float], context: str) -> float:
    n = len(values)
    return check_numeric(ieee_divide(_sum(values), n), context, zero_division=n == 0)


def _float_product(values: List[float]) -> float:
    return functools.reduce(operator.mul, [to_float(x) for x in values], 1.0)


def _deviations(values: List[float], m: float) -> List[float]:
    return [to_float(x) - m for x in values]


# =============================================================================
# Folds
# =============================================================================

def sum(obj: NumericInput, key: KeyInput = None) -> float:
    """Compute the sum of an array of numbers or of a record field.

    Algorithm:
        Left fold with identity 0, in input order.

    Args:
        obj: Numbers, records, or a map of records.
        key: Field to sum for records.

    Returns:
        The sum; 0 for an empty input.

    Examples:
        >>> sum([1, 2, 3])
        6
        >>> sum([{"value": 1}, {"value": 2}, {"value": 3}])
        6
        >>> sum({"one": {"b": 4}, "two": {"b": 5}}, "b")
        9
    """
    return _sum(ensure_values(obj, key))


def product(obj: NumericInput, key: KeyInput = None) -> float:
    """Compute the product of an array of numbers (identity 1).

    Examples:
        >>> product([1, 2, 3])
        6
        >>> product([{"b": 4}, {"b": 5}, {"b": 6}], "b")
        120
    """
    return functools.reduce(operator.mul, ensure_values(obj, key), 1)


def min(obj: NumericInput, key: KeyInput = None) -> float:
    """Smallest element; inf for an empty input."""
    return builtins.min(ensure_values(obj, key), default=math.inf)


def max(obj: NumericInput, key: KeyInput = None) -> float:
    """Largest element; -inf for an empty input."""
    return builtins.max(ensure_values(obj, key), default=-math.inf)


# =============================================================================
# Central Tendency
# =============================================================================

def mean(obj: NumericInput, key: KeyInput = None) -> float:
    """Arithmetic mean, ``sum / length``.

    Examples:
        >>> mean([0, 0.5, 1])
        0.5
        >>> mean([])
        nan
    """
    return _mean(ensure_values(obj, key), "mean")


average = mean


def median(obj: NumericInput, key: KeyInput = None) -> float:
    """Compute the median of an array of numbers.

    A sorted copy is used; the input is never reordered.

    Algorithm:
        With middle = (n + 1) / 2 (1-based):
            - odd n: sorted[middle - 1]
            - even n: (sorted[middle - 1.5] + sorted[middle - 0.5]) / 2

    Args:
        obj: Numbers, records, or a map of records.
        key: Field to read for records.

    Returns:
        The median; nan for an empty input.

    Examples:
        >>> median([0, 0, 1, 2, 5])
        1
        >>> median([0, 0, 1, 2])
        0.5
    """
    values = ensure_values(obj, key)
    n = len(values)
    if n == 0:
        return math.nan

    ordered = sorted(values)
    middle = (n + 1) / 2
    if n % 2:
        return ordered[int(middle - 1)]
    return ieee_divide(ordered[int(middle - 1.5)] + ordered[int(middle - 0.5)], 2)


def modes(obj: NumericInput, key: KeyInput = None) -> List[Any]:
    """Return every value tied for the highest number of occurrences.

    Algorithm:
        One pass keeping a count per distinct value, the running maximum
        count and the values reaching it. A strictly higher count resets the
        list; an equal count appends to it.

    Returns:
        Values in order of reaching the maximum; [] for an empty input.

    Examples:
        >>> modes([1, 2, 2, 3])
        [2]
        >>> modes([1, 1, 2, 2, 3])
        [1, 2]
    """
    counts: Dict[Any, int] = {}
    best = 0
    result: List[Any] = []

    for value in ensure_values(obj, key):
        count = counts.get(value, 0) + 1
        counts[value] = count
        if count > best:
            best = count
            result = [value]
        elif count == best:
            result.append(value)

    return result


mode = modes


def geometric_mean(obj: NumericInput, key: KeyInput = None) -> float:
    """``product ** (1 / length)``.

    A negative product gives nan.

    Example:
        >>> round(geometric_mean([3, 9, 27]), 9)
        9.0
    """
    values = ensure_values(obj, key)
    exponent = ieee_divide(1, len(values))
    with np.errstate(all="ignore"):
        return float(np.power(_float_product(values), exponent))


def midrange(obj: NumericInput, key: KeyInput = None) -> float:
    """Midpoint of the extremes, ``(max - min) / 2 + min``."""
    values = ensure_values(obj, key)
    lo = min(values)
    hi = max(values)
    return (to_float(hi) - to_float(lo)) / 2 + to_float(lo)


# =============================================================================
# Dispersion
# =============================================================================

def variance(obj: NumericInput, key: KeyInput = None) -> float:
    """Population variance, the mean of squared deviations from the mean.

    Example:
        >>> variance([1, 2, 3]) == 2 / 3
        True
    """
    values = ensure_values(obj, key)
    m = _mean(values, "variance")
    return _mean([d * d for d in _deviations(values, m)], "variance")


def std_deviation(obj: NumericInput, key: KeyInput = None) -> float:
    """Population standard deviation, ``sqrt(variance)``.

    Example:
        >>> std_deviation([1, 2, 3])
        0.816496580927726
    """
    return check_numeric(math.sqrt(variance(obj, key)), "std_deviation")


sigma = std_deviation


def mean_absolute_deviation(obj: NumericInput, key: KeyInput = None) -> float:
    """Mean of the absolute deviations from the mean."""
    values = ensure_values(obj, key)
    m = _mean(values, "mean_absolute_deviation")
    return _mean([builtins.abs(d) for d in _deviations(values, m)], "mean_absolute_deviation")


def zscore(obj: NumericInput, key: KeyInput = None) -> Any:
    """Standard score of every element, ``(x - mean) / std_deviation``.

    Assumes a normal distribution. Output has the shape of the input (list
    for sequences and records, ndarray for numpy input).

    Example:
        >>> zscore([1, 2, 3])
        [-1.224744871391589, 0.0, 1.224744871391589]
    """
    values = ensure_values(obj, key)
    m = _mean(values, "zscore")
    deviations = _deviations(values, m)
    s = math.sqrt(_mean([d * d for d in deviations], "zscore"))
    check_numeric(s, "zscore", zero_division=s == 0)
    return restore_shape(obj, [ieee_divide(d, s) for d in deviations])


__all__ = [
    "sum",
    "product",
    "min",
    "max",
    "mean",
    "average",
    "median",
    "modes",
    "mode",
    "geometric_mean",
    "midrange",
    "variance",
    "std_deviation",
    "sigma",
    "mean_absolute_deviation",
    "zscore",
]
