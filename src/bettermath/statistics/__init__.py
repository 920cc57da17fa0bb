"""
bettermath Statistics Module.

This module provides statistical reducers over arrays of numbers, including:

    - Descriptive statistics (sum, product, mean, median, modes, variance,
      standard deviation, z-scores, ...)
    - Wilson score interval for binomial proportions
    - Moving average

Every function accepts a list of numbers, a numpy array, a list of records
with a key, or a map of name -> record with a key.

Example:
    >>> import bettermath.statistics as stats
    >>>
    >>> stats.mean([1, 2, 3])
    2.0
    >>> stats.sum([{"a": 1}, {"a": 2, "b": 5}, {"a": 3}], "a")
    6
"""

from bettermath.statistics.descriptive import (
    sum,
    product,
    min,
    max,
    mean,
    average,
    median,
    modes,
    mode,
    geometric_mean,
    midrange,
    variance,
    std_deviation,
    sigma,
    mean_absolute_deviation,
    zscore,
)

from bettermath.statistics.intervals import (
    wilson,
    wilson_counts,
    wilson_z,
)

from bettermath.statistics.smoothing import (
    moving_avg,
)

__all__ = [
    # Descriptive
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
    # Intervals
    "wilson",
    "wilson_counts",
    "wilson_z",
    # Smoothing
    "moving_avg",
]
