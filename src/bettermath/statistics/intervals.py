"""
Confidence Intervals for Proportions.

Implements the Wilson score interval, a binomial proportion estimator that
behaves better than the normal approximation for small samples and for
proportions near 0 or 1. Commonly used to rank items by the share of
positive votes.
"""

from __future__ import annotations

import math
from typing import Optional

from bettermath._typing import KeyInput, NumericInput, ensure_values


def wilson_z(confidence: float) -> float:
    """One-sided z value for a confidence level.

    Uses the inverse CDF of the standard normal distribution
    (``scipy.stats.norm.ppf``).

    Args:
        confidence: Confidence level in (0, 1).

    Returns:
        z such that P(Z <= z) == confidence.

    Raises:
        ValueError: If confidence is not in (0, 1).

    Example:
        >>> round(wilson_z(0.95), 6)
        1.644854
    """
    from scipy import stats

    if not 0 < confidence < 1:
        raise ValueError(f"confidence must be in (0, 1), got {confidence}")
    return float(stats.norm.ppf(confidence))


def _resolve_z(z: Optional[float], confidence: Optional[float]) -> float:
    if z is not None:
        return z
    if confidence is not None:
        return wilson_z(confidence)
    from bettermath._config import get_config
    return get_config().compute.wilson_z


def wilson_counts(
    successes: float,
    total: float,
    z: Optional[float] = None,
    *,
    confidence: Optional[float] = None,
) -> float:
    """Lower bound of the Wilson score interval from counts.

    Mathematical Definition:
        With p = successes / n:

            (p + z^2/2n - z * sqrt((p(1 - p) + z^2/4n) / n)) / (1 + z^2/n)

    Args:
        successes: Number of positive outcomes.
        total: Number of trials n.
        z: Normal quantile. Defaults to the configured value (1.644853, a
            one-sided 95% bound).
        confidence: Alternative to z; converted with ``wilson_z``.

    Returns:
        The lower bound, or 0 when total <= 0 or successes > total.

    Examples:
        >>> wilson_counts(0, 0)
        0
        >>> round(wilson_counts(5, 10), 4)
        0.2693
    """
    if total <= 0 or successes > total:
        return 0

    z = _resolve_z(z, confidence)
    p = successes / total
    z2 = z * z
    spread = z * math.sqrt((p * (1 - p) + z2 / (4 * total)) / total)
    return (p + z2 / (2 * total) - spread) / (1 + z2 / total)


def wilson(
    obj: NumericInput,
    z: Optional[float] = None,
    *,
    confidence: Optional[float] = None,
    key: KeyInput = None,
) -> float:
    """Wilson score lower bound for an array of boolean outcomes.

    Successes are the truthy entries, the total is the array length.

    Args:
        obj: Booleans (or 0/1), or records holding them under key.
        z: Normal quantile (default from configuration).
        confidence: Alternative to z.
        key: Field to read for records.

    Returns:
        The lower bound; 0 for an empty input.

    Example:
        >>> wilson([True, True, False]) > 0
        True
    """
    values = ensure_values(obj, key)
    successes = len([v for v in values if v])
    return wilson_counts(successes, len(values), z, confidence=confidence)


__all__ = [
    "wilson",
    "wilson_counts",
    "wilson_z",
]
