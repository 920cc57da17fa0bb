"""
Range Rescaling.

This module rescales arrays linearly onto a target interval [lower, upper],
mapping the smallest element to lower and the largest to upper.

Rescaling is useful for:
    - Normalizing features to [0, 1] before comparison
    - Centering signals on [-1, 1]
    - Expressing values as percentages of the observed range

Rescaling preserves the ratios between distances of elements, not the
ratios between the raw values.
"""

from __future__ import annotations

from typing import Any

from bettermath._errors import check_numeric, ieee_divide
from bettermath._typing import KeyInput, NumericInput, ensure_values, restore_shape


# =============================================================================
# Scale
# =============================================================================

def scale(
    obj: NumericInput,
    lower: float = 0,
    upper: float = 1,
    key: KeyInput = None,
) -> Any:
    """Linearly rescale an array onto [lower, upper].

    Mathematical Definition:
        With lo = min(arr) and hi = max(arr):

            result[i] = (arr[i] - lo) / (hi - lo) * (upper - lower) + lower

    Degenerate Input:
        When every element is equal (hi == lo) the division is 0 / 0 and
        every result is nan. Under the RAISE numeric policy a
        BetterMathError is raised instead.

    Time Complexity:
        O(n).

    Args:
        obj: Numbers, records, or a map of records.
        lower: Target lower bound (default 0).
        upper: Target upper bound (default 1).
        key: Field to read for records.

    Returns:
        Rescaled values with the shape of the input (list, or ndarray for
        numpy input).

    Examples:
        >>> scale([0, 2, 5, 10])
        [0.0, 0.2, 0.5, 1.0]
        >>> scale([1, 2, 5], 1, 100)
        [1.0, 25.75, 100.0]

    See Also:
        scale01, scale11, scale100: Presets for common intervals.
    """
    values = ensure_values(obj, key)
    lo = min(values, default=0)
    old_range = max(values, default=0) - lo
    new_range = upper - lower
    check_numeric(old_range, "scale", zero_division=old_range == 0 and len(values) > 0)

    return restore_shape(
        obj,
        [ieee_divide(x - lo, old_range) * new_range + lower for x in values],
    )


scalemm = scale


# =============================================================================
# Presets
# =============================================================================

def scale01(obj: NumericInput, key: KeyInput = None) -> Any:
    """Rescale onto [0, 1].

    Example:
        >>> scale01([1, 2, 5])
        [0.0, 0.25, 1.0]
    """
    return scale(obj, 0, 1, key=key)


def scale11(obj: NumericInput, key: KeyInput = None) -> Any:
    """Rescale onto [-1, 1]."""
    return scale(obj, -1, 1, key=key)


def scale100(obj: NumericInput, key: KeyInput = None) -> Any:
    """Rescale onto [0, 100]."""
    return scale(obj, 0, 100, key=key)


scale_unit = scale01
scale_symmetric = scale11
scale_percent = scale100


__all__ = [
    "scale",
    "scalemm",
    "scale01",
    "scale11",
    "scale100",
    "scale_unit",
    "scale_symmetric",
    "scale_percent",
]
