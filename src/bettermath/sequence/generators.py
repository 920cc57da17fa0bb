"""
Sequence Generators.

Deterministic builders for number sequences: integer ranges and repetition.
"""

from __future__ import annotations

import builtins
import math
from typing import Any, List

from bettermath._typing import is_array


# =============================================================================
# Range
# =============================================================================

def range(stop: float, start: float = 1, step: float = 1) -> List[float]:
    """Build the half-open sequence start, start + step, ... below stop.

    Unlike the builtin ``range`` the default start is 1, so ``range(s)``
    counts from 1 to s - 1, and float bounds and steps are accepted. Only an
    omitted start means 1: an explicit ``start=0`` starts at 0.

    Algorithm:
        length = max(ceil((stop - start) / step), 0); elements are produced
        by repeatedly adding step to start.

    Args:
        stop: Exclusive upper bound.
        start: First element (default 1).
        step: Increment (default 1); a zero step counts as 1. Descending
            ranges are not supported.

    Returns:
        New list of length max(ceil((stop - start) / step), 0).

    Examples:
        >>> range(5)
        [1, 2, 3, 4]
        >>> range(10, 0, 3)
        [0, 3, 6, 9]
    """
    step = step or 1

    length = builtins.max(math.ceil((stop - start) / step), 0)
    result = []
    for _ in builtins.range(length):
        result.append(start)
        start += step
    return result


# =============================================================================
# Repetition
# =============================================================================

def repeat(value: Any, times: int) -> List[Any]:
    """Concatenate ``times`` copies of an array (a scalar counts as [value]).

    Examples:
        >>> repeat([1, 2], 3)
        [1, 2, 1, 2, 1, 2]
        >>> repeat(0, 3)
        [0, 0, 0]
    """
    items = list(value) if is_array(value) else [value]
    return items * builtins.max(int(times), 0)


def repeat_each(values: Any, each: int) -> List[Any]:
    """Expand every element into ``each`` consecutive copies, keeping order.

    Example:
        >>> repeat_each([1, 2], 3)
        [1, 1, 1, 2, 2, 2]
    """
    items = list(values) if is_array(values) else [values]
    count = builtins.max(int(each), 0)
    return [item for item in items for _ in builtins.range(count)]


__all__ = [
    "range",
    "repeat",
    "repeat_each",
]
