"""
Ordering.

Numeric sorting with explicit copy-versus-mutate entry points. Elements are
compared as numbers, never as strings, so [10, 9, 1] sorts to [1, 9, 10].
"""

from __future__ import annotations

from typing import Any, Callable, List, MutableSequence, Optional, Sequence

from bettermath._typing import is_numpy_array


def sorted_copy(
    values: Sequence[Any],
    reverse: bool = False,
    key: Optional[Callable[[Any], Any]] = None,
) -> List[Any]:
    """Return a new ascending (or descending) list; the input is untouched.

    Examples:
        >>> sorted_copy([3, 10, 1])
        [1, 3, 10]
        >>> sorted_copy([3, 10, 1], reverse=True)
        [10, 3, 1]
    """
    return sorted(values, key=key, reverse=reverse)


def sort_inplace(values: MutableSequence[Any], reverse: bool = False) -> MutableSequence[Any]:
    """Sort a list (or 1-D numpy array) in place and return it."""
    if is_numpy_array(values):
        # ndarray.sort has no reverse flag
        values.sort()
        if reverse:
            values[:] = values[::-1].copy()
        return values
    values.sort(reverse=reverse)
    return values


sort = sorted_copy


__all__ = [
    "sorted_copy",
    "sort_inplace",
    "sort",
]
