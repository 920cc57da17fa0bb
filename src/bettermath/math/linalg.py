"""Matrix and coordinate helpers.

A matrix is an array of m rows, each an array of exactly n numbers. Row
lengths are not validated.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from bettermath._errors import ieee_divide
from bettermath._typing import is_numpy_array


__all__ = ["transpose", "slope"]


def transpose(matrix: Sequence[Sequence[Any]]) -> List[List[Any]]:
    """Compute the transpose of a rectangular matrix.

    For an m x n input the result is n x m with
    ``result[x][y] == matrix[y][x]``.

    Args:
        matrix: Sequence of equal-length rows, or a 2-D numpy array.

    Returns:
        New list of lists (a transposed copy for numpy input). Ragged input
        gives an unspecified result.

    Example:
        >>> transpose([[1, 2, 3], [4, 5, 6]])
        [[1, 4], [2, 5], [3, 6]]
    """
    if is_numpy_array(matrix):
        return matrix.T.copy()

    trans: List[List[Any]] = []
    for row in matrix:
        for x, col in enumerate(row):
            if x >= len(trans):
                trans.append([])
            trans[x].append(col)
    return trans


def slope(a: Sequence[float], b: Sequence[float]) -> float:
    """Slope of the line through two (x, y) points.

    A vertical line gives +/-inf (or nan for identical points).

    Example:
        >>> slope([0, 0], [1, 2])
        2.0
    """
    return ieee_divide(a[1] - b[1], a[0] - b[0])
