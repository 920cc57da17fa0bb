"""Sliding-window smoothing."""

from __future__ import annotations

from typing import Any

import numpy as np

from bettermath._errors import ieee_divide
from bettermath._typing import KeyInput, NumericInput, ensure_values, is_numpy_array


__all__ = ["moving_avg"]


def moving_avg(obj: NumericInput, window: int, key: KeyInput = None) -> Any:
    """Simple moving average over full windows.

    Each output element is the mean of ``window`` consecutive inputs; the
    window slides by one and incomplete trailing windows are dropped, so the
    output length is ``max(0, n - window + 1)``. A window smaller than 1
    yields no windows.

    Args:
        obj: Numbers, records, or a map of records.
        window: Window size.
        key: Field to read for records.

    Returns:
        List of window means (ndarray for numpy input).

    Example:
        >>> moving_avg([1, 2, 3, 4, 5], 3)
        [2.0, 3.0, 4.0]
    """
    values = ensure_values(obj, key)
    result = [
        ieee_divide(sum(values[end - window:end]), window)
        for end in range(window, len(values) + 1)
    ] if window >= 1 else []

    if is_numpy_array(obj):
        return np.asarray(result)
    return result
