"""
bettermath Preprocessing Module.

This module provides range rescaling of arrays:

    - scale: rescale onto an arbitrary [lower, upper]
    - scale01 / scale11 / scale100: presets for [0, 1], [-1, 1], [0, 100]

Example:
    >>> import bettermath.preprocessing as pp
    >>> pp.scale([1, 2, 5], 1, 100)
    [1.0, 25.75, 100.0]
"""

from bettermath.preprocessing.scale import (
    scale,
    scalemm,
    scale01,
    scale11,
    scale100,
    scale_unit,
    scale_symmetric,
    scale_percent,
)

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
