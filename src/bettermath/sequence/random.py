"""
Random Values and Permutations.

Thin conveniences over the shared ``numpy.random.Generator`` held by the
configuration (``bettermath.config.rng``). Reseed it with
``bettermath.seed(n)`` for reproducible results. Not suitable for
cryptographic use.

Count Convention:
    Generators take an optional count n. Without it a single value is
    returned; with it a list of n independent draws.
"""

from __future__ import annotations

import logging
from typing import Any, List, MutableSequence, Optional, Sequence, Union

import numpy as np

from bettermath._config import get_config

logger = logging.getLogger("bettermath.random")


def _rng() -> np.random.Generator:
    return get_config().rng


def _draw(draw_one, n: Optional[int]) -> Union[Any, List[Any]]:
    if n is None:
        return draw_one()
    return [draw_one() for _ in range(int(n))]


# =============================================================================
# Scalar / Vector Generators
# =============================================================================

def random(n: Optional[int] = None) -> Union[float, List[float]]:
    """Uniform float(s) in [0, 1).

    Examples:
        >>> 0 <= random() < 1
        True
        >>> len(random(5))
        5
    """
    rng = _rng()
    return _draw(lambda: float(rng.random()), n)


def random_boolean(n: Optional[int] = None) -> Union[bool, List[bool]]:
    """True or False with equal probability."""
    rng = _rng()
    return _draw(lambda: bool(rng.random() < 0.5), n)


def random_direction(n: Optional[int] = None) -> Union[int, List[int]]:
    """-1 or 1 with equal probability."""
    rng = _rng()
    return _draw(lambda: 1 if rng.random() < 0.5 else -1, n)


def random_element(values: Sequence[Any], n: Optional[int] = None) -> Any:
    """Uniformly chosen element(s) of a non-empty array.

    Raises:
        IndexError: If values is empty.
    """
    if len(values) == 0:
        raise IndexError("cannot choose from an empty sequence")
    rng = _rng()
    return _draw(lambda: values[int(rng.random() * len(values))], n)


# =============================================================================
# Permutations
# =============================================================================

def shuffle(values: MutableSequence[Any]) -> MutableSequence[Any]:
    """Shuffle an array in place with the Fisher-Yates algorithm.

    Every one of the n! orderings is equally likely given a uniform random
    source. The argument is mutated; use ``shuffled`` for a copy.

    Algorithm:
        For i from n - 1 down to 1, swap values[i] with values[j] for a
        uniform j in [0, i].

    Time Complexity:
        O(n).

    Args:
        values: Mutable sequence (list or 1-D numpy array).

    Returns:
        The same object, shuffled.
    """
    rng = _rng()
    logger.debug(f"Shuffling {len(values)} elements in place")
    for i in range(len(values) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        values[i], values[j] = values[j], values[i]
    return values


def shuffled(values: Sequence[Any]) -> List[Any]:
    """Return a shuffled copy, leaving the argument untouched."""
    return shuffle(list(values))


__all__ = [
    "random",
    "random_boolean",
    "random_direction",
    "random_element",
    "shuffle",
    "shuffled",
]
