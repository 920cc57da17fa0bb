"""
bettermath Sequence Module.

Builders, random draws and ordering helpers for arrays:

    - range / repeat / repeat_each: deterministic generators
    - random, random_boolean, random_direction, random_element: draws from
      the shared generator (reseed with ``bettermath.seed``)
    - shuffle / shuffled: Fisher-Yates permutation, in place or on a copy
    - sorted_copy / sort_inplace: numeric ordering
"""

from bettermath.sequence.generators import (
    range,
    repeat,
    repeat_each,
)

from bettermath.sequence.random import (
    random,
    random_boolean,
    random_direction,
    random_element,
    shuffle,
    shuffled,
)

from bettermath.sequence.ordering import (
    sorted_copy,
    sort_inplace,
    sort,
)

from bettermath._config import seed

__all__ = [
    # Generators
    "range",
    "repeat",
    "repeat_each",
    # Random
    "random",
    "random_boolean",
    "random_direction",
    "random_element",
    "shuffle",
    "shuffled",
    "seed",
    # Ordering
    "sorted_copy",
    "sort_inplace",
    "sort",
]
