"""
bettermath - Polymorphic Numeric Toolkit

Math, number theory and statistics helpers that accept the same inputs
everywhere:
- A single number
- An array of numbers (list, tuple, numpy.ndarray)
- An array of records plus a key (default "value")
- A map of name -> record plus a key

Modules:
- math: element-wise transforms, number theory, transpose and slope
- statistics: descriptive statistics, Wilson interval, moving average
- preprocessing: range rescaling
- sequence: range/repeat builders, random draws, ordering
- hooks: opt-in merge of every function into a host namespace

Architecture:
    ┌──────────────────────────────────────────────┐
    │   pluck / classify  (bettermath._typing)     │
    ├──────────────────────────────────────────────┤
    │  Mappers: elementwise   Reducers: pluck+fold │
    │  Policy: PROPAGATE | RAISE  (config.compute) │
    └──────────────────────────────────────────────┘

Example:
    >>> import bettermath as bm
    >>>
    >>> bm.is_even([4, 501])
    [True, False]
    >>> bm.sum([{"a": 1}, {"a": 2, "b": 5}, {"a": 3}], "a")
    6
    >>> bm.scale([1, 2, 5], 1, 100)
    [1.0, 25.75, 100.0]
"""

__version__ = '0.3.0'

# Import main modules
from . import math
from . import statistics
from . import preprocessing
from . import sequence
from . import _hooks as hooks

# Configuration and errors
from ._config import (
    NumericPolicy,
    PluckConfig,
    ComputeConfig,
    RandomConfig,
    BetterMathConfig,
    config,
    get_config,
    seed,
)
from ._errors import BetterMathError

# Helpers
from ._typing import (
    InputKind,
    classify,
    is_array,
    is_object,
    is_number,
    pluck,
)

# Re-export every operation at the top level
from .math import *  # noqa: F401,F403
from .statistics import *  # noqa: F401,F403
from .preprocessing import *  # noqa: F401,F403
from .sequence import *  # noqa: F401,F403

__all__ = [
    # Version
    '__version__',

    # Modules
    'math',
    'statistics',
    'preprocessing',
    'sequence',
    'hooks',

    # Configuration
    'NumericPolicy',
    'PluckConfig',
    'ComputeConfig',
    'RandomConfig',
    'BetterMathConfig',
    'config',
    'get_config',
    'seed',

    # Errors
    'BetterMathError',

    # Helpers
    'InputKind',
    'classify',
    'is_array',
    'is_object',
    'is_number',
    'pluck',
]
__all__ += math.__all__
__all__ += statistics.__all__
__all__ += preprocessing.__all__
__all__ += [name for name in sequence.__all__ if name not in __all__]
