"""
bettermath Type Definitions and Dispatch.

This module provides type aliases, input classification and the dispatch
helpers shared by every public operation. It enables transparent handling of:

    - Plain numbers (int, float, numpy scalars)
    - Sequences of numbers (list, tuple, numpy.ndarray)
    - Sequences of records (dicts) with a named field
    - Maps of name -> record
    - numpy structured arrays (one field per record key)

The shape decision is made once by ``classify``; mappers are then built with
the ``elementwise`` decorator and reducers start from ``pluck``.

Example:
    >>> from bettermath._typing import elementwise
    >>>
    >>> @elementwise
    ... def double(x):
    ...     return x * 2
    >>>
    >>> double(3)
    6
    >>> double([{"a": 1}, {"a": 2}], key="a")
    [2, 4]
"""

from __future__ import annotations

import functools
import inspect
import numbers
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Callable, List, Optional, TypeVar, Union

import numpy as np


# =============================================================================
# Type Variables and Aliases
# =============================================================================

T = TypeVar("T")

Scalar = Union[int, float]
Record = Mapping
NumericSequence = List[float]

# Anything a polymorphic function accepts
NumericInput = Union[
    Scalar,
    Sequence,
    "np.ndarray",
    Mapping,
]

KeyInput = Optional[str]


class InputKind(Enum):
    """Closed set of input shapes recognized by the dispatch layer."""
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    RECORD_SEQUENCE = "record_sequence"


# =============================================================================
# Format Detection
# =============================================================================

def is_number(obj: Any) -> bool:
    """Check if object is a plain real number.

    Booleans are not numbers; numpy scalars are.

    Args:
        obj: Object to check.

    Returns:
        True if obj is a real number.
    """
    return isinstance(obj, numbers.Real) and not isinstance(obj, (bool, np.bool_))


def is_numpy_array(obj: Any) -> bool:
    """Check if object is a numpy ndarray."""
    return isinstance(obj, np.ndarray)


def is_structured_array(obj: Any) -> bool:
    """Check if object is a numpy structured array (has named fields)."""
    return is_numpy_array(obj) and obj.dtype.names is not None


def is_array(obj: Any) -> bool:
    """Check if object is array-shaped.

    Lists, tuples, other sequences and numpy arrays are arrays; strings and
    bytes are not.

    Args:
        obj: Object to check.

    Returns:
        True if obj is array-shaped.
    """
    if is_numpy_array(obj):
        return obj.ndim > 0
    if isinstance(obj, (str, bytes, bytearray)):
        return False
    return isinstance(obj, Sequence)


def is_object(obj: Any) -> bool:
    """Check if object is record-shaped.

    Returns False for arrays and None; True only for mappings.
    """
    return isinstance(obj, Mapping)


def get_format(obj: Any) -> str:
    """Detect the container format of an input.

    Args:
        obj: Input object.

    Returns:
        Format string: 'scalar', 'numpy', 'sequence', 'mapping' or 'unknown'.
    """
    if is_number(obj):
        return "scalar"
    elif is_numpy_array(obj):
        return "numpy" if obj.ndim > 0 else "scalar"
    elif is_array(obj):
        return "sequence"
    elif is_object(obj):
        return "mapping"
    else:
        return "unknown"


def _first(obj: Any) -> Any:
    if is_object(obj):
        return next(iter(obj.values()), None)
    return obj[0] if len(obj) > 0 else None


def classify(obj: Any) -> InputKind:
    """Resolve the input shape used for dispatch.

    The array check comes before the element check: an empty array is a
    SEQUENCE, an array whose first element is a record is a RECORD_SEQUENCE.
    A map of name -> record and a structured numpy array are both
    RECORD_SEQUENCE. Everything else is a SCALAR and is passed through.

    Args:
        obj: Input object.

    Returns:
        The InputKind of obj.
    """
    fmt = get_format(obj)

    if fmt == "numpy":
        if is_structured_array(obj):
            return InputKind.RECORD_SEQUENCE
        return InputKind.SEQUENCE

    if fmt == "sequence":
        return InputKind.RECORD_SEQUENCE if is_object(_first(obj)) else InputKind.SEQUENCE

    if fmt == "mapping":
        return InputKind.RECORD_SEQUENCE

    return InputKind.SCALAR


# =============================================================================
# Normalization
# =============================================================================

def _resolve_key(key: KeyInput) -> str:
    if key:
        return key
    from bettermath._config import get_config
    return get_config().default_key


def pluck(obj: NumericInput, key: KeyInput = None) -> Any:
    """Normalize an input into a flat list of numbers.

    - A scalar is returned unchanged (not wrapped).
    - An array of numbers is copied into a new list; key is ignored.
    - An array of records yields one value per record, read from key
      (defaults to the configured default key, "value").
    - A map of name -> record is treated as the array of its values.
    - A map of name -> number yields its values.

    The input is never mutated.

    Args:
        obj: Input value.
        key: Field to extract from records.

    Returns:
        New list of numbers, or obj itself for scalars.

    Raises:
        KeyError: If a record lacks the requested field.

    Examples:
        >>> pluck(4)
        4
        >>> pluck([1, 2, 3])
        [1, 2, 3]
        >>> pluck([{"a": 1}, {"a": 2}], "a")
        [1, 2]
        >>> pluck({"one": {"a": 1}, "two": {"a": 2}}, "a")
        [1, 2]
    """
    fmt = get_format(obj)

    if fmt == "numpy":
        if is_structured_array(obj):
            return obj[_resolve_key(key)].ravel().tolist()
        return obj.ravel().tolist()

    if fmt == "mapping":
        obj = list(obj.values())
    elif fmt != "sequence":
        return obj

    if classify(obj) is InputKind.SEQUENCE:
        return list(obj)

    field = _resolve_key(key)
    return [record[field] for record in obj]


def ensure_values(obj: NumericInput, key: KeyInput = None) -> NumericSequence:
    """Like pluck, but always returns a list (scalars become one element)."""
    values = pluck(obj, key)
    if classify(obj) is InputKind.SCALAR:
        return [values]
    return values


def restore_shape(original: Any, results: List[Any]) -> Any:
    """Give element-wise results the container shape of the original input.

    - scalar input -> the single result
    - numpy input -> ndarray (original shape for plain arrays)
    - anything else, or nested list results -> list
    """
    fmt = get_format(original)

    if fmt == "numpy" and not any(isinstance(r, list) for r in results):
        arr = np.asarray(results)
        if not is_structured_array(original) and arr.ndim == 1 and arr.size == original.size:
            return arr.reshape(original.shape)
        return arr

    if classify(original) is InputKind.SCALAR:
        return results[0]

    return results


# =============================================================================
# Dispatch
# =============================================================================

def map_values(
    obj: NumericInput,
    kernel: Callable[..., T],
    *params: Any,
    key: KeyInput = None,
    **kwargs: Any,
) -> Any:
    """Apply a scalar kernel to a scalar or to every plucked element.

    Args:
        obj: Input value.
        kernel: Function of (x, *params) computing one result.
        *params: Extra scalar parameters passed to every call.
        key: Field to extract from records.
        **kwargs: Keyword arguments passed to every call.

    Returns:
        Kernel result for scalars; same-shaped container otherwise.
    """
    if classify(obj) is InputKind.SCALAR:
        return kernel(obj, *params, **kwargs)
    return restore_shape(obj, [kernel(x, *params, **kwargs) for x in pluck(obj, key)])


def _required_params(func: Callable) -> int:
    """Count positional parameters after the first one."""
    params = list(inspect.signature(func).parameters.values())[1:]
    return sum(
        1 for p in params
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        and p.default is p.empty
    )


def elementwise(kernel: Callable[..., T]) -> Callable[..., Any]:
    """Decorator turning a scalar kernel into a polymorphic mapper.

    The wrapped function accepts ``(value, *params, key=None)``. The key may
    also be given positionally right after the kernel's required parameters,
    so ``square(records, "a")`` and ``pow(records, 2, "a")`` both work.

    Args:
        kernel: Function of (x, *params) for one scalar.

    Returns:
        Function dispatching on the input shape.

    Example:
        >>> @elementwise
        ... def add(x, operand):
        ...     return x + operand
        >>> add([1, 2], 10)
        [11, 12]
    """
    n_params = _required_params(kernel)

    @functools.wraps(kernel)
    def wrapper(value: NumericInput, *params: Any, key: KeyInput = None, **kwargs: Any):
        if key is None and len(params) == n_params + 1 and isinstance(params[-1], str):
            key = params[-1]
            params = params[:-1]
        return map_values(value, kernel, *params, key=key, **kwargs)

    wrapper.kernel = kernel
    return wrapper


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Type variables and aliases
    "T",
    "Scalar",
    "Record",
    "NumericSequence",
    "NumericInput",
    "KeyInput",
    "InputKind",
    # Detection functions
    "is_number",
    "is_numpy_array",
    "is_structured_array",
    "is_array",
    "is_object",
    "get_format",
    "classify",
    # Normalization
    "pluck",
    "ensure_values",
    "restore_shape",
    # Dispatch
    "map_values",
    "elementwise",
]
