"""
Host Namespace Integration

Merges the toolkit's operations into a namespace owned by the host
program, so code written against a single flat "math-like" object can call
``ns.mean(...)``, ``ns.is_prime(...)`` and friends directly.

Loading bettermath never touches any namespace. The merge happens only when
the host asks for it, and it can be undone.

Supported targets:
1. Modules: ``install(my_module)`` sets module attributes
2. Classes and plain objects: attributes are set with ``setattr``
3. Dictionaries: entries are inserted (e.g. a ``globals()`` dict)

Safety:
- Originals are recorded per namespace and restored by ``uninstall``
- ``overwrite=False`` keeps every existing name untouched
- Can be disabled via environment variable
- Each installation holds a strong reference to its namespace until
  ``uninstall`` is called

Usage:
    import types
    from bettermath import hooks

    ns = types.SimpleNamespace()
    hooks.install(ns)
    ns.mean([1, 2, 3])   # 2.0
    hooks.uninstall(ns)

    # Disable if needed
    import os
    os.environ['BETTERMATH_NO_HOOKS'] = '1'
"""

import os
import logging
import types
from collections.abc import MutableMapping
from typing import Any, Callable, Dict, Iterable, List, Optional

logger = logging.getLogger("bettermath.hooks")

# Marks a name that did not exist in the namespace before install
_MISSING = object()


# =============================================================================
# Feature Flags
# =============================================================================

def _is_enabled() -> bool:
    """Check if hooks are enabled (default: True)."""
    return os.environ.get('BETTERMATH_NO_HOOKS', '').lower() not in ('1', 'true', 'yes')


# =============================================================================
# Export Table
# =============================================================================

def exports() -> Dict[str, Callable]:
    """
    Collect every public operation by name, aliases included.

    Returns:
        New dictionary mapping names to functions

    Example:
        >>> from bettermath import hooks
        >>> 'zscore' in hooks.exports()
        True
    """
    # Lazy import (bettermath imports this module)
    from bettermath import math, statistics, preprocessing, sequence
    from bettermath import _typing

    table: Dict[str, Callable] = {}
    for name in ('is_array', 'is_object', 'is_number', 'pluck'):
        table[name] = getattr(_typing, name)
    for module in (math, statistics, preprocessing, sequence):
        for name in module.__all__:
            table[name] = getattr(module, name)
    return table


# =============================================================================
# Namespace Access
# =============================================================================

def _get(namespace: Any, name: str) -> Any:
    if isinstance(namespace, MutableMapping):
        return namespace.get(name, _MISSING)
    return getattr(namespace, name, _MISSING)


def _set(namespace: Any, name: str, value: Any):
    if isinstance(namespace, MutableMapping):
        namespace[name] = value
    else:
        setattr(namespace, name, value)


def _delete(namespace: Any, name: str):
    if isinstance(namespace, MutableMapping):
        namespace.pop(name, None)
    elif hasattr(namespace, name):
        delattr(namespace, name)


def _describe(namespace: Any) -> str:
    if isinstance(namespace, types.ModuleType):
        return f"module {namespace.__name__}"
    if isinstance(namespace, type):
        return f"class {namespace.__name__}"
    return f"{type(namespace).__name__} at {id(namespace):#x}"


# =============================================================================
# Hook State Tracking
# =============================================================================

class _Installation:
    """Record of one merge: the target and what it held before."""

    def __init__(self, namespace: Any):
        self.namespace = namespace
        self.originals: Dict[str, Any] = {}
        self.skipped: List[str] = []


# id(namespace) -> installation; entries keep the namespace alive until uninstall
_installations: Dict[int, _Installation] = {}


def is_installed(namespace: Any) -> bool:
    """Check if hooks have been installed into ``namespace``."""
    record = _installations.get(id(namespace))
    return record is not None and record.namespace is namespace


# =============================================================================
# Main Install Function
# =============================================================================

def install(
    namespace: Any,
    *,
    overwrite: bool = True,
    names: Optional[Iterable[str]] = None,
) -> bool:
    """
    Merge the toolkit's operations into a host namespace.

    This function is idempotent per namespace - calling it twice on the same
    target is a no-op.

    Args:
        namespace: Module, class, object or dict to merge into
        overwrite: If False, names already present in the namespace are kept
        names: Restrict the merge to these names (default: every export)

    Returns:
        True if the namespace was modified by this call

    Raises:
        KeyError: If ``names`` contains a name that is not exported

    Example:
        >>> import types
        >>> from bettermath import hooks
        >>> ns = types.SimpleNamespace()
        >>> hooks.install(ns, names=['mean'])
        True
        >>> ns.mean([1, 2, 3])
        2.0
    """
    if is_installed(namespace):
        logger.debug(f"bettermath hooks already installed into {_describe(namespace)}, skipping")
        return False

    if not _is_enabled():
        logger.info("bettermath hooks disabled via BETTERMATH_NO_HOOKS environment variable")
        return False

    table = exports()
    if names is not None:
        missing = [name for name in names if name not in table]
        if missing:
            raise KeyError(f"Not exported by bettermath: {', '.join(missing)}")
        table = {name: table[name] for name in names}

    record = _Installation(namespace)
    for name, func in table.items():
        original = _get(namespace, name)
        if original is not _MISSING and not overwrite:
            record.skipped.append(name)
            continue
        record.originals[name] = original
        _set(namespace, name, func)

    _installations[id(namespace)] = record
    logger.debug(
        f"Installed {len(record.originals)} bettermath functions into "
        f"{_describe(namespace)} ({len(record.skipped)} existing names kept)"
    )
    return True


# =============================================================================
# Uninstall Support
# =============================================================================

def uninstall(namespace: Any) -> bool:
    """
    Undo ``install``: restore replaced names and remove added ones.

    Names the host rebound after ``install`` are left alone.

    Returns:
        True if an installation was removed
    """
    if not is_installed(namespace):
        logger.debug(f"No bettermath hooks to uninstall from {_describe(namespace)}")
        return False

    record = _installations.pop(id(namespace))
    table = exports()
    for name, original in record.originals.items():
        if _get(namespace, name) is not table.get(name):
            continue
        if original is _MISSING:
            _delete(namespace, name)
        else:
            _set(namespace, name, original)

    logger.debug(f"bettermath hooks uninstalled from {_describe(namespace)}")
    return True


# =============================================================================
# Inspection and Debugging
# =============================================================================

def status() -> dict:
    """
    Get current hook status.

    Returns:
        Dictionary with hook installation status

    Example:
        >>> from bettermath import hooks
        >>> hooks.status()['hooks_enabled']
        True
    """
    return {
        'hooks_enabled': _is_enabled(),
        'exported': len(exports()),
        'installations': [
            {
                'namespace': _describe(record.namespace),
                'installed': sorted(record.originals),
                'kept': sorted(record.skipped),
            }
            for record in _installations.values()
        ],
    }


def as_namespace() -> types.SimpleNamespace:
    """
    Build a fresh namespace object holding every export.

    Nothing is recorded, so there is nothing to uninstall.

    Example:
        >>> from bettermath import hooks
        >>> bm = hooks.as_namespace()
        >>> bm.is_even([4, 501])
        [True, False]
    """
    return types.SimpleNamespace(**exports())


__all__ = [
    "exports",
    "install",
    "uninstall",
    "is_installed",
    "status",
    "as_namespace",
]
