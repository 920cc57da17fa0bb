"""
bettermath Config - Global Configuration System

Provides property-based configuration for the toolkit. Allows control over
computation behavior without modifying function signatures:

- Default field key used when plucking records
- Numeric policy for division by zero and non-finite results
- Default z value of the Wilson score interval
- Seed of the shared random source
"""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Dict, List, Optional

import numpy as np

logger = logging.getLogger("bettermath.config")


# =============================================================================
# Strategy Enumerations
# =============================================================================

class NumericPolicy(IntEnum):
    """
    Policy for results produced by division by zero or non-finite values.
    """
    PROPAGATE = 0      # Return nan / inf like IEEE arithmetic
    RAISE = 1          # Raise BetterMathError

    @classmethod
    def parse(cls, value: Any) -> "NumericPolicy":
        """Parse a policy from its name, its value or an instance."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(
                    f"Unknown numeric policy: {value!r}. "
                    f"Expected one of: {', '.join(p.name.lower() for p in cls)}"
                ) from None
        return cls(value)


# =============================================================================
# Configuration Classes
# =============================================================================

# z for a one-sided 95% confidence bound
DEFAULT_WILSON_Z = 1.644853


@dataclass
class PluckConfig:
    """Configuration for record extraction."""
    default_key: str = "value"


@dataclass
class ComputeConfig:
    """Configuration for compute operations."""
    numeric_policy: NumericPolicy = NumericPolicy.PROPAGATE
    wilson_z: float = DEFAULT_WILSON_Z


@dataclass
class RandomConfig:
    """Configuration for the shared random source."""
    seed: Optional[int] = None


def _from_environ() -> Dict[str, Any]:
    """Read configuration overrides from BETTERMATH_* environment variables."""
    pluck = PluckConfig()
    compute = ComputeConfig()
    random = RandomConfig()

    key = os.environ.get("BETTERMATH_DEFAULT_KEY")
    if key:
        pluck.default_key = key

    policy = os.environ.get("BETTERMATH_NUMERIC_POLICY")
    if policy:
        compute.numeric_policy = NumericPolicy.parse(policy)

    z = os.environ.get("BETTERMATH_WILSON_Z")
    if z:
        compute.wilson_z = float(z)

    seed = os.environ.get("BETTERMATH_SEED")
    if seed:
        random.seed = int(seed)

    return {"pluck": pluck, "compute": compute, "random": random}


# =============================================================================
# Global Configuration Manager
# =============================================================================

class BetterMathConfig:
    """
    Global configuration manager for bettermath.

    Provides thread-local configuration with context manager support.
    Configuration can be set globally or locally within a context.

    Example:
        # Global configuration
        bettermath.config.pluck = PluckConfig(default_key="price")

        # Local configuration (context manager)
        with bettermath.config.local(compute=ComputeConfig(numeric_policy=NumericPolicy.RAISE)):
            bettermath.mean([])  # raises BetterMathError
        # Back to global config
    """

    def __init__(self, environ: bool = True):
        defaults = _from_environ() if environ else {}
        self._global_pluck: PluckConfig = defaults.get("pluck", PluckConfig())
        self._global_compute: ComputeConfig = defaults.get("compute", ComputeConfig())
        self._global_random: RandomConfig = defaults.get("random", RandomConfig())
        self._global_rng = np.random.default_rng(self._global_random.seed)

        # Thread-local storage for context overrides
        self._local = threading.local()

        # Callbacks for config changes
        self._callbacks: Dict[str, List[Callable]] = {
            "pluck": [],
            "compute": [],
            "random": [],
        }
        self.on_change("random", self._reseed)

    # -------------------------------------------------------------------------
    # Property Accessors (with thread-local override support)
    # -------------------------------------------------------------------------

    @property
    def pluck(self) -> PluckConfig:
        """Get pluck configuration."""
        if getattr(self._local, "pluck", None) is not None:
            return self._local.pluck
        return self._global_pluck

    @pluck.setter
    def pluck(self, value: PluckConfig):
        """Set global pluck configuration."""
        self._global_pluck = value
        self._notify("pluck", value)

    @property
    def compute(self) -> ComputeConfig:
        """Get compute configuration."""
        if getattr(self._local, "compute", None) is not None:
            return self._local.compute
        return self._global_compute

    @compute.setter
    def compute(self, value: ComputeConfig):
        """Set global compute configuration."""
        self._global_compute = value
        self._notify("compute", value)

    @property
    def random(self) -> RandomConfig:
        """Get random configuration."""
        if getattr(self._local, "random", None) is not None:
            return self._local.random
        return self._global_random

    @random.setter
    def random(self, value: RandomConfig):
        """Set global random configuration (reseeds the shared generator)."""
        self._global_random = value
        self._notify("random", value)

    @property
    def rng(self) -> np.random.Generator:
        """The random generator in effect for the current thread."""
        if getattr(self._local, "rng", None) is not None:
            return self._local.rng
        return self._global_rng

    # -------------------------------------------------------------------------
    # Convenience Properties
    # -------------------------------------------------------------------------

    @property
    def default_key(self) -> str:
        """Field name plucked from records when no key is given."""
        return self.pluck.default_key

    @default_key.setter
    def default_key(self, value: str):
        self._global_pluck.default_key = value

    @property
    def numeric_policy(self) -> NumericPolicy:
        """Policy for division by zero and non-finite results."""
        return self.compute.numeric_policy

    @numeric_policy.setter
    def numeric_policy(self, value: Any):
        self._global_compute.numeric_policy = NumericPolicy.parse(value)

    # -------------------------------------------------------------------------
    # Context Manager Support
    # -------------------------------------------------------------------------

    def local(self, **kwargs) -> "_LocalConfigContext":
        """
        Create a local configuration context.

        Args:
            **kwargs: Configuration overrides (pluck, compute, random)

        Returns:
            Context manager
        """
        unknown = set(kwargs) - set(self._callbacks)
        if unknown:
            raise ValueError(f"Unknown configuration sections: {sorted(unknown)}")
        return _LocalConfigContext(self, **kwargs)

    def _set_local(self, **kwargs) -> Dict[str, Any]:
        """Set thread-local configuration and return the overrides it replaced."""
        saved = {}
        for key, value in kwargs.items():
            if value is not None:
                saved[key] = getattr(self._local, key, None)
                setattr(self._local, key, value)
                if key == "random":
                    saved["rng"] = getattr(self._local, "rng", None)
                    self._local.rng = np.random.default_rng(value.seed)
        return saved

    def _restore_local(self, saved: Dict[str, Any]):
        """Put back the thread-local values captured by _set_local."""
        for key, value in saved.items():
            setattr(self._local, key, value)

    # -------------------------------------------------------------------------
    # Callback Registration
    # -------------------------------------------------------------------------

    def on_change(self, config_name: str, callback: Callable):
        """
        Register callback for configuration changes.

        Args:
            config_name: Name of config ("pluck", "compute", "random")
            callback: Function to call when config changes
        """
        if config_name in self._callbacks:
            self._callbacks[config_name].append(callback)

    def _notify(self, config_name: str, value: Any):
        """Notify callbacks of configuration change."""
        for callback in self._callbacks.get(config_name, []):
            try:
                callback(value)
            except Exception as e:
                logger.warning(f"Config callback for '{config_name}' failed: {e}")

    def _reseed(self, value: RandomConfig):
        self._global_rng = np.random.default_rng(value.seed)
        logger.debug(f"Reseeded shared random generator (seed={value.seed})")

    # -------------------------------------------------------------------------
    # Reset
    # -------------------------------------------------------------------------

    def reset(self):
        """Reset all configurations to defaults."""
        self._global_pluck = PluckConfig()
        self._global_compute = ComputeConfig()
        self.random = RandomConfig()

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary."""
        return {
            "pluck": {
                "default_key": self.pluck.default_key,
            },
            "compute": {
                "numeric_policy": self.compute.numeric_policy.name,
                "wilson_z": self.compute.wilson_z,
            },
            "random": {
                "seed": self.random.seed,
            },
        }

    def __repr__(self) -> str:
        return f"BetterMathConfig({self.to_dict()})"


class _LocalConfigContext:
    """Context manager for local configuration override."""

    def __init__(self, config: BetterMathConfig, **kwargs):
        self._config = config
        self._kwargs = kwargs
        self._saved: Dict[str, Any] = {}

    def __enter__(self):
        self._saved = self._config._set_local(**self._kwargs)
        return self._config

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._config._restore_local(self._saved)
        return False


# =============================================================================
# Global Instance
# =============================================================================

config = BetterMathConfig()


def get_config() -> BetterMathConfig:
    """Get the global configuration instance."""
    return config


def seed(value: Optional[int] = None):
    """Reseed the shared random generator."""
    config.random = RandomConfig(seed=value)


__all__ = [
    "NumericPolicy",
    "DEFAULT_WILSON_Z",
    "PluckConfig",
    "ComputeConfig",
    "RandomConfig",
    "BetterMathConfig",
    "config",
    "get_config",
    "seed",
]
