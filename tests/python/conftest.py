"""
Pytest configuration and shared fixtures for bettermath tests.
"""

import pytest
import numpy as np
from pathlib import Path
import sys

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

import bettermath
from bettermath._config import get_config


# Try to import scipy
try:
    import scipy.stats
    HAS_SCIPY = True
except ImportError:
    HAS_SCIPY = False


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def requires_scipy():
    """Skip test if scipy is not available."""
    if not HAS_SCIPY:
        pytest.skip("scipy not available")


@pytest.fixture(autouse=True)
def reset_config():
    """Restore the default configuration around every test."""
    get_config().reset()
    yield
    get_config().reset()


@pytest.fixture
def seeded():
    """Reseed the shared random generator deterministically."""
    bettermath.seed(12345)
    return get_config().rng


@pytest.fixture
def records():
    """Array of records sharing the field 'a'.

    [{a: 1}, {a: 2, b: 5}, {a: 3}]
    """
    return [{"a": 1}, {"a": 2, "b": 5}, {"a": 3}]


@pytest.fixture
def record_map():
    """Map of name -> record with the field 'b'."""
    return {"one": {"b": 4}, "two": {"b": 5}, "three": {"b": 6}}


@pytest.fixture
def value_records():
    """Records using the default field name 'value'."""
    return [{"value": 2}, {"value": 4}, {"value": 9}]


@pytest.fixture
def numpy_values():
    """Plain float64 numpy array."""
    return np.array([1.0, 2.0, 3.0, 4.0, 5.0])


@pytest.fixture
def structured_values():
    """numpy structured array with fields 'a' and 'value'."""
    return np.array(
        [(1, 10.0), (2, 20.0), (3, 30.0)],
        dtype=[("a", np.int64), ("value", np.float64)],
    )


# =============================================================================
# Helper Functions
# =============================================================================

def assert_array_equal(a1, a2, rtol=1e-7, atol=1e-12):
    """Assert two arrays are approximately equal (nan == nan)."""
    if hasattr(a1, 'tolist'):
        a1 = a1.tolist()
    if hasattr(a2, 'tolist'):
        a2 = a2.tolist()

    np.testing.assert_allclose(np.asarray(a1, dtype=float), np.asarray(a2, dtype=float),
                               rtol=rtol, atol=atol, equal_nan=True)


def assert_nan(value):
    """Assert a scalar result is nan."""
    assert isinstance(value, float)
    assert np.isnan(value)
