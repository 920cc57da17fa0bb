"""
Tests for number-theoretic primitives.

Tests the mappers in bettermath.math.numtheory:
- Parity: is_even, is_odd
- Primality: is_prime, is_composite
- Factorization: factors, divisors
- gcd, lcm, undirected_edges, factorial
"""

import math

import pytest
import numpy as np

import bettermath as bm


# =============================================================================
# Parity Tests
# =============================================================================

class TestParity:
    """Test is_even / is_odd."""

    def test_numbers(self):
        assert bm.is_even(4)
        assert not bm.is_even(5)
        assert not bm.is_odd(4)
        assert bm.is_odd(5)

    def test_arrays(self):
        assert bm.is_even([4, 501]) == [True, False]
        assert bm.is_odd([5, 502]) == [True, False]

    def test_records(self):
        data = [{"n": 4}, {"n": 501}]
        assert bm.is_even(data, "n") == [True, False]
        assert bm.is_odd(data, key="n") == [False, True]

    def test_negative(self):
        assert bm.is_even(-4)
        assert bm.is_odd(-3)

    @pytest.mark.parametrize("n", [0, 1, 2, 7, 10, 13, -6])
    def test_complementary(self, n):
        """is_odd is the negation of is_even for integers."""
        assert bm.is_odd(n) == (not bm.is_even(n))


# =============================================================================
# Primality Tests
# =============================================================================

class TestPrimality:
    """Test is_prime / is_composite."""

    def test_primes(self):
        for p in (2, 3, 5, 7, 11, 13, 97, 7919):
            assert bm.is_prime(p), p

    def test_non_primes(self):
        for n in (0, 4, 6, 9, 100, 7917):
            assert not bm.is_prime(n), n

    def test_integer_beyond_float_range(self):
        assert not bm.is_prime(10 ** 400)
        assert bm.is_composite(10 ** 400 + 1)

    def test_array(self):
        assert bm.is_prime([100, 200, 2]) == [False, False, True]

    def test_one_reports_prime(self):
        """Empty trial range: 1 and -1 report True."""
        assert bm.is_prime(1)
        assert bm.is_prime(-1)

    def test_negative_uses_magnitude(self):
        assert bm.is_prime(-7)
        assert not bm.is_prime(-9)

    def test_non_finite(self):
        assert not bm.is_prime(math.inf)
        assert not bm.is_prime(math.nan)

    def test_composite_is_negation(self):
        values = [0, 1, 2, 4, 9, 97, 100]
        assert bm.is_composite(values) == [not p for p in bm.is_prime(values)]
        assert bm.is_composite([4, 17]) == [True, False]

    def test_numpy_input(self):
        result = bm.is_prime(np.array([2, 4, 5]))
        assert isinstance(result, np.ndarray)
        assert result.tolist() == [True, False, True]


# =============================================================================
# Factorization Tests
# =============================================================================

class TestFactors:
    """Test prime factorization."""

    def test_composite(self):
        assert bm.factors(12) == [2, 2, 3]

    def test_prime(self):
        assert bm.factors(7) == [7]

    def test_prime_cofactor(self):
        """The search bound is fixed, so a large prime cofactor is found."""
        assert bm.factors(14) == [2, 7]
        assert bm.factors(22) == [2, 11]

    def test_power_of_two(self):
        assert bm.factors(64) == [2] * 6

    def test_product_matches(self):
        for n in (2, 30, 84, 360, 1001):
            assert math.prod(bm.factors(n)) == n

    def test_negative(self):
        assert bm.factors(-12) == [2, 2, 3]

    def test_array(self):
        assert bm.factors([12, 7]) == [[2, 2, 3], [7]]

    def test_edge_values(self):
        assert bm.factors(1) == [1]
        assert bm.factors(0) == [0]


class TestDivisors:
    """Test divisor listing."""

    def test_basic(self):
        assert bm.divisors(12) == [1, 2, 3, 4, 6, 12]

    def test_proper(self):
        assert bm.divisors(12, proper=True) == [1, 2, 3, 4, 6]
        assert bm.divisors(12, True) == [1, 2, 3, 4, 6]

    def test_prime(self):
        assert bm.divisors(13) == [1, 13]

    def test_one(self):
        """1 is listed once."""
        assert bm.divisors(1) == [1]

    def test_all_divide(self):
        n = 360
        assert all(n % d == 0 for d in bm.divisors(n))

    def test_array(self):
        assert bm.divisors([6, 7]) == [[1, 2, 3, 6], [1, 7]]


# =============================================================================
# GCD / LCM Tests
# =============================================================================

class TestGcdLcm:
    """Test gcd and lcm."""

    def test_gcd(self):
        assert bm.gcd(12, 18) == 6
        assert bm.gcd(17, 5) == 1
        assert bm.gcd(0, 9) == 9

    def test_gcd_array(self):
        assert bm.gcd([12, 9], 6) == [6, 3]

    def test_gcd_non_finite(self):
        assert math.isnan(bm.gcd(math.inf, 3))

    def test_lcm(self):
        assert bm.lcm(4, 6) == 12
        assert bm.lcm([4, 3], 6) == [12, 6]

    def test_lcm_zero(self):
        """lcm(0, 0) is 0 / 0."""
        assert math.isnan(bm.lcm(0, 0))

    def test_lcm_huge_integers(self):
        assert bm.lcm(10 ** 400, 3) == math.inf

    def test_gcd_huge_integers_exact(self):
        assert bm.gcd(10 ** 400, 10 ** 200) == 10 ** 200


# =============================================================================
# Combinatorics Tests
# =============================================================================

class TestCombinatorics:
    """Test undirected_edges and factorial."""

    def test_undirected_edges(self):
        assert bm.undirected_edges(4) == 6
        assert bm.undirected_edges([1, 2, 5]) == [0, 1, 10]

    def test_factorial(self):
        assert bm.factorial(0) == 1.0
        assert bm.factorial(1) == 1.0
        assert bm.factorial(5) == 120.0
        assert bm.factorial(10) == 3628800.0

    def test_factorial_array(self):
        assert bm.factorial([3, 4]) == [6.0, 24.0]

    def test_factorial_negative(self):
        assert bm.factorial(-1) == math.inf

    def test_factorial_overflow(self):
        assert bm.factorial(200) == math.inf
        assert bm.factorial(10 ** 400) == math.inf
