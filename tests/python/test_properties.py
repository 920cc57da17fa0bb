"""
Cross-module properties and worked scenarios.
"""

import math

import pytest

import bettermath as bm


SEQUENCES = [
    [1, 2, 3],
    [0.5, -2.25, 8.0, 3.0],
    [7],
    [4, 4, 1, 9, 0, 2, 2],
]


# =============================================================================
# Properties
# =============================================================================

class TestProperties:
    """Invariants that hold for any input."""

    @pytest.mark.parametrize("values", SEQUENCES)
    def test_mean_is_sum_over_length(self, values):
        assert bm.mean(values) == bm.sum(values) / len(values)

    @pytest.mark.parametrize("values", SEQUENCES)
    def test_median_does_not_mutate(self, values):
        before = list(values)
        bm.median(values)
        assert values == before

    @pytest.mark.parametrize("window", [1, 2, 5, 9])
    def test_moving_avg_length(self, window):
        values = list(range(9))
        assert len(bm.moving_avg(values, window)) == len(values) - window + 1

    def test_transpose_involution(self):
        matrix = [[1, 2], [3, 4], [5, 6]]
        assert bm.transpose(bm.transpose(matrix)) == matrix

    @pytest.mark.parametrize("n", [-9, 2, 3, 4, 15, 17, 25, 29, 1024])
    def test_prime_composite_complement(self, n):
        assert bm.is_prime(n) == (not bm.is_composite(n))

    @pytest.mark.parametrize("a, b", [(4, 6), (12, 18), (7, 13), (21, 6), (1, 1)])
    def test_gcd_times_lcm(self, a, b):
        assert bm.gcd(a, b) * bm.lcm(a, b) == pytest.approx(a * b)


# =============================================================================
# Scenarios
# =============================================================================

class TestScenarios:
    """Worked examples."""

    def test_sum(self):
        assert bm.sum([1, 2, 3]) == 6
        assert bm.sum([{"value": 1}, {"value": 2}, {"value": 3}]) == 6

    def test_median(self):
        assert bm.median([0, 0, 1, 2]) == 0.5
        assert bm.median([0, 0, 1, 2, 5]) == 1

    def test_variance(self):
        assert bm.variance([1, 2, 3]) == pytest.approx(2 / 3)
        assert bm.std_deviation([1, 2, 3]) == pytest.approx(math.sqrt(2 / 3))

    def test_scale_keeps_spacing(self):
        result = bm.scale([1, 2, 5], 1, 100)
        assert result[0] == 1
        assert result[-1] == 100
        assert (result[1] - result[0]) / (result[2] - result[0]) == pytest.approx(1 / 4)

    def test_transpose_square(self):
        assert bm.transpose([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [[1, 4, 7], [2, 5, 8], [3, 6, 9]]

    def test_moving_avg(self):
        assert bm.moving_avg(bm.range(11), 3) == [2, 3, 4, 5, 6, 7, 8, 9]

    def test_mixin_style_namespace(self):
        """Record maps through a merged namespace."""
        ns = bm.hooks.as_namespace()
        assert ns.sum({"x": {"b": 4}, "y": {"b": 5}}, "b") == 9
        assert ns.pluck(4) == 4
