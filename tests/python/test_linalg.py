"""
Tests for transpose and slope.
"""

import math

import numpy as np

import bettermath as bm


class TestTranspose:
    """Test matrix transpose."""

    def test_rectangular(self):
        assert bm.transpose([[1, 2, 3], [4, 5, 6]]) == [[1, 4], [2, 5], [3, 6]]

    def test_square(self):
        assert bm.transpose([[1, 2], [3, 4]]) == [[1, 3], [2, 4]]

    def test_single_row(self):
        assert bm.transpose([[1, 2, 3]]) == [[1], [2], [3]]

    def test_involution(self):
        matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9], [10, 11, 12]]
        assert bm.transpose(bm.transpose(matrix)) == matrix

    def test_entries(self):
        matrix = [[1, 2, 3], [4, 5, 6]]
        trans = bm.transpose(matrix)
        for y, row in enumerate(matrix):
            for x, value in enumerate(row):
                assert trans[x][y] == value

    def test_empty(self):
        assert bm.transpose([]) == []

    def test_input_not_mutated(self):
        matrix = [[1, 2], [3, 4]]
        bm.transpose(matrix)
        assert matrix == [[1, 2], [3, 4]]

    def test_numpy(self):
        matrix = np.arange(6).reshape(2, 3)
        result = bm.transpose(matrix)
        assert result.shape == (3, 2)
        np.testing.assert_array_equal(result, matrix.T)
        result[0, 0] = 99
        assert matrix[0, 0] == 0


class TestSlope:
    """Test two-point slope."""

    def test_basic(self):
        assert bm.slope([0, 0], [1, 2]) == 2.0
        assert bm.slope([1, 1], [3, 0]) == -0.5

    def test_symmetric(self):
        assert bm.slope([2, 5], [4, 9]) == bm.slope([4, 9], [2, 5])

    def test_vertical(self):
        assert math.isinf(bm.slope([1, 0], [1, 5]))

    def test_same_point(self):
        assert math.isnan(bm.slope([1, 1], [1, 1]))
