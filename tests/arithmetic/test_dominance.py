"""
Tests for the row-wise diagonal dominance check.

Validates:
    - Reference matrices (dominant and not)
    - Boundary case: diagonal equal to the off-diagonal sum passes
    - Negative diagonal entries never pass
    - Empty matrices are dominant; non-square matrices are rejected
"""

import numpy as np
import pytest

from densematrix import Matrix, check_dominant
from densematrix.arithmetic import dominant_rows, row_dominance
from densematrix.core.exceptions import ShapeMismatchError


class TestCheckDominant:

    def test_dominant(self):
        assert check_dominant(Matrix.from_rows([[5, 1, 1], [1, 4, 1], [1, 1, 3]]))

    def test_not_dominant(self):
        assert not check_dominant(Matrix.from_rows([[1, 5, 1], [1, 4, 1], [1, 1, 3]]))

    def test_equality_passes(self):
        assert check_dominant(Matrix.from_rows([[2, 1, -1], [0, 1, 1], [3, 3, 6]]))

    def test_negative_diagonal_fails(self):
        assert not check_dominant(Matrix.from_rows([[-5, 1], [1, 5]]))

    def test_generated_dominant(self, dominant_matrix):
        assert dominant_matrix.check_dominant()

    def test_empty_is_dominant(self):
        assert check_dominant(Matrix())

    def test_non_square_rejected(self):
        with pytest.raises(ShapeMismatchError) as excinfo:
            check_dominant(Matrix(2, 3))
        assert excinfo.value.operation == 'check_dominant'

    def test_returns_plain_bool(self):
        assert type(check_dominant(Matrix.identity(2))) is bool


class TestDominantRows:

    def test_per_row_flags(self):
        flags = dominant_rows(Matrix.from_rows([[1, 5, 1], [1, 4, 1], [1, 1, 3]]))
        np.testing.assert_array_equal(flags, [False, True, True])

    def test_row_dominance_on_array(self):
        flags = row_dominance(np.array([[3.0, -3.0], [0.5, 0.4]]))
        np.testing.assert_array_equal(flags, [True, False])
