"""
Tests for the flat-buffer interop record.

Validates:
    - to_flat / from_flat: row-major layout, round trip, empty matrices rejected
    - ContinuousMatrix construction: length checks, ownership, read-only data
    - Explicit and scoped release
    - Raw byte exchange via tobytes / from_buffer
"""

import numpy as np
import pytest

from densematrix import ContinuousMatrix, Matrix, from_flat, to_flat
from densematrix.core.exceptions import MalformedInputError, ValidationError


class TestToFlat:

    def test_row_major_layout(self):
        cm = to_flat(Matrix.from_rows([[1, 2, 3], [4, 5, 6]]))
        assert (cm.nrows, cm.ncols, cm.length) == (2, 3, 6)
        np.testing.assert_array_equal(cm.data, [1, 2, 3, 4, 5, 6])

    def test_offset_mapping(self, rng):
        m = Matrix.from_array(rng.standard_normal((3, 4)))
        cm = m.to_flat()
        for i in range(3):
            for j in range(4):
                assert cm.data[i * 4 + j] == m[i, j]

    def test_round_trip_identical(self, rng):
        m = Matrix.from_array(rng.standard_normal((5, 2)))
        assert from_flat(to_flat(m)) == m
        assert Matrix.from_flat(m.to_flat()) == m

    @pytest.mark.parametrize("shape", [(0, 0), (0, 3), (3, 0)])
    def test_empty_matrix_rejected(self, shape):
        with pytest.raises(MalformedInputError):
            to_flat(Matrix(*shape))

    def test_no_aliasing(self):
        m = Matrix.from_rows([[1, 2]])
        cm = to_flat(m)
        m[0, 0] = 9.0
        assert cm.data[0] == 1.0


class TestFromFlat:

    def test_zero_rows_rejected(self):
        with pytest.raises(MalformedInputError):
            from_flat(ContinuousMatrix(0, 3, []))

    def test_result_independent_of_record(self):
        cm = ContinuousMatrix(1, 2, [1.0, 2.0])
        m = from_flat(cm)
        cm.release()
        assert m == Matrix.from_rows([[1, 2]])


class TestContinuousMatrix:

    def test_length_mismatch(self):
        with pytest.raises(MalformedInputError, match="expected 2 \\* 2"):
            ContinuousMatrix(2, 2, [1.0, 2.0, 3.0])

    def test_nested_data_rejected(self):
        with pytest.raises(MalformedInputError, match="1D"):
            ContinuousMatrix(2, 2, [[1.0, 2.0], [3.0, 4.0]])

    def test_negative_size(self):
        with pytest.raises(ValidationError):
            ContinuousMatrix(-1, 2, [])

    def test_data_read_only(self):
        cm = ContinuousMatrix(1, 2, [1.0, 2.0])
        with pytest.raises(ValueError):
            cm.data[0] = 5.0

    def test_release(self):
        cm = ContinuousMatrix(1, 1, [1.0])
        cm.release()
        cm.release()
        assert cm.released
        with pytest.raises(MalformedInputError, match="released"):
            cm.data

    def test_context_manager_releases(self):
        with to_flat(Matrix.identity(2)) as cm:
            assert cm.length == 4
        assert cm.released

    def test_context_manager_releases_on_error(self):
        cm = ContinuousMatrix(1, 1, [1.0])
        with pytest.raises(RuntimeError):
            with cm:
                raise RuntimeError("boom")
        assert cm.released

    def test_bytes_round_trip(self):
        cm = to_flat(Matrix.from_rows([[1.5, -2.0], [0.25, 8.0]]))
        back = ContinuousMatrix.from_buffer(2, 2, cm.tobytes())
        assert back == cm

    def test_bad_buffer(self):
        with pytest.raises(MalformedInputError):
            ContinuousMatrix.from_buffer(1, 1, b"\x00\x01\x02")

    def test_released_records_never_equal(self):
        a = ContinuousMatrix(1, 1, [1.0])
        b = ContinuousMatrix(1, 1, [1.0])
        assert a == b
        a.release()
        assert a != b

    def test_repr(self):
        cm = ContinuousMatrix(1, 2, [1.0, 2.0])
        assert repr(cm) == "ContinuousMatrix(nrows=1, ncols=2, length=2)"
