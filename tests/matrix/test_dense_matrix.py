"""
Unit tests for DenseMatrix.

Tests:
1. Construction: zero-filled, from rows, from arrays, move
2. Element access: bounds-checked get/set
3. Padding: padded_copy zero-fills, unpad trims in place
4. Equality: exact, shape-sensitive
"""

import sys
from pathlib import Path
# Ensure project root is in path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest
import numpy as np

from densemm.errors import InvalidArgument
from densemm.matrix import DenseMatrix, identity


class TestConstruction:
    """Tests for the construction modes."""

    def test_zero_filled(self):
        m = DenseMatrix(2, 3)
        assert m.nrow == 2
        assert m.ncol == 3
        assert m.shape == (2, 3)
        assert len(m.buffer) == 6
        assert m.buffer.dtype == np.float64
        assert not m.buffer.any()

    def test_negative_extent(self):
        with pytest.raises(InvalidArgument, match="non-negative"):
            DenseMatrix(-1, 2)

    def test_from_rows(self):
        m = DenseMatrix.from_rows([[1, 2, 3], [4, 5, 6]])
        assert m.shape == (2, 3)
        assert m.buffer.tolist() == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]

    def test_from_rows_ragged(self):
        with pytest.raises(ValueError, match="row 1 has 2 elements, expected 3"):
            DenseMatrix.from_rows([[1, 2, 3], [4, 5]])

    def test_from_rows_empty(self):
        m = DenseMatrix.from_rows([])
        assert m.shape == (0, 0)
        assert len(m.buffer) == 0

    def test_from_rows_accepts_tuples(self):
        m = DenseMatrix.from_rows(((1.5, 2.5),))
        assert m.shape == (1, 2)
        assert m[0, 1] == 2.5

    def test_from_array(self):
        arr = np.arange(12, dtype=np.float64).reshape(3, 4)
        m = DenseMatrix.from_array(arr)
        assert m.shape == (3, 4)
        assert m[2, 3] == 11.0
        # Copy, not a view
        arr[0, 0] = 99.0
        assert m[0, 0] == 0.0

    def test_from_array_rejects_1d(self):
        with pytest.raises(ValueError, match="2-D"):
            DenseMatrix.from_array(np.zeros(4))

    def test_take_moves_buffer(self):
        src = DenseMatrix.from_rows([[1, 2], [3, 4]])
        original_buffer = src.buffer
        moved = DenseMatrix.take(src)

        assert moved.buffer is original_buffer
        assert moved.tolist() == [[1.0, 2.0], [3.0, 4.0]]
        # Source stays valid: same shape, zeroed storage
        assert src.shape == (2, 2)
        assert src.buffer is not original_buffer
        assert not src.buffer.any()

    def test_identity(self):
        assert identity(3).tolist() == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]


class TestElementAccess:
    """Tests for at/set and tuple indexing."""

    def test_set_and_at(self):
        m = DenseMatrix(2, 3)
        m.set(1, 2, 7.5)
        assert m.at(1, 2) == 7.5
        # Row-major placement
        assert m.buffer[1 * 3 + 2] == 7.5

    def test_tuple_indexing(self):
        m = DenseMatrix(2, 2)
        m[0, 1] = 3.0
        assert m[0, 1] == 3.0
        assert isinstance(m[0, 1], float)

    @pytest.mark.parametrize("row,col", [(2, 0), (0, 3), (5, 5), (-1, 0), (0, -1)])
    def test_out_of_bounds_get(self, row, col):
        m = DenseMatrix(2, 3)
        with pytest.raises(IndexError, match="out of range"):
            m.at(row, col)

    def test_out_of_bounds_set(self):
        m = DenseMatrix(2, 3)
        with pytest.raises(IndexError):
            m[2, 0] = 1.0

    def test_buffer_is_a_view(self):
        m = DenseMatrix(2, 2)
        m.buffer[3] = 4.0
        assert m[1, 1] == 4.0

    def test_numpy_interop(self):
        m = DenseMatrix.from_rows([[1, 2], [3, 4]])
        arr = np.asarray(m)
        assert arr.shape == (2, 2)
        assert np.array_equal(arr, [[1, 2], [3, 4]])

    def test_np_array_copies(self):
        m = DenseMatrix.from_rows([[1, 2], [3, 4]])
        arr = np.array(m)
        arr[0, 0] = 99.0
        assert m[0, 0] == 1.0

    def test_np_asarray_shares_memory(self):
        m = DenseMatrix.from_rows([[1, 2], [3, 4]])
        arr = np.asarray(m)
        assert np.shares_memory(arr, m.buffer)
        arr[1, 1] = 7.0
        assert m[1, 1] == 7.0

    def test_np_array_dtype_conversion(self):
        m = DenseMatrix.from_rows([[1.5, 2.5]])
        arr = np.array(m, dtype=np.float32)
        assert arr.dtype == np.float32
        assert not np.shares_memory(arr, m.buffer)


class TestPadding:
    """Tests for padded_copy and unpad."""

    def test_padded_copy_zero_fills(self):
        m = DenseMatrix.from_rows([[1, 2, 3], [4, 5, 6]])
        p = m.padded_copy(1, 2)
        assert p.shape == (3, 5)
        assert p.tolist() == [
            [1, 2, 3, 0, 0],
            [4, 5, 6, 0, 0],
            [0, 0, 0, 0, 0],
        ]

    def test_padded_copy_leaves_source(self):
        m = DenseMatrix.from_rows([[1, 2], [3, 4]])
        p = m.padded_copy(2, 2)
        p[0, 0] = 100.0
        assert m.shape == (2, 2)
        assert m[0, 0] == 1.0

    def test_padded_copy_no_padding_is_equal_copy(self):
        m = DenseMatrix.from_rows([[1, 2], [3, 4]])
        p = m.padded_copy(0, 0)
        assert p == m
        assert p.buffer is not m.buffer

    def test_padded_copy_negative(self):
        with pytest.raises(InvalidArgument, match="non-negative"):
            DenseMatrix(2, 2).padded_copy(-1, 0)

    def test_unpad_keeps_row_major_order(self):
        m = DenseMatrix.from_rows([
            [1, 2, 3, 4],
            [5, 6, 7, 8],
            [9, 10, 11, 12],
        ])
        m.unpad(1, 2)
        assert m.shape == (2, 2)
        assert m.buffer.tolist() == [1.0, 2.0, 5.0, 6.0]
        assert len(m.buffer) == m.nrow * m.ncol

    def test_unpad_to_empty(self):
        m = DenseMatrix(2, 3)
        m.unpad(2, 3)
        assert m.shape == (0, 0)
        assert len(m.buffer) == 0

    @pytest.mark.parametrize("trim_rows,trim_cols", [(3, 0), (0, 4), (-1, 0)])
    def test_unpad_beyond_extent(self, trim_rows, trim_cols):
        m = DenseMatrix.from_rows([[1, 2, 3], [4, 5, 6]])
        with pytest.raises(IndexError, match="cannot trim"):
            m.unpad(trim_rows, trim_cols)
        # Untouched on failure
        assert m.shape == (2, 3)
        assert m.buffer.tolist() == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]

    @pytest.mark.parametrize("trim_rows,trim_cols", [(1.5, 0), (0, 1.0), (True, 0)])
    def test_unpad_non_integer(self, trim_rows, trim_cols):
        m = DenseMatrix.from_rows([[1, 2, 3], [4, 5, 6]])
        with pytest.raises(InvalidArgument, match="must be an integer"):
            m.unpad(trim_rows, trim_cols)
        assert m.shape == (2, 3)

    def test_padded_copy_non_integer(self):
        with pytest.raises(InvalidArgument, match="must be an integer"):
            DenseMatrix(2, 2).padded_copy(0.5, 0)

    @pytest.mark.parametrize("extra_rows,extra_cols", [(0, 0), (1, 0), (0, 3), (4, 5)])
    def test_pad_then_unpad_restores(self, extra_rows, extra_cols):
        rng = np.random.default_rng(7)
        m = DenseMatrix.from_array(rng.standard_normal((3, 5)))
        p = m.padded_copy(extra_rows, extra_cols)
        p.unpad(extra_rows, extra_cols)
        assert p == m


class TestEquality:
    """Tests for exact equality."""

    def test_equal(self):
        a = DenseMatrix.from_rows([[1, 2], [3, 4]])
        b = DenseMatrix.from_rows([[1, 2], [3, 4]])
        assert a == b

    def test_different_values(self):
        a = DenseMatrix.from_rows([[1, 2], [3, 4]])
        b = DenseMatrix.from_rows([[1, 2], [3, 4 + 1e-12]])
        assert a != b

    def test_same_buffer_different_shape(self):
        a = DenseMatrix.from_rows([[1, 2, 3, 4]])
        b = DenseMatrix.from_rows([[1, 2], [3, 4]])
        assert a != b

    def test_not_equal_to_other_types(self):
        assert DenseMatrix(1, 1) != [[0.0]]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(DenseMatrix(1, 1))
