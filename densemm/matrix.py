"""
Dense row-major matrix of float64 values.

The buffer is a flat contiguous numpy array of length nrow * ncol. Element
(i, j) lives at position i * ncol + j.

Example:
    m = DenseMatrix.from_rows([[1, 2, 3], [4, 5, 6]])
    m[1, 2]                  # 6.0
    p = m.padded_copy(0, 1)  # 2x4, last column zero
    p.unpad(0, 1)            # back to 2x3
    assert p == m
"""

from __future__ import annotations
import numbers
from typing import Sequence, Tuple
import numpy as np

from densemm.errors import InvalidArgument


DTYPE = np.float64


def _check_extent(value, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(f"{label} must be an integer, got {value!r}")


class DenseMatrix:
    """
    Row-major dense matrix.

    Attributes:
        nrow: Number of rows
        ncol: Number of columns
        buffer: Flat float64 storage (length nrow * ncol)
    """

    __hash__ = None

    def __init__(self, nrow: int, ncol: int):
        if nrow < 0 or ncol < 0:
            raise InvalidArgument(f"matrix extents must be non-negative, got {nrow}x{ncol}")
        self._nrow = int(nrow)
        self._ncol = int(ncol)
        self._buffer = np.zeros(self._nrow * self._ncol, dtype=DTYPE)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> DenseMatrix:
        """
        Build a matrix from a nested sequence of rows.

        The first row's length sets the column count; every other row must
        match it. An empty sequence gives a 0x0 matrix.
        """
        rows = [list(row) for row in rows]
        if not rows:
            return cls(0, 0)

        ncol = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != ncol:
                raise ValueError(
                    f"row {i} has {len(row)} elements, expected {ncol}"
                )

        mat = cls(len(rows), ncol)
        if ncol:
            mat._buffer[:] = np.asarray(rows, dtype=DTYPE).reshape(-1)
        return mat

    @classmethod
    def from_array(cls, array) -> DenseMatrix:
        """Copy a 2-D array-like into a new matrix."""
        arr = np.asarray(array, dtype=DTYPE)
        if arr.ndim != 2:
            raise ValueError(f"expected a 2-D array, got {arr.ndim} dimension(s)")
        mat = cls(arr.shape[0], arr.shape[1])
        mat._buffer[:] = arr.reshape(-1)
        return mat

    @classmethod
    def take(cls, other: DenseMatrix) -> DenseMatrix:
        """
        Move construction: the new matrix takes over other's buffer.

        other keeps its shape but is left holding a fresh zero buffer.
        """
        mat = cls.__new__(cls)
        mat._nrow = other._nrow
        mat._ncol = other._ncol
        mat._buffer = other._buffer
        other._buffer = np.zeros(other._nrow * other._ncol, dtype=DTYPE)
        return mat

    # Dimensions and raw storage

    @property
    def nrow(self) -> int:
        return self._nrow

    @property
    def ncol(self) -> int:
        return self._ncol

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._nrow, self._ncol)

    @property
    def buffer(self) -> np.ndarray:
        """Flat row-major storage. Writes through the view mutate the matrix."""
        return self._buffer

    def __array__(self, dtype=None, copy=None):
        # Zero-copy unless numpy asks for a copy (np.array) or a new dtype
        view = self.to_array()
        if dtype is not None and np.dtype(dtype) != view.dtype:
            if copy is False:
                raise ValueError(f"cannot convert {view.dtype} to {np.dtype(dtype)} without a copy")
            return view.astype(dtype)
        if copy:
            return view.copy()
        return view

    def to_array(self) -> np.ndarray:
        """2-D view of the buffer (no copy)."""
        return self._buffer.reshape(self._nrow, self._ncol)

    def tolist(self):
        return self.to_array().tolist()

    # Element access

    def _offset(self, row: int, col: int) -> int:
        if not (0 <= row < self._nrow and 0 <= col < self._ncol):
            raise IndexError(
                f"index ({row}, {col}) out of range for {self._nrow}x{self._ncol} matrix"
            )
        return row * self._ncol + col

    def at(self, row: int, col: int) -> float:
        return float(self._buffer[self._offset(row, col)])

    def set(self, row: int, col: int, value: float) -> None:
        self._buffer[self._offset(row, col)] = value

    def __getitem__(self, index: Tuple[int, int]) -> float:
        row, col = index
        return self.at(row, col)

    def __setitem__(self, index: Tuple[int, int], value: float) -> None:
        row, col = index
        self.set(row, col, value)

    # Padding

    def padded_copy(self, extra_rows: int, extra_cols: int) -> DenseMatrix:
        """
        Copy into a (nrow + extra_rows) x (ncol + extra_cols) matrix.

        Positions outside the original extent are zero. self is unchanged.
        """
        _check_extent(extra_rows, "extra_rows")
        _check_extent(extra_cols, "extra_cols")
        if extra_rows < 0 or extra_cols < 0:
            raise InvalidArgument(
                f"padding must be non-negative, got rows={extra_rows} cols={extra_cols}"
            )
        out = DenseMatrix(self._nrow + extra_rows, self._ncol + extra_cols)
        out.to_array()[:self._nrow, :self._ncol] = self.to_array()
        return out

    def unpad(self, trim_rows: int, trim_cols: int) -> None:
        """
        Drop the trailing trim_rows rows and trim_cols columns in place.

        Surviving elements keep their row-major order.
        """
        _check_extent(trim_rows, "trim_rows")
        _check_extent(trim_cols, "trim_cols")
        if not (0 <= trim_rows <= self._nrow and 0 <= trim_cols <= self._ncol):
            raise IndexError(
                f"cannot trim {trim_rows} rows and {trim_cols} columns "
                f"from a {self._nrow}x{self._ncol} matrix"
            )
        nrow = self._nrow - trim_rows
        ncol = self._ncol - trim_cols
        kept = self.to_array()[:nrow, :ncol]
        self._buffer = kept.flatten()
        self._nrow = nrow
        self._ncol = ncol

    # Comparison

    def __eq__(self, other) -> bool:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._buffer, other._buffer))

    def __repr__(self) -> str:
        return f"DenseMatrix({self._nrow}x{self._ncol}, {self.tolist()!r})"


def identity(n: int) -> DenseMatrix:
    """n x n identity matrix."""
    mat = DenseMatrix(n, n)
    mat.buffer[::n + 1] = 1.0
    return mat
