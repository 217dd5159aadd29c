"""
Fixed-size square accumulator tile.

One Block holds the running sum for a single output tile while the tiled
kernel sweeps the reduction dimension. It is then added into the result
matrix with save_into().
"""

import numpy as np

from densemm.errors import DimensionMismatch, InvalidArgument
from densemm.matrix import DenseMatrix, DTYPE


class Block:
    """
    N x N accumulator, zero-filled on construction.

    Attributes:
        dim: Tile edge length N
        buffer: Flat row-major float64 storage (N * N words)
    """

    def __init__(self, dim: int):
        if dim <= 0:
            raise InvalidArgument(f"block size must be positive, got {dim}")
        self.dim = int(dim)
        self.buffer = np.zeros(self.dim * self.dim, dtype=DTYPE)

    def at(self, i: int, k: int) -> float:
        if not (0 <= i < self.dim and 0 <= k < self.dim):
            raise IndexError(f"index ({i}, {k}) out of range for {self.dim}x{self.dim} block")
        return float(self.buffer[i * self.dim + k])

    def reset(self, value: float = 0.0) -> None:
        """Broadcast value to every element."""
        self.buffer.fill(value)

    def accumulate(self, other: "Block") -> None:
        """Element-wise self += other."""
        if other.dim != self.dim:
            raise DimensionMismatch(
                self.dim, other.dim, f"block sizes differ: {self.dim} vs {other.dim}"
            )
        self.buffer += other.buffer

    def save_into(self, matrix: DenseMatrix, row_offset: int, col_offset: int) -> None:
        """
        Add this block into matrix with its top-left corner at
        (row_offset, col_offset).

        The destination is accumulated into, not overwritten.
        """
        n = self.dim
        if (row_offset < 0 or col_offset < 0
                or row_offset + n > matrix.nrow or col_offset + n > matrix.ncol):
            raise IndexError(
                f"{n}x{n} block at ({row_offset}, {col_offset}) does not fit "
                f"in {matrix.nrow}x{matrix.ncol} matrix"
            )
        dst = matrix.buffer
        stride = matrix.ncol
        for i in range(n):
            base = (row_offset + i) * stride + col_offset
            dst[base:base + n] += self.buffer[i * n:(i + 1) * n]

    def __repr__(self) -> str:
        return f"Block(dim={self.dim})"
