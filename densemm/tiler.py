"""
Tile staging for the cache-blocked kernel.

A Tiler copies one dim x dim tile of each operand into private staging
buffers and multiplies them into a Block:

    stage1 = mat1[r1:r1+dim, c1:c1+dim]      (row-major)
    stage2 = mat2[r2:r2+dim, c2:c2+dim]^T    (transposed)
    acc[i, k] += dot(stage1[i, :], stage2[k, :])

Storing the second tile transposed turns column k of mat2's tile into a
contiguous row, so every inner product reads two contiguous rows.
"""

import numpy as np

from densemm.block import Block
from densemm.errors import DimensionMismatch, InvalidArgument
from densemm.matrix import DenseMatrix, DTYPE


class Tiler:
    """Stages tile pairs and multiplies them into an accumulator Block."""

    def __init__(self, dim: int):
        if dim <= 0:
            raise InvalidArgument(f"tile size must be positive, got {dim}")
        self.dim = int(dim)
        self._stage1 = np.zeros(self.dim * self.dim, dtype=DTYPE)
        self._stage2 = np.zeros(self.dim * self.dim, dtype=DTYPE)

    @property
    def stage1(self) -> np.ndarray:
        """Row-major copy of the last loaded mat1 tile."""
        return self._stage1

    @property
    def stage2(self) -> np.ndarray:
        """Transposed copy of the last loaded mat2 tile."""
        return self._stage2

    def _check_region(self, mat: DenseMatrix, row: int, col: int, label: str):
        n = self.dim
        if row < 0 or col < 0 or row + n > mat.nrow or col + n > mat.ncol:
            raise IndexError(
                f"{label}: {n}x{n} tile at ({row}, {col}) exceeds "
                f"{mat.nrow}x{mat.ncol} matrix"
            )

    def load(self, mat1: DenseMatrix, r1: int, c1: int,
             mat2: DenseMatrix, r2: int, c2: int) -> None:
        """
        Stage mat1's tile at (r1, c1) and mat2's tile at (r2, c2).

        Both regions must lie inside their matrices; the tiled kernel pads
        its operands so this always holds.
        """
        self._check_region(mat1, r1, c1, "mat1")
        self._check_region(mat2, r2, c2, "mat2")

        n = self.dim
        src1, stride1 = mat1.buffer, mat1.ncol
        src2, stride2 = mat2.buffer, mat2.ncol

        for i in range(n):
            base1 = (r1 + i) * stride1 + c1
            self._stage1[i * n:(i + 1) * n] = src1[base1:base1 + n]

            # Source row i becomes staging column i
            base2 = (r2 + i) * stride2 + c2
            self._stage2[i::n] = src2[base2:base2 + n]

    def multiply_into(self, accumulator: Block) -> None:
        """Add stage1 @ stage2^T into accumulator (never overwrites)."""
        n = self.dim
        if accumulator.dim != n:
            raise DimensionMismatch(
                n, accumulator.dim,
                f"accumulator is {accumulator.dim}x{accumulator.dim}, tiler is {n}x{n}"
            )

        acc = accumulator.buffer
        for i in range(n):
            row = self._stage1[i * n:(i + 1) * n]
            base = i * n
            for k in range(n):
                acc[base + k] += np.dot(row, self._stage2[k * n:(k + 1) * n])

    def __repr__(self) -> str:
        return f"Tiler(dim={self.dim})"
