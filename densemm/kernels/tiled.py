"""
Cache-blocked matrix multiplication.

Both operands are zero-padded so every extent is a multiple of the tile
size, the padded product is computed one output tile at a time, and the
padding is trimmed off the result:

    for it in row tiles of mat1:
        for kt in column tiles of mat2:
            block = 0
            for jt in tiles of the shared dimension:
                block += mat1[it, jt] @ mat2[jt, kt]
            result[it, kt] += block

Output tiles never overlap, so the (it, kt) grid could be split across
workers, each with its own Block and Tiler.
"""

import logging

from densemm.block import Block
from densemm.kernels.common import padding_for, validate_multiplication, validate_tile_size
from densemm.matrix import DenseMatrix
from densemm.tiler import Tiler

logger = logging.getLogger(__name__)


def multiply_tiled(mat1: DenseMatrix, mat2: DenseMatrix, tile_size: int) -> DenseMatrix:
    """
    Compute mat1 @ mat2 tile by tile.

    Args:
        mat1: Left operand (m x k)
        mat2: Right operand (k x n)
        tile_size: Tile edge length; need not divide any extent

    Returns:
        New m x n matrix
    """
    validate_multiplication(mat1, mat2)
    tsize = validate_tile_size(tile_size)

    pad_rows = padding_for(mat1.nrow, tsize)
    pad_mid = padding_for(mat1.ncol, tsize)
    pad_cols = padding_for(mat2.ncol, tsize)

    lhs = mat1.padded_copy(pad_rows, pad_mid)
    rhs = mat2.padded_copy(pad_mid, pad_cols)
    ret = DenseMatrix(lhs.nrow, rhs.ncol)

    logger.debug(
        "tiled multiply: %dx%d @ %dx%d, tile=%d, padded to %dx%d @ %dx%d (%d tiles)",
        mat1.nrow, mat1.ncol, mat2.nrow, mat2.ncol, tsize,
        lhs.nrow, lhs.ncol, rhs.nrow, rhs.ncol,
        (lhs.nrow // tsize) * (rhs.ncol // tsize) * (lhs.ncol // tsize),
    )

    value = Block(tsize)
    tiler = Tiler(tsize)

    for it in range(0, lhs.nrow, tsize):
        for kt in range(0, rhs.ncol, tsize):
            value.reset(0.0)
            for jt in range(0, lhs.ncol, tsize):
                tiler.load(lhs, it, jt, rhs, jt, kt)
                tiler.multiply_into(value)
            value.save_into(ret, it, kt)

    ret.unpad(pad_rows, pad_cols)
    return ret
