"""Reference triple-loop multiplication."""

import logging

from densemm.kernels.common import validate_multiplication
from densemm.matrix import DenseMatrix

logger = logging.getLogger(__name__)


def multiply_naive(mat1: DenseMatrix, mat2: DenseMatrix) -> DenseMatrix:
    """
    Compute mat1 @ mat2 with three nested loops and no blocking.

    Each output element is summed in ascending order of the inner index,
    which makes this the correctness oracle for the other strategies.
    """
    validate_multiplication(mat1, mat2)
    logger.debug("naive multiply: %dx%d @ %dx%d",
                 mat1.nrow, mat1.ncol, mat2.nrow, mat2.ncol)

    ret = DenseMatrix(mat1.nrow, mat2.ncol)

    # Python floats are IEEE doubles; list access avoids per-element numpy scalars
    a = mat1.buffer.tolist()
    b = mat2.buffer.tolist()
    out = ret.buffer
    inner = mat1.ncol
    ncol = ret.ncol

    for i in range(ret.nrow):
        row = i * inner
        for k in range(ncol):
            v = 0.0
            for j in range(inner):
                v += a[row + j] * b[j * ncol + k]
            out[i * ncol + k] = v

    return ret
