"""Multiplication through a BLAS-style GEMM backend."""

import logging

from densemm.hal import default_backend
from densemm.kernels.common import validate_multiplication
from densemm.matrix import DenseMatrix
from densemm.runtime.backend import GemmBackend, Layout

logger = logging.getLogger(__name__)


def multiply_vendor(mat1: DenseMatrix, mat2: DenseMatrix,
                    backend: GemmBackend = None) -> DenseMatrix:
    """
    Compute mat1 @ mat2 with a single GEMM call.

    Args:
        mat1: Left operand (m x k)
        mat2: Right operand (k x n)
        backend: GemmBackend to call; defaults to the shared numpy/BLAS one

    Returns:
        New m x n matrix
    """
    validate_multiplication(mat1, mat2)

    if backend is None:
        backend = default_backend()

    m, k, n = mat1.nrow, mat1.ncol, mat2.ncol
    logger.debug("vendor multiply via %s: m=%d n=%d k=%d", backend.name, m, n, k)

    ret = DenseMatrix(m, n)
    backend.gemm(
        Layout.ROW_MAJOR, m, n, k, 1.0,
        mat1.buffer, max(1, k),
        mat2.buffer, max(1, n),
        0.0,
        ret.buffer, max(1, n),
    )
    return ret
