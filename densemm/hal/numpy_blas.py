"""
numpy GEMM backend.

numpy.matmul on float64 operands dispatches to the dgemm of whatever BLAS
numpy was built against (OpenBLAS, MKL, Accelerate), which makes this the
"vendor" path.
"""

import numpy as np

from densemm.runtime.backend import GemmBackend, Layout, check_gemm_args


def _view(buf: np.ndarray, rows: int, cols: int, ld: int) -> np.ndarray:
    """rows x cols view of a flat buffer with leading dimension ld."""
    if rows == 0 or cols == 0:
        return np.zeros((rows, cols), dtype=buf.dtype)
    step = buf.strides[0]
    return np.lib.stride_tricks.as_strided(buf, shape=(rows, cols), strides=(ld * step, step))


class NumpyBlasBackend(GemmBackend):
    """GEMM through numpy.matmul."""

    @property
    def name(self) -> str:
        return "numpy-blas"

    def gemm(self, layout: Layout, m: int, n: int, k: int, alpha: float,
             a: np.ndarray, lda: int, b: np.ndarray, ldb: int,
             beta: float, c: np.ndarray, ldc: int) -> None:
        check_gemm_args(layout, m, n, k, a, lda, b, ldb, c, ldc)
        if m == 0 or n == 0:
            return

        A = _view(a, m, k, lda)
        B = _view(b, k, n, ldb)
        C = _view(c, m, n, ldc)

        product = np.matmul(A, B)
        if alpha != 1.0:
            product *= alpha

        if beta == 0.0:
            C[...] = product
        else:
            C *= beta
            C += product
