"""
Loop-based GEMM backend.

Implements the same contract as the BLAS backend with scalar Python
arithmetic. Used in tests to exercise multiply_vendor without depending on
the BLAS numpy happens to link.
"""

import numpy as np

from densemm.runtime.backend import GemmBackend, Layout, check_gemm_args


class ReferenceBackend(GemmBackend):
    """Scalar triple-loop GEMM. Records how many times it was called."""

    def __init__(self):
        self.calls = 0

    @property
    def name(self) -> str:
        return "reference"

    def gemm(self, layout: Layout, m: int, n: int, k: int, alpha: float,
             a: np.ndarray, lda: int, b: np.ndarray, ldb: int,
             beta: float, c: np.ndarray, ldc: int) -> None:
        check_gemm_args(layout, m, n, k, a, lda, b, ldb, c, ldc)
        self.calls += 1

        for i in range(m):
            for j in range(n):
                acc = 0.0
                for p in range(k):
                    acc += float(a[i * lda + p]) * float(b[p * ldb + j])
                if beta == 0.0:
                    c[i * ldc + j] = alpha * acc
                else:
                    c[i * ldc + j] = alpha * acc + beta * c[i * ldc + j]
