"""
GEMM backend - abstract interface to a BLAS-style dgemm (HAL boundary).

The vendor strategy only marshals a call through this interface, so the
numerics live entirely in the backend. Implementations:

    densemm.hal.numpy_blas.NumpyBlasBackend   numpy.matmul -> linked BLAS
    densemm.hal.reference.ReferenceBackend    plain loops (test double)
"""

from abc import ABC, abstractmethod
from enum import Enum

import numpy as np

from densemm.errors import InvalidArgument


class Layout(Enum):
    """Storage order of the operand buffers (CBLAS_ORDER)."""
    ROW_MAJOR = 101
    COL_MAJOR = 102


class GemmBackend(ABC):
    """
    Abstract GEMM capability.

    All implementations compute, over flat float64 buffers,

        C[:m, :n] = alpha * A[:m, :k] @ B[:k, :n] + beta * C[:m, :n]

    where A, B and C are viewed with leading dimensions lda, ldb, ldc.
    With beta == 0 the prior contents of C are ignored.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short backend identifier used in logs and reports."""
        pass

    @abstractmethod
    def gemm(self, layout: Layout, m: int, n: int, k: int, alpha: float,
             a: np.ndarray, lda: int, b: np.ndarray, ldb: int,
             beta: float, c: np.ndarray, ldc: int) -> None:
        """Run C = alpha * A @ B + beta * C in place on c."""
        pass


def check_gemm_args(layout, m, n, k, a, lda, b, ldb, c, ldc):
    """Validate a row-major GEMM call before touching any buffer."""
    if layout is not Layout.ROW_MAJOR:
        raise InvalidArgument(f"unsupported layout {layout}")
    if min(m, n, k) < 0:
        raise InvalidArgument(f"negative GEMM extent: m={m} n={n} k={k}")
    if lda < max(1, k) or ldb < max(1, n) or ldc < max(1, n):
        raise InvalidArgument(
            f"leading dimension too small: lda={lda} ldb={ldb} ldc={ldc} (k={k}, n={n})"
        )
    operands = (("a", a, m, k, lda), ("b", b, k, n, ldb), ("c", c, m, n, ldc))
    for label, buf, rows, cols, ld in operands:
        # CBLAS does not require the last row to extend to the full stride
        needed = (rows - 1) * ld + cols if rows and cols else 0
        if buf.size < needed:
            raise InvalidArgument(
                f"buffer {label} holds {buf.size} values, needs {needed}"
            )
