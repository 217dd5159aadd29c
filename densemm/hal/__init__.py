"""
GEMM backend implementations.

default_backend() returns the process-wide NumpyBlasBackend used by
multiply_vendor when no backend is passed. Backends are stateless, so the
shared instance is safe to use from any thread.
"""

from densemm.hal.numpy_blas import NumpyBlasBackend
from densemm.hal.reference import ReferenceBackend

_default_backend = NumpyBlasBackend()


def default_backend() -> NumpyBlasBackend:
    return _default_backend


__all__ = [
    'NumpyBlasBackend',
    'ReferenceBackend',
    'default_backend',
]
