# densemm
# Dense float64 matrix multiplication: naive, BLAS and cache-blocked

from densemm.errors import DenseMMError, DimensionMismatch, InvalidArgument
from densemm.matrix import DenseMatrix, identity
from densemm.block import Block
from densemm.tiler import Tiler
from densemm.kernels import multiply_naive, multiply_vendor, multiply_tiled
from densemm.runtime.backend import GemmBackend, Layout
from densemm.hal import NumpyBlasBackend, ReferenceBackend, default_backend

__all__ = [
    'DenseMatrix', 'identity', 'Block', 'Tiler',
    'multiply_naive', 'multiply_vendor', 'multiply_tiled',
    'GemmBackend', 'Layout', 'NumpyBlasBackend', 'ReferenceBackend', 'default_backend',
    'DenseMMError', 'DimensionMismatch', 'InvalidArgument',
]
