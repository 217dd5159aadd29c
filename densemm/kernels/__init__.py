"""
Matrix multiplication strategies.

All three take two DenseMatrix operands, never mutate them, and return a
new mat1.nrow x mat2.ncol matrix:

    multiply_naive(A, B)              triple loop, correctness oracle
    multiply_vendor(A, B)             one GEMM call into BLAS
    multiply_tiled(A, B, tile_size)   cache-blocked, pads to tile multiples

Usage:
    from densemm.kernels import multiply_tiled
    C = multiply_tiled(A, B, 32)
"""

from densemm.kernels.common import validate_multiplication, validate_tile_size, padding_for
from densemm.kernels.naive import multiply_naive
from densemm.kernels.vendor import multiply_vendor
from densemm.kernels.tiled import multiply_tiled

__all__ = [
    'multiply_naive',
    'multiply_vendor',
    'multiply_tiled',
    'validate_multiplication',
    'validate_tile_size',
    'padding_for',
]
