"""Argument checks shared by every multiplication strategy."""

import numbers

from densemm.errors import DimensionMismatch, InvalidArgument
from densemm.matrix import DenseMatrix


def validate_multiplication(mat1: DenseMatrix, mat2: DenseMatrix) -> None:
    """Raise DimensionMismatch unless mat1.ncol == mat2.nrow."""
    if mat1.ncol != mat2.nrow:
        raise DimensionMismatch(mat1.ncol, mat2.nrow)


def validate_tile_size(tile_size) -> int:
    """Return tile_size as an int, or raise InvalidArgument."""
    if isinstance(tile_size, bool) or not isinstance(tile_size, numbers.Integral):
        raise InvalidArgument(f"tile size must be an integer, got {tile_size!r}")
    if tile_size <= 0:
        raise InvalidArgument(f"tile size must be positive, got {tile_size}")
    return int(tile_size)


def padding_for(extent: int, tile_size: int) -> int:
    """Zero rows/columns needed to round extent up to a multiple of tile_size."""
    return -(-extent // tile_size) * tile_size - extent
