"""
Error types raised by densemm.

Out-of-bounds element access uses the builtin IndexError; everything else
that is specific to matrix multiplication lives here.
"""


class DenseMMError(Exception):
    """Base class for densemm errors."""
    pass


class DimensionMismatch(DenseMMError, ValueError):
    """
    Raised when the inner dimensions of a product disagree.

    Also raised for accumulator tiles of different sizes; left_cols and
    right_rows then hold the two tile edge lengths (own, other).
    """

    def __init__(self, left_cols: int, right_rows: int, message: str = None):
        self.left_cols = left_cols
        self.right_rows = right_rows
        super().__init__(message or (
            f"the number of first matrix columns ({left_cols}) "
            f"differs from the number of second matrix rows ({right_rows})"
        ))


class InvalidArgument(DenseMMError, ValueError):
    """Raised for arguments outside their valid range (e.g. tile size <= 0)."""
    pass
