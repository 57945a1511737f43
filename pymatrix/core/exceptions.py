"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Contract violations (bad shapes, bad indices,
integer division by zero) are raised before any element is written.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensionality is incorrect.

    Raised when an input has the wrong number of dimensions, e.g. a 3D
    array passed where a matrix is expected.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Operand dimensions are incompatible for the requested operation.

    Attributes:
        operation: Name of the operation that was attempted ('add', 'matmul', ...)
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand, if there is one
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Row or column index lies outside the matrix.

    Also an IndexError, so generic sequence handling keeps working.

    Attributes:
        row: Requested row index
        col: Requested column index
        shape: (rows, cols) of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        col: int | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.col = col
        self.shape = shape


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DivideByZeroError(NumericalError, ZeroDivisionError):
    """
    Scalar division by zero for an element type that cannot represent it.

    Floating and complex element types produce inf/NaN instead; this is
    only raised for integer element types.

    Attributes:
        dtype: Element type of the matrix being divided
    """

    def __init__(self, message: str, dtype: str | None = None):
        super().__init__(message)
        self.dtype = dtype
