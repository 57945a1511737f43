"""
Core infrastructure for pymatrix.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerance tiers and division kernels
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    IndexOutOfBoundsError,
    NumericalError,
    DivideByZeroError,
)

__all__ = [
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "IndexOutOfBoundsError",
    "NumericalError",
    "DivideByZeroError",
]
