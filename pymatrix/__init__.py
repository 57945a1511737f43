"""
pymatrix: a dense matrix container for Python.

A generic rows x cols numeric matrix with checked arithmetic: elementwise
add/subtract, matrix and matrix-vector products, scalar operations and
diagonal extraction. Backed by numpy; the element type is any numpy
integer, floating or complex dtype.

Submodules:
    matrix: The Matrix type
    core: Exceptions, validation, tolerance tiers
    demo: Demonstration program (python -m pymatrix)
"""

__version__ = "0.1.0"

from pymatrix.matrix import Matrix
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
    "__version__",
    "Matrix",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "IndexOutOfBoundsError",
    "NumericalError",
    "DivideByZeroError",
]
