"""
Dense matrix module.

Public API:
    Matrix  - dense rows x cols container with arithmetic operators
"""

from pymatrix.matrix.matrix import Matrix

__all__ = [
    "Matrix",
]
