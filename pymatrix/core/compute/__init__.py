"""
Shared compute infrastructure for pymatrix.

Submodules:
    tolerances: Tolerance tiers for approximate comparison
    precision: Division kernels and closeness checks
"""

from pymatrix.core.compute.precision import divide_scalar, is_close, truncated_divide
from pymatrix.core.compute.tolerances import (
    EXACT,
    FP32,
    FP64,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FP32",
    "FP64",
    "select_tolerance",
    # Precision
    "divide_scalar",
    "truncated_divide",
    "is_close",
]
