"""
Tolerance tiers for approximate matrix comparison.

Defines precision expectations per element type:
- EXACT: integer elements, no rounding error to absorb
- FP64: double precision floats and complex128
- FP32: single/half precision floats and complex64

Used by Matrix.allclose and the test suite.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import DTypeLike


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Integer elements: must match exactly',
)

FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision: a few ulps of accumulated error',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision: relaxed for float32 arithmetic',
)


def select_tolerance(dtype: DTypeLike) -> ToleranceTier:
    """Select appropriate tolerance tier for a given element type."""
    resolved = np.dtype(dtype)
    if resolved.kind in 'iu':
        return EXACT
    # complex64 carries float32 parts
    if resolved.itemsize <= (8 if resolved.kind == 'c' else 4):
        return FP32
    return FP64
