"""
Division kernels and closeness checks.

Integer and floating element types disagree on what dividing by zero
means, so scalar division is routed through here rather than through
a bare ``/``.
"""

import warnings

import numpy as np
from numpy.typing import NDArray
from typing import Any

from pymatrix.core.exceptions import DivideByZeroError


def divide_scalar(data: NDArray[Any], scalar: np.generic) -> NDArray[Any]:
    """
    Divide every element by a scalar of the same element type.

    Integer element types use truncated division (toward zero) and keep
    their dtype. Floating and complex element types follow IEEE: a zero
    divisor gives inf/NaN and a RuntimeWarning.

    Args:
        data: Element grid
        scalar: Divisor, already converted to ``data.dtype``

    Returns:
        New array of the same dtype as ``data``

    Raises:
        DivideByZeroError: If ``scalar`` is zero and the dtype is integer
    """
    if data.dtype.kind in 'iu':
        if scalar == 0:
            raise DivideByZeroError(
                f"integer division by zero ({data.dtype} elements)",
                dtype=str(data.dtype),
            )
        return truncated_divide(data, scalar)

    if scalar == 0:
        warnings.warn(
            f"division by zero scalar: result contains inf/NaN ({data.dtype} elements)",
            RuntimeWarning,
            stacklevel=3,
        )
    with np.errstate(divide='ignore', invalid='ignore'):
        result = data / scalar
    return result.astype(data.dtype, copy=False)


def truncated_divide(data: NDArray[np.integer[Any]], scalar: np.integer[Any]) -> NDArray[np.integer[Any]]:
    """Integer division rounding toward zero."""
    quotient = data // scalar
    remainder = data % scalar
    # floor and truncation differ only for inexact quotients of mixed sign
    correction = (remainder != 0) & ((data < 0) != (scalar < 0))
    return (quotient + correction).astype(data.dtype, copy=False)


def is_close(
    a: NDArray[Any],
    b: NDArray[Any],
    rtol: float,
    atol: float,
) -> NDArray[np.bool_]:
    """
    Check if values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|
    """
    with np.errstate(invalid='ignore'):
        return np.abs(a - b) <= atol + rtol * np.abs(b)
