"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion across kinds (a float never becomes an int)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    IndexOutOfBoundsError,
    ValidationError,
)


# Integer kinds share a rank: signed and unsigned values mix freely,
# range is checked separately for scalars.
_KIND_RANK = {'u': 0, 'i': 0, 'f': 1, 'c': 2}


def check_array(array: ArrayLike, name: str) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array.

    Unlike a statistics pipeline, integer input is NOT promoted to float:
    the element type is part of the matrix contract.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with a numeric (non-boolean) dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (bool, strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result


def check_dtype(dtype: DTypeLike, name: str) -> np.dtype:
    """
    Resolve and verify an element type.

    Args:
        dtype: Anything numpy accepts as a dtype
        name: Parameter name for error messages

    Returns:
        The resolved numpy dtype

    Raises:
        ValidationError: If dtype is not integer, floating or complex
    """
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"{name}: not a valid dtype: {dtype!r}") from e

    if resolved.kind not in _KIND_RANK:
        raise ValidationError(
            f"{name}: element type must be integer, floating or complex, got {resolved}"
        )
    return resolved


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[Any], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_castable(source: np.dtype, target: np.dtype, name: str) -> None:
    """
    Verify values of one element type may be stored as another.

    Casting is allowed within a kind and upwards (integer -> floating ->
    complex), never downwards.

    Args:
        source: dtype of the incoming values
        target: dtype of the matrix receiving them
        name: Parameter name for error messages

    Raises:
        ValidationError: If the cast would drop a fractional or imaginary part
    """
    if _KIND_RANK[source.kind] > _KIND_RANK[target.kind]:
        raise ValidationError(
            f"{name}: cannot use {source} values with {target} elements"
        )


def check_scalar(value: Any, dtype: np.dtype, name: str) -> np.generic:
    """
    Validate a scalar operand and convert it to the given element type.

    Args:
        value: Scalar to validate (Python number or numpy scalar)
        dtype: Element type the scalar is combined with
        name: Parameter name for error messages

    Returns:
        numpy scalar of type ``dtype``

    Raises:
        DimensionError: If value is not 0-dimensional
        ValidationError: If value is non-numeric, of a higher kind than
            ``dtype``, or outside the range of an integer ``dtype``
    """
    arr = check_array(value, name)
    check_ndim(arr, 0, name)
    check_fits(arr, dtype, name)
    return arr.astype(dtype)[()]


def check_fits(array: NDArray[Any], target: np.dtype, name: str) -> None:
    """
    Verify every value of an array survives conversion to ``target``.

    Combines the kind ordering of check_castable with a range check, so
    narrowing casts (int64 -> int8, float64 -> float32) are allowed only
    when the actual values fit.

    Args:
        array: Values about to be stored
        target: Element type receiving them
        name: Parameter name for error messages

    Raises:
        ValidationError: If the kind would drop information or any value
            lies outside the range of ``target``
    """
    check_castable(array.dtype, target, name)
    if array.size == 0 or np.can_cast(array.dtype, target, casting='safe'):
        return

    if target.kind in 'iu':
        info = np.iinfo(target)
        lo, hi = int(array.min()), int(array.max())
        if lo < info.min or hi > info.max:
            raise ValidationError(
                f"{name}: {_fmt_range(array, lo, hi)} out of range for {target} "
                f"[{info.min}, {info.max}]"
            )
        return

    # floating or complex target: finite magnitudes must stay finite
    limit = float(np.finfo(target).max)
    wide = array.astype(np.complex128 if array.dtype.kind == 'c' else np.float64)
    parts = (wide.real, wide.imag) if wide.dtype.kind == 'c' else (wide,)
    for part in parts:
        finite = np.abs(part[np.isfinite(part)])
        if finite.size and float(finite.max()) > limit:
            raise ValidationError(
                f"{name}: magnitude {float(finite.max()):g} out of range for {target} "
                f"(max {limit:g})"
            )


def _fmt_range(array: NDArray[Any], lo: int, hi: int) -> str:
    if array.ndim == 0:
        return f"value {lo}"
    return f"values [{lo}, {hi}]"


def _as_index(value: Any, name: str) -> int:
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected an integer, got bool")
    try:
        return operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        ) from e


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a row or column count is a non-negative integer.

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    n = _as_index(value, name)
    if n < 0:
        raise ValidationError(f"{name}: must be non-negative, got {n}")
    return n


def check_index(row: Any, col: Any, shape: tuple[int, int]) -> tuple[int, int]:
    """
    Verify an element position lies inside a matrix.

    Negative indices are rejected rather than wrapped.

    Args:
        row: Row index
        col: Column index
        shape: (rows, cols) of the matrix

    Returns:
        (row, col) as plain ints

    Raises:
        ValidationError: If either index is not an integer
        IndexOutOfBoundsError: If either index is outside the matrix
    """
    r = _as_index(row, 'row')
    c = _as_index(col, 'col')
    n_rows, n_cols = shape
    if not (0 <= r < n_rows and 0 <= c < n_cols):
        raise IndexOutOfBoundsError(
            f"index ({r}, {c}) out of bounds for {n_rows}x{n_cols} matrix",
            row=r,
            col=c,
            shape=(n_rows, n_cols),
        )
    return r, c


def check_same_shape(
    left: tuple[int, ...],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: operand shapes differ (left {_fmt(left)}, right {_fmt(right)})",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_inner_dims(
    left: tuple[int, int],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify the columns of ``left`` match the leading dimension of ``right``.

    Used for matrix-matrix and matrix-vector products.

    Raises:
        DimensionMismatchError: If left.cols != right[0]
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"{operation}: left operand has {left[1]} columns but right operand "
            f"has {right[0]} rows (left {_fmt(left)}, right {_fmt(right)})",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def _fmt(shape: tuple[int, ...]) -> str:
    return "x".join(str(s) for s in shape)
