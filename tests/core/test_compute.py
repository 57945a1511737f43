"""
Tests for core/compute: tolerance tiers and division kernels.
"""

import warnings

import numpy as np
import pytest

from pymatrix.core.compute import (
    EXACT,
    FP32,
    FP64,
    divide_scalar,
    is_close,
    select_tolerance,
    truncated_divide,
)
from pymatrix.core.exceptions import DivideByZeroError


class TestSelectTolerance:

    @pytest.mark.parametrize("dtype", [np.int8, np.int64, np.uint32])
    def test_integers_exact(self, dtype):
        assert select_tolerance(dtype) is EXACT

    @pytest.mark.parametrize("dtype", [np.float16, np.float32, np.complex64])
    def test_single_precision(self, dtype):
        assert select_tolerance(dtype) is FP32

    @pytest.mark.parametrize("dtype", [np.float64, np.complex128])
    def test_double_precision(self, dtype):
        assert select_tolerance(dtype) is FP64

    def test_tiers_are_frozen(self):
        with pytest.raises(AttributeError):
            FP64.rtol = 1.0


class TestTruncatedDivide:
    """Integer division rounds toward zero, not toward -inf."""

    def test_positive(self):
        data = np.array([7, 8, 9], dtype=np.int64)
        np.testing.assert_array_equal(truncated_divide(data, np.int64(2)), [3, 4, 4])

    def test_negative_numerator(self):
        data = np.array([-7, -8, -1], dtype=np.int64)
        np.testing.assert_array_equal(truncated_divide(data, np.int64(2)), [-3, -4, 0])

    def test_negative_divisor(self):
        data = np.array([7, -7, 6], dtype=np.int64)
        np.testing.assert_array_equal(truncated_divide(data, np.int64(-2)), [-3, 3, -3])

    def test_dtype_preserved(self):
        data = np.array([10, 20], dtype=np.int16)
        assert truncated_divide(data, np.int16(3)).dtype == np.int16

    def test_unsigned(self):
        data = np.array([7, 9], dtype=np.uint8)
        result = truncated_divide(data, np.uint8(2))
        np.testing.assert_array_equal(result, [3, 4])
        assert result.dtype == np.uint8


class TestDivideScalar:

    def test_float_division(self):
        data = np.array([[1.0, 2.0]], dtype=np.float32)
        result = divide_scalar(data, np.float32(4.0))
        np.testing.assert_allclose(result, [[0.25, 0.5]])
        assert result.dtype == np.float32

    def test_integer_zero_raises(self):
        data = np.array([[1, 2]], dtype=np.int32)
        with pytest.raises(DivideByZeroError) as exc_info:
            divide_scalar(data, np.int32(0))
        assert exc_info.value.dtype == "int32"

    def test_float_zero_warns_and_gives_ieee(self):
        data = np.array([1.0, -1.0, 0.0])
        with pytest.warns(RuntimeWarning, match="division by zero scalar"):
            result = divide_scalar(data, np.float64(0.0))
        assert result[0] == np.inf
        assert result[1] == -np.inf
        assert np.isnan(result[2])

    def test_nonzero_does_not_warn(self):
        data = np.array([1.0, 2.0])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            divide_scalar(data, np.float64(2.0))


class TestIsClose:

    def test_within_tolerance(self):
        a = np.array([1.0, 2.0])
        assert np.all(is_close(a, a + 1e-13, FP64.rtol, FP64.atol))

    def test_outside_tolerance(self):
        a = np.array([1.0, 2.0])
        assert not np.all(is_close(a, a + 1e-3, FP64.rtol, FP64.atol))

    def test_nan_never_close(self):
        a = np.array([np.nan])
        assert not np.any(is_close(a, a, FP64.rtol, FP64.atol))
