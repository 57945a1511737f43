"""
Algebraic properties of Matrix arithmetic, checked on random data.

    - (A + B) - B == A within tolerance
    - A + 0 == A, A * 1 == A, A / 1 == A
    - assignment round-trip with deep-copy isolation
    - a 1x1 matrix behaves like its scalar under every operator
"""

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.compute import EXACT, FP32


class TestIdentities:

    def test_add_then_subtract(self, square_pair):
        a, b = square_pair
        assert ((a + b) - b).allclose(a)

    def test_add_then_subtract_integer_exact(self, counting_3x3):
        other = Matrix.from_rows([[9, -8, 7], [-6, 5, -4], [3, -2, 1]])
        assert (counting_3x3 + other) - other == counting_3x3

    def test_additive_identity(self, square_pair):
        a, _ = square_pair
        assert a + Matrix.zeros(*a.shape) == a

    def test_scalar_identities(self, square_pair):
        a, _ = square_pair
        assert a * 1 == a
        assert a / 1 == a

    def test_scalar_identities_integer(self, counting_3x3):
        assert counting_3x3 * 1 == counting_3x3
        assert counting_3x3 / 1 == counting_3x3

    def test_assignment_round_trip(self, square_pair):
        a, _ = square_pair
        b = Matrix(1, 1, 0.0)
        b.assign(a)
        assert b == a
        b[0, 0] = b[0, 0] + 1.0
        assert b != a


class TestOneByOne:
    """A 1x1 matrix is a scalar in disguise."""

    @pytest.fixture
    def x(self):
        return Matrix(1, 1, 6.0)

    @pytest.fixture
    def y(self):
        return Matrix(1, 1, 4.0)

    def test_operators(self, x, y):
        assert (x + y).at(0, 0) == 10.0
        assert (x - y).at(0, 0) == 2.0
        assert (x * y).at(0, 0) == 24.0
        assert (x + 1).at(0, 0) == 7.0
        assert (x - 1).at(0, 0) == 5.0
        assert (x * 2).at(0, 0) == 12.0
        assert (x / 4).at(0, 0) == 1.5

    def test_vector_and_diag(self, x):
        np.testing.assert_array_equal(x * [3.0], [18.0])
        np.testing.assert_array_equal(x.diag_vec(), [6.0])


class TestAllclose:

    def test_shape_mismatch_is_not_close(self):
        assert not Matrix(2, 2, 1.0).allclose(Matrix(2, 3, 1.0))

    def test_default_tier_for_float32(self):
        a = Matrix(2, 2, 1.0, dtype=np.float32)
        b = Matrix(2, 2, 1.00001, dtype=np.float32)
        assert a.allclose(b)
        assert a != b

    def test_explicit_tier(self):
        a = Matrix(1, 1, 1.0)
        b = Matrix(1, 1, 1.00001)
        assert not a.allclose(b)
        assert a.allclose(b, tolerance=FP32)

    def test_integer_exact(self):
        assert not Matrix(1, 1, 1).allclose(Matrix(1, 1, 2), tolerance=EXACT)


class TestConversion:

    def test_equality_with_other_types(self):
        assert Matrix(1, 1, 1.0) != [[1.0]]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Matrix(1, 1, 1.0))

    def test_asarray(self, counting_3x3):
        arr = np.asarray(counting_3x3)
        np.testing.assert_array_equal(arr, [[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        arr[0, 0] = 0
        assert counting_3x3.at(0, 0) == 1

    def test_repr(self):
        assert repr(Matrix(2, 3, 0.0)) == "Matrix(rows=2, cols=3, dtype=float64)"

    def test_format_rows(self):
        assert Matrix(2, 3, 3.0).format_rows() == ["3, 3, 3, ", "3, 3, 3, "]

    def test_format_rows_fractional(self):
        assert Matrix.from_rows([[0.5, -2.25]]).format_rows() == ["0.5, -2.25, "]


class TestArrayProtocol:

    def test_copy_false_refused(self):
        with pytest.raises(ValueError, match="copy is always made"):
            Matrix(2, 2, 1.0).__array__(copy=False)

    def test_copy_true_and_default(self):
        m = Matrix(2, 2, 1.0)
        for arr in (m.__array__(copy=True), m.__array__()):
            arr[0, 0] = 9.0
            assert m.at(0, 0) == 1.0

    def test_dtype_conversion(self):
        arr = np.asarray(Matrix(1, 2, 3), dtype=np.float32)
        assert arr.dtype == np.float32
        np.testing.assert_array_equal(arr, [[3.0, 3.0]])
