"""
Matrix: dense two-dimensional numeric container.

Wraps a C-contiguous numpy array of shape (rows, cols). The element type
is fixed at construction (any integer, floating or complex dtype) and is
preserved by every operation: integer matrices stay integer, float32
stays float32.

Every operation validates before it writes. A failed ``+=`` or
``assign`` leaves the target untouched.
"""

from __future__ import annotations

from typing import Any, Sequence
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.compute.precision import divide_scalar, is_close
from pymatrix.core.compute.tolerances import ToleranceTier, select_tolerance
from pymatrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    ValidationError,
)
from pymatrix.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_dimension,
    check_dtype,
    check_fits,
    check_index,
    check_inner_dims,
    check_same_shape,
    check_scalar,
)


class Matrix:
    """
    Dense rows x cols matrix with a fixed numeric element type.

    Construction:
        Matrix(rows, cols, initial)
        Matrix.from_rows([[1, 2], [3, 4]])
        Matrix.from_array(ndarray)
        Matrix.zeros(rows, cols) / Matrix.identity(n)

    Operators:
        m + n, m - n          elementwise, shapes must match
        m * n, m @ n          matrix product (m.cols == n.rows)
        m * v, m @ v          matrix-vector product, returns 1D ndarray
        m + s, m - s, m * s, m / s
                              elementwise with a scalar
        m[i, j]               bounds-checked element access

    Examples:
        >>> a = Matrix(2, 2, 1.0)
        >>> (a + Matrix(2, 2, 2.0)).tolist()
        [[3.0, 3.0], [3.0, 3.0]]
    """

    __slots__ = ('_data',)

    # numpy must defer to our reflected operators instead of broadcasting
    __array_ufunc__ = None

    # mutable value type
    __hash__ = None

    def __init__(
        self,
        rows: int,
        cols: int,
        initial: Any,
        dtype: DTypeLike | None = None,
    ):
        n_rows = check_dimension(rows, 'rows')
        n_cols = check_dimension(cols, 'cols')
        fill = check_array(initial, 'initial')
        resolved = check_dtype(fill.dtype if dtype is None else dtype, 'dtype')
        value = check_scalar(fill, resolved, 'initial')
        self._data: NDArray[Any] = np.full((n_rows, n_cols), value, dtype=resolved)

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def _wrap(cls, data: NDArray[Any]) -> Matrix:
        """Adopt an array the caller no longer holds a reference to."""
        obj = cls.__new__(cls)
        obj._data = np.ascontiguousarray(data)
        return obj

    @classmethod
    def from_array(cls, array: ArrayLike, dtype: DTypeLike | None = None) -> Matrix:
        """
        Build a Matrix from a 2D array-like. The data is copied.

        Raises:
            DimensionError: If the input is not 2D
            ValidationError: If the input is non-numeric or not castable
                to ``dtype``
        """
        arr = check_array(array, 'array')
        check_2d(arr, 'array')
        resolved = check_dtype(arr.dtype if dtype is None else dtype, 'dtype')
        check_fits(arr, resolved, 'array')
        return cls._wrap(np.array(arr, dtype=resolved, order='C', copy=True))

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[Any]],
        dtype: DTypeLike | None = None,
    ) -> Matrix:
        """
        Build a Matrix from a sequence of equal-length rows.

        An empty sequence gives a 0x0 float64 matrix (or ``dtype``).

        Raises:
            DimensionError: If the input is not a sequence of sequences
            DimensionMismatchError: If rows have different lengths
        """
        try:
            rows = [list(r) for r in rows]
        except TypeError as e:
            raise DimensionError(
                f"rows: expected a sequence of row sequences: {e}"
            ) from e
        if not rows:
            resolved = check_dtype(np.float64 if dtype is None else dtype, 'dtype')
            return cls._wrap(np.empty((0, 0), dtype=resolved))

        lengths = [len(r) for r in rows]
        if len(set(lengths)) > 1:
            raise DimensionMismatchError(
                f"from_rows: rows have different lengths {lengths}",
                operation='from_rows',
            )
        if lengths[0] == 0:
            resolved = check_dtype(np.float64 if dtype is None else dtype, 'dtype')
            return cls._wrap(np.empty((len(rows), 0), dtype=resolved))
        return cls.from_array(rows, dtype=dtype)

    @classmethod
    def zeros(cls, rows: int, cols: int, dtype: DTypeLike = np.float64) -> Matrix:
        """Matrix filled with the additive identity."""
        return cls(rows, cols, 0, dtype=dtype)

    @classmethod
    def identity(cls, n: int, dtype: DTypeLike = np.float64) -> Matrix:
        """n x n multiplicative identity."""
        size = check_dimension(n, 'n')
        return cls._wrap(np.eye(size, dtype=check_dtype(dtype, 'dtype')))

    # ------------------------------------------------------------------
    # Shape and element type
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self.rows, self.cols)

    @property
    def dtype(self) -> np.dtype:
        """Element type."""
        return self._data.dtype

    def get_rows(self) -> int:
        return self.rows

    def get_cols(self) -> int:
        return self.cols

    # ------------------------------------------------------------------
    # Copying and assignment
    # ------------------------------------------------------------------

    def copy(self) -> Matrix:
        """Deep copy: the new matrix shares no storage with this one."""
        return self._wrap(self._data.copy())

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.copy()

    def assign(self, other: Matrix) -> Matrix:
        """
        Replace this matrix's contents with a copy of ``other``.

        Adopts ``other``'s dimensions; keeps this matrix's element type.
        Assigning a matrix to itself is a no-op.

        Returns:
            self

        Raises:
            ValidationError: If ``other`` is not a Matrix or its elements
                cannot be stored in this matrix's element type
        """
        if other is self:
            return self
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"assign: expected a Matrix, got {type(other).__name__}"
            )
        check_fits(other._data, self.dtype, 'other')
        self._data = other._data.astype(self.dtype, copy=True)
        return self

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def at(self, row: int, col: int) -> np.generic:
        """
        Element at (row, col).

        Raises:
            IndexOutOfBoundsError: If the position is outside the matrix
        """
        r, c = check_index(row, col, self.shape)
        return self._data[r, c]

    def set(self, row: int, col: int, value: Any) -> None:
        """
        Overwrite the element at (row, col).

        Raises:
            IndexOutOfBoundsError: If the position is outside the matrix
            ValidationError: If ``value`` does not fit the element type
        """
        r, c = check_index(row, col, self.shape)
        self._data[r, c] = check_scalar(value, self.dtype, 'value')

    def _split_key(self, key: Any) -> tuple[Any, Any]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise ValidationError(
                f"index: expected m[row, col], got {key!r}"
            )
        return key

    def __getitem__(self, key: tuple[int, int]) -> np.generic:
        return self.at(*self._split_key(key))

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        self.set(*self._split_key(key), value)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _operand(self, other: Matrix, name: str) -> NDArray[Any]:
        """other's grid converted to this element type."""
        check_fits(other._data, self.dtype, name)
        return other._data.astype(self.dtype, copy=False)

    def _elementwise(self, other: Any, ufunc: np.ufunc, operation: str) -> Matrix:
        if isinstance(other, Matrix):
            check_same_shape(self.shape, other.shape, operation)
            rhs = self._operand(other, 'other')
        else:
            rhs = check_scalar(other, self.dtype, 'other')
        return self._wrap(ufunc(self._data, rhs).astype(self.dtype, copy=False))

    def add(self, other: Matrix | Any) -> Matrix:
        """Elementwise sum with a same-shaped matrix or a scalar."""
        return self._elementwise(other, np.add, 'add')

    def subtract(self, other: Matrix | Any) -> Matrix:
        """Elementwise difference with a same-shaped matrix or a scalar."""
        return self._elementwise(other, np.subtract, 'subtract')

    def scale(self, scalar: Any) -> Matrix:
        """Every element multiplied by ``scalar``."""
        return self._elementwise(scalar, np.multiply, 'scale')

    def divide(self, scalar: Any) -> Matrix:
        """
        Every element divided by ``scalar``.

        Integer element types truncate toward zero. Dividing by zero
        raises DivideByZeroError for integer elements and yields inf/NaN
        with a RuntimeWarning for floating elements.
        """
        if isinstance(scalar, Matrix):
            raise ValidationError("divide: divisor must be a scalar, got Matrix")
        value = check_scalar(scalar, self.dtype, 'scalar')
        return self._wrap(divide_scalar(self._data, value))

    def matmul(self, other: Matrix) -> Matrix:
        """
        Matrix product, (rows x k) times (k x other.cols).

        Raises:
            DimensionMismatchError: If self.cols != other.rows
        """
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"matmul: expected a Matrix, got {type(other).__name__}"
            )
        check_inner_dims(self.shape, other.shape, 'matmul')
        rhs = self._operand(other, 'other')
        return self._wrap((self._data @ rhs).astype(self.dtype, copy=False))

    def dot_vector(self, vector: ArrayLike) -> NDArray[Any]:
        """
        Matrix-vector product.

        Args:
            vector: 1D array-like of length ``cols``

        Returns:
            1D array of length ``rows``, ``result[i] = sum_j m[i, j] * v[j]``

        Raises:
            DimensionError: If ``vector`` is not 1D
            DimensionMismatchError: If ``len(vector) != cols``
        """
        v = check_array(vector, 'vector')
        check_1d(v, 'vector')
        check_inner_dims(self.shape, v.shape, 'dot_vector')
        if v.size == 0:
            # np.asarray([]) is float64 whatever the matrix holds
            v = v.astype(self.dtype)
        check_fits(v, self.dtype, 'vector')
        return (self._data @ v.astype(self.dtype, copy=False)).astype(self.dtype, copy=False)

    def multiply(self, other: Matrix | ArrayLike) -> Matrix | NDArray[Any]:
        """
        Product dispatched on the operand.

        Matrix -> matrix product, scalar -> scaling, 1D array -> matrix-vector
        product.
        """
        if isinstance(other, Matrix):
            return self.matmul(other)
        operand = check_array(other, 'other')
        if operand.ndim == 0:
            return self.scale(operand)
        if operand.ndim == 1:
            return self.dot_vector(operand)
        raise DimensionError(
            f"multiply: expected Matrix, scalar or 1D vector, got {operand.ndim}D "
            f"array with shape {operand.shape}; wrap it with Matrix.from_array"
        )

    def diag_vec(self) -> NDArray[Any]:
        """
        Diagonal elements ``m[i, i]`` for i in [0, rows).

        Raises:
            DimensionMismatchError: If rows > cols
        """
        if self.rows > self.cols:
            raise DimensionMismatchError(
                f"diag_vec: requires rows <= cols, got {self.rows}x{self.cols}",
                operation='diag_vec',
                left_shape=self.shape,
            )
        return np.diagonal(self._data).copy()

    # Operator protocol

    def __add__(self, other: Matrix | Any) -> Matrix:
        return self.add(other)

    def __radd__(self, other: Any) -> Matrix:
        return self.add(other)

    def __sub__(self, other: Matrix | Any) -> Matrix:
        return self.subtract(other)

    def __mul__(self, other: Matrix | ArrayLike) -> Matrix | NDArray[Any]:
        return self.multiply(other)

    def __rmul__(self, other: Any) -> Matrix:
        return self.scale(other)

    def __matmul__(self, other: Matrix | ArrayLike) -> Matrix | NDArray[Any]:
        if isinstance(other, Matrix):
            return self.matmul(other)
        return self.dot_vector(other)

    def __truediv__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return NotImplemented
        return self.divide(other)

    def _replace(self, result: Matrix) -> Matrix:
        self._data = result._data
        return self

    def __iadd__(self, other: Matrix | Any) -> Matrix:
        return self._replace(self.add(other))

    def __isub__(self, other: Matrix | Any) -> Matrix:
        return self._replace(self.subtract(other))

    def __imul__(self, other: Matrix | Any) -> Matrix:
        if isinstance(other, Matrix):
            return self._replace(self.matmul(other))
        return self._replace(self.scale(other))

    def __itruediv__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return NotImplemented
        return self._replace(self.divide(other))

    # ------------------------------------------------------------------
    # Comparison and conversion
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def allclose(self, other: Matrix, tolerance: ToleranceTier | None = None) -> bool:
        """
        Elementwise approximate equality.

        Matrices of different shapes are never close. The tolerance
        defaults to the tier for this matrix's element type.
        """
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"allclose: expected a Matrix, got {type(other).__name__}"
            )
        if self.shape != other.shape:
            return False
        tier = tolerance if tolerance is not None else select_tolerance(self.dtype)
        return bool(np.all(is_close(self._data, other._data, tier.rtol, tier.atol)))

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the element grid."""
        return self._data.copy()

    def __array__(self, dtype: DTypeLike | None = None, copy: bool | None = None) -> NDArray[Any]:
        if copy is False:
            raise ValueError(
                "Matrix does not expose its storage; a copy is always made"
            )
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    def tolist(self) -> list[list[Any]]:
        return self._data.tolist()

    def format_rows(self) -> list[str]:
        """One line per row, each element followed by ', '."""
        return [
            "".join(f"{format(value, 'g')}, " for value in row)
            for row in self._data.tolist()
        ]

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols}, dtype={self.dtype})"
