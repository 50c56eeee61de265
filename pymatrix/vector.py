"""
Vectors: single-row or single-column matrices.

A Vector is a column by default and becomes a row vector when transposed.
Addition needs identical shapes (same length and orientation); the
product of two vectors is the dot product, whatever their orientation.
"""

from __future__ import annotations

import operator
from typing import Any, Iterator, Sequence

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute import dense
from pymatrix.core.compute.tolerances import ToleranceTier, select_tolerance, values_close
from pymatrix.core.elements import is_exact, zero_for
from pymatrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    ValidationError,
)
from pymatrix.core.validation import (
    check_dimension,
    check_inner_dimensions,
    check_nonzero_divisor,
    check_same_shape,
)
from pymatrix.matrix import DenseMatrix, Matrix, _divide_by_matrix


class Vector:
    """
    Column (default) or row vector.

    Examples:
        >>> v = Vector([1, 2, 3])
        >>> v * Vector([4, 5, 6])
        32
        >>> v.T.shape
        (1, 3)
    """

    __slots__ = ('_data', '_row')
    __hash__ = None  # mutable
    __array_ufunc__ = None

    def __init__(self, values: Sequence[Any], *, row: bool = False):
        """
        Raises
        ------
        InvalidDimensionError
            If values is empty.
        """
        data = list(values)
        check_dimension(len(data), 'size')
        self._data = data
        self._row = bool(row)

    @classmethod
    def _wrap(cls, data: list[Any], row: bool) -> Vector:
        obj = object.__new__(cls)
        obj._data = data
        obj._row = row
        return obj

    @classmethod
    def filled(cls, size: int, init: Any, *, row: bool = False) -> Vector:
        n = check_dimension(size, 'size')
        return cls._wrap(dense.filled(n, init), row)

    @classmethod
    def zero(cls, size: int, dtype: Any = int, *, row: bool = False) -> Vector:
        n = check_dimension(size, 'size')
        return cls._wrap(dense.filled(n, zero_for(dtype)), row)

    @classmethod
    def from_matrix(cls, m: DenseMatrix) -> Vector:
        """
        Vector from a matrix with a single column (column vector) or a
        single row (row vector). A 1x1 matrix gives a column vector.

        Raises
        ------
        DimensionError
            If the matrix has more than one row and more than one column.
        """
        if m.cols == 1:
            return cls._wrap(m.to_sequence(), False)
        if m.rows == 1:
            return cls._wrap(m.to_sequence(), True)
        raise DimensionError(
            f"cannot convert a {m.rows}x{m.cols} matrix to a vector; "
            f"it needs a single row or a single column"
        )

    # --- Shape ---

    def __len__(self) -> int:
        return len(self._data)

    @property
    def size(self) -> int:
        return len(self._data)

    @property
    def shape(self) -> tuple[int, int]:
        n = len(self._data)
        return (1, n) if self._row else (n, 1)

    @property
    def is_row(self) -> bool:
        return self._row

    @property
    def is_column(self) -> bool:
        return not self._row

    def transpose(self) -> Vector:
        return Vector._wrap(list(self._data), not self._row)

    @property
    def T(self) -> Vector:
        return self.transpose()

    def to_row_vector(self) -> Vector:
        return Vector._wrap(list(self._data), True)

    def to_col_vector(self) -> Vector:
        return Vector._wrap(list(self._data), False)

    def to_matrix(self) -> Matrix:
        rows, cols = self.shape
        return Matrix._wrap(rows, cols, list(self._data))

    # --- Element access ---

    def _check(self, i: Any) -> int:
        try:
            idx = operator.index(i)
        except TypeError as e:
            raise ValidationError(f"vector index must be an integer, got {i!r}") from e
        if not 0 <= idx < len(self._data):
            raise IndexOutOfRangeError(index=idx, shape=self.shape)
        return idx

    def __getitem__(self, i: int) -> Any:
        return self._data[self._check(i)]

    def __setitem__(self, i: int, value: Any) -> None:
        self._data[self._check(i)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._data))

    def to_list(self) -> list[Any]:
        return list(self._data)

    def to_numpy(self, dtype: Any = None) -> NDArray[Any]:
        """1D NumPy array."""
        return np.array(self._data, dtype=dtype)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._row == other._row and self._data == other._data

    def is_close(self, other: Vector, tolerance: ToleranceTier | None = None) -> bool:
        check_same_shape(self.shape, other.shape, 'compare')
        if tolerance is None:
            sample = next(
                (x for x in (*self._data, *other._data) if not is_exact(x)),
                self._data[0],
            )
            tolerance = select_tolerance(sample)
        return all(values_close(a, b, tolerance) for a, b in zip(self._data, other._data))

    # --- Formatting ---

    def __str__(self) -> str:
        sep = "\t" if self._row else "\n"
        return sep.join(str(x) for x in self._data)

    def __repr__(self) -> str:
        if self._row:
            return f"Vector({self._data!r}, row=True)"
        return f"Vector({self._data!r})"

    # --- Arithmetic ---

    def dot(self, other: Vector) -> Any:
        """sum(a_i * b_i); orientation is ignored."""
        if len(self._data) != len(other._data):
            raise DimensionMismatchError(
                left_shape=self.shape, right_shape=other.shape, operation='dot'
            )
        return dense.dot(self._data, other._data)

    def __add__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        check_same_shape(self.shape, other.shape, 'add')
        return Vector._wrap(dense.add(self._data, other._data), self._row)

    def __sub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        check_same_shape(self.shape, other.shape, 'subtract')
        return Vector._wrap(dense.subtract(self._data, other._data), self._row)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Vector):
            return self.dot(other)
        if isinstance(other, DenseMatrix):
            return self.__matmul__(other)
        return Vector._wrap(dense.scale(self._data, other), self._row)

    def __rmul__(self, other: Any) -> Any:
        if isinstance(other, DenseMatrix):
            return self.__rmatmul__(other)
        return Vector._wrap([other * x for x in self._data], self._row)

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, Vector):
            if self._row and not other._row:
                return self.dot(other)
            other_shape, other_data = other.shape, other._data
        elif isinstance(other, Matrix):
            other_shape, other_data = other.shape, other._data
        else:
            return NotImplemented
        check_inner_dimensions(self.shape, other_shape, 'multiply')
        rows, inner = self.shape
        data = dense.matmul(self._data, rows, inner, other_data, other_shape[1])
        return _shaped(rows, other_shape[1], data)

    def __rmatmul__(self, other: Any) -> Any:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_inner_dimensions(other.shape, self.shape, 'multiply')
        cols = self.shape[1]
        data = dense.matmul(other._data, other.rows, other.cols, self._data, cols)
        return _shaped(other.rows, cols, data)

    def __truediv__(self, other: Any) -> Vector:
        if isinstance(other, (DenseMatrix, Vector)):
            raise _divide_by_matrix(self)
        check_nonzero_divisor(other)
        return Vector._wrap(dense.divide(self._data, other), self._row)

    def __neg__(self) -> Vector:
        return Vector._wrap(dense.negate(self._data), self._row)

    def __iadd__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        check_same_shape(self.shape, other.shape, 'add')
        self._data = dense.add(self._data, other._data)
        return self

    def __isub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        check_same_shape(self.shape, other.shape, 'subtract')
        self._data = dense.subtract(self._data, other._data)
        return self

    def __imul__(self, other: Any) -> Vector:
        # Vector and matrix operands fall back to __mul__.
        if isinstance(other, (DenseMatrix, Vector)):
            return NotImplemented
        self._data = dense.scale(self._data, other)
        return self

    def __itruediv__(self, other: Any) -> Vector:
        if isinstance(other, (DenseMatrix, Vector)):
            return NotImplemented
        check_nonzero_divisor(other)
        self._data = dense.divide(self._data, other)
        return self


def _shaped(rows: int, cols: int, data: list[Any]) -> Vector | Matrix:
    """Product result: a column or row Vector where possible, else a Matrix."""
    if cols == 1:
        return Vector._wrap(data, False)
    if rows == 1:
        return Vector._wrap(data, True)
    return Matrix._wrap(rows, cols, data)
