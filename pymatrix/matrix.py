"""
Dynamic-dimension matrices.

DenseMatrix holds the storage and every shape-independent behaviour
(indexing, conversion, comparison, formatting, decomposition-style
operations); Matrix adds runtime-checked arithmetic. The static variants
in pymatrix.static reuse DenseMatrix with class-level shapes.

Storage is a flat row-major list of rows*cols elements. Every operation
returns a new matrix; matrices never share storage.
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix import linalg
from pymatrix.core.compute import dense
from pymatrix.core.compute.linalg.cofactor import (
    adjugate as _adjugate,
    cofactor as _cofactor,
    cofactor_matrix as _cofactor_matrix,
)
from pymatrix.core.compute.tolerances import ToleranceTier, select_tolerance, values_close
from pymatrix.core.elements import is_exact, one_for, zero_for, zero_of
from pymatrix.core.exceptions import DimensionError, InvalidDimensionError
from pymatrix.core.validation import (
    check_col_index,
    check_dimension,
    check_index,
    check_inner_dimensions,
    check_nonzero_divisor,
    check_rectangular,
    check_row_index,
    check_same_shape,
    check_sequence_length,
    check_shape,
    check_square,
)


def _is_vector(value: Any) -> bool:
    from pymatrix.vector import Vector
    return isinstance(value, Vector)


def _divide_by_matrix(left: Any) -> TypeError:
    return TypeError(
        f"unsupported operand type(s) for /: {type(left).__name__!s} and a matrix; "
        f"division by a matrix is not defined, use A @ B.inverse() instead"
    )


class DenseMatrix:
    """
    Row-major storage shared by Matrix and StaticMatrix.

    Subclasses decide the result family through _new_like().
    """

    __slots__ = ('_rows', '_cols', '_data')
    __hash__ = None  # mutable
    # Make NumPy defer to our reflected operators (np.float64(2) * A).
    __array_ufunc__ = None

    _rows: int
    _cols: int
    _data: list[Any]

    @classmethod
    def _wrap(cls, rows: int, cols: int, data: list[Any]):
        """Adopt an already-validated buffer without copying."""
        obj = object.__new__(cls)
        obj._rows = rows
        obj._cols = cols
        obj._data = data
        return obj

    def _new_like(self, rows: int, cols: int, data: list[Any]) -> DenseMatrix:
        raise NotImplementedError

    # --- Shape ---

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    def is_square(self) -> bool:
        return self._rows == self._cols

    def transpose(self) -> DenseMatrix:
        """New matrix with rows and columns swapped."""
        return self._new_like(
            self._cols, self._rows, dense.transpose(self._data, self._rows, self._cols)
        )

    @property
    def T(self) -> DenseMatrix:
        return self.transpose()

    # --- Element access ---

    def get(self, row: int, col: int) -> Any:
        r, c = check_index(row, col, self.shape)
        return self._data[r * self._cols + c]

    def set(self, row: int, col: int, value: Any) -> None:
        r, c = check_index(row, col, self.shape)
        self._data[r * self._cols + c] = value

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, tuple):
            return self.get(*key)
        return self.row(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        if isinstance(key, tuple):
            self.set(*key, value)
            return
        r = check_row_index(key, self.shape)
        values = list(value)
        if len(values) != self._cols:
            raise DimensionError(
                f"row {r}: expected {self._cols} values, got {len(values)}"
            )
        self._data[r * self._cols:(r + 1) * self._cols] = values

    def row(self, r: int) -> list[Any]:
        """Copy of row r."""
        r = check_row_index(r, self.shape)
        return dense.row(self._data, self._cols, r)

    def col(self, c: int) -> list[Any]:
        """Copy of column c."""
        c = check_col_index(c, self.shape)
        return dense.column(self._data, self._rows, self._cols, c)

    def __iter__(self) -> Iterator[list[Any]]:
        for r in range(self._rows):
            yield dense.row(self._data, self._cols, r)

    # --- Conversion ---

    def to_list(self) -> list[list[Any]]:
        """Nested row lists."""
        return dense.to_rows(self._data, self._rows, self._cols)

    def to_sequence(self) -> list[Any]:
        """Flat row-major copy of the elements."""
        return list(self._data)

    def to_numpy(self, dtype: Any = None) -> NDArray[Any]:
        """2D NumPy array; Fraction or custom elements give an object array."""
        return np.array(self.to_list(), dtype=dtype)

    def copy(self) -> DenseMatrix:
        return self._new_like(self._rows, self._cols, list(self._data))

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    def is_close(self, other: DenseMatrix, tolerance: ToleranceTier | None = None) -> bool:
        """
        Elementwise comparison within a tolerance tier.

        With tolerance=None the tier is chosen from the first inexact
        element of either operand (EXACT if there is none).

        Raises
        ------
        DimensionMismatchError
            If the shapes differ.
        """
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
        return "\n".join(
            "\t".join(str(x) for x in row) for row in self
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._rows}, {self._cols}, {self._data!r})"

    # --- Square-matrix operations ---

    def trace(self) -> Any:
        n = check_square(self.shape, 'trace')
        return dense.trace(self._data, n)

    def minor(self, i: int, j: int) -> DenseMatrix:
        """Submatrix without row i and column j."""
        n = check_square(self.shape, 'minor')
        r, c = check_index(i, j, self.shape)
        if n == 1:
            raise InvalidDimensionError(
                "the minor of a 1x1 matrix would have no rows", rows=0, cols=0
            )
        return self._new_like(n - 1, n - 1, dense.minor(self._data, n, r, c))

    def cofactor(self, i: int, j: int) -> Any:
        """(-1)^(i+j) * det(minor(i, j))."""
        n = check_square(self.shape, 'cofactor')
        r, c = check_index(i, j, self.shape)
        return _cofactor(self._data, n, r, c)

    def cofactor_matrix(self) -> DenseMatrix:
        n = check_square(self.shape, 'cofactor matrix')
        return self._new_like(n, n, _cofactor_matrix(self._data, n))

    def adjugate(self) -> DenseMatrix:
        """Transposed cofactor matrix."""
        n = check_square(self.shape, 'adjugate')
        return self._new_like(n, n, _adjugate(self._data, n))

    def det(self, method: str = 'cofactor') -> Any:
        """
        Determinant.

        See pymatrix.linalg.det for the available methods; the default
        cofactor expansion returns the element type itself.
        """
        return linalg.det(self, method=method).value

    determinant = det

    def inverse(self, method: str = 'cofactor') -> DenseMatrix:
        """
        Inverse, in the same matrix family.

        Integer matrices get an exact Fraction inverse.

        Raises
        ------
        NotSquareError
            If the matrix is not square.
        SingularMatrixError
            If the determinant is zero.
        """
        return linalg.inv(self, method=method).value

    inv = inverse

    def lu(self, method: str = 'elimination') -> linalg.LUSolution:
        """LU decomposition with partial pivoting."""
        return linalg.lu(self, method=method)


class Matrix(DenseMatrix):
    """
    Rectangular matrix whose shape is a runtime value.

    Shape errors in arithmetic raise DimensionMismatchError.

    Examples:
        >>> A = Matrix.from_rows([[1, 2], [3, 4]])
        >>> A.det()
        -2
        >>> A @ Matrix.one(2) == A
        True
    """

    __slots__ = ()

    def __init__(self, rows: int, cols: int, init: Any = 0):
        """
        rows x cols matrix with every entry set to `init`.

        Raises
        ------
        InvalidDimensionError
            If rows < 1 or cols < 1.
        """
        r, c = check_shape(rows, cols)
        self._rows = r
        self._cols = c
        self._data = dense.filled(r * c, init)

    def _new_like(self, rows: int, cols: int, data: list[Any]) -> Matrix:
        return Matrix._wrap(rows, cols, data)

    # --- Constructors ---

    @classmethod
    def from_sequence(cls, rows: int, cols: int, seq: Sequence[Any]) -> Matrix:
        """
        Matrix from a flat row-major sequence.

        Raises
        ------
        InvalidDimensionError
            If rows < 1 or cols < 1.
        DimensionMismatchError
            If len(seq) != rows * cols.
        """
        r, c = check_shape(rows, cols)
        data = list(seq)
        check_sequence_length(data, r, c)
        return cls._wrap(r, c, data)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> Matrix:
        """Matrix from nested rows, which must be non-empty and rectangular."""
        rows = [list(row) for row in rows]
        r, c = check_rectangular(rows, 'rows')
        return cls._wrap(r, c, [x for row in rows for x in row])

    @classmethod
    def one(cls, dim: int, dtype: Any = int) -> Matrix:
        """dim x dim identity."""
        n = check_dimension(dim, 'dim')
        return cls._wrap(n, n, dense.identity(n, zero_for(dtype), one_for(dtype)))

    identity = one

    @classmethod
    def zero(cls, rows: int, cols: int | None = None, dtype: Any = int) -> Matrix:
        """All-zero matrix; square when cols is omitted."""
        r, c = check_shape(rows, rows if cols is None else cols)
        return cls._wrap(r, c, dense.filled(r * c, zero_for(dtype)))

    @classmethod
    def diag(cls, dim: int, value: Any) -> Matrix:
        """dim x dim matrix with `value` on the diagonal."""
        n = check_dimension(dim, 'dim')
        return cls._wrap(n, n, dense.diagonal([value] * n, zero_of(value)))

    @classmethod
    def diag_with(cls, entries: Sequence[Any]) -> Matrix:
        """Square matrix with `entries` on the diagonal."""
        entries = list(entries)
        n = check_dimension(len(entries), 'dim')
        return cls._wrap(n, n, dense.diagonal(entries, zero_of(entries[0])))

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> Matrix:
        """
        Matrix from a 2D array (a 1D array becomes a column).

        Elements are converted to Python scalars.
        """
        arr = np.asarray(array)
        if arr.ndim == 1:
            arr = arr.reshape(-1, 1)
        if arr.ndim != 2:
            raise DimensionError(f"array: expected 1D or 2D, got {arr.ndim}D")
        r, c = check_shape(arr.shape[0], arr.shape[1])
        return cls._wrap(r, c, arr.ravel().tolist())

    def to_static(self):
        """Equivalent StaticMatrix[rows, cols]."""
        from pymatrix.static import StaticMatrix
        return StaticMatrix[self._rows, self._cols]._wrap(
            self._rows, self._cols, list(self._data)
        )

    # --- Arithmetic ---

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, 'add')
        return Matrix._wrap(self._rows, self._cols, dense.add(self._data, other._data))

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, 'subtract')
        return Matrix._wrap(self._rows, self._cols, dense.subtract(self._data, other._data))

    def __matmul__(self, other: Any) -> Matrix:
        # Vector operands are handled by Vector.__rmatmul__.
        if not isinstance(other, Matrix):
            return NotImplemented
        check_inner_dimensions(self.shape, other.shape, 'multiply')
        return Matrix._wrap(
            self._rows,
            other._cols,
            dense.matmul(self._data, self._rows, self._cols, other._data, other._cols),
        )

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.__matmul__(other)
        if isinstance(other, DenseMatrix) or _is_vector(other):
            return NotImplemented
        return Matrix._wrap(self._rows, self._cols, dense.scale(self._data, other))

    def __rmul__(self, other: Any) -> Matrix:
        if isinstance(other, DenseMatrix) or _is_vector(other):
            return NotImplemented
        return Matrix._wrap(self._rows, self._cols, [other * x for x in self._data])

    def __truediv__(self, other: Any) -> Matrix:
        if isinstance(other, DenseMatrix):
            raise _divide_by_matrix(self)
        if _is_vector(other):
            return NotImplemented
        check_nonzero_divisor(other)
        return Matrix._wrap(self._rows, self._cols, dense.divide(self._data, other))

    def __neg__(self) -> Matrix:
        return Matrix._wrap(self._rows, self._cols, dense.negate(self._data))

    def __pos__(self) -> Matrix:
        return self.copy()

    # In-place variants mutate the left operand.

    def __iadd__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, 'add')
        self._data = dense.add(self._data, other._data)
        return self

    def __isub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, 'subtract')
        self._data = dense.subtract(self._data, other._data)
        return self

    def __imul__(self, other: Any) -> Matrix:
        # A matrix operand falls back to __mul__, which may change the shape.
        if isinstance(other, DenseMatrix) or _is_vector(other):
            return NotImplemented
        self._data = dense.scale(self._data, other)
        return self

    def __itruediv__(self, other: Any) -> Matrix:
        if isinstance(other, DenseMatrix) or _is_vector(other):
            return NotImplemented
        check_nonzero_divisor(other)
        self._data = dense.divide(self._data, other)
        return self
