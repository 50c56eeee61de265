"""
Static-shape matrices.

StaticMatrix[R, C] is a class whose shape is part of the type. Arithmetic
between incompatible shapes is rejected through Python's operator
protocol: the operator returns NotImplemented and Python raises TypeError,
so no runtime dimension check is needed on these paths.

    >>> A = StaticMatrix[2, 3].from_sequence([1, 2, 3, 4, 5, 6])
    >>> B = StaticMatrix[3, 2](1)
    >>> (A @ B).shape
    (2, 2)
    >>> A + B
    Traceback (most recent call last):
        ...
    TypeError: unsupported operand type(s) for +: 'StaticMatrix[2, 3]' and 'StaticMatrix[3, 2]'

Parameterized classes are cached: StaticMatrix[2, 3] is StaticMatrix[2, 3].
"""

from __future__ import annotations

import operator
from typing import Any, Sequence

from pymatrix.core.compute import dense
from pymatrix.core.elements import one_for, zero_for, zero_of
from pymatrix.core.exceptions import DimensionMismatchError, InvalidDimensionError
from pymatrix.core.validation import (
    check_nonzero_divisor,
    check_rectangular,
    check_sequence_length,
    check_square,
)
from pymatrix.matrix import DenseMatrix, Matrix, _divide_by_matrix, _is_vector


_MATRIX_CLASSES: dict[tuple[int, int], type] = {}
_VECTOR_CLASSES: dict[int, type] = {}


def _static_dimension(value: Any, name: str) -> int:
    try:
        count = operator.index(value)
    except TypeError as e:
        raise InvalidDimensionError(
            f"{name}: static dimensions must be integers, got {value!r}"
        ) from e
    if isinstance(value, bool) or count < 1:
        raise InvalidDimensionError(
            f"{name}: dimensions with a size of less than 1 are invalid, got {value!r}",
            rows=count if name == 'rows' else None,
            cols=count if name == 'cols' else None,
        )
    return count


def _static_class(rows: int, cols: int) -> type:
    cls = _MATRIX_CLASSES.get((rows, cols))
    if cls is None:
        name = f"StaticMatrix[{rows}, {cols}]"
        cls = type(name, (StaticMatrix,), {
            '__slots__': (),
            '__module__': __name__,
            '__qualname__': name,
            'ROWS': rows,
            'COLS': cols,
        })
        _MATRIX_CLASSES[(rows, cols)] = cls
    return cls


def _vector_class(size: int) -> type:
    cls = _VECTOR_CLASSES.get(size)
    if cls is None:
        name = f"StaticVector[{size}]"
        cls = type(name, (StaticVector, _static_class(size, 1)), {
            '__slots__': (),
            '__module__': __name__,
            '__qualname__': name,
            'ROWS': size,
            'COLS': 1,
        })
        _VECTOR_CLASSES[size] = cls
    return cls


class StaticMatrix(DenseMatrix):
    """
    Matrix with a class-level shape.

    Use StaticMatrix[R, C] to obtain the class for an R x C shape; the
    bare StaticMatrix cannot be instantiated.
    """

    __slots__ = ()

    ROWS: int | None = None
    COLS: int | None = None

    def __class_getitem__(cls, shape: Any) -> type:
        if cls.ROWS is not None:
            raise TypeError(f"{cls.__name__} is already parameterized")
        if not isinstance(shape, tuple) or len(shape) != 2:
            raise TypeError(
                f"StaticMatrix takes two parameters, StaticMatrix[rows, cols]; got {shape!r}"
            )
        rows = _static_dimension(shape[0], 'rows')
        cols = _static_dimension(shape[1], 'cols')
        return _static_class(rows, cols)

    @classmethod
    def _require_shape(cls) -> tuple[int, int]:
        if cls.ROWS is None or cls.COLS is None:
            raise TypeError(
                f"{cls.__name__} has no shape; use {cls.__name__}[...] to choose one"
            )
        return cls.ROWS, cls.COLS

    def __init__(self, init: Any = 0):
        rows, cols = self._require_shape()
        self._rows = rows
        self._cols = cols
        self._data = dense.filled(rows * cols, init)

    def _new_like(self, rows: int, cols: int, data: list[Any]) -> StaticMatrix:
        return _static_class(rows, cols)._wrap(rows, cols, data)

    # --- Constructors ---

    @classmethod
    def from_sequence(cls, seq: Sequence[Any]) -> StaticMatrix:
        """
        From a flat row-major sequence of exactly ROWS * COLS elements.

        Raises
        ------
        DimensionMismatchError
            If the length is wrong.
        """
        rows, cols = cls._require_shape()
        data = list(seq)
        check_sequence_length(data, rows, cols)
        return cls._wrap(rows, cols, data)

    @classmethod
    def from_rows(cls, nested: Sequence[Sequence[Any]]) -> StaticMatrix:
        rows, cols = cls._require_shape()
        nested = [list(row) for row in nested]
        shape = check_rectangular(nested, 'rows')
        if shape != (rows, cols):
            raise DimensionMismatchError(
                left_shape=(rows, cols), right_shape=shape, operation='construct'
            )
        return cls._wrap(rows, cols, [x for row in nested for x in row])

    @classmethod
    def zero(cls, dtype: Any = int) -> StaticMatrix:
        rows, cols = cls._require_shape()
        return cls._wrap(rows, cols, dense.filled(rows * cols, zero_for(dtype)))

    @classmethod
    def one(cls, dtype: Any = int) -> StaticMatrix:
        """Identity; square classes only."""
        n = check_square(cls._require_shape(), 'identity')
        return cls._wrap(n, n, dense.identity(n, zero_for(dtype), one_for(dtype)))

    identity = one

    @classmethod
    def diag(cls, value: Any) -> StaticMatrix:
        n = check_square(cls._require_shape(), 'diagonal')
        return cls._wrap(n, n, dense.diagonal([value] * n, zero_of(value)))

    @classmethod
    def diag_with(cls, entries: Sequence[Any]) -> StaticMatrix:
        n = check_square(cls._require_shape(), 'diagonal')
        entries = list(entries)
        if len(entries) != n:
            raise DimensionMismatchError(
                actual_length=len(entries), expected_length=n, operation='construct'
            )
        return cls._wrap(n, n, dense.diagonal(entries, zero_of(entries[0])))

    def to_matrix(self) -> Matrix:
        """Equivalent dynamic Matrix."""
        return Matrix._wrap(self._rows, self._cols, list(self._data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    # --- Arithmetic ---

    def _same_shape(self, other: Any) -> bool:
        return (
            isinstance(other, StaticMatrix)
            and other.ROWS == self.ROWS
            and other.COLS == self.COLS
        )

    def __add__(self, other: Any) -> StaticMatrix:
        if not self._same_shape(other):
            return NotImplemented
        return type(self)._wrap(self._rows, self._cols, dense.add(self._data, other._data))

    def __sub__(self, other: Any) -> StaticMatrix:
        if not self._same_shape(other):
            return NotImplemented
        return type(self)._wrap(self._rows, self._cols, dense.subtract(self._data, other._data))

    def __matmul__(self, other: Any) -> StaticMatrix:
        if not isinstance(other, StaticMatrix) or other.ROWS != self.COLS:
            return NotImplemented
        rows, cols = self._rows, other._cols
        result = _vector_class(rows) if isinstance(other, StaticVector) else _static_class(rows, cols)
        return result._wrap(
            rows, cols, dense.matmul(self._data, rows, self._cols, other._data, cols)
        )

    def __mul__(self, other: Any) -> StaticMatrix:
        if isinstance(other, StaticMatrix):
            return self.__matmul__(other)
        if isinstance(other, DenseMatrix) or _is_vector(other):
            return NotImplemented
        return type(self)._wrap(self._rows, self._cols, dense.scale(self._data, other))

    def __rmul__(self, other: Any) -> StaticMatrix:
        if isinstance(other, DenseMatrix) or _is_vector(other):
            return NotImplemented
        return type(self)._wrap(self._rows, self._cols, [other * x for x in self._data])

    def __truediv__(self, other: Any) -> StaticMatrix:
        if isinstance(other, DenseMatrix):
            raise _divide_by_matrix(self)
        if _is_vector(other):
            return NotImplemented
        check_nonzero_divisor(other)
        return type(self)._wrap(self._rows, self._cols, dense.divide(self._data, other))

    def __neg__(self) -> StaticMatrix:
        return type(self)._wrap(self._rows, self._cols, dense.negate(self._data))

    def __iadd__(self, other: Any) -> StaticMatrix:
        if not self._same_shape(other):
            return NotImplemented
        self._data = dense.add(self._data, other._data)
        return self

    def __isub__(self, other: Any) -> StaticMatrix:
        if not self._same_shape(other):
            return NotImplemented
        self._data = dense.subtract(self._data, other._data)
        return self

    def __imul__(self, other: Any) -> StaticMatrix:
        if isinstance(other, DenseMatrix) or _is_vector(other):
            return NotImplemented
        self._data = dense.scale(self._data, other)
        return self

    def __itruediv__(self, other: Any) -> StaticMatrix:
        if isinstance(other, DenseMatrix) or _is_vector(other):
            return NotImplemented
        check_nonzero_divisor(other)
        self._data = dense.divide(self._data, other)
        return self


class StaticVector(StaticMatrix):
    """
    Column vector of static length: StaticVector[N] is an N x 1 matrix
    class (a subclass of StaticMatrix[N, 1]) with a dot product.
    """

    __slots__ = ()

    def __class_getitem__(cls, size: Any) -> type:
        if cls.ROWS is not None:
            raise TypeError(f"{cls.__name__} is already parameterized")
        return _vector_class(_static_dimension(size, 'rows'))

    def _new_like(self, rows: int, cols: int, data: list[Any]) -> StaticMatrix:
        if cols == 1:
            return _vector_class(rows)._wrap(rows, cols, data)
        return _static_class(rows, cols)._wrap(rows, cols, data)

    @property
    def size(self) -> int:
        return self._rows

    def __len__(self) -> int:
        return self._rows

    def dot(self, other: StaticMatrix) -> Any:
        """
        sum(a_i * b_i) with another static vector of the same length,
        column (StaticVector[N]) or row (StaticMatrix[1, N]).
        """
        if (
            not isinstance(other, StaticMatrix)
            or 1 not in other.shape
            or other.ROWS * other.COLS != self._rows
        ):
            raise TypeError(
                f"dot product needs a static vector of length {self._rows}, "
                f"got {type(other).__name__}"
            )
        return dense.dot(self._data, other._data)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, StaticVector) and other.ROWS == self.ROWS:
            return dense.dot(self._data, other._data)
        return super().__mul__(other)


SColVector = StaticVector


class SRowVector:
    """SRowVector[N] is StaticMatrix[1, N]."""

    def __class_getitem__(cls, size: Any) -> type:
        return _static_class(1, _static_dimension(size, 'cols'))

    def __new__(cls, *args: Any, **kwargs: Any):
        raise TypeError("SRowVector has no shape; use SRowVector[N]")
