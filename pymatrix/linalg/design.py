"""
SquareDesign: validated input for determinant, inverse and LU solvers.

Wraps a square matrix as a flat row-major tuple together with the
operation requested and a factory that rebuilds matrix-valued results in
the caller's own matrix family (Matrix or StaticMatrix[n, n]).
Immutable after construction.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Callable, Sequence

import numpy as np

from pymatrix.core.compute.dense import max_abs
from pymatrix.core.compute.tolerances import pivot_tolerance
from pymatrix.core.elements import is_exact
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import check_dimension, check_sequence_length, check_square
from pymatrix.linalg._common import VALID_OPERATIONS


MatrixFactory = Callable[[int, int, list], Any]


def _validate_operation(operation: str) -> str:
    if operation not in VALID_OPERATIONS:
        raise ValidationError(
            f"operation must be one of {VALID_OPERATIONS}, got {operation!r}"
        )
    return operation


@dataclass(frozen=True)
class SquareDesign:
    """
    Design for square-matrix computations.

    Construction:
        SquareDesign.from_matrix(A, 'determinant')
        SquareDesign.from_sequence(3, [1, 2, 3, 3, 2, 1, 2, 1, 3], 'inverse')

    Do not construct directly; use factory classmethods.
    """
    operation: str
    _data: tuple[Any, ...]
    _n: int
    _factory: MatrixFactory | None = None

    @classmethod
    def from_matrix(cls, matrix: Any, operation: str) -> SquareDesign:
        """
        Build a design from a Matrix or StaticMatrix.

        Raises
        ------
        NotSquareError
            If the matrix is not square.
        """
        _validate_operation(operation)
        n = check_square(matrix.shape, operation)
        return cls(
            operation=operation,
            _data=tuple(matrix.to_sequence()),
            _n=n,
            _factory=matrix._new_like,
        )

    @classmethod
    def from_sequence(
        cls,
        n: int,
        data: Sequence[Any],
        operation: str,
    ) -> SquareDesign:
        """Build a design from a dimension and row-major data."""
        _validate_operation(operation)
        n = check_dimension(n, 'dim')
        check_sequence_length(data, n, n)
        return cls(operation=operation, _data=tuple(data), _n=n)

    @property
    def n(self) -> int:
        return self._n

    @property
    def shape(self) -> tuple[int, int]:
        return (self._n, self._n)

    @property
    def data(self) -> list[Any]:
        return list(self._data)

    @property
    def sample(self) -> Any:
        """First element, used to derive identities and precision."""
        return self._data[0]

    @property
    def is_exact(self) -> bool:
        """True if every element is rational (int, Fraction, numpy integer)."""
        return all(is_exact(x) for x in self._data)

    @property
    def is_numeric(self) -> bool:
        """True if every element is a built-in or NumPy number (bool excluded)."""
        return all(
            isinstance(x, numbers.Complex) and not isinstance(x, (bool, np.bool_))
            for x in self._data
        )

    def pivot_tolerance(self) -> float:
        """n * eps * max|A| for floating elements, 0.0 otherwise."""
        if self.is_exact:
            return 0.0
        try:
            scale = max_abs(self._data)
        except TypeError:
            return 0.0
        sample = next((x for x in self._data if not is_exact(x)), self.sample)
        return pivot_tolerance(self._n, scale, sample)

    def build(self, rows: int, cols: int, data: list[Any]) -> Any:
        """Rebuild a matrix in the caller's family, or return the raw data."""
        if self._factory is None:
            return data
        return self._factory(rows, cols, data)
