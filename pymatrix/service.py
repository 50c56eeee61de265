"""
In-process handle service.

MatrixService owns a table of matrices addressed by integer handles, for
callers that prefer passing ids around to holding Matrix objects. Every
operation stores its result under a fresh handle; inputs are never
modified. Errors raised by the matrix core pass through unchanged.

Single-threaded, like the rest of the library.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from pymatrix import linalg
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.result import Result
from pymatrix.linalg._common import DeterminantParams
from pymatrix.matrix import Matrix

logger = logging.getLogger(__name__)

VALID_OPERATORS = ('add', 'subtract', 'multiply', 'scale', 'divide')


class MatrixService:
    """
    Handle-based facade over Matrix.

    Examples:
        >>> svc = MatrixService()
        >>> a = svc.construct(2, 2, [1, 2, 3, 4])
        >>> svc.det(a)
        -2
    """

    def __init__(self) -> None:
        self._matrices: dict[int, Matrix] = {}
        self._next_handle: int = 1

    def __len__(self) -> int:
        return len(self._matrices)

    def __contains__(self, handle: object) -> bool:
        return handle in self._matrices

    def handles(self) -> tuple[int, ...]:
        """Live handles in creation order."""
        return tuple(self._matrices)

    def _store(self, m: Matrix) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._matrices[handle] = m
        logger.debug("stored %dx%d matrix as handle %d", m.rows, m.cols, handle)
        return handle

    def _lookup(self, handle: int) -> Matrix:
        try:
            return self._matrices[handle]
        except (KeyError, TypeError) as e:
            raise ValidationError(f"unknown matrix handle {handle!r}") from e

    def construct(self, rows: int, cols: int, data: Sequence[Any]) -> int:
        """Store a rows x cols matrix built from row-major data."""
        return self._store(Matrix.from_sequence(rows, cols, data))

    def put(self, m: Matrix) -> int:
        """Store a copy of an existing matrix."""
        if not isinstance(m, Matrix):
            raise ValidationError(f"expected a Matrix, got {type(m).__name__}")
        return self._store(m.copy())

    def get(self, handle: int) -> Matrix:
        """Copy of the stored matrix."""
        return self._lookup(handle).copy()

    def op(self, a: int, b: Any, operator: str) -> int:
        """
        Apply a binary operator and store the result.

        Parameters
        ----------
        a : int
            Handle of the left operand.
        b : int or scalar
            Handle of the right operand; a plain scalar for 'scale' and
            'divide'.
        operator : str
            'add', 'subtract', 'multiply', 'scale' or 'divide'.
        """
        left = self._lookup(a)
        if operator == 'add':
            result = left + self._lookup(b)
        elif operator == 'subtract':
            result = left - self._lookup(b)
        elif operator == 'multiply':
            result = left @ self._lookup(b)
        elif operator == 'scale':
            result = left * b
        elif operator == 'divide':
            result = left / b
        else:
            raise ValidationError(
                f"Unknown operator: {operator!r}. Use one of {VALID_OPERATORS}."
            )
        return self._store(result)

    def det(self, handle: int, *, method: str = 'cofactor') -> Any:
        """Determinant of the stored matrix."""
        return self.det_result(handle, method=method).params.value

    def det_result(self, handle: int, *, method: str = 'cofactor') -> Result[DeterminantParams]:
        """Determinant with the backend's timing, info and warnings."""
        return linalg.det(self._lookup(handle), method=method)._result

    def invert(self, handle: int, *, method: str = 'cofactor') -> int:
        """Store the inverse and return its handle."""
        return self._store(self._lookup(handle).inverse(method=method))

    def transpose(self, handle: int) -> int:
        return self._store(self._lookup(handle).transpose())

    def release(self, handle: int) -> None:
        """Drop a handle. Releasing an unknown handle is an error."""
        self._lookup(handle)
        del self._matrices[handle]
        logger.debug("released handle %d", handle)
