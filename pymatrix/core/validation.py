"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent coercion of shapes or indices
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Operation names included in all shape error messages
"""

from __future__ import annotations

import operator
from collections.abc import Sequence
from typing import Any

from pymatrix.core.elements import is_zero
from pymatrix.core.exceptions import (
    DimensionMismatchError,
    DivisionByZeroError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    NotSquareError,
    ValidationError,
)


Shape = tuple[int, int]


def _as_count(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected an integer, got bool")
    try:
        return operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        ) from e


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a single row/column count.

    Accepts any integral value (int, numpy integer) and returns it as int.

    Args:
        value: Count to validate
        name: Parameter name for error messages

    Returns:
        The count as a plain int

    Raises:
        ValidationError: If value is not integral
        InvalidDimensionError: If value is less than 1
    """
    count = _as_count(value, name)
    if count < 1:
        raise InvalidDimensionError(
            f"{name}: dimensions with a size of less than 1 are invalid, got {count}",
            rows=count if name in ('rows', 'dim', 'size') else None,
            cols=count if name in ('cols', 'dim') else None,
        )
    return count


def check_shape(rows: Any, cols: Any) -> Shape:
    """
    Validate a (rows, cols) pair.

    Raises:
        ValidationError: If either count is not integral
        InvalidDimensionError: If either count is less than 1
    """
    r = _as_count(rows, 'rows')
    c = _as_count(cols, 'cols')
    if r < 1 or c < 1:
        raise InvalidDimensionError(rows=r, cols=c)
    return r, c


def check_sequence_length(seq: Sequence[Any], rows: int, cols: int) -> None:
    """
    Verify a flat row-major sequence holds exactly rows*cols elements.

    Raises:
        DimensionMismatchError: If the length is wrong
    """
    expected = rows * cols
    if len(seq) != expected:
        raise DimensionMismatchError(
            actual_length=len(seq),
            expected_length=expected,
            right_shape=(rows, cols),
            operation='construct',
        )


def check_rectangular(rows: Sequence[Sequence[Any]], name: str) -> Shape:
    """
    Verify nested row data is non-empty and rectangular.

    Args:
        rows: Sequence of row sequences
        name: Parameter name for error messages

    Returns:
        (n_rows, n_cols)

    Raises:
        InvalidDimensionError: If there are no rows or the first row is empty
        DimensionMismatchError: If rows differ in length
    """
    if len(rows) == 0 or len(rows[0]) == 0:
        raise InvalidDimensionError(
            f"{name}: matrix data must have at least one row and one column",
            rows=len(rows),
            cols=len(rows[0]) if len(rows) else 0,
        )
    n_cols = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != n_cols:
            raise DimensionMismatchError(
                f"{name}: row {i} has {len(row)} entries, expected {n_cols} "
                f"(rows must all have the same length)",
                actual_length=len(row),
                expected_length=n_cols,
                operation='construct',
            )
    return len(rows), n_cols


def check_index(row: Any, col: Any, shape: Shape) -> tuple[int, int]:
    """
    Verify (row, col) addresses an element of a matrix with the given shape.

    Negative indices are rejected rather than wrapped around.

    Raises:
        IndexOutOfRangeError: If either index is out of range
        ValidationError: If an index is not integral
    """
    try:
        r = operator.index(row)
        c = operator.index(col)
    except TypeError as e:
        raise ValidationError(
            f"matrix indices must be integers, got ({row!r}, {col!r})"
        ) from e
    if not (0 <= r < shape[0]) or not (0 <= c < shape[1]):
        raise IndexOutOfRangeError(index=(r, c), shape=shape)
    return r, c


def check_row_index(row: Any, shape: Shape) -> int:
    """Verify `row` addresses a row of a matrix with the given shape."""
    try:
        r = operator.index(row)
    except TypeError as e:
        raise ValidationError(f"row index must be an integer, got {row!r}") from e
    if not 0 <= r < shape[0]:
        raise IndexOutOfRangeError(index=r, shape=shape)
    return r


def check_col_index(col: Any, shape: Shape) -> int:
    """Verify `col` addresses a column of a matrix with the given shape."""
    try:
        c = operator.index(col)
    except TypeError as e:
        raise ValidationError(f"column index must be an integer, got {col!r}") from e
    if not 0 <= c < shape[1]:
        raise IndexOutOfRangeError(index=c, shape=shape)
    return c


def check_same_shape(left: Shape, right: Shape, operation: str) -> None:
    """
    Verify two operands have identical shapes (add/subtract).

    Raises:
        DimensionMismatchError: If shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            left_shape=left, right_shape=right, operation=operation
        )


def check_inner_dimensions(left: Shape, right: Shape, operation: str = 'multiply') -> None:
    """
    Verify left.cols == right.rows for a matrix product.

    Raises:
        DimensionMismatchError: If inner dimensions disagree
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            left_shape=left, right_shape=right, operation=operation
        )


def check_square(shape: Shape, operation: str) -> int:
    """
    Verify a matrix is square and return its dimension.

    Raises:
        NotSquareError: If rows != cols
    """
    if shape[0] != shape[1]:
        raise NotSquareError(shape=shape, operation=operation)
    return shape[0]


def check_nonzero_divisor(divisor: Any) -> None:
    """
    Verify a scalar divisor is not the additive identity.

    Raises:
        DivisionByZeroError: If divisor equals zero
    """
    try:
        zero = is_zero(divisor)
    except ValidationError:
        zero = False
    if zero:
        raise DivisionByZeroError(divisor=divisor)
