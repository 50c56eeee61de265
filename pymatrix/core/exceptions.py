"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Shape and index problems are ValidationErrors;
failures of the arithmetic itself are NumericalErrors.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from typing import Any


Shape = tuple[int, int]


def _fmt_shape(shape: Shape | None) -> str:
    if shape is None:
        return "?"
    return f"{shape[0]}x{shape[1]}"


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Base class for every shape-related failure.
    """
    pass


class InvalidDimensionError(DimensionError):
    """
    A requested shape has a row or column count below one.

    Attributes:
        rows: Requested row count
        cols: Requested column count
    """

    def __init__(
        self,
        message: str | None = None,
        rows: int | None = None,
        cols: int | None = None,
    ):
        if message is None:
            message = (
                f"Dimensions with a size of less than 1 are invalid "
                f"(got rows={rows}, cols={cols})."
            )
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class DimensionMismatchError(DimensionError):
    """
    Two operands (or an operand and a data sequence) have incompatible shapes.

    Attributes:
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
        operation: Operation that was attempted ('add', 'multiply', ...)
        actual_length: Length of the offending sequence, for constructors
        expected_length: Length the constructor required
    """

    def __init__(
        self,
        message: str | None = None,
        left_shape: Shape | None = None,
        right_shape: Shape | None = None,
        operation: str | None = None,
        actual_length: int | None = None,
        expected_length: int | None = None,
    ):
        if message is None:
            if actual_length is not None:
                message = (
                    f"Invalid input dimensions. Input has length {actual_length}, "
                    f"but should have length {expected_length}."
                )
            else:
                message = (
                    f"Dimensions of two matrices do not match in the correct way. "
                    f"Cannot {operation} {_fmt_shape(left_shape)} matrix with "
                    f"{_fmt_shape(right_shape)} matrix."
                )
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape
        self.operation = operation
        self.actual_length = actual_length
        self.expected_length = expected_length


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.

    Attributes:
        shape: Shape of the offending matrix
        operation: Operation that was attempted ('determinant', 'inverse', ...)
    """

    def __init__(
        self,
        message: str | None = None,
        shape: Shape | None = None,
        operation: str | None = None,
    ):
        if message is None:
            message = (
                f"Not a square matrix. Cannot compute {operation or 'this'} of a "
                f"{_fmt_shape(shape)} matrix; rows and cols need to be the same."
            )
        super().__init__(message)
        self.shape = shape
        self.operation = operation


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    A row/column index falls outside the matrix.

    Also an IndexError, so generic sequence code keeps working.

    Attributes:
        index: The offending index (row, or (row, col))
        shape: Shape of the indexed matrix
    """

    def __init__(
        self,
        message: str | None = None,
        index: Any = None,
        shape: Shape | None = None,
    ):
        if message is None:
            message = (
                f"Tried to access a {_fmt_shape(shape)} matrix at index "
                f"`{index}`, which is out of bounds."
            )
        super().__init__(message)
        self.index = index
        self.shape = shape


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from the arithmetic itself.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when inversion is requested for a matrix whose determinant
    (or a pivot, on the elimination paths) is zero.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was found, if computed
        method: Method that detected singularity
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: Any = None,
        method: str | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.method = method


class DivisionByZeroError(NumericalError, ZeroDivisionError):
    """
    Scalar division by the additive identity.

    Attributes:
        divisor: The divisor that compared equal to zero
    """

    def __init__(self, message: str | None = None, divisor: Any = None):
        if message is None:
            message = f"Cannot divide by zero (divisor={divisor!r})."
        super().__init__(message)
        self.divisor = divisor
