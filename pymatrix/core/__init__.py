"""
Core infrastructure for PyMatrix.

This module provides shared abstractions, utilities, and compute
infrastructure used by Matrix, Vector, the static variants and the
linear-algebra solvers.

Key components:
    protocols: NumericElement, Backend protocols
    elements: Zero/one identities for arbitrary element types
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    warnings: Warning categories
    validation: Shape, index and divisor validators
    compute: Dense kernel, timing, tolerances, linear algebra kernels
"""

from pymatrix.core.protocols import NumericElement, Backend
from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    InvalidDimensionError,
    DimensionMismatchError,
    NotSquareError,
    IndexOutOfRangeError,
    NumericalError,
    SingularMatrixError,
    DivisionByZeroError,
)
from pymatrix.core.warnings import (
    PyMatrixWarning,
    PyMatrixPerformanceWarning,
    PyMatrixPrecisionWarning,
)

__all__ = [
    # Protocols
    "NumericElement",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "InvalidDimensionError",
    "DimensionMismatchError",
    "NotSquareError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
    "DivisionByZeroError",
    # Warnings
    "PyMatrixWarning",
    "PyMatrixPerformanceWarning",
    "PyMatrixPrecisionWarning",
]
