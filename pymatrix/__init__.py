"""
PyMatrix: generic dense matrices for Python.

Matrices over any element type that supports +, -, *, / and unary minus
(int, Fraction, float, complex, NumPy scalars, user types), with exact
cofactor-expansion determinants and adjugate inverses as the baseline,
plus elimination and LAPACK fast paths.

Submodules:
    matrix: Matrix (runtime shapes)
    vector: Vector (row or column)
    static: StaticMatrix[R, C], StaticVector[N] (shapes in the type)
    linalg: det, inv, lu solvers and backends
    literals: matrix("1, 2; 3, 4") style construction helpers
    service: Handle-based MatrixService
"""

import logging

__version__ = "0.1.0"

from pymatrix import linalg
from pymatrix.matrix import Matrix
from pymatrix.vector import Vector
from pymatrix.static import StaticMatrix, StaticVector, SColVector, SRowVector
from pymatrix.literals import matrix, smatrix, vector, parse_matrix_literal
from pymatrix.service import MatrixService
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

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "linalg",
    "Matrix",
    "Vector",
    "StaticMatrix",
    "StaticVector",
    "SColVector",
    "SRowVector",
    "matrix",
    "smatrix",
    "vector",
    "parse_matrix_literal",
    "MatrixService",
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
]
