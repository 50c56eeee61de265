"""
Solver dispatch for square-matrix computations.

Provides det(), inv() and lu(). Each accepts a Matrix, a StaticMatrix or
a pre-built SquareDesign and returns a solution wrapping the backend's
Result.
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from pymatrix.core.compute.tolerances import (
    AUTO_COFACTOR_MAX_DIMENSION,
    COFACTOR_WARN_DIMENSION,
)
from pymatrix.core.exceptions import ValidationError
from pymatrix.linalg._common import VALID_METHODS
from pymatrix.linalg.backends.cofactor import CofactorBackend
from pymatrix.linalg.backends.elimination import EliminationBackend
from pymatrix.linalg.backends.lapack import LapackBackend
from pymatrix.linalg.design import SquareDesign
from pymatrix.linalg.solution import DeterminantSolution, InverseSolution, LUSolution

logger = logging.getLogger(__name__)

MethodChoice = Literal['cofactor', 'elimination', 'lapack', 'auto']


def _get_backend(method: str):
    """Map a method name to its backend."""
    if method == 'cofactor':
        return CofactorBackend()
    if method == 'elimination':
        return EliminationBackend()
    if method == 'lapack':
        return LapackBackend()
    raise ValidationError(
        f"Unknown method: {method!r}. Use one of {VALID_METHODS}."
    )


def _auto_method(design: SquareDesign) -> str:
    """
    Pick a method for method='auto'.

    Small matrices and non-numeric element types always use cofactor
    expansion, which needs only ring operations. Exact matrices stay on
    cofactor up to COFACTOR_WARN_DIMENSION, then move to elimination
    (exact over Fraction). Other numeric matrices go to LAPACK.
    """
    n = design.n
    if design.operation == 'lu':
        return 'lapack' if design.is_numeric and not design.is_exact else 'elimination'
    if n <= AUTO_COFACTOR_MAX_DIMENSION:
        return 'cofactor'
    if design.is_exact:
        return 'cofactor' if n <= COFACTOR_WARN_DIMENSION else 'elimination'
    if design.is_numeric:
        return 'lapack'
    return 'cofactor'


def _design_for(A: Any, operation: str) -> SquareDesign:
    if isinstance(A, SquareDesign):
        if A.operation != operation:
            return SquareDesign(
                operation=operation,
                _data=A._data,
                _n=A._n,
                _factory=A._factory,
            )
        return A
    return SquareDesign.from_matrix(A, operation)


def _run(design: SquareDesign, method: str):
    if method == 'auto':
        method = _auto_method(design)
        logger.debug("auto method for %s (n=%d): %s", design.operation, design.n, method)
    be = _get_backend(method)
    return be.solve(design)


def det(A: Any, *, method: MethodChoice = 'cofactor') -> DeterminantSolution:
    """
    Determinant of a square matrix.

    Parameters
    ----------
    A : Matrix, StaticMatrix or SquareDesign
        Square input.
    method : str
        'cofactor' (default) Laplace expansion, exact for any element type.
        'elimination' Gaussian elimination; integers promoted to Fraction.
        'lapack' SciPy LU in float64/complex128.
        'auto' picks one of the above from size and element type.

    Returns
    -------
    DeterminantSolution
        `.value` is the determinant.

    Raises
    ------
    NotSquareError
        If A is not square.
    ValidationError
        If method is unknown.
    """
    design = _design_for(A, 'determinant')
    result = _run(design, method)
    return DeterminantSolution(_result=result, _design=design)


def inv(A: Any, *, method: MethodChoice = 'cofactor') -> InverseSolution:
    """
    Inverse of a square matrix.

    Parameters
    ----------
    A : Matrix, StaticMatrix or SquareDesign
        Square input.
    method : str
        'cofactor' (default) adjugate divided by the determinant.
        'elimination' Gauss-Jordan with partial pivoting.
        'lapack' SciPy lu_factor / lu_solve.
        'auto' picks one of the above from size and element type.

    Returns
    -------
    InverseSolution
        `.value` is the inverse, in the same matrix family as A.

    Raises
    ------
    NotSquareError
        If A is not square.
    SingularMatrixError
        If A has no inverse.
    """
    design = _design_for(A, 'inverse')
    result = _run(design, method)
    return InverseSolution(_result=result, _design=design)


def lu(A: Any, *, method: MethodChoice = 'elimination') -> LUSolution:
    """
    LU decomposition with partial pivoting, P A = L U.

    A singular matrix is reported through `LUSolution.singular` rather
    than raised. method='cofactor' is not supported.
    """
    design = _design_for(A, 'lu')
    result = _run(design, method)
    return LUSolution(_result=result, _design=design)
