"""
LAPACK-backed kernels (via SciPy/NumPy).

Float/complex fast path for larger matrices. Inputs are converted to
float64 (complex128 if any element is complex); results are NumPy arrays
or NumPy scalars and are converted back to Python scalars by the caller.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import LinAlgWarning, lu_factor, lu_solve

from pymatrix.core.exceptions import SingularMatrixError, ValidationError


@dataclass(frozen=True)
class LapackLU:
    """
    Result of LAPACK getrf.

    Attributes:
        lu: Packed L/U factors (n x n)
        piv: LAPACK pivot indices; row i was interchanged with row piv[i]
        singular: True if a diagonal entry of U is within the pivot tolerance
        rcond: Reciprocal 2-norm condition number of the input (0.0 if singular)
    """
    lu: NDArray[Any]
    piv: NDArray[np.integer[Any]]
    singular: bool
    rcond: float

    @property
    def swaps(self) -> int:
        return int(np.sum(self.piv != np.arange(len(self.piv))))

    @property
    def permutation(self) -> tuple[int, ...]:
        perm = list(range(len(self.piv)))
        for i, p in enumerate(self.piv):
            perm[i], perm[p] = perm[p], perm[i]
        return tuple(perm)


def to_array(a: Sequence[Any], n_rows: int, n_cols: int) -> NDArray[Any]:
    """Row-major list -> 2D float64/complex128 array."""
    dtype = np.complex128 if any(isinstance(x, (complex, np.complexfloating)) for x in a) else np.float64
    try:
        return np.asarray(a, dtype=dtype).reshape(n_rows, n_cols)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"matrix elements cannot be converted to {np.dtype(dtype).name} "
            f"for the LAPACK backend: {e}"
        ) from e


def lu_cpu(X: NDArray[Any]) -> LapackLU:
    """
    LU decomposition using LAPACK (via scipy.linalg.lu_factor).

    A pivot counts as zero when |u_ii| <= n * eps * max|X|.
    """
    n = X.shape[0]
    with warnings.catch_warnings():
        # Exactly singular input makes getrf warn; we report it ourselves.
        warnings.simplefilter('ignore', LinAlgWarning)
        try:
            lu, piv = lu_factor(X, check_finite=True)
        except ValueError as e:
            raise ValidationError(
                f"the LAPACK backend needs finite matrix elements: {e}"
            ) from e

    scale = float(np.max(np.abs(X))) if X.size else 0.0
    tol = n * np.finfo(X.dtype).eps * scale
    diag = np.abs(np.diag(lu))
    singular = bool(scale == 0.0 or np.any(diag <= tol))

    if singular:
        rcond = 0.0
    else:
        rcond = float(1.0 / np.linalg.cond(X))
    return LapackLU(lu=lu, piv=piv, singular=singular, rcond=rcond)


def det_cpu(X: NDArray[Any]) -> tuple[Any, LapackLU]:
    """Determinant from the LU factors: (-1)^swaps * prod(diag(U))."""
    fac = lu_cpu(X)
    if fac.singular:
        return X.dtype.type(0), fac
    det = np.prod(np.diag(fac.lu))
    if fac.swaps % 2:
        det = -det
    return det, fac


def inv_cpu(X: NDArray[Any]) -> tuple[NDArray[Any], LapackLU]:
    """
    Inverse by solving LU X^-1 = I.

    Raises:
        SingularMatrixError: If a pivot is within tolerance of zero
    """
    fac = lu_cpu(X)
    if fac.singular:
        raise SingularMatrixError(
            "Matrix is singular to working precision: a pivot of its LU "
            "factorization is zero.",
            matrix_name='A',
            determinant=0.0,
            method='lapack',
        )
    identity = np.eye(X.shape[0], dtype=X.dtype)
    return lu_solve((fac.lu, fac.piv), identity, check_finite=False), fac
