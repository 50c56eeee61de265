"""
Linear algebra kernels for PyMatrix.

All functions work on flat row-major lists of a square matrix plus its
dimension, and follow these conventions:
    - cofactor: ring operations only (baseline, any element type)
    - elimination: needs safe division; integers are promoted to Fraction
    - lapack: NumPy/SciPy float64/complex128 fast path
    - Each factorization returns a structured result dataclass
    - Errors are raised immediately with clear messages

Submodules:
    cofactor: Laplace determinant, cofactor matrix, adjugate
    elimination: LU decomposition with partial pivoting, Gauss-Jordan inverse
    lapack: scipy.linalg.lu_factor / lu_solve wrappers
"""

from pymatrix.core.compute.linalg.cofactor import (
    adjugate,
    cofactor,
    cofactor_matrix,
    laplace_determinant,
)
from pymatrix.core.compute.linalg.elimination import (
    LUDecomposition,
    gauss_jordan_inverse,
    lu_decompose,
)
from pymatrix.core.compute.linalg.lapack import (
    LapackLU,
    det_cpu,
    inv_cpu,
    lu_cpu,
    to_array,
)

__all__ = [
    # Cofactor expansion
    "adjugate",
    "cofactor",
    "cofactor_matrix",
    "laplace_determinant",
    # Elimination
    "LUDecomposition",
    "gauss_jordan_inverse",
    "lu_decompose",
    # LAPACK
    "LapackLU",
    "det_cpu",
    "inv_cpu",
    "lu_cpu",
    "to_array",
]
