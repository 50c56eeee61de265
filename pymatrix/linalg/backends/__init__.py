"""
Linear-algebra backends.

Available backends:
    CofactorBackend: Laplace expansion / adjugate, any NumericElement type
    EliminationBackend: Gaussian elimination with partial pivoting
    LapackBackend: SciPy LAPACK getrf/getrs on float64/complex128
"""

from pymatrix.linalg.backends.cofactor import CofactorBackend
from pymatrix.linalg.backends.elimination import EliminationBackend
from pymatrix.linalg.backends.lapack import LapackBackend

__all__ = [
    "CofactorBackend",
    "EliminationBackend",
    "LapackBackend",
]
