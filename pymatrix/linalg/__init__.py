"""
Linear-algebra module.

Public API:
    det(A)   - Determinant (cofactor expansion by default)
    inv(A)   - Inverse (adjugate method by default)
    lu(A)    - LU decomposition with partial pivoting
"""

from pymatrix.linalg.solvers import det, inv, lu
from pymatrix.linalg.design import SquareDesign
from pymatrix.linalg._common import DeterminantParams, InverseParams, LUParams
from pymatrix.linalg.solution import DeterminantSolution, InverseSolution, LUSolution

__all__ = [
    "det",
    "inv",
    "lu",
    "SquareDesign",
    "DeterminantParams",
    "InverseParams",
    "LUParams",
    "DeterminantSolution",
    "InverseSolution",
    "LUSolution",
]
