"""
Common payload types for the linear-algebra solvers.

Every backend returns one of these inside a Result envelope. Matrix-valued
payloads are kept as flat row-major tuples; the solution objects turn them
back into Matrix / StaticMatrix instances.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


VALID_OPERATIONS = ("determinant", "inverse", "lu")
VALID_METHODS = ("cofactor", "elimination", "lapack", "auto")


@dataclass(frozen=True)
class DeterminantParams:
    """
    Parameter payload for determinants.

    Attributes
    ----------
    value : T
        The determinant. Same element type as the input for 'cofactor';
        Fraction for integer input on 'elimination'; Python float/complex
        for 'lapack'.
    """
    value: Any


@dataclass(frozen=True)
class InverseParams:
    """
    Parameter payload for inverses.

    Attributes
    ----------
    data : tuple
        Row-major inverse, n*n entries.
    n : int
        Dimension.
    determinant : T or None
        Determinant of the input, when the method computes it on the way.
    """
    data: tuple[Any, ...]
    n: int
    determinant: Any = None


@dataclass(frozen=True)
class LUParams:
    """
    Parameter payload for LU decompositions (P A = L U).

    Attributes
    ----------
    lu : tuple
        Packed row-major factors: strictly-lower part is L (unit diagonal
        implied), upper part including the diagonal is U.
    n : int
        Dimension.
    permutation : tuple of int
        Row i of P A is row permutation[i] of A.
    swaps : int
        Number of row exchanges.
    singular : bool
        A zero pivot column was found.
    determinant : T
        (-1)^swaps * prod(diag(U)), zero when singular.
    """
    lu: tuple[Any, ...]
    n: int
    permutation: tuple[int, ...]
    swaps: int
    singular: bool
    determinant: Any
