"""
Cofactor (Laplace) expansion kernels.

Determinant and adjugate computations that use only ring operations
(+, -, *), so they are correct for any element type satisfying the
NumericElement contract, including types without a total order or safe
division. The price is O(n!) work for the determinant and O(n^2 * n!)
for the adjugate; these are small-matrix algorithms.

All functions take a square matrix as a flat row-major list and its
dimension n.
"""

from __future__ import annotations

from typing import Any, Sequence

from pymatrix.core.compute import dense
from pymatrix.core.elements import one_of


def laplace_determinant(a: Sequence[Any], n: int) -> Any:
    """
    Determinant by cofactor expansion along the first row.

    Base cases: 1x1 -> the element, 2x2 -> ad - bc. General case:
        det(A) = sum_j (-1)^j * A[0, j] * det(minor(A, 0, j))

    Minors are addressed by the tuple of surviving column indices rather
    than copied, so each recursion level costs no allocation beyond the
    index tuple.

    Args:
        a: Row-major n x n data
        n: Dimension (>= 1)

    Returns:
        The determinant, of the element type
    """
    return _expand(a, n, tuple(range(n)), 0)


def _expand(a: Sequence[Any], n: int, cols: tuple[int, ...], top: int) -> Any:
    # Determinant of the submatrix made of rows top..n-1 and the given columns.
    k = len(cols)
    base = top * n
    if k == 1:
        return a[base + cols[0]]
    if k == 2:
        c0, c1 = cols
        return a[base + c0] * a[base + n + c1] - a[base + c1] * a[base + n + c0]

    acc = None
    for j, col in enumerate(cols):
        term = a[base + col] * _expand(a, n, cols[:j] + cols[j + 1:], top + 1)
        if acc is None:
            acc = term
        elif j % 2:
            acc = acc - term
        else:
            acc = acc + term
    return acc


def cofactor(a: Sequence[Any], n: int, i: int, j: int) -> Any:
    """(-1)^(i+j) * det(minor(A, i, j)); the 1x1 cofactor is one."""
    if n == 1:
        return one_of(a[0])
    d = laplace_determinant(dense.minor(a, n, i, j), n - 1)
    return -d if (i + j) % 2 else d


def cofactor_matrix(a: Sequence[Any], n: int) -> list[Any]:
    """Matrix C with C[i, j] = cofactor(A, i, j), row-major."""
    return [cofactor(a, n, i, j) for i in range(n) for j in range(n)]


def adjugate(a: Sequence[Any], n: int) -> list[Any]:
    """Transpose of the cofactor matrix."""
    return dense.transpose(cofactor_matrix(a, n), n, n)
