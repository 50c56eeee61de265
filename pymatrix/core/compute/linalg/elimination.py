"""
Gaussian elimination kernels (LU decomposition, Gauss-Jordan inverse).

The optional fast path for element types that support safe division.
Integral elements are promoted to Fraction first, so integer matrices are
factored exactly; floats are pivoted by magnitude (partial pivoting) and
a pivot with |p| <= tol counts as zero.

Elements that cannot be ordered by magnitude (abs() fails) fall back to
choosing the first non-zero pivot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from pymatrix.core.elements import one_of, to_field, zero_of
from pymatrix.core.exceptions import SingularMatrixError


@dataclass(frozen=True)
class LUDecomposition:
    """
    Result of LU decomposition with partial pivoting: P A = L U.

    Attributes:
        lu: Packed factors, row-major n x n. Strictly-lower part holds L
            (unit diagonal implied), upper part including the diagonal holds U.
        n: Dimension
        permutation: Row order; row i of P A is row permutation[i] of A
        swaps: Number of row exchanges performed
        singular: True if a zero pivot column was met. Factorization stops
            there, so the trailing part of `lu` is not meaningful.
    """
    lu: tuple[Any, ...]
    n: int
    permutation: tuple[int, ...]
    swaps: int
    singular: bool

    def determinant(self) -> Any:
        """(-1)^swaps * prod(diag(U)), zero when singular."""
        if self.singular:
            return zero_of(self.lu[0])
        det = self.lu[0]
        for i in range(1, self.n):
            det = det * self.lu[i * self.n + i]
        return -det if self.swaps % 2 else det


def _magnitude(value: Any) -> Any:
    try:
        return abs(value)
    except TypeError:
        return None


def _select_pivot(m: list[Any], n: int, col: int, start: int, tol: float) -> int | None:
    """Row index (>= start) of the pivot for column `col`, or None if all zero."""
    zero = zero_of(m[0])
    best_row = None
    best_mag = None
    for r in range(start, n):
        value = m[r * n + col]
        mag = _magnitude(value)
        if mag is None:
            # Unordered element type: first non-zero wins.
            if value != zero:
                return r
            continue
        if mag <= tol or value == zero:
            continue
        if best_mag is None or mag > best_mag:
            best_row, best_mag = r, mag
    return best_row


def _swap_rows(m: list[Any], n: int, r1: int, r2: int) -> None:
    if r1 == r2:
        return
    s1, s2 = r1 * n, r2 * n
    m[s1:s1 + n], m[s2:s2 + n] = m[s2:s2 + n], m[s1:s1 + n]


def lu_decompose(a: Sequence[Any], n: int, tol: float = 0.0) -> LUDecomposition:
    """
    Doolittle LU decomposition with partial pivoting.

    Args:
        a: Row-major n x n data
        n: Dimension
        tol: Pivots with magnitude <= tol count as zero (0.0 for exact types)

    Returns:
        LUDecomposition; `singular` is set instead of raising so callers can
        report det = 0.
    """
    m = [to_field(x) for x in a]
    perm = list(range(n))
    swaps = 0

    for i in range(n):
        p = _select_pivot(m, n, i, i, tol)
        if p is None:
            return LUDecomposition(tuple(m), n, tuple(perm), swaps, True)
        if p != i:
            _swap_rows(m, n, i, p)
            perm[i], perm[p] = perm[p], perm[i]
            swaps += 1

        pivot = m[i * n + i]
        for j in range(i + 1, n):
            factor = m[j * n + i] / pivot
            m[j * n + i] = factor
            for k in range(i + 1, n):
                m[j * n + k] = m[j * n + k] - factor * m[i * n + k]

    return LUDecomposition(tuple(m), n, tuple(perm), swaps, False)


def gauss_jordan_inverse(a: Sequence[Any], n: int, tol: float = 0.0) -> list[Any]:
    """
    Inverse by Gauss-Jordan elimination on [A | I].

    Args:
        a: Row-major n x n data
        n: Dimension
        tol: Pivots with magnitude <= tol count as zero

    Returns:
        Row-major inverse

    Raises:
        SingularMatrixError: If a column has no usable pivot
    """
    m = [to_field(x) for x in a]
    zero = zero_of(m[0])
    one = one_of(m[0])
    inv = [zero] * (n * n)
    for i in range(n):
        inv[i * n + i] = one

    for col in range(n):
        p = _select_pivot(m, n, col, col, tol)
        if p is None:
            raise SingularMatrixError(
                f"Matrix is singular: no non-zero pivot in column {col}.",
                matrix_name='A',
                determinant=zero,
                method='elimination',
            )
        _swap_rows(m, n, col, p)
        _swap_rows(inv, n, col, p)

        pivot = m[col * n + col]
        base = col * n
        for k in range(n):
            m[base + k] = m[base + k] / pivot
            inv[base + k] = inv[base + k] / pivot

        for r in range(n):
            if r == col:
                continue
            factor = m[r * n + col]
            if factor == zero:
                continue
            rb = r * n
            for k in range(n):
                m[rb + k] = m[rb + k] - factor * m[base + k]
                inv[rb + k] = inv[rb + k] - factor * inv[base + k]

    return inv
