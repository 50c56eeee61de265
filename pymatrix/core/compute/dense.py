"""
Dense row-major kernel shared by Matrix, Vector and the static variants.

Every function works on plain Python lists holding a matrix in row-major
order (element (r, c) of an R x C matrix lives at index r*C + c) and
returns a fresh list. None of them validate shapes; callers do that
first (runtime checks for Matrix, class identity for StaticMatrix), so
the same arithmetic backs both failure-mode contracts.
"""

from __future__ import annotations

from typing import Any, Sequence


Buffer = list[Any]


def filled(count: int, value: Any) -> Buffer:
    return [value] * count


def identity(dim: int, zero: Any, one: Any) -> Buffer:
    """dim x dim identity (one on the diagonal, zero elsewhere)."""
    return diagonal([one] * dim, zero)


def diagonal(entries: Sequence[Any], zero: Any) -> Buffer:
    """Square matrix with `entries` on the diagonal."""
    dim = len(entries)
    data = [zero] * (dim * dim)
    for i, value in enumerate(entries):
        data[i * dim + i] = value
    return data


def add(a: Sequence[Any], b: Sequence[Any]) -> Buffer:
    return [x + y for x, y in zip(a, b)]


def subtract(a: Sequence[Any], b: Sequence[Any]) -> Buffer:
    return [x - y for x, y in zip(a, b)]


def negate(a: Sequence[Any]) -> Buffer:
    return [-x for x in a]


def scale(a: Sequence[Any], scalar: Any) -> Buffer:
    return [x * scalar for x in a]


def divide(a: Sequence[Any], divisor: Any) -> Buffer:
    return [x / divisor for x in a]


def matmul(
    a: Sequence[Any],
    a_rows: int,
    a_cols: int,
    b: Sequence[Any],
    b_cols: int,
) -> Buffer:
    """
    Standard product of an (a_rows x a_cols) by an (a_cols x b_cols) matrix.

    Each entry is sum_k a[i, k] * b[k, j]; the accumulator starts from the
    first term so that no separate zero element is needed.
    """
    out: Buffer = []
    for i in range(a_rows):
        row = a[i * a_cols:(i + 1) * a_cols]
        for j in range(b_cols):
            acc = row[0] * b[j]
            for k in range(1, a_cols):
                acc = acc + row[k] * b[k * b_cols + j]
            out.append(acc)
    return out


def dot(a: Sequence[Any], b: Sequence[Any]) -> Any:
    """sum(a_i * b_i); both sequences must be non-empty and equally long."""
    acc = a[0] * b[0]
    for x, y in zip(a[1:], b[1:]):
        acc = acc + x * y
    return acc


def transpose(a: Sequence[Any], rows: int, cols: int) -> Buffer:
    """(rows x cols) -> (cols x rows); element (r, c) moves to (c, r)."""
    return [a[r * cols + c] for c in range(cols) for r in range(rows)]


def row(a: Sequence[Any], cols: int, r: int) -> Buffer:
    return list(a[r * cols:(r + 1) * cols])


def column(a: Sequence[Any], rows: int, cols: int, c: int) -> Buffer:
    return [a[r * cols + c] for r in range(rows)]


def to_rows(a: Sequence[Any], rows: int, cols: int) -> list[Buffer]:
    return [row(a, cols, r) for r in range(rows)]


def minor(a: Sequence[Any], n: int, skip_row: int, skip_col: int) -> Buffer:
    """(n-1) x (n-1) submatrix of a square n x n matrix without one row and column."""
    return [
        a[r * n + c]
        for r in range(n) if r != skip_row
        for c in range(n) if c != skip_col
    ]


def trace(a: Sequence[Any], n: int) -> Any:
    acc = a[0]
    for i in range(1, n):
        acc = acc + a[i * n + i]
    return acc


def max_abs(a: Sequence[Any]) -> Any:
    return max(abs(x) for x in a)
