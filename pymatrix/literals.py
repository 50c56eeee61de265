"""
Literal construction helpers.

A small text grammar for writing matrices inline:

    matrix("1, 0, 0; 0, 1, 0; 0, 0, 1")      rows separated by ';' or newlines
    matrix("{4, 5, 6}, {6, 5, 4}")           Wolfram Alpha style rows
    vector("1, 1, 1, 1")
    smatrix("1 2; 3 4")                       StaticMatrix[2, 2]

Tokens are separated by commas or whitespace; trailing separators are
allowed. Each token is parsed as int, then p/q Fraction, then float, then
complex, unless an `element` converter is given. The helpers only call
the public constructors, so shape errors come from there.
"""

from __future__ import annotations

import re
from fractions import Fraction
from typing import Any, Callable, Sequence

from pymatrix.core.exceptions import InvalidDimensionError, ValidationError
from pymatrix.core.validation import check_rectangular
from pymatrix.matrix import Matrix
from pymatrix.static import StaticMatrix
from pymatrix.vector import Vector


ElementParser = Callable[[str], Any]

_ROW_SEPARATOR = re.compile(r'[;\n]')
_TOKEN_SEPARATOR = re.compile(r'[,\s]+')
_BRACED_ROW = re.compile(r'\{([^{}]*)\}')
_BETWEEN_BRACES = re.compile(r'^[\s,]*$')


def parse_element(token: str) -> Any:
    """int, then Fraction (p/q), then float, then complex."""
    for kind in (int, Fraction, float, complex):
        if kind is Fraction and '/' not in token:
            continue
        try:
            return kind(token)
        except (ValueError, ZeroDivisionError):
            continue
    raise ValidationError(f"cannot parse matrix element {token!r}")


def _split_tokens(row: str) -> list[str]:
    return [t for t in _TOKEN_SEPARATOR.split(row.strip()) if t]


def _split_rows(text: str) -> list[str]:
    if '{' not in text and '}' not in text:
        return [r for r in _ROW_SEPARATOR.split(text) if r.strip()]

    rows = _BRACED_ROW.findall(text)
    leftover = _BRACED_ROW.sub(',', text)
    if not rows or not _BETWEEN_BRACES.match(leftover):
        raise ValidationError(
            f"malformed braced matrix literal {text!r}; expected {{a, b}}, {{c, d}}"
        )
    return rows


def parse_matrix_literal(
    text: str,
    element: ElementParser | None = None,
) -> tuple[int, int, list[Any]]:
    """
    Parse a matrix literal into (rows, cols, row-major elements).

    Raises
    ------
    InvalidDimensionError
        If the literal holds no elements.
    DimensionMismatchError
        If the rows have different lengths.
    ValidationError
        If a token cannot be parsed.
    """
    parse = element or parse_element
    token_rows = [_split_tokens(r) for r in _split_rows(text)]
    token_rows = [r for r in token_rows if r]
    if not token_rows:
        raise InvalidDimensionError(
            f"matrix literal {text!r} has no elements", rows=0, cols=0
        )
    n_rows, n_cols = check_rectangular(token_rows, 'literal')
    values = [parse(tok) for row in token_rows for tok in row]
    return n_rows, n_cols, values


def _is_nested(values: Sequence[Any]) -> bool:
    return len(values) > 0 and all(
        isinstance(v, (list, tuple)) for v in values
    )


def _resolve(
    source: str | Sequence[Any],
    shape: tuple[int, int] | None,
    element: ElementParser | None,
) -> tuple[int, int, list[Any]]:
    if isinstance(source, str):
        rows, cols, values = parse_matrix_literal(source, element)
    else:
        source = list(source)
        if _is_nested(source):
            nested = [list(row) for row in source]
            rows, cols = check_rectangular(nested, 'rows')
            values = [x for row in nested for x in row]
        else:
            rows, cols, values = 1, len(source), source
        if element is not None:
            values = [element(x) for x in values]
    if shape is not None:
        rows, cols = shape
    return rows, cols, values


def matrix(
    source: str | Sequence[Any],
    *,
    shape: tuple[int, int] | None = None,
    element: ElementParser | None = None,
) -> Matrix:
    """
    Build a Matrix from a text literal or nested rows.

    With `shape=(r, c)` the elements are read as one row-major stream and
    passed to Matrix.from_sequence, so a count mismatch raises
    DimensionMismatchError.

    Examples:
        >>> matrix("1,0,0;0,1,0;0,0,1;") == Matrix.one(3)
        True
        >>> matrix([1, 2, 3, 4], shape=(2, 2)).to_list()
        [[1, 2], [3, 4]]
    """
    rows, cols, values = _resolve(source, shape, element)
    return Matrix.from_sequence(rows, cols, values)


def smatrix(
    source: str | Sequence[Any],
    *,
    shape: tuple[int, int] | None = None,
    element: ElementParser | None = None,
) -> StaticMatrix:
    """Like matrix(), but returns a StaticMatrix[R, C] of the inferred shape."""
    rows, cols, values = _resolve(source, shape, element)
    return StaticMatrix[rows, cols].from_sequence(values)


def vector(*values: Any, element: ElementParser | None = None) -> Vector:
    """
    Build a column Vector.

        vector(1, 2, 3)
        vector([1, 2, 3])
        vector("1, 2, 3")
    """
    if len(values) == 1 and isinstance(values[0], str):
        rows, cols, parsed = parse_matrix_literal(values[0], element)
        if rows != 1 and cols != 1:
            raise ValidationError(
                f"vector literal must be a single row or column, got {rows}x{cols}"
            )
        return Vector(parsed)
    if len(values) == 1 and isinstance(values[0], (list, tuple)):
        values = tuple(values[0])
    if element is not None:
        values = tuple(element(x) for x in values)
    return Vector(values)
