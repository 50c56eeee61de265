"""
Linear-algebra solution types.

DeterminantSolution, InverseSolution and LUSolution wrap the Result
envelope returned by a backend and expose the payload in the caller's
matrix family.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pymatrix.core.elements import one_of, zero_of
from pymatrix.core.result import Result
from pymatrix.linalg._common import DeterminantParams, InverseParams, LUParams

if TYPE_CHECKING:
    from pymatrix.linalg.design import SquareDesign


class _SolutionMetadata:
    """Metadata properties shared by every solution type."""

    _result: Result[Any]

    @property
    def method(self) -> str:
        return self._result.info.get('method', self._result.backend_name)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def _summary_header(self, title: str) -> list[str]:
        lines = [title, ""]
        lines.append(f"method:    {self.method}")
        lines.append(f"dimension: {self.info.get('dimension')}")
        if 'promoted' in self.info:
            lines.append(f"promoted:  {self.info['promoted']}")
        if self.timing is not None:
            lines.append(f"time:      {self.timing.get('total_seconds', 0.0):.6f}s")
        for w in self.warnings:
            lines.append(f"warning:   {w}")
        return lines


@dataclass
class DeterminantSolution(_SolutionMetadata):
    """User-facing determinant result."""
    _result: Result[DeterminantParams]
    _design: 'SquareDesign | None'

    @property
    def value(self) -> Any:
        """The determinant."""
        return self._result.params.value

    def summary(self) -> str:
        lines = self._summary_header("Determinant")
        lines.append(f"value:     {self.value}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"DeterminantSolution(method={self.method!r}, value={self.value!r})"


@dataclass
class InverseSolution(_SolutionMetadata):
    """User-facing inverse result."""
    _result: Result[InverseParams]
    _design: 'SquareDesign | None'

    @property
    def value(self) -> Any:
        """The inverse, as a matrix of the input's family."""
        p = self._result.params
        data = list(p.data)
        if self._design is None:
            return data
        return self._design.build(p.n, p.n, data)

    @property
    def determinant(self) -> Any:
        """Determinant of the input, if the method produced it."""
        return self._result.params.determinant

    def summary(self) -> str:
        lines = self._summary_header("Inverse")
        if self.determinant is not None:
            lines.append(f"det(A):    {self.determinant}")
        lines.append("")
        lines.append(str(self.value))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"InverseSolution(method={self.method!r}, "
            f"n={self._result.params.n})"
        )


@dataclass
class LUSolution(_SolutionMetadata):
    """
    User-facing LU decomposition, P A = L U.

    `lower` is unit lower triangular, `upper` is upper triangular and
    `permutation` lists, for each row of P A, the row of A it came from.
    When `singular` is set by the elimination method the factorization
    stopped at the first zero pivot column, and `lower` / `upper` are not
    meaningful past it.
    """
    _result: Result[LUParams]
    _design: 'SquareDesign | None'

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def permutation(self) -> tuple[int, ...]:
        return self._result.params.permutation

    @property
    def swaps(self) -> int:
        return self._result.params.swaps

    @property
    def singular(self) -> bool:
        return self._result.params.singular

    def determinant(self) -> Any:
        """(-1)^swaps * prod(diag(U)); zero for a singular matrix."""
        return self._result.params.determinant

    @property
    def lu(self) -> Any:
        """Packed factors: L strictly below the diagonal, U on and above."""
        return self._build(list(self._result.params.lu))

    @property
    def lower(self) -> Any:
        n = self.n
        packed = self._result.params.lu
        zero, one = zero_of(packed[0]), one_of(packed[0])
        data = [
            packed[i * n + j] if j < i else (one if i == j else zero)
            for i in range(n) for j in range(n)
        ]
        return self._build(data)

    @property
    def upper(self) -> Any:
        n = self.n
        packed = self._result.params.lu
        zero = zero_of(packed[0])
        data = [
            packed[i * n + j] if j >= i else zero
            for i in range(n) for j in range(n)
        ]
        return self._build(data)

    @property
    def permutation_matrix(self) -> Any:
        """P with P[i, permutation[i]] = 1."""
        n = self.n
        packed = self._result.params.lu
        zero, one = zero_of(packed[0]), one_of(packed[0])
        data = [zero] * (n * n)
        for i, p in enumerate(self.permutation):
            data[i * n + p] = one
        return self._build(data)

    def _build(self, data: list[Any]) -> Any:
        if self._design is None:
            return data
        return self._design.build(self.n, self.n, data)

    def summary(self) -> str:
        lines = self._summary_header("LU decomposition")
        lines.append(f"swaps:     {self.swaps}")
        lines.append(f"singular:  {self.singular}")
        lines.append(f"det(A):    {self.determinant()}")
        lines.append("")
        lines.append("L =")
        lines.append(str(self.lower))
        lines.append("U =")
        lines.append(str(self.upper))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LUSolution(method={self.method!r}, n={self.n}, "
            f"swaps={self.swaps}, singular={self.singular})"
        )
