"""
Core protocols for PyMatrix.

These define structural interfaces that element types and linear-algebra
backends must satisfy. We use Protocol (structural typing) rather than ABC
(nominal typing) so that int, float, Fraction, complex, Decimal, numpy
scalars and user-defined number types all qualify without registration.

Design Principles:
    - Minimal contracts: prescribe only what the kernel actually calls
    - Type-safe: use generics to preserve payload types through Result[P]
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from pymatrix.core.result import Result

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class NumericElement(Protocol):
    """
    Capabilities required of a matrix/vector element.

    The kernel only ever adds, subtracts, multiplies, negates and compares
    elements. Division is needed for scalar division and for the final step
    of inversion. Additive and multiplicative identities are derived from
    the element type (see pymatrix.core.elements).
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...

    def __eq__(self, other: object) -> bool: ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for linear-algebra backends.

    Each backend takes a SquareDesign and produces a parameter payload
    wrapped in a Result envelope. Backends are stateless; everything they
    need arrives with the design.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Examples: 'cofactor', 'elimination', 'lapack'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            NotSquareError: If the design is not square
            SingularMatrixError: If an inverse is requested of a singular matrix
        """
        ...
