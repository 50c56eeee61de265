"""
Generic result container for PyMatrix linear-algebra computations.

The Result class provides a standardized envelope that every backend
returns. This enables shared tooling for timing, logging and diagnostics
while allowing each operation to define its own payload structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, dimension, promotions)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for linear-algebra computations.

    Type Parameters:
        P: The operation-specific parameter payload type

    Attributes:
        params: Operation-specific payload (determinant, inverse, factors)
        info: Structured metadata (method, dimension, element promotion)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=DeterminantParams(value=-12),
        ...     info={'method': 'cofactor', 'dimension': 3},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cofactor'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
