"""
Cofactor-expansion backend.

The baseline correctness contract: determinant by Laplace expansion and
inverse by the adjugate method. Uses ring operations only, plus a single
division of the adjugate by the determinant, so any NumericElement type
works. O(n!) cost; a PyMatrixPerformanceWarning is emitted above
COFACTOR_WARN_DIMENSION.
"""

from __future__ import annotations

import logging
import warnings

from pymatrix.core.compute.linalg.cofactor import adjugate, laplace_determinant
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import COFACTOR_WARN_DIMENSION
from pymatrix.core.elements import is_integral, is_zero, to_field
from pymatrix.core.exceptions import SingularMatrixError, ValidationError
from pymatrix.core.result import Result
from pymatrix.core.warnings import PyMatrixPerformanceWarning, find_stack_level
from pymatrix.linalg._common import DeterminantParams, InverseParams
from pymatrix.linalg.design import SquareDesign

logger = logging.getLogger(__name__)


class CofactorBackend:
    """Laplace-expansion determinant and adjugate inverse."""

    @property
    def name(self) -> str:
        return 'cofactor'

    def solve(self, design: SquareDesign) -> Result[DeterminantParams | InverseParams]:
        """Dispatch on design.operation."""
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []
        n = design.n
        operation = design.operation
        logger.debug("cofactor %s: n=%d", operation, n)

        if n > COFACTOR_WARN_DIMENSION:
            msg = (
                f"cofactor expansion of a {n}x{n} matrix costs O(n!) operations; "
                f"consider method='elimination' or method='lapack'"
            )
            warnings.warn(msg, PyMatrixPerformanceWarning, stacklevel=find_stack_level())
            warnings_list.append(msg)

        info = {'method': self.name, 'operation': operation, 'dimension': n}

        if operation == 'determinant':
            with timer.section('determinant'):
                params = DeterminantParams(value=laplace_determinant(design.data, n))
        elif operation == 'inverse':
            params = self._inverse(design, timer)
            if any(is_integral(x) for x in design.data):
                info['promoted'] = 'Fraction'
        else:
            raise ValidationError(
                f"The cofactor method does not support {operation!r}; "
                f"use method='elimination' or method='lapack'."
            )

        timer.stop()
        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _inverse(self, design: SquareDesign, timer: Timer) -> InverseParams:
        data = design.data
        n = design.n

        with timer.section('determinant'):
            det = laplace_determinant(data, n)
        if is_zero(det):
            raise SingularMatrixError(
                "Matrix is singular: its determinant is zero, so it has no inverse.",
                matrix_name='A',
                determinant=det,
                method=self.name,
            )

        with timer.section('adjugate'):
            adj = adjugate(data, n)

        # Integral entries divide exactly as Fractions.
        divisor = to_field(det)
        with timer.section('divide'):
            inv = tuple(to_field(x) / divisor for x in adj)

        return InverseParams(data=inv, n=n, determinant=det)
