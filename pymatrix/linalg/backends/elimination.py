"""
Gaussian-elimination backend.

Optional path for element types with safe division. Integers are promoted
to Fraction, so results stay exact; floats use partial pivoting with a
size-scaled zero-pivot tolerance.
"""

from __future__ import annotations

import logging

from pymatrix.core.compute.linalg.elimination import gauss_jordan_inverse, lu_decompose
from pymatrix.core.compute.timing import Timer
from pymatrix.core.elements import is_integral
from pymatrix.core.result import Result
from pymatrix.linalg._common import DeterminantParams, InverseParams, LUParams
from pymatrix.linalg.design import SquareDesign

logger = logging.getLogger(__name__)


class EliminationBackend:
    """LU / Gauss-Jordan elimination with partial pivoting."""

    @property
    def name(self) -> str:
        return 'elimination'

    def solve(self, design: SquareDesign) -> Result[DeterminantParams | InverseParams | LUParams]:
        timer = Timer()
        timer.start()
        n = design.n
        operation = design.operation
        tol = design.pivot_tolerance()
        logger.debug("elimination %s: n=%d tol=%g", operation, n, tol)

        if operation == 'determinant':
            with timer.section('lu'):
                fac = lu_decompose(design.data, n, tol)
            params = DeterminantParams(value=fac.determinant())
        elif operation == 'inverse':
            with timer.section('gauss_jordan'):
                inv = gauss_jordan_inverse(design.data, n, tol)
            params = InverseParams(data=tuple(inv), n=n)
        else:
            with timer.section('lu'):
                fac = lu_decompose(design.data, n, tol)
            params = LUParams(
                lu=fac.lu,
                n=n,
                permutation=fac.permutation,
                swaps=fac.swaps,
                singular=fac.singular,
                determinant=fac.determinant(),
            )

        timer.stop()
        info = {
            'method': self.name,
            'operation': operation,
            'dimension': n,
            'pivot_tolerance': tol,
        }
        if any(is_integral(x) for x in design.data):
            info['promoted'] = 'Fraction'
        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
        )
