"""
LAPACK backend (SciPy lu_factor / lu_solve).

Float64/complex128 fast path for larger matrices. Results are returned as
Python floats/complex numbers, whatever the input element type.
"""

from __future__ import annotations

import logging
import warnings

import numpy as np

from pymatrix.core.compute.linalg.lapack import det_cpu, inv_cpu, lu_cpu, to_array
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import LAPACK_RCOND_WARN
from pymatrix.core.result import Result
from pymatrix.core.warnings import PyMatrixPrecisionWarning, find_stack_level
from pymatrix.linalg._common import DeterminantParams, InverseParams, LUParams
from pymatrix.linalg.design import SquareDesign

logger = logging.getLogger(__name__)


class LapackBackend:
    """CPU LAPACK backend via SciPy."""

    @property
    def name(self) -> str:
        return 'lapack'

    def solve(self, design: SquareDesign) -> Result[DeterminantParams | InverseParams | LUParams]:
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []
        n = design.n
        operation = design.operation
        logger.debug("lapack %s: n=%d", operation, n)

        with timer.section('convert'):
            X = to_array(design.data, n, n)

        if operation == 'determinant':
            with timer.section('getrf'):
                det, fac = det_cpu(X)
            params = DeterminantParams(value=det.item())
        elif operation == 'inverse':
            with timer.section('getrf_getrs'):
                inv, fac = inv_cpu(X)
            params = InverseParams(data=tuple(inv.ravel().tolist()), n=n)
        else:
            with timer.section('getrf'):
                fac = lu_cpu(X)
            if fac.singular:
                det = X.dtype.type(0)
            else:
                det = np.prod(np.diag(fac.lu))
                if fac.swaps % 2:
                    det = -det
            params = LUParams(
                lu=tuple(fac.lu.ravel().tolist()),
                n=n,
                permutation=fac.permutation,
                swaps=fac.swaps,
                singular=fac.singular,
                determinant=det.item(),
            )

        if not fac.singular and fac.rcond < LAPACK_RCOND_WARN:
            msg = (
                f"matrix is ill-conditioned (rcond={fac.rcond:.3g}); "
                f"float64 results may be inaccurate"
            )
            warnings.warn(msg, PyMatrixPrecisionWarning, stacklevel=find_stack_level())
            warnings_list.append(msg)

        timer.stop()
        return Result(
            params=params,
            info={
                'method': self.name,
                'operation': operation,
                'dimension': n,
                'dtype': X.dtype.name,
                'rcond': fac.rcond,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
