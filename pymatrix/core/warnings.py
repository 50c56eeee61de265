"""PyMatrix warning categories.

These exist so users can filter/suppress PyMatrix warnings without
catching all UserWarning.

Keep this module lightweight and dependency-free to avoid import cycles.
"""

import inspect
import os

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep


class PyMatrixWarning(UserWarning):
    """Base warning category for all PyMatrix user-facing warnings."""


class PyMatrixPerformanceWarning(PyMatrixWarning):
    """Warnings about likely performance pitfalls (e.g. O(n!) cofactor expansion)."""


class PyMatrixPrecisionWarning(PyMatrixWarning):
    """Warnings about inexact results (float pivots, ill-conditioned solves)."""


def find_stack_level() -> int:
    """
    `stacklevel` that attributes a warning to the first frame outside
    pymatrix, whichever entry point (det(), Matrix.det(), MatrixService)
    led to it.
    """
    frame = inspect.currentframe()
    level = 0
    try:
        while frame is not None and inspect.getfile(frame).startswith(_PACKAGE_DIR):
            frame = frame.f_back
            level += 1
    finally:
        del frame
    return level
