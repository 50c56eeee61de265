"""
Shared compute infrastructure for PyMatrix.

This module provides the dense row-major kernel, timing utilities,
tolerance tiers and linear algebra kernels shared by Matrix, Vector and
the static variants.

IMPORTANT: This is NOT where the user-facing solvers live. Those go in
pymatrix/linalg/. This module contains shared NUMERIC infrastructure.

Submodules:
    dense: Elementwise ops, products, transpose, minors on flat buffers
    timing: Execution timing utilities
    tolerances: Tolerance tiers and pivot thresholds
    linalg: Determinant, inverse and LU kernels
"""

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    CPU_FP64,
    CPU_FP32,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "CPU_FP64",
    "CPU_FP32",
    "select_tolerance",
]
