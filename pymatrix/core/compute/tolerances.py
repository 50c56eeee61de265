"""
Tolerance tiers for numerical comparison and pivoting.

Defines precision expectations for different element types:
- EXACT: int / Fraction / numpy integers, compared with ==
- CPU_FP64: Python float / complex and numpy float64
- CPU_FP32: numpy float32 / complex64

Used by Matrix.is_close, the elimination and LAPACK backends (zero-pivot
detection) and the test suite.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from pymatrix.core.elements import is_exact


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance tier for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Rational arithmetic: results must match exactly
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact rational arithmetic, equality only',
)

# Double precision: Python float/complex, numpy float64
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='Double precision, machine precision up to accumulated rounding',
)

# Single precision: numpy float32/complex64
CPU_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='cpu_fp32',
    description='Single precision',
)

# Cofactor expansion is O(n!). Above this dimension a
# PyMatrixPerformanceWarning is emitted.
COFACTOR_WARN_DIMENSION = 9

# method='auto' uses cofactor expansion up to this size for inexact elements
AUTO_COFACTOR_MAX_DIMENSION = 4

# LAPACK reciprocal condition estimate below which a precision warning is issued
LAPACK_RCOND_WARN = 1e-12


def _single_precision(sample: Any) -> bool:
    return isinstance(sample, (np.float32, np.float16, np.complex64))


def select_tolerance(sample: Any) -> ToleranceTier:
    """Select appropriate tolerance tier for an element type."""
    if is_exact(sample):
        return EXACT
    if _single_precision(sample):
        return CPU_FP32
    return CPU_FP64


def machine_epsilon(sample: Any) -> float:
    """
    Machine epsilon for the element's precision, 0.0 for exact types.

    Elements that are neither rational nor a known binary float type
    (e.g. Decimal, user types) are treated as exact.
    """
    if is_exact(sample):
        return 0.0
    if isinstance(sample, (np.floating, np.complexfloating)):
        return float(np.finfo(sample.dtype).eps)
    if isinstance(sample, (float, complex)):
        return float(np.finfo(np.float64).eps)
    return 0.0


def pivot_tolerance(n: int, max_abs: Any, sample: Any) -> float:
    """
    Threshold below which a pivot counts as zero.

    Tolerance based on matrix size and machine epsilon, scaled by the
    largest entry: n * eps * max|A|. Exact types get 0 (only a true zero
    is singular).
    """
    eps = machine_epsilon(sample)
    if eps == 0.0:
        return 0.0
    return n * eps * float(max_abs)


def values_close(a: Any, b: Any, tier: ToleranceTier) -> bool:
    """abs(a - b) <= atol + rtol * abs(b), or a == b for the exact tier."""
    if tier.rtol == 0.0 and tier.atol == 0.0:
        return bool(a == b)
    return bool(abs(a - b) <= tier.atol + tier.rtol * abs(b))
