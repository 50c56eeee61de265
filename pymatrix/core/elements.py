"""
Element identities and classification.

Matrices are generic over their element type, so the additive identity
(zero) and multiplicative identity (one) must be derived rather than
hard-coded. Resolution order for both:

    1. A `zero()` / `one()` classmethod on the type (num-traits style)
    2. Calling the type with 0 / 1 (int, float, Fraction, complex, numpy)
    3. For zero only: `x - x`
"""

from __future__ import annotations

import numbers
from fractions import Fraction
from typing import Any, Callable

from pymatrix.core.exceptions import ValidationError


DType = Callable[[int], Any]


def _identity_from_type(kind: Any, name: str, value: int) -> Any:
    factory = getattr(kind, name, None)
    if callable(factory):
        try:
            return factory()
        except TypeError:
            # e.g. an instance method that needs self
            pass
    return kind(value)


def zero_of(sample: Any) -> Any:
    """Additive identity for the type of `sample`."""
    try:
        return _identity_from_type(type(sample), 'zero', 0)
    except (TypeError, ValueError):
        pass
    try:
        return sample - sample
    except TypeError as e:
        raise ValidationError(
            f"cannot derive additive identity for element type "
            f"{type(sample).__name__}"
        ) from e


def one_of(sample: Any) -> Any:
    """Multiplicative identity for the type of `sample`."""
    try:
        return _identity_from_type(type(sample), 'one', 1)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"cannot derive multiplicative identity for element type "
            f"{type(sample).__name__}"
        ) from e


def zero_for(dtype: DType) -> Any:
    """Additive identity for a dtype callable such as int, float or Fraction."""
    try:
        return _identity_from_type(dtype, 'zero', 0)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"dtype {dtype!r} cannot build a zero element") from e


def one_for(dtype: DType) -> Any:
    """Multiplicative identity for a dtype callable."""
    try:
        return _identity_from_type(dtype, 'one', 1)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"dtype {dtype!r} cannot build a one element") from e


def is_zero(value: Any) -> bool:
    """True if `value` equals the additive identity of its own type."""
    return bool(value == zero_of(value))


def is_exact(value: Any) -> bool:
    """
    True for elements whose arithmetic is exact (rationals, integers).

    bool is excluded: a boolean matrix is not a numeric matrix.
    """
    return isinstance(value, numbers.Rational) and not isinstance(value, bool)


def is_integral(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def to_field(value: Any) -> Any:
    """
    Promote integral elements to Fraction so that division stays exact.

    Every other type is returned unchanged; it is trusted to divide.
    """
    if is_integral(value):
        return Fraction(int(value))
    return value
