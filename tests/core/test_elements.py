"""
Tests for element identities and classification.
"""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pymatrix.core.elements import (
    is_exact,
    is_integral,
    is_zero,
    one_for,
    one_of,
    to_field,
    zero_for,
    zero_of,
)
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.protocols import NumericElement


class Mod7:
    """Integers modulo 7 with num-traits style identities."""

    def __init__(self, v):
        self.v = v % 7

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def one(cls):
        return cls(1)

    def __add__(self, o):
        return Mod7(self.v + o.v)

    def __sub__(self, o):
        return Mod7(self.v - o.v)

    def __mul__(self, o):
        return Mod7(self.v * o.v)

    def __truediv__(self, o):
        return Mod7(self.v * pow(o.v, 5, 7))

    def __neg__(self):
        return Mod7(-self.v)

    def __eq__(self, o):
        return isinstance(o, Mod7) and self.v == o.v


# ═══════════════════════════════════════════════════════════════════════
# Identities
# ═══════════════════════════════════════════════════════════════════════


class TestIdentities:

    @pytest.mark.parametrize("sample, zero, one", [
        (5, 0, 1),
        (2.5, 0.0, 1.0),
        (Fraction(1, 3), Fraction(0), Fraction(1)),
        (3 + 4j, 0j, 1 + 0j),
        (Decimal("1.5"), Decimal(0), Decimal(1)),
    ])
    def test_builtin_types(self, sample, zero, one):
        assert zero_of(sample) == zero
        assert type(zero_of(sample)) is type(sample)
        assert one_of(sample) == one

    def test_numpy_scalar(self):
        z = zero_of(np.float32(2.0))
        assert z == 0
        assert isinstance(z, np.float32)

    def test_classmethod_identities(self):
        assert zero_of(Mod7(3)) == Mod7(0)
        assert one_of(Mod7(3)) == Mod7(1)

    def test_dtype_callables(self):
        assert zero_for(int) == 0
        assert one_for(Fraction) == Fraction(1)
        assert one_for(Mod7) == Mod7(1)
        assert type(zero_for(float)) is float

    def test_dtype_without_identity(self):
        with pytest.raises(ValidationError):
            one_for(lambda: None)


# ═══════════════════════════════════════════════════════════════════════
# Classification
# ═══════════════════════════════════════════════════════════════════════


class TestClassification:

    def test_is_zero(self):
        assert is_zero(0)
        assert is_zero(0.0)
        assert is_zero(Mod7(7))
        assert not is_zero(Fraction(1, 10))

    @pytest.mark.parametrize("value, expected", [
        (1, True),
        (Fraction(1, 2), True),
        (np.int32(4), True),
        (1.0, False),
        (1j, False),
        (True, False),
    ])
    def test_is_exact(self, value, expected):
        assert is_exact(value) is expected

    def test_is_integral(self):
        assert is_integral(3)
        assert is_integral(np.int64(3))
        assert not is_integral(Fraction(3))
        assert not is_integral(False)

    def test_to_field_promotes_integers(self):
        result = to_field(3)
        assert isinstance(result, Fraction)
        assert result == 3

    def test_to_field_leaves_others(self):
        assert to_field(2.5) == 2.5
        assert isinstance(to_field(2.5), float)


class TestNumericElementProtocol:

    @pytest.mark.parametrize("value", [1, 1.5, Fraction(1, 2), 2j, Mod7(1)])
    def test_runtime_check(self, value):
        assert isinstance(value, NumericElement)

    def test_string_is_not_numeric(self):
        assert not isinstance("abc", NumericElement)
