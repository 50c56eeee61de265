"""
Tests for det() across methods and element types.

Cofactor expansion is the reference; elimination must agree exactly on
integer input and LAPACK within floating-point tolerance.
"""

import warnings
from fractions import Fraction

import numpy as np
import pytest

from pymatrix import Matrix, StaticMatrix
from pymatrix.core.exceptions import NotSquareError, ValidationError
from pymatrix.core.warnings import PyMatrixPerformanceWarning, PyMatrixPrecisionWarning
from pymatrix.linalg import DeterminantSolution, det
from pymatrix.service import MatrixService


class Gf5:
    """Integers modulo 5: a field with no ordering and no abs()."""

    def __init__(self, v):
        self.v = v % 5

    def __add__(self, o):
        return Gf5(self.v + o.v)

    def __sub__(self, o):
        return Gf5(self.v - o.v)

    def __mul__(self, o):
        return Gf5(self.v * o.v)

    def __truediv__(self, o):
        return Gf5(self.v * pow(o.v, 3, 5))

    def __neg__(self):
        return Gf5(-self.v)

    def __eq__(self, o):
        return isinstance(o, Gf5) and self.v == o.v

    def __repr__(self):
        return f"Gf5({self.v})"


def _service_det(A):
    svc = MatrixService()
    return svc.det(svc.put(A))


# ═══════════════════════════════════════════════════════════════════════
# Cofactor (baseline)
# ═══════════════════════════════════════════════════════════════════════


class TestCofactorDeterminant:

    def test_3x3(self, example_3x3):
        result = det(example_3x3)
        assert isinstance(result, DeterminantSolution)
        assert result.value == -12
        assert isinstance(result.value, int)
        assert result.method == 'cofactor'
        assert result.backend_name == 'cofactor'

    def test_8x8(self, example_8x8):
        assert example_8x8.det() == -15546220

    def test_1x1(self):
        assert Matrix(1, 1, 7).det() == 7

    def test_2x2(self):
        assert Matrix.from_rows([[1, 2], [3, 4]]).det() == -2

    @pytest.mark.parametrize("n", range(1, 6))
    def test_identity(self, n):
        assert Matrix.one(n).det() == 1

    @pytest.mark.parametrize("n", range(1, 6))
    def test_zero_matrix(self, n):
        assert Matrix.zero(n).det() == 0

    def test_singular(self, singular_3x3):
        assert singular_3x3.det() == 0

    def test_fraction_elements(self):
        A = Matrix.from_rows([[Fraction(1, 2), Fraction(1, 3)], [Fraction(1, 4), Fraction(1, 5)]])
        assert A.det() == Fraction(1, 10) - Fraction(1, 12)

    def test_complex_elements(self):
        A = Matrix.from_rows([[1 + 1j, 2], [3, 4 - 1j]])
        assert A.det() == (1 + 1j) * (4 - 1j) - 6

    def test_custom_field_elements(self):
        A = Matrix.from_rows([[Gf5(1), Gf5(2)], [Gf5(3), Gf5(4)]])
        # 1*4 - 2*3 = -2 = 3 (mod 5)
        assert A.det() == Gf5(3)

    def test_determinant_alias(self, example_3x3):
        assert example_3x3.determinant() == example_3x3.det()

    def test_transpose_invariant(self, example_8x8):
        assert example_8x8.T.det() == example_8x8.det()

    def test_static_matrix(self):
        A = StaticMatrix[3, 3].from_sequence([1, 2, 3, 3, 2, 1, 2, 1, 3])
        assert A.det() == -12

    def test_timing_recorded(self, example_3x3):
        result = det(example_3x3)
        assert 'total_seconds' in result.timing
        assert 'determinant' in result.timing

    def test_performance_warning(self, monkeypatch, example_3x3):
        monkeypatch.setattr(
            'pymatrix.linalg.backends.cofactor.COFACTOR_WARN_DIMENSION', 2
        )
        with pytest.warns(PyMatrixPerformanceWarning, match="O\\(n!\\)"):
            result = det(example_3x3)
        assert result.value == -12
        assert any("O(n!)" in w for w in result.warnings)

    @pytest.mark.parametrize("entry", [
        lambda A: det(A),
        lambda A: A.det(),
        _service_det,
    ], ids=["det", "Matrix.det", "service"])
    def test_warning_points_at_caller(self, monkeypatch, example_3x3, entry):
        monkeypatch.setattr(
            'pymatrix.linalg.backends.cofactor.COFACTOR_WARN_DIMENSION', 2
        )
        with pytest.warns(PyMatrixPerformanceWarning) as record:
            entry(example_3x3)
        assert record[0].filename == __file__


# ═══════════════════════════════════════════════════════════════════════
# Other methods agree with cofactor
# ═══════════════════════════════════════════════════════════════════════


class TestEliminationDeterminant:

    def test_8x8_exact(self, example_8x8):
        result = det(example_8x8, method='elimination')
        assert result.value == -15546220
        assert isinstance(result.value, Fraction)
        assert result.info['promoted'] == 'Fraction'

    def test_agrees_with_cofactor(self, rng):
        X = rng.integers(-9, 10, size=(6, 6)).tolist()
        A = Matrix.from_rows(X)
        assert det(A, method='elimination').value == A.det()

    def test_singular_gives_zero(self, singular_3x3):
        assert det(singular_3x3, method='elimination').value == 0

    def test_float_input(self, random_float_6x6):
        expected = np.linalg.det(random_float_6x6.to_numpy(dtype=float))
        assert det(random_float_6x6, method='elimination').value == pytest.approx(expected)

    def test_unordered_field(self):
        A = Matrix.from_rows([[Gf5(0), Gf5(2)], [Gf5(3), Gf5(4)]])
        assert det(A, method='elimination').value == Gf5(0 * 4 - 2 * 3)


class TestLapackDeterminant:

    def test_8x8_rounded(self, example_8x8):
        result = det(example_8x8, method='lapack')
        assert isinstance(result.value, float)
        assert round(result.value) == -15546220
        assert result.info['dtype'] == 'float64'

    def test_matches_cofactor(self, random_float_6x6):
        assert det(random_float_6x6, method='lapack').value == pytest.approx(
            random_float_6x6.det(), rel=1e-10
        )

    def test_complex(self):
        A = Matrix.from_rows([[1 + 1j, 2], [3, 4 - 1j]])
        result = det(A, method='lapack')
        assert isinstance(result.value, complex)
        assert result.value == pytest.approx((1 + 1j) * (4 - 1j) - 6)

    def test_singular_gives_zero(self, singular_3x3):
        assert det(singular_3x3, method='lapack').value == 0.0

    def test_ill_conditioned_warns(self):
        n = 10
        hilbert = Matrix.from_sequence(
            n, n, [1.0 / (i + j + 1) for i in range(n) for j in range(n)]
        )
        with pytest.warns(PyMatrixPrecisionWarning, match="ill-conditioned") as record:
            result = det(hilbert, method='lapack')
        assert any("ill-conditioned" in w for w in result.warnings)
        assert record[0].filename == __file__

    def test_rejects_nan(self):
        A = Matrix.from_rows([[1.0, float('nan')], [1.0, 2.0]])
        with pytest.raises(ValidationError, match="finite"):
            A.det(method='lapack')

    def test_rejects_non_numeric_elements(self):
        A = Matrix.from_rows([[Gf5(1), Gf5(2)], [Gf5(3), Gf5(4)]])
        with pytest.raises(ValidationError):
            det(A, method='lapack')


# ═══════════════════════════════════════════════════════════════════════
# Method selection and errors
# ═══════════════════════════════════════════════════════════════════════


class TestAutoMethod:

    def test_small_uses_cofactor(self, example_3x3):
        assert det(example_3x3, method='auto').method == 'cofactor'

    def test_exact_8x8_uses_cofactor(self, example_8x8):
        result = det(example_8x8, method='auto')
        assert result.method == 'cofactor'
        assert result.value == -15546220

    def test_large_exact_uses_elimination(self):
        A = Matrix.diag_with(list(range(1, 13)))
        with warnings.catch_warnings():
            warnings.simplefilter('error', PyMatrixPerformanceWarning)
            result = det(A, method='auto')
        assert result.method == 'elimination'
        assert result.value == 479001600

    def test_float_uses_lapack(self, random_float_6x6):
        assert det(random_float_6x6, method='auto').method == 'lapack'

    def test_custom_type_uses_cofactor(self):
        data = [Gf5(i * 7 + j) for i in range(5) for j in range(5)]
        assert det(Matrix.from_sequence(5, 5, data), method='auto').method == 'cofactor'


class TestDeterminantErrors:

    def test_not_square(self):
        with pytest.raises(NotSquareError) as exc_info:
            Matrix(2, 3, 1).det()
        assert exc_info.value.operation == 'determinant'
        assert exc_info.value.shape == (2, 3)

    def test_static_not_square(self):
        with pytest.raises(NotSquareError):
            StaticMatrix[2, 3](1).det()

    def test_unknown_method(self, example_3x3):
        with pytest.raises(ValidationError, match="Unknown method"):
            det(example_3x3, method='qr')


class TestDeterminantSolution:

    def test_summary(self, example_3x3):
        text = det(example_3x3).summary()
        assert "Determinant" in text
        assert "-12" in text
        assert "cofactor" in text

    def test_repr(self, example_3x3):
        assert repr(det(example_3x3)) == "DeterminantSolution(method='cofactor', value=-12)"
