"""
Tests for the handle-based MatrixService.
"""

import logging

import pytest

from pymatrix import Matrix, MatrixService
from pymatrix.core.exceptions import (
    DimensionMismatchError,
    DivisionByZeroError,
    SingularMatrixError,
    ValidationError,
)
from pymatrix.core.result import Result


@pytest.fixture
def svc():
    return MatrixService()


class TestHandles:

    def test_handles_are_sequential(self, svc):
        a = svc.construct(2, 2, [1, 2, 3, 4])
        b = svc.construct(1, 1, [5])
        assert (a, b) == (1, 2)
        assert svc.handles() == (1, 2)
        assert len(svc) == 2
        assert a in svc

    def test_get_returns_copy(self, svc):
        a = svc.construct(2, 2, [1, 2, 3, 4])
        m = svc.get(a)
        m[0, 0] = 100
        assert svc.get(a).get(0, 0) == 1

    def test_put_stores_copy(self, svc):
        m = Matrix(2, 2, 1)
        a = svc.put(m)
        m[0, 0] = 9
        assert svc.get(a) == Matrix(2, 2, 1)

    def test_put_rejects_non_matrix(self, svc):
        with pytest.raises(ValidationError):
            svc.put([[1, 2]])

    def test_unknown_handle(self, svc):
        with pytest.raises(ValidationError, match="unknown matrix handle"):
            svc.get(42)

    def test_release(self, svc):
        a = svc.construct(1, 1, [1])
        svc.release(a)
        assert a not in svc
        with pytest.raises(ValidationError):
            svc.release(a)

    def test_handles_not_reused(self, svc):
        a = svc.construct(1, 1, [1])
        svc.release(a)
        assert svc.construct(1, 1, [2]) != a

    def test_construct_errors_pass_through(self, svc):
        with pytest.raises(DimensionMismatchError):
            svc.construct(2, 2, [1, 2, 3])
        assert len(svc) == 0

    def test_logs_at_debug(self, svc, caplog):
        with caplog.at_level(logging.DEBUG, logger='pymatrix.service'):
            svc.construct(1, 1, [1])
        assert "handle 1" in caplog.text


class TestOperations:

    def test_add_subtract(self, svc):
        a = svc.construct(2, 2, [1, 2, 3, 4])
        b = svc.construct(2, 2, [4, 3, 2, 1])
        assert svc.get(svc.op(a, b, 'add')) == Matrix(2, 2, 5)
        assert svc.get(svc.op(a, b, 'subtract')).to_sequence() == [-3, -1, 1, 3]

    def test_multiply(self, svc):
        a = svc.construct(2, 3, [1, 2, 3, 4, 5, 6])
        b = svc.construct(3, 2, [7, 8, 9, 10, 11, 12])
        assert svc.get(svc.op(a, b, 'multiply')).to_list() == [[58, 64], [139, 154]]

    def test_scale_and_divide(self, svc):
        a = svc.construct(1, 2, [2, 4])
        assert svc.get(svc.op(a, 3, 'scale')).to_sequence() == [6, 12]
        assert svc.get(svc.op(a, 2, 'divide')).to_sequence() == [1, 2]

    def test_divide_by_zero(self, svc):
        a = svc.construct(1, 1, [1])
        with pytest.raises(DivisionByZeroError):
            svc.op(a, 0, 'divide')

    def test_shape_mismatch(self, svc):
        a = svc.construct(2, 2, [1, 2, 3, 4])
        b = svc.construct(1, 2, [1, 2])
        with pytest.raises(DimensionMismatchError):
            svc.op(a, b, 'add')

    def test_unknown_operator(self, svc):
        a = svc.construct(1, 1, [1])
        with pytest.raises(ValidationError, match="Unknown operator"):
            svc.op(a, a, 'power')

    def test_inputs_untouched(self, svc):
        a = svc.construct(1, 1, [1])
        svc.op(a, a, 'add')
        assert svc.get(a) == Matrix(1, 1, 1)


class TestLinearAlgebra:

    def test_det_is_scalar(self, svc):
        a = svc.construct(3, 3, [1, 2, 3, 3, 2, 1, 2, 1, 3])
        value = svc.det(a)
        assert value == -12
        assert isinstance(value, int)

    def test_det_result(self, svc):
        a = svc.construct(3, 3, [1, 2, 3, 3, 2, 1, 2, 1, 3])
        result = svc.det_result(a)
        assert isinstance(result, Result)
        assert result.params.value == -12
        assert result.backend_name == 'cofactor'

    def test_det_method(self, svc):
        a = svc.construct(2, 2, [1.0, 2.0, 3.0, 4.0])
        assert svc.det(a, method='lapack') == pytest.approx(-2.0)

    def test_det_unknown_handle(self, svc):
        with pytest.raises(ValidationError):
            svc.det(7)

    def test_invert(self, svc, example_2x2_inverse):
        a = svc.construct(2, 2, [1, 2, 3, 4])
        assert svc.get(svc.invert(a)) == example_2x2_inverse

    def test_invert_singular(self, svc):
        a = svc.construct(2, 2, [1, 2, 2, 4])
        with pytest.raises(SingularMatrixError):
            svc.invert(a)
        assert svc.handles() == (a,)

    def test_transpose(self, svc):
        a = svc.construct(1, 2, [1, 2])
        assert svc.get(svc.transpose(a)).shape == (2, 1)
