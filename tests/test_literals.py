"""
Tests for the matrix/vector literal helpers.
"""

from fractions import Fraction

import pytest

from pymatrix import Matrix, StaticMatrix, Vector, matrix, parse_matrix_literal, smatrix, vector
from pymatrix.core.exceptions import (
    DimensionMismatchError,
    InvalidDimensionError,
    ValidationError,
)
from pymatrix.literals import parse_element


class TestParseElement:

    @pytest.mark.parametrize("token, expected, kind", [
        ("3", 3, int),
        ("-7", -7, int),
        ("1/2", Fraction(1, 2), Fraction),
        ("2.5", 2.5, float),
        ("1e-3", 0.001, float),
        ("1+2j", 1 + 2j, complex),
    ])
    def test_kinds(self, token, expected, kind):
        value = parse_element(token)
        assert value == expected
        assert type(value) is kind

    @pytest.mark.parametrize("token", ["x", "1/0", "--1"])
    def test_unparseable(self, token):
        with pytest.raises(ValidationError):
            parse_element(token)


class TestMatrixLiteral:

    def test_semicolon_rows(self):
        assert matrix("1,0,0;0,1,0;0,0,1;") == Matrix.one(3)

    def test_braced_rows_agree(self):
        assert matrix("{4, 5, 6}, {6, 5, 4}") == matrix("4 5 6; 6 5 4")

    def test_newline_rows(self):
        text = """
            1 2
            3 4
        """
        assert matrix(text).to_list() == [[1, 2], [3, 4]]

    def test_mixed_elements(self):
        A = matrix("1/2, 0.5; 1, 2j")
        assert A.to_sequence() == [Fraction(1, 2), 0.5, 1, 2j]

    def test_parse_matrix_literal(self):
        assert parse_matrix_literal("1 2; 3 4") == (2, 2, [1, 2, 3, 4])

    def test_element_converter(self):
        A = matrix("1 2; 3 4", element=Fraction)
        assert all(type(x) is Fraction for x in A.to_sequence())

    @pytest.mark.parametrize("text", ["", "  ", ";;", "{}"])
    def test_empty(self, text):
        with pytest.raises(InvalidDimensionError):
            matrix(text)

    def test_ragged(self):
        with pytest.raises(DimensionMismatchError):
            matrix("1, 2; 3")

    def test_malformed_braces(self):
        with pytest.raises(ValidationError):
            matrix("{1, 2}, 3")

    def test_bad_token(self):
        with pytest.raises(ValidationError, match="abc"):
            matrix("1 abc")


class TestSequenceSources:

    def test_nested_rows(self):
        assert matrix([[1, 2], [3, 4]]) == Matrix.from_rows([[1, 2], [3, 4]])

    def test_flat_is_one_row(self):
        assert matrix([1, 2, 3]).shape == (1, 3)

    def test_shape_override(self):
        assert matrix([1, 2, 3, 4], shape=(2, 2)).to_list() == [[1, 2], [3, 4]]
        assert matrix("1 2 3 4 5 6", shape=(3, 2)).shape == (3, 2)

    def test_shape_override_wrong_count(self):
        with pytest.raises(DimensionMismatchError):
            matrix("1 2 3", shape=(2, 2))


class TestStaticAndVector:

    def test_smatrix(self):
        A = smatrix("1 2; 3 4")
        assert type(A) is StaticMatrix[2, 2]
        assert A.det() == -2

    def test_smatrix_nested(self):
        assert type(smatrix([[1, 2, 3]])) is StaticMatrix[1, 3]

    @pytest.mark.parametrize("args", [
        (1, 2, 3),
        ([1, 2, 3],),
        ("1, 2, 3",),
        ("1; 2; 3",),
    ])
    def test_vector_forms(self, args):
        assert vector(*args) == Vector([1, 2, 3])

    def test_vector_element_converter(self):
        v = vector(1, 2, element=float)
        assert v.to_list() == [1.0, 2.0]
        assert type(v[0]) is float

    def test_vector_rejects_matrix_literal(self):
        with pytest.raises(ValidationError):
            vector("1 2; 3 4")
