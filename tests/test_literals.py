"""
Tests for the literal construction helpers mat(), fill() and symmat().
"""

import numpy as np
import pytest

from pymatrix import Dense, Symmetric, fill, mat, symmat
from pymatrix.core.exceptions import DimensionError, ValidationError


class TestMat:

    def test_empty(self):
        a = mat()
        assert a.is_empty()
        assert a.size() == (1, 0)

    def test_single(self):
        assert mat([1]).length() == 1

    def test_rows(self):
        e = mat([0, 1, 2], [3, 4, 5])
        assert e.size() == (2, 3)
        assert e[1, 2] == 5

    def test_column(self):
        b = mat([0], [1], [2], [3], [4])
        assert b.size() == (5, 1)

    def test_identity(self):
        i = mat([1, 0, 0], [0, 1, 0], [0, 0, 1])
        assert i == Dense.eye(3, dtype=i.dtype)
        assert mat("1, 0; 0, 1") == Dense.eye(2)

    def test_string_literal(self):
        assert mat("0, 1, 2; 3, 4, 5") == mat([0, 1, 2], [3, 4, 5])

    def test_string_column(self):
        assert mat("1; 2; 3") == Dense.col_from_vec([1, 2, 3])

    def test_string_floats(self):
        a = mat("1.5, 2; 3, -4e-1")
        assert a.dtype == np.float64
        assert a == mat([1.5, 2.0], [3.0, -0.4])

    def test_string_integers_stay_integer(self):
        assert np.issubdtype(mat("1, 2").dtype, np.integer)

    def test_dtype(self):
        assert mat([1, 2], dtype=np.int8).dtype == np.int8

    def test_ragged(self):
        with pytest.raises(DimensionError):
            mat([1, 2], [3])

    def test_string_ragged(self):
        with pytest.raises(DimensionError):
            mat("1, 2; 3")

    def test_string_bad_token(self):
        with pytest.raises(ValidationError, match="is not a number"):
            mat("1, x")

    def test_string_empty_entry(self):
        with pytest.raises(ValidationError, match="empty entry"):
            mat("1, , 2")


class TestFill:

    def test_fill(self):
        f = fill(3, 2, 2)
        assert f == mat([3, 3], [3, 3])

    def test_fill_column(self):
        x = fill(0.0, 5, 1)
        assert x.size() == (5, 1)
        assert x.dtype == np.float64


class TestSymmat:

    def test_rows(self):
        s = symmat([1], [2, 4], [3, 5, 6])
        assert isinstance(s, Symmetric)
        assert s.n == 3

    def test_string(self):
        assert symmat("1; 3, 4") == symmat([1], [3, 4])

    def test_wrong_row_length(self):
        with pytest.raises(DimensionError, match="row 1 must have 2 entries"):
            symmat([1], [2, 3, 4])

    def test_empty(self):
        assert symmat().n == 0
