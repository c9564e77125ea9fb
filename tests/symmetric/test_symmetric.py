"""
Tests for Symmetric matrices in compact triangular storage.

Validates:
    - Construction and the n*(n+1)/2 storage invariant
    - sym[i, j] == sym[j, i] through one shared slot
    - Scalar multiplication, symmetric-dense multiplication and its
      incompatibility path
    - Expansion to Dense, diagonal access, from_dense
"""

import numpy as np
import pytest

from pymatrix import Dense, Matrix, Symmetric, mat, symmat
from pymatrix.core.exceptions import DimensionError, IncompatibilityError, ValidationError
from pymatrix.symmetric import triangular_offset


# ═══════════════════════════════════════════════════════════════════════
# Construction and storage
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_infers_n(self):
        s = Symmetric([1, 2, 4, 3, 5, 6])
        assert s.n == 3
        assert s.size() == (3, 3)
        assert s.length() == 6

    def test_explicit_n(self):
        assert Symmetric([1, 2, 3], 2).n == 2

    def test_wrong_explicit_n(self):
        with pytest.raises(DimensionError, match="needs 6 values, got 3"):
            Symmetric([1, 2, 3], 3)

    def test_negative_n(self):
        with pytest.raises(DimensionError, match="non-negative"):
            Symmetric([], -1)

    def test_not_triangular(self):
        with pytest.raises(DimensionError, match="not a triangular number"):
            Symmetric([1, 2, 3, 4])

    def test_empty(self):
        s = Symmetric([], dtype=np.float64)
        assert s.n == 0
        assert s.is_empty()

    def test_protocol(self):
        assert isinstance(symmat([1]), Matrix)

    def test_into_flat_is_compact(self):
        s = symmat([1], [2, 4], [3, 5, 6])
        np.testing.assert_array_equal(s.into_flat(), [1, 2, 4, 3, 5, 6])


class TestTriangularOffset:

    @pytest.mark.parametrize("i,j,offset", [
        (0, 0, 0), (1, 0, 1), (1, 1, 2), (2, 0, 3), (2, 1, 4), (2, 2, 5),
    ])
    def test_lower(self, i, j, offset):
        assert triangular_offset(i, j) == offset

    def test_symmetric(self):
        for i in range(6):
            for j in range(6):
                assert triangular_offset(i, j) == triangular_offset(j, i)


# ═══════════════════════════════════════════════════════════════════════
# Indexing
# ═══════════════════════════════════════════════════════════════════════


class TestIndexing:

    def test_symmetric_reads(self, rng):
        n = 5
        s = Symmetric(rng.standard_normal(n * (n + 1) // 2))
        for i in range(n):
            for j in range(n):
                assert s[i, j] == s[j, i]

    def test_values(self):
        s = symmat([1], [2, 4], [3, 5, 6])
        assert s[0, 0] == 1
        assert s[0, 2] == 3
        assert s[2, 0] == 3
        assert s[1, 2] == 5
        assert s[2, 2] == 6

    def test_write_shares_slot(self):
        s = symmat([1], [2, 4])
        s[0, 1] = 9
        assert s[1, 0] == 9
        assert s.length() == 3

    def test_out_of_bounds(self):
        s = symmat([1], [2, 4])
        with pytest.raises(IndexError):
            s[2, 0]

    def test_negative_rejected(self):
        s = symmat([1], [2, 4])
        with pytest.raises(IndexError):
            s[-1, 0]


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestScalarMultiply:

    def test_equals_dense(self):
        x = symmat([1], [3, 4])
        assert x * 2 == mat([2, 6], [6, 8])

    def test_returns_symmetric(self):
        x = symmat([1], [3, 4])
        y = 2 * x
        assert isinstance(y, Symmetric)
        assert y == symmat([2], [6, 8])
        assert x == symmat([1], [3, 4])

    def test_in_place(self):
        x = symmat([1.0], [3.0, 4.0])
        x *= 0.5
        assert x == symmat([0.5], [1.5, 2.0])


class TestDenseMultiply:

    def test_column(self):
        a = symmat([1], [2, 4], [3, 5, 6])
        b = mat([6], [7], [8])
        assert a * b == mat([44], [80], [101])

    def test_matrix(self):
        a = symmat([1], [2, 4], [3, 5, 6])
        c = mat([6, 8], [12, 3], [4, 0])
        result = a @ c
        assert isinstance(result, Dense)
        assert result == mat([42, 14], [80, 28], [102, 39])

    def test_matches_expanded(self, rng):
        s = Symmetric(rng.standard_normal(10))
        d = Dense(rng.standard_normal(8), 4, 2)
        np.testing.assert_allclose((s * d)._grid(), s.to_dense()._grid() @ d._grid())

    def test_incompatible(self):
        a = symmat([1], [2, 4])
        with pytest.raises(IncompatibilityError) as exc_info:
            a * mat([1, 2, 3])
        assert exc_info.value.left_shape == (2, 2)
        assert exc_info.value.right_shape == (1, 3)

    def test_dense_times_symmetric(self):
        a = symmat([1], [2, 4])
        assert mat([1, 1]) * a == mat([3, 6])


# ═══════════════════════════════════════════════════════════════════════
# Conversion
# ═══════════════════════════════════════════════════════════════════════


class TestConversion:

    def test_to_dense(self):
        s = symmat([1], [2, 4], [3, 5, 6])
        assert s.to_dense() == mat([1, 2, 3], [2, 4, 5], [3, 5, 6])
        assert s.to_dense().dtype == s.dtype

    def test_diag(self):
        s = symmat([1], [2, 4], [3, 5, 6])
        np.testing.assert_array_equal(s.diag(), [1, 4, 6])

    def test_from_dense(self):
        d = mat([1, 2, 3], [2, 4, 5], [3, 5, 6])
        assert Symmetric.from_dense(d) == symmat([1], [2, 4], [3, 5, 6])

    def test_from_dense_round_trip_is_copy(self):
        d = mat([1, 2], [2, 3])
        s = Symmetric.from_dense(d)
        s[0, 1] = 7
        assert d[0, 1] == 2

    def test_from_dense_not_square(self):
        with pytest.raises(DimensionError, match="square"):
            Symmetric.from_dense(mat([1, 2, 3]))

    def test_from_dense_not_symmetric(self):
        with pytest.raises(ValidationError, match="not symmetric"):
            Symmetric.from_dense(mat([1, 2], [3, 4]))

    def test_repr(self):
        assert "n=2" in repr(symmat([1], [2, 4]))
