"""
Tests for pymatrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatrixError)
    - Diagnostic attributes on IncompatibilityError
    - Programmer errors stay outside the hierarchy
"""

import pytest

from pymatrix import mat
from pymatrix.core.exceptions import (
    DimensionError,
    IncompatibilityError,
    MatrixError,
    PyMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatrixError."""

    def test_validation_error_is_pymatrix_error(self):
        with pytest.raises(PyMatrixError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_incompatibility_is_matrix_error(self):
        with pytest.raises(MatrixError):
            raise IncompatibilityError("mismatch")

    def test_incompatibility_is_pymatrix_error(self):
        with pytest.raises(PyMatrixError):
            raise IncompatibilityError("mismatch")

    def test_incompatibility_is_not_validation_error(self):
        """Shape mismatch between operands is not an input validation failure."""
        err = IncompatibilityError("mismatch")
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# IncompatibilityError
# ═══════════════════════════════════════════════════════════════════════


class TestIncompatibilityError:
    """IncompatibilityError carries operand shapes."""

    def test_all_attributes(self):
        err = IncompatibilityError(
            "inner dimensions differ",
            operation="multiply",
            left_shape=(1, 3),
            right_shape=(2, 2),
        )
        assert str(err) == "inner dimensions differ"
        assert err.operation == "multiply"
        assert err.left_shape == (1, 3)
        assert err.right_shape == (2, 2)

    def test_defaults_are_none(self):
        err = IncompatibilityError("mismatch")
        assert err.operation is None
        assert err.left_shape is None
        assert err.right_shape is None

    def test_raised_by_multiply_with_shapes(self):
        with pytest.raises(IncompatibilityError) as exc_info:
            mat([1, 2, 3]) * mat([2, 3], [4, 5])
        assert exc_info.value.operation == "multiply"
        assert exc_info.value.left_shape == (1, 3)
        assert exc_info.value.right_shape == (2, 2)
        assert "1x3" in str(exc_info.value)


# ═══════════════════════════════════════════════════════════════════════
# Programmer errors
# ═══════════════════════════════════════════════════════════════════════


class TestProgrammerErrors:
    """Contract violations use builtin exceptions, not PyMatrixError."""

    def test_out_of_bounds_is_index_error(self):
        a = mat([1, 2], [3, 4])
        with pytest.raises(IndexError):
            a[2, 0]

    def test_swap_rows_precondition_is_assertion(self):
        a = mat([1, 2], [3, 4])
        with pytest.raises(AssertionError):
            a.swap_rows(0, 2)
