"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information

Programmer errors (out-of-bounds indices, a failed swap_rows precondition,
unsupported operand types) are NOT part of this hierarchy. They surface as
the builtin IndexError, AssertionError and TypeError.
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs (element types, literal syntax,
    flat sequences) fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Dimensions passed to a constructor are inconsistent with its data.

    Raised when a flat sequence does not hold exactly m * n values (dense)
    or n * (n + 1) / 2 values (symmetric).
    """
    pass


class MatrixError(PyMatrixError):
    """
    A shape-dependent binary operation could not be carried out.

    Base class for errors arising from combining two matrices.
    """
    pass


class IncompatibilityError(MatrixError):
    """
    Operand dimensions are incompatible.

    Raised by concatenate, concatenate_vec, matrix-matrix multiplication
    and symmetric-dense multiplication. The check happens before any
    result storage is allocated, so no partial result is ever observable.

    Attributes:
        operation: Name of the failing operation (e.g. 'multiply')
        left_shape: (rows, columns) of the left operand
        right_shape: (rows, columns) of the right operand, or (length,)
            for a flat sequence
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape
