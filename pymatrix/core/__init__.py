"""
Core infrastructure for pymatrix.

This module provides the abstractions shared by every matrix variant.

Key components:
    numerics: Numeric capability set (ZERO/ONE/TWO, parity, gcd, lcm)
    protocols: Matrix shape protocol
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Machine epsilon and library defaults
    formatting: Display rendering
"""

from pymatrix.core.protocols import Matrix
from pymatrix.core.numerics import (
    Numeric,
    Integer,
    SignedInt,
    Unsigned,
    Float,
    numeric_kind,
    gcd,
    lcm,
)
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    MatrixError,
    IncompatibilityError,
)

__all__ = [
    # Protocols
    "Matrix",
    # Numerics
    "Numeric",
    "Integer",
    "SignedInt",
    "Unsigned",
    "Float",
    "numeric_kind",
    "gcd",
    "lcm",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "MatrixError",
    "IncompatibilityError",
]
