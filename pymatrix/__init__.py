"""
pymatrix: generic numeric matrices for Python.

Dense and symmetric matrices over any primitive numpy integer or floating
element type, with row operations, transpose views, concatenation and
multiplication.

Submodules:
    core: Numeric capabilities, Matrix protocol, exceptions, validation
    dense: Row-major dense matrices and transpose views
    symmetric: Compact symmetric matrices
    literals: mat(), fill(), symmat() construction helpers
"""

__version__ = "0.1.0"

from pymatrix.core import (
    Matrix,
    PyMatrixError,
    ValidationError,
    DimensionError,
    MatrixError,
    IncompatibilityError,
    numeric_kind,
    gcd,
    lcm,
)
from pymatrix.dense import Dense, DenseTranspose, DenseTransposeMut
from pymatrix.symmetric import Symmetric
from pymatrix.literals import mat, fill, symmat

__all__ = [
    "__version__",
    "Matrix",
    "Dense",
    "DenseTranspose",
    "DenseTransposeMut",
    "Symmetric",
    "mat",
    "fill",
    "symmat",
    "numeric_kind",
    "gcd",
    "lcm",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "MatrixError",
    "IncompatibilityError",
]
