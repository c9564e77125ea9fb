"""
Dense matrices.

Public API:
    Dense              - Row-major matrix owning its flat storage
    DenseTranspose     - Read-only transpose view of a Dense (no copy)
    DenseTransposeMut  - Writable transpose view of a Dense (no copy)
"""

from pymatrix.dense.matrix import Dense
from pymatrix.dense.transpose import DenseTranspose, DenseTransposeMut

__all__ = [
    "Dense",
    "DenseTranspose",
    "DenseTransposeMut",
]
