"""
Symmetric matrices in compact lower-triangular storage.

Public API:
    Symmetric          - n x n symmetric matrix storing n*(n+1)/2 values
    triangular_offset  - (i, j) -> offset into the compact storage
"""

from pymatrix.symmetric.matrix import Symmetric, triangular_offset

__all__ = [
    "Symmetric",
    "triangular_offset",
]
