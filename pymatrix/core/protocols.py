"""
Core protocols for pymatrix.

These define structural interfaces that every matrix variant must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so that
storage layouts stay free to differ (row-major dense, compact triangular,
borrowed transpose views) while sharing one shape contract.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Storage-agnostic: nothing here says how elements are laid out
"""

from typing import Any, Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class Matrix(Protocol):
    """
    Minimal shape contract implemented by Dense, Symmetric and the
    transpose views.

    Binary operations (multiplication, concatenation, equality) accept any
    object implementing this protocol as their matrix operand; anything
    else is treated as a scalar or rejected.
    """

    @property
    def dtype(self) -> np.dtype:
        """Element type of the matrix."""
        ...

    def length(self) -> int:
        """Number of stored elements."""
        ...

    def size(self) -> tuple[int, int]:
        """(rows, columns)."""
        ...

    def is_empty(self) -> bool:
        """True when length() == 0."""
        ...

    def into_flat(self) -> NDArray[Any]:
        """
        Elements in row-major reading order as a 1-D array.

        Views materialize the order of the shape they present, even though
        their storage is laid out differently.
        """
        ...

    def to_dense(self) -> Any:
        """A fully materialized Dense copy of this matrix."""
        ...
