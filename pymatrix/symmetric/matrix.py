"""
Symmetric: square matrix stored as its lower triangle.

Only n * (n + 1) / 2 values are stored instead of n * n. The compact array
holds the lower triangle (diagonal included) row by row:

    [ a . . ]
    [ b c . ]   =>  [a b c d e f]
    [ d e f ]

Element (i, j) is read from offset ``hi * (hi + 1) / 2 + lo`` with
``hi = max(i, j)`` and ``lo = min(i, j)``, so (i, j) and (j, i) always
share one storage slot.
"""

from __future__ import annotations

import operator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.formatting import parse_precision, render
from pymatrix.core.protocols import Matrix
from pymatrix.core.validation import check_flat, triangular_side
from pymatrix.dense import _kernels
from pymatrix.dense.matrix import Dense


def triangular_offset(i: int, j: int) -> int:
    """Flat offset of (i, j) in compact lower-triangular storage."""
    hi, lo = (i, j) if i > j else (j, i)
    return hi * (hi + 1) // 2 + lo


class Symmetric:
    """
    Symmetric n x n matrix in compact triangular storage.

    Construction:
        Symmetric(data)             # n inferred from len(data)
        Symmetric(data, n)
        Symmetric.from_dense(dense)

    Attributes:
        data: Compact lower triangle, length n * (n + 1) / 2
        n: Side length
    """

    __slots__ = ('data', 'n')

    # numpy scalars on the left defer to __rmul__ instead of broadcasting
    __array_ufunc__ = None

    def __init__(
        self,
        data: ArrayLike,
        n: int | None = None,
        dtype: DTypeLike | None = None,
    ):
        flat = check_flat(data, 'data', dtype=dtype)
        if n is None:
            n = triangular_side(len(flat), 'data')
        elif n < 0:
            raise DimensionError(f"n must be non-negative, got {n}")
        elif n * (n + 1) // 2 != len(flat):
            raise DimensionError(
                f"data: {n}x{n} symmetric matrix needs {n * (n + 1) // 2} values, got {len(flat)}"
            )
        self.data = flat
        self.n = n

    @classmethod
    def _wrap(cls, flat: NDArray[Any], n: int) -> Symmetric:
        out = cls.__new__(cls)
        out.data = flat
        out.n = n
        return out

    @classmethod
    def from_dense(cls, dense: Matrix) -> Symmetric:
        """
        Keep the lower triangle of a square, symmetric matrix.

        Raises:
            DimensionError: If ``dense`` is not square
            ValidationError: If ``dense`` is not symmetric
        """
        m, n = dense.size()
        if m != n:
            raise DimensionError(f"dense: expected a square matrix, got {m}x{n}")
        grid = _kernels.as_grid(dense)
        if not np.array_equal(grid, grid.T):
            raise ValidationError("dense: matrix is not symmetric")
        rows, cols = np.tril_indices(n)
        return cls._wrap(grid[rows, cols].copy(), n)

    # === Matrix protocol ===

    @property
    def dtype(self) -> np.dtype:
        return self.data.dtype

    def length(self) -> int:
        """Number of stored (compact) elements."""
        return len(self.data)

    def size(self) -> tuple[int, int]:
        return (self.n, self.n)

    def is_empty(self) -> bool:
        return len(self.data) == 0

    def into_flat(self) -> NDArray[Any]:
        """The compact triangle, row by row (not a copy)."""
        return self.data

    def to_dense(self) -> Dense:
        """Expand to a full n x n Dense matrix."""
        full = np.empty((self.n, self.n), dtype=self.dtype)
        rows, cols = np.tril_indices(self.n)
        full[rows, cols] = self.data
        full[cols, rows] = self.data
        return Dense._wrap(full.reshape(-1), self.n, self.n)

    def _grid(self) -> NDArray[Any]:
        return self.to_dense()._grid()

    def diag(self) -> NDArray[Any]:
        """Main diagonal, length n."""
        idx = np.arange(self.n)
        return self.data[idx * (idx + 1) // 2 + idx]

    # === Indexing ===

    def _offset(self, key: tuple[int, int]) -> int:
        i, j = operator.index(key[0]), operator.index(key[1])
        if min(i, j) < 0 or triangular_offset(i, j) >= len(self.data):
            raise IndexError(f"index [{i}, {j}] out of bounds for {self.n}x{self.n}")
        return triangular_offset(i, j)

    def __getitem__(self, key: tuple[int, int]) -> Any:
        return self.data[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        self.data[self._offset(key)] = value

    # === Arithmetic ===

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Matrix):
            return self.__matmul__(other)
        # scaling keeps symmetry, so the compact form scales as-is
        return Symmetric._wrap(
            np.multiply(self.data, other, dtype=self.dtype, casting='same_kind'),
            self.n,
        )

    def __rmul__(self, other: Any) -> Any:
        if isinstance(other, Matrix):
            return NotImplemented
        return self.__mul__(other)

    def __imul__(self, other: Any) -> Any:
        if isinstance(other, Matrix):
            return NotImplemented
        self.data *= other
        return self

    def __matmul__(self, other: Any) -> Dense:
        """
        Product with a matrix on the right, as a Dense n x other.n.

        Raises:
            IncompatibilityError: If n != other rows
            ValidationError: If element types differ
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        m, inner, k = _kernels.check_multiply(self, other)
        data = self.data
        flat = _kernels.multiply(
            lambda i, j: data[triangular_offset(i, j)], m, inner, _kernels.as_grid(other)
        )
        return Dense._wrap(flat, m, k)

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if isinstance(other, Symmetric):
            return self.n == other.n and bool(np.array_equal(self.data, other.data))
        return _kernels.equal(self, other)

    __hash__ = None

    # === Display ===

    def __str__(self) -> str:
        return render(self.to_dense().data, self.n)

    def __format__(self, format_spec: str) -> str:
        return render(self.to_dense().data, self.n, parse_precision(format_spec))

    def __repr__(self) -> str:
        return f"Symmetric({self.data.tolist()!r}, n={self.n}, dtype={self.dtype.name})"
